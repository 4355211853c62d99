"""Zenith - personal focus tracker."""
