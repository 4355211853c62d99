"""Adapters - I/O implementations of ports."""

from .file_store import FileStateStore, StateCorruptError

__all__ = [
    "FileStateStore",
    "StateCorruptError",
]
