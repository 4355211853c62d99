"""Functional core - pure business logic with no I/O."""

from .tasks import Task, CompletedTask, Priority, Status, queue_order
from .parser import parse_task
from .history import HistoryLedger
from .state import ApplicationState, Settings, default_state
from .focus import FocusQueue
from .calendar import MonthView, build_month, day_details, shift_month
from .dashboard import DashboardData, assemble_dashboard

__all__ = [
    # Tasks
    "Task",
    "CompletedTask",
    "Priority",
    "Status",
    "queue_order",
    # Parser
    "parse_task",
    # History
    "HistoryLedger",
    # State
    "ApplicationState",
    "Settings",
    "default_state",
    # Focus
    "FocusQueue",
    # Calendar
    "MonthView",
    "build_month",
    "day_details",
    "shift_month",
    # Dashboard
    "DashboardData",
    "assemble_dashboard",
]
