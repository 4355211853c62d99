"""Pure dashboard assembly logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime

from .history import HistoryLedger
from .state import ApplicationState
from .tasks import CompletedTask, Task, filter_due_on, filter_overdue

UPCOMING_LIMIT = 3


@dataclass
class DashboardData:
    """Assembled dashboard data ready for formatting."""

    greeting: str
    focus: Task | None
    upcoming: list[Task]
    pending_count: int
    due_today: list[Task]
    overdue: list[Task]
    completed_today: int
    life_score: int


def greeting(now: datetime) -> str:
    """Time-of-day greeting."""
    if now.hour < 12:
        return "Good morning."
    elif now.hour < 20:
        return "Good afternoon."
    else:
        return "Good evening."


def upcoming_tasks(state: ApplicationState, limit: int = UPCOMING_LIMIT) -> list[Task]:
    """Next tasks in queue order, excluding the focus."""
    focus_id = state.current_focus.id if state.current_focus else None
    return [t for t in state.pending_tasks if t.id != focus_id][:limit]


def life_score(state: ApplicationState) -> int:
    """
    Rough balance score, 0-100.

    Starts at 50, +2 per completed task, -5 per pending task.
    """
    score = 50 + len(state.history) * 2 - len(state.pending_tasks) * 5
    return max(0, min(100, score))


def completed_today(history: list[CompletedTask], today: date) -> int:
    return len(HistoryLedger(history).completed_on(today))


def assemble_dashboard(
    state: ApplicationState,
    now: datetime | None = None,
    upcoming_limit: int = UPCOMING_LIMIT,
) -> DashboardData:
    """
    Assemble dashboard data from application state.

    Pure function - no I/O.
    """
    now = now or datetime.now()
    today = now.date()

    return DashboardData(
        greeting=greeting(now),
        focus=state.current_focus,
        upcoming=upcoming_tasks(state, upcoming_limit),
        pending_count=len(state.pending_tasks),
        due_today=filter_due_on(state.pending_tasks, today),
        overdue=filter_overdue(state.pending_tasks, now),
        completed_today=completed_today(state.history, today),
        life_score=life_score(state),
    )
