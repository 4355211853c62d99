"""Single-focus task queue."""

import logging
from datetime import datetime

from .history import HistoryLedger
from .parser import timestamp_id
from .state import ApplicationState
from .tasks import CompletedTask, Priority, Task, queue_order, without_task

logger = logging.getLogger(__name__)


class FocusQueue:
    """
    Owns the pending queue and the current focus of an ApplicationState.

    At most one task is in focus, and it is always a member of
    pending_tasks. Completions go to the history ledger.
    """

    def __init__(self, state: ApplicationState):
        self.state = state
        self.history = HistoryLedger(state.history)
        self._last_id = max(
            [t.id for t in state.pending_tasks] + [c.id for c in state.history],
            default=0,
        )

    @property
    def focus(self) -> Task | None:
        return self.state.current_focus

    @property
    def pending(self) -> list[Task]:
        return self.state.pending_tasks

    def next_id(self, now: datetime) -> int:
        """Timestamp-derived id, bumped past the last one handed out."""
        self._last_id = max(timestamp_id(now), self._last_id + 1)
        return self._last_id

    def ensure_focus(self) -> Task | None:
        """Re-derive focus if a loaded state has pending tasks but none focused."""
        if self.focus is None and self.pending:
            self.promote_next_task()
        return self.focus

    def add_task(self, task: Task) -> None:
        """Queue a task; it takes focus if none exists or it strictly outranks it."""
        self.state.pending_tasks.append(task)
        self._last_id = max(self._last_id, task.id)

        if self.focus is None:
            self.set_focus(task)
        elif task.priority > self.focus.priority:
            logger.debug(f"Task {task.id} usurps focus from {self.focus.id}")
            self.set_focus(task)

    def set_focus(self, task: Task) -> None:
        """Focus a task. The caller guarantees it is pending."""
        self.state.current_focus = task

    def complete_current(self, now: datetime | None = None) -> CompletedTask | None:
        """Move the focused task into history and promote the next one."""
        task = self.focus
        if task is None:
            return None

        completed = task.complete(now or datetime.now())
        self.history.record(completed)
        self.state.pending_tasks = without_task(self.pending, task.id)
        self.promote_next_task()
        return completed

    def defer_current(self) -> Task | None:
        """
        Cool the focused task down to normal priority and send it to the back.

        The next task is then promoted; a deferred task can only return to
        focus by outranking or out-aging the rest of the queue.
        """
        task = self.focus
        if task is None:
            return None

        task.priority = Priority.NORMAL
        self.state.pending_tasks = without_task(self.pending, task.id)
        self.state.pending_tasks.append(task)
        self.promote_next_task()
        return task

    def promote_next_task(self) -> Task | None:
        """Re-sort the queue and focus its head (None when empty)."""
        self.state.pending_tasks = queue_order(self.pending)
        self.state.current_focus = self.pending[0] if self.pending else None
        logger.debug(f"Promoted focus: {self.focus.id if self.focus else None}")
        return self.focus
