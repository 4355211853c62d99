"""Command layer between the CLI and the functional core.

Each user action is one state transition followed by one save.
"""

import logging
from datetime import datetime
from pathlib import Path

from .adapters.file_store import FileStateStore, StateCorruptError
from .config import DATA_DIR, Config
from .core.focus import FocusQueue
from .core.parser import parse_task
from .core.state import ApplicationState, default_state
from .core.tasks import CompletedTask, Task, find_task
from .ports.state_store import StateStore

logger = logging.getLogger(__name__)


class TaskNotFoundError(Exception):
    """Raised when a task id does not name a pending task."""

    pass


def get_store(config: Config) -> FileStateStore:
    """Resolve data directory from config."""
    if config.data_dir:
        return FileStateStore(Path(config.data_dir).expanduser(), config.state_key)
    return FileStateStore(DATA_DIR, config.state_key)


def load_state(store: StateStore, config: Config) -> ApplicationState:
    """Load saved state, falling back to defaults when missing or corrupt."""
    try:
        state = store.load()
    except StateCorruptError as e:
        logger.warning(f"{e}. Starting from an empty state.")
        state = None

    if state is None:
        return default_state(config.default_theme)
    return state


class Session:
    """
    One actor applying commands to the application state.

    Every mutating command saves synchronously before returning.
    """

    def __init__(self, store: StateStore, config: Config):
        self.store = store
        self.config = config
        self.state = load_state(store, config)
        self.queue = FocusQueue(self.state)
        self.queue.ensure_focus()

    @property
    def focus(self) -> Task | None:
        return self.state.current_focus

    def save(self) -> None:
        self.store.save(self.state)

    def add(self, text: str, now: datetime | None = None) -> Task | None:
        """Parse and queue free text. Blank text is ignored."""
        if not text or not text.strip():
            return None

        now = now or datetime.now()
        task = parse_task(text, now, task_id=self.queue.next_id(now))
        self.queue.add_task(task)
        self.save()
        logger.info(f"Added task {task.id}: {task.title}")
        return task

    def complete(self, now: datetime | None = None) -> CompletedTask | None:
        """Complete the focused task, if any."""
        completed = self.queue.complete_current(now)
        if completed is not None:
            self.save()
            logger.info(f"Completed task {completed.id}: {completed.title}")
        return completed

    def defer(self) -> Task | None:
        """Defer the focused task, if any."""
        deferred = self.queue.defer_current()
        if deferred is not None:
            self.save()
            logger.info(f"Deferred task {deferred.id}: {deferred.title}")
        return deferred

    def focus_on(self, task_id: int) -> Task:
        """Focus a pending task by id."""
        task = find_task(self.state.pending_tasks, task_id)
        if task is None:
            raise TaskNotFoundError(f"No pending task with id {task_id}")
        self.queue.set_focus(task)
        self.save()
        return task

    def set_theme(self, theme: str) -> None:
        self.state.settings.theme = theme
        self.save()


def open_session(config: Config) -> Session:
    """Build the store from config and load a session over it."""
    return Session(get_store(config), config)
