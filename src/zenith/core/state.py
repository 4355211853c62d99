"""Application state and its persisted form."""

from dataclasses import dataclass, field

from .tasks import CompletedTask, Task, find_task

DEFAULT_THEME = "void"


@dataclass
class Settings:
    """User preferences."""

    theme: str = DEFAULT_THEME


@dataclass
class ApplicationState:
    """
    Everything the tracker knows.

    current_focus is either None or an element of pending_tasks.
    """

    pending_tasks: list[Task] = field(default_factory=list)
    history: list[CompletedTask] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)
    current_focus: Task | None = None

    def to_dict(self) -> dict:
        """Serialize to the persisted blob layout."""
        return {
            "settings": {"theme": self.settings.theme},
            "pendingTasks": [t.to_dict() for t in self.pending_tasks],
            "history": [c.to_dict() for c in self.history],
            "currentFocusId": self.current_focus.id if self.current_focus else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ApplicationState":
        """
        Parse the persisted blob.

        Raises KeyError, TypeError or ValueError on malformed data. A stored
        focus id is honoured only if it names a pending task.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        settings = data.get("settings") or {}
        pending = [Task.from_dict(t) for t in data.get("pendingTasks", [])]
        history = [CompletedTask.from_dict(c) for c in data.get("history", [])]

        focus_id = data.get("currentFocusId")
        focus = find_task(pending, int(focus_id)) if focus_id is not None else None

        return cls(
            pending_tasks=pending,
            history=history,
            settings=Settings(theme=settings.get("theme", DEFAULT_THEME)),
            current_focus=focus,
        )


def default_state(theme: str = DEFAULT_THEME) -> ApplicationState:
    """Fresh state: nothing pending, no history, no focus."""
    return ApplicationState(settings=Settings(theme=theme))
