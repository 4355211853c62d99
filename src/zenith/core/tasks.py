"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, IntEnum


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into naive local time.

    Values carrying an offset (or a trailing "Z") are converted to local time.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


class Priority(IntEnum):
    """Task priority, ordered NORMAL < HIGH < CRITICAL."""

    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class Status(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Task:
    """A pending task in the focus queue."""

    id: int
    title: str
    created_at: datetime
    due: datetime | None = None
    priority: Priority = Priority.NORMAL
    status: Status = Status.PENDING

    def is_overdue(self, as_of: datetime | None = None) -> bool:
        """Due date already passed."""
        if not self.due:
            return False
        as_of = as_of or datetime.now()
        return self.due < as_of

    def is_due_on(self, day: date) -> bool:
        return self.due is not None and self.due.date() == day

    def complete(self, completed_at: datetime) -> "CompletedTask":
        """Snapshot this task as a completed history entry."""
        return CompletedTask(
            id=self.id,
            title=self.title,
            created_at=self.created_at,
            due=self.due,
            priority=self.priority,
            completed_at=completed_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "createdAt": self.created_at.isoformat(),
            "due": self.due.isoformat() if self.due else None,
            "priority": int(self.priority),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from its persisted form."""
        return cls(
            id=int(data["id"]),
            title=data["title"],
            created_at=parse_timestamp(data["createdAt"]),
            due=parse_timestamp(data["due"]) if data.get("due") else None,
            priority=Priority(data.get("priority", Priority.NORMAL)),
        )


@dataclass(frozen=True)
class CompletedTask:
    """
    Immutable snapshot of a task at completion time.

    Owned by the history ledger; never goes back into the queue.
    """

    id: int
    title: str
    created_at: datetime
    due: datetime | None
    priority: Priority
    completed_at: datetime
    status: Status = Status.COMPLETED

    def completed_on(self, day: date) -> bool:
        return self.completed_at.date() == day

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "createdAt": self.created_at.isoformat(),
            "due": self.due.isoformat() if self.due else None,
            "priority": int(self.priority),
            "status": self.status.value,
            "completedAt": self.completed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CompletedTask":
        """Create CompletedTask from its persisted form."""
        return cls(
            id=int(data["id"]),
            title=data["title"],
            created_at=parse_timestamp(data["createdAt"]),
            due=parse_timestamp(data["due"]) if data.get("due") else None,
            priority=Priority(data.get("priority", Priority.NORMAL)),
            completed_at=parse_timestamp(data["completedAt"]),
        )


def find_task(tasks: list[Task], task_id: int) -> Task | None:
    """Find a task by id."""
    return next((t for t in tasks if t.id == task_id), None)


def without_task(tasks: list[Task], task_id: int) -> list[Task]:
    """
    Return tasks minus the one with task_id.

    Pure function - a missing id leaves the list unchanged.
    """
    return [t for t in tasks if t.id != task_id]


def queue_order(tasks: list[Task]) -> list[Task]:
    """
    Sort tasks into focus order: priority descending, then id descending.

    The most recently created task wins priority ties. Pure function - no I/O.
    """

    def sort_key(t: Task) -> tuple[int, int]:
        return (-t.priority, -t.id)

    return sorted(tasks, key=sort_key)


def filter_due_on(tasks: list[Task], day: date) -> list[Task]:
    """Filter to tasks due on a given day."""
    return [t for t in tasks if t.is_due_on(day)]


def filter_overdue(tasks: list[Task], as_of: datetime | None = None) -> list[Task]:
    """Filter to overdue tasks only."""
    as_of = as_of or datetime.now()
    return [t for t in tasks if t.is_overdue(as_of)]
