"""Free-text task parsing - pure, no I/O."""

import re
from datetime import datetime, time, timedelta

from .tasks import Priority, Task

TOMORROW_KEYWORD = "mañana"
TODAY_KEYWORD = "hoy"
URGENT_KEYWORDS = ("urgente", "ahora", "ya")

TOMORROW_DUE_TIME = time(9, 0)
TODAY_DUE_TIME = time(20, 0)

URGENT_RE = re.compile("|".join(URGENT_KEYWORDS), re.IGNORECASE)


def timestamp_id(now: datetime) -> int:
    """Milliseconds since the epoch, used as the default task id."""
    return int(now.timestamp() * 1000)


def detect_due(text: str, now: datetime) -> datetime | None:
    """
    Due date implied by a day keyword in the text.

    "mañana" means tomorrow at 09:00 and wins over "hoy", which means
    today at 20:00. Matching is a case-insensitive substring search.
    """
    lower = text.lower()
    if TOMORROW_KEYWORD in lower:
        return datetime.combine(now.date() + timedelta(days=1), TOMORROW_DUE_TIME)
    if TODAY_KEYWORD in lower:
        return datetime.combine(now.date(), TODAY_DUE_TIME)
    return None


def is_urgent(text: str) -> bool:
    lower = text.lower()
    return any(keyword in lower for keyword in URGENT_KEYWORDS)


def strip_urgency(title: str) -> str:
    """Remove every urgency keyword from a title."""
    return URGENT_RE.sub("", title).strip()


def parse_task(text: str, now: datetime, task_id: int | None = None) -> Task:
    """
    Turn free-text input into a pending task.

    Pure function - no I/O. Blank input is the caller's job to reject;
    it raises ValueError here.

    Args:
        text: Raw user input
        now: Current local time (creation time and due date anchor)
        task_id: Explicit id; defaults to one derived from now

    Returns:
        A pending Task with priority and due date inferred from keywords
    """
    title = text.strip()
    if not title:
        raise ValueError("Task text must not be blank")

    task = Task(
        id=task_id if task_id is not None else timestamp_id(now),
        title=title,
        created_at=now,
        due=detect_due(text, now),
    )

    if is_urgent(text):
        task.priority = Priority.CRITICAL
        # A title made only of urgency words keeps its original text
        task.title = strip_urgency(title) or title

    return task
