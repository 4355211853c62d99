"""Append-only completion history."""

from datetime import date

from .tasks import CompletedTask

LOGBOOK_LIMIT = 20


class HistoryLedger:
    """
    Most-recent-first record of completed tasks.

    Wraps the history list of an ApplicationState; entries are only ever
    prepended.
    """

    def __init__(self, entries: list[CompletedTask]):
        self.entries = entries

    def __len__(self) -> int:
        return len(self.entries)

    def record(self, completed: CompletedTask) -> None:
        """Prepend a completed task."""
        self.entries.insert(0, completed)

    def completed_on(self, day: date) -> list[CompletedTask]:
        """All entries completed on a calendar date."""
        return [c for c in self.entries if c.completed_on(day)]

    def recent(self, limit: int = LOGBOOK_LIMIT) -> list[CompletedTask]:
        return self.entries[:limit]

    def completed_days(self, year: int, month: int) -> set[int]:
        """Day numbers in a month with at least one completion."""
        return {
            c.completed_at.day
            for c in self.entries
            if c.completed_at.year == year and c.completed_at.month == month
        }
