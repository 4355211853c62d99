"""Pure calendar view logic - no I/O dependencies."""

import calendar
from dataclasses import dataclass
from datetime import date

from .history import HistoryLedger
from .tasks import CompletedTask

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

WEEKDAY_HEADER = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


@dataclass
class MonthView:
    """A month grid with completion markers."""

    year: int
    month: int
    weeks: list[list[int]]
    marked_days: set[int]

    @property
    def label(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    def is_marked(self, day: int) -> bool:
        return day in self.marked_days


def month_grid(year: int, month: int) -> list[list[int]]:
    """
    Weeks of a month, Monday first.

    Slots outside the month are 0.
    """
    return calendar.Calendar(firstweekday=calendar.MONDAY).monthdayscalendar(year, month)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move delta months forward (or back), crossing year boundaries."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def build_month(history: list[CompletedTask], year: int, month: int) -> MonthView:
    """Assemble a month view, marking days with completed tasks."""
    return MonthView(
        year=year,
        month=month,
        weeks=month_grid(year, month),
        marked_days=HistoryLedger(history).completed_days(year, month),
    )


def day_details(history: list[CompletedTask], day: date) -> list[CompletedTask]:
    """Tasks completed on a given day, most recent first."""
    return HistoryLedger(history).completed_on(day)
