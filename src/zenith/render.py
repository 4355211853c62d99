"""Terminal rendering of dashboard, calendar and logbook."""

from datetime import date, datetime

import click

from .core.calendar import WEEKDAY_HEADER, MonthView
from .core.dashboard import DashboardData
from .core.tasks import CompletedTask, Priority, Task

THEME_ACCENTS = {
    "void": "magenta",
    "dawn": "yellow",
    "ocean": "cyan",
    "forest": "green",
    "mono": "white",
}

PRIORITY_MARKERS = {
    Priority.NORMAL: "   ",
    Priority.HIGH: "!! ",
    Priority.CRITICAL: "!!!",
}


def accent(theme: str) -> str:
    """Accent colour for a theme; unknown themes fall back to void."""
    return THEME_ACCENTS.get(theme, THEME_ACCENTS["void"])


def format_due(due: datetime | None, as_of: datetime | None = None) -> str:
    if not due:
        return ""
    as_of = as_of or datetime.now()
    days = (due.date() - as_of.date()).days
    if due < as_of:
        return f" (OVERDUE since {due.strftime('%b %d %H:%M')})"
    if days == 0:
        return f" (due today {due.strftime('%H:%M')})"
    if days == 1:
        return f" (due tomorrow {due.strftime('%H:%M')})"
    return f" (due {due.strftime('%b %d %H:%M')})"


def format_task_line(task: Task, as_of: datetime | None = None) -> str:
    """Single task line: priority marker, id, title, due hint."""
    return f"[{PRIORITY_MARKERS[task.priority]}] {task.id}  {task.title}{format_due(task.due, as_of)}"


def render_dashboard(data: DashboardData, theme: str, as_of: datetime | None = None) -> str:
    color = accent(theme)
    lines = [click.style(data.greeting, bold=True), ""]

    lines.append(click.style("Focus", fg=color, bold=True))
    if data.focus:
        lines.append(f"  {format_task_line(data.focus, as_of)}")
    else:
        lines.append("  All clear. Enjoy.")

    lines.append("")
    lines.append(click.style("Up next", fg=color, bold=True))
    if data.upcoming:
        lines.extend(f"  {format_task_line(t, as_of)}" for t in data.upcoming)
    else:
        lines.append("  Nothing pending.")

    lines.append("")
    lines.append(
        f"Pending: {data.pending_count}  "
        f"Due today: {len(data.due_today)}  "
        f"Overdue: {len(data.overdue)}  "
        f"Completed today: {data.completed_today}"
    )
    lines.append(f"Life: {data.life_score}%  {render_bar(data.life_score)}")
    return "\n".join(lines)


def render_bar(percent: int, width: int = 20) -> str:
    filled = round(width * percent / 100)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def render_month(view: MonthView, theme: str, today: date | None = None) -> str:
    """
    Month grid, Monday first.

    Days with completed tasks are marked with '*'; today is highlighted.
    """
    today = today or date.today()
    color = accent(theme)

    lines = [click.style(view.label.center(28), fg=color, bold=True)]
    lines.append(" ".join(f"{d:>3}" for d in WEEKDAY_HEADER))
    for week in view.weeks:
        cells = []
        for day in week:
            if day == 0:
                cells.append("   ")
                continue
            cell = f"{day:>2}" + ("*" if view.is_marked(day) else " ")
            if (view.year, view.month, day) == (today.year, today.month, today.day):
                cell = click.style(cell, fg=color, reverse=True)
            cells.append(cell)
        lines.append(" ".join(cells).rstrip())
    return "\n".join(lines)


def render_day(day: date, completed: list[CompletedTask]) -> str:
    header = f"### {day.strftime('%A, %B %d')}"
    if not completed:
        return f"{header}\n  No achievements recorded this day."
    return "\n".join([header] + [f"  ✓ {c.title}" for c in completed])


def render_logbook(entries: list[CompletedTask]) -> str:
    if not entries:
        return "Your journey has just begun."
    return "\n".join(
        f"{c.completed_at.strftime('%Y-%m-%d %H:%M')}  {c.title}" for c in entries
    )
