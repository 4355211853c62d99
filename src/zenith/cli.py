"""Zenith CLI - Personal focus tracker."""

import json
import logging
import sys
from datetime import date, datetime

import click

from .config import load_config
from .core.calendar import build_month, day_details, shift_month
from .core.dashboard import assemble_dashboard
from .render import render_dashboard, render_day, render_logbook, render_month, format_task_line
from .workflows import Session, TaskNotFoundError, get_store, open_session

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="zenith")
@click.pass_context
def main(ctx, debug: bool):
    """Zenith - one task at a time."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    if ctx.invoked_subcommand is None:
        ctx.invoke(status)


@main.command()
@click.argument("text", nargs=-1)
def add(text: tuple[str, ...]):
    """Add a task from free text ('urgente', 'hoy', 'mañana' are understood)."""
    session = open_session(load_config())
    task = session.add(" ".join(text))
    if task is None:
        return

    click.echo(f"Added: {format_task_line(task)}")
    if session.focus is task:
        click.echo("-> Now in focus.")


@main.command()
def done():
    """Complete the task in focus."""
    session = open_session(load_config())
    completed = session.complete()
    if completed is None:
        click.echo("Nothing in focus.")
        return

    click.echo(f"✓ {completed.title}")
    _show_next(session)


@main.command()
def defer():
    """Send the task in focus to the back of the queue."""
    session = open_session(load_config())
    deferred = session.defer()
    if deferred is None:
        click.echo("Nothing in focus.")
        return

    click.echo(f"Deferred: {deferred.title}")
    _show_next(session)


def _show_next(session) -> None:
    if session.focus:
        click.echo(f"-> Focus: {format_task_line(session.focus)}")
    else:
        click.echo("All clear. Enjoy.")


@main.command()
@click.argument("task_id", type=int)
def focus(task_id: int):
    """Focus a pending task by id."""
    session = open_session(load_config())
    try:
        task = session.focus_on(task_id)
    except TaskNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"-> Focus: {format_task_line(task)}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def status(as_json: bool = False):
    """Show the dashboard."""
    config = load_config()
    session = open_session(config)
    data = assemble_dashboard(session.state, upcoming_limit=config.upcoming_limit)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "focus": data.focus.to_dict() if data.focus else None,
                    "upcoming": [t.to_dict() for t in data.upcoming],
                    "pending": data.pending_count,
                    "due_today": len(data.due_today),
                    "overdue": len(data.overdue),
                    "completed_today": data.completed_today,
                    "life_score": data.life_score,
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    click.echo(render_dashboard(data, session.state.settings.theme))


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_tasks(as_json: bool):
    """List the pending queue."""
    session = open_session(load_config())
    pending = session.state.pending_tasks

    if as_json:
        click.echo(json.dumps([t.to_dict() for t in pending], indent=2, ensure_ascii=False))
        return

    if not pending:
        click.echo("Nothing pending.")
        return

    focus_id = session.focus.id if session.focus else None
    for task in pending:
        marker = "->" if task.id == focus_id else "  "
        click.echo(f"{marker} {format_task_line(task)}")


def _parse_month(ctx, param, value: str | None) -> tuple[int, int] | None:
    if value is None:
        return None
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except ValueError:
        raise click.BadParameter("expected YYYY-MM")
    return parsed.year, parsed.month


@main.group(invoke_without_command=True)
@click.option("--month", "month", callback=_parse_month, default=None,
              help="Month to show (YYYY-MM), defaults to this month")
@click.option("--prev", "back", type=int, default=0, help="Go back N months")
@click.option("--next", "forward", type=int, default=0, help="Go forward N months")
@click.pass_context
def calendar(ctx, month: tuple[int, int] | None, back: int, forward: int):
    """Show the month calendar with completed days marked."""
    if ctx.invoked_subcommand is not None:
        return

    today = date.today()
    year, month_num = month or (today.year, today.month)
    year, month_num = shift_month(year, month_num, forward - back)

    session = open_session(load_config())
    view = build_month(session.state.history, year, month_num)
    click.echo(render_month(view, session.state.settings.theme, today))


@calendar.command("day")
@click.argument("target_date", required=False, default=None)
def calendar_day(target_date: str | None):
    """List tasks completed on a day (YYYY-MM-DD), defaults to today."""
    try:
        target = date.fromisoformat(target_date) if target_date else date.today()
    except ValueError:
        raise click.BadParameter("expected YYYY-MM-DD", param_hint="TARGET_DATE")

    session = open_session(load_config())
    click.echo(render_day(target, day_details(session.state.history, target)))


@main.command()
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Number of entries to show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def logbook(limit: int | None, as_json: bool):
    """Show recently completed tasks."""
    config = load_config()
    session = open_session(config)
    entries = session.queue.history.recent(limit or config.logbook_limit)

    if as_json:
        click.echo(json.dumps([c.to_dict() for c in entries], indent=2, ensure_ascii=False))
        return

    click.echo(render_logbook(entries))


@main.command()
@click.argument("name")
def theme(name: str):
    """Set the colour theme."""
    session = open_session(load_config())
    session.set_theme(name)
    click.echo(f"Theme set to {name}.")


@main.command()
def watch():
    """Keep the dashboard on screen, refreshing it periodically."""
    from apscheduler.schedulers.blocking import BlockingScheduler
    from apscheduler.triggers.interval import IntervalTrigger

    config = load_config()
    store = get_store(config)

    def refresh() -> None:
        # Read-only: reload whatever the last command saved
        state = Session(store, config).state
        data = assemble_dashboard(state, upcoming_limit=config.upcoming_limit)
        click.clear()
        click.echo(render_dashboard(data, state.settings.theme))

    scheduler = BlockingScheduler()
    scheduler.add_job(
        refresh,
        IntervalTrigger(seconds=config.heartbeat_seconds),
        id="dashboard_heartbeat",
        next_run_time=datetime.now(),
    )
    logger.info(f"Refreshing dashboard every {config.heartbeat_seconds}s")

    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        click.echo("\nStopped.")


@main.command()
def path():
    """Show the absolute path to the state file."""
    click.echo(str(get_store(load_config()).path.resolve()))


if __name__ == "__main__":
    main()
