"""Focus timer CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from focusflow.application import record_focus_session
from focusflow.domain.focus import FocusSession, clamp_progress
from focusflow.domain.shared import Err
from focusflow.global_config import get_preferences
from focusflow.interfaces.cli.common import echo_task, load_task_or_exit, print_error

app = typer.Typer(help="Focus timer commands")


def format_timer_line(session: FocusSession) -> str:
    """Clock text, progress bar and percentage for one poll of the timer."""
    progress = clamp_progress(session.progress)
    filled = int(progress / 5)
    bar = "#" * filled + "-" * (20 - filled)
    return f"{session.display}  [{bar}] {progress:.0f}%"


@app.command("timer")
def timer(
    remaining: int = typer.Argument(..., help="Seconds left on the timer"),
    target: Optional[int] = typer.Argument(
        None, help="Session length in seconds (default: configured focus length)"
    ),
) -> None:
    """Show the timer display for a point in a focus session."""
    if target is None:
        target = get_preferences().focus_minutes * 60
    if target < 0:
        print_error("Session length cannot be negative")
        raise typer.Exit(1)

    session = FocusSession(target_seconds=target, remaining_seconds=remaining)
    typer.echo(format_timer_line(session))
    if session.is_complete:
        typer.echo("Session complete")


@app.command("record")
def record(
    path: Path = typer.Argument(..., help="Task JSON document"),
    subtask_id: str = typer.Argument(..., help="Id of the subtask that was focused on"),
    minutes: Optional[int] = typer.Option(
        None, "--minutes", "-m", help="Session length (default: configured focus length)"
    ),
    notes: Optional[str] = typer.Option(None, "--notes", help="Note for the session record"),
) -> None:
    """Credit a finished focus session to a subtask."""
    if minutes is None:
        minutes = get_preferences().focus_minutes
    if minutes < 0:
        print_error("Session length cannot be negative")
        raise typer.Exit(1)

    task = load_task_or_exit(path)
    session = FocusSession(target_seconds=minutes * 60, remaining_seconds=0)
    result = record_focus_session(task, subtask_id, session, notes)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    updated, _ = result.value
    echo_task(updated)
