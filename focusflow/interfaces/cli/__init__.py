"""CLI interface for focusflow using Typer.

Usage:
    focusflow stats task.json                  # Progress and phase distribution
    focusflow subtask add task.json "Read ch3" # Print task with a new subtask
    focusflow timer 125 1500                   # Timer display for a poll
    focusflow config show                      # Current preferences

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (task, subtask, focus, config)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from focusflow import __version__
from focusflow.global_config import get_preferences
from focusflow.interfaces.cli.commands import config, focus, subtask, task
from focusflow.interfaces.cli.common import LANGUAGE_ENV
from focusflow.logging_setup import setup_logging

# Create the main Typer application
app = typer.Typer(
    name="focusflow",
    help="Task, subtask and focus-session tools",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"focusflow version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """focusflow - plan tasks, track subtasks, run focus sessions."""
    setup_logging(logging.DEBUG if verbose else get_preferences().log_level)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")
app.add_typer(subtask.app, name="subtask")
app.add_typer(focus.app, name="focus")
app.add_typer(config.app, name="config")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("stats")
def stats(
    path: Path = typer.Argument(..., help="Task JSON document"),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Label language (or set FOCUSFLOW_LANGUAGE env var)",
        envvar=LANGUAGE_ENV,
    ),
) -> None:
    """Show task progress (shortcut for 'task stats')."""
    task.stats(path=path, as_json=as_json, language=language)


@app.command("timer")
def timer(
    remaining: int = typer.Argument(..., help="Seconds left on the timer"),
    target: Optional[int] = typer.Argument(
        None, help="Session length in seconds (default: configured focus length)"
    ),
) -> None:
    """Show the timer display (shortcut for 'focus timer')."""
    focus.timer(remaining=remaining, target=target)


__all__ = ["app"]
