"""Shared utilities for focusflow CLI commands.

- Formatted output helpers (error, success, warning)
- Task document loading and printing
- Translator resolution from the --language option or preferences
"""

import json
from collections.abc import Callable
from pathlib import Path

import typer

from focusflow.domain.shared import Err
from focusflow.domain.task import Task
from focusflow.global_config import get_preferences
from focusflow.i18n import get_translator
from focusflow.infrastructure.storage import TaskReader

LANGUAGE_ENV = "FOCUSFLOW_LANGUAGE"


def print_error(msg: str) -> None:
    """Print a formatted error message to stderr."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_warning(msg: str) -> None:
    """Print a formatted warning message to stderr."""
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_separator(char: str = "=", width: int = 60) -> None:
    """Print a separator line."""
    typer.echo(char * width)


def print_header(title: str, width: int = 60) -> None:
    """Print a title between two separator lines."""
    print_separator("=", width)
    typer.echo(title)
    print_separator("=", width)


def resolve_translator(language: str | None) -> Callable[[str], str]:
    """Translator for an explicit language, else the preferred one."""
    return get_translator(language or get_preferences().language)


def load_task_or_exit(path: Path) -> Task:
    """Load a task document, exiting with status 1 on failure.

    Raises:
        typer.Exit: If the file is missing or not a valid task.
    """
    result = TaskReader().load(path)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def echo_task(task: Task) -> None:
    """Print a task as a JSON document on stdout."""
    typer.echo(json.dumps(task.to_document(), indent=2, ensure_ascii=False))


__all__ = [
    "LANGUAGE_ENV",
    "print_error",
    "print_success",
    "print_warning",
    "print_separator",
    "print_header",
    "resolve_translator",
    "load_task_or_exit",
    "echo_task",
]
