"""Subtask editing CLI commands.

Each command reads a task document, runs one editing handler and prints
the updated document on stdout. The input file is never modified; redirect
the output to keep the result.
"""

from pathlib import Path
from typing import Optional

import typer

from focusflow.application import (
    RemovalRequest,
    add_subtask,
    apply_editor,
    begin_edit_duration,
    commit_edit_duration,
    editor_for,
    remove_subtask,
    update_duration_buffer,
)
from focusflow.domain.shared import Err
from focusflow.interfaces.cli.common import (
    LANGUAGE_ENV,
    echo_task,
    load_task_or_exit,
    print_error,
    print_warning,
    resolve_translator,
)

app = typer.Typer(help="Subtask editing commands")


@app.command("add")
def add(
    path: Path = typer.Argument(..., help="Task JSON document"),
    text: str = typer.Argument(..., help="Subtask text"),
) -> None:
    """Append a subtask."""
    task = load_task_or_exit(path)
    state, event = add_subtask(editor_for(task), text)
    if event is None:
        print_warning("Subtask text is blank; nothing added")
    echo_task(apply_editor(task, state))


@app.command("remove")
def remove(
    path: Path = typer.Argument(..., help="Task JSON document"),
    subtask_id: str = typer.Argument(..., help="Id of the subtask to remove"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Prompt language (or set FOCUSFLOW_LANGUAGE env var)",
        envvar=LANGUAGE_ENV,
    ),
) -> None:
    """Remove a subtask after confirmation."""
    task = load_task_or_exit(path)
    translate = resolve_translator(language)

    def confirm(request: RemovalRequest) -> bool:
        if yes:
            return True
        title = f" ({request.subtask_title})" if request.subtask_title else ""
        return typer.confirm(
            f"{translate(request.title_key)}{title}: {translate(request.message_key)}",
            default=False,
            err=True,
        )

    state, event = remove_subtask(editor_for(task), subtask_id, confirm)
    if event is None:
        print_warning(f"Subtask {subtask_id} was not removed")
    echo_task(apply_editor(task, state))


@app.command("duration")
def duration(
    path: Path = typer.Argument(..., help="Task JSON document"),
    subtask_id: str = typer.Argument(..., help="Id of the subtask to update"),
    minutes: str = typer.Argument(..., help="New estimate in minutes"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Message language (or set FOCUSFLOW_LANGUAGE env var)",
        envvar=LANGUAGE_ENV,
    ),
) -> None:
    """Change a subtask's estimated duration."""
    task = load_task_or_exit(path)
    state = editor_for(task)

    subtask = state.find(subtask_id)
    if subtask is None:
        print_error(f"Subtask not found: {subtask_id}")
        raise typer.Exit(1)

    state = update_duration_buffer(begin_edit_duration(state, subtask), minutes)
    result = commit_edit_duration(state)
    if isinstance(result, Err):
        translate = resolve_translator(language)
        print_error(translate(result.error.message_key))
        raise typer.Exit(1)

    state, _ = result.value
    echo_task(apply_editor(task, state))
