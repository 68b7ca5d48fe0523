"""Task CLI commands.

Read-only views over a task document: progress summary, phase
distribution, estimated time and schedule.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Optional

import typer

from focusflow.domain.task import (
    Task,
    TaskSummary,
    difficulty_label,
    format_duration,
    format_schedule,
    phase_icon,
    phase_label,
    summarize_task,
)
from focusflow.domain.types import Difficulty, Priority
from focusflow.interfaces.cli.common import (
    LANGUAGE_ENV,
    load_task_or_exit,
    print_header,
    print_separator,
    resolve_translator,
)

app = typer.Typer(help="Task views")


def format_summary(task: Task, summary: TaskSummary, translate: Callable[[str], str]) -> str:
    """Render the stats view for a task."""
    lines = []
    status = "[x]" if task.completed else "[ ]"
    lines.append(f"{status} {task.title}")

    details = []
    if task.difficulty is not Difficulty.UNSPECIFIED:
        details.append(f"Difficulty: {difficulty_label(task.difficulty, translate)}")
    if task.priority is not Priority.UNSPECIFIED:
        details.append(f"Priority: {task.priority.value}")
    if task.duration:
        details.append(f"Planned: {format_duration(task.duration)}")
    if details:
        lines.append("  ".join(details))

    schedule = format_schedule(task)
    if schedule:
        lines.append(f"Scheduled: {schedule}")
    if task.due_date:
        lines.append(f"Due: {task.due_date.isoformat()}")

    lines.append("")
    lines.append(
        f"Subtasks: {summary.completed}/{summary.total} completed "
        f"({summary.completion_percent}%)"
    )
    lines.append(
        f"Estimated time: {summary.estimated_minutes} {translate('common.minutes')} "
        f"({summary.estimated_hours} h)"
    )

    # Only shown once at least one subtask sits in a counted phase
    if any(summary.phases.values()):
        lines.append("")
        lines.append("## Phase distribution")
        for phase, count in summary.phases.items():
            lines.append(f"{phase_icon(phase)} {phase_label(phase, translate)}: {count}")

    return "\n".join(lines)


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
    """Show progress and phase distribution for a task."""
    task = load_task_or_exit(path)
    summary = summarize_task(task)

    if as_json:
        typer.echo(summary.model_dump_json(indent=2))
        return

    translate = resolve_translator(language)
    print_header("TASK")
    typer.echo(format_summary(task, summary, translate))
    print_separator()
