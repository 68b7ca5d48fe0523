"""CLI command groups for focusflow.

Command groups:
- task: Task views (stats)
- subtask: Subtask editing (add, remove, duration)
- focus: Focus timer (timer)
- config: Preferences (show, language, focus-minutes)

Each command group is a Typer app registered with the main app using
app.add_typer().
"""

from focusflow.interfaces.cli.commands import config, focus, subtask, task

__all__ = ["task", "subtask", "focus", "config"]
