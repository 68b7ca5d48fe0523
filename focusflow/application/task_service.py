"""Task application service.

Task-level operations used by the task list and task detail screens.
All functions are pure - no I/O, no side effects.
"""

import logging
from datetime import datetime

from focusflow.application.subtask_service import SubtaskEditorState
from focusflow.domain.focus import FocusSession
from focusflow.domain.shared import Err, Ok, Result
from focusflow.domain.task import (
    SubtaskProgressRecorded,
    SubtaskToggled,
    Task,
    TaskToggled,
    update_subtask_progress,
)

logger = logging.getLogger(__name__)


def toggle_task_completion(task: Task) -> tuple[Task, TaskToggled]:
    """Flip a task's completed flag.

    Subtasks are left as they are; a task can be done with open subtasks
    and vice versa.
    """
    completed = not task.completed
    updated = task.model_copy(update={"completed": completed})
    logger.info(f"Task {task.id} marked {'done' if completed else 'not done'}")
    return updated, TaskToggled(task_id=task.id, completed=completed)


def toggle_subtask(task: Task, subtask_id: str) -> Result[tuple[Task, SubtaskToggled], str]:
    """Flip one subtask's completed flag.

    Args:
        task: Task owning the subtask.
        subtask_id: Id of the subtask to toggle.

    Returns:
        Ok((updated_task, SubtaskToggled)), or Err(str) if the task has no
        subtask with that id.
    """
    target = next((s for s in task.subtasks if s.id == subtask_id), None)
    if target is None:
        return Err(f"Subtask not found: {subtask_id}")

    completed = not target.completed
    subtasks = [
        s.model_copy(update={"completed": completed}) if s.id == subtask_id else s
        for s in task.subtasks
    ]
    event = SubtaskToggled(task_id=task.id, subtask_id=subtask_id, completed=completed)
    return Ok((task.model_copy(update={"subtasks": subtasks}), event))


def editor_for(task: Task) -> SubtaskEditorState:
    """Start an editing session over a task's subtasks."""
    return SubtaskEditorState(subtasks=list(task.subtasks))


def apply_editor(task: Task, state: SubtaskEditorState) -> Task:
    """Return the task with the subtasks from an editing session."""
    return task.model_copy(update={"subtasks": list(state.subtasks)})


def record_focus_session(
    task: Task,
    subtask_id: str,
    session: FocusSession,
    notes: str | None = None,
    *,
    now: datetime | None = None,
) -> Result[tuple[Task, SubtaskProgressRecorded], str]:
    """Credit a finished focus session to one of the task's subtasks.

    The session's whole minutes are added to the subtask's time spent; a
    subtask that reaches its estimate is marked completed.

    Args:
        task: Task owning the subtask.
        subtask_id: Id of the subtask that was focused on.
        session: The focus session; must be complete.
        notes: Note for the session record; a default is written if None.
        now: Time of crediting; defaults to the current UTC time.

    Returns:
        Ok((updated_task, SubtaskProgressRecorded)), or Err(str) if the
        session is still running, is shorter than a minute, or the task has
        no subtask with that id.
    """
    if not session.is_complete:
        return Err("Focus session is still running")
    minutes = session.elapsed_minutes
    if minutes == 0:
        return Err("Focus session is shorter than a minute")

    target = next((s for s in task.subtasks if s.id == subtask_id), None)
    if target is None:
        return Err(f"Subtask not found: {subtask_id}")

    if notes is None:
        notes = f"Focus session completed: {minutes}min"
    credited = update_subtask_progress(target, minutes, notes, now=now)
    subtasks = [credited if s.id == subtask_id else s for s in task.subtasks]

    logger.info(
        f"Credited {minutes} min to subtask {subtask_id} "
        f"({credited.progress_percentage}% done)"
    )
    event = SubtaskProgressRecorded(
        task_id=task.id,
        subtask_id=subtask_id,
        minutes=minutes,
        time_spent=credited.time_spent,
        progress_percentage=credited.progress_percentage,
        completed=credited.completed,
    )
    return Ok((task.model_copy(update={"subtasks": subtasks}), event))
