"""Subtask editing service.

Handlers behind the subtask list of the task form: adding a subtask by
hand, removing one after confirmation, and editing its estimated duration.

Every handler takes the current SubtaskEditorState and returns the next
one; the input state is never modified, so callers can detect changes by
identity. Expected failures are returned as Err values.
"""

import logging
import re
import time
from collections.abc import Callable

from pydantic import BaseModel, Field

from focusflow.domain.shared import Err, Ok, Result
from focusflow.domain.task import (
    DEFAULT_SUBTASK_MINUTES,
    EnhancedSubtask,
    SubtaskAdded,
    SubtaskDurationChanged,
    SubtaskRemoved,
)
from focusflow.domain.types import Difficulty, Phase

logger = logging.getLogger(__name__)

INVALID_DURATION_KEY = "addTask.invalidDuration"

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


class SubtaskEditorState(BaseModel):
    """Everything the subtask list needs between UI events.

    Attributes:
        subtasks: The collection being edited.
        pending_text: Contents of the "new subtask" input.
        editing_id: Subtask whose duration is being edited, if any.
        duration_buffer: Text of the duration input while editing.
        pending_removal_id: Subtask awaiting delete confirmation, if any.
    """

    subtasks: list[EnhancedSubtask] = Field(default_factory=list)
    pending_text: str = ""
    editing_id: str | None = None
    duration_buffer: str = ""
    pending_removal_id: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def find(self, subtask_id: str) -> EnhancedSubtask | None:
        """Get a subtask by id."""
        for subtask in self.subtasks:
            if subtask.id == subtask_id:
                return subtask
        return None


class RemovalRequest(BaseModel):
    """Description of a pending delete, for the confirmation dialog.

    Message fields are translation keys; the dialog offers a cancel and a
    destructive delete choice.
    """

    subtask_id: str
    subtask_title: str | None = None
    title_key: str = "addTask.deleteSubtask"
    message_key: str = "addTask.deleteSubtaskConfirm"
    cancel_key: str = "common.cancel"
    confirm_key: str = "common.delete"


class InvalidDuration(BaseModel):
    """A duration entry that is not a positive whole number."""

    text: str
    message_key: str = INVALID_DURATION_KEY

    def __str__(self) -> str:
        return f"Invalid duration: {self.text!r}"


# Receives the request and returns True when the user chose delete.
ConfirmDialog = Callable[[RemovalRequest], bool]


def new_subtask_id() -> str:
    """Time-based id (milliseconds since the epoch)."""
    return str(time.time_ns() // 1_000_000)


def parse_duration(text: str) -> int | None:
    """Read the leading integer of ``text``.

    Trailing characters are ignored ("45 min" is 45, "2.5" is 2).

    Returns:
        The integer, or None if the text does not start with one.
    """
    match = _LEADING_INT_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))


# =============================================================================
# Input
# =============================================================================


def update_pending_text(state: SubtaskEditorState, text: str) -> SubtaskEditorState:
    """Record the contents of the new-subtask input."""
    return state.model_copy(update={"pending_text": text})


def update_duration_buffer(state: SubtaskEditorState, text: str) -> SubtaskEditorState:
    """Record the contents of the duration input."""
    return state.model_copy(update={"duration_buffer": text})


# =============================================================================
# Add
# =============================================================================


def add_subtask(
    state: SubtaskEditorState,
    text: str | None = None,
    *,
    id_factory: Callable[[], str] = new_subtask_id,
) -> tuple[SubtaskEditorState, SubtaskAdded | None]:
    """Append a hand-written subtask.

    Args:
        state: Current editor state.
        text: Subtask text; defaults to ``state.pending_text``.
        id_factory: Produces the new subtask id.

    Returns:
        ``(new_state, SubtaskAdded)``, or the unchanged state and None when
        the text is blank.
    """
    raw = state.pending_text if text is None else text
    trimmed = raw.strip()
    if not trimmed:
        logger.debug("Ignoring blank subtask text")
        return state, None

    subtask = EnhancedSubtask(
        id=id_factory(),
        title=trimmed,
        text=trimmed,
        completed=False,
        ai_estimated_duration=DEFAULT_SUBTASK_MINUTES,
        difficulty=Difficulty.MEDIUM,
        order=len(state.subtasks) + 1,
        phase=Phase.PRACTICE,
        skills=[],
        recommended_resources=[],
    )
    new_state = state.model_copy(
        update={"subtasks": [*state.subtasks, subtask], "pending_text": ""}
    )
    logger.info(f"Manual subtask added: {trimmed}")
    return new_state, SubtaskAdded(subtask_id=subtask.id, title=trimmed, order=subtask.order)


# =============================================================================
# Remove
# =============================================================================


def request_removal(
    state: SubtaskEditorState,
    subtask_id: str,
) -> tuple[SubtaskEditorState, RemovalRequest]:
    """First step of a delete: describe it and wait for the user.

    The collection is not touched until ``confirm_removal``.
    """
    subtask = state.find(subtask_id)
    request = RemovalRequest(
        subtask_id=subtask_id,
        subtask_title=subtask.display_title if subtask else None,
    )
    return state.model_copy(update={"pending_removal_id": subtask_id}), request


def confirm_removal(state: SubtaskEditorState) -> tuple[SubtaskEditorState, SubtaskRemoved | None]:
    """Second step of a delete: the user chose delete.

    Returns:
        ``(new_state, SubtaskRemoved)``; the event is None when nothing was
        pending or no subtask has the pending id.
    """
    subtask_id = state.pending_removal_id
    cleared = state.model_copy(update={"pending_removal_id": None})
    if subtask_id is None:
        return cleared, None

    subtask = state.find(subtask_id)
    if subtask is None:
        logger.debug(f"No subtask {subtask_id} to remove")
        return cleared, None

    remaining = [s for s in state.subtasks if s.id != subtask_id]
    logger.info(f"Subtask removed: {subtask.display_title}")
    return (
        cleared.model_copy(update={"subtasks": remaining}),
        SubtaskRemoved(subtask_id=subtask_id, title=subtask.title),
    )


def cancel_removal(state: SubtaskEditorState) -> SubtaskEditorState:
    """Second step of a delete: the user chose cancel."""
    if state.pending_removal_id is not None:
        logger.debug(f"Removal of {state.pending_removal_id} cancelled")
    return state.model_copy(update={"pending_removal_id": None})


def remove_subtask(
    state: SubtaskEditorState,
    subtask_id: str,
    confirm: ConfirmDialog,
) -> tuple[SubtaskEditorState, SubtaskRemoved | None]:
    """Run both steps of a delete through a confirmation dialog."""
    pending, request = request_removal(state, subtask_id)
    if confirm(request):
        return confirm_removal(pending)
    return cancel_removal(pending), None


# =============================================================================
# Duration editing
# =============================================================================


def begin_edit_duration(state: SubtaskEditorState, subtask: EnhancedSubtask) -> SubtaskEditorState:
    """Open the duration editor for a subtask.

    Any other subtask's unsaved edit is discarded.
    """
    if state.editing_id is not None and state.editing_id != subtask.id:
        logger.debug(f"Discarding unsaved duration edit of {state.editing_id}")

    minutes = subtask.ai_estimated_duration
    buffer = str(minutes) if minutes is not None else str(DEFAULT_SUBTASK_MINUTES)
    return state.model_copy(update={"editing_id": subtask.id, "duration_buffer": buffer})


def commit_edit_duration(
    state: SubtaskEditorState,
    subtask_id: str | None = None,
    buffer_text: str | None = None,
) -> Result[tuple[SubtaskEditorState, SubtaskDurationChanged | None], InvalidDuration]:
    """Save the edited duration.

    Args:
        state: Current editor state.
        subtask_id: Subtask to update; defaults to ``state.editing_id``.
        buffer_text: Entered text; defaults to ``state.duration_buffer``.

    Returns:
        Ok((new_state, SubtaskDurationChanged)) with edit mode closed, or
        Err(InvalidDuration) when the text is not a positive whole number;
        in that case the state stays as it was, still in edit mode. The
        event is None if no subtask has the id. Committing a subtask other
        than the one being edited leaves that edit open.
    """
    target_id = state.editing_id if subtask_id is None else subtask_id
    text = state.duration_buffer if buffer_text is None else buffer_text

    minutes = parse_duration(text)
    if minutes is None or minutes <= 0:
        logger.debug(f"Rejected duration {text!r} for subtask {target_id}")
        return Err(InvalidDuration(text=text))

    event: SubtaskDurationChanged | None = None
    updated: list[EnhancedSubtask] = []
    for subtask in state.subtasks:
        if subtask.id == target_id:
            event = SubtaskDurationChanged(
                subtask_id=subtask.id,
                previous_minutes=subtask.ai_estimated_duration,
                minutes=minutes,
            )
            subtask = subtask.model_copy(update={"ai_estimated_duration": minutes})
        updated.append(subtask)

    if event is not None:
        logger.info(f"Subtask duration updated: {target_id} -> {minutes} min")

    update: dict[str, object] = {"subtasks": updated}
    # An edit open on another subtask stays open
    if state.editing_id is None or state.editing_id == target_id:
        update.update(editing_id=None, duration_buffer="")
    return Ok((state.model_copy(update=update), event))


def cancel_edit_duration(state: SubtaskEditorState) -> SubtaskEditorState:
    """Close the duration editor without saving."""
    return state.model_copy(update={"editing_id": None, "duration_buffer": ""})
