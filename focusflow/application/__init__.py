"""Application service layer for focusflow.

Services orchestrate domain operations for the UI. They are pure
functions: each takes the current state and returns the next one together
with a domain event, without performing I/O.

Services:
    subtask_service - Add, remove and re-estimate subtasks
    task_service - Toggle completion and credit focus sessions

Example usage:
    >>> from focusflow.application import SubtaskEditorState, add_subtask
    >>>
    >>> state, event = add_subtask(SubtaskEditorState(), "  Read chapter 3  ")
    >>> state.subtasks[0].text
    'Read chapter 3'
"""

from focusflow.application.subtask_service import (
    INVALID_DURATION_KEY,
    ConfirmDialog,
    InvalidDuration,
    RemovalRequest,
    SubtaskEditorState,
    add_subtask,
    begin_edit_duration,
    cancel_edit_duration,
    cancel_removal,
    commit_edit_duration,
    confirm_removal,
    new_subtask_id,
    parse_duration,
    remove_subtask,
    request_removal,
    update_duration_buffer,
    update_pending_text,
)
from focusflow.application.task_service import (
    apply_editor,
    editor_for,
    record_focus_session,
    toggle_subtask,
    toggle_task_completion,
)

__all__ = [
    # Subtask service
    "SubtaskEditorState",
    "RemovalRequest",
    "InvalidDuration",
    "ConfirmDialog",
    "INVALID_DURATION_KEY",
    "new_subtask_id",
    "parse_duration",
    "update_pending_text",
    "update_duration_buffer",
    "add_subtask",
    "request_removal",
    "confirm_removal",
    "cancel_removal",
    "remove_subtask",
    "begin_edit_duration",
    "commit_edit_duration",
    "cancel_edit_duration",
    # Task service
    "toggle_task_completion",
    "toggle_subtask",
    "editor_for",
    "apply_editor",
    "record_focus_session",
]
