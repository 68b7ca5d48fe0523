"""Task domain events.

Immutable records of changes to a task or its subtask collection. They
are returned by the application handlers next to the new state.

All events are pure data structures - no I/O, no side effects.
"""

from focusflow.domain.shared.events import DomainEvent


class SubtaskAdded(DomainEvent):
    """A subtask was appended by hand."""

    subtask_id: str
    title: str
    order: int


class SubtaskRemoved(DomainEvent):
    """A subtask was removed after the user confirmed."""

    subtask_id: str
    title: str | None = None


class SubtaskDurationChanged(DomainEvent):
    """The AI-estimated duration of a subtask was edited."""

    subtask_id: str
    previous_minutes: int | None
    minutes: int


class SubtaskToggled(DomainEvent):
    """A subtask was marked done or not done."""

    task_id: str
    subtask_id: str
    completed: bool


class TaskToggled(DomainEvent):
    """A task was marked done or not done."""

    task_id: str
    completed: bool


class SubtaskProgressRecorded(DomainEvent):
    """A finished focus session was credited to a subtask."""

    task_id: str
    subtask_id: str
    minutes: int
    time_spent: int
    progress_percentage: int
    completed: bool
