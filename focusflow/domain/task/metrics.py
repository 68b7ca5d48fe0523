"""Derived metrics over a task's subtasks.

All functions in this module are pure - no I/O, no side effects.
They take data in, return data out, and accept ``None`` for a task that
has no subtask collection yet.
"""

import math
from collections.abc import Sequence

from pydantic import BaseModel

from focusflow.domain.types import Phase

from .models import DEFAULT_SUBTASK_MINUTES, EnhancedSubtask, Task

# Phases shown in the distribution chart, in display order.
COUNTED_PHASES: tuple[Phase, ...] = (
    Phase.KNOWLEDGE,
    Phase.PRACTICE,
    Phase.APPLICATION,
    Phase.REFLECTION,
    Phase.OUTPUT,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (12.5 -> 13)."""
    return math.floor(value + 0.5)


# =============================================================================
# Counting
# =============================================================================


def phase_stats(subtasks: Sequence[EnhancedSubtask] | None) -> dict[str, int]:
    """Count subtasks per learning phase.

    Every counted phase key is present, even at zero. Subtasks without a
    phase, with an unrecognized one, or in the review phase are left out.

    Args:
        subtasks: The subtask collection, or None.

    Returns:
        Mapping of phase key to count. ``None`` input yields an empty
        mapping rather than the zeroed one, so callers can tell "no
        collection" apart from "no subtasks in any phase".
    """
    if subtasks is None:
        return {}

    counts = {phase.value: 0 for phase in COUNTED_PHASES}
    for subtask in subtasks:
        key = Phase.parse(subtask.phase).value
        if key in counts:
            counts[key] += 1
    return counts


def completed_subtask_count(subtasks: Sequence[EnhancedSubtask] | None) -> int:
    """Number of completed subtasks; 0 for None."""
    if subtasks is None:
        return 0
    return sum(1 for subtask in subtasks if subtask.completed is True)


def subtask_completion_percentage(subtasks: Sequence[EnhancedSubtask] | None) -> int:
    """Whole-number share of completed subtasks.

    Halves round up (1 of 8 is 13%). Empty or missing collections are 0%.
    """
    if not subtasks:
        return 0
    completed = completed_subtask_count(subtasks)
    return round_half_up(completed / len(subtasks) * 100)


def total_estimated_time(subtasks: Sequence[EnhancedSubtask] | None) -> int:
    """Sum of ``estimated_duration`` in minutes.

    A subtask without an estimate counts as DEFAULT_SUBTASK_MINUTES.
    """
    if subtasks is None:
        return 0
    return sum(
        DEFAULT_SUBTASK_MINUTES if subtask.estimated_duration is None else subtask.estimated_duration
        for subtask in subtasks
    )


def estimated_hours(minutes: int) -> float:
    """Minutes as hours with one decimal place (95 -> 1.6)."""
    return round_half_up(minutes / 60 * 10) / 10


# =============================================================================
# Summary
# =============================================================================


class TaskSummary(BaseModel):
    """Progress figures for a single task.

    A read-only view for the task detail header and the stats screen.
    """

    task_id: str
    total: int
    completed: int
    completion_percent: int
    estimated_minutes: int
    phases: dict[str, int]

    @property
    def remaining(self) -> int:
        """Subtasks not yet completed."""
        return self.total - self.completed

    @property
    def estimated_hours(self) -> float:
        """Estimated minutes as hours with one decimal place."""
        return estimated_hours(self.estimated_minutes)


def summarize_task(task: Task) -> TaskSummary:
    """Compute the progress figures for a task.

    Args:
        task: The task to summarize.

    Returns:
        TaskSummary built from the task's subtasks.
    """
    subtasks = task.subtasks
    return TaskSummary(
        task_id=task.id,
        total=len(subtasks),
        completed=completed_subtask_count(subtasks),
        completion_percent=subtask_completion_percentage(subtasks),
        estimated_minutes=total_estimated_time(subtasks),
        phases=phase_stats(subtasks),
    )
