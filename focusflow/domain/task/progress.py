"""Per-subtask focus progress.

Tracks how much focus time a subtask has received against its estimate.
Finished focus sessions are credited with ``update_subtask_progress``,
which returns a new subtask; the input is never modified.

Two estimates are in play. The *total* duration prefers the user's own
estimate and drives the displayed percentage. The *original* duration
prefers the AI estimate and is what crediting measures against, so the
AI suggestion is never overwritten by progress updates.
"""

import logging
from datetime import UTC, date, datetime

from pydantic import BaseModel

from .metrics import round_half_up
from .models import EnhancedSubtask, SessionRecord

logger = logging.getLogger(__name__)

# Minutes assumed when a subtask has neither a user nor an AI estimate.
DEFAULT_PROGRESS_MINUTES = 60

# A stored remaining time further than this from spent-vs-estimate is stale.
REMAINING_TIME_TOLERANCE = 5


def subtask_total_duration(subtask: EnhancedSubtask) -> int:
    """User estimate, else AI estimate, else DEFAULT_PROGRESS_MINUTES.

    Zero counts as no estimate.
    """
    return (
        subtask.user_estimated_duration
        or subtask.ai_estimated_duration
        or DEFAULT_PROGRESS_MINUTES
    )


def subtask_original_duration(subtask: EnhancedSubtask) -> int:
    """AI estimate, else user estimate, else DEFAULT_PROGRESS_MINUTES."""
    return (
        subtask.ai_estimated_duration
        or subtask.user_estimated_duration
        or DEFAULT_PROGRESS_MINUTES
    )


def subtask_remaining_time(subtask: EnhancedSubtask) -> int:
    """Minutes of focus still needed, never negative.

    A stored ``remaining_time`` is used while it agrees with the original
    estimate minus time spent; otherwise the computed value wins.
    """
    calculated = max(0, subtask_original_duration(subtask) - (subtask.time_spent or 0))
    if subtask.remaining_time is None:
        return calculated

    if abs(subtask.remaining_time - calculated) > REMAINING_TIME_TOLERANCE:
        logger.warning(
            f"Duration mismatch for subtask {subtask.id}: "
            f"remaining={subtask.remaining_time}min, calculated={calculated}min"
        )
        return calculated
    return max(0, subtask.remaining_time)


def subtask_progress_percentage(subtask: EnhancedSubtask) -> int:
    """Focus progress from 0 to 100.

    A stored ``progress_percentage`` is clamped and returned as is;
    otherwise time spent is measured against the total duration.
    """
    if subtask.progress_percentage is not None:
        return min(100, max(0, subtask.progress_percentage))

    total = subtask_total_duration(subtask)
    if total == 0:
        return 0
    return min(100, round_half_up((subtask.time_spent or 0) / total * 100))


def is_subtask_completed(subtask: EnhancedSubtask) -> bool:
    """Checked off by hand, or focused on for its full estimate."""
    if subtask.completed:
        return True
    return subtask_progress_percentage(subtask) >= 100


def update_subtask_progress(
    subtask: EnhancedSubtask,
    session_minutes: int,
    notes: str | None = None,
    *,
    now: datetime | None = None,
) -> EnhancedSubtask:
    """Credit a finished focus session to a subtask.

    Args:
        subtask: The subtask that was focused on.
        session_minutes: Length of the session in whole minutes.
        notes: Optional note stored with the session record.
        now: Time of crediting; defaults to the current UTC time.

    Returns:
        A new subtask with time spent, remaining time, percentage and
        session history updated. Reaching 100% marks it completed.

    Raises:
        ValueError: If session_minutes is negative.
    """
    if session_minutes < 0:
        raise ValueError(f"Session length cannot be negative: {session_minutes}")

    now = now or datetime.now(UTC)
    original = subtask_original_duration(subtask)
    time_spent = (subtask.time_spent or 0) + session_minutes
    percentage = min(100, round_half_up(time_spent / original * 100))
    reached_goal = percentage >= 100

    record = SessionRecord(date=now.date(), duration=session_minutes, notes=notes)
    return subtask.model_copy(
        update={
            "time_spent": time_spent,
            "remaining_time": max(0, original - time_spent),
            "total_duration": original,
            "progress_percentage": percentage,
            "last_session_time": session_minutes,
            "session_history": [*subtask.session_history, record],
            "completed": True if reached_goal else subtask.completed,
            "completed_at": (
                now if reached_goal and subtask.completed_at is None else subtask.completed_at
            ),
        }
    )


class SubtaskStats(BaseModel):
    """Focus figures for one subtask, for the subtask detail view."""

    total_duration: int
    time_spent: int
    remaining_time: int
    progress_percentage: int
    session_count: int
    last_session_date: date | None
    average_session_duration: int
    is_completed: bool


def subtask_stats(subtask: EnhancedSubtask) -> SubtaskStats:
    """Summarize a subtask's focus history."""
    history = subtask.session_history
    average = round_half_up(sum(s.duration for s in history) / len(history)) if history else 0
    return SubtaskStats(
        total_duration=subtask_total_duration(subtask),
        time_spent=subtask.time_spent or 0,
        remaining_time=subtask_remaining_time(subtask),
        progress_percentage=subtask_progress_percentage(subtask),
        session_count=len(history),
        last_session_date=history[-1].date if history else None,
        average_session_duration=average,
        is_completed=is_subtask_completed(subtask),
    )
