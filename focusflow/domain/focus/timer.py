"""Focus timer calculations.

Pure functions turning remaining/target seconds into a progress value and
a clock display. The timer is polled by the caller, typically once per
second; nothing here reads the wall clock or schedules anything.
"""

from pydantic import BaseModel, Field


def timer_progress(current_remaining: int, target: int) -> float:
    """Percentage of the target already elapsed.

    Not clamped: a negative remaining time gives more than 100, a
    remaining time above the target gives less than 0.

    Args:
        current_remaining: Seconds left on the timer.
        target: Session length in seconds.

    Returns:
        ``(target - remaining) / target * 100``, or 0 when target is 0.
    """
    if target == 0:
        return 0
    return ((target - current_remaining) / target) * 100


def clamp_progress(progress: float) -> float:
    """Limit a progress value to the 0-100 range of a progress ring."""
    return min(100.0, max(0.0, progress))


def format_timer(total_seconds: int) -> str:
    """Render seconds as ``MM:SS``, both parts zero-padded to two digits."""
    minutes = total_seconds // 60
    seconds = total_seconds % 60
    return f"{minutes:02d}:{seconds:02d}"


class FocusSession(BaseModel):
    """State of a running focus session.

    Sessions are immutable; ``tick`` returns the next state.
    """

    target_seconds: int = Field(ge=0)
    remaining_seconds: int

    model_config = {"frozen": True}

    @classmethod
    def start(cls, minutes: int) -> "FocusSession":
        """New session of the given length with the full time remaining."""
        seconds = minutes * 60
        return cls(target_seconds=seconds, remaining_seconds=seconds)

    def tick(self, seconds: int = 1) -> "FocusSession":
        """Advance the countdown."""
        return self.model_copy(update={"remaining_seconds": self.remaining_seconds - seconds})

    @property
    def progress(self) -> float:
        """Elapsed share of the target, unclamped."""
        return timer_progress(self.remaining_seconds, self.target_seconds)

    @property
    def display(self) -> str:
        """Clock text; an overrun session shows ``00:00``."""
        return format_timer(max(0, self.remaining_seconds))

    @property
    def is_complete(self) -> bool:
        return self.remaining_seconds <= 0

    @property
    def elapsed_minutes(self) -> int:
        """Whole minutes of the target; see ``record_focus_session``."""
        return self.target_seconds // 60
