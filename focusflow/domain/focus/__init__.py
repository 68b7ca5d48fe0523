"""Focus domain - the countdown shown during a focus session."""

from .timer import FocusSession, clamp_progress, format_timer, timer_progress

__all__ = [
    "FocusSession",
    "timer_progress",
    "clamp_progress",
    "format_timer",
]
