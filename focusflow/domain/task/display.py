"""Display mappings for task and subtask categories.

Maps difficulty, priority and phase values to colors, labels and icons,
and formats durations and scheduled times for list items.

Every mapping is total: any input, including None and strings that are
not valid members, returns a value. Nothing here raises.
"""

from collections.abc import Callable

from pydantic import BaseModel

from focusflow.domain.types import ClockTime, Difficulty, Phase, Priority, Tone

from .models import Task

Translate = Callable[[str], str]


# =============================================================================
# Palette
# =============================================================================


class Palette(BaseModel):
    """Concrete colors for the semantic tones."""

    success: str
    warning: str
    error: str
    neutral: str

    model_config = {"frozen": True}

    def resolve(self, tone: Tone) -> str:
        """Return the color for a tone."""
        return getattr(self, tone.value)


LIGHT_PALETTE = Palette(
    success="#34D399",
    warning="#FBBF24",
    error="#EF4444",
    neutral="#6B7280",
)

_DIFFICULTY_TONES: dict[Difficulty, Tone] = {
    Difficulty.EASY: Tone.SUCCESS,
    Difficulty.MEDIUM: Tone.WARNING,
    Difficulty.HARD: Tone.ERROR,
    Difficulty.UNSPECIFIED: Tone.NEUTRAL,
}

_PRIORITY_TONES: dict[Priority, Tone] = {
    Priority.LOW: Tone.SUCCESS,
    Priority.MEDIUM: Tone.WARNING,
    Priority.HIGH: Tone.ERROR,
    Priority.UNSPECIFIED: Tone.NEUTRAL,
}

# Fixed colors for the counted phases; review and UNSPECIFIED fall through
# to the palette's neutral.
PHASE_COLORS: dict[Phase, str] = {
    Phase.KNOWLEDGE: "#3B82F6",  # blue
    Phase.PRACTICE: "#10B981",  # green
    Phase.APPLICATION: "#F59E0B",  # orange
    Phase.REFLECTION: "#8B5CF6",  # purple
    Phase.OUTPUT: "#EF4444",  # red
}

PHASE_ICONS: dict[Phase, str] = {
    Phase.KNOWLEDGE: "📚",
    Phase.PRACTICE: "🛠️",
    Phase.APPLICATION: "🎯",
    Phase.REFLECTION: "🤔",
    Phase.OUTPUT: "📝",
    Phase.REVIEW: "🔄",
}

PENDING_ICON = "⏱️"


# =============================================================================
# Colors
# =============================================================================


def difficulty_tone(difficulty: Difficulty | str | None) -> Tone:
    """Easy is success, medium warning, hard error, anything else neutral."""
    return _DIFFICULTY_TONES[Difficulty.parse(difficulty)]


def priority_tone(priority: Priority | str | None) -> Tone:
    """Low is success, medium warning, high error, anything else neutral."""
    return _PRIORITY_TONES[Priority.parse(priority)]


def difficulty_color(
    difficulty: Difficulty | str | None,
    palette: Palette = LIGHT_PALETTE,
) -> str:
    """Color for a difficulty badge."""
    return palette.resolve(difficulty_tone(difficulty))


def priority_color(
    priority: Priority | str | None,
    palette: Palette = LIGHT_PALETTE,
) -> str:
    """Color for a priority marker."""
    return palette.resolve(priority_tone(priority))


def phase_color(phase: Phase | str | None, palette: Palette = LIGHT_PALETTE) -> str:
    """Color for a phase badge or distribution dot."""
    return PHASE_COLORS.get(Phase.parse(phase), palette.neutral)


# =============================================================================
# Labels and icons
# =============================================================================


def phase_label(phase: Phase | str | None, translate: Translate | None = None) -> str:
    """Localized name of a phase.

    Args:
        phase: Phase member or raw phase string.
        translate: Lookup called with ``phases.<phase>``.

    Returns:
        Without a translator, the raw phase key (or "" when there is none).
        With a translator, the translated label, or "" for an unrecognized
        phase; no lookup is attempted in that case.
    """
    if translate is None:
        if isinstance(phase, Phase):
            return "" if phase is Phase.UNSPECIFIED else phase.value
        return phase if isinstance(phase, str) else ""

    parsed = Phase.parse(phase)
    if parsed is Phase.UNSPECIFIED:
        return ""
    return translate(f"phases.{parsed.value}")


def difficulty_label(
    difficulty: Difficulty | str | None,
    translate: Translate | None = None,
) -> str:
    """Localized name of a difficulty level.

    Unrecognized strings are returned as given; a missing value gives "".
    """
    parsed = Difficulty.parse(difficulty)
    if parsed is Difficulty.UNSPECIFIED:
        if isinstance(difficulty, str) and not isinstance(difficulty, Difficulty):
            return difficulty
        return ""
    if translate is None:
        return parsed.value
    return translate(f"difficulty.{parsed.value}")


def phase_icon(phase: Phase | str | None) -> str:
    """Single-glyph marker for a phase; PENDING_ICON when unknown."""
    return PHASE_ICONS.get(Phase.parse(phase), PENDING_ICON)


# =============================================================================
# Time formatting
# =============================================================================


def format_duration(minutes: int) -> str:
    """Compact duration: ``45m``, ``2h``, ``1h 30m``."""
    if minutes < 60:
        return f"{minutes}m"
    hours, rest = divmod(minutes, 60)
    if rest == 0:
        return f"{hours}h"
    return f"{hours}h {rest}m"


def format_clock_time(value: str | None) -> str:
    """Render ``HH:MM`` as ``H:MM AM|PM``; "" for missing or invalid input."""
    if not value:
        return ""
    try:
        return ClockTime.from_string(value).to_12_hour()
    except ValueError:
        return ""


def scheduled_window(task: Task) -> tuple[ClockTime | None, ClockTime | None]:
    """Start and end of a task's scheduled slot.

    An end time without a start time is dropped.
    """
    if not task.scheduled_time:
        return None, None
    start = ClockTime.from_string(task.scheduled_time)
    end = ClockTime.from_string(task.scheduled_end_time) if task.scheduled_end_time else None
    return start, end


def format_schedule(task: Task) -> str:
    """Human-readable slot such as ``9:00 AM - 10:30 AM``; "" if unscheduled."""
    start, end = scheduled_window(task)
    if start is None:
        return ""
    if end is None:
        return start.to_12_hour()
    return f"{start.to_12_hour()} - {end.to_12_hour()}"
