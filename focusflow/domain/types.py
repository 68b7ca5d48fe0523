"""Domain value types for focusflow.

Closed enumerations for the categorical fields of tasks and subtasks, and
the ClockTime value object used for scheduled times.

Every enumeration has an UNSPECIFIED member. Raw values coming from
documents or UI state are parsed with ``parse``, which maps missing or
unrecognized input to UNSPECIFIED instead of failing. Lookups keyed on
these enums therefore always have a defined fallback row.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

_E = TypeVar("_E", bound="_Categorical")


class _Categorical(str, Enum):
    """Base for string enums with an UNSPECIFIED fallback member."""

    @classmethod
    def parse(cls: type[_E], raw: object) -> _E:
        """Parse a raw value, falling back to UNSPECIFIED.

        Args:
            raw: An enum member, a string, or None.

        Returns:
            The matching member, or UNSPECIFIED for anything else.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str) or not raw:
            return cls["UNSPECIFIED"]
        try:
            return cls(raw)
        except ValueError:
            return cls["UNSPECIFIED"]


class Difficulty(_Categorical):
    """How hard a task or subtask is."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    UNSPECIFIED = "unspecified"


class Priority(_Categorical):
    """How urgent a task is."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNSPECIFIED = "unspecified"


class Phase(_Categorical):
    """Learning phase a subtask belongs to.

    REVIEW is produced by spaced-repetition planning and is accepted by
    label, icon and color lookups, but it is not one of the counted
    phases and is never assigned to a manually added subtask.
    """

    KNOWLEDGE = "knowledge"
    PRACTICE = "practice"
    APPLICATION = "application"
    REFLECTION = "reflection"
    OUTPUT = "output"
    REVIEW = "review"
    UNSPECIFIED = "unspecified"


class Tone(str, Enum):
    """Semantic color role, resolved to a concrete color by a Palette."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    NEUTRAL = "neutral"


_CLOCK_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

CLOCK_TIME_PATTERN = _CLOCK_RE.pattern


@dataclass(frozen=True)
class ClockTime:
    """A wall-clock time of day (24-hour).

    Example:
        ClockTime.from_string("14:05").to_12_hour()  # -> "2:05 PM"
    """

    hour: int
    minute: int

    @classmethod
    def from_string(cls, value: str) -> "ClockTime":
        """Parse an ``HH:MM`` string.

        Raises:
            ValueError: If the string is not a valid 24-hour time.
        """
        match = _CLOCK_RE.match(value)
        if match is None:
            raise ValueError(f"Invalid clock time: {value!r} (expected HH:MM)")
        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    def to_12_hour(self) -> str:
        """Render as ``H:MM AM|PM``."""
        suffix = "PM" if self.hour >= 12 else "AM"
        display_hour = self.hour % 12 or 12
        return f"{display_hour}:{self.minute:02d} {suffix}"

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
