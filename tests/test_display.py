# tests/test_display.py

from __future__ import annotations

import pytest

from focusflow.domain.task import (
    LIGHT_PALETTE,
    PENDING_ICON,
    Palette,
    Task,
    difficulty_color,
    difficulty_label,
    difficulty_tone,
    format_clock_time,
    format_duration,
    format_schedule,
    phase_color,
    phase_icon,
    phase_label,
    priority_color,
    priority_tone,
    scheduled_window,
)
from focusflow.domain.types import ClockTime, Difficulty, Phase, Priority, Tone
from focusflow.i18n import get_translator

DARK = Palette(success="#0F0", warning="#FF0", error="#F00", neutral="#888")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("easy", LIGHT_PALETTE.success),
        ("medium", LIGHT_PALETTE.warning),
        ("hard", LIGHT_PALETTE.error),
        ("extreme", LIGHT_PALETTE.neutral),
        ("", LIGHT_PALETTE.neutral),
        (None, LIGHT_PALETTE.neutral),
        (Difficulty.HARD, LIGHT_PALETTE.error),
    ],
)
def test_difficulty_color(value, expected) -> None:
    assert difficulty_color(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("low", LIGHT_PALETTE.success),
        ("medium", LIGHT_PALETTE.warning),
        ("high", LIGHT_PALETTE.error),
        ("urgent", LIGHT_PALETTE.neutral),
        (None, LIGHT_PALETTE.neutral),
    ],
)
def test_priority_color(value, expected) -> None:
    assert priority_color(value) == expected


def test_tones() -> None:
    assert difficulty_tone("easy") is Tone.SUCCESS
    assert difficulty_tone("bogus") is Tone.NEUTRAL
    assert priority_tone(Priority.HIGH) is Tone.ERROR
    assert priority_tone(None) is Tone.NEUTRAL


def test_colors_follow_the_given_palette() -> None:
    assert difficulty_color("easy", DARK) == "#0F0"
    assert priority_color("high", DARK) == "#F00"
    assert phase_color("bogus", DARK) == "#888"


def test_phase_color_is_fixed_per_phase() -> None:
    assert phase_color("knowledge") == "#3B82F6"
    assert phase_color("practice") == "#10B981"
    assert phase_color("application") == "#F59E0B"
    assert phase_color("reflection") == "#8B5CF6"
    assert phase_color("output") == "#EF4444"
    assert phase_color(None) == LIGHT_PALETTE.neutral


def test_review_phase_has_no_color_of_its_own() -> None:
    assert phase_color("review") == LIGHT_PALETTE.neutral
    assert phase_color(Phase.REVIEW, DARK) == "#888"
    # Phase colors do not change with the palette
    assert phase_color(Phase.PRACTICE, DARK) == "#10B981"


def test_phase_label_uses_translator() -> None:
    assert phase_label("practice", get_translator("en")) == "Practice"
    assert phase_label(Phase.REVIEW, get_translator("zh")) == "複習"


def test_phase_label_unknown_phase_skips_lookup() -> None:
    looked_up: list[str] = []

    def translate(key: str) -> str:
        looked_up.append(key)
        return key

    assert phase_label("mystery", translate) == ""
    assert phase_label(None, translate) == ""
    assert looked_up == []


def test_phase_label_without_translator_returns_raw_key() -> None:
    assert phase_label("practice") == "practice"
    assert phase_label("mystery") == "mystery"
    assert phase_label(Phase.UNSPECIFIED) == ""
    assert phase_label(None) == ""


def test_difficulty_label() -> None:
    translate = get_translator("en")

    assert difficulty_label("hard", translate) == "Hard"
    assert difficulty_label(Difficulty.EASY) == "easy"
    assert difficulty_label("extreme", translate) == "extreme"
    assert difficulty_label(None, translate) == ""
    assert difficulty_label(Difficulty.UNSPECIFIED, translate) == ""


def test_phase_icon() -> None:
    assert phase_icon("knowledge") == "📚"
    assert phase_icon(Phase.OUTPUT) == "📝"
    assert phase_icon("review") == "🔄"
    assert phase_icon("mystery") == PENDING_ICON
    assert phase_icon(None) == PENDING_ICON


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(0, "0m"), (45, "45m"), (60, "1h"), (90, "1h 30m"), (120, "2h"), (125, "2h 5m")],
)
def test_format_duration(minutes, expected) -> None:
    assert format_duration(minutes) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("14:05", "2:05 PM"),
        ("00:00", "12:00 AM"),
        ("12:30", "12:30 PM"),
        ("09:15", "9:15 AM"),
        ("25:00", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_format_clock_time(value, expected) -> None:
    assert format_clock_time(value) == expected


def test_scheduled_window_with_both_ends() -> None:
    task = Task(id="t", title="x", scheduled_time="09:00", scheduled_end_time="10:30")

    assert scheduled_window(task) == (ClockTime(9, 0), ClockTime(10, 30))
    assert format_schedule(task) == "9:00 AM - 10:30 AM"


def test_scheduled_window_drops_end_without_start() -> None:
    task = Task(id="t", title="x", scheduled_end_time="10:30")

    assert scheduled_window(task) == (None, None)
    assert format_schedule(task) == ""


def test_scheduled_window_start_only() -> None:
    task = Task(id="t", title="x", scheduled_time="18:45")

    assert scheduled_window(task) == (ClockTime(18, 45), None)
    assert format_schedule(task) == "6:45 PM"
