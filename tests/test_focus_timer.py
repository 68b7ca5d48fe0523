# tests/test_focus_timer.py

from __future__ import annotations

import pytest
from pydantic import ValidationError

from focusflow.domain.focus import FocusSession, clamp_progress, format_timer, timer_progress


def test_timer_progress_without_target_is_zero() -> None:
    assert timer_progress(0, 0) == 0
    assert timer_progress(30, 0) == 0


@pytest.mark.parametrize(
    ("remaining", "target", "expected"),
    [
        (30, 60, 50),
        (60, 60, 0),
        (0, 60, 100),
        (1125, 1500, 25),
    ],
)
def test_timer_progress(remaining, target, expected) -> None:
    assert timer_progress(remaining, target) == pytest.approx(expected)


def test_timer_progress_is_not_clamped() -> None:
    assert timer_progress(-30, 60) == pytest.approx(150)
    assert timer_progress(90, 60) == pytest.approx(-50)


def test_clamp_progress() -> None:
    assert clamp_progress(150) == 100
    assert clamp_progress(-50) == 0
    assert clamp_progress(42.5) == 42.5


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(125, "02:05"), (59, "00:59"), (0, "00:00"), (1500, "25:00"), (6000, "100:00")],
)
def test_format_timer(seconds, expected) -> None:
    assert format_timer(seconds) == expected


def test_session_counts_down() -> None:
    session = FocusSession.start(25)

    assert session.target_seconds == 1500
    assert session.display == "25:00"
    assert session.progress == 0

    later = session.tick(375)
    assert later.remaining_seconds == 1125
    assert later.progress == pytest.approx(25)
    assert session.remaining_seconds == 1500
    assert not later.is_complete


def test_session_completion_and_overrun() -> None:
    session = FocusSession(target_seconds=60, remaining_seconds=1).tick().tick()

    assert session.is_complete
    assert session.remaining_seconds == -1
    assert session.display == "00:00"
    assert session.elapsed_minutes == 1


def test_session_rejects_negative_target() -> None:
    with pytest.raises(ValidationError):
        FocusSession(target_seconds=-1, remaining_seconds=0)
