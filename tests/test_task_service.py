# tests/test_task_service.py

from __future__ import annotations

import logging
from datetime import UTC, datetime

from focusflow.application import (
    add_subtask,
    apply_editor,
    editor_for,
    record_focus_session,
    toggle_subtask,
    toggle_task_completion,
)
from focusflow.domain.focus import FocusSession
from focusflow.domain.shared import Err, Ok
from focusflow.domain.task import Task


def test_toggle_task_completion_leaves_subtasks_alone(sample_task: Task) -> None:
    done, event = toggle_task_completion(sample_task)

    assert done.completed is True
    assert sample_task.completed is False
    assert done.subtasks == sample_task.subtasks
    assert (event.task_id, event.completed) == ("t1", True)

    undone, event = toggle_task_completion(done)
    assert undone.completed is False
    assert event.completed is False


def test_toggle_subtask(sample_task: Task) -> None:
    result = toggle_subtask(sample_task, "s2")

    assert isinstance(result, Ok)
    task, event = result.value
    assert [s.completed for s in task.subtasks] == [True, True, False]
    assert event.subtask_id == "s2"
    assert event.completed is True
    # The task's own flag is not derived from subtasks
    assert task.completed is False


def test_toggle_unknown_subtask_is_an_error(sample_task: Task) -> None:
    result = toggle_subtask(sample_task, "nope")

    assert isinstance(result, Err)
    assert result.error == "Subtask not found: nope"


def test_editor_round_trip(sample_task: Task) -> None:
    state, _ = add_subtask(editor_for(sample_task), "Quiz", id_factory=lambda: "s4")

    updated = apply_editor(sample_task, state)

    assert [s.id for s in updated.subtasks] == ["s1", "s2", "s3", "s4"]
    assert updated.subtasks[-1].order == 4
    assert len(sample_task.subtasks) == 3
    assert updated.title == sample_task.title


# =============================================================================
# Focus sessions
# =============================================================================


def test_record_focus_session_credits_subtask(sample_task: Task, caplog) -> None:
    caplog.set_level(logging.INFO, logger="focusflow")
    now = datetime(2026, 3, 14, tzinfo=UTC)
    session = FocusSession.start(25).tick(25 * 60)

    result = record_focus_session(sample_task, "s2", session, now=now)

    assert isinstance(result, Ok)
    task, event = result.value
    credited = task.subtasks[1]
    assert credited.time_spent == 25
    assert credited.remaining_time == 20
    assert credited.progress_percentage == 56
    assert credited.session_history[0].notes == "Focus session completed: 25min"
    assert task.subtasks[0] == sample_task.subtasks[0]
    assert sample_task.subtasks[1].time_spent is None
    assert (event.subtask_id, event.minutes, event.completed) == ("s2", 25, False)
    assert "Credited 25 min to subtask s2" in caplog.text


def test_record_focus_session_can_complete_subtask(sample_task: Task) -> None:
    session = FocusSession(target_seconds=45 * 60, remaining_seconds=-30)

    result = record_focus_session(sample_task, "s2", session, "Done early")

    assert isinstance(result, Ok)
    task, event = result.value
    assert task.subtasks[1].completed is True
    assert task.subtasks[1].completed_at is not None
    assert task.subtasks[1].session_history[0].notes == "Done early"
    assert event.completed is True
    # Task flag is never derived
    assert task.completed is False


def test_record_focus_session_rejects_running_session(sample_task: Task) -> None:
    result = record_focus_session(sample_task, "s2", FocusSession.start(25).tick(60))

    assert isinstance(result, Err)
    assert "still running" in result.error


def test_record_focus_session_rejects_sub_minute_session(sample_task: Task) -> None:
    session = FocusSession(target_seconds=45, remaining_seconds=0)

    result = record_focus_session(sample_task, "s2", session)

    assert isinstance(result, Err)
    assert "shorter than a minute" in result.error


def test_record_focus_session_unknown_subtask(sample_task: Task) -> None:
    result = record_focus_session(sample_task, "zzz", FocusSession.start(25).tick(1500))

    assert isinstance(result, Err)
    assert result.error == "Subtask not found: zzz"
