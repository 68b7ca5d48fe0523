# tests/conftest.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from focusflow.domain.task import EnhancedSubtask, Task
from focusflow.global_config import CONFIG_HOME_ENV
from focusflow.interfaces.cli.common import LANGUAGE_ENV


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """
    Point the config directory at a per-test folder.

    Also clears the language override and detaches any stderr handler the
    CLI callback installed, so one test's CliRunner streams never leak
    into the next.
    """
    home = tmp_path / "focusflow-home"
    monkeypatch.setenv(CONFIG_HOME_ENV, str(home))
    monkeypatch.delenv(LANGUAGE_ENV, raising=False)
    yield home

    logger = logging.getLogger("focusflow")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def make_subtask() -> Callable[..., EnhancedSubtask]:
    """Factory for subtasks with sensible defaults; override any field."""
    counter = {"n": 0}

    def _make(**fields: Any) -> EnhancedSubtask:
        counter["n"] += 1
        n = counter["n"]
        data: dict[str, Any] = {
            "id": f"s{n}",
            "title": f"Step {n}",
            "text": f"Step {n}",
            "order": n,
        }
        data.update(fields)
        return EnhancedSubtask(**data)

    return _make


@pytest.fixture()
def sample_task(make_subtask: Callable[..., EnhancedSubtask]) -> Task:
    """
    A scheduled task with three subtasks in different phases.

    s1: knowledge, done, 20 min
    s2: practice, open, no estimate (counts as 30)
    s3: review, open, 15 min
    """
    return Task(
        id="t1",
        title="Learn SQL joins",
        difficulty="medium",
        priority="high",
        duration=90,
        scheduled_time="09:00",
        scheduled_end_time="10:30",
        subtasks=[
            make_subtask(id="s1", phase="knowledge", completed=True, estimated_duration=20),
            make_subtask(id="s2", phase="practice", ai_estimated_duration=45),
            make_subtask(id="s3", phase="review", estimated_duration=15),
        ],
    )


@pytest.fixture()
def task_file(tmp_path: Path, sample_task: Task) -> Path:
    """The sample task written as a camelCase JSON document."""
    path = tmp_path / "task.json"
    path.write_text(json.dumps(sample_task.to_document()), encoding="utf-8")
    return path
