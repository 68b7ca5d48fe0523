# tests/test_storage.py

from __future__ import annotations

from pathlib import Path

from focusflow.domain.shared import Err, Ok
from focusflow.infrastructure.storage import JsonStorage, TaskReader


def test_load_json_missing_file(tmp_path: Path) -> None:
    result = JsonStorage().load_json(tmp_path / "nope.json")

    assert isinstance(result, Err)
    assert "File not found" in result.error


def test_load_json_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    result = JsonStorage().load_json(path)

    assert isinstance(result, Err)
    assert "Invalid JSON" in result.error


def test_load_json_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"id": "\xff"}')

    result = JsonStorage().load_json(path)

    assert isinstance(result, Err)
    assert "Invalid UTF-8" in result.error


def test_load_json_requires_an_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    result = JsonStorage().load_json(path)

    assert isinstance(result, Err)
    assert "Expected a JSON object" in result.error


def test_task_reader_loads_document(task_file: Path, sample_task) -> None:
    result = TaskReader().load(task_file)

    assert isinstance(result, Ok)
    assert result.value == sample_task


def test_task_reader_reports_validation_errors(tmp_path: Path) -> None:
    path = tmp_path / "task.json"
    path.write_text('{"id": "t", "title": "x", "scheduledTime": "noon"}', encoding="utf-8")

    result = TaskReader().load(path)

    assert isinstance(result, Err)
    assert result.error.startswith(f"Invalid task document {path}")


def test_task_reader_passes_storage_errors_through(tmp_path: Path) -> None:
    result = TaskReader(JsonStorage()).load(tmp_path / "missing.json")

    assert isinstance(result, Err)
    assert "File not found" in result.error
