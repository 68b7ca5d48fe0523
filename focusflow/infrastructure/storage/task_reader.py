"""Reads task documents.

Task documents are the camelCase JSON the mobile client exports. They are
only read; editing commands print the updated document instead of
writing it back.
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from focusflow.domain.shared.result import Err, Ok, Result, flat_map
from focusflow.domain.task.models import Task
from focusflow.infrastructure.storage.json_storage import JsonStorage


class TaskReader:
    """Loads a Task from a JSON file."""

    def __init__(self, storage: JsonStorage | None = None) -> None:
        """Initialize the reader.

        Args:
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self._storage = storage or JsonStorage()

    def load(self, path: Path) -> Result[Task, str]:
        """Load and validate a task document.

        Args:
            path: Path to the task JSON file.

        Returns:
            Ok(Task) if successful, Err(str) with error message if failed.
        """
        return flat_map(self._storage.load_json(path), lambda data: _parse_task(data, path))


def _parse_task(data: dict[str, Any], path: Path) -> Result[Task, str]:
    try:
        return Ok(Task.model_validate(data))
    except ValidationError as e:
        return Err(f"Invalid task document {path}: {e}")
