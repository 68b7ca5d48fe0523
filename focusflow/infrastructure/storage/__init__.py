"""Document reading for focusflow.

Read-only access to task documents, using Result values for explicit
error handling.
"""

from focusflow.infrastructure.storage.json_storage import JsonStorage
from focusflow.infrastructure.storage.task_reader import TaskReader

__all__ = [
    "JsonStorage",
    "TaskReader",
]
