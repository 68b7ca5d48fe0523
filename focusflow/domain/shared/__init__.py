"""Shared domain building blocks.

- Result type for expected failures
- Base domain event

Example usage:
    >>> from focusflow.domain.shared import Ok, Err, Result
    >>>
    >>> def find_subtask(subtask_id: str) -> Result[str, str]:
    ...     if subtask_id == "missing":
    ...         return Err("Subtask not found")
    ...     return Ok(subtask_id)
"""

from focusflow.domain.shared.events import DomainEvent
from focusflow.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
    is_err,
    is_ok,
    unwrap_or,
)

__all__ = [
    # Result
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "flat_map",
    "unwrap_or",
    # Events
    "DomainEvent",
]
