"""Result type for expected failures in domain and application operations.

Operations such as committing an edited duration can fail for reasons
the user is expected to hit (typing "abc" into a number field). Those
outcomes are returned as values instead of raised, so the caller decides
how to surface them.

Example usage:
    >>> def parse_minutes(text: str) -> Result[int, str]:
    ...     if not text.isdigit():
    ...         return Err(f"Not a number: {text!r}")
    ...     return Ok(int(text))
    ...
    >>> result = parse_minutes("25")
    >>> if is_ok(result):
    ...     print(f"Minutes: {result.value}")
    Minutes: 25
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Description of what went wrong.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is an Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is an Err."""
    return isinstance(result, Err)


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Chain a fallible step after a successful result.

    Used to sequence steps that may each fail, such as reading a file
    and then validating its contents. An Err short-circuits.

    Args:
        result: The result to continue from.
        fn: Step applied to the Ok value.

    Returns:
        The step's Result, or the original Err.
    """
    if isinstance(result, Ok):
        return fn(result.value)
    return result


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Return the Ok value, or ``default`` for an Err."""
    if isinstance(result, Ok):
        return result.value
    return default
