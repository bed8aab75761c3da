"""Result types for railway-oriented programming.

Infrastructure adapters (cache, notification transports) never raise to their
callers. They return a Result so that every failure path is explicit at the
call site and side-effect handlers can log and move on.

Usage:
    result = await cache.delete("user-info:driver@example.com")
    match result:
        case Success(value=True):
            pass  # Key removed
        case Success(value=False):
            pass  # Key was already gone
        case Failure(error=error):
            logger.warning("cache_delete_failed", error=str(error))
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
