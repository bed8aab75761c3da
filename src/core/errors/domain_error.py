"""Base error value carried by Failure results.

Adapters return errors instead of raising them, so DomainError is a plain
frozen dataclass rather than an Exception subclass. Subclasses add fields
with further dataclass inheritance.

Usage:
    Failure(error=DomainError(code=ErrorCode.CACHE_UNAVAILABLE, message="..."))
"""

from dataclasses import dataclass
from typing import Any

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value (not raised).

    Attributes:
        code: What callers branch on.
        message: Text for logs.
        details: Structured context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
