"""Errors returned by the cache and notification adapters.

Both families travel inside Failure results. Cache failures are logged by
the invalidation handler and otherwise ignored; transport failures are
logged by the notification worker and the message is dropped.
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """DomainError that also records the adapter-level failure.

    Attributes:
        infrastructure_code: Precise adapter failure, if known.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Redis command or connection failure.

    ``details`` carries the key (or prefix) and the redis-py exception text.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalServiceError(InfrastructureError):
    """Mail relay failure.

    Attributes:
        service_name: Relay identifier, e.g. "aws_ses".
    """

    service_name: str
