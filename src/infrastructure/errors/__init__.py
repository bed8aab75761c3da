"""Adapter error types.

Usage:
    from src.infrastructure.errors import CacheError, ExternalServiceError
"""

from src.infrastructure.errors.infrastructure_error import (
    CacheError,
    ExternalServiceError,
    InfrastructureError,
)

__all__ = [
    "CacheError",
    "ExternalServiceError",
    "InfrastructureError",
]
