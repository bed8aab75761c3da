"""Error codes handlers and workers branch on.

Adapters narrow their own InfrastructureErrorCode down to one of these.
"""

from enum import Enum


class ErrorCode(Enum):
    """Caller-facing error codes (ENTITY_REASON)."""

    # Cache
    CACHE_UNAVAILABLE = "cache_unavailable"
    CACHE_OPERATION_FAILED = "cache_operation_failed"

    # Notifications
    NOTIFICATION_DELIVERY_FAILED = "notification_delivery_failed"
    NOTIFICATION_REJECTED = "notification_rejected"
