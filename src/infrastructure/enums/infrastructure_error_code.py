"""Failure codes raised by the Redis and SES adapters.

Adapters record the precise failure here and pick the coarser ErrorCode
that handlers and workers branch on:

    CACHE_CONNECTION_ERROR          → CACHE_UNAVAILABLE
    CACHE_GET/SET/DELETE/SCAN_ERROR → CACHE_OPERATION_FAILED
    EXTERNAL_SERVICE_REJECTED       → NOTIFICATION_REJECTED
    EXTERNAL_SERVICE_UNAVAILABLE    → NOTIFICATION_DELIVERY_FAILED
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Adapter-level failure codes (logged, never shown to users)."""

    # Redis
    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
    CACHE_SCAN_ERROR = "cache_scan_error"

    # AWS SES
    EXTERNAL_SERVICE_UNAVAILABLE = "external_service_unavailable"
    EXTERNAL_SERVICE_REJECTED = "external_service_rejected"
