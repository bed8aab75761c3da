"""Cache protocol for domain layer.

Defines the cache interface side-effect handlers and read-path services need,
without knowing about any specific implementation. Infrastructure adapters
implement this protocol to provide caching functionality.

Architecture:
- Protocol-based - uses structural typing
- All operations return Result types and never raise
- Fail-open strategy: cache failures never break core functionality
- Every entry is derivable from persisted state, so losing one is safe
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class CacheProtocol(Protocol):
    """Cache protocol - what the domain needs from the cache store.

    Keys are plain strings from the cache key taxonomy (``users-list``,
    ``user-info:<email>``, ``user-stats:<email>``, ``station:<id>``,
    ``top-users``). Namespacing is the adapter's concern.
    """

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.

        Example:
            result = await cache.get("user-info:driver@example.com")
            match result:
                case Success(value) if value:
                    user_info = json.loads(value)
                case Success(None):
                    # Cache miss
                    pass
                case Failure(error):
                    # Cache error - fail open
                    logger.warning("cache_get_failed", error=error.message)
        """
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Set value in cache.

        Args:
            key: Cache key.
            value: Value to cache (string).
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete a single key.

        Args:
            key: Cache key to delete.

        Returns:
            Result with True if the key was deleted, False if it didn't exist,
            or CacheError.
        """
        ...

    async def delete_by_prefix(self, prefix: str) -> Result[int, DomainError]:
        """Delete every key starting with ``prefix``.

        Keys are enumerated incrementally and deleted in batches. Not atomic
        with respect to concurrent writers: a key written between
        enumeration and deletion may survive.

        Args:
            prefix: Key prefix (e.g., "users-list", "station:<id>").

        Returns:
            Result with number of keys deleted, or CacheError.

        Example:
            result = await cache.delete_by_prefix("users-list")
            match result:
                case Success(count):
                    logger.debug("cache_prefix_deleted", count=count)
                case Failure(_):
                    # Fail open
                    pass
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Check cache connectivity (health check).

        Returns:
            Result with True if cache is reachable, or CacheError.
        """
        ...
