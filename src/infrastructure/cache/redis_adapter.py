"""Redis adapter implementing CacheProtocol.

This adapter provides the Redis-specific implementation of the cache
protocol defined in the domain layer. It wraps the async Redis client,
applies the optional key namespace, and maps Redis exceptions to CacheError.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError with proper ErrorCode
- Returns Result types for all operations (never raises)
- Prefix deletion uses SCAN (incremental, non-blocking) then batched DEL
"""

import re

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError

# Characters with special meaning in Redis MATCH patterns
_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")

DEFAULT_DELETE_BATCH_SIZE = 500
SCAN_COUNT_HINT = 100


def _cache_failure(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    error: Exception,
    **details: object,
) -> Failure[CacheError]:
    code = (
        ErrorCode.CACHE_UNAVAILABLE
        if infrastructure_code is InfrastructureErrorCode.CACHE_CONNECTION_ERROR
        else ErrorCode.CACHE_OPERATION_FAILED
    )
    return Failure(
        error=CacheError(
            code=code,
            infrastructure_code=infrastructure_code,
            message=message,
            details={**details, "error": str(error), "type": type(error).__name__},
        )
    )


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
        _namespace: Optional prefix applied to every key ("<namespace>:<key>").
        _batch_size: Keys per DEL command in delete_by_prefix.
    """

    def __init__(
        self,
        redis_client: Redis,
        *,
        namespace: str | None = None,
        delete_batch_size: int = DEFAULT_DELETE_BATCH_SIZE,
    ) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
            namespace: Optional key namespace.
            delete_batch_size: Keys per DEL command when deleting by prefix.

        Raises:
            ValueError: If delete_batch_size is not positive.
        """
        if delete_batch_size <= 0:
            raise ValueError("delete_batch_size must be greater than 0")
        self._redis = redis_client
        self._namespace = namespace
        self._batch_size = delete_batch_size

    def _key(self, key: str) -> str:
        if self._namespace:
            return f"{self._namespace}:{key}"
        return key

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(self._key(key))
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get key '{key}' from cache",
                e,
                key=key,
            )
        # Redis returns bytes unless decode_responses=True
        if value is None:
            return Success(value=None)
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        try:
            if ttl is not None:
                await self._redis.setex(self._key(key), ttl, value)
            else:
                await self._redis.set(self._key(key), value)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to set key '{key}' in cache",
                e,
                key=key,
                ttl=ttl,
            )
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Args:
            key: Cache key to delete.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(self._key(key))
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete key '{key}' from cache",
                e,
                key=key,
            )
        return Success(value=deleted_count > 0)

    async def delete_by_prefix(self, prefix: str) -> Result[int, CacheError]:
        """Delete every key starting with ``prefix``.

        Enumerates matching keys with SCAN (so large keyspaces don't block
        the server) and deletes them in batches of ``delete_batch_size``.
        A key written after the scan passed its slot may survive.

        Args:
            prefix: Key prefix, without namespace.

        Returns:
            Result with number of keys deleted, or CacheError.
        """
        pattern = _GLOB_SPECIAL.sub(r"\\\1", self._key(prefix)) + "*"
        deleted = 0
        batch: list[str | bytes] = []
        try:
            async for found in self._redis.scan_iter(
                match=pattern, count=SCAN_COUNT_HINT
            ):
                batch.append(found)
                if len(batch) >= self._batch_size:
                    deleted += await self._redis.delete(*batch)
                    batch.clear()
            if batch:
                deleted += await self._redis.delete(*batch)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_SCAN_ERROR,
                f"Failed to delete keys with prefix '{prefix}'",
                e,
                prefix=prefix,
                deleted_before_failure=deleted,
            )
        return Success(value=deleted)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check).

        Returns:
            Result with True if Redis is reachable, or CacheError.
        """
        try:
            # Type ignore due to redis.asyncio ping() return type ambiguity
            await self._redis.ping()  # type: ignore[misc]
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                "Redis health check failed",
                e,
            )
        return Success(value=True)
