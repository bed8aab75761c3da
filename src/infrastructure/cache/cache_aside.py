"""Cache-aside read helper.

Read-path services call get_or_set_json to serve from cache when possible
and fall back to the authoritative source otherwise. Cache problems never
reach the caller: a failed read or write, or an undecodable entry, just
means the factory result is used directly.
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any

from src.core.config import get_settings
from src.core.result import Failure, Success
from src.domain.protocols import CacheProtocol, LoggerProtocol


async def get_or_set_json(
    cache: CacheProtocol,
    key: str,
    factory: Callable[[], Awaitable[Any]],
    ttl: int | None = None,
    logger: LoggerProtocol | None = None,
) -> Any:
    """Return the cached JSON value for ``key``, populating it on a miss.

    Args:
        cache: Cache store.
        key: Cache key.
        factory: Async callable producing the value from persisted state.
            Its exceptions propagate to the caller.
        ttl: Time to live in seconds for a newly cached value. None uses
            the configured cache_default_ttl_seconds.
        logger: Optional logger for cache failures.

    Returns:
        The cached or freshly produced value.

    Example:
        stats = await get_or_set_json(
            cache,
            CacheKeys.user_stats(email),
            lambda: statistics_service.load(email),
            ttl=CacheTTL.MEDIUM,
        )
    """
    match await cache.get(key):
        case Success(value=cached) if cached is not None:
            try:
                return json.loads(cached)
            except json.JSONDecodeError:
                if logger:
                    logger.warning("cache_entry_corrupt", cache_key=key)
        case Failure(error=error):
            if logger:
                logger.warning("cache_get_failed", cache_key=key, error=error.message)

    value = await factory()

    try:
        serialized = json.dumps(value)
    except (TypeError, ValueError) as e:
        if logger:
            logger.warning("cache_serialize_failed", cache_key=key, error=str(e))
        return value

    if ttl is None:
        ttl = get_settings().cache_default_ttl_seconds
    result = await cache.set(key, serialized, ttl=ttl)
    if isinstance(result, Failure) and logger:
        logger.warning("cache_set_failed", cache_key=key, error=result.error.message)
    return value
