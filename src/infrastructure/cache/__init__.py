"""Cache infrastructure package.

Architecture:
- RedisAdapter: Concrete Redis implementation of CacheProtocol
- CacheKeys / CacheTTL: Key taxonomy and TTL presets
- get_or_set_json: Cache-aside helper for read-path services
- Use src.core.container.get_cache() for dependency injection
"""

from src.infrastructure.cache.cache_aside import get_or_set_json
from src.infrastructure.cache.cache_keys import CacheKeys, CacheTTL
from src.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = [
    "CacheKeys",
    "CacheTTL",
    "RedisAdapter",
    "get_or_set_json",
]
