"""Cache key construction utilities.

Centralized key construction so handlers that invalidate and services that
populate the cache always agree on key shapes. Keys are partitioned by a
purpose prefix; the optional namespace is applied by RedisAdapter.

Taxonomy:
    users-list                  Paged user listings (bulk-deleted by prefix)
    user-info:<email>           Single user profile
    user-stats:<email>          Single user's proposal statistics
    station:<id>                Station details (and any sub-keys)
    top-users                   Leaderboards (bulk-deleted by prefix)

Usage:
    from src.infrastructure.cache.cache_keys import CacheKeys, CacheTTL

    await cache.delete(CacheKeys.user_info(event.user.email))
    await cache.set(CacheKeys.station(station_id), payload, ttl=CacheTTL.MEDIUM)
"""

from enum import IntEnum
from uuid import UUID


class CacheTTL(IntEnum):
    """Standard TTL presets in seconds."""

    SHORT = 5 * 60
    MEDIUM = 30 * 60
    LONG = 2 * 60 * 60
    VERY_LONG = 24 * 60 * 60


class CacheKeys:
    """Cache key taxonomy.

    Prefix constants are used with delete_by_prefix; the static methods
    build individual keys.

    Example:
        CacheKeys.user_stats("driver@example.com")  # "user-stats:driver@example.com"
        CacheKeys.station(station_id)               # "station:<uuid>"
    """

    USERS_LIST = "users-list"
    USER_INFO = "user-info"
    USER_STATS = "user-stats"
    STATION = "station"
    TOP_USERS = "top-users"

    @staticmethod
    def users_list(page: int, page_size: int) -> str:
        """Paged user listing key.

        Pattern: users-list:<page>:<page_size>
        """
        return f"{CacheKeys.USERS_LIST}:{page}:{page_size}"

    @staticmethod
    def user_info(email: str) -> str:
        """Single user profile key.

        Pattern: user-info:<email>
        """
        return f"{CacheKeys.USER_INFO}:{email}"

    @staticmethod
    def user_stats(email: str) -> str:
        """User proposal statistics key.

        Pattern: user-stats:<email>
        """
        return f"{CacheKeys.USER_STATS}:{email}"

    @staticmethod
    def station(station_id: UUID) -> str:
        """Station key, also the prefix for the station's sub-keys.

        Pattern: station:<id>
        """
        return f"{CacheKeys.STATION}:{station_id}"

    @staticmethod
    def top_users(limit: int) -> str:
        """Leaderboard key.

        Pattern: top-users:<limit>
        """
        return f"{CacheKeys.TOP_USERS}:{limit}"
