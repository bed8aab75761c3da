"""Unit tests for cache key taxonomy and the cache-aside helper.

Tests cover:
- Key shapes and TTL presets
- Hit, miss (populate), corrupt entry, and cache outage (fail-open)
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.cache.cache_aside import get_or_set_json
from src.infrastructure.cache.cache_keys import CacheKeys, CacheTTL
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError
from tests.factories import logged_events


@pytest.mark.unit
class TestCacheKeys:
    """Test key construction."""

    def test_key_shapes(self):
        station_id = uuid4()

        assert CacheKeys.users_list(2, 20) == "users-list:2:20"
        assert CacheKeys.user_info("a@example.com") == "user-info:a@example.com"
        assert CacheKeys.user_stats("a@example.com") == "user-stats:a@example.com"
        assert CacheKeys.station(station_id) == f"station:{station_id}"
        assert CacheKeys.top_users(10) == "top-users:10"

    def test_list_keys_start_with_their_prefix(self):
        assert CacheKeys.users_list(1, 10).startswith(CacheKeys.USERS_LIST)
        assert CacheKeys.top_users(5).startswith(CacheKeys.TOP_USERS)

    def test_ttl_presets(self):
        assert CacheTTL.SHORT == 300
        assert CacheTTL.MEDIUM == 1800
        assert CacheTTL.LONG == 7200
        assert CacheTTL.VERY_LONG == 86400


@pytest.mark.unit
class TestGetOrSetJson:
    """Test the cache-aside read path."""

    @pytest.mark.asyncio
    async def test_miss_populates_then_hit_skips_factory(self, fake_redis):
        # Arrange
        cache = RedisAdapter(fake_redis)
        factory = AsyncMock(return_value={"points": 3})

        # Act
        first = await get_or_set_json(cache, "user-stats:a@example.com", factory, 60)
        second = await get_or_set_json(cache, "user-stats:a@example.com", factory, 60)

        # Assert
        assert first == second == {"points": 3}
        factory.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_corrupt_entry_falls_back_to_factory(self, fake_redis, mock_logger):
        cache = RedisAdapter(fake_redis)
        await cache.set("top-users:10", "not json{")
        factory = AsyncMock(return_value=[1, 2])

        result = await get_or_set_json(cache, "top-users:10", factory, 60, mock_logger)

        assert result == [1, 2]
        assert logged_events(mock_logger, "warning") == ["cache_entry_corrupt"]
        assert await cache.get("top-users:10") == Success(value="[1, 2]")

    @pytest.mark.asyncio
    async def test_cache_outage_is_transparent(self, mock_logger):
        # Arrange
        error = CacheError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
            message="down",
        )
        cache = MagicMock()
        cache.get = AsyncMock(return_value=Failure(error=error))
        cache.set = AsyncMock(return_value=Failure(error=error))
        factory = AsyncMock(return_value={"id": 1})

        # Act
        result = await get_or_set_json(cache, "user-info:a", factory, 60, mock_logger)

        # Assert
        assert result == {"id": 1}
        assert logged_events(mock_logger, "warning") == [
            "cache_get_failed",
            "cache_set_failed",
        ]

    @pytest.mark.asyncio
    async def test_unserializable_value_returned_uncached(self, mock_logger):
        cache = MagicMock()
        cache.get = AsyncMock(return_value=Success(value=None))
        cache.set = AsyncMock()
        value = {"when": object()}

        result = await get_or_set_json(
            cache, "k", AsyncMock(return_value=value), 60, mock_logger
        )

        assert result is value
        cache.set.assert_not_called()
        assert logged_events(mock_logger, "warning") == ["cache_serialize_failed"]

    @pytest.mark.asyncio
    async def test_factory_errors_propagate(self):
        cache = MagicMock()
        cache.get = AsyncMock(return_value=Success(value=None))

        with pytest.raises(LookupError):
            await get_or_set_json(
                cache, "k", AsyncMock(side_effect=LookupError("gone")), 60
            )

    @pytest.mark.asyncio
    async def test_default_ttl_comes_from_settings(self, monkeypatch):
        monkeypatch.setenv("CACHE_DEFAULT_TTL_SECONDS", "120")
        cache = MagicMock()
        cache.get = AsyncMock(return_value=Success(value=None))
        cache.set = AsyncMock(return_value=Success(value=None))

        await get_or_set_json(cache, "top-users:10", AsyncMock(return_value=[1]))

        cache.set.assert_awaited_once_with("top-users:10", "[1]", ttl=120)

    @pytest.mark.asyncio
    async def test_default_ttl_applied_in_redis(self, fake_redis):
        redis_cache = RedisAdapter(redis_client=fake_redis)

        await get_or_set_json(
            redis_cache, "user-stats:a@example.com", AsyncMock(return_value={"n": 1})
        )

        ttl = await fake_redis.ttl("user-stats:a@example.com")
        assert 0 < ttl <= 1800
