"""Pytest configuration for async testing.

This configuration ensures:
1. Async tests are marked for pytest-asyncio
2. Container singletons are reset between tests
3. A shared mock logger fixture
"""

import inspect
from unittest.mock import MagicMock

import fakeredis
import fakeredis.aioredis
import pytest
import pytest_asyncio

from src.core.container import clear_container_caches

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests across handlers and workers"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture(autouse=True)
def reset_container(monkeypatch):
    """Run every test with fresh singletons and a testing environment.

    Factories in src.core.container are lru_cached; the queue and runtime
    they build hold asyncio primitives that must not leak across event
    loops.
    """
    monkeypatch.setenv("ENVIRONMENT", "testing")
    clear_container_caches()
    yield
    clear_container_caches()


@pytest.fixture
def mock_logger():
    """MagicMock logger whose bind() returns itself.

    Workers bind their name onto the logger; returning the same mock keeps
    every call assertable in one place.
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest_asyncio.fixture
async def fake_redis():
    """Fresh fakeredis client on its own server.

    A dedicated FakeServer keeps keys from leaking between tests.
    """
    client = fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer())
    yield client
    await client.aclose()
