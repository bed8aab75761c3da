"""Dependency injection container (composition root).

Every factory is an lru_cache singleton so handlers, workers and the HTTP
host share one instance of each dependency. Tests reset a factory with
``factory.cache_clear()``.

Modules:
    - infrastructure: logger, cache, notification queue/transport/templates
    - repositories: repository bundle
    - events: event bus with all subscriptions
    - runtime: side-effect runtime (background workers)
"""

from src.core.config import get_settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_cache,
    get_logger,
    get_notification_queue,
    get_notification_templates,
    get_notification_transport,
)
from src.core.container.repositories import Repositories, get_repositories
from src.core.container.runtime import get_side_effect_runtime

ALL_FACTORIES = (
    get_settings,
    get_logger,
    get_cache,
    get_notification_queue,
    get_notification_transport,
    get_notification_templates,
    get_repositories,
    get_event_bus,
    get_side_effect_runtime,
)


def clear_container_caches() -> None:
    """Drop every cached singleton (used between tests)."""
    for factory in ALL_FACTORIES:
        factory.cache_clear()


__all__ = [
    "ALL_FACTORIES",
    "Repositories",
    "clear_container_caches",
    "get_cache",
    "get_event_bus",
    "get_logger",
    "get_notification_queue",
    "get_notification_templates",
    "get_notification_transport",
    "get_repositories",
    "get_settings",
    "get_side_effect_runtime",
]
