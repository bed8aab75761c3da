"""Side-effect event handlers.

Each handler class groups the side effects of one family; each method
subscribes to exactly one event type and never raises.

Handlers:
    - CacheInvalidationEventHandler: Drops stale cache entries
    - NotificationEventHandler: Enqueues outbound notifications
    - ReportEventHandler: Resolves pending reports of banned users
    - StatisticsEventHandler: Maintains proposal statistics

Usage:
    >>> from src.infrastructure.events.handlers import CacheInvalidationEventHandler
    >>>
    >>> cache_handler = CacheInvalidationEventHandler(cache=cache, logger=logger)
    >>> event_bus.subscribe(UserBanned, cache_handler.handle_user_banned)
"""

from src.infrastructure.events.handlers.cache_invalidation_event_handler import (
    CacheInvalidationEventHandler,
)
from src.infrastructure.events.handlers.notification_event_handler import (
    NotificationEventHandler,
)
from src.infrastructure.events.handlers.report_event_handler import (
    ReportEventHandler,
)
from src.infrastructure.events.handlers.statistics_event_handler import (
    StatisticsEventHandler,
)

__all__ = [
    "CacheInvalidationEventHandler",
    "NotificationEventHandler",
    "ReportEventHandler",
    "StatisticsEventHandler",
]
