"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: Sequential, failure-isolating event bus

Event Handlers (see src.infrastructure.events.handlers):
    - CacheInvalidationEventHandler
    - NotificationEventHandler
    - ReportEventHandler
    - StatisticsEventHandler

Wiring lives in src.core.container.events.
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
