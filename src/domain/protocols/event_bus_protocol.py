"""Event bus protocol (port) for domain events.

The domain defines the port; infrastructure provides the adapter
(InMemoryEventBus). The container builds the single instance and wires
every handler subscription at startup.

Usage:
    >>> from src.core.container import get_event_bus
    >>> from src.domain.events import UserBanned
    >>>
    >>> event_bus = get_event_bus()
    >>> await ban_repository.save(ban)  # Commit first
    >>> await event_bus.publish(UserBanned(user=user, admin=admin, reason="Spam"))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Type alias for async event handler functions.

Event handlers must:
    - Accept a single event parameter (a specific DomainEvent subclass)
    - Return None (side effects only)
    - Be async (async def)
    - Catch their own failures (they are logged, never raised)
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Isolation**: One handler failure must NOT prevent other handlers
           from executing, and never reaches the publisher.
        2. **Exact-type routing**: Handlers registered for a type only
           receive events of exactly that type (no inheritance matching).
        3. **Completion**: publish returns once every handler has run.
           Handlers that enqueue work have only queued it by then.
        4. **At-most-once**: No retries, no persistence.

    Handlers run in registration order; callers must not rely on that.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for a specific event type.

        Called during container initialization only.

        Args:
            event_type: Concrete event class to handle.
            handler: Async callable invoked with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all handlers registered for ``type(event)``.

        Must be called after the transaction that produced the event commits.
        No handlers registered is a no-op. Never raises.

        Args:
            event: Domain event to publish.
        """
        ...

    def handlers_for(self, event_type: type[DomainEvent]) -> tuple[EventHandler, ...]:
        """Read-only view of the handlers registered for ``event_type``.

        Args:
            event_type: Concrete event class.

        Returns:
            Handlers in registration order (empty tuple when none).
        """
        ...
