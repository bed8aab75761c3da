"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry. Suitable for
the single-process deployment: request handling and background workers share
one event loop and one bus instance.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type → ordered handlers)
    - Handlers awaited one after another in registration order
    - Every invocation isolated: failures logged, never propagated

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(UserBanned, cache_handler.handle_user_banned)
    >>> bus.subscribe(UserBanned, notification_handler.handle_user_banned)
    >>> await bus.publish(UserBanned(user=user, admin=admin, reason="Spam"))
"""

from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class InMemoryEventBus:
    """In-memory event bus with per-handler failure isolation.

    Handlers for one event run sequentially, so a slow handler delays the
    ones registered after it, but none of them can cancel or break another.
    No retries and no persistence: delivery is at-most-once.

    Thread Safety:
        NOT thread-safe (single event loop design). Subscriptions happen
        once, during container initialization.

    Attributes:
        _handlers: Event class → handlers in registration order.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning level) and event
                publishing (debug level).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Concrete event class. Only exact type matches are
                dispatched (no inheritance matching).
            handler: Async callable invoked with the event.

        Notes:
            - No duplicate detection (same handler registered twice runs twice)
        """
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: type[DomainEvent]) -> tuple[EventHandler, ...]:
        """Handlers registered for ``event_type``, in registration order."""
        return tuple(self._handlers.get(event_type, ()))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Await each handler in registration order
            4. Log any handler exception (warning level) and continue
            5. Return once every handler has run (never raises)

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = self.handlers_for(event_type)

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=_handler_name(handler),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
