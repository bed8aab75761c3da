"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. All subscriptions
are made here, once, before the first publish. The EVENT_REGISTRY in
src/domain/events/registry.py declares which handler families every event
needs; tests/unit/test_core_container_events.py fails if this wiring drifts
from it.

Handler order per event: cache invalidation, then state changes (reports,
statistics), then the notification enqueue last.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        InMemoryEventBus with every side-effect handler subscribed.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(UserBanned(user=user, admin=admin, reason="spam"))
    """
    from src.core.container.infrastructure import (
        get_cache,
        get_logger,
        get_notification_queue,
        get_notification_templates,
    )
    from src.core.container.repositories import get_repositories
    from src.domain.events import (
        BanAutoExpired,
        PriceProposalEvaluated,
        ProposalAutoExpired,
        UserBanned,
        UserRegistered,
        UserUnlocked,
    )
    from src.infrastructure.events.handlers import (
        CacheInvalidationEventHandler,
        NotificationEventHandler,
        ReportEventHandler,
        StatisticsEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    repositories = get_repositories()

    event_bus = InMemoryEventBus(logger=logger)

    cache_handler = CacheInvalidationEventHandler(cache=get_cache(), logger=logger)
    report_handler = ReportEventHandler(
        reports=repositories.reports,
        users=repositories.users,
        logger=logger,
    )
    statistics_handler = StatisticsEventHandler(
        statistics=repositories.statistics,
        logger=logger,
    )
    notification_handler = NotificationEventHandler(
        queue=get_notification_queue(),
        templates=get_notification_templates(),
        logger=logger,
    )

    # Moderation
    event_bus.subscribe(UserBanned, cache_handler.handle_user_banned)
    event_bus.subscribe(UserBanned, report_handler.handle_user_banned)
    event_bus.subscribe(UserBanned, notification_handler.handle_user_banned)

    event_bus.subscribe(UserUnlocked, cache_handler.handle_user_unlocked)
    event_bus.subscribe(UserUnlocked, notification_handler.handle_user_unlocked)

    event_bus.subscribe(BanAutoExpired, cache_handler.handle_ban_auto_expired)
    event_bus.subscribe(BanAutoExpired, notification_handler.handle_ban_auto_expired)

    # Account
    event_bus.subscribe(UserRegistered, statistics_handler.handle_user_registered)
    event_bus.subscribe(UserRegistered, notification_handler.handle_user_registered)

    # Price proposals
    event_bus.subscribe(
        PriceProposalEvaluated, cache_handler.handle_price_proposal_evaluated
    )
    event_bus.subscribe(
        PriceProposalEvaluated, statistics_handler.handle_price_proposal_evaluated
    )
    event_bus.subscribe(
        PriceProposalEvaluated, notification_handler.handle_price_proposal_evaluated
    )

    event_bus.subscribe(
        ProposalAutoExpired, notification_handler.handle_proposal_auto_expired
    )

    logger.info(
        "event_bus_wired",
        subscriptions=sum(
            len(event_bus.handlers_for(event_type))
            for event_type in (
                UserBanned,
                UserUnlocked,
                BanAutoExpired,
                UserRegistered,
                PriceProposalEvaluated,
                ProposalAutoExpired,
            )
        ),
    )
    return event_bus
