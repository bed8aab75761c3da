"""Side-effect runtime factory.

Builds the three long-lived loops (notification delivery, ban expiry,
proposal expiry) from settings and hands them to one SideEffectRuntime.
"""

from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.infrastructure.jobs.runtime import SideEffectRuntime


@lru_cache()
def get_side_effect_runtime() -> "SideEffectRuntime":
    """Get the side-effect runtime singleton (app-scoped).

    The workers share the event bus and notification queue singletons with
    the request path, so events published by sweeps reach the same handlers
    and notifications land in the same queue.

    Returns:
        SideEffectRuntime, not yet started.
    """
    from src.core.container.events import get_event_bus
    from src.core.container.infrastructure import (
        get_logger,
        get_notification_queue,
        get_notification_transport,
    )
    from src.core.container.repositories import get_repositories
    from src.infrastructure.jobs import (
        BanExpiryWorker,
        NotificationWorker,
        ProposalExpiryWorker,
        SideEffectRuntime,
    )

    settings = get_settings()
    logger = get_logger()
    repositories = get_repositories()
    event_bus = get_event_bus()
    queue = get_notification_queue()

    workers = [
        NotificationWorker(
            queue=queue,
            transport=get_notification_transport(),
            logger=logger,
        ),
        BanExpiryWorker(
            bans=repositories.bans,
            users=repositories.users,
            event_bus=event_bus,
            logger=logger,
            interval_seconds=settings.ban_expiry_interval_seconds,
        ),
        ProposalExpiryWorker(
            proposals=repositories.proposals,
            event_bus=event_bus,
            logger=logger,
            interval_seconds=settings.proposal_expiry_interval_seconds,
            expiry_window=timedelta(hours=settings.proposal_expiry_window_hours),
        ),
    ]
    return SideEffectRuntime(workers=workers, queue=queue, logger=logger)
