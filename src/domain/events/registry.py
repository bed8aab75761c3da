"""Domain Events Registry - Single Source of Truth.

This registry catalogs ALL domain events in the system together with the
side-effect handler families each one requires. Used for:
- Container wiring review (every subscription is explicit)
- Compliance tests (wiring must match the registry, no drift)
- Gap detection (missing handler methods)

Adding new events:
1. Define event dataclass in the appropriate *_events.py file
2. Add entry to EVENT_REGISTRY below
3. Run tests - they'll tell you which handler methods and container
   subscriptions are missing
"""

from dataclasses import dataclass
from enum import Enum
from typing import Type

from src.domain.events.account_events import UserRegistered
from src.domain.events.base_event import DomainEvent
from src.domain.events.moderation_events import (
    BanAutoExpired,
    UserBanned,
    UserUnlocked,
)
from src.domain.events.proposal_events import (
    PriceProposalEvaluated,
    ProposalAutoExpired,
)


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    MODERATION = "moderation"
    ACCOUNT = "account"
    PRICE_PROPOSAL = "price_proposal"


class EventOrigin(Enum):
    """Who publishes the event."""

    REQUEST = "request"  # Published by a service after its transaction commits
    RECONCILIATION = "reconciliation"  # Published by a worker after a sweep


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        origin: Request path or reconciliation worker.
        requires_cache: CacheInvalidationEventHandler handles this event.
        requires_notification: NotificationEventHandler handles this event.
        requires_reports: ReportEventHandler handles this event.
        requires_statistics: StatisticsEventHandler handles this event.
    """

    event_class: Type[DomainEvent]
    category: EventCategory
    origin: EventOrigin = EventOrigin.REQUEST
    requires_cache: bool = False
    requires_notification: bool = True  # Default: every event notifies someone
    requires_reports: bool = False
    requires_statistics: bool = False


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY - Single Source of Truth
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    # Moderation
    EventMetadata(
        event_class=UserBanned,
        category=EventCategory.MODERATION,
        requires_cache=True,
        requires_reports=True,  # Resolve pending reports against the user
    ),
    EventMetadata(
        event_class=UserUnlocked,
        category=EventCategory.MODERATION,
        requires_cache=True,
    ),
    EventMetadata(
        event_class=BanAutoExpired,
        category=EventCategory.MODERATION,
        origin=EventOrigin.RECONCILIATION,
        requires_cache=True,
    ),
    # Account
    EventMetadata(
        event_class=UserRegistered,
        category=EventCategory.ACCOUNT,
        requires_statistics=True,  # Zeroed statistics record
    ),
    # Price proposals
    EventMetadata(
        event_class=PriceProposalEvaluated,
        category=EventCategory.PRICE_PROPOSAL,
        requires_cache=True,
        requires_statistics=True,
    ),
    EventMetadata(
        event_class=ProposalAutoExpired,
        category=EventCategory.PRICE_PROPOSAL,
        origin=EventOrigin.RECONCILIATION,
    ),
]


def get_all_events() -> list[Type[DomainEvent]]:
    """Get all registered event classes.

    Returns:
        List of event classes in registry.
    """
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_events_requiring_handler(handler_type: str) -> list[Type[DomainEvent]]:
    """Get events requiring a specific handler family.

    Args:
        handler_type: "cache", "notification", "reports", or "statistics"

    Returns:
        List of event classes requiring that handler.

    Raises:
        ValueError: If handler_type is invalid.
    """
    field_map = {
        "cache": "requires_cache",
        "notification": "requires_notification",
        "reports": "requires_reports",
        "statistics": "requires_statistics",
    }

    if handler_type not in field_map:
        raise ValueError(
            f"Invalid handler_type: {handler_type}. "
            f"Must be one of: {list(field_map.keys())}"
        )

    field = field_map[handler_type]
    return [meta.event_class for meta in EVENT_REGISTRY if getattr(meta, field)]


def get_expected_handler_count(event_class: Type[DomainEvent]) -> int:
    """Number of handler subscriptions the container must wire for an event.

    Args:
        event_class: Registered event class.

    Returns:
        int: Count of required handler families.

    Raises:
        KeyError: If the event is not registered.
    """
    for meta in EVENT_REGISTRY:
        if meta.event_class is event_class:
            return sum(
                [
                    meta.requires_cache,
                    meta.requires_notification,
                    meta.requires_reports,
                    meta.requires_statistics,
                ]
            )
    raise KeyError(event_class.__name__)


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dict with counts by category, origin and handler requirements.
    """
    from collections import Counter

    return {
        "total_events": len(EVENT_REGISTRY),
        "by_category": dict(Counter(meta.category.value for meta in EVENT_REGISTRY)),
        "by_origin": dict(Counter(meta.origin.value for meta in EVENT_REGISTRY)),
        "requiring_cache": sum(1 for m in EVENT_REGISTRY if m.requires_cache),
        "requiring_notification": sum(
            1 for m in EVENT_REGISTRY if m.requires_notification
        ),
        "requiring_reports": sum(1 for m in EVENT_REGISTRY if m.requires_reports),
        "requiring_statistics": sum(
            1 for m in EVENT_REGISTRY if m.requires_statistics
        ),
    }
