"""Domain events module.

Exports every domain event and the base class. Events decouple the services
that commit business changes from the side effects those changes trigger
(cache invalidation, notifications, report clearing, statistics).

Usage:
    >>> from src.domain.events import UserBanned
    >>>
    >>> event = UserBanned(user=user, admin=admin, reason="Spam", duration_days=7)
    >>> await event_bus.publish(event)
"""

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

__all__ = [
    "BanAutoExpired",
    "DomainEvent",
    "PriceProposalEvaluated",
    "ProposalAutoExpired",
    "UserBanned",
    "UserRegistered",
    "UserUnlocked",
]
