"""Price proposal domain events.

Handlers:
- CacheInvalidationEventHandler: PriceProposalEvaluated (user-stats always;
  top-users and station entries when accepted)
- NotificationEventHandler: ALL events
- StatisticsEventHandler: PriceProposalEvaluated
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.events.base_event import DomainEvent
from src.domain.value_objects import ProposalSnapshot


@dataclass(frozen=True, kw_only=True)
class PriceProposalEvaluated(DomainEvent):
    """Admin accepted or rejected a price proposal.

    Attributes:
        proposal: Evaluated proposal.
        accepted: True if accepted (station price updated).
    """

    proposal: ProposalSnapshot
    accepted: bool


@dataclass(frozen=True, kw_only=True)
class ProposalAutoExpired(DomainEvent):
    """Pending proposal was rejected because nobody reviewed it in time.

    Attributes:
        proposal: Expired proposal.
        expired_at: When the expiry worker rejected it.
    """

    proposal: ProposalSnapshot
    expired_at: datetime
