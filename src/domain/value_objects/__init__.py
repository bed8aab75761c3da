"""Domain value objects.

Immutable values with no identity of their own. Domain events carry these
snapshots so that handlers never need to look anything up.

Value Objects:
    - UserSnapshot: Identity fields of a user or admin at event time
    - StationSnapshot: Station identity and address at event time
    - ProposalSnapshot: Price proposal details at event time
    - NotificationMessage: Opaque outbound message (recipient, subject, body)
    - RenderedNotification: Subject/body pair produced by templates
"""

from src.domain.value_objects.notification_message import (
    NotificationMessage,
    RenderedNotification,
)
from src.domain.value_objects.proposal_snapshot import (
    ProposalSnapshot,
    StationSnapshot,
)
from src.domain.value_objects.user_snapshot import UserSnapshot

__all__ = [
    "NotificationMessage",
    "ProposalSnapshot",
    "RenderedNotification",
    "StationSnapshot",
    "UserSnapshot",
]
