"""Account lifecycle domain events.

Handlers:
- NotificationEventHandler: Send the account confirmation link
- StatisticsEventHandler: Create a zeroed statistics record
"""

from dataclasses import dataclass

from src.domain.events.base_event import DomainEvent
from src.domain.value_objects import UserSnapshot


@dataclass(frozen=True, kw_only=True)
class UserRegistered(DomainEvent):
    """User account created.

    Attributes:
        user: Newly registered user.
        confirmation_token: Email confirmation token (for the link only;
            never logged).
    """

    user: UserSnapshot
    confirmation_token: str
