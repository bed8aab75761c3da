"""User snapshot value object.

Captures the identity fields handlers need (email for cache keys and
notifications, username for greetings) at the moment an event happened.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class UserSnapshot:
    """Immutable identity of a user (or admin) at event time.

    Attributes:
        id: User identifier.
        email: Email address (cache keys and notification recipient).
        username: Display name used in notification bodies.

    Example:
        >>> user = UserSnapshot(id=uuid4(), email="driver@example.com", username="driver")
        >>> user.email
        'driver@example.com'
    """

    id: UUID
    email: str
    username: str
