"""Base domain event class.

Domain events represent "things that happened" in the business domain and
are always named in past tense (e.g., UserBanned, PriceProposalEvaluated).
They are published after the transaction that produced them commits and
carry immutable snapshots, so handlers never look anything up.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class UserUnlocked(DomainEvent):
    ...     user: UserSnapshot
    ...     admin: UserSnapshot
    >>>
    >>> event = UserUnlocked(user=user, admin=admin)
    >>> event.event_id  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (UserBanned, NOT BanUser)
        3. Be frozen dataclasses (handlers cannot mutate them)
        4. Use kw_only=True (force keyword arguments for clarity)
        5. Carry snapshots, never live entities

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided. Used for log correlation.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Notes:
        - Publish exactly once per committed transaction, after persistence
          succeeds; never on rollback
        - Delivery is at-most-once (no outbox, no retries)
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Concrete event class name, used as the ``event_type`` log field."""
        return type(self).__name__
