"""User moderation domain events.

Published by the moderation service after a ban or unban commits, and by
the ban-expiry worker after a sweep persists.

Handlers:
- CacheInvalidationEventHandler: ALL events (users-list, user-info, user-stats)
- NotificationEventHandler: ALL events
- ReportEventHandler: UserBanned only
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.events.base_event import DomainEvent
from src.domain.value_objects import UserSnapshot


@dataclass(frozen=True, kw_only=True)
class UserBanned(DomainEvent):
    """Admin banned a user.

    Triggers:
    - CacheInvalidationEventHandler: Drop user listing and per-user entries
    - NotificationEventHandler: Tell the user they were banned
    - ReportEventHandler: Resolve pending reports against the user

    Attributes:
        user: Banned user.
        admin: Admin who imposed the ban.
        reason: Reason shown to the user.
        duration_days: Ban length in days (None = permanent).
    """

    user: UserSnapshot
    admin: UserSnapshot
    reason: str
    duration_days: int | None = None


@dataclass(frozen=True, kw_only=True)
class UserUnlocked(DomainEvent):
    """Admin lifted a user's ban.

    Triggers:
    - CacheInvalidationEventHandler: Drop user listing and per-user entries
    - NotificationEventHandler: Tell the user the ban was lifted

    Attributes:
        user: Unbanned user.
        admin: Admin who lifted the ban.
    """

    user: UserSnapshot
    admin: UserSnapshot


@dataclass(frozen=True, kw_only=True)
class BanAutoExpired(DomainEvent):
    """Temporary ban reached its end date and was lifted by the expiry worker.

    Triggers:
    - CacheInvalidationEventHandler: Drop user listing and per-user entries
    - NotificationEventHandler: Tell the user the ban ended

    Attributes:
        user: User whose ban ended.
        ban_id: Expired ban record.
        reason: Original ban reason.
        banned_at: When the ban started.
        banned_until: Scheduled end of the ban.
    """

    user: UserSnapshot
    ban_id: UUID
    reason: str
    banned_at: datetime
    banned_until: datetime
