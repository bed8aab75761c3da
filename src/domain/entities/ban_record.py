"""Ban record domain entity.

Pure business logic, no framework dependencies.

Lifecycle:
    Active → (admin unban | expiry reconciliation) → Inactive

A ban without ``banned_until`` is permanent and is never lifted by the
ban-expiry worker; only an admin can lift it.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.value_objects import UserSnapshot


@dataclass
class BanRecord:
    """Ban imposed by an admin on a user.

    Attributes:
        id: Unique ban identifier.
        user: Snapshot of the banned user.
        admin_id: Admin who imposed the ban.
        reason: Free-text reason shown to the user.
        banned_at: When the ban started.
        banned_until: When the ban ends (None = permanent).
        is_active: Whether the ban is currently in force.
        unbanned_at: When the ban was lifted (None while active).
        unbanned_by_admin_id: Admin who lifted it (None for automatic expiry).

    Example:
        >>> ban = BanRecord(
        ...     id=uuid4(),
        ...     user=user,
        ...     admin_id=admin.id,
        ...     reason="Spam",
        ...     banned_at=now - timedelta(days=7),
        ...     banned_until=now - timedelta(seconds=1),
        ... )
        >>> ban.is_expired(now)
        True
    """

    id: UUID
    user: UserSnapshot
    admin_id: UUID
    reason: str
    banned_at: datetime
    banned_until: datetime | None = None
    is_active: bool = True
    unbanned_at: datetime | None = None
    unbanned_by_admin_id: UUID | None = None

    @property
    def is_permanent(self) -> bool:
        """Check if the ban has no end date."""
        return self.banned_until is None

    def is_expired(self, now: datetime) -> bool:
        """Check if an active, temporary ban has reached its end date.

        Args:
            now: Reference time (UTC).

        Returns:
            bool: True when active and ``banned_until <= now``.
        """
        if not self.is_active or self.banned_until is None:
            return False
        return self.banned_until <= now

    def expire(self, now: datetime) -> None:
        """Lift the ban automatically.

        Side Effects:
            - Sets is_active to False
            - Sets unbanned_at to ``now``
            - Leaves unbanned_by_admin_id empty (no admin involved)

        Raises:
            ValueError: If the ban is not active.
        """
        if not self.is_active:
            raise ValueError(f"Ban {self.id} is not active")
        self.is_active = False
        self.unbanned_at = now
