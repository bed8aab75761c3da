"""BanRepository protocol for ban record persistence.

Port (interface) for hexagonal architecture.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from src.domain.entities import BanRecord


class BanRepository(Protocol):
    """Ban repository protocol (port).

    Methods:
        find_expired_active: Active temporary bans whose end date has passed
        save_all: Persist modified ban records in one commit
    """

    async def find_expired_active(self, now: datetime) -> list[BanRecord]:
        """Find bans with ``is_active`` and ``banned_until <= now``.

        Permanent bans (no ``banned_until``) are never returned.

        Args:
            now: Reference time (UTC).

        Returns:
            Matching ban records (empty list if none).
        """
        ...

    async def save_all(self, bans: Sequence[BanRecord]) -> None:
        """Persist ban records.

        Raises:
            Exception: Implementation-specific persistence error. The caller
                treats it as a failed sweep.
        """
        ...
