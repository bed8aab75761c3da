"""UserRepository protocol for the user lookups side effects need.

Only the narrow slice used by handlers and workers; the full user CRUD
lives in the surrounding application.
"""

from typing import Protocol
from uuid import UUID

from src.domain.value_objects import UserSnapshot


class UserRepository(Protocol):
    """User repository protocol (port)."""

    async def find_by_id(self, user_id: UUID) -> UserSnapshot | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            UserSnapshot if found, None otherwise.
        """
        ...

    async def clear_lockout(self, user_id: UUID) -> bool:
        """Clear a user's lockout and reset failed-access counters.

        Args:
            user_id: User to unlock.

        Returns:
            bool: True if the user exists and was unlocked, False if not found.
        """
        ...
