"""ReportRepository protocol for user report persistence."""

from datetime import datetime
from typing import Protocol
from uuid import UUID


class ReportRepository(Protocol):
    """User report repository protocol (port)."""

    async def resolve_pending_for_user(
        self, reported_user_id: UUID, admin_id: UUID, reviewed_at: datetime
    ) -> int:
        """Mark every pending report against a user as accepted.

        Reports already reviewed are left untouched, so running twice is a
        no-op.

        Args:
            reported_user_id: User the reports are about.
            admin_id: Admin the resolution is attributed to.
            reviewed_at: Review timestamp.

        Returns:
            int: Number of reports resolved.
        """
        ...
