"""Notification template protocol.

Pure functions turning user and event details into a subject/body pair.
The handler decides WHEN to notify; templates decide WHAT it says.
"""

from datetime import datetime
from typing import Protocol

from src.domain.value_objects import (
    ProposalSnapshot,
    RenderedNotification,
    UserSnapshot,
)


class NotificationTemplateProtocol(Protocol):
    """Renders notification subjects and bodies."""

    def user_banned(
        self, user: UserSnapshot, reason: str, duration_days: int | None
    ) -> RenderedNotification:
        """Ban notice (``duration_days`` None = permanent)."""
        ...

    def user_unlocked(self, user: UserSnapshot) -> RenderedNotification:
        """Admin unban notice."""
        ...

    def ban_auto_expired(
        self, user: UserSnapshot, reason: str, banned_until: datetime
    ) -> RenderedNotification:
        """Automatic unban notice after the ban period ended."""
        ...

    def account_confirmation(
        self, user: UserSnapshot, confirmation_token: str
    ) -> RenderedNotification:
        """Account confirmation link."""
        ...

    def proposal_evaluated(
        self, proposal: ProposalSnapshot, accepted: bool
    ) -> RenderedNotification:
        """Proposal verdict notice."""
        ...

    def proposal_auto_expired(
        self, proposal: ProposalSnapshot
    ) -> RenderedNotification:
        """Notice that a proposal expired without review."""
        ...
