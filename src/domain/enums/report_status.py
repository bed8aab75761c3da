"""User report moderation states.

State Machine:
    PENDING → ACCEPTED | REJECTED

    - PENDING: Filed by a user, not yet reviewed
    - ACCEPTED: Confirmed by an admin (also set when the reported user is banned)
    - REJECTED: Dismissed by an admin
"""

from enum import Enum


class ReportStatus(str, Enum):
    """User report moderation states."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
