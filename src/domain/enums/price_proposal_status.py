"""Price proposal review states.

State Machine:
    PENDING → ACCEPTED | REJECTED

    - PENDING: Submitted by a driver, awaiting admin review
    - ACCEPTED: Approved by an admin, station price updated (terminal)
    - REJECTED: Declined by an admin or auto-expired (terminal)

Usage:
    from src.domain.enums import PriceProposalStatus

    if proposal.status == PriceProposalStatus.PENDING:
        # Still eligible for review or auto-expiry
"""

from enum import Enum


class PriceProposalStatus(str, Enum):
    """Price proposal review states.

    String Enum:
        Inherits from str for easy serialization and database storage.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition is allowed.

        Returns:
            bool: True for ACCEPTED and REJECTED.
        """
        return self is not PriceProposalStatus.PENDING
