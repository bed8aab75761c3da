"""Price proposal domain entity.

Lifecycle:
    Pending → Accepted | Rejected (admin verdict)
    Pending → Rejected (age-based expiry)

Terminal states are final.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import PriceProposalStatus
from src.domain.value_objects import ProposalSnapshot


@dataclass
class PriceProposal:
    """Price proposal awaiting (or past) admin review.

    Attributes:
        snapshot: Immutable proposal details (author, station, fuel, price).
        created_at: Submission time.
        status: Review state.
        reviewed_at: Review time (None while pending).
    """

    snapshot: ProposalSnapshot
    created_at: datetime
    status: PriceProposalStatus = PriceProposalStatus.PENDING
    reviewed_at: datetime | None = None

    @property
    def id(self) -> UUID:
        return self.snapshot.id

    def is_stale(self, threshold: datetime) -> bool:
        """Check if the proposal is pending and was created before ``threshold``.

        Args:
            threshold: Cut-off time (``now - expiry window``).

        Returns:
            bool: True if eligible for auto-rejection.
        """
        return self.status == PriceProposalStatus.PENDING and self.created_at < threshold

    def expire(self, now: datetime) -> None:
        """Reject the proposal because nobody reviewed it in time.

        Raises:
            ValueError: If the proposal already reached a terminal state.
        """
        if self.status.is_terminal:
            raise ValueError(f"Proposal {self.id} already {self.status.value}")
        self.status = PriceProposalStatus.REJECTED
        self.reviewed_at = now
