"""Proposal statistics domain entity.

Per-user counters of price proposal verdicts, plus the points earned for
accepted proposals.

Business Rules:
    - total always equals approved + rejected
    - acceptance_rate = approved / total * 100, truncated to an integer
    - acceptance_rate is 0 when total is 0
    - each accepted proposal earns one point
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class ProposalStatistic:
    """Proposal statistics for a single user.

    Attributes:
        user_id: Owner of the statistics.
        total: Number of evaluated proposals.
        approved: Number of accepted proposals.
        rejected: Number of rejected proposals.
        acceptance_rate: Integer percentage of accepted proposals.
        points: Reward points (one per accepted proposal).
        updated_at: Last modification time.

    Example:
        >>> stats = ProposalStatistic.initial(user_id)
        >>> stats.record_verdict(accepted=True)
        >>> (stats.total, stats.approved, stats.rejected, stats.acceptance_rate)
        (1, 1, 0, 100)
    """

    user_id: UUID
    total: int = 0
    approved: int = 0
    rejected: int = 0
    acceptance_rate: int = 0
    points: int = 0
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def initial(cls, user_id: UUID) -> "ProposalStatistic":
        """Create a zeroed record for a newly registered user."""
        return cls(user_id=user_id)

    def record_verdict(self, accepted: bool, now: datetime | None = None) -> None:
        """Apply one proposal verdict.

        Args:
            accepted: True if the proposal was accepted.
            now: Modification time (defaults to current UTC time).

        Side Effects:
            - Increments total and either approved or rejected
            - Recomputes acceptance_rate
            - Adds one point when accepted
            - Updates updated_at
        """
        self.total += 1
        if accepted:
            self.approved += 1
            self.points += 1
        else:
            self.rejected += 1
        self.acceptance_rate = (
            int(self.approved / self.total * 100) if self.total > 0 else 0
        )
        self.updated_at = now or datetime.now(UTC)
