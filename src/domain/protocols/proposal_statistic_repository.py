"""ProposalStatisticRepository protocol for statistics persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import ProposalStatistic


class ProposalStatisticRepository(Protocol):
    """Proposal statistics repository protocol (port).

    Methods:
        find_by_user_id: Retrieve a user's statistics
        add: Create a record
        update: Save a modified record
    """

    async def find_by_user_id(self, user_id: UUID) -> ProposalStatistic | None:
        """Find statistics for a user.

        Returns:
            ProposalStatistic if found, None otherwise.
        """
        ...

    async def add(self, statistic: ProposalStatistic) -> None:
        """Create a statistics record.

        Raises:
            ValueError: If a record for the user already exists.
        """
        ...

    async def update(self, statistic: ProposalStatistic) -> None:
        """Save a modified statistics record.

        Raises:
            KeyError: If no record exists for the user.
        """
        ...
