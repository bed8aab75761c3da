"""PriceProposalRepository protocol for price proposal persistence."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from src.domain.entities import PriceProposal


class PriceProposalRepository(Protocol):
    """Price proposal repository protocol (port)."""

    async def find_stale_pending(self, threshold: datetime) -> list[PriceProposal]:
        """Find pending proposals created before ``threshold``.

        Args:
            threshold: ``now - expiry window``.

        Returns:
            Matching proposals (empty list if none).
        """
        ...

    async def save_all(self, proposals: Sequence[PriceProposal]) -> None:
        """Persist proposals in one commit."""
        ...
