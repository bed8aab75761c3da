"""Repository dependency factories.

The side-effect subsystem reads and writes a handful of narrow repository
protocols. The default wiring uses in-memory adapters; a deployment that
shares a relational store with the CRUD tier swaps this factory for one
returning SQL-backed implementations of the same protocols.
"""

from dataclasses import dataclass
from functools import lru_cache

from src.domain.protocols import (
    BanRepository,
    PriceProposalRepository,
    ProposalStatisticRepository,
    ReportRepository,
    UserRepository,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class Repositories:
    """Bundle of repository instances shared by handlers and workers."""

    users: UserRepository
    bans: BanRepository
    reports: ReportRepository
    statistics: ProposalStatisticRepository
    proposals: PriceProposalRepository


@lru_cache()
def get_repositories() -> Repositories:
    """Get the repository bundle singleton (app-scoped).

    Returns:
        Repositories backed by in-memory adapters.
    """
    from src.infrastructure.persistence import (
        InMemoryBanRepository,
        InMemoryPriceProposalRepository,
        InMemoryProposalStatisticRepository,
        InMemoryReportRepository,
        InMemoryUserRepository,
    )

    return Repositories(
        users=InMemoryUserRepository(),
        bans=InMemoryBanRepository(),
        reports=InMemoryReportRepository(),
        statistics=InMemoryProposalStatisticRepository(),
        proposals=InMemoryPriceProposalRepository(),
    )
