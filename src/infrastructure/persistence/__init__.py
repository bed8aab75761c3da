"""Persistence adapters.

In-memory implementations of the repository protocols.
"""

from src.infrastructure.persistence.in_memory_repositories import (
    InMemoryBanRepository,
    InMemoryPriceProposalRepository,
    InMemoryProposalStatisticRepository,
    InMemoryReportRepository,
    InMemoryUserRepository,
    UserAccount,
)

__all__ = [
    "InMemoryBanRepository",
    "InMemoryPriceProposalRepository",
    "InMemoryProposalStatisticRepository",
    "InMemoryReportRepository",
    "InMemoryUserRepository",
    "UserAccount",
]
