"""In-memory repository adapters.

Dictionary-backed implementations of the persistence protocols used for
development wiring and tests. The CRUD tier supplies database-backed
adapters with the same method signatures.

Entities are copied on the way in and out, so a caller's unsaved
modifications never leak into the store.

This class family does NOT inherit from the protocols (structural typing).
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID

from src.domain.entities import (
    BanRecord,
    PriceProposal,
    ProposalStatistic,
    UserReport,
)
from src.domain.value_objects import UserSnapshot


@dataclass
class UserAccount:
    """Lockout state the identity store keeps per user.

    Attributes:
        snapshot: Identity fields.
        locked_until: Lockout end (None = not locked).
        failed_access_count: Consecutive failed sign-ins.
    """

    snapshot: UserSnapshot
    locked_until: datetime | None = None
    failed_access_count: int = 0


class InMemoryUserRepository:
    """UserRepository over a dict of UserAccount."""

    def __init__(self, accounts: Iterable[UserAccount] = ()) -> None:
        self._accounts: dict[UUID, UserAccount] = {
            account.snapshot.id: account for account in accounts
        }

    def add(self, account: UserAccount) -> None:
        self._accounts[account.snapshot.id] = account

    def get_account(self, user_id: UUID) -> UserAccount | None:
        return self._accounts.get(user_id)

    async def find_by_id(self, user_id: UUID) -> UserSnapshot | None:
        account = self._accounts.get(user_id)
        return account.snapshot if account else None

    async def clear_lockout(self, user_id: UUID) -> bool:
        account = self._accounts.get(user_id)
        if account is None:
            return False
        account.locked_until = None
        account.failed_access_count = 0
        return True


class InMemoryBanRepository:
    """BanRepository over a dict of BanRecord."""

    def __init__(self, bans: Iterable[BanRecord] = ()) -> None:
        self._bans: dict[UUID, BanRecord] = {ban.id: replace(ban) for ban in bans}

    def add(self, ban: BanRecord) -> None:
        self._bans[ban.id] = replace(ban)

    def get(self, ban_id: UUID) -> BanRecord | None:
        ban = self._bans.get(ban_id)
        return replace(ban) if ban else None

    async def find_expired_active(self, now: datetime) -> list[BanRecord]:
        return [replace(ban) for ban in self._bans.values() if ban.is_expired(now)]

    async def save_all(self, bans: Sequence[BanRecord]) -> None:
        for ban in bans:
            self._bans[ban.id] = replace(ban)


class InMemoryReportRepository:
    """ReportRepository over a dict of UserReport."""

    def __init__(self, reports: Iterable[UserReport] = ()) -> None:
        self._reports: dict[UUID, UserReport] = {
            report.id: replace(report) for report in reports
        }

    def add(self, report: UserReport) -> None:
        self._reports[report.id] = replace(report)

    def get(self, report_id: UUID) -> UserReport | None:
        report = self._reports.get(report_id)
        return replace(report) if report else None

    async def resolve_pending_for_user(
        self, reported_user_id: UUID, admin_id: UUID, reviewed_at: datetime
    ) -> int:
        resolved = 0
        for report in self._reports.values():
            if report.reported_user_id == reported_user_id and report.is_pending:
                report.resolve(admin_id, reviewed_at)
                resolved += 1
        return resolved


class InMemoryProposalStatisticRepository:
    """ProposalStatisticRepository over a dict keyed by user id."""

    def __init__(self, statistics: Iterable[ProposalStatistic] = ()) -> None:
        self._statistics: dict[UUID, ProposalStatistic] = {
            statistic.user_id: replace(statistic) for statistic in statistics
        }

    async def find_by_user_id(self, user_id: UUID) -> ProposalStatistic | None:
        statistic = self._statistics.get(user_id)
        return replace(statistic) if statistic else None

    async def add(self, statistic: ProposalStatistic) -> None:
        if statistic.user_id in self._statistics:
            raise ValueError(f"Statistics for user {statistic.user_id} already exist")
        self._statistics[statistic.user_id] = replace(statistic)

    async def update(self, statistic: ProposalStatistic) -> None:
        if statistic.user_id not in self._statistics:
            raise KeyError(statistic.user_id)
        self._statistics[statistic.user_id] = replace(statistic)


class InMemoryPriceProposalRepository:
    """PriceProposalRepository over a dict of PriceProposal."""

    def __init__(self, proposals: Iterable[PriceProposal] = ()) -> None:
        self._proposals: dict[UUID, PriceProposal] = {
            proposal.id: replace(proposal) for proposal in proposals
        }

    def add(self, proposal: PriceProposal) -> None:
        self._proposals[proposal.id] = replace(proposal)

    def get(self, proposal_id: UUID) -> PriceProposal | None:
        proposal = self._proposals.get(proposal_id)
        return replace(proposal) if proposal else None

    async def find_stale_pending(self, threshold: datetime) -> list[PriceProposal]:
        return [
            replace(proposal)
            for proposal in self._proposals.values()
            if proposal.is_stale(threshold)
        ]

    async def save_all(self, proposals: Sequence[PriceProposal]) -> None:
        for proposal in proposals:
            self._proposals[proposal.id] = replace(proposal)
