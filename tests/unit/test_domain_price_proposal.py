"""Unit tests for PriceProposal and UserReport entities.

Tests cover:
- Staleness detection against a threshold
- Auto-expiry transition and terminal-state guard
- Report resolution
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from src.domain.entities import UserReport
from src.domain.enums import PriceProposalStatus, ReportStatus
from tests.factories import NOW, make_pending_proposal


@pytest.mark.unit
class TestPriceProposalStaleness:
    """Test PriceProposal.is_stale()."""

    def test_pending_proposal_older_than_threshold_is_stale(self):
        proposal = make_pending_proposal(age=timedelta(hours=25))

        assert proposal.is_stale(NOW - timedelta(hours=24)) is True

    def test_pending_proposal_created_at_threshold_is_not_stale(self):
        proposal = make_pending_proposal(age=timedelta(hours=24))

        assert proposal.is_stale(NOW - timedelta(hours=24)) is False

    def test_reviewed_proposal_is_never_stale(self):
        proposal = make_pending_proposal(age=timedelta(days=30))
        proposal.status = PriceProposalStatus.ACCEPTED

        assert proposal.is_stale(NOW) is False


@pytest.mark.unit
class TestPriceProposalExpire:
    """Test PriceProposal.expire()."""

    def test_expire_rejects_pending_proposal(self):
        proposal = make_pending_proposal(age=timedelta(days=2))

        proposal.expire(NOW)

        assert proposal.status == PriceProposalStatus.REJECTED
        assert proposal.reviewed_at == NOW

    @pytest.mark.parametrize(
        "status", [PriceProposalStatus.ACCEPTED, PriceProposalStatus.REJECTED]
    )
    def test_expire_terminal_proposal_raises(self, status):
        proposal = make_pending_proposal(age=timedelta(days=2))
        proposal.status = status

        with pytest.raises(ValueError, match="already"):
            proposal.expire(NOW)

    def test_id_comes_from_snapshot(self):
        proposal = make_pending_proposal(age=timedelta(hours=1))

        assert proposal.id == proposal.snapshot.id


@pytest.mark.unit
class TestUserReportResolve:
    """Test UserReport.resolve()."""

    def _report(self) -> UserReport:
        return UserReport(
            id=uuid4(),
            reporting_user_id=uuid4(),
            reported_user_id=uuid4(),
            description="Fake prices",
            created_at=NOW - timedelta(days=1),
        )

    def test_resolve_marks_report_accepted(self):
        report = self._report()
        admin_id = uuid4()

        report.resolve(admin_id, NOW)

        assert report.status == ReportStatus.ACCEPTED
        assert report.reviewed_by_admin_id == admin_id
        assert report.reviewed_at == NOW
        assert report.is_pending is False

    def test_resolve_twice_raises(self):
        report = self._report()
        report.resolve(uuid4(), NOW)

        with pytest.raises(ValueError, match="already reviewed"):
            report.resolve(uuid4(), NOW)
