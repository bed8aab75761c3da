"""Unit tests for ReportEventHandler.

Tests cover:
- Pending reports against the banned user are resolved by the admin
- Reports against other users and reviewed reports untouched
- Missing admin skips the update
- Repeated event is a no-op
"""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.entities import UserReport
from src.domain.enums import ReportStatus
from src.domain.events import UserBanned
from src.infrastructure.events.handlers import ReportEventHandler
from src.infrastructure.persistence import (
    InMemoryReportRepository,
    InMemoryUserRepository,
    UserAccount,
)
from tests.factories import NOW, logged_events, make_user


def _report(reported_user_id, status=ReportStatus.PENDING) -> UserReport:
    return UserReport(
        id=uuid4(),
        reporting_user_id=uuid4(),
        reported_user_id=reported_user_id,
        description="Wrong prices",
        created_at=NOW - timedelta(days=1),
        status=status,
    )


@pytest.mark.unit
class TestReportClearing:
    """Test report resolution after a ban."""

    @pytest.mark.asyncio
    async def test_pending_reports_resolved_by_banning_admin(self, mock_logger):
        # Arrange
        user = make_user("banned@example.com")
        admin = make_user("admin@example.com")
        users = InMemoryUserRepository([UserAccount(snapshot=admin)])
        pending = _report(user.id)
        already_rejected = _report(user.id, status=ReportStatus.REJECTED)
        other_user = _report(uuid4())
        reports = InMemoryReportRepository([pending, already_rejected, other_user])
        handler = ReportEventHandler(reports, users, mock_logger)

        # Act
        await handler.handle_user_banned(
            UserBanned(user=user, admin=admin, reason="Spam", duration_days=3)
        )

        # Assert
        resolved = reports.get(pending.id)
        assert resolved.status == ReportStatus.ACCEPTED
        assert resolved.reviewed_by_admin_id == admin.id
        assert resolved.reviewed_at is not None
        assert reports.get(already_rejected.id).status == ReportStatus.REJECTED
        assert reports.get(other_user.id).status == ReportStatus.PENDING
        assert mock_logger.info.call_args.kwargs["resolved_count"] == 1

    @pytest.mark.asyncio
    async def test_repeated_event_is_noop(self, mock_logger):
        user = make_user()
        admin = make_user("admin@example.com")
        users = InMemoryUserRepository([UserAccount(snapshot=admin)])
        report = _report(user.id)
        reports = InMemoryReportRepository([report])
        handler = ReportEventHandler(reports, users, mock_logger)
        event = UserBanned(user=user, admin=admin, reason="Spam")

        await handler.handle_user_banned(event)
        first_review = reports.get(report.id).reviewed_at
        await handler.handle_user_banned(event)

        assert reports.get(report.id).reviewed_at == first_review
        assert mock_logger.info.call_args.kwargs["resolved_count"] == 0

    @pytest.mark.asyncio
    async def test_missing_admin_skips_update(self, mock_logger):
        # Arrange - admin not in the user store
        user = make_user()
        report = _report(user.id)
        reports = InMemoryReportRepository([report])
        handler = ReportEventHandler(reports, InMemoryUserRepository(), mock_logger)

        # Act
        await handler.handle_user_banned(
            UserBanned(user=user, admin=make_user("ghost@example.com"), reason="Spam")
        )

        # Assert
        assert reports.get(report.id).status == ReportStatus.PENDING
        assert logged_events(mock_logger, "warning") == ["report_clearing_admin_not_found"]

    @pytest.mark.asyncio
    async def test_repository_failure_contained(self, mock_logger):
        admin = make_user("admin@example.com")
        reports = MagicMock()
        reports.resolve_pending_for_user = AsyncMock(side_effect=OSError("db down"))
        handler = ReportEventHandler(
            reports, InMemoryUserRepository([UserAccount(snapshot=admin)]), mock_logger
        )

        await handler.handle_user_banned(
            UserBanned(user=make_user(), admin=admin, reason="Spam")
        )

        assert logged_events(mock_logger, "warning") == ["report_clearing_failed"]
