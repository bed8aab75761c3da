"""Unit tests for BanExpiryWorker.

Tests cover:
- Expired temporary bans lifted, lockout cleared, event published
- Permanent, future and inactive bans untouched
- Missing user still lifts the ban
- Per-ban failure isolation
- Failed save leaves the ban due for the next sweep
- Periodic loop: immediate first sweep, errors don't kill the loop
"""

import asyncio
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from freezegun import freeze_time

from src.domain.events import BanAutoExpired
from src.infrastructure.jobs.ban_expiry_worker import BanExpiryWorker
from src.infrastructure.persistence import (
    InMemoryBanRepository,
    InMemoryUserRepository,
    UserAccount,
)
from tests.factories import NOW, logged_events, make_ban, make_user


@pytest.fixture
def event_bus():
    bus = MagicMock()
    bus.publish = AsyncMock()
    return bus


def _published(event_bus: MagicMock) -> list:
    return [c.args[0] for c in event_bus.publish.await_args_list]


@pytest.mark.unit
class TestBanExpirySweep:
    """Test sweep()."""

    @pytest.mark.asyncio
    async def test_expired_ban_lifted_and_announced(self, event_bus, mock_logger):
        # Arrange
        user = make_user("banned@example.com")
        account = UserAccount(
            snapshot=user, locked_until=NOW + timedelta(days=1), failed_access_count=5
        )
        users = InMemoryUserRepository([account])
        ban = make_ban(user, banned_until=NOW - timedelta(minutes=5))
        bans = InMemoryBanRepository([ban])
        worker = BanExpiryWorker(
            bans=bans, users=users, event_bus=event_bus, logger=mock_logger
        )

        # Act
        summary = await worker.sweep(NOW)

        # Assert
        assert (summary.found, summary.transitioned, summary.failed) == (1, 1, 0)
        stored = bans.get(ban.id)
        assert stored.is_active is False
        assert stored.unbanned_at == NOW
        assert stored.unbanned_by_admin_id is None
        assert account.locked_until is None
        assert account.failed_access_count == 0

        (event,) = _published(event_bus)
        assert isinstance(event, BanAutoExpired)
        assert event.user == user
        assert event.ban_id == ban.id
        assert event.reason == "Spam"
        assert event.banned_until == ban.banned_until

    @pytest.mark.asyncio
    async def test_ineligible_bans_untouched(self, event_bus, mock_logger):
        permanent = make_ban(banned_until=None)
        future = make_ban(banned_until=NOW + timedelta(days=1))
        inactive = make_ban(banned_until=NOW - timedelta(days=1), is_active=False)
        bans = InMemoryBanRepository([permanent, future, inactive])
        worker = BanExpiryWorker(
            bans=bans,
            users=InMemoryUserRepository(),
            event_bus=event_bus,
            logger=mock_logger,
        )

        summary = await worker.sweep(NOW)

        assert summary.found == 0
        assert bans.get(permanent.id).is_active is True
        assert bans.get(future.id).is_active is True
        event_bus.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_second_sweep_finds_nothing(self, event_bus, mock_logger):
        user = make_user()
        bans = InMemoryBanRepository([make_ban(user)])
        worker = BanExpiryWorker(
            bans=bans,
            users=InMemoryUserRepository([UserAccount(snapshot=user)]),
            event_bus=event_bus,
            logger=mock_logger,
        )

        await worker.sweep(NOW)
        summary = await worker.sweep(NOW)

        assert summary.found == 0
        assert event_bus.publish.await_count == 1

    @pytest.mark.asyncio
    async def test_missing_user_still_lifts_ban(self, event_bus, mock_logger):
        ban = make_ban()
        bans = InMemoryBanRepository([ban])
        worker = BanExpiryWorker(
            bans=bans,
            users=InMemoryUserRepository(),
            event_bus=event_bus,
            logger=mock_logger,
        )

        summary = await worker.sweep(NOW)

        assert summary.transitioned == 1
        assert bans.get(ban.id).is_active is False
        assert "ban_expiry_user_missing" in logged_events(mock_logger, "warning")

    @pytest.mark.asyncio
    async def test_failing_ban_left_active_others_lifted(self, event_bus, mock_logger):
        # Arrange - clearing the first user's lockout fails
        first, second = make_ban(), make_ban()
        bans = InMemoryBanRepository([first, second])
        users = MagicMock()
        users.clear_lockout = AsyncMock(side_effect=[OSError("db"), True])
        worker = BanExpiryWorker(
            bans=bans, users=users, event_bus=event_bus, logger=mock_logger
        )

        # Act
        summary = await worker.sweep(NOW)

        # Assert
        assert (summary.found, summary.transitioned, summary.failed) == (2, 1, 1)
        assert bans.get(first.id).is_active is True
        assert bans.get(second.id).is_active is False
        assert [e.ban_id for e in _published(event_bus)] == [second.id]
        assert logged_events(mock_logger, "error") == ["ban_expiry_failed"]

    @pytest.mark.asyncio
    @freeze_time("2026-03-01 12:00:00")
    async def test_default_now_is_current_time(self, event_bus, mock_logger):
        due = make_ban(banned_until=NOW - timedelta(seconds=1))
        not_due = make_ban(banned_until=NOW + timedelta(seconds=1))
        bans = InMemoryBanRepository([due, not_due])
        worker = BanExpiryWorker(
            bans=bans,
            users=InMemoryUserRepository(),
            event_bus=event_bus,
            logger=mock_logger,
        )

        summary = await worker.sweep()

        assert summary.transitioned == 1
        assert bans.get(not_due.id).is_active is True

    @pytest.mark.asyncio
    async def test_failed_save_retried_next_sweep(self, event_bus, mock_logger):
        # Arrange
        user = make_user()
        users = InMemoryUserRepository(
            [UserAccount(snapshot=user, locked_until=NOW, failed_access_count=2)]
        )
        ban = make_ban(user)
        bans = InMemoryBanRepository([ban])
        real_save_all = bans.save_all
        bans.save_all = AsyncMock(side_effect=ConnectionError("db down"))
        worker = BanExpiryWorker(
            bans=bans, users=users, event_bus=event_bus, logger=mock_logger
        )

        # Act
        with pytest.raises(ConnectionError):
            await worker.sweep(NOW)
        unlocked_early = users.get_account(user.id).locked_until is None
        still_active = bans.get(ban.id).is_active
        event_bus.publish.assert_not_awaited()
        bans.save_all = real_save_all
        summary = await worker.sweep(NOW)

        # Assert
        assert unlocked_early is True
        assert still_active is True
        assert summary.transitioned == 1
        assert bans.get(ban.id).is_active is False
        assert [type(e) for e in _published(event_bus)] == [BanAutoExpired]


@pytest.mark.unit
class TestBanExpiryLoop:
    """Test the periodic run loop."""

    def test_interval_must_be_positive(self, event_bus, mock_logger):
        with pytest.raises(ValueError):
            BanExpiryWorker(
                bans=InMemoryBanRepository(),
                users=InMemoryUserRepository(),
                event_bus=event_bus,
                logger=mock_logger,
                interval_seconds=0,
            )

    @pytest.mark.asyncio
    async def test_first_sweep_runs_immediately_and_errors_are_logged(
        self, event_bus, mock_logger
    ):
        # Arrange - repository always fails
        bans = MagicMock()
        bans.find_expired_active = AsyncMock(side_effect=OSError("db down"))
        worker = BanExpiryWorker(
            bans=bans,
            users=InMemoryUserRepository(),
            event_bus=event_bus,
            logger=mock_logger,
            interval_seconds=0.01,
        )
        stop = asyncio.Event()

        # Act
        task = asyncio.create_task(worker.run(stop))
        await asyncio.sleep(0.05)
        stop.set()
        await asyncio.wait_for(task, timeout=1)

        # Assert - loop kept sweeping after failures
        assert bans.find_expired_active.await_count >= 2
        assert set(logged_events(mock_logger, "error")) == {"sweep_failed"}

    @pytest.mark.asyncio
    async def test_stop_interrupts_interval_wait(self, event_bus, mock_logger):
        worker = BanExpiryWorker(
            bans=InMemoryBanRepository(),
            users=InMemoryUserRepository(),
            event_bus=event_bus,
            logger=mock_logger,
            interval_seconds=3600,
        )
        stop = asyncio.Event()

        task = asyncio.create_task(worker.run(stop))
        await asyncio.sleep(0.01)
        stop.set()
        await asyncio.wait_for(task, timeout=1)

        assert worker.last_summary is not None
        assert worker.last_summary.found == 0
