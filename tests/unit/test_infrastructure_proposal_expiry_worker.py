"""Unit tests for ProposalExpiryWorker.

Tests cover:
- Stale pending proposals rejected, persisted, announced
- Fresh and already-reviewed proposals untouched
- Configurable expiry window
"""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.domain.enums import PriceProposalStatus
from src.domain.events import ProposalAutoExpired
from src.infrastructure.jobs.proposal_expiry_worker import ProposalExpiryWorker
from src.infrastructure.persistence import InMemoryPriceProposalRepository
from tests.factories import NOW, make_pending_proposal


@pytest.fixture
def event_bus():
    bus = MagicMock()
    bus.publish = AsyncMock()
    return bus


@pytest.mark.unit
class TestProposalExpirySweep:
    """Test sweep()."""

    @pytest.mark.asyncio
    async def test_stale_proposal_rejected_and_announced(self, event_bus, mock_logger):
        # Arrange
        stale = make_pending_proposal(age=timedelta(hours=25))
        fresh = make_pending_proposal(age=timedelta(hours=23))
        reviewed = make_pending_proposal(age=timedelta(days=3))
        reviewed.status = PriceProposalStatus.ACCEPTED
        repo = InMemoryPriceProposalRepository([stale, fresh, reviewed])
        worker = ProposalExpiryWorker(
            proposals=repo, event_bus=event_bus, logger=mock_logger
        )

        # Act
        summary = await worker.sweep(NOW)

        # Assert
        assert (summary.found, summary.transitioned, summary.failed) == (1, 1, 0)
        assert repo.get(stale.id).status == PriceProposalStatus.REJECTED
        assert repo.get(stale.id).reviewed_at == NOW
        assert repo.get(fresh.id).status == PriceProposalStatus.PENDING
        assert repo.get(reviewed.id).status == PriceProposalStatus.ACCEPTED

        event = event_bus.publish.await_args.args[0]
        assert isinstance(event, ProposalAutoExpired)
        assert event.proposal == stale.snapshot
        assert event.expired_at == NOW

    @pytest.mark.asyncio
    async def test_custom_window(self, event_bus, mock_logger):
        proposal = make_pending_proposal(age=timedelta(hours=2))
        repo = InMemoryPriceProposalRepository([proposal])
        worker = ProposalExpiryWorker(
            proposals=repo,
            event_bus=event_bus,
            logger=mock_logger,
            expiry_window=timedelta(hours=1),
        )

        summary = await worker.sweep(NOW)

        assert summary.transitioned == 1

    @pytest.mark.asyncio
    async def test_nothing_stale(self, event_bus, mock_logger):
        repo = InMemoryPriceProposalRepository(
            [make_pending_proposal(age=timedelta(minutes=5))]
        )
        worker = ProposalExpiryWorker(
            proposals=repo, event_bus=event_bus, logger=mock_logger
        )

        summary = await worker.sweep(NOW)

        assert summary.found == 0
        event_bus.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_save_failure_publishes_nothing(self, event_bus, mock_logger):
        repo = MagicMock()
        repo.find_stale_pending = AsyncMock(
            return_value=[make_pending_proposal(age=timedelta(days=2))]
        )
        repo.save_all = AsyncMock(side_effect=OSError("db down"))
        worker = ProposalExpiryWorker(
            proposals=repo, event_bus=event_bus, logger=mock_logger
        )

        with pytest.raises(OSError):
            await worker.sweep(NOW)

        event_bus.publish.assert_not_called()

    def test_window_must_be_positive(self, event_bus, mock_logger):
        with pytest.raises(ValueError, match="expiry_window"):
            ProposalExpiryWorker(
                proposals=InMemoryPriceProposalRepository(),
                event_bus=event_bus,
                logger=mock_logger,
                expiry_window=timedelta(0),
            )
