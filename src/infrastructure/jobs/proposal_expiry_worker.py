"""Proposal-expiry reconciliation worker.

Pending price proposals that nobody reviewed within the expiry window are
rejected automatically, persisted in one save, and announced with
ProposalAutoExpired so the author is notified.
"""

from datetime import UTC, datetime, timedelta

from src.domain.entities import PriceProposal
from src.domain.events import ProposalAutoExpired
from src.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    PriceProposalRepository,
)
from src.infrastructure.jobs.periodic_worker import PeriodicWorker, SweepSummary

DEFAULT_INTERVAL_SECONDS = 60 * 60
DEFAULT_EXPIRY_WINDOW = timedelta(hours=24)


class ProposalExpiryWorker(PeriodicWorker):
    """Rejects pending proposals older than the expiry window."""

    name = "proposal_expiry"

    def __init__(
        self,
        *,
        proposals: PriceProposalRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        expiry_window: timedelta = DEFAULT_EXPIRY_WINDOW,
    ) -> None:
        super().__init__(interval_seconds, logger)
        if expiry_window <= timedelta(0):
            raise ValueError("expiry_window must be positive")
        self._proposals = proposals
        self._event_bus = event_bus
        self.expiry_window = expiry_window

    async def sweep(self, now: datetime | None = None) -> SweepSummary:
        """Reject every pending proposal created before ``now - expiry_window``.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            SweepSummary with found / transitioned / failed counts.
        """
        now = now or datetime.now(UTC)
        threshold = now - self.expiry_window
        stale = await self._proposals.find_stale_pending(threshold)
        if not stale:
            self._logger.debug("proposal_expiry_sweep_empty")
            return SweepSummary()

        expired: list[PriceProposal] = []
        failed = 0
        for proposal in stale:
            try:
                proposal.expire(now)
                expired.append(proposal)
            except Exception as e:
                failed += 1
                self._logger.error(
                    "proposal_expiry_failed",
                    error=e,
                    proposal_id=str(proposal.id),
                )

        if expired:
            await self._proposals.save_all(expired)

        for proposal in expired:
            await self._event_bus.publish(
                ProposalAutoExpired(proposal=proposal.snapshot, expired_at=now)
            )

        summary = SweepSummary(
            found=len(stale), transitioned=len(expired), failed=failed
        )
        self._logger.info(
            "proposal_expiry_sweep_completed",
            found=summary.found,
            transitioned=summary.transitioned,
            failed=summary.failed,
            threshold=threshold.isoformat(),
        )
        return summary
