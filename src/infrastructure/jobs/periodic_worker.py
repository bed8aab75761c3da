"""Fixed-interval reconciliation worker base.

Both reconciliation workers share this loop shape:

    while not stopped:
        sweep()            # errors logged, loop continues
        wait(interval)     # interrupted by the stop signal

The first sweep runs immediately on start.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from src.domain.protocols import LoggerProtocol


@dataclass(frozen=True, kw_only=True)
class SweepSummary:
    """Outcome of one reconciliation sweep.

    Attributes:
        found: Items eligible for transition.
        transitioned: Items transitioned and persisted.
        failed: Items whose transition raised (left unchanged).
    """

    found: int = 0
    transitioned: int = 0
    failed: int = 0


class PeriodicWorker(ABC):
    """Base class for timer-driven reconciliation workers.

    Subclasses implement sweep(). A sweep that raises is logged at error
    level and the loop continues with the next tick.
    """

    name: str = "periodic"

    def __init__(self, interval_seconds: float, logger: LoggerProtocol) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than 0")
        self.interval_seconds = interval_seconds
        self._logger = logger.bind(worker=self.name)
        self.last_summary: SweepSummary | None = None

    @abstractmethod
    async def sweep(self, now: datetime | None = None) -> SweepSummary:
        """Run one reconciliation pass.

        Args:
            now: Reference time (defaults to current UTC time).
        """

    async def run(self, stop: asyncio.Event) -> None:
        """Sweep every ``interval_seconds`` until ``stop`` is set."""
        self._logger.info("worker_started", interval_seconds=self.interval_seconds)
        while not stop.is_set():
            try:
                self.last_summary = await self.sweep()
            except Exception as e:
                self._logger.error("sweep_failed", error=e)

            try:
                await asyncio.wait_for(stop.wait(), timeout=self.interval_seconds)
            except TimeoutError:
                pass
        self._logger.info("worker_stopped")
