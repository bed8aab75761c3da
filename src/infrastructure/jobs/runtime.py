"""Side-effect runtime.

Owns the lifetime of the long-lived background tasks: the notification
worker and both reconciliation workers. Started once at process start and
stopped on shutdown; all tasks share one cooperative stop event.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Protocol

from src.domain.protocols import LoggerProtocol
from src.infrastructure.jobs.notification_queue import BoundedNotificationQueue

DEFAULT_STOP_TIMEOUT_SECONDS = 10.0


class BackgroundWorker(Protocol):
    name: str

    async def run(self, stop: asyncio.Event) -> None: ...


@dataclass(frozen=True, kw_only=True)
class RuntimeHealthStatus:
    """Health snapshot for the /health probe.

    Attributes:
        running: Whether the runtime has been started and not stopped.
        workers: Worker name → task alive.
        notification_queue_depth: Messages waiting to be sent.
        notification_queue_capacity: Queue bound.
    """

    running: bool
    workers: dict[str, bool]
    notification_queue_depth: int
    notification_queue_capacity: int

    @property
    def healthy(self) -> bool:
        return self.running and all(self.workers.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "healthy": self.healthy,
            "running": self.running,
            "workers": dict(self.workers),
            "notification_queue_depth": self.notification_queue_depth,
            "notification_queue_capacity": self.notification_queue_capacity,
        }


class SideEffectRuntime:
    """Starts and stops the background workers.

    Example:
        >>> runtime = get_side_effect_runtime()
        >>> await runtime.start()
        >>> ...
        >>> await runtime.stop()
    """

    def __init__(
        self,
        *,
        workers: list[BackgroundWorker],
        queue: BoundedNotificationQueue,
        logger: LoggerProtocol,
        stop_timeout_seconds: float = DEFAULT_STOP_TIMEOUT_SECONDS,
    ) -> None:
        self._workers = workers
        self._queue = queue
        self._logger = logger
        self._stop_timeout = stop_timeout_seconds
        self._stop = asyncio.Event()
        self._tasks: dict[str, asyncio.Task[None]] = {}

    @property
    def is_running(self) -> bool:
        return bool(self._tasks) and not self._stop.is_set()

    async def start(self) -> None:
        """Spawn one task per worker. Calling start twice is a no-op.

        Raises:
            RuntimeError: If the runtime was already stopped.
        """
        if self._stop.is_set():
            raise RuntimeError("SideEffectRuntime cannot be restarted")
        if self._tasks:
            return
        for worker in self._workers:
            self._tasks[worker.name] = asyncio.create_task(
                worker.run(self._stop), name=f"side-effects:{worker.name}"
            )
        self._logger.info(
            "side_effect_runtime_started", workers=sorted(self._tasks)
        )

    async def stop(self) -> None:
        """Signal every worker to stop and wait for them to exit.

        Workers that overrun the stop timeout are cancelled. Queued
        notifications are not drained.
        """
        if self._stop.is_set():
            return
        self._stop.set()
        self._queue.close()
        tasks = list(self._tasks.values())
        if not tasks:
            return

        _, pending = await asyncio.wait(tasks, timeout=self._stop_timeout)
        for task in pending:
            task.cancel()
        results = await asyncio.gather(*tasks, return_exceptions=True)

        for name, result in zip(self._tasks, results):
            if isinstance(result, Exception):
                self._logger.error("worker_crashed", error=result, worker=name)
        self._logger.info(
            "side_effect_runtime_stopped",
            cancelled=len(pending),
            undelivered_notifications=self._queue.qsize(),
        )

    def health(self) -> RuntimeHealthStatus:
        return RuntimeHealthStatus(
            running=self.is_running,
            workers={
                worker.name: (
                    worker.name in self._tasks
                    and not self._tasks[worker.name].done()
                )
                for worker in self._workers
            },
            notification_queue_depth=self._queue.qsize(),
            notification_queue_capacity=self._queue.capacity,
        )
