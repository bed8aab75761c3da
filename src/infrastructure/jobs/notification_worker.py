"""Notification worker.

Single consumer of the notification queue: dequeues one message at a time
and hands it to the transport. A failed send is logged and the message is
dropped (at-most-once); the loop keeps going.
"""

import asyncio

from src.core.result import Failure, Success
from src.domain.protocols import (
    LoggerProtocol,
    NotificationQueueProtocol,
    NotificationTransportProtocol,
)
from src.domain.value_objects import NotificationMessage


class NotificationWorker:
    """Consumes the notification queue until stopped.

    Stopping is cooperative: the stop event interrupts a wait on an empty
    queue. Messages still queued at stop time are not sent.

    Attributes:
        sent_count: Messages delivered since start.
        failed_count: Messages that could not be delivered.
    """

    name = "notification"

    def __init__(
        self,
        queue: NotificationQueueProtocol,
        transport: NotificationTransportProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._queue = queue
        self._transport = transport
        self._logger = logger.bind(worker=self.name)
        self.sent_count = 0
        self.failed_count = 0

    async def run(self, stop: asyncio.Event) -> None:
        """Deliver messages until ``stop`` is set.

        Args:
            stop: Cooperative stop signal shared with the runtime.
        """
        self._logger.info("worker_started")
        stop_waiter = asyncio.ensure_future(stop.wait())
        try:
            while not stop.is_set():
                getter = asyncio.ensure_future(self._queue.dequeue())
                done, _ = await asyncio.wait(
                    {getter, stop_waiter}, return_when=asyncio.FIRST_COMPLETED
                )
                if getter not in done:
                    getter.cancel()
                    await asyncio.gather(getter, return_exceptions=True)
                    break
                await self.deliver(getter.result())
        finally:
            stop_waiter.cancel()
            await asyncio.gather(stop_waiter, return_exceptions=True)
            self._logger.info(
                "worker_stopped",
                sent_count=self.sent_count,
                failed_count=self.failed_count,
            )

    async def deliver(self, message: NotificationMessage) -> bool:
        """Send one message; never raises.

        Returns:
            bool: True if the transport accepted the message.
        """
        try:
            result = await self._transport.send(message)
        except Exception as e:
            self.failed_count += 1
            self._logger.warning(
                "notification_send_failed",
                recipient=message.recipient,
                subject=message.subject,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

        match result:
            case Success(value=message_id):
                self.sent_count += 1
                self._logger.info(
                    "notification_sent",
                    recipient=message.recipient,
                    subject=message.subject,
                    message_id=message_id,
                )
                return True
            case Failure(error=error):
                self.failed_count += 1
                self._logger.warning(
                    "notification_send_failed",
                    recipient=message.recipient,
                    subject=message.subject,
                    error_code=error.code.value,
                    error_message=error.message,
                )
        return False
