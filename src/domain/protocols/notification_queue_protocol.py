"""Notification queue protocol.

Bounded producer/consumer queue between the handlers that decide to notify
and the single worker that sends. Messages are opaque once enqueued.
"""

from typing import Protocol

from src.domain.value_objects import NotificationMessage


class NotificationQueueProtocol(Protocol):
    """Bounded outbound notification queue.

    Backpressure: when the queue is full, producers wait instead of dropping.
    """

    async def enqueue(self, message: NotificationMessage) -> bool:
        """Add a message, waiting while the queue is full.

        Args:
            message: Message to deliver.

        Returns:
            bool: True if queued. False if the queue is closed or the
            configured enqueue timeout elapsed.
        """
        ...

    async def dequeue(self) -> NotificationMessage:
        """Remove and return the next message, waiting while empty.

        Used by exactly one consumer (the notification worker).
        """
        ...

    def qsize(self) -> int:
        """Number of messages currently queued."""
        ...
