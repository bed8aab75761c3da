"""Bounded in-process notification queue.

Decouples "decide to notify" (event handlers, on the request path) from
"send" (the notification worker). The queue is bounded: when full, producers
wait for space instead of dropping messages.

Lifecycle:
    open → closed (close() on shutdown)

    Once closed, new and still-waiting enqueues return False. Messages
    already queued are not drained.
"""

import asyncio

from src.domain.value_objects import NotificationMessage


class BoundedNotificationQueue:
    """asyncio.Queue-backed implementation of NotificationQueueProtocol.

    Single event loop only. One consumer (the notification worker).

    Attributes:
        capacity: Maximum number of queued messages.
        enqueue_timeout: Seconds a producer may wait for space (None = forever).
    """

    def __init__(self, capacity: int, enqueue_timeout: float | None = None) -> None:
        """Initialize the queue.

        Args:
            capacity: Maximum queued messages (must be positive).
            enqueue_timeout: Optional wait limit for producers, in seconds.

        Raises:
            ValueError: If capacity or enqueue_timeout is not positive.
        """
        if capacity <= 0:
            raise ValueError("capacity must be greater than 0")
        if enqueue_timeout is not None and enqueue_timeout <= 0:
            raise ValueError("enqueue_timeout must be positive")
        self.capacity = capacity
        self.enqueue_timeout = enqueue_timeout
        self._queue: asyncio.Queue[NotificationMessage] = asyncio.Queue(maxsize=capacity)
        self._closed = asyncio.Event()

    @property
    def is_closed(self) -> bool:
        return self._closed.is_set()

    def qsize(self) -> int:
        return self._queue.qsize()

    def close(self) -> None:
        """Reject further enqueues and release producers waiting for space."""
        self._closed.set()

    async def enqueue(self, message: NotificationMessage) -> bool:
        """Add a message, waiting while the queue is full.

        Args:
            message: Message to deliver.

        Returns:
            bool: True if queued. False if the queue is (or becomes) closed,
            or if enqueue_timeout elapses before space frees up.
        """
        if self._closed.is_set():
            return False
        if not self._queue.full():
            self._queue.put_nowait(message)
            return True

        putter = asyncio.ensure_future(self._queue.put(message))
        closer = asyncio.ensure_future(self._closed.wait())
        try:
            done, _ = await asyncio.wait(
                {putter, closer},
                timeout=self.enqueue_timeout,
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            # A cancelled put never inserts the message
            for waiter in (putter, closer):
                if not waiter.done():
                    waiter.cancel()
            await asyncio.gather(putter, closer, return_exceptions=True)

        return putter in done and not putter.cancelled()

    async def dequeue(self) -> NotificationMessage:
        """Remove and return the next message, waiting while empty."""
        return await self._queue.get()
