"""Unit tests for BoundedNotificationQueue.

Tests cover:
- FIFO order and qsize
- Backpressure when full, release on dequeue
- Enqueue timeout
- Close rejects new and waiting producers
"""

import asyncio

import pytest

from src.domain.value_objects import NotificationMessage
from src.infrastructure.jobs.notification_queue import BoundedNotificationQueue


def _message(n: int) -> NotificationMessage:
    return NotificationMessage(
        recipient=f"user{n}@example.com", subject=f"subject {n}", body="<p>hi</p>"
    )


@pytest.mark.unit
class TestQueueConstruction:
    """Test constructor validation."""

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_capacity_must_be_positive(self, capacity):
        with pytest.raises(ValueError, match="capacity"):
            BoundedNotificationQueue(capacity=capacity)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError, match="enqueue_timeout"):
            BoundedNotificationQueue(capacity=1, enqueue_timeout=0)


@pytest.mark.unit
class TestQueueFlow:
    """Test enqueue/dequeue."""

    @pytest.mark.asyncio
    async def test_fifo_order(self):
        queue = BoundedNotificationQueue(capacity=3)

        for n in range(3):
            assert await queue.enqueue(_message(n)) is True

        assert queue.qsize() == 3
        assert [(await queue.dequeue()).recipient for _ in range(3)] == [
            "user0@example.com",
            "user1@example.com",
            "user2@example.com",
        ]
        assert queue.qsize() == 0

    @pytest.mark.asyncio
    async def test_full_queue_blocks_producer_until_dequeue(self):
        # Arrange
        queue = BoundedNotificationQueue(capacity=1)
        await queue.enqueue(_message(1))

        # Act
        producer = asyncio.create_task(queue.enqueue(_message(2)))
        await asyncio.sleep(0.01)

        # Assert
        assert not producer.done()
        assert queue.qsize() == 1
        await queue.dequeue()
        assert await asyncio.wait_for(producer, timeout=1) is True
        assert (await queue.dequeue()).recipient == "user2@example.com"

    @pytest.mark.asyncio
    async def test_enqueue_timeout_returns_false(self):
        queue = BoundedNotificationQueue(capacity=1, enqueue_timeout=0.05)
        await queue.enqueue(_message(1))

        assert await queue.enqueue(_message(2)) is False
        assert queue.qsize() == 1

    @pytest.mark.asyncio
    async def test_dequeue_waits_for_message(self):
        queue = BoundedNotificationQueue(capacity=1)

        consumer = asyncio.create_task(queue.dequeue())
        await asyncio.sleep(0.01)
        assert not consumer.done()

        await queue.enqueue(_message(7))
        message = await asyncio.wait_for(consumer, timeout=1)
        assert message.recipient == "user7@example.com"


@pytest.mark.unit
class TestQueueClose:
    """Test close semantics."""

    @pytest.mark.asyncio
    async def test_enqueue_after_close_rejected(self):
        queue = BoundedNotificationQueue(capacity=2)

        queue.close()

        assert queue.is_closed is True
        assert await queue.enqueue(_message(1)) is False
        assert queue.qsize() == 0

    @pytest.mark.asyncio
    async def test_close_releases_waiting_producer(self):
        # Arrange
        queue = BoundedNotificationQueue(capacity=1)
        await queue.enqueue(_message(1))
        producer = asyncio.create_task(queue.enqueue(_message(2)))
        await asyncio.sleep(0.01)

        # Act
        queue.close()

        # Assert
        assert await asyncio.wait_for(producer, timeout=1) is False
        assert queue.qsize() == 1

    @pytest.mark.asyncio
    async def test_queued_messages_survive_close(self):
        queue = BoundedNotificationQueue(capacity=2)
        await queue.enqueue(_message(1))

        queue.close()

        assert (await queue.dequeue()).recipient == "user1@example.com"
