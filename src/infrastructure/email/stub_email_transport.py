"""Stub notification transport for development and testing.

Logs the message envelope instead of sending it. Bodies are never logged.
Only the most recent messages are kept in memory.
"""

from collections import deque
from uuid import uuid4

from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol
from src.domain.value_objects import NotificationMessage

DEFAULT_MAX_RECORDED = 100


class StubEmailTransport:
    """Transport that records messages and logs them.

    Attributes:
        sent: Most recent messages "delivered", oldest first (handy in tests).
    """

    def __init__(
        self, logger: LoggerProtocol, max_recorded: int = DEFAULT_MAX_RECORDED
    ) -> None:
        if max_recorded <= 0:
            raise ValueError("max_recorded must be greater than 0")
        self._logger = logger
        self.sent: deque[NotificationMessage] = deque(maxlen=max_recorded)

    async def send(self, message: NotificationMessage) -> Result[str, DomainError]:
        message_id = f"stub-{uuid4()}"
        self.sent.append(message)
        self._logger.info(
            "email_would_be_sent",
            recipient=message.recipient,
            subject=message.subject,
            message_id=message_id,
        )
        return Success(value=message_id)
