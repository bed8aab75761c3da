"""Notification transport protocol.

Best-effort point-to-point delivery to an external mail relay. Each send
succeeds or fails independently.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.value_objects import NotificationMessage


class NotificationTransportProtocol(Protocol):
    """Outbound notification transport (SES, stub, ...)."""

    async def send(self, message: NotificationMessage) -> Result[str, DomainError]:
        """Deliver one message.

        Args:
            message: Message to deliver.

        Returns:
            Result with the provider message id on success, or
            ExternalServiceError on delivery failure.
        """
        ...
