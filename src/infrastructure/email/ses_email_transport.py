"""AWS SES notification transport.

Sends outbound notifications through AWS SES. boto3 is synchronous, so each
send runs in a worker thread to keep the event loop free.

Error mapping:
    botocore ClientError     → ExternalServiceError (EXTERNAL_SERVICE_REJECTED)
    botocore BotoCoreError   → ExternalServiceError (EXTERNAL_SERVICE_UNAVAILABLE)
"""

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.value_objects import NotificationMessage
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import ExternalServiceError

SERVICE_NAME = "aws_ses"


class SESEmailTransport:
    """Notification transport backed by AWS SES.

    Implements NotificationTransportProtocol without inheritance.

    Attributes:
        _client: boto3 SES client.
        _source: Formatted sender ("Display Name <address>").
    """

    def __init__(
        self,
        *,
        from_email: str,
        from_name: str,
        region: str = "us-east-1",
        client: Any | None = None,
    ) -> None:
        """Initialize SES transport.

        Args:
            from_email: Verified SES sender address.
            from_name: Sender display name.
            region: AWS region (ignored when ``client`` is given).
            client: Pre-built boto3 SES client (tests, custom sessions).
        """
        self._client = client or boto3.client("ses", region_name=region)
        self._source = f"{from_name} <{from_email}>"

    async def send(
        self, message: NotificationMessage
    ) -> Result[str, ExternalServiceError]:
        """Send one message via SES.

        Args:
            message: Message to deliver. The body is sent as HTML.

        Returns:
            Success with the SES MessageId, or Failure(ExternalServiceError).
        """
        try:
            response = await asyncio.to_thread(
                self._client.send_email,
                Source=self._source,
                Destination={"ToAddresses": [message.recipient]},
                Message={
                    "Subject": {"Charset": "UTF-8", "Data": message.subject},
                    "Body": {"Html": {"Charset": "UTF-8", "Data": message.body}},
                },
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.NOTIFICATION_REJECTED,
                    infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_REJECTED,
                    message=f"SES rejected message to {message.recipient}",
                    service_name=SERVICE_NAME,
                    details={
                        "aws_error_code": error.get("Code", "unknown"),
                        "aws_error_message": error.get("Message", ""),
                    },
                )
            )
        except BotoCoreError as e:
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.NOTIFICATION_DELIVERY_FAILED,
                    infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE,
                    message=f"SES unavailable sending to {message.recipient}",
                    service_name=SERVICE_NAME,
                    details={"error": str(e), "type": type(e).__name__},
                )
            )

        return Success(value=response.get("MessageId", "unknown"))
