"""Outbound notification delivery.

Transports (implement NotificationTransportProtocol):
    - SESEmailTransport: AWS SES (production)
    - StubEmailTransport: Logs instead of sending (development/testing)

Templates (implement NotificationTemplateProtocol):
    - DefaultNotificationTemplates
"""

from src.infrastructure.email.ses_email_transport import SESEmailTransport
from src.infrastructure.email.stub_email_transport import StubEmailTransport
from src.infrastructure.email.templates import DefaultNotificationTemplates

__all__ = [
    "DefaultNotificationTemplates",
    "SESEmailTransport",
    "StubEmailTransport",
]
