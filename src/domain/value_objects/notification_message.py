"""Outbound notification value objects.

NotificationMessage is what travels through the bounded queue. Once
enqueued it is opaque: neither the queue nor the worker interprets it.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RenderedNotification:
    """Subject and body produced by a notification template.

    Attributes:
        subject: Message subject line.
        body: Message body (HTML).
    """

    subject: str
    body: str


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationMessage:
    """Outbound notification ready for delivery.

    Attributes:
        recipient: Destination email address.
        subject: Message subject line.
        body: Message body (HTML).
    """

    recipient: str
    subject: str
    body: str

    @classmethod
    def from_rendered(
        cls, recipient: str, rendered: RenderedNotification
    ) -> "NotificationMessage":
        """Build a message from a rendered template.

        Args:
            recipient: Destination email address.
            rendered: Subject/body pair from a template.

        Returns:
            NotificationMessage: Message ready to enqueue.
        """
        return cls(recipient=recipient, subject=rendered.subject, body=rendered.body)
