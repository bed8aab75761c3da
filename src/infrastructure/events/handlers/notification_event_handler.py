"""Notification event handler.

Turns domain events into outbound notifications: renders the subject/body
through the template collaborator and enqueues the message. Sending happens
later, on the notification worker.

Notifications:
    UserBanned              → banned user ("Account Lockout Notification")
    UserUnlocked            → unbanned user ("Account Unlocked")
    BanAutoExpired          → user whose ban ended ("Your Ban Has Expired")
    UserRegistered          → new user (confirmation link)
    PriceProposalEvaluated  → proposal author (verdict)
    ProposalAutoExpired     → proposal author (expired without review)

Usage:
    >>> handler = NotificationEventHandler(
    ...     queue=get_notification_queue(),
    ...     templates=get_notification_templates(),
    ...     logger=get_logger(),
    ... )
    >>> event_bus.subscribe(UserBanned, handler.handle_user_banned)
"""

from collections.abc import Callable

from src.domain.events import (
    BanAutoExpired,
    DomainEvent,
    PriceProposalEvaluated,
    ProposalAutoExpired,
    UserBanned,
    UserRegistered,
    UserUnlocked,
)
from src.domain.protocols import (
    LoggerProtocol,
    NotificationQueueProtocol,
    NotificationTemplateProtocol,
)
from src.domain.value_objects import NotificationMessage, RenderedNotification


class NotificationEventHandler:
    """Event handler that enqueues outbound notifications.

    When the queue is full the handler waits (backpressure), so publish
    returns only once the message is queued. A rejected enqueue (closed
    queue, enqueue timeout) is logged as a warning; there is no retry.

    Attributes:
        _queue: Bounded notification queue.
        _templates: Subject/body renderer.
        _logger: Logger for rejected enqueues and render failures.
    """

    def __init__(
        self,
        queue: NotificationQueueProtocol,
        templates: NotificationTemplateProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._queue = queue
        self._templates = templates
        self._logger = logger

    async def handle_user_banned(self, event: UserBanned) -> None:
        await self._notify(
            event,
            "user_banned",
            event.user.email,
            lambda: self._templates.user_banned(
                event.user, event.reason, event.duration_days
            ),
        )

    async def handle_user_unlocked(self, event: UserUnlocked) -> None:
        await self._notify(
            event,
            "user_unlocked",
            event.user.email,
            lambda: self._templates.user_unlocked(event.user),
        )

    async def handle_ban_auto_expired(self, event: BanAutoExpired) -> None:
        await self._notify(
            event,
            "ban_auto_expired",
            event.user.email,
            lambda: self._templates.ban_auto_expired(
                event.user, event.reason, event.banned_until
            ),
        )

    async def handle_user_registered(self, event: UserRegistered) -> None:
        """Send the account confirmation link (token never logged)."""
        await self._notify(
            event,
            "account_confirmation",
            event.user.email,
            lambda: self._templates.account_confirmation(
                event.user, event.confirmation_token
            ),
        )

    async def handle_price_proposal_evaluated(
        self,
        event: PriceProposalEvaluated,
    ) -> None:
        await self._notify(
            event,
            "proposal_evaluated",
            event.proposal.author.email,
            lambda: self._templates.proposal_evaluated(event.proposal, event.accepted),
        )

    async def handle_proposal_auto_expired(self, event: ProposalAutoExpired) -> None:
        await self._notify(
            event,
            "proposal_auto_expired",
            event.proposal.author.email,
            lambda: self._templates.proposal_auto_expired(event.proposal),
        )

    async def _notify(
        self,
        event: DomainEvent,
        template: str,
        recipient: str,
        render: Callable[[], RenderedNotification],
    ) -> None:
        try:
            message = NotificationMessage.from_rendered(recipient, render())
            queued = await self._queue.enqueue(message)
        except Exception as e:
            self._logger.warning(
                "notification_enqueue_failed",
                event_type=event.event_type,
                event_id=str(event.event_id),
                template=template,
                recipient=recipient,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return

        if not queued:
            self._logger.warning(
                "notification_enqueue_rejected",
                event_type=event.event_type,
                event_id=str(event.event_id),
                template=template,
                recipient=recipient,
            )
            return

        self._logger.debug(
            "notification_enqueued",
            event_type=event.event_type,
            event_id=str(event.event_id),
            template=template,
            recipient=recipient,
        )
