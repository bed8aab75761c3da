"""Default notification templates.

Subjects follow the Fuel App mail conventions ("Fuel App - ..."). Bodies are
deliberately minimal HTML; branded layouts belong to the web tier. User
supplied values are HTML-escaped.
"""

from datetime import datetime
from html import escape
from urllib.parse import quote

from src.domain.value_objects import (
    ProposalSnapshot,
    RenderedNotification,
    UserSnapshot,
)

SUBJECT_PREFIX = "Fuel App"


def _subject(title: str) -> str:
    return f"{SUBJECT_PREFIX} - {title}"


def _body(user: UserSnapshot, *paragraphs: str) -> str:
    lines = [f"<p>Dear <strong>{escape(user.username)}</strong>,</p>"]
    lines.extend(f"<p>{paragraph}</p>" for paragraph in paragraphs)
    lines.append(f"<p>Best regards,<br><strong>{SUBJECT_PREFIX} Team</strong></p>")
    return "\n".join(lines)


class DefaultNotificationTemplates:
    """Plain implementation of NotificationTemplateProtocol.

    Attributes:
        _frontend_url: Frontend base URL (no trailing slash) for links.
    """

    def __init__(self, frontend_url: str) -> None:
        self._frontend_url = frontend_url.rstrip("/")

    def confirmation_link(self, email: str, token: str) -> str:
        """Account confirmation URL with URL-encoded email and token."""
        return (
            f"{self._frontend_url}/confirm-email"
            f"?email={quote(email, safe='')}&token={quote(token, safe='')}"
        )

    def user_banned(
        self, user: UserSnapshot, reason: str, duration_days: int | None
    ) -> RenderedNotification:
        if duration_days is None:
            period = "Your account has been locked permanently."
        else:
            period = f"Your account has been locked for {duration_days} day(s)."
        return RenderedNotification(
            subject=_subject("Account Lockout Notification"),
            body=_body(user, period, f"Reason: {escape(reason)}"),
        )

    def user_unlocked(self, user: UserSnapshot) -> RenderedNotification:
        return RenderedNotification(
            subject=_subject("Account Unlocked"),
            body=_body(
                user,
                "An administrator has unlocked your account. You can sign in again.",
            ),
        )

    def ban_auto_expired(
        self, user: UserSnapshot, reason: str, banned_until: datetime
    ) -> RenderedNotification:
        return RenderedNotification(
            subject=_subject("Your Ban Has Expired"),
            body=_body(
                user,
                f"Your ban ended on {banned_until:%Y-%m-%d %H:%M} UTC "
                "and your account is active again.",
                f"Original reason: {escape(reason)}",
            ),
        )

    def account_confirmation(
        self, user: UserSnapshot, confirmation_token: str
    ) -> RenderedNotification:
        link = escape(self.confirmation_link(user.email, confirmation_token))
        return RenderedNotification(
            subject=_subject("Confirm Your Email Address"),
            body=_body(
                user,
                "Thank you for registering! Please confirm your email address:",
                f"<a href='{link}'>Confirm Email Address</a>",
            ),
        )

    def proposal_evaluated(
        self, proposal: ProposalSnapshot, accepted: bool
    ) -> RenderedNotification:
        verdict = "accepted" if accepted else "rejected"
        return RenderedNotification(
            subject=_subject("Price proposal Status"),
            body=_body(
                proposal.author,
                f"Your price proposal of {proposal.proposed_price} for "
                f"{escape(proposal.fuel_type_code)} at "
                f"{escape(proposal.station.describe())} was {verdict}.",
            ),
        )

    def proposal_auto_expired(
        self, proposal: ProposalSnapshot
    ) -> RenderedNotification:
        return RenderedNotification(
            subject=_subject("Price proposal Status"),
            body=_body(
                proposal.author,
                f"Your price proposal of {proposal.proposed_price} for "
                f"{escape(proposal.fuel_type_code)} at "
                f"{escape(proposal.station.describe())} expired before it "
                "could be reviewed and was rejected.",
            ),
        )
