"""Report event handler.

Once a user is banned, every pending report against them is considered
dealt with: the handler resolves them as accepted, attributed to the admin
who imposed the ban.
"""

from datetime import UTC, datetime

from src.domain.events import UserBanned
from src.domain.protocols import LoggerProtocol, ReportRepository, UserRepository


class ReportEventHandler:
    """Event handler for clearing user reports.

    Attributes:
        _reports: Report repository.
        _users: User repository (admin lookup).
        _logger: Logger.
    """

    def __init__(
        self,
        reports: ReportRepository,
        users: UserRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._reports = reports
        self._users = users
        self._logger = logger

    async def handle_user_banned(self, event: UserBanned) -> None:
        """Resolve pending reports against the banned user.

        Skips (with a warning) when the admin no longer exists. Already
        reviewed reports are untouched, so a repeated event is a no-op.
        """
        try:
            admin = await self._users.find_by_id(event.admin.id)
            if admin is None:
                self._logger.warning(
                    "report_clearing_admin_not_found",
                    event_id=str(event.event_id),
                    admin_id=str(event.admin.id),
                    user_id=str(event.user.id),
                )
                return

            resolved = await self._reports.resolve_pending_for_user(
                event.user.id, admin.id, datetime.now(UTC)
            )
        except Exception as e:
            self._logger.warning(
                "report_clearing_failed",
                event_id=str(event.event_id),
                user_id=str(event.user.id),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return

        self._logger.info(
            "reports_cleared",
            event_id=str(event.event_id),
            user_id=str(event.user.id),
            admin_id=str(admin.id),
            resolved_count=resolved,
        )
