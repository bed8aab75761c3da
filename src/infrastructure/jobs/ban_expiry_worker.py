"""Ban-expiry reconciliation worker.

A temporary ban is correct only until its end date. This worker finds
active bans whose ``banned_until`` has passed and lifts them:

    1. Clear the user's lockout and failed-access counters
    2. Mark the ban inactive with ``unbanned_at``
    3. Persist every successful transition in one save at the end
    4. Publish BanAutoExpired for each (cache invalidation + notification)

Permanent bans (no ``banned_until``) are never touched.

Lockouts are cleared before the save. If the save fails the user is already
unlocked while the ban record stays active and nothing is published; the
ban is still due, so the next sweep clears the lockout again (a no-op) and
retries the save.
"""

from datetime import UTC, datetime

from src.domain.entities import BanRecord
from src.domain.events import BanAutoExpired
from src.domain.protocols import (
    BanRepository,
    EventBusProtocol,
    LoggerProtocol,
    UserRepository,
)
from src.infrastructure.jobs.periodic_worker import PeriodicWorker, SweepSummary

DEFAULT_INTERVAL_SECONDS = 30 * 60


class BanExpiryWorker(PeriodicWorker):
    """Lifts expired temporary bans.

    Example:
        >>> worker = BanExpiryWorker(bans=bans, users=users, event_bus=bus, logger=logger)
        >>> summary = await worker.sweep(now=datetime.now(UTC))
        >>> summary.transitioned
        1
    """

    name = "ban_expiry"

    def __init__(
        self,
        *,
        bans: BanRepository,
        users: UserRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
    ) -> None:
        super().__init__(interval_seconds, logger)
        self._bans = bans
        self._users = users
        self._event_bus = event_bus

    async def sweep(self, now: datetime | None = None) -> SweepSummary:
        """Lift every active ban with ``banned_until <= now``.

        Per-ban failures are logged and leave that ban active for the next
        sweep. A failing save propagates: nothing is published then.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            SweepSummary with found / transitioned / failed counts.
        """
        now = now or datetime.now(UTC)
        expired = await self._bans.find_expired_active(now)
        if not expired:
            self._logger.debug("ban_expiry_sweep_empty")
            return SweepSummary()

        self._logger.info("ban_expiry_sweep_started", found=len(expired))

        lifted: list[BanRecord] = []
        failed = 0
        for ban in expired:
            try:
                if not await self._users.clear_lockout(ban.user.id):
                    self._logger.warning(
                        "ban_expiry_user_missing",
                        ban_id=str(ban.id),
                        user_id=str(ban.user.id),
                    )
                ban.expire(now)
                lifted.append(ban)
            except Exception as e:
                failed += 1
                self._logger.error(
                    "ban_expiry_failed",
                    error=e,
                    ban_id=str(ban.id),
                    user_id=str(ban.user.id),
                )

        if lifted:
            await self._bans.save_all(lifted)

        for ban in lifted:
            # banned_until is set: find_expired_active never returns permanent bans
            await self._event_bus.publish(
                BanAutoExpired(
                    user=ban.user,
                    ban_id=ban.id,
                    reason=ban.reason,
                    banned_at=ban.banned_at,
                    banned_until=ban.banned_until,
                )
            )
            self._logger.info(
                "ban_auto_expired",
                ban_id=str(ban.id),
                user_id=str(ban.user.id),
            )

        summary = SweepSummary(
            found=len(expired), transitioned=len(lifted), failed=failed
        )
        self._logger.info(
            "ban_expiry_sweep_completed",
            found=summary.found,
            transitioned=summary.transitioned,
            failed=summary.failed,
        )
        return summary
