"""Cache invalidation event handler.

Drops cache entries made stale by a committed change. Every entry is
derivable from persisted state, so deleting too much is harmless and
deleting twice is the same as deleting once.

Invalidation Map:
    UserBanned / UserUnlocked / BanAutoExpired:
        - users-list*            (prefix)
        - user-info:<email>
        - user-stats:<email>
    PriceProposalEvaluated:
        - user-stats:<author email>   (always)
        - top-users*                  (accepted only)
        - station:<station id>*       (accepted only)

Usage:
    >>> handler = CacheInvalidationEventHandler(cache=get_cache(), logger=get_logger())
    >>> event_bus.subscribe(UserBanned, handler.handle_user_banned)
"""

from src.core.result import Failure
from src.domain.events import (
    BanAutoExpired,
    DomainEvent,
    PriceProposalEvaluated,
    UserBanned,
    UserUnlocked,
)
from src.domain.protocols import CacheProtocol, LoggerProtocol
from src.domain.value_objects import UserSnapshot
from src.infrastructure.cache.cache_keys import CacheKeys


class CacheInvalidationEventHandler:
    """Event handler for cache invalidation.

    A failed cache call is logged as ``cache_invalidation_failed`` and the
    remaining keys are still attempted. Nothing is raised to the event bus.

    Attributes:
        _cache: Cache store.
        _logger: Logger for invalidation failures.
    """

    def __init__(self, cache: CacheProtocol, logger: LoggerProtocol) -> None:
        self._cache = cache
        self._logger = logger

    async def handle_user_banned(self, event: UserBanned) -> None:
        """Invalidate user listing and per-user entries after a ban."""
        await self._invalidate_user(event, event.user)

    async def handle_user_unlocked(self, event: UserUnlocked) -> None:
        """Invalidate user listing and per-user entries after an unban."""
        await self._invalidate_user(event, event.user)

    async def handle_ban_auto_expired(self, event: BanAutoExpired) -> None:
        """Invalidate user listing and per-user entries after ban expiry."""
        await self._invalidate_user(event, event.user)

    async def handle_price_proposal_evaluated(
        self,
        event: PriceProposalEvaluated,
    ) -> None:
        """Invalidate entries affected by a proposal verdict.

        A rejected proposal only changes the author's statistics. An accepted
        one also changes the station's price and the points leaderboard.
        """
        proposal = event.proposal
        await self._delete(event, CacheKeys.user_stats(proposal.author.email))

        if event.accepted:
            await self._delete_prefix(event, CacheKeys.TOP_USERS)
            await self._delete_prefix(event, CacheKeys.station(proposal.station.id))

    async def _invalidate_user(self, event: DomainEvent, user: UserSnapshot) -> None:
        await self._delete_prefix(event, CacheKeys.USERS_LIST)
        await self._delete(event, CacheKeys.user_info(user.email))
        await self._delete(event, CacheKeys.user_stats(user.email))

    async def _delete(self, event: DomainEvent, key: str) -> None:
        try:
            result = await self._cache.delete(key)
        except Exception as e:
            self._log_failure(event, key, f"{type(e).__name__}: {e}")
            return
        if isinstance(result, Failure):
            self._log_failure(event, key, result.error.message)

    async def _delete_prefix(self, event: DomainEvent, prefix: str) -> None:
        try:
            result = await self._cache.delete_by_prefix(prefix)
        except Exception as e:
            self._log_failure(event, f"{prefix}*", f"{type(e).__name__}: {e}")
            return
        if isinstance(result, Failure):
            self._log_failure(event, f"{prefix}*", result.error.message)
        else:
            self._logger.debug(
                "cache_prefix_invalidated",
                event_type=event.event_type,
                prefix=prefix,
                deleted_count=result.value,
            )

    def _log_failure(self, event: DomainEvent, target: str, error: str) -> None:
        self._logger.warning(
            "cache_invalidation_failed",
            event_type=event.event_type,
            event_id=str(event.event_id),
            cache_key=target,
            error=error,
        )
