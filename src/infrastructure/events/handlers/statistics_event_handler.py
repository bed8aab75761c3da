"""Statistics event handler.

Keeps per-user proposal statistics in step with proposal verdicts and
creates the zeroed record when a user registers.

Business Rules (see ProposalStatistic):
    - Verdict increments total and either approved or rejected
    - acceptance_rate = approved / total * 100 (integer, 0 when total is 0)
    - Accepted proposals earn one point
"""

from src.domain.entities import ProposalStatistic
from src.domain.events import PriceProposalEvaluated, UserRegistered
from src.domain.protocols import LoggerProtocol, ProposalStatisticRepository


class StatisticsEventHandler:
    """Event handler for proposal statistics.

    Attributes:
        _statistics: Proposal statistics repository.
        _logger: Logger.
    """

    def __init__(
        self,
        statistics: ProposalStatisticRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._statistics = statistics
        self._logger = logger

    async def handle_price_proposal_evaluated(
        self,
        event: PriceProposalEvaluated,
    ) -> None:
        """Apply the verdict to the author's statistics.

        A missing record is logged and skipped; it is not created here.
        """
        author = event.proposal.author
        try:
            statistic = await self._statistics.find_by_user_id(author.id)
            if statistic is None:
                self._logger.warning(
                    "statistics_not_found",
                    event_id=str(event.event_id),
                    user_id=str(author.id),
                    proposal_id=str(event.proposal.id),
                )
                return

            statistic.record_verdict(event.accepted)
            await self._statistics.update(statistic)
        except Exception as e:
            self._logger.warning(
                "statistics_update_failed",
                event_id=str(event.event_id),
                user_id=str(author.id),
                proposal_id=str(event.proposal.id),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return

        self._logger.info(
            "statistics_updated",
            event_id=str(event.event_id),
            user_id=str(author.id),
            proposal_id=str(event.proposal.id),
            accepted=event.accepted,
            acceptance_rate=statistic.acceptance_rate,
        )

    async def handle_user_registered(self, event: UserRegistered) -> None:
        """Create a zeroed statistics record for a new user.

        An existing record is left untouched.
        """
        user = event.user
        try:
            if await self._statistics.find_by_user_id(user.id) is not None:
                self._logger.info(
                    "statistics_already_initialized",
                    event_id=str(event.event_id),
                    user_id=str(user.id),
                )
                return
            await self._statistics.add(ProposalStatistic.initial(user.id))
        except Exception as e:
            self._logger.warning(
                "statistics_initialization_failed",
                event_id=str(event.event_id),
                user_id=str(user.id),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return

        self._logger.info(
            "statistics_initialized",
            event_id=str(event.event_id),
            user_id=str(user.id),
        )
