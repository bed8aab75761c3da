"""Domain entities.

Mutable business objects with identity. Reconciliation workers load them,
apply a transition, and hand them back to their repository.
"""

from src.domain.entities.ban_record import BanRecord
from src.domain.entities.price_proposal import PriceProposal
from src.domain.entities.proposal_statistic import ProposalStatistic
from src.domain.entities.user_report import UserReport

__all__ = [
    "BanRecord",
    "PriceProposal",
    "ProposalStatistic",
    "UserReport",
]
