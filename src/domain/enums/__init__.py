"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - PriceProposalStatus: Review state of a price proposal
    - ReportStatus: Moderation state of a user report
"""

from src.domain.enums.price_proposal_status import PriceProposalStatus
from src.domain.enums.report_status import ReportStatus

__all__ = [
    "PriceProposalStatus",
    "ReportStatus",
]
