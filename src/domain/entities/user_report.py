"""User report domain entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import ReportStatus


@dataclass
class UserReport:
    """Report filed by one user against another.

    Attributes:
        id: Unique report identifier.
        reporting_user_id: User who filed the report.
        reported_user_id: User being reported.
        description: Free-text description.
        created_at: When the report was filed.
        status: Moderation state.
        reviewed_by_admin_id: Admin who reviewed it (None while pending).
        reviewed_at: When it was reviewed (None while pending).
    """

    id: UUID
    reporting_user_id: UUID
    reported_user_id: UUID
    description: str
    created_at: datetime
    status: ReportStatus = ReportStatus.PENDING
    reviewed_by_admin_id: UUID | None = None
    reviewed_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == ReportStatus.PENDING

    def resolve(self, admin_id: UUID, reviewed_at: datetime) -> None:
        """Mark the report as accepted by an admin.

        Args:
            admin_id: Reviewing admin.
            reviewed_at: Review timestamp.

        Raises:
            ValueError: If the report was already reviewed.
        """
        if not self.is_pending:
            raise ValueError(f"Report {self.id} already reviewed")
        self.status = ReportStatus.ACCEPTED
        self.reviewed_by_admin_id = admin_id
        self.reviewed_at = reviewed_at
