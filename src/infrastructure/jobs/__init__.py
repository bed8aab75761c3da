"""Background jobs: notification delivery and reconciliation.

Components:
    - BoundedNotificationQueue: Bounded producer/consumer queue
    - NotificationWorker: Single consumer sending via the transport
    - BanExpiryWorker: Lifts expired temporary bans
    - ProposalExpiryWorker: Rejects stale pending proposals
    - SideEffectRuntime: Starts/stops the three loops together
"""

from src.infrastructure.jobs.ban_expiry_worker import BanExpiryWorker
from src.infrastructure.jobs.notification_queue import BoundedNotificationQueue
from src.infrastructure.jobs.notification_worker import NotificationWorker
from src.infrastructure.jobs.periodic_worker import PeriodicWorker, SweepSummary
from src.infrastructure.jobs.proposal_expiry_worker import ProposalExpiryWorker
from src.infrastructure.jobs.runtime import RuntimeHealthStatus, SideEffectRuntime

__all__ = [
    "BanExpiryWorker",
    "BoundedNotificationQueue",
    "NotificationWorker",
    "PeriodicWorker",
    "ProposalExpiryWorker",
    "RuntimeHealthStatus",
    "SideEffectRuntime",
    "SweepSummary",
]
