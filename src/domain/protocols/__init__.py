"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    # Service protocols
    from src.domain.protocols import CacheProtocol, NotificationQueueProtocol

    # Repository protocols
    from src.domain.protocols import BanRepository, UserRepository
"""

# Service protocols
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_queue_protocol import (
    NotificationQueueProtocol,
)
from src.domain.protocols.notification_template_protocol import (
    NotificationTemplateProtocol,
)
from src.domain.protocols.notification_transport_protocol import (
    NotificationTransportProtocol,
)

# Repository protocols
from src.domain.protocols.ban_repository import BanRepository
from src.domain.protocols.price_proposal_repository import PriceProposalRepository
from src.domain.protocols.proposal_statistic_repository import (
    ProposalStatisticRepository,
)
from src.domain.protocols.report_repository import ReportRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "CacheProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "NotificationQueueProtocol",
    "NotificationTemplateProtocol",
    "NotificationTransportProtocol",
    # Repository protocols
    "BanRepository",
    "PriceProposalRepository",
    "ProposalStatisticRepository",
    "ReportRepository",
    "UserRepository",
]
