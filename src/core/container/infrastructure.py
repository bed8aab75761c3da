"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, JSON outside development)
- Cache (Redis)
- Notification queue (bounded, in-process)
- Notification transport (stub/AWS SES)
- Notification templates
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.cache_protocol import CacheProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.notification_template_protocol import (
        NotificationTemplateProtocol,
    )
    from src.domain.protocols.notification_transport_protocol import (
        NotificationTransportProtocol,
    )
    from src.infrastructure.jobs.notification_queue import BoundedNotificationQueue


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON, one object per line)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns RedisAdapter with connection pooling. The pool is shared across
    every handler that invalidates cache entries.

    Returns:
        Cache client implementing CacheProtocol.
    """
    from redis.asyncio import ConnectionPool, Redis

    from src.infrastructure.cache.redis_adapter import RedisAdapter

    settings = get_settings()
    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
        socket_keepalive=True,
    )
    redis_client = Redis(connection_pool=pool)
    return RedisAdapter(
        redis_client=redis_client,
        namespace=settings.cache_key_namespace,
        delete_batch_size=settings.cache_delete_batch_size,
    )


@lru_cache()
def get_notification_queue() -> "BoundedNotificationQueue":
    """Get the notification queue singleton (app-scoped).

    Notification handlers produce into it and the notification worker is its
    only consumer, so both must receive this same instance.

    Returns:
        BoundedNotificationQueue sized from settings.
    """
    from src.infrastructure.jobs.notification_queue import BoundedNotificationQueue

    settings = get_settings()
    return BoundedNotificationQueue(
        capacity=settings.notification_queue_capacity,
        enqueue_timeout=settings.notification_enqueue_timeout_seconds,
    )


@lru_cache()
def get_notification_transport() -> "NotificationTransportProtocol":
    """Get notification transport singleton (app-scoped).

    Returns correct adapter based on ENVIRONMENT:
        - development/testing/ci: StubEmailTransport (logs instead of sending)
        - production: SESEmailTransport (real AWS SES)

    Returns:
        Transport implementing NotificationTransportProtocol.
    """
    settings = get_settings()

    if settings.is_production:
        from src.infrastructure.email.ses_email_transport import SESEmailTransport

        return SESEmailTransport(
            from_email=settings.mail_from,
            from_name=settings.mail_display_name,
            region=settings.aws_region,
        )

    from src.infrastructure.email.stub_email_transport import StubEmailTransport

    return StubEmailTransport(logger=get_logger())


@lru_cache()
def get_notification_templates() -> "NotificationTemplateProtocol":
    """Get notification template renderer (app-scoped)."""
    from src.infrastructure.email.templates import DefaultNotificationTemplates

    return DefaultNotificationTemplates(frontend_url=get_settings().frontend_url)
