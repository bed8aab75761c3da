"""
Process host for the side-effect runtime.

A minimal FastAPI application: its lifespan starts the background workers
(notification delivery, ban expiry, proposal expiry) on startup and stops
them on shutdown. It serves no business routes, only probes.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.core.config import get_settings
from src.core.container import get_event_bus, get_logger, get_side_effect_runtime


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Wire the event bus, start the side-effect runtime
    - Shutdown: Stop the runtime (workers finish their current unit)

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    settings = get_settings()
    logger = get_logger()

    # Subscriptions must exist before any worker can publish
    get_event_bus()
    runtime = get_side_effect_runtime()
    await runtime.start()
    logger.info(
        "application_started",
        app_name=settings.app_name,
        environment=settings.environment.value,
    )

    try:
        yield
    finally:
        await runtime.stop()
        logger.info("application_stopped", app_name=settings.app_name)


def create_app() -> FastAPI:
    """Build the FastAPI application from current settings."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Event-driven side effects and reconciliation for Fuel App",
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        debug=settings.debug,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health() -> JSONResponse:
        """
        Health check endpoint for monitoring and load balancers.

        Returns 503 while the runtime is stopped or any worker has died.

        Returns:
            JSONResponse: Runtime status, worker liveness and queue depth.
        """
        status = get_side_effect_runtime().health()
        return JSONResponse(
            status_code=200 if status.healthy else 503,
            content={
                "status": "healthy" if status.healthy else "unhealthy",
                "version": settings.app_version,
                **status.to_dict(),
            },
        )

    @app.get("/config")
    async def get_config() -> JSONResponse:
        """
        Configuration debug endpoint (development only).

        Returns:
            JSONResponse: Configuration details (sanitized).
        """
        if not settings.is_development:
            return JSONResponse(
                status_code=403,
                content={"detail": "Config endpoint only available in development"},
            )

        return JSONResponse(
            content={
                "environment": settings.environment.value,
                "debug": settings.debug,
                "cache": {
                    "url": "<redacted>",
                    "namespace": settings.cache_key_namespace,
                    "default_ttl_seconds": settings.cache_default_ttl_seconds,
                },
                "notifications": {
                    "queue_capacity": settings.notification_queue_capacity,
                    "enqueue_timeout_seconds": (
                        settings.notification_enqueue_timeout_seconds
                    ),
                    "mail_from": settings.mail_from,
                },
                "reconciliation": {
                    "ban_expiry_interval_seconds": settings.ban_expiry_interval_seconds,
                    "proposal_expiry_interval_seconds": (
                        settings.proposal_expiry_interval_seconds
                    ),
                    "proposal_expiry_window_hours": (
                        settings.proposal_expiry_window_hours
                    ),
                },
            }
        )

    return app


app = create_app()
