"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the side-effect
handlers and background workers while remaining backend-agnostic.

Log Levels:
    - DEBUG: Per-key cache deletions, per-message sends
    - INFO: Sweep summaries, worker start/stop
    - WARNING: Handler failures, cache failures, dropped notifications
    - ERROR: Unexpected errors in worker loops (loop continues)
    - CRITICAL: Not used by handlers; reserved for process-level failures

Security:
    - NEVER log notification bodies or confirmation tokens

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("ban_expiry_sweep_completed", found=3, transitioned=3, failed=0)

    worker_logger = logger.bind(worker="ban_expiry")
    worker_logger.info("worker_started")  # worker="ban_expiry" auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: snake_case event name + key-value
    context. Implementations may enrich logs with timestamp and level.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementation includes
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for process-level failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
