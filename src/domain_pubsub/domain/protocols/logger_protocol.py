"""LoggerProtocol definition for structured logging.

Every engine component takes a logger by injection and logs event-style
messages ("event_dispatched", "handler_skipped") with key-value context.
Implementations MUST keep logs structured and MUST NOT dump raw payloads
(payloads may carry personal data); log event names, ids and handler ids.

Log Levels:
    - DEBUG: Per-handler dispatch detail
    - INFO: Boot (subscriptions loaded, lint passed), dispatched events
    - WARNING: Ignored payload keys, failed in-memory jobs
    - ERROR: Handler failures, job enqueue failures
    - CRITICAL: Not used by the engine

Usage:
    from domain_pubsub.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("subscriptions_loaded", domain_count=3, entry_count=12)

    job_logger = logger.bind(handler_id=handler_id, event_id=str(event.event_id))
    job_logger.info("job_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event-style message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
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
            message: Event-style message.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
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
