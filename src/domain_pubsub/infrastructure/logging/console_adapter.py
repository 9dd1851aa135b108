"""structlog-backed logger for the engine.

Emission, dispatch, lint and job events are logged as structured key-value
records on stdout:
- development: colored console lines
- testing/ci/production: one JSON object per line

Exceptions passed as ``error=`` are flattened into fields so JSON output
stays parseable. Engine errors (PubSubError) also contribute their ErrorCode,
and a wrapped handler failure contributes its cause:

    {"event": "handler_failed", "handler_id": "messaging.OrderingOrderCreatedHandler",
     "error_type": "HandlerExecutionError", "error_code": "handler_execution_failed",
     "cause_type": "RuntimeError", "cause_message": "card declined", ...}

Structural implementation of LoggerProtocol (no inheritance).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from domain_pubsub.core.errors import PubSubError


def error_fields(error: Exception) -> dict[str, Any]:
    """Flatten an exception (and its direct cause) into log fields."""
    fields: dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    if isinstance(error, PubSubError):
        fields["error_code"] = error.code.value
    cause = error.__cause__
    if cause is not None:
        fields["cause_type"] = type(cause).__name__
        fields["cause_message"] = str(cause)
    return fields


class ConsoleAdapter:
    """Console logger.

    Args:
        use_json: JSON lines when True, colored console output otherwise.
        level: Minimum level emitted.
    """

    def __init__(self, *, use_json: bool = False, level: int = logging.INFO) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]
        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; ``error`` is flattened by error_fields()."""
        if error is not None:
            context.update(error_fields(error))
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context.update(error_fields(error))
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter with context bound to every record.

        Used by the job worker to tag a job's records with its handler id,
        event name and event id.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
