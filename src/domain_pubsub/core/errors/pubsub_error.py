"""Base error class for the event resolution and dispatch engine.

Unlike request-level domain errors, engine failures are raised: resolution,
validation, routing and lint failures must surface to the emitting caller (or
abort boot) immediately.

Architecture:
- Every engine error inherits from PubSubError
- Each error carries a machine-readable ErrorCode and optional details
- Subclasses add typed attributes describing the failure (event_name, field)

Usage:
    from domain_pubsub.core.errors import PubSubError
    from domain_pubsub.core.enums import ErrorCode

    class MyError(PubSubError):
        code = ErrorCode.HANDLER_NOT_FOUND
"""

from typing import Any, ClassVar

from domain_pubsub.core.enums import ErrorCode


class PubSubError(Exception):
    """Base engine error.

    Attributes:
        code: Machine-readable error code (one per subclass).
        message: Human-readable error message.
        details: Optional context for debugging and structured logging.
    """

    code: ClassVar[ErrorCode]

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
