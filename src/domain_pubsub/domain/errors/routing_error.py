"""Routing and handler execution errors."""

from domain_pubsub.core.enums import ErrorCode
from domain_pubsub.core.errors import PubSubError


class UnknownDomainError(PubSubError):
    """The domain is not registered with the router."""

    code = ErrorCode.DOMAIN_NOT_FOUND

    def __init__(self, domain_name: str) -> None:
        self.domain_name = domain_name
        super().__init__(
            f"Domain '{domain_name}' is not registered.",
            details={"domain_name": domain_name},
        )


class DomainAlreadyRegistered(PubSubError):
    """A domain with the same name is already registered."""

    code = ErrorCode.DOMAIN_ALREADY_REGISTERED

    def __init__(self, domain_name: str) -> None:
        self.domain_name = domain_name
        super().__init__(
            f"Domain '{domain_name}' is already registered.",
            details={"domain_name": domain_name},
        )


class MissingHandlerError(PubSubError):
    """A convention-routed domain has no handler class for the event."""

    code = ErrorCode.HANDLER_NOT_FOUND

    def __init__(self, domain_name: str, event_name: str, handler_id: str) -> None:
        self.domain_name = domain_name
        self.event_name = event_name
        self.handler_id = handler_id
        super().__init__(
            f"Domain '{domain_name}' has no handler '{handler_id}' "
            f"for event '{event_name}'.",
            details={
                "domain_name": domain_name,
                "event_name": event_name,
                "handler_id": handler_id,
            },
        )


class HandlerExecutionError(PubSubError):
    """A synchronous handler raised. The original exception is __cause__."""

    code = ErrorCode.HANDLER_EXECUTION_FAILED

    def __init__(self, domain_name: str, event_name: str, handler_id: str) -> None:
        self.domain_name = domain_name
        self.event_name = event_name
        self.handler_id = handler_id
        super().__init__(
            f"Handler '{handler_id}' failed while handling '{event_name}' "
            f"in domain '{domain_name}'.",
            details={
                "domain_name": domain_name,
                "event_name": event_name,
                "handler_id": handler_id,
            },
        )


class JobEnqueueError(PubSubError):
    """The async job backend rejected a hand-off."""

    code = ErrorCode.JOB_ENQUEUE_FAILED

    def __init__(self, handler_id: str, event_name: str, reason: str) -> None:
        self.handler_id = handler_id
        self.event_name = event_name
        super().__init__(
            f"Could not enqueue '{handler_id}' for '{event_name}': {reason}",
            details={"handler_id": handler_id, "event_name": event_name},
        )


class InvalidJobPayload(PubSubError):
    """A job pulled from the backend cannot be decoded."""

    code = ErrorCode.JOB_PAYLOAD_INVALID

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid job payload: {reason}")
