"""Domain errors package.

All errors raised by the engine. Each inherits from PubSubError and carries
an ErrorCode.
"""

from domain_pubsub.domain.errors.event_error import (
    AmbiguousEventName,
    InvalidEventSchema,
    MissingPayloadAttribute,
    PayloadTypeMismatch,
    SchemaAlreadyDefined,
    UnknownEventSchema,
)
from domain_pubsub.domain.errors.routing_error import (
    DomainAlreadyRegistered,
    HandlerExecutionError,
    InvalidJobPayload,
    JobEnqueueError,
    MissingHandlerError,
    UnknownDomainError,
)
from domain_pubsub.domain.errors.subscription_error import (
    InvalidSubscriptionConfig,
    LintViolation,
    LintViolationKind,
    SubscriptionLintError,
    SubscriptionSourceNotSet,
)

__all__ = [
    # Events
    "AmbiguousEventName",
    "InvalidEventSchema",
    "MissingPayloadAttribute",
    "PayloadTypeMismatch",
    "SchemaAlreadyDefined",
    "UnknownEventSchema",
    # Routing
    "DomainAlreadyRegistered",
    "HandlerExecutionError",
    "InvalidJobPayload",
    "JobEnqueueError",
    "MissingHandlerError",
    "UnknownDomainError",
    # Subscriptions
    "InvalidSubscriptionConfig",
    "LintViolation",
    "LintViolationKind",
    "SubscriptionLintError",
    "SubscriptionSourceNotSet",
]
