"""Subscription configuration and lint errors."""

from dataclasses import dataclass
from enum import Enum

from domain_pubsub.core.enums import ErrorCode
from domain_pubsub.core.errors import PubSubError


class InvalidSubscriptionConfig(PubSubError):
    """The subscription mapping (or its source) is unusable."""

    code = ErrorCode.SUBSCRIPTION_CONFIG_INVALID

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid subscription configuration: {reason}")


class SubscriptionSourceNotSet(PubSubError):
    """load()/register() was called before set_configuration_source()."""

    code = ErrorCode.SUBSCRIPTION_SOURCE_NOT_SET

    def __init__(self) -> None:
        super().__init__(
            "No subscription source configured. "
            "Call set_configuration_source(path) or set SUBSCRIPTIONS_PATH."
        )


class LintViolationKind(Enum):
    """Which half of the handler/subscription check failed."""

    ORPHANED_HANDLER = "orphaned_handler"
    ORPHANED_SUBSCRIPTION = "orphaned_subscription"


@dataclass(frozen=True, slots=True, kw_only=True)
class LintViolation:
    """One mismatch between handlers and subscriptions.

    Attributes:
        kind: Orphaned handler or orphaned subscription.
        domain_name: Domain owning the handler or subscription.
        event_name: Fully-qualified event name (None when an orphaned
            handler's name matches no known event).
        handler_id: Handler identifier, e.g. "messaging.OrderingOrderCreatedHandler".
    """

    kind: LintViolationKind
    domain_name: str
    event_name: str | None
    handler_id: str

    def __str__(self) -> str:
        if self.kind is LintViolationKind.ORPHANED_HANDLER:
            return (
                f"{self.handler_id} handles ({self.domain_name}, "
                f"{self.event_name or '?'}) but has no subscription"
            )
        return (
            f"({self.domain_name}, {self.event_name}) is subscribed "
            f"but {self.handler_id} does not exist"
        )


class SubscriptionLintError(PubSubError):
    """Handlers and subscriptions are out of sync.

    Attributes:
        violations: Every offending (domain, event) pair, handlers first.
    """

    code = ErrorCode.SUBSCRIPTION_LINT_FAILED

    def __init__(self, violations: list[LintViolation]) -> None:
        self.violations = violations
        lines = "\n".join(f"  - {v}" for v in violations)
        super().__init__(
            f"{len(violations)} subscription lint violation(s):\n{lines}",
            details={"violation_count": len(violations)},
        )

    @property
    def orphaned_handlers(self) -> list[LintViolation]:
        return [
            v for v in self.violations if v.kind is LintViolationKind.ORPHANED_HANDLER
        ]

    @property
    def orphaned_subscriptions(self) -> list[LintViolation]:
        return [
            v
            for v in self.violations
            if v.kind is LintViolationKind.ORPHANED_SUBSCRIPTION
        ]
