"""Subscription linter: handlers vs. subscriptions drift detection.

Cross-checks the handler classes registered on convention-routed domains
against the subscription table and fails if either side has something the
other lacks:

    - orphaned handler: OrderingOrderCreatedHandler exists in "messaging"
      but messaging has no "ordering::order_created" entry
    - orphaned subscription: messaging subscribes to
      "ordering::order_created" but the handler class does not exist

Exemptions:
    - "all_events" entries match anything (never orphaned, and they cover
      every handler of their domain)
    - custom-routed domains own no handler classes; their exact entries are
      satisfied by the receive function

Run it at boot (strict mode) or as a CI test, not per request:

    >>> SubscriptionLinter(domains, subscriptions, catalog).lint()
"""

from domain_pubsub.core.constants import HANDLER_ID_SEPARATOR
from domain_pubsub.domain.errors import (
    LintViolation,
    LintViolationKind,
    SubscriptionLintError,
)
from domain_pubsub.domain.events.naming import handler_class_name, handler_id
from domain_pubsub.domain.events.schema import SchemaCatalog
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol
from domain_pubsub.domain.routing.registry import DomainRegistry
from domain_pubsub.domain.subscriptions.registry import SubscriptionRegistry


class SubscriptionLinter:
    """Consistency check between DomainRegistry and SubscriptionRegistry.

    Attributes:
        _domains: Declared domains and their handler classes.
        _subscriptions: Loaded subscription table.
        _catalog: Schema catalog, used to name the event an orphaned
            handler was written for.
        _logger: Logger for lint results.
    """

    def __init__(
        self,
        domains: DomainRegistry,
        subscriptions: SubscriptionRegistry,
        catalog: SchemaCatalog,
        logger: LoggerProtocol,
    ) -> None:
        self._domains = domains
        self._subscriptions = subscriptions
        self._catalog = catalog
        self._logger = logger

    def find_violations(self) -> list[LintViolation]:
        """Compute every mismatch without raising.

        Returns:
            Orphaned handlers (domain registration order) followed by
            orphaned subscriptions (subscription file order).
        """
        subscribed: dict[str, set[str]] = {}
        for entry in self._subscriptions.entries():
            if not entry.is_wildcard:
                subscribed.setdefault(entry.domain_name, set()).add(entry.event_name)

        known_events = {
            handler_class_name(name): name for name in self._catalog.event_names()
        }
        for events in subscribed.values():
            known_events.update({handler_class_name(name): name for name in events})

        violations: list[LintViolation] = []

        for domain in self._domains:
            if domain.is_custom or self._subscriptions.has_wildcard(domain.name):
                continue
            expected = {
                handler_class_name(name) for name in subscribed.get(domain.name, ())
            }
            for class_name in domain.handlers():
                if class_name not in expected:
                    violations.append(
                        LintViolation(
                            kind=LintViolationKind.ORPHANED_HANDLER,
                            domain_name=domain.name,
                            event_name=known_events.get(class_name),
                            handler_id=f"{domain.name}{HANDLER_ID_SEPARATOR}{class_name}",
                        )
                    )

        for entry in self._subscriptions.entries():
            if entry.is_wildcard:
                continue
            if entry.domain_name in self._domains:
                domain = self._domains.get(entry.domain_name)
                if domain.is_custom:
                    continue
                if handler_class_name(entry.event_name) in domain.handlers():
                    continue
            violations.append(
                LintViolation(
                    kind=LintViolationKind.ORPHANED_SUBSCRIPTION,
                    domain_name=entry.domain_name,
                    event_name=entry.event_name,
                    handler_id=handler_id(entry.domain_name, entry.event_name),
                )
            )

        return violations

    def lint(self) -> None:
        """Fail on any mismatch.

        Raises:
            SubscriptionLintError: Listing every offending pair.
        """
        violations = self.find_violations()
        if violations:
            self._logger.error(
                "subscription_lint_failed",
                violation_count=len(violations),
                violations=[str(v) for v in violations],
            )
            raise SubscriptionLintError(violations)

        self._logger.info(
            "subscription_lint_passed",
            domain_count=len(self._domains),
            entry_count=len(self._subscriptions),
        )
