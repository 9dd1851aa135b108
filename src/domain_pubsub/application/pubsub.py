"""PubSub facade: boot-time API and emission API.

Owns the engine's process-wide state as explicit objects (schema catalog,
domain registry, subscription registry) and wires them into the
emission pipeline:

    identifier -> resolve_event_name -> SchemaCatalog.lookup
               -> PayloadResolver.resolve -> EventDispatcher.dispatch

Every resolution/validation error is raised before any dispatch decision,
whatever the dispatch mode of the subscribers.

Boot:
    >>> pubsub = get_pubsub()
    >>> pubsub.catalog.define("ordering::order_created", ORDER_CREATED_FIELDS)
    >>> pubsub.domains.register(messaging)
    >>> pubsub.set_configuration_source("config/subscriptions.yml")
    >>> pubsub.boot()  # load(), then lint() in strict mode

Emission:
    >>> await pubsub.emit("order_created", {"order_id": 1}, publisher=order_service)

Test harness:
    >>> pubsub.clear()
    >>> pubsub.register("messaging")  # only messaging's entries from the file
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from domain_pubsub.domain.errors import (
    InvalidSubscriptionConfig,
    SubscriptionSourceNotSet,
)
from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.events.naming import resolve_event_name, to_snake_case
from domain_pubsub.domain.events.payload import PayloadResolver
from domain_pubsub.domain.events.schema import EventSchema, FieldSpec, SchemaCatalog
from domain_pubsub.domain.protocols.job_backend_protocol import JobBackendProtocol
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol
from domain_pubsub.domain.protocols.publisher_protocol import PublisherProtocol
from domain_pubsub.domain.routing.domain import Domain
from domain_pubsub.domain.routing.registry import DomainRegistry
from domain_pubsub.domain.subscriptions.linter import SubscriptionLinter
from domain_pubsub.domain.subscriptions.registry import (
    SubscriptionRegistry,
    parse_subscriptions,
)
from domain_pubsub.infrastructure.config.subscription_loader import (
    load_subscription_file,
)
from domain_pubsub.infrastructure.events.dispatcher import EventDispatcher


class PubSub:
    """Event resolution and dispatch engine.

    Attributes:
        catalog: Event schemas.
        domains: Declared domains and their handlers.
        subscriptions: Subscription table loaded from the configuration source.
        strict: Whether boot() lints after loading.
    """

    def __init__(
        self,
        *,
        job_backend: JobBackendProtocol,
        logger: LoggerProtocol,
        catalog: SchemaCatalog | None = None,
        domains: DomainRegistry | None = None,
        subscriptions: SubscriptionRegistry | None = None,
        configuration_source: Path | str | None = None,
        strict: bool = False,
    ) -> None:
        self.catalog = catalog if catalog is not None else SchemaCatalog()
        self.domains = domains if domains is not None else DomainRegistry()
        self.subscriptions = (
            subscriptions if subscriptions is not None else SubscriptionRegistry(logger)
        )
        self.strict = strict
        self._job_backend = job_backend
        self._logger = logger
        self._configuration_source = (
            Path(configuration_source) if configuration_source is not None else None
        )
        self._payload_resolver = PayloadResolver(logger)
        self._dispatcher = EventDispatcher(
            domains=self.domains,
            subscriptions=self.subscriptions,
            job_backend=job_backend,
            logger=logger,
        )

    @property
    def job_backend(self) -> JobBackendProtocol:
        return self._job_backend

    @property
    def dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def define_event(self, event_name: str, fields: Iterable[FieldSpec]) -> EventSchema:
        """Shortcut for catalog.define()."""
        return self.catalog.define(event_name, fields)

    def add_domain(self, domain: Domain) -> Domain:
        """Shortcut for domains.register()."""
        return self.domains.register(domain)

    # ------------------------------------------------------------------
    # Boot-time API
    # ------------------------------------------------------------------

    @property
    def configuration_source(self) -> Path | None:
        return self._configuration_source

    def set_configuration_source(self, path: Path | str) -> None:
        """Point the engine at a subscription file (.yml, .yaml, .json)."""
        self._configuration_source = Path(path)

    def _read_source(self) -> dict[str, Any]:
        if self._configuration_source is None:
            raise SubscriptionSourceNotSet()
        return load_subscription_file(self._configuration_source)

    def load(self) -> None:
        """Replace the subscription table with the configuration source.

        Raises:
            SubscriptionSourceNotSet: If no source was configured.
            InvalidSubscriptionConfig: If the file or its content is invalid.
        """
        self.subscriptions.load(self._read_source())

    def load_mapping(self, mapping: Mapping[str, Any]) -> None:
        """Replace the subscription table with an in-memory mapping."""
        self.subscriptions.load(mapping)

    def lint(self) -> None:
        """Check handlers against subscriptions.

        Raises:
            SubscriptionLintError: On any orphaned handler or subscription.
        """
        SubscriptionLinter(
            self.domains, self.subscriptions, self.catalog, self._logger
        ).lint()

    def boot(self) -> None:
        """load(), then lint() when strict mode is on."""
        self.load()
        if self.strict:
            self.lint()

    def clear(self) -> None:
        """Remove all subscriptions. Test harnesses only."""
        self.subscriptions.clear()

    def register(self, domain_name: str) -> None:
        """Load a single domain's entries from the configuration source.

        Test harnesses only: lets a test enable just the domains it exercises
        after clear().

        Raises:
            SubscriptionSourceNotSet: If no source was configured.
            InvalidSubscriptionConfig: If the domain is not in the source.
        """
        table = parse_subscriptions(self._read_source())
        name = to_snake_case(domain_name)
        if name not in table:
            raise InvalidSubscriptionConfig(
                f"domain '{name}' is not declared in {self._configuration_source}"
            )
        self.subscriptions.register(name, table[name])

    # ------------------------------------------------------------------
    # Emission API
    # ------------------------------------------------------------------

    async def emit(
        self,
        identifier: str,
        payload: Mapping[str, Any] | None = None,
        *,
        publisher: object | None = None,
    ) -> EventInstance:
        """Resolve, validate and dispatch an event.

        Args:
            identifier: "order_created" (domain taken from the publisher) or
                "ordering::order_created".
            payload: Explicit field values; missing fields are read from the
                publisher.
            publisher: Emitting object. Its ``pubsub_domain`` qualifies short
                identifiers.

        Returns:
            EventInstance: The validated event that was dispatched.

        Raises:
            AmbiguousEventName: No domain for a short identifier.
            UnknownEventSchema: The event has no schema.
            MissingPayloadAttribute: A required field could not be resolved.
            PayloadTypeMismatch: A field has the wrong type.
            HandlerExecutionError: A sync handler failed.
            UnknownDomainError, MissingHandlerError, JobEnqueueError: Routing
                or hand-off failures (configuration errors).
        """
        inferred_domain = (
            publisher.pubsub_domain
            if isinstance(publisher, PublisherProtocol)
            else None
        )
        event_name = resolve_event_name(identifier, inferred_domain)
        schema = self.catalog.lookup(event_name)
        event = self._payload_resolver.resolve(schema, payload, publisher)

        self._logger.debug(
            "event_emitted",
            event_name=event_name,
            event_id=str(event.event_id),
            publisher=type(publisher).__name__ if publisher is not None else None,
        )
        await self._dispatcher.dispatch(event)
        return event
