"""Event dispatcher.

Delivers a validated EventInstance to every subscribed domain. This is the
only component that looks at dispatch modes.

Architecture:
    - Subscriptions enumerated in registration order (SubscriptionRegistry)
    - Handlers resolved per domain (DomainRegistry), one invocation per domain
    - Gating predicate evaluated before execution or hand-off; a raising
      gate or handler constructor fails like the handler itself
    - sync: awaited inline, sequentially. First failure is wrapped in
      HandlerExecutionError and halts the rest; nothing is rolled back
    - async: exactly one JobBackendProtocol.enqueue() call, no inline run

Usage:
    >>> dispatcher = EventDispatcher(
    ...     domains=domains,
    ...     subscriptions=subscriptions,
    ...     job_backend=InMemoryJobQueue(logger=logger),
    ...     logger=logger,
    ... )
    >>> report = await dispatcher.dispatch(event)
    >>> report.enqueued
    ['messaging.OrderingOrderCreatedHandler']

Ordering:
    No ordering is guaranteed between async handlers, or between async and
    sync handlers of the same event. Sync handlers run in subscription
    registration order.
"""

from dataclasses import dataclass, field

from domain_pubsub.domain.enums import DispatchMode
from domain_pubsub.domain.errors import HandlerExecutionError
from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.protocols.job_backend_protocol import JobBackendProtocol
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol
from domain_pubsub.domain.routing.domain import HandlerInvocation
from domain_pubsub.domain.routing.registry import DomainRegistry
from domain_pubsub.domain.subscriptions.registry import SubscriptionRegistry


@dataclass(kw_only=True)
class DispatchReport:
    """What happened to one emitted event.

    Attributes:
        event_name: Fully-qualified event name.
        executed: Handler ids run inline (sync).
        enqueued: Handler ids handed to the job backend (async).
        skipped: Handler ids whose gating predicate returned False, and
            domain names of wildcard subscriptions with no handler for
            this event.
    """

    event_name: str
    executed: list[str] = field(default_factory=list)
    enqueued: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def handled(self) -> list[str]:
        return self.executed + self.enqueued + self.skipped


class EventDispatcher:
    """Routes events to subscribed domains.

    Thread Safety:
        - NOT thread-safe. Registries must not be mutated during dispatch.

    Attributes:
        _domains: Declared domains (router).
        _subscriptions: Loaded subscription table.
        _job_backend: Receives async-mode hand-offs.
        _logger: Logger for dispatch decisions and handler failures.
    """

    def __init__(
        self,
        domains: DomainRegistry,
        subscriptions: SubscriptionRegistry,
        job_backend: JobBackendProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._domains = domains
        self._subscriptions = subscriptions
        self._job_backend = job_backend
        self._logger = logger

    async def dispatch(self, event: EventInstance) -> DispatchReport:
        """Deliver an event to every subscribed domain.

        Args:
            event: Validated event (payload resolution already succeeded).

        Returns:
            DispatchReport: Executed, enqueued and skipped handler ids.

        Raises:
            UnknownDomainError: A subscribed domain is not registered.
            MissingHandlerError: An exact subscription has no handler.
            HandlerExecutionError: A sync handler raised (original exception
                chained as __cause__). Remaining domains are not dispatched.
            JobEnqueueError: The job backend rejected a hand-off.
        """
        report = DispatchReport(event_name=event.event_name)
        subscriptions = self._subscriptions.subscribers(event.event_name)

        if not subscriptions:
            self._logger.debug(
                "event_has_no_subscribers",
                event_name=event.event_name,
                event_id=str(event.event_id),
            )
            return report

        for subscription in subscriptions:
            invocation = self._domains.route(
                subscription.domain_name,
                event,
                required=not subscription.is_wildcard,
            )
            if invocation is None:
                # Wildcard subscription on a convention domain without a
                # handler for this particular event.
                report.skipped.append(subscription.domain_name)
                self._logger.debug(
                    "wildcard_subscription_without_handler",
                    domain=subscription.domain_name,
                    event_name=event.event_name,
                )
                continue

            try:
                proceed = invocation.should_process()
            except Exception as e:
                raise self._handler_failed(invocation, event, e) from e

            if not proceed:
                report.skipped.append(invocation.handler_id)
                self._logger.debug(
                    "handler_skipped",
                    handler_id=invocation.handler_id,
                    event_name=event.event_name,
                    event_id=str(event.event_id),
                )
                continue

            if subscription.mode is DispatchMode.ASYNC:
                await self._job_backend.enqueue(invocation.handler_id, event)
                report.enqueued.append(invocation.handler_id)
                self._logger.debug(
                    "handler_enqueued",
                    handler_id=invocation.handler_id,
                    event_name=event.event_name,
                    event_id=str(event.event_id),
                )
                continue

            try:
                await invocation.execute()
            except Exception as e:
                raise self._handler_failed(invocation, event, e) from e

            report.executed.append(invocation.handler_id)
            self._logger.debug(
                "handler_executed",
                handler_id=invocation.handler_id,
                event_name=event.event_name,
                event_id=str(event.event_id),
            )

        self._logger.info(
            "event_dispatched",
            event_name=event.event_name,
            event_id=str(event.event_id),
            executed=len(report.executed),
            enqueued=len(report.enqueued),
            skipped=len(report.skipped),
        )
        return report

    def _handler_failed(
        self,
        invocation: HandlerInvocation,
        event: EventInstance,
        error: Exception,
    ) -> HandlerExecutionError:
        """Log a handler failure (gate, constructor or call) and wrap it."""
        self._logger.error(
            "handler_failed",
            error=error,
            handler_id=invocation.handler_id,
            domain=invocation.domain_name,
            event_name=event.event_name,
            event_id=str(event.event_id),
        )
        return HandlerExecutionError(
            invocation.domain_name, event.event_name, invocation.handler_id
        )
