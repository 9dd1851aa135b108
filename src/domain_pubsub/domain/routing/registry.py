"""Domain registry: domain name -> Domain, in registration order.

The router half of dispatch. Given a domain name and a validated event it
returns the invocation to run; given a handler identifier (from a job) it
rebuilds the same invocation on the worker side.
"""

from collections.abc import Iterator

from domain_pubsub.domain.errors import (
    DomainAlreadyRegistered,
    MissingHandlerError,
    UnknownDomainError,
)
from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.events.naming import handler_id, split_handler_id
from domain_pubsub.domain.routing.domain import Domain, HandlerInvocation


class DomainRegistry:
    """Process-wide set of declared domains.

    Domains are registered once at boot. ``unregister`` exists for test
    harnesses only and must not run concurrently with dispatch.

    Attributes:
        _domains: Domain name -> Domain, in registration order.
    """

    def __init__(self) -> None:
        self._domains: dict[str, Domain] = {}

    def register(self, domain: Domain) -> Domain:
        """Register a domain.

        Raises:
            DomainAlreadyRegistered: If another domain with the same name exists.
        """
        existing = self._domains.get(domain.name)
        if existing is not None and existing is not domain:
            raise DomainAlreadyRegistered(domain.name)
        self._domains[domain.name] = domain
        return domain

    def unregister(self, domain_name: str) -> None:
        self._domains.pop(domain_name, None)

    def get(self, domain_name: str) -> Domain:
        """Get a registered domain.

        Raises:
            UnknownDomainError: If the domain is not registered.
        """
        try:
            return self._domains[domain_name]
        except KeyError:
            raise UnknownDomainError(domain_name) from None

    def __contains__(self, domain_name: object) -> bool:
        return domain_name in self._domains

    def __iter__(self) -> Iterator[Domain]:
        return iter(list(self._domains.values()))

    def __len__(self) -> int:
        return len(self._domains)

    def route(
        self,
        domain_name: str,
        event: EventInstance,
        *,
        required: bool = True,
    ) -> HandlerInvocation | None:
        """Resolve the invocation for (domain, event).

        Args:
            domain_name: Subscribed domain.
            event: Validated event.
            required: When False (wildcard subscriptions), a convention domain
                without a matching handler yields None instead of raising.

        Raises:
            UnknownDomainError: If the domain is not registered.
            MissingHandlerError: If ``required`` and no handler exists.
        """
        domain = self.get(domain_name)
        invocation = domain.route(event)
        if invocation is None and required:
            raise MissingHandlerError(
                domain_name, event.event_name, handler_id(domain_name, event.event_name)
            )
        return invocation

    def resolve(self, identifier: str, event: EventInstance) -> HandlerInvocation:
        """Rebuild an invocation from a handler identifier (worker side).

        Raises:
            UnknownDomainError: If the identifier's domain is not registered.
            MissingHandlerError: If the domain no longer has that handler.
        """
        domain_name, name = split_handler_id(identifier)
        invocation = self.get(domain_name).resolve(name, event)
        if invocation is None:
            raise MissingHandlerError(domain_name, event.event_name, identifier)
        return invocation
