"""Domains and their routing capability.

A domain receives events in exactly one of two ways:

    - ConventionRouting (default): the domain owns handler classes named
      after the events they handle (OrderingOrderCreatedHandler for
      "ordering::order_created"). One handler instance per dispatch.
    - CustomRouting(receive): the domain supplies a single receive
      function taking (event_name, event). It owns no handler classes and
      is exempt from handler linting. Useful for catch-all domains
      (audit, analytics) subscribed to "all_events".

Usage:
    >>> messaging = Domain("messaging")
    >>> messaging.discover("myapp.messaging.handlers")
    >>>
    >>> async def record(event_name: str, event: EventInstance) -> None:
    ...     await analytics.track(event_name, event.to_dict())
    >>>
    >>> analytics = Domain("analytics", routing=CustomRouting(record))
"""

import importlib
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from types import ModuleType
from typing import TypeAlias, TypeVar

from domain_pubsub.core.constants import HANDLER_CLASS_SUFFIX, HANDLER_ID_SEPARATOR
from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.events.naming import (
    custom_handler_id,
    handler_class_name,
    to_snake_case,
)
from domain_pubsub.domain.handlers.base_handler import DomainEventHandler

ReceiveFunction = Callable[[str, EventInstance], Awaitable[None] | None]
"""Custom receive function: (event_name, event) -> None, sync or async."""

H = TypeVar("H", bound=type[DomainEventHandler])


@dataclass(frozen=True, slots=True)
class ConventionRouting:
    """Route to handler classes by naming convention."""


@dataclass(frozen=True, slots=True)
class CustomRouting:
    """Route every event to one receive function."""

    receive: ReceiveFunction


Routing: TypeAlias = ConventionRouting | CustomRouting


@dataclass(slots=True, kw_only=True)
class HandlerInvocation:
    """A resolved, ready-to-run handler for one (domain, event).

    Exactly one of ``handler_cls`` (convention) or ``receive`` (custom) is
    set. The convention handler is instantiated on first use, so its
    constructor runs wherever the gate or the call runs.

    Attributes:
        domain_name: Domain handling the event.
        handler_id: Identifier passed to the job backend in async mode.
        event: Validated event instance.
        handler_cls: Convention handler class.
        receive: Custom receive function.
    """

    domain_name: str
    handler_id: str
    event: EventInstance
    handler_cls: type[DomainEventHandler] | None = None
    receive: ReceiveFunction | None = None
    _handler: DomainEventHandler | None = field(default=None, init=False, repr=False)

    @property
    def handler(self) -> DomainEventHandler | None:
        """Convention handler instance, built once per invocation."""
        if self._handler is None and self.handler_cls is not None:
            self._handler = self.handler_cls(self.event)
        return self._handler

    def should_process(self) -> bool:
        """Evaluate the handler's gating predicate (custom routing: always True)."""
        handler = self.handler
        if handler is None:
            return True
        return handler.should_process()

    async def execute(self) -> None:
        """Run the handler inline."""
        handler = self.handler
        if handler is not None:
            await handler.call()
            return

        if self.receive is None:
            raise RuntimeError(f"Invocation {self.handler_id} has nothing to run")
        result = self.receive(self.event.event_name, self.event)
        if inspect.isawaitable(result):
            await result


class Domain:
    """A named scope that subscribes to and handles events.

    Attributes:
        name: Snake-case domain name, as used in the subscription file.
        routing: ConventionRouting or CustomRouting.
        _handlers: Handler class name -> handler class (convention only).
    """

    def __init__(self, name: str, routing: Routing | None = None) -> None:
        self.name = to_snake_case(name)
        self.routing: Routing = routing if routing is not None else ConventionRouting()
        self._handlers: dict[str, type[DomainEventHandler]] = {}

    def __repr__(self) -> str:
        return f"Domain({self.name!r}, routing={type(self.routing).__name__})"

    @property
    def is_custom(self) -> bool:
        return isinstance(self.routing, CustomRouting)

    def handler(self, cls: H) -> H:
        """Class decorator registering a convention handler on this domain.

        Raises:
            ValueError: If the domain uses custom routing, or the class is not a
                concrete DomainEventHandler named ``...Handler``, or a handler
                with the same name is already registered.
        """
        if self.is_custom:
            raise ValueError(
                f"Domain '{self.name}' uses custom routing and cannot own handler classes"
            )
        if not (isinstance(cls, type) and issubclass(cls, DomainEventHandler)):
            raise ValueError(f"{cls!r} is not a DomainEventHandler subclass")
        if inspect.isabstract(cls):
            raise ValueError(f"{cls.__name__} does not implement call()")
        if not cls.__name__.endswith(HANDLER_CLASS_SUFFIX):
            raise ValueError(
                f"{cls.__name__} must be named <Domain><Event>{HANDLER_CLASS_SUFFIX}"
            )
        existing = self._handlers.get(cls.__name__)
        if existing is not None and existing is not cls:
            raise ValueError(
                f"Domain '{self.name}' already has a handler named {cls.__name__}"
            )

        self._handlers[cls.__name__] = cls
        return cls

    def discover(self, module: ModuleType | str) -> list[type[DomainEventHandler]]:
        """Register every handler class defined in a module.

        Only concrete DomainEventHandler subclasses defined in the module
        itself (not imported into it) whose names end in ``Handler`` are
        picked up.

        Args:
            module: Module object or dotted import path.

        Returns:
            Handler classes registered by this call.
        """
        if isinstance(module, str):
            module = importlib.import_module(module)

        found: list[type[DomainEventHandler]] = []
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, DomainEventHandler)
                and obj.__module__ == module.__name__
                and obj.__name__.endswith(HANDLER_CLASS_SUFFIX)
                and not inspect.isabstract(obj)
            ):
                found.append(self.handler(obj))
        return found

    def handlers(self) -> dict[str, type[DomainEventHandler]]:
        """Registered handler classes by class name."""
        return dict(self._handlers)

    def route(self, event: EventInstance) -> HandlerInvocation | None:
        """Build the invocation for an event, or None if no handler exists."""
        if isinstance(self.routing, CustomRouting):
            return HandlerInvocation(
                domain_name=self.name,
                handler_id=custom_handler_id(self.name),
                event=event,
                receive=self.routing.receive,
            )
        return self.resolve(handler_class_name(event.event_name), event)

    def resolve(self, name: str, event: EventInstance) -> HandlerInvocation | None:
        """Build the invocation for a handler name (the part after the dot
        in a handler identifier)."""
        if isinstance(self.routing, CustomRouting):
            return self.route(event)

        handler_cls = self._handlers.get(name)
        if handler_cls is None:
            return None
        return HandlerInvocation(
            domain_name=self.name,
            handler_id=f"{self.name}{HANDLER_ID_SEPARATOR}{name}",
            event=event,
            handler_cls=handler_cls,
        )
