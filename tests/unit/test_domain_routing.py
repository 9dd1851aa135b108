"""Unit tests for Domain and DomainRegistry (the router).

Tests cover:
- Handler registration by decorator and module discovery
- Convention routing (class name derived from event name)
- Custom routing (single receive function, sync or async)
- Gating predicate
- Registry lookups and handler identifier resolution
"""

import sys
import types
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain_pubsub.domain.errors import (
    DomainAlreadyRegistered,
    MissingHandlerError,
    UnknownDomainError,
)
from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.handlers.base_handler import DomainEventHandler
from domain_pubsub.domain.routing.domain import CustomRouting, Domain
from domain_pubsub.domain.routing.registry import DomainRegistry
from tests.conftest import ORDER_CANCELLED, ORDER_CREATED


def make_event(event_name=ORDER_CREATED, **payload):
    return EventInstance(event_name=event_name, payload={"order_id": 1, **payload})


@pytest.mark.unit
class TestDomainHandlerRegistration:
    """Test Domain.handler() and Domain.discover()."""

    def test_domain_name_is_snake_cased(self):
        assert Domain("OrderFulfillment").name == "order_fulfillment"

    def test_handler_decorator_registers_class(self):
        domain = Domain("messaging")

        @domain.handler
        class OrderingOrderCreatedHandler(DomainEventHandler):
            async def call(self) -> None:
                pass

        assert domain.handlers() == {
            "OrderingOrderCreatedHandler": OrderingOrderCreatedHandler
        }

    def test_rejects_non_handler_class(self):
        domain = Domain("messaging")

        class OrderingOrderCreatedHandler:
            pass

        with pytest.raises(ValueError, match="not a DomainEventHandler"):
            domain.handler(OrderingOrderCreatedHandler)

    def test_rejects_abstract_handler(self):
        domain = Domain("messaging")

        class OrderingOrderCreatedHandler(DomainEventHandler):
            pass

        with pytest.raises(ValueError, match="does not implement call"):
            domain.handler(OrderingOrderCreatedHandler)

    def test_rejects_wrong_suffix(self):
        domain = Domain("messaging")

        class OrderCreatedListener(DomainEventHandler):
            async def call(self) -> None:
                pass

        with pytest.raises(ValueError, match="must be named"):
            domain.handler(OrderCreatedListener)

    def test_rejects_duplicate_name(self):
        domain = Domain("messaging")

        def build():
            class OrderingOrderCreatedHandler(DomainEventHandler):
                async def call(self) -> None:
                    pass

            return OrderingOrderCreatedHandler

        domain.handler(build())
        with pytest.raises(ValueError, match="already has a handler"):
            domain.handler(build())

    def test_custom_domain_cannot_own_handlers(self):
        domain = Domain("analytics", routing=CustomRouting(MagicMock()))

        class OrderingOrderCreatedHandler(DomainEventHandler):
            async def call(self) -> None:
                pass

        with pytest.raises(ValueError, match="custom routing"):
            domain.handler(OrderingOrderCreatedHandler)

    def test_discover_registers_module_handlers(self):
        module = types.ModuleType("fake_messaging_handlers")
        exec(
            "from domain_pubsub.domain.handlers.base_handler import DomainEventHandler\n"
            "class OrderingOrderCreatedHandler(DomainEventHandler):\n"
            "    async def call(self):\n"
            "        pass\n"
            "class Helper:\n"
            "    pass\n",
            module.__dict__,
        )
        sys.modules[module.__name__] = module
        try:
            domain = Domain("messaging")
            found = domain.discover("fake_messaging_handlers")
        finally:
            del sys.modules[module.__name__]

        assert [cls.__name__ for cls in found] == ["OrderingOrderCreatedHandler"]
        assert list(domain.handlers()) == ["OrderingOrderCreatedHandler"]


@pytest.mark.unit
class TestDomainRouting:
    """Test Domain.route() and HandlerInvocation."""

    @pytest.mark.asyncio
    async def test_convention_route_builds_handler_instance(self, messaging):
        event = make_event()

        invocation = messaging.route(event)

        assert invocation.handler_id == "messaging.OrderingOrderCreatedHandler"
        assert invocation.domain_name == "messaging"
        assert invocation.handler.event is event

        await invocation.execute()
        assert type(invocation.handler).calls == [(ORDER_CREATED, 1)]

    def test_convention_route_without_handler(self):
        assert Domain("messaging").route(make_event()) is None

    def test_handler_built_on_first_use(self):
        domain = Domain("messaging")
        built = []

        @domain.handler
        class OrderingOrderCreatedHandler(DomainEventHandler):
            def __init__(self, event: EventInstance) -> None:
                super().__init__(event)
                built.append(event.order_id)

            async def call(self) -> None:
                pass

        invocation = domain.route(make_event())
        assert built == []

        invocation.should_process()
        assert invocation.handler is invocation.handler
        assert built == [1]

    def test_new_handler_instance_per_route(self, messaging):
        event = make_event()

        assert messaging.route(event).handler is not messaging.route(event).handler

    @pytest.mark.asyncio
    async def test_custom_route_async_receive(self):
        receive = AsyncMock()
        analytics = Domain("analytics", routing=CustomRouting(receive))
        event = make_event(ORDER_CANCELLED)

        invocation = analytics.route(event)
        await invocation.execute()

        assert invocation.handler_id == "analytics.receive"
        receive.assert_awaited_once_with(ORDER_CANCELLED, event)

    @pytest.mark.asyncio
    async def test_custom_route_sync_receive(self):
        received = []
        analytics = Domain(
            "analytics",
            routing=CustomRouting(lambda name, event: received.append(name)),
        )

        await analytics.route(make_event()).execute()

        assert received == [ORDER_CREATED]

    def test_gating_predicate(self):
        domain = Domain("messaging")

        @domain.handler
        class OrderingOrderCreatedHandler(DomainEventHandler):
            def should_process(self) -> bool:
                return self.event.total_amount > 0

            async def call(self) -> None:
                pass

        assert domain.route(make_event(total_amount=5.0)).should_process() is True
        assert domain.route(make_event(total_amount=0.0)).should_process() is False

    def test_custom_route_always_processes(self):
        analytics = Domain("analytics", routing=CustomRouting(MagicMock()))

        assert analytics.route(make_event()).should_process() is True


@pytest.mark.unit
class TestDomainRegistry:
    """Test DomainRegistry."""

    def test_register_and_get(self, messaging):
        registry = DomainRegistry()
        registry.register(messaging)

        assert registry.get("messaging") is messaging
        assert "messaging" in registry
        assert list(registry) == [messaging]
        assert len(registry) == 1

    def test_register_same_domain_twice_is_noop(self, messaging):
        registry = DomainRegistry()
        registry.register(messaging)
        registry.register(messaging)

        assert len(registry) == 1

    def test_register_conflicting_name_raises(self, messaging):
        registry = DomainRegistry()
        registry.register(messaging)

        with pytest.raises(DomainAlreadyRegistered):
            registry.register(Domain("messaging"))

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownDomainError) as exc_info:
            DomainRegistry().get("shipping")

        assert exc_info.value.domain_name == "shipping"

    def test_unregister(self, domains):
        domains.unregister("messaging")
        domains.unregister("never_registered")

        assert "messaging" not in domains

    def test_route_missing_handler_raises(self, domains):
        event = make_event("ordering::order_shipped")

        with pytest.raises(MissingHandlerError) as exc_info:
            domains.route("messaging", event)

        assert exc_info.value.handler_id == "messaging.OrderingOrderShippedHandler"

    def test_route_missing_handler_not_required(self, domains):
        event = make_event("ordering::order_shipped")

        assert domains.route("messaging", event, required=False) is None

    def test_route_unknown_domain_raises_even_when_not_required(self, domains):
        with pytest.raises(UnknownDomainError):
            domains.route("shipping", make_event(), required=False)

    def test_resolve_handler_identifier(self, domains):
        event = make_event()

        invocation = domains.resolve("messaging.OrderingOrderCreatedHandler", event)

        assert invocation.handler_id == "messaging.OrderingOrderCreatedHandler"
        assert invocation.event is event

    def test_resolve_custom_identifier(self):
        registry = DomainRegistry()
        registry.register(Domain("analytics", routing=CustomRouting(MagicMock())))

        invocation = registry.resolve("analytics.receive", make_event())

        assert invocation.handler_id == "analytics.receive"

    def test_resolve_unknown_handler_raises(self, domains):
        with pytest.raises(MissingHandlerError):
            domains.resolve("messaging.OrderingOrderShippedHandler", make_event())
