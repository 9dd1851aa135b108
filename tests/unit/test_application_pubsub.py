"""Unit tests for the PubSub facade.

Tests cover:
- Boot API: set_configuration_source, load, lint, boot (strict and lenient)
- Test-harness API: clear, register
- Emission: name resolution, schema lookup, payload resolution, dispatch
- Errors raised before any dispatch decision

Architecture:
- Real registries, in-memory job queue, mocked logger
- Subscription files written to tmp_path
"""

import pytest

from domain_pubsub.domain.enums import DispatchMode
from domain_pubsub.domain.errors import (
    AmbiguousEventName,
    InvalidSubscriptionConfig,
    MissingPayloadAttribute,
    PayloadTypeMismatch,
    SubscriptionLintError,
    SubscriptionSourceNotSet,
    UnknownEventSchema,
)
from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.routing.domain import Domain
from tests.conftest import ORDER_CANCELLED, ORDER_CREATED

SUBSCRIPTIONS_YAML = """\
messaging:
  ordering::order_created: async
  ordering::order_cancelled: sync
billing:
  ordering::order_cancelled: sync
"""


class OrderService:
    pubsub_domain = "ordering"

    def __init__(self, order_id=1, customer_id=7):
        self.order_id = order_id
        self.customer_id = customer_id


@pytest.fixture
def subscriptions_file(tmp_path):
    path = tmp_path / "subscriptions.yml"
    path.write_text(SUBSCRIPTIONS_YAML)
    return path


@pytest.mark.unit
class TestPubSubBoot:
    """Test boot-time API."""

    def test_load_without_source_raises(self, pubsub):
        with pytest.raises(SubscriptionSourceNotSet):
            pubsub.load()

    def test_load_from_source(self, pubsub, subscriptions_file):
        pubsub.set_configuration_source(subscriptions_file)

        pubsub.load()

        assert pubsub.configuration_source == subscriptions_file
        assert pubsub.subscriptions.domains() == ["messaging", "billing"]
        assert (
            pubsub.subscriptions.lookup("messaging", ORDER_CREATED).mode
            is DispatchMode.ASYNC
        )

    def test_load_mapping(self, pubsub):
        pubsub.load_mapping({"messaging": {ORDER_CREATED: "sync"}})

        assert pubsub.subscriptions.domains() == ["messaging"]

    def test_boot_lenient_skips_lint(self, pubsub, subscriptions_file):
        """billing has no handlers: only strict mode notices."""
        pubsub.set_configuration_source(subscriptions_file)

        pubsub.boot()

        assert len(pubsub.subscriptions) == 3

    def test_boot_strict_lints(self, pubsub, subscriptions_file):
        pubsub.set_configuration_source(subscriptions_file)
        pubsub.strict = True

        with pytest.raises(SubscriptionLintError) as exc_info:
            pubsub.boot()

        [violation] = exc_info.value.orphaned_subscriptions
        assert violation.domain_name == "billing"

    def test_lint_passes_for_consistent_configuration(self, pubsub):
        pubsub.load_mapping(
            {"messaging": {ORDER_CREATED: "async", ORDER_CANCELLED: "sync"}}
        )

        pubsub.lint()

    def test_define_event_and_add_domain(self, pubsub):
        shipping = Domain("shipping")

        pubsub.define_event("shipping::parcel_lost", [])
        pubsub.add_domain(shipping)

        assert "shipping::parcel_lost" in pubsub.catalog
        assert pubsub.domains.get("shipping") is shipping


@pytest.mark.unit
class TestPubSubHarness:
    """Test clear() and register()."""

    def test_clear(self, pubsub, subscriptions_file):
        pubsub.set_configuration_source(subscriptions_file)
        pubsub.load()

        pubsub.clear()

        assert len(pubsub.subscriptions) == 0

    def test_register_single_domain(self, pubsub, subscriptions_file):
        pubsub.set_configuration_source(subscriptions_file)

        pubsub.register("billing")

        assert pubsub.subscriptions.domains() == ["billing"]

    def test_register_unknown_domain_raises(self, pubsub, subscriptions_file):
        pubsub.set_configuration_source(subscriptions_file)

        with pytest.raises(InvalidSubscriptionConfig, match="shipping"):
            pubsub.register("shipping")

    def test_register_without_source_raises(self, pubsub):
        with pytest.raises(SubscriptionSourceNotSet):
            pubsub.register("messaging")


@pytest.mark.unit
class TestPubSubEmit:
    """Test emit()."""

    @pytest.mark.asyncio
    async def test_emit_short_name_from_publisher(self, pubsub, job_queue):
        pubsub.load_mapping({"messaging": {ORDER_CREATED: "async"}})

        event = await pubsub.emit(
            "order_created",
            {"total_amount": 10.0, "line_items": []},
            publisher=OrderService(),
        )

        assert isinstance(event, EventInstance)
        assert event.event_name == ORDER_CREATED
        assert event.order_id == 1
        assert event.customer_id == 7
        assert event.comment is None
        [job] = job_queue.jobs
        assert job.handler_id == "messaging.OrderingOrderCreatedHandler"
        assert job.event is event

    @pytest.mark.asyncio
    async def test_emit_qualified_without_publisher(self, pubsub, messaging):
        pubsub.load_mapping({"messaging": {ORDER_CANCELLED: "sync"}})

        await pubsub.emit(ORDER_CANCELLED, {"order_id": 3, "reason": "out of stock"})

        handler = messaging.handlers()["OrderingOrderCancelledHandler"]
        assert handler.calls == [(ORDER_CANCELLED, 3)]

    @pytest.mark.asyncio
    async def test_emit_without_subscribers(self, pubsub, job_queue):
        event = await pubsub.emit(ORDER_CANCELLED, {"order_id": 3, "reason": "x"})

        assert event.reason == "x"
        assert len(job_queue) == 0

    @pytest.mark.asyncio
    async def test_ambiguous_name(self, pubsub):
        with pytest.raises(AmbiguousEventName):
            await pubsub.emit("order_created", {"order_id": 1})

    @pytest.mark.asyncio
    async def test_unknown_schema(self, pubsub):
        with pytest.raises(UnknownEventSchema):
            await pubsub.emit("order_shipped", publisher=OrderService())

    @pytest.mark.asyncio
    @pytest.mark.parametrize("mode", ["sync", "async"])
    async def test_missing_attribute_raised_before_dispatch(
        self, pubsub, messaging, job_queue, mode
    ):
        pubsub.load_mapping({"messaging": {ORDER_CREATED: mode}})

        with pytest.raises(MissingPayloadAttribute) as exc_info:
            await pubsub.emit(
                "order_created", {"total_amount": 10.0}, publisher=OrderService()
            )

        assert exc_info.value.field_name == "line_items"
        assert len(job_queue) == 0
        assert messaging.handlers()["OrderingOrderCreatedHandler"].calls == []

    @pytest.mark.asyncio
    async def test_type_mismatch_raised_before_dispatch(self, pubsub, job_queue):
        pubsub.load_mapping({"messaging": {ORDER_CREATED: "async"}})

        with pytest.raises(PayloadTypeMismatch):
            await pubsub.emit(
                "order_created",
                {"total_amount": "10", "line_items": []},
                publisher=OrderService(),
            )

        assert len(job_queue) == 0
