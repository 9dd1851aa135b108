"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Async tests are marked for pytest-asyncio
2. Engine components are built fresh per test (no shared registries)
3. Container singletons are reset between tests
"""

import inspect
from unittest.mock import MagicMock

import pytest

from domain_pubsub.application.pubsub import PubSub
from domain_pubsub.core.config import get_settings
from domain_pubsub.core.container import get_job_backend, get_logger, get_pubsub
from domain_pubsub.domain.enums import FieldType
from domain_pubsub.domain.events.schema import FieldSpec, Nullable, SchemaCatalog
from domain_pubsub.domain.handlers.base_handler import DomainEventHandler
from domain_pubsub.domain.routing.domain import Domain
from domain_pubsub.domain.routing.registry import DomainRegistry
from domain_pubsub.infrastructure.jobs.in_memory_job_queue import InMemoryJobQueue

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


ORDER_CREATED = "ordering::order_created"
ORDER_CANCELLED = "ordering::order_cancelled"

ORDER_CREATED_FIELDS = [
    FieldSpec("order_id", FieldType.INTEGER),
    FieldSpec("customer_id", FieldType.INTEGER),
    FieldSpec("total_amount", FieldType.FLOAT),
    FieldSpec("line_items", FieldType.LIST),
    FieldSpec("comment", Nullable(FieldType.STRING), required=False),
]

ORDER_CANCELLED_FIELDS = [
    FieldSpec("order_id", FieldType.INTEGER),
    FieldSpec("reason", FieldType.STRING),
]


class RecordingHandler(DomainEventHandler):
    """Handler base for tests: records every call on the class."""

    calls: list[tuple[str, int]]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.calls = []

    async def call(self) -> None:
        type(self).calls.append((self.event.event_name, self.event.order_id))


@pytest.fixture
def mock_logger():
    """Logger double implementing LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def catalog():
    """Catalog with the ordering events used throughout the tests."""
    catalog = SchemaCatalog()
    catalog.define(ORDER_CREATED, ORDER_CREATED_FIELDS)
    catalog.define(ORDER_CANCELLED, ORDER_CANCELLED_FIELDS)
    return catalog


@pytest.fixture
def messaging():
    """Convention-routed domain handling both ordering events."""
    domain = Domain("messaging")

    @domain.handler
    class OrderingOrderCreatedHandler(RecordingHandler):
        pass

    @domain.handler
    class OrderingOrderCancelledHandler(RecordingHandler):
        pass

    return domain


@pytest.fixture
def domains(messaging):
    registry = DomainRegistry()
    registry.register(messaging)
    return registry


@pytest.fixture
def job_queue(mock_logger):
    return InMemoryJobQueue(logger=mock_logger)


@pytest.fixture
def pubsub(catalog, domains, job_queue, mock_logger):
    """Engine wired with in-memory components and no subscriptions."""
    return PubSub(
        job_backend=job_queue,
        logger=mock_logger,
        catalog=catalog,
        domains=domains,
    )


@pytest.fixture(autouse=True)
def reset_container():
    """Clear cached settings and container singletons around each test."""
    for factory in (get_settings, get_logger, get_job_backend, get_pubsub):
        factory.cache_clear()
    yield
    for factory in (get_settings, get_logger, get_job_backend, get_pubsub):
        factory.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: End-to-end tests through the PubSub facade"
    )


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
