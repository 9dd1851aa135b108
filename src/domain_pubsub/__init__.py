"""Domain-scoped event publish/subscribe engine.

Usage:
    from domain_pubsub import (
        Domain,
        DomainEventHandler,
        EventPublisher,
        FieldSpec,
        FieldType,
        PubSub,
    )
"""

from domain_pubsub.application import EventPublisher, PubSub
from domain_pubsub.domain.enums import DispatchMode, FieldType
from domain_pubsub.domain.events import EventInstance, FieldSpec, Nullable
from domain_pubsub.domain.handlers import DomainEventHandler
from domain_pubsub.domain.routing import ConventionRouting, CustomRouting, Domain

__all__ = [
    "ConventionRouting",
    "CustomRouting",
    "DispatchMode",
    "Domain",
    "DomainEventHandler",
    "EventInstance",
    "EventPublisher",
    "FieldSpec",
    "FieldType",
    "Nullable",
    "PubSub",
]
