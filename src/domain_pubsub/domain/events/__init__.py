"""Event schemas, names and instances.

Usage:
    from domain_pubsub.domain.events import (
        EventInstance,
        FieldSpec,
        Nullable,
        SchemaCatalog,
        resolve_event_name,
    )
"""

from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.events.naming import (
    EventName,
    handler_class_name,
    handler_id,
    resolve_event_name,
)
from domain_pubsub.domain.events.payload import MISSING, PayloadResolver
from domain_pubsub.domain.events.schema import (
    EventSchema,
    FieldSpec,
    Nullable,
    SchemaCatalog,
)

__all__ = [
    "EventInstance",
    "EventName",
    "EventSchema",
    "FieldSpec",
    "MISSING",
    "Nullable",
    "PayloadResolver",
    "SchemaCatalog",
    "handler_class_name",
    "handler_id",
    "resolve_event_name",
]
