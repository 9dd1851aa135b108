"""Payload field types for event schemas.

The set is closed: schemas may only use these types, optionally wrapped in
Nullable (see domain_pubsub.domain.events.schema).
"""

from enum import Enum


class FieldType(str, Enum):
    """Semantic type of an event payload field."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    LIST = "list"
