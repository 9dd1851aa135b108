"""Domain enums."""

from domain_pubsub.domain.enums.dispatch_mode import DispatchMode
from domain_pubsub.domain.enums.field_type import FieldType

__all__ = ["DispatchMode", "FieldType"]
