"""Event naming, schema and payload errors.

Raised while turning an emission into a validated EventInstance. All of them
surface to the emitting caller before any dispatch decision is made, whatever
the dispatch mode of the subscribers.
"""

from typing import Any

from domain_pubsub.core.enums import ErrorCode
from domain_pubsub.core.errors import PubSubError


class UnknownEventSchema(PubSubError):
    """No schema is defined for the event."""

    code = ErrorCode.SCHEMA_NOT_FOUND

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        super().__init__(
            f"No schema defined for event '{event_name}'.",
            details={"event_name": event_name},
        )


class SchemaAlreadyDefined(PubSubError):
    """A schema for the event already exists (schemas are immutable)."""

    code = ErrorCode.SCHEMA_ALREADY_DEFINED

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        super().__init__(
            f"Schema for event '{event_name}' is already defined.",
            details={"event_name": event_name},
        )


class InvalidEventSchema(PubSubError):
    """Schema declaration is malformed (duplicate or invalid field names)."""

    code = ErrorCode.SCHEMA_INVALID

    def __init__(self, event_name: str, reason: str) -> None:
        self.event_name = event_name
        self.reason = reason
        super().__init__(
            f"Invalid schema for event '{event_name}': {reason}",
            details={"event_name": event_name, "reason": reason},
        )


class AmbiguousEventName(PubSubError):
    """The event's domain cannot be determined, or the name is malformed."""

    code = ErrorCode.EVENT_NAME_AMBIGUOUS

    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(
            f"Cannot resolve event name '{identifier}': {reason}",
            details={"identifier": identifier, "reason": reason},
        )


class MissingPayloadAttribute(PubSubError):
    """A required field was found neither in the payload nor on the publisher.

    Attributes:
        event_name: Fully-qualified event name.
        field_name: Schema field that could not be resolved.
        expected_accessor: Publisher attribute that would have supplied it.
    """

    code = ErrorCode.PAYLOAD_ATTRIBUTE_MISSING

    def __init__(
        self, event_name: str, field_name: str, expected_accessor: str
    ) -> None:
        self.event_name = event_name
        self.field_name = field_name
        self.expected_accessor = expected_accessor
        super().__init__(
            f"Event '{event_name}' requires '{field_name}': pass it explicitly "
            f"or expose '{expected_accessor}' on the publisher.",
            details={
                "event_name": event_name,
                "field_name": field_name,
                "expected_accessor": expected_accessor,
            },
        )


class PayloadTypeMismatch(PubSubError):
    """A resolved field value does not match its declared type.

    Attributes:
        event_name: Fully-qualified event name.
        field_name: Offending schema field.
        expected_type: Declared type, as written in the schema (e.g. "nullable(string)").
        actual_value: The rejected value.
    """

    code = ErrorCode.PAYLOAD_TYPE_MISMATCH

    def __init__(
        self,
        event_name: str,
        field_name: str,
        expected_type: str,
        actual_value: Any,
    ) -> None:
        self.event_name = event_name
        self.field_name = field_name
        self.expected_type = expected_type
        self.actual_value = actual_value
        super().__init__(
            f"Event '{event_name}' field '{field_name}' expects {expected_type}, "
            f"got {actual_value!r} ({type(actual_value).__name__}).",
            details={
                "event_name": event_name,
                "field_name": field_name,
                "expected_type": expected_type,
                "actual_type": type(actual_value).__name__,
            },
        )
