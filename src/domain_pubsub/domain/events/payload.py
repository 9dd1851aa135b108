"""Payload resolution: explicit values + publisher attributes -> EventInstance.

For each schema field, in declaration order:
    1. take the explicit value if the caller passed one,
    2. else read the publisher attribute of the same name,
    3. else fail if the field is required (optional fields become None),
    4. check the value against the declared type.

Resolution stops at the first failure so errors are deterministic.

Publisher attributes:
    A publisher can control what it exposes by defining
    ``read_event_attribute(name)`` and returning MISSING for names it does
    not provide. Otherwise its public (non-underscore) attributes and
    properties are read with getattr.
"""

from collections.abc import Mapping
from typing import Any, Final

from domain_pubsub.domain.errors import MissingPayloadAttribute, PayloadTypeMismatch
from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.events.schema import EventSchema
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol
from domain_pubsub.domain.protocols.publisher_protocol import AttributeReaderProtocol


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()
"""Sentinel for "the publisher does not expose this attribute"."""


def read_publisher_attribute(publisher: object | None, name: str) -> Any:
    """Read a named attribute from a publisher, or return MISSING.

    Args:
        publisher: Object that initiated the emission (may be None).
        name: Schema field name.

    Returns:
        The attribute value, or MISSING if the publisher does not expose it.
    """
    if publisher is None or name.startswith("_"):
        return MISSING

    if isinstance(publisher, AttributeReaderProtocol):
        return publisher.read_event_attribute(name)

    return getattr(publisher, name, MISSING)


class PayloadResolver:
    """Builds validated EventInstances from a schema.

    Attributes:
        _logger: Logger for ignored payload keys.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def resolve(
        self,
        schema: EventSchema,
        explicit: Mapping[str, Any] | None = None,
        publisher: object | None = None,
    ) -> EventInstance:
        """Resolve and validate a payload.

        Args:
            schema: Schema of the (fully-qualified) event being emitted.
            explicit: Values passed by the caller; may be partial.
            publisher: Object whose attributes fill in the rest.

        Returns:
            EventInstance: Immutable, validated event.

        Raises:
            MissingPayloadAttribute: First required field that could not be
                resolved.
            PayloadTypeMismatch: First field whose value has the wrong type.
        """
        explicit = explicit or {}
        values: dict[str, Any] = {}

        for spec in schema.fields:
            if spec.name in explicit:
                value = explicit[spec.name]
            else:
                value = read_publisher_attribute(publisher, spec.name)

            if value is MISSING:
                if spec.required:
                    raise MissingPayloadAttribute(
                        schema.event_name, spec.name, expected_accessor=spec.name
                    )
                values[spec.name] = None
                continue

            if not spec.accepts(value):
                raise PayloadTypeMismatch(
                    schema.event_name, spec.name, spec.type_name, value
                )
            values[spec.name] = value

        unknown = [key for key in explicit if key not in values]
        if unknown:
            self._logger.warning(
                "payload_attributes_ignored",
                event_name=schema.event_name,
                attributes=unknown,
            )

        return EventInstance(event_name=schema.event_name, payload=values)
