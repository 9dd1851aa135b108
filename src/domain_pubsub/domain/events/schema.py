"""Event schema catalog.

Every event kind declares its payload once: an ordered list of typed fields,
each required or optional. The catalog is the single source of truth the
payload resolver validates against and the linter uses to name events.

Architecture:
    - Pure data (no dependencies on routing or dispatch)
    - Schemas are frozen dataclasses; the catalog refuses redefinition
    - Field types come from a closed set (FieldType), optionally Nullable

Usage:
    >>> catalog = SchemaCatalog()
    >>> catalog.define(
    ...     "ordering::order_created",
    ...     [
    ...         FieldSpec("order_id", FieldType.INTEGER),
    ...         FieldSpec("line_items", FieldType.LIST),
    ...         FieldSpec("comment", Nullable(FieldType.STRING), required=False),
    ...     ],
    ... )
    >>> catalog.lookup("ordering::order_created").field_names
    ('order_id', 'line_items', 'comment')
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeAlias

from domain_pubsub.domain.enums import FieldType
from domain_pubsub.domain.errors import (
    InvalidEventSchema,
    SchemaAlreadyDefined,
    UnknownEventSchema,
)
from domain_pubsub.domain.events.naming import handler_class_name


@dataclass(frozen=True, slots=True)
class Nullable:
    """Wraps a field type to also accept None."""

    inner: FieldType

    def __str__(self) -> str:
        return f"nullable({self.inner.value})"


FieldKind: TypeAlias = FieldType | Nullable


def _matches(field_type: FieldType, value: Any) -> bool:
    # bool is a subclass of int; neither int nor bool is accepted as float.
    match field_type:
        case FieldType.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        case FieldType.FLOAT:
            return isinstance(value, float)
        case FieldType.STRING:
            return isinstance(value, str)
        case FieldType.BOOLEAN:
            return isinstance(value, bool)
        case FieldType.LIST:
            return isinstance(value, (list, tuple))
    return False


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One payload field declaration.

    Attributes:
        name: Field name; also the publisher attribute used for auto-population.
        type: Declared type (FieldType or Nullable(FieldType)).
        required: Whether emission fails when the field cannot be resolved.
    """

    name: str
    type: FieldKind
    required: bool = True

    @property
    def type_name(self) -> str:
        """Declared type as written in error messages ("integer", "nullable(string)")."""
        if isinstance(self.type, Nullable):
            return str(self.type)
        return self.type.value

    def accepts(self, value: Any) -> bool:
        """Check a value against the declared type. Never coerces."""
        if isinstance(self.type, Nullable):
            return value is None or _matches(self.type.inner, value)
        return _matches(self.type, value)


@dataclass(frozen=True, slots=True)
class EventSchema:
    """Ordered, immutable payload declaration for one event.

    Attributes:
        event_name: Fully-qualified event name ("ordering::order_created").
        fields: Field declarations in declaration order.
    """

    event_name: str
    fields: tuple[FieldSpec, ...]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)


class SchemaCatalog:
    """Process-wide table of event schemas.

    Schemas are defined at import/boot time and never change afterwards.
    Definition order is preserved.

    Attributes:
        _schemas: Event name -> schema.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, EventSchema] = {}

    def define(self, event_name: str, fields: Iterable[FieldSpec]) -> EventSchema:
        """Declare the payload schema for an event.

        Args:
            event_name: Fully-qualified event name.
            fields: Field declarations, in the order payloads are resolved.

        Returns:
            EventSchema: The frozen schema.

        Raises:
            SchemaAlreadyDefined: If the event already has a schema.
            AmbiguousEventName: If the event name is not "domain::event".
            InvalidEventSchema: If a field name is empty, not an identifier,
                declared twice, or if another event maps to the same handler
                class name.
        """
        if event_name in self._schemas:
            raise SchemaAlreadyDefined(event_name)

        class_name = handler_class_name(event_name)
        for other in self._schemas:
            if handler_class_name(other) == class_name:
                raise InvalidEventSchema(
                    event_name, f"handler name {class_name} is already taken by '{other}'"
                )

        specs = tuple(fields)
        seen: set[str] = set()
        for spec in specs:
            if not spec.name.isidentifier():
                raise InvalidEventSchema(
                    event_name, f"field name {spec.name!r} is not an identifier"
                )
            if spec.name in seen:
                raise InvalidEventSchema(
                    event_name, f"field '{spec.name}' declared twice"
                )
            seen.add(spec.name)

        schema = EventSchema(event_name=event_name, fields=specs)
        self._schemas[event_name] = schema
        return schema

    def lookup(self, event_name: str) -> EventSchema:
        """Get the schema for an event.

        Raises:
            UnknownEventSchema: If no schema is defined.
        """
        try:
            return self._schemas[event_name]
        except KeyError:
            raise UnknownEventSchema(event_name) from None

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._schemas

    def event_names(self) -> list[str]:
        """All defined event names, in definition order."""
        return list(self._schemas)
