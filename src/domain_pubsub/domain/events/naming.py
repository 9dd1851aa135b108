"""Event name resolution and naming conventions.

Turns the identifier a publisher passes to emit() into the canonical
"domain::event" form used as the lookup key everywhere downstream, and
derives handler class names and handler identifiers from it.

Rules:
    - "ordering::order_created" is already qualified and kept as-is
    - "order_created" takes the publisher's declared domain
    - Both parts are snake_cased ("Ordering" -> "ordering")
    - More than one separator, or an empty part, is rejected

Conventions:
    >>> handler_class_name("ordering::order_created")
    'OrderingOrderCreatedHandler'
    >>> handler_id("messaging", "ordering::order_created")
    'messaging.OrderingOrderCreatedHandler'
"""

import re
from dataclasses import dataclass

from domain_pubsub.core.constants import (
    CUSTOM_RECEIVE_NAME,
    EVENT_NAME_SEPARATOR,
    HANDLER_CLASS_SUFFIX,
    HANDLER_ID_SEPARATOR,
)
from domain_pubsub.domain.errors import AmbiguousEventName

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_VALID_PART = re.compile(r"^[a-z][a-z0-9_]*$")


def to_snake_case(name: str) -> str:
    """Convert "OrderFulfillment" / "order-fulfillment" to "order_fulfillment"."""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).replace("-", "_").lower()


def to_camel_case(name: str) -> str:
    """Convert "order_created" to "OrderCreated"."""
    return "".join(part.capitalize() for part in name.split("_") if part)


@dataclass(frozen=True, slots=True)
class EventName:
    """A fully-qualified event name split into its parts."""

    domain: str
    event: str

    def __str__(self) -> str:
        return f"{self.domain}{EVENT_NAME_SEPARATOR}{self.event}"

    @classmethod
    def parse(cls, qualified: str) -> "EventName":
        """Split an already-qualified name.

        Raises:
            AmbiguousEventName: If the name is not exactly "domain::event".
        """
        parts = qualified.split(EVENT_NAME_SEPARATOR)
        if len(parts) != 2:
            raise AmbiguousEventName(
                qualified,
                f"expected exactly one '{EVENT_NAME_SEPARATOR}' separator",
            )
        return cls(domain=_normalize(qualified, parts[0]), event=_normalize(qualified, parts[1]))


def _normalize(identifier: str, part: str) -> str:
    normalized = to_snake_case(part)
    if not _VALID_PART.match(normalized):
        raise AmbiguousEventName(
            identifier, f"'{part}' is not a valid name component"
        )
    return normalized


def is_qualified(identifier: str) -> bool:
    return EVENT_NAME_SEPARATOR in identifier


def resolve_event_name(identifier: str, inferred_domain: str | None = None) -> str:
    """Resolve a short or qualified identifier to "domain::event".

    Args:
        identifier: "order_created" or "ordering::order_created".
        inferred_domain: Domain declared by the publisher, if any. Ignored
            when the identifier is already qualified.

    Returns:
        str: Canonical fully-qualified event name.

    Raises:
        AmbiguousEventName: If no domain can be determined or the identifier
            is malformed.
    """
    if is_qualified(identifier):
        return str(EventName.parse(identifier))

    if not inferred_domain:
        raise AmbiguousEventName(
            identifier,
            "identifier is not qualified and the publisher declares no domain",
        )
    return str(
        EventName(
            domain=_normalize(identifier, inferred_domain),
            event=_normalize(identifier, identifier),
        )
    )


def handler_class_name(event_name: str) -> str:
    """Convention class name of the handler for a qualified event name."""
    name = EventName.parse(event_name)
    return f"{to_camel_case(name.domain)}{to_camel_case(name.event)}{HANDLER_CLASS_SUFFIX}"


def handler_id(domain_name: str, event_name: str) -> str:
    """Identifier handed to the job backend for a convention handler."""
    return f"{domain_name}{HANDLER_ID_SEPARATOR}{handler_class_name(event_name)}"


def custom_handler_id(domain_name: str) -> str:
    """Identifier handed to the job backend for a custom-routed domain."""
    return f"{domain_name}{HANDLER_ID_SEPARATOR}{CUSTOM_RECEIVE_NAME}"


def split_handler_id(identifier: str) -> tuple[str, str]:
    """Split "messaging.OrderingOrderCreatedHandler" into (domain, name)."""
    domain_name, sep, name = identifier.partition(HANDLER_ID_SEPARATOR)
    if not sep or not domain_name or not name:
        raise ValueError(f"Malformed handler identifier: {identifier!r}")
    return domain_name, name
