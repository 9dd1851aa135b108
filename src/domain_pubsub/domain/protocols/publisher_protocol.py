"""Publisher protocol.

Publishers declare the domain they emit from, so short identifiers such as
"order_created" resolve to "ordering::order_created". Payload fields that
are not passed explicitly are read from the publisher (see
domain_pubsub.domain.events.payload.read_publisher_attribute).
"""

from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class PublisherProtocol(Protocol):
    """Object initiating an emission.

    Attributes:
        pubsub_domain: Declared domain namespace ("ordering"). May be None
            for publishers that only emit fully-qualified identifiers.
    """

    pubsub_domain: ClassVar[str | None]


@runtime_checkable
class AttributeReaderProtocol(Protocol):
    """Optional explicit accessor map for auto-population."""

    def read_event_attribute(self, name: str) -> Any:
        """Return the value for a payload field, or MISSING."""
        ...
