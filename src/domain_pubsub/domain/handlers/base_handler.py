"""Base class for convention-routed event handlers.

A handler is bound to one (domain, event) pair by its class name:
the handler for "ordering::order_created" in domain "messaging" is the
class ``OrderingOrderCreatedHandler`` registered on the messaging domain.
A new instance is created for every dispatch.

Usage:
    >>> messaging = Domain("messaging")
    >>>
    >>> @messaging.handler
    ... class OrderingOrderCreatedHandler(DomainEventHandler):
    ...     def should_process(self) -> bool:
    ...         return self.event.total_amount > 0
    ...
    ...     async def call(self) -> None:
    ...         await send_receipt(self.event.customer_id, self.event.order_id)
"""

from abc import ABC, abstractmethod

from domain_pubsub.domain.events.base_event import EventInstance


class DomainEventHandler(ABC):
    """Handler contract.

    Attributes:
        event: The validated event being handled. Payload fields are
            readable as attributes (``self.event.order_id``).
    """

    def __init__(self, event: EventInstance) -> None:
        self.event = event

    def should_process(self) -> bool:
        """Gating predicate. Returning False skips the handler for this event."""
        return True

    @abstractmethod
    async def call(self) -> None:
        """Execute the handler."""
        ...
