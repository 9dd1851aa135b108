"""Publisher mixin.

Gives any class an ``emit()`` that qualifies short event names with the
class's declared domain and fills payload fields from its attributes.

Usage:
    >>> class OrderService(EventPublisher):
    ...     pubsub_domain = "ordering"
    ...
    ...     def __init__(self, order):
    ...         self.order_id = order.id
    ...         self.customer_id = order.customer_id
    ...
    ...     async def place(self) -> None:
    ...         ...
    ...         await self.emit("order_created", total_amount=10.0, line_items=[])
    >>>
    >>> # order_id and customer_id are read from the service itself.
"""

from typing import Any, ClassVar

from domain_pubsub.application.pubsub import PubSub
from domain_pubsub.domain.events.base_event import EventInstance


class EventPublisher:
    """Mixin for objects that emit events.

    Attributes:
        pubsub_domain: Domain that short identifiers are qualified with.
        pubsub: Engine to emit through. Defaults to the container's
            application-wide instance.
    """

    pubsub_domain: ClassVar[str | None] = None
    pubsub: PubSub | None = None

    async def emit(self, identifier: str, /, **fields: Any) -> EventInstance:
        """Emit an event from this publisher.

        Args:
            identifier: Short ("order_created") or qualified name.
            **fields: Explicit payload values.

        Returns:
            EventInstance: The dispatched event.
        """
        pubsub = self.pubsub
        if pubsub is None:
            from domain_pubsub.core.container import get_pubsub

            pubsub = get_pubsub()
        return await pubsub.emit(identifier, fields, publisher=self)
