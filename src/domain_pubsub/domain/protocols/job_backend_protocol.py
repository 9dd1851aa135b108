"""Async job backend protocol (port).

The engine never runs async-mode handlers itself. It makes exactly one
enqueue() call per (domain, event) and moves on; the backend owns workers,
retries, ordering and at-least-once delivery.

Implementations:
    - InMemoryJobQueue: domain_pubsub/infrastructure/jobs/in_memory_job_queue.py
    - RedisJobQueue: domain_pubsub/infrastructure/jobs/redis_job_queue.py
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain_pubsub.domain.events.base_event import EventInstance


class JobBackendProtocol(Protocol):
    """Protocol for async job backends.

    Methods:
        enqueue: Hand off one handler invocation.
    """

    async def enqueue(self, handler_id: str, event: "EventInstance") -> None:
        """Hand off a handler invocation for eventual execution.

        Args:
            handler_id: Handler identifier, e.g.
                "messaging.OrderingOrderCreatedHandler".
            event: Validated event instance.

        Raises:
            JobEnqueueError: If the backend cannot accept the job. Failures of
                the handler itself never surface here.
        """
        ...
