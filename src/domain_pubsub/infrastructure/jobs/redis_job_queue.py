"""Redis job backend.

Pushes JSON-encoded jobs onto a Redis list (LPUSH) and pops them from the
other end (BRPOP), giving a FIFO queue shared by the emitting process and
any number of worker processes.

Architecture:
    - Implements JobBackendProtocol without inheritance (structural typing)
    - Uses redis.asyncio
    - Enqueue failures raise JobEnqueueError: an event the emitter believes
      was handed off must not be silently dropped

Reference:
    - domain_pubsub/infrastructure/jobs/job_codec.py for the wire format
"""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from domain_pubsub.core.constants import JOBS_QUEUE_NAME_DEFAULT
from domain_pubsub.domain.errors import JobEnqueueError
from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol
from domain_pubsub.infrastructure.jobs.event_job_worker import EventJobWorker
from domain_pubsub.infrastructure.jobs.job_codec import EventJob, decode_job, encode_job


class RedisJobQueue:
    """Redis list-backed job queue.

    Attributes:
        _redis: Async Redis client for enqueue and queue inspection.
        _consumer: Async Redis client for blocking pops. Must have no socket
            timeout, or an idle BRPOP fails with redis TimeoutError.
        _queue_name: Redis list key.
        _logger: Logger instance.
    """

    def __init__(
        self,
        redis_client: "Redis[bytes]",  # type: ignore[type-arg]
        logger: LoggerProtocol,
        queue_name: str = JOBS_QUEUE_NAME_DEFAULT,
        consumer_client: "Redis[bytes] | None" = None,  # type: ignore[type-arg]
    ) -> None:
        """Initialize Redis job queue.

        Args:
            redis_client: Async Redis client instance.
            logger: Logger instance.
            queue_name: Redis list key shared with the workers.
            consumer_client: Long-lived client for dequeue(). Defaults to
                redis_client.
        """
        self._redis = redis_client
        self._consumer = consumer_client if consumer_client is not None else redis_client
        self._logger = logger
        self._queue_name = queue_name

    async def enqueue(self, handler_id: str, event: EventInstance) -> None:
        """Push a job onto the queue.

        Raises:
            JobEnqueueError: If Redis rejects the write.
        """
        try:
            await self._redis.lpush(self._queue_name, encode_job(handler_id, event))
        except RedisError as e:
            self._logger.error(
                "event_job_enqueue_failed",
                error=e,
                handler_id=handler_id,
                event_name=event.event_name,
                event_id=str(event.event_id),
                queue=self._queue_name,
            )
            raise JobEnqueueError(handler_id, event.event_name, str(e)) from e

        self._logger.debug(
            "event_job_enqueued",
            handler_id=handler_id,
            event_name=event.event_name,
            event_id=str(event.event_id),
            queue=self._queue_name,
        )

    async def dequeue(self, timeout: float = 0) -> EventJob | None:
        """Pop the oldest job, blocking up to ``timeout`` seconds (0 = forever).

        Returns:
            EventJob, or None on timeout.

        Raises:
            InvalidJobPayload: If the popped entry cannot be decoded.
        """
        result = await self._consumer.brpop([self._queue_name], timeout=timeout)
        if result is None:
            return None
        _, raw = result
        return decode_job(raw)

    async def queue_length(self) -> int:
        length: int = await self._redis.llen(self._queue_name)
        return length

    async def work_once(self, worker: EventJobWorker, timeout: float = 0) -> bool:
        """Pop one job and run it.

        Returns:
            bool: True if a job was run, False on timeout.
        """
        job = await self.dequeue(timeout=timeout)
        if job is None:
            return False
        await worker.perform(job.handler_id, job.event)
        return True
