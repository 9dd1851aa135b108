"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, JSON outside development)
- Async job backend (in-memory/Redis)
"""

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from domain_pubsub.core.config import get_settings
from domain_pubsub.core.enums import Environment

if TYPE_CHECKING:
    from domain_pubsub.domain.protocols.job_backend_protocol import JobBackendProtocol
    from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from domain_pubsub.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(
        use_json=use_json,
        level=logging.getLevelNamesMapping()[settings.log_level],
    )


@lru_cache()
def get_job_backend() -> "JobBackendProtocol":
    """Get async job backend singleton (app-scoped).

    Returns correct adapter based on EVENT_JOB_BACKEND:
        - 'in-memory': InMemoryJobQueue (single process, drained explicitly)
        - 'redis': RedisJobQueue (shared with worker processes)

    Returns:
        Job backend implementing JobBackendProtocol.
    """
    settings = get_settings()

    if settings.event_job_backend == "redis":
        from redis.asyncio import Redis

        from domain_pubsub.infrastructure.jobs.redis_job_queue import RedisJobQueue

        client = Redis.from_url(
            settings.redis_url,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        # Separate client for BRPOP: blocks indefinitely on an idle queue
        consumer = Redis.from_url(
            settings.redis_url,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=None,
            socket_keepalive=True,
        )
        return RedisJobQueue(
            redis_client=client,
            logger=get_logger(),
            queue_name=settings.jobs_queue_name,
            consumer_client=consumer,
        )

    from domain_pubsub.infrastructure.jobs.in_memory_job_queue import InMemoryJobQueue

    return InMemoryJobQueue(logger=get_logger())
