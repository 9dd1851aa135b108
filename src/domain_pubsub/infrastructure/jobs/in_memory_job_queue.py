"""In-memory job backend for tests and single-process development.

Jobs are recorded on enqueue and only run when drain() is called, which
makes "async" subscriptions observable in tests: an emission leaves exactly
one recorded job per async subscriber and runs nothing inline.
"""

from collections import deque
from dataclasses import dataclass

from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol
from domain_pubsub.infrastructure.jobs.event_job_worker import EventJobWorker
from domain_pubsub.infrastructure.jobs.job_codec import EventJob


@dataclass(frozen=True, slots=True, kw_only=True)
class FailedJob:
    """Dead-letter record of a job that raised during drain()."""

    job: EventJob
    error: Exception


class InMemoryJobQueue:
    """FIFO job queue held in process memory.

    Not durable and NOT thread-safe.

    Attributes:
        _jobs: Pending jobs, oldest first.
        _failed: Jobs that raised during drain().
        _logger: Logger for enqueue/drain.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._jobs: deque[EventJob] = deque()
        self._failed: list[FailedJob] = []
        self._logger = logger

    async def enqueue(self, handler_id: str, event: EventInstance) -> None:
        self._jobs.append(EventJob(handler_id=handler_id, event=event))
        self._logger.debug(
            "event_job_enqueued",
            handler_id=handler_id,
            event_name=event.event_name,
            event_id=str(event.event_id),
            queue_length=len(self._jobs),
        )

    @property
    def jobs(self) -> list[EventJob]:
        """Pending jobs (snapshot)."""
        return list(self._jobs)

    @property
    def failed(self) -> list[FailedJob]:
        """Dead letters from previous drains (snapshot)."""
        return list(self._failed)

    def __len__(self) -> int:
        return len(self._jobs)

    def clear(self) -> None:
        self._jobs.clear()
        self._failed.clear()

    async def drain(self, worker: EventJobWorker) -> int:
        """Run every pending job, including jobs enqueued while draining.

        A failing job is moved to ``failed`` and draining continues.

        Returns:
            int: Number of jobs that completed successfully.
        """
        completed = 0
        failed = 0
        while self._jobs:
            job = self._jobs.popleft()
            try:
                await worker.perform(job.handler_id, job.event)
            except Exception as e:
                self._failed.append(FailedJob(job=job, error=e))
                failed += 1
                continue
            completed += 1

        if failed:
            self._logger.warning(
                "event_jobs_failed",
                failed_count=failed,
                dead_letter_count=len(self._failed),
            )
        return completed
