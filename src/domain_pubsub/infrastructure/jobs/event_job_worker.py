"""Worker side of async dispatch.

Runs handlers that the dispatcher handed to a job backend. The handler is
rebuilt from its identifier through the DomainRegistry, so the worker
process must declare the same domains as the emitting process.

Failures are logged and re-raised: retries and dead-lettering belong to
the backend running the worker, never to the original emitter.
"""

from domain_pubsub.domain.events.base_event import EventInstance
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol
from domain_pubsub.domain.routing.registry import DomainRegistry
from domain_pubsub.infrastructure.jobs.job_codec import decode_job


class EventJobWorker:
    """Executes handed-off handler invocations.

    Attributes:
        _domains: Declared domains, used to resolve handler identifiers.
        _logger: Logger for job lifecycle.
    """

    def __init__(self, domains: DomainRegistry, logger: LoggerProtocol) -> None:
        self._domains = domains
        self._logger = logger

    async def perform(self, handler_id: str, event: EventInstance) -> None:
        """Run one job.

        Args:
            handler_id: e.g. "messaging.OrderingOrderCreatedHandler".
            event: Event instance the job was enqueued with.

        Raises:
            UnknownDomainError: If the handler's domain is not declared here.
            MissingHandlerError: If the handler class is not declared here.
            Exception: Whatever the handler raises.
        """
        job_logger = self._logger.bind(
            handler_id=handler_id,
            event_name=event.event_name,
            event_id=str(event.event_id),
        )
        try:
            invocation = self._domains.resolve(handler_id, event)
            await invocation.execute()
        except Exception as e:
            job_logger.error("event_job_failed", error=e)
            raise

        job_logger.info("event_job_completed")

    async def perform_serialized(self, raw: str | bytes) -> None:
        """Decode a JSON job (see job_codec) and run it."""
        job = decode_job(raw)
        await self.perform(job.handler_id, job.event)
