"""Domain protocols (ports).

Structural interfaces implemented by infrastructure adapters and by
application objects (publishers).
"""

from domain_pubsub.domain.protocols.job_backend_protocol import JobBackendProtocol
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol
from domain_pubsub.domain.protocols.publisher_protocol import (
    AttributeReaderProtocol,
    PublisherProtocol,
)

__all__ = [
    "AttributeReaderProtocol",
    "JobBackendProtocol",
    "LoggerProtocol",
    "PublisherProtocol",
]
