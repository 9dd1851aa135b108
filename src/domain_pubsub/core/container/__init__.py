"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from domain_pubsub.core.container import get_logger, get_pubsub

The container is organized into modules:
- infrastructure: Core services (logging, job backend)
- events: PubSub engine
"""

from domain_pubsub.core.container.events import get_pubsub
from domain_pubsub.core.container.infrastructure import get_job_backend, get_logger

__all__ = [
    "get_job_backend",
    "get_logger",
    "get_pubsub",
]
