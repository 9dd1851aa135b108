"""PubSub engine dependency factory.

Application-scoped singleton for event emission. Schemas and domains are
declared on the returned engine by the application at startup; the
subscription table is loaded by ``boot()``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain_pubsub.application.pubsub import PubSub


@lru_cache()
def get_pubsub() -> "PubSub":
    """Get PubSub engine singleton (app-scoped).

    Configuration comes from Settings:
        - SUBSCRIPTIONS_PATH: configuration source for load()/register()
        - EVENTS_STRICT_MODE: boot() lints handlers against subscriptions
          and aborts on drift (production safety). Off by default for
          development flexibility.
        - EVENT_JOB_BACKEND: receives async-mode hand-offs

    Returns:
        PubSub: Engine with empty catalog, domains and subscriptions.

    Usage:
        pubsub = get_pubsub()
        pubsub.define_event("ordering::order_created", fields)
        pubsub.add_domain(messaging)
        pubsub.boot()
    """
    from domain_pubsub.application.pubsub import PubSub
    from domain_pubsub.core.config import get_settings
    from domain_pubsub.core.container.infrastructure import (
        get_job_backend,
        get_logger,
    )

    settings = get_settings()
    return PubSub(
        job_backend=get_job_backend(),
        logger=get_logger(),
        configuration_source=settings.subscriptions_path,
        strict=settings.events_strict_mode,
    )
