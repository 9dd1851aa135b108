"""Test helpers for applications built on domain_pubsub.

Usage:
    >>> with subscriptions_for(pubsub, "messaging"):
    ...     await order_service.place()
    ...     assert len(job_queue) == 1
"""

from collections.abc import Iterator
from contextlib import contextmanager

from domain_pubsub.application.pubsub import PubSub


@contextmanager
def subscriptions_for(pubsub: PubSub, *domain_names: str) -> Iterator[PubSub]:
    """Enable only the given domains' subscriptions for the duration of a block.

    Clears the subscription table, registers each listed domain from the
    configuration source, and restores the previous table on exit (even if
    the block raises).

    Args:
        pubsub: Engine under test.
        *domain_names: Domains to enable. None means no subscriptions at all.

    Yields:
        PubSub: The same engine.
    """
    snapshot = pubsub.subscriptions.table()
    pubsub.clear()
    try:
        for domain_name in domain_names:
            pubsub.register(domain_name)
        yield pubsub
    finally:
        pubsub.subscriptions.load(snapshot)
