"""Core errors package.

Usage:
    from domain_pubsub.core.errors import PubSubError
"""

from domain_pubsub.core.errors.pubsub_error import PubSubError

__all__ = ["PubSubError"]
