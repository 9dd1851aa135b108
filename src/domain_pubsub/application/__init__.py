"""Application layer: the PubSub facade and the publisher mixin."""

from domain_pubsub.application.publisher import EventPublisher
from domain_pubsub.application.pubsub import PubSub

__all__ = ["EventPublisher", "PubSub"]
