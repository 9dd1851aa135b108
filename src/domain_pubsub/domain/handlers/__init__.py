"""Handler contract."""

from domain_pubsub.domain.handlers.base_handler import DomainEventHandler

__all__ = ["DomainEventHandler"]
