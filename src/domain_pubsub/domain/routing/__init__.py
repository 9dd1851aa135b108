"""Domain routing."""

from domain_pubsub.domain.routing.domain import (
    ConventionRouting,
    CustomRouting,
    Domain,
    HandlerInvocation,
    ReceiveFunction,
)
from domain_pubsub.domain.routing.registry import DomainRegistry

__all__ = [
    "ConventionRouting",
    "CustomRouting",
    "Domain",
    "DomainRegistry",
    "HandlerInvocation",
    "ReceiveFunction",
]
