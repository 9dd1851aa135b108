"""Subscription table and its consistency linter."""

from domain_pubsub.domain.subscriptions.linter import SubscriptionLinter
from domain_pubsub.domain.subscriptions.registry import (
    Subscription,
    SubscriptionRegistry,
    SubscriptionTable,
    parse_subscriptions,
)

__all__ = [
    "Subscription",
    "SubscriptionLinter",
    "SubscriptionRegistry",
    "SubscriptionTable",
    "parse_subscriptions",
]
