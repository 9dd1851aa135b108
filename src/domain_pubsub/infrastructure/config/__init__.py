"""Configuration file adapters."""

from domain_pubsub.infrastructure.config.subscription_loader import (
    load_subscription_file,
)

__all__ = ["load_subscription_file"]
