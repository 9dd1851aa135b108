"""Logging adapters implementing LoggerProtocol."""

from domain_pubsub.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
