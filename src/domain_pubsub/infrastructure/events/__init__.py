"""Event dispatch.

Usage:
    >>> from domain_pubsub.infrastructure.events import EventDispatcher
"""

from domain_pubsub.infrastructure.events.dispatcher import DispatchReport, EventDispatcher

__all__ = ["DispatchReport", "EventDispatcher"]
