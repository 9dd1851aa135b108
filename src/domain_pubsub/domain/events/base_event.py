"""Event instance: a validated, read-only payload.

EventInstance is what handlers receive. It is only ever built by the payload
resolver (or rebuilt from a job by the worker), so every instance satisfies
its schema's required-field and type constraints.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Payload held in a read-only mapping, fields readable as attributes
    - Auto-generated event_id (UUIDv7, time-ordered) for tracking
    - occurred_at timestamp (UTC)

Usage:
    >>> event = EventInstance(
    ...     event_name="ordering::order_created",
    ...     payload={"order_id": 1, "comment": None},
    ... )
    >>> event.order_id
    1
    >>> event["comment"] is None
    True
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class EventInstance:
    """A validated occurrence of one event.

    Attributes:
        event_name: Fully-qualified event name ("ordering::order_created").
        payload: Resolved field values, in schema declaration order.
        event_id: Unique identifier for this emission. Used by job backends
            for deduplication (at-least-once delivery) and by logs for
            correlation.
        occurred_at: When the event was emitted (UTC).
    """

    event_name: str
    payload: Mapping[str, Any]
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: expose payload fields.
        try:
            payload = object.__getattribute__(self, "payload")
        except AttributeError:
            raise AttributeError(name) from None
        try:
            return payload[name]
        except KeyError:
            raise AttributeError(
                f"Event '{self.event_name}' has no field '{name}'"
            ) from None

    def __getitem__(self, name: str) -> Any:
        return self.payload[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.payload.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for job backends (JSON-compatible if the payload is)."""
        return {
            "event_id": str(self.event_id),
            "event_name": self.event_name,
            "occurred_at": self.occurred_at.isoformat(),
            "payload": dict(self.payload),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EventInstance":
        """Rebuild an instance serialized with to_dict()."""
        return cls(
            event_name=data["event_name"],
            payload=data["payload"],
            event_id=UUID(data["event_id"]),
            occurred_at=datetime.fromisoformat(data["occurred_at"]),
        )
