"""JSON encoding of async event jobs.

A job is (handler identifier, event instance). Payload field types are
limited to JSON types (integer, float, string, boolean, list, null), so the
encoding is lossless.
"""

import json
from dataclasses import dataclass
from typing import Any

from domain_pubsub.domain.errors import InvalidJobPayload
from domain_pubsub.domain.events.base_event import EventInstance


@dataclass(frozen=True, slots=True, kw_only=True)
class EventJob:
    """One handed-off handler invocation."""

    handler_id: str
    event: EventInstance


def encode_job(handler_id: str, event: EventInstance) -> str:
    return json.dumps({"handler_id": handler_id, "event": event.to_dict()})


def decode_job(raw: str | bytes) -> EventJob:
    """Decode a job produced by encode_job().

    Raises:
        InvalidJobPayload: If the data is not a well-formed job.
    """
    try:
        data: dict[str, Any] = json.loads(raw)
        return EventJob(
            handler_id=data["handler_id"],
            event=EventInstance.from_dict(data["event"]),
        )
    except (ValueError, KeyError, TypeError) as e:
        raise InvalidJobPayload(str(e)) from e
