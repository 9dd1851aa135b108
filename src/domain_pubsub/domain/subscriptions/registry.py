"""Subscription registry: domain -> event (or wildcard) -> dispatch mode.

Loaded from the subscription file at boot:

    messaging:
      ordering::order_created: async
      ordering::order_cancelled: sync
    audit:
      all_events: sync

Lifecycle:
    - load(mapping): validates the whole mapping, then swaps it in atomically.
      On error the previous table stays in place.
    - register(domain, entries) / clear(): test harnesses only, never
      concurrently with dispatch.

Lookup rules:
    - An exact entry for the event beats the domain's "all_events" entry.
    - subscribers() lists domains in registration order (file order, then
      register() calls), which is the synchronous execution order.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from pydantic import TypeAdapter, ValidationError

from domain_pubsub.core.constants import WILDCARD_EVENT_KEY
from domain_pubsub.domain.enums import DispatchMode
from domain_pubsub.domain.errors import AmbiguousEventName, InvalidSubscriptionConfig
from domain_pubsub.domain.events.naming import (
    EventName,
    handler_class_name,
    to_snake_case,
)
from domain_pubsub.domain.protocols.logger_protocol import LoggerProtocol

SubscriptionTable: TypeAlias = dict[str, dict[str, DispatchMode]]

_DOMAIN_ENTRIES = TypeAdapter(dict[str, DispatchMode] | None)
_TABLE = TypeAdapter(dict[str, dict[str, DispatchMode] | None])


@dataclass(frozen=True, slots=True, kw_only=True)
class Subscription:
    """One (domain, event-or-wildcard, mode) entry.

    Attributes:
        domain_name: Subscribing domain.
        event_name: Fully-qualified event name, or "all_events".
        mode: sync or async.
    """

    domain_name: str
    event_name: str
    mode: DispatchMode

    @property
    def is_wildcard(self) -> bool:
        return self.event_name == WILDCARD_EVENT_KEY


def _normalize_entries(
    domain_name: str, entries: Mapping[str, DispatchMode] | None
) -> dict[str, DispatchMode]:
    normalized: dict[str, DispatchMode] = {}
    # Handler class name -> event name, to reject entries sharing a handler.
    handler_names: dict[str, str] = {}
    for key, mode in (entries or {}).items():
        if key == WILDCARD_EVENT_KEY:
            event_name = key
        else:
            try:
                event_name = str(EventName.parse(key))
            except AmbiguousEventName as e:
                raise InvalidSubscriptionConfig(
                    f"domain '{domain_name}': event key '{key}' must be "
                    f"'{WILDCARD_EVENT_KEY}' or a qualified 'domain::event' name ({e.reason})"
                ) from e
        if event_name in normalized:
            raise InvalidSubscriptionConfig(
                f"domain '{domain_name}': '{event_name}' is subscribed twice"
            )
        if event_name != WILDCARD_EVENT_KEY:
            class_name = handler_class_name(event_name)
            other = handler_names.setdefault(class_name, event_name)
            if other != event_name:
                raise InvalidSubscriptionConfig(
                    f"domain '{domain_name}': '{other}' and '{event_name}' "
                    f"both map to handler {class_name}"
                )
        normalized[event_name] = mode
    return normalized


def parse_subscriptions(mapping: Any) -> SubscriptionTable:
    """Validate and normalize a raw subscription mapping.

    Args:
        mapping: Parsed subscription file ({domain: {event: mode}}).

    Returns:
        SubscriptionTable: Normalized table (snake-case domains, canonical
        event names, DispatchMode values).

    Raises:
        InvalidSubscriptionConfig: On a wrong shape, an unknown dispatch mode,
            an unqualified event key, a duplicate entry, or two events of one
            domain that map to the same handler class name.
    """
    if mapping is None:
        return {}
    try:
        raw = _TABLE.validate_python(mapping)
    except ValidationError as e:
        raise InvalidSubscriptionConfig(str(e)) from e

    table: SubscriptionTable = {}
    for raw_domain, entries in raw.items():
        domain_name = to_snake_case(raw_domain)
        if domain_name in table:
            raise InvalidSubscriptionConfig(f"domain '{domain_name}' is declared twice")
        table[domain_name] = _normalize_entries(domain_name, entries)
    return table


class SubscriptionRegistry:
    """Process-wide subscription table.

    Attributes:
        _table: Domain name -> event name (or wildcard) -> mode.
        _logger: Logger for load/clear lifecycle events.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._table: SubscriptionTable = {}
        self._logger = logger

    def load(self, mapping: Any) -> None:
        """Replace the whole registry with a new mapping.

        Raises:
            InvalidSubscriptionConfig: If the mapping is invalid. The current
                table is left untouched.
        """
        table = parse_subscriptions(mapping)
        self._table = table
        self._logger.info(
            "subscriptions_loaded",
            domain_count=len(table),
            entry_count=sum(len(entries) for entries in table.values()),
        )

    def register(self, domain_name: str, entries: Mapping[str, Any] | None) -> None:
        """Add (or replace) one domain's entries. Test harnesses only.

        Raises:
            InvalidSubscriptionConfig: If the entries are invalid.
        """
        domain_name = to_snake_case(domain_name)
        try:
            validated = _DOMAIN_ENTRIES.validate_python(entries)
        except ValidationError as e:
            raise InvalidSubscriptionConfig(f"domain '{domain_name}': {e}") from e

        table = dict(self._table)
        table.pop(domain_name, None)
        table[domain_name] = _normalize_entries(domain_name, validated)
        self._table = table
        self._logger.debug(
            "subscriptions_registered",
            domain=domain_name,
            entry_count=len(table[domain_name]),
        )

    def clear(self) -> None:
        """Remove every subscription. Test harnesses only."""
        self._table = {}
        self._logger.debug("subscriptions_cleared")

    def lookup(self, domain_name: str, event_name: str) -> Subscription | None:
        """Find the entry that applies to (domain, event).

        Returns:
            The exact entry, else the domain's wildcard entry, else None.
        """
        entries = self._table.get(domain_name)
        if not entries:
            return None
        if event_name in entries:
            return Subscription(
                domain_name=domain_name, event_name=event_name, mode=entries[event_name]
            )
        if WILDCARD_EVENT_KEY in entries:
            return Subscription(
                domain_name=domain_name,
                event_name=WILDCARD_EVENT_KEY,
                mode=entries[WILDCARD_EVENT_KEY],
            )
        return None

    def subscribers(self, event_name: str) -> list[Subscription]:
        """Every domain subscribed to an event, in registration order."""
        matches = (self.lookup(domain_name, event_name) for domain_name in self._table)
        return [match for match in matches if match is not None]

    def entries(self) -> Iterator[Subscription]:
        """Iterate all entries, wildcard included."""
        for domain_name, entries in self._table.items():
            for event_name, mode in entries.items():
                yield Subscription(domain_name=domain_name, event_name=event_name, mode=mode)

    def table(self) -> SubscriptionTable:
        """Copy of the current table (for snapshot/restore in test harnesses)."""
        return {domain: dict(entries) for domain, entries in self._table.items()}

    def has_wildcard(self, domain_name: str) -> bool:
        return WILDCARD_EVENT_KEY in self._table.get(domain_name, {})

    def domains(self) -> list[str]:
        return list(self._table)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._table.values())
