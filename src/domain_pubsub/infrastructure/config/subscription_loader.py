"""Subscription file loader.

Reads the subscription file into a plain mapping. The format is picked from
the file extension: ``.yml`` / ``.yaml`` (PyYAML safe loader) or ``.json``.
Validation of the mapping's shape happens in SubscriptionRegistry.load().

Example (config/subscriptions.yml):

    messaging:
      ordering::order_created: async
    audit:
      all_events: sync
"""

import json
from pathlib import Path
from typing import Any

import yaml

from domain_pubsub.domain.errors import InvalidSubscriptionConfig

_YAML_SUFFIXES = {".yml", ".yaml"}


def load_subscription_file(path: Path | str) -> dict[str, Any]:
    """Read a subscription file.

    Args:
        path: Path to a YAML or JSON file.

    Returns:
        dict: Top-level mapping (empty for an empty file).

    Raises:
        InvalidSubscriptionConfig: If the file is missing, unreadable, has an
            unsupported extension, cannot be parsed, or is not a mapping.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in _YAML_SUFFIXES and suffix != ".json":
        raise InvalidSubscriptionConfig(
            f"unsupported subscription file type '{suffix}' ({path})"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidSubscriptionConfig(f"cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(text) if suffix in _YAML_SUFFIXES else json.loads(text or "{}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise InvalidSubscriptionConfig(f"cannot parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidSubscriptionConfig(
            f"{path} must contain a mapping of domains, got {type(data).__name__}"
        )
    return data
