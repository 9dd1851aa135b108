"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from domain_pubsub.core.enums import ErrorCode, Environment
"""

from domain_pubsub.core.enums.environment import Environment
from domain_pubsub.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
