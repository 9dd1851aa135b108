"""Engine error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention. Every PubSubError
carries one of these so callers and log processors can branch on a stable
value instead of the message text.

Categories:
- Event naming and schema errors (EVENT_*, SCHEMA_*)
- Payload validation errors (PAYLOAD_*)
- Routing errors (DOMAIN_*, HANDLER_*)
- Subscription configuration errors (SUBSCRIPTION_*)
- Async hand-off errors (JOB_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Engine error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Event naming and schema errors
    EVENT_NAME_AMBIGUOUS = "event_name_ambiguous"
    SCHEMA_NOT_FOUND = "schema_not_found"
    SCHEMA_ALREADY_DEFINED = "schema_already_defined"
    SCHEMA_INVALID = "schema_invalid"

    # Payload validation errors
    PAYLOAD_ATTRIBUTE_MISSING = "payload_attribute_missing"
    PAYLOAD_TYPE_MISMATCH = "payload_type_mismatch"

    # Routing errors
    DOMAIN_NOT_FOUND = "domain_not_found"
    DOMAIN_ALREADY_REGISTERED = "domain_already_registered"
    HANDLER_NOT_FOUND = "handler_not_found"
    HANDLER_EXECUTION_FAILED = "handler_execution_failed"

    # Subscription configuration errors
    SUBSCRIPTION_CONFIG_INVALID = "subscription_config_invalid"
    SUBSCRIPTION_SOURCE_NOT_SET = "subscription_source_not_set"
    SUBSCRIPTION_LINT_FAILED = "subscription_lint_failed"

    # Async hand-off errors
    JOB_ENQUEUE_FAILED = "job_enqueue_failed"
    JOB_PAYLOAD_INVALID = "job_payload_invalid"
