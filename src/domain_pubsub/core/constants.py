"""Engine-wide constants.

Naming tokens shared by the name resolver, the subscription registry, the
router and the linter. Changing any of these changes the configuration file
format, so they are not exposed through Settings.
"""

# Separates the publishing domain from the event name: "ordering::order_created"
EVENT_NAME_SEPARATOR = "::"

# Reserved subscription key meaning "every event"
WILDCARD_EVENT_KEY = "all_events"

# Suffix of convention-routed handler classes: OrderingOrderCreatedHandler
HANDLER_CLASS_SUFFIX = "Handler"

# Separates domain from handler class in handler identifiers:
# "messaging.OrderingOrderCreatedHandler"
HANDLER_ID_SEPARATOR = "."

# Handler identifier suffix used for custom-routed domains: "analytics.receive"
CUSTOM_RECEIVE_NAME = "receive"

# Default key of the Redis list used as the async job queue
JOBS_QUEUE_NAME_DEFAULT = "pubsub:jobs"
