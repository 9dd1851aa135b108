"""Domain layer: events, schemas, routing and subscriptions (no infrastructure)."""
