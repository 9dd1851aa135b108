"""Core: configuration, errors, enums and the composition root."""
