"""Application environment types.

Defines the runtime environments the engine can be booted in. Used by
Settings and the container to pick environment-specific behavior (log
rendering, strict linting).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration (subscription lint runs here)
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
