"""Runtime environment types.

Used by Settings to pick the log renderer.

Environments:
- DEVELOPMENT: human-readable console logs
- TESTING: JSON logs for automated test runs
- CI: JSON logs for continuous integration
- PRODUCTION: JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
