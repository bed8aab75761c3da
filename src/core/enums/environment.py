"""Application environment types.

Selects environment-specific behaviour at the composition root:
- DEVELOPMENT: human-readable logs, stub notification transport
- TESTING: JSON logs, stub notification transport
- CI: JSON logs, stub notification transport
- PRODUCTION: JSON logs, AWS SES notification transport
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
