"""Application environment types.

Defines the different runtime environments for the ordering application.
Used by Settings to determine environment-specific behavior.

Environments:
- DEVELOPMENT: Local development, colored console logs
- TESTING: Automated test execution with in-memory database
- CI: Continuous integration environment
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
