"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_database, get_event_dispatcher, ...

The container is organized into modules by concern:
- infrastructure: Database, sessions and logging
- events: Event dispatcher and handler subscriptions
- repositories: Repository factories
- handlers: Application command handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Event dispatcher
from src.core.container.events import build_event_dispatcher, get_event_dispatcher

# Repositories
from src.core.container.repositories import (
    get_customer_repository,
    get_order_repository,
    get_product_repository,
)

# Command handlers
from src.core.container.handlers import (
    get_change_customer_address_handler,
    get_create_customer_handler,
    get_place_order_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Events
    "build_event_dispatcher",
    "get_event_dispatcher",
    # Repositories
    "get_customer_repository",
    "get_order_repository",
    "get_product_repository",
    # Handlers
    "get_change_customer_address_handler",
    "get_create_customer_handler",
    "get_place_order_handler",
]
