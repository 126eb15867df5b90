"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLite/PostgreSQL via SQLAlchemy async)
- Logging (structlog console adapter)
"""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager configured from settings.

    Usage:
        db = get_database()
        await db.create_all()
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development/production: ConsoleAdapter (human-readable unless LOG_JSON)
    - testing/ci: ConsoleAdapter (JSON)

    DEBUG=true forces debug level. Every line carries app and version.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.log_json or settings.is_testing or settings.is_ci
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=use_json, level=level).bind(
        app=settings.app_name,
        version=settings.app_version,
    )


# ============================================================================
# Unit-of-Work Scoped Dependencies
# ============================================================================


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Open a transactional session on the app-scoped database.

    Commits on success, rolls back on exception.

    Usage:
        async with get_db_session() as session:
            repo = get_order_repository(session)
    """
    async with get_database().get_session() as session:
        yield session
