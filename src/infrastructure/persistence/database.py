"""Database connection and session management.

This module provides database connection management using SQLAlchemy's
async engine and session handling. Repositories receive sessions from here.

Following hexagonal architecture:
- This is an infrastructure concern
- Provides database sessions to repository implementations
- Owns transaction boundaries (repositories only flush)
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Database connection and session management.

    This class manages the database engine and provides async sessions
    for database operations. It handles:
    - Connection pooling (server databases only)
    - Session lifecycle
    - Transaction management
    - Foreign key enforcement on SQLite

    Usage:
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.create_all()
        async with db.get_session() as session:
            repo = OrderRepository(session)
            await repo.create(order)
            # Automatically commits on success, rolls back on error
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: Database connection URL (e.g., postgresql+asyncpg://...)
            echo: If True, log all SQL statements (useful for debugging)
            pool_size: Number of connections to maintain in pool
            max_overflow: Maximum overflow connections above pool_size

        Note:
            SQLite URLs ignore pool_size/max_overflow; SQLAlchemy picks a
            pool suited to the file or in-memory database.
        """
        is_sqlite = database_url.startswith("sqlite")

        engine_kwargs: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
        if not is_sqlite:
            engine_kwargs["pool_size"] = pool_size
            engine_kwargs["max_overflow"] = max_overflow
        if "postgresql" in database_url:
            engine_kwargs["connect_args"] = {
                "server_settings": {"jit": "off"},
                "command_timeout": 60,
                "timeout": 30,
            }

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        if is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        # Create session factory
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Don't expire objects after commit
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional database session.

        This is a context manager that:
        - Creates a new session
        - Commits on successful exit
        - Rolls back on exception
        - Always closes the session

        Yields:
            AsyncSession: Database session for operations
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create all tables defined in the models.

        Warning: This should only be used for development/testing.
        Production should use Alembic migrations.
        """
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables defined in the models.

        Warning: This will delete all data! Only use for testing.
        """
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Close all database connections.

        Should be called when shutting down the application.
        """
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise
        """
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
                return True
        except Exception:
            return False


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Turn on FK enforcement (SQLite leaves it off per connection)."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
