"""Database Session Manager: async connection pool with automatic rollback and health checks.

Invariants:
    - One DatabaseSessionManager per process, built in the app lifespan and kept on app.state
    - Every session is closed on every exit path; rolled back first on exception
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - A failed connection fails the request, never the process

Design Decisions:
    - Manager injected through app.state instead of a module-level singleton:
      tests and the compact router binding share the same lookup
    - expire_on_commit=False: rows stay readable after commit in async context
    - Pool sizing only applied to server databases; SQLite uses SQLAlchemy's default pool
"""

import logging
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator, Iterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from users_api.core.errors import DatabaseError
from users_api.db.base import Base

logger = logging.getLogger(__name__)


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures inside the block as DatabaseError."""
    try:
        yield
    except IntegrityError as e:
        logger.error(f"DB integrity error: {e}", extra={"operation": operation})
        raise DatabaseError("Integrity constraint violated", operation) from e
    except OperationalError as e:
        logger.error(f"DB operational error: {e}", extra={"operation": operation})
        raise DatabaseError("Connection or operational error", operation) from e
    except DBAPIError as e:
        logger.error(f"DB driver error: {e}", extra={"operation": operation})
        raise DatabaseError("Database driver error", operation) from e
    except SQLAlchemyError as e:
        logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
        raise DatabaseError("Database operation failed", operation) from e


def _engine_options(
    database_url: str, pool_size: int, max_overflow: int,
) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine: AsyncEngine = create_async_engine(
            database_url, **_engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an existing engine (test fixtures, scripts)."""
        manager = cls.__new__(cls)
        manager.engine = engine
        manager._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )
        return manager

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            with translate_db_errors("session"):
                yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create the users table if missing (local runs; migrations live elsewhere)."""
        with translate_db_errors("create_tables"):
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """Return the manager built at startup."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
