"""Database Session Manager — process-wide async pool, one session per request.

Invariants:
    - Every session auto-rolls-back on store exception (no partial commits leak)
    - Every acquired session is closed exactly once, on every exit path
    - A failing close() is logged and swallowed; it never replaces the response
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - Sessions are never shared across requests

Design Decisions:
    - Singleton db_manager initialized on startup and disposed on shutdown by the
      FastAPI lifespan (init_db / close_db)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Routes receive the manager (not a session) so unknown paths never touch the pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from postboard.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the engine/pool and hands out request-scoped sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._bind(engine)

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an existing engine (test fixtures, scripts)."""
        manager = cls.__new__(cls)
        manager._bind(engine)
        return manager

    def _bind(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception and guaranteed release."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e
        finally:
            await self._release(session)

    async def _release(self, session: AsyncSession) -> None:
        try:
            await session.close()
        except Exception as e:
            logger.error(f"Failed to release DB session: {e}", exc_info=True)

    async def dispose(self) -> None:
        """Drain and close every pooled connection."""
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is None:
        return
    await db_manager.dispose()
    db_manager = None


def get_session_provider() -> DatabaseSessionManager:
    """FastAPI dependency for the session provider."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager
