"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - map_store_error() is the single translation from SQLAlchemy exceptions to
      the core hierarchy: IntegrityError -> ConstraintViolationError, anything
      else -> StorageError
    - SQLite engines run with PRAGMA foreign_keys=ON so FK invariants hold

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - One session per request via get_db: the request is the unit of work
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from wiccapedia.core.errors import (
    ConstraintViolationError, ErrorContext, StorageError, WiccapediaError,
)

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE class 23 (integrity constraint violation)
_SQLSTATE_CONSTRAINTS = {
    "23502": "not_null",
    "23503": "foreign_key",
    "23505": "unique",
    "23514": "check",
}


def constraint_kind(exc: IntegrityError) -> str | None:
    """Classify an IntegrityError by SQLSTATE; SQLite has none, so fall back to its message."""
    sqlstate = getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)
    if sqlstate:
        return _SQLSTATE_CONSTRAINTS.get(sqlstate)
    message = str(exc.orig).lower()
    if "foreign key" in message:
        return "foreign_key"
    if "unique" in message:
        return "unique"
    if "not null" in message:
        return "not_null"
    return None


def map_store_error(
    exc: SQLAlchemyError, operation: str, entity: str | None = None,
) -> WiccapediaError:
    """Translate a SQLAlchemy failure into the core error hierarchy and log it."""
    context = ErrorContext(entity=entity)
    if isinstance(exc, IntegrityError):
        kind = constraint_kind(exc)
        logger.warning(
            f"{entity or 'Row'} {operation} rejected ({kind}): {exc.orig}",
            extra={"entity": entity, "operation": operation},
        )
        return ConstraintViolationError(
            f"{entity or 'Row'} violates a {kind or 'integrity'} constraint",
            constraint=kind, context=context,
        )
    logger.error(
        f"{entity or 'Database'} {operation} failed: {exc}",
        extra={"entity": entity, "operation": operation},
    )
    return StorageError(type(exc).__name__, operation, context=context)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 10, max_overflow: int = 5,
    ):
        if database_url.startswith("sqlite"):
            self.engine = create_async_engine(database_url)
            enable_sqlite_foreign_keys(self.engine)
        else:
            self.engine = create_async_engine(
                database_url,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise map_store_error(e, "session")
        finally:
            await session.close()

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


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db():
    global db_manager
    if db_manager:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
