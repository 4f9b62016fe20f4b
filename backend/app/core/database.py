"""Database engine and session management"""

import functools
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from backend.app.core.config import settings
from backend.app.core.exceptions import StorageException
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def create_engine(database_url: str = settings.DATABASE_URL, **kwargs) -> AsyncEngine:
    """
    Create an async engine for the given database URL

    SQLite connections get foreign key enforcement switched on so that
    ON DELETE CASCADE behaves the same way it does on PostgreSQL.

    Args:
        database_url: SQLAlchemy database URL
        **kwargs: Extra engine options

    Returns:
        Configured async engine
    """
    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url, echo=settings.DATABASE_ECHO, **kwargs)

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_async_engine(
        database_url,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_pre_ping=True,
        **kwargs
    )


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Create a session factory bound to an engine"""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = create_engine()
AsyncSessionLocal = create_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def storage_operation(operation: str):
    """
    Decorate a repository coroutine so driver failures surface as StorageException

    Integrity errors are left alone so callers can report constraint
    violations distinctly.

    Args:
        operation: Name of the operation, used in the error message
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except IntegrityError:
                raise
            except SQLAlchemyError as e:
                logger.error(f"Storage failure during {operation}: {str(e)}", exc_info=True)
                raise StorageException(operation, str(e)) from e
        return wrapper
    return decorator
