"""
Database engine and session bootstrap.

The async engine is created lazily from settings; tests point it elsewhere with
``configure_engine``.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from commerce_api.core.config import settings
from commerce_api.core.logging import get_logger

logger = get_logger(__name__)

_async_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_engine(url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    """(Re)create the async engine and session factory."""
    global _async_engine, _session_maker

    url = url or settings.get_database_url(async_mode=True)
    engine = create_async_engine(
        url,
        echo=settings.database_echo if echo is None else echo,
        future=True,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    _async_engine = engine
    _session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    logger.debug(f"Database engine configured for dialect {engine.dialect.name}")
    return engine


def get_async_engine() -> AsyncEngine:
    """Get or create async database engine."""
    if _async_engine is None:
        settings.validate_paths()
        return configure_engine()
    return _async_engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    if _session_maker is None:
        get_async_engine()
    assert _session_maker is not None
    return _session_maker


async def create_all() -> None:
    """Create all SQLModel tables in the configured database."""
    from commerce_api.data_access import models  # noqa: F401

    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def drop_all() -> None:
    from commerce_api.data_access import models  # noqa: F401

    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


async def dispose_engine() -> None:
    global _async_engine, _session_maker
    if _async_engine is not None:
        await _async_engine.dispose()
    _async_engine = None
    _session_maker = None

