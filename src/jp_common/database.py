"""Async engine, session factory and the per-request session dependency.

One engine per process. The pool is sized from settings and pre-pinged, so
a pooled connection the server has closed is replaced before a ledger write
uses it.
"""

from collections.abc import AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from config.settings import Settings, settings


class Base(DeclarativeBase):
    """Declarative base for the venue and payout-rule mappings."""


def build_engine(cfg: Settings) -> AsyncEngine:
    return create_async_engine(
        cfg.DATABASE_URL,
        echo=cfg.DEBUG,
        pool_size=cfg.DB_POOL_SIZE,
        max_overflow=cfg.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


engine: AsyncEngine = build_engine(settings)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: one session per request, closed afterwards.

    Writers open `async with db.begin()` themselves; reads run in the
    session's implicit transaction.
    """
    async with async_session_factory() as session:
        yield session


async def ping_database() -> None:
    """Raise if the database cannot answer a trivial query."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
