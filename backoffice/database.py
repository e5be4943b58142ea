# backoffice/database.py
"""Async engine, session factory and declarative base."""

from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from backoffice.core.config import get_settings


def async_database_url(url: str) -> str:
    """Plain postgresql:// URLs are served through asyncpg"""
    if not url:
        raise ValueError("DATABASE_URL is not set in environment variables")
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def engine_options(url: str) -> dict:
    options = {"echo": False, "future": True}
    # SQLite (tests, local demos) keeps SQLAlchemy's default pool
    if url.startswith("postgresql"):
        options.update(pool_size=10, max_overflow=20, pool_timeout=30, pool_recycle=1800)
    return options


database_url = async_database_url(get_settings().DATABASE_URL)
engine = create_async_engine(database_url, **engine_options(database_url))

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


@asynccontextmanager
async def get_session() -> AsyncSession:
    """Session outside a request, closed on exit"""
    async with async_session() as session:
        yield session
