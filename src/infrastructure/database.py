"""Async SQLAlchemy engine, session factory, and FastAPI dependency."""

from collections.abc import AsyncGenerator

from sqlalchemy import Integer
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.config import settings

engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


# Bounds of the 32-bit INTEGER identity column.
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


class BaseEntity(Base):
    """Abstract base for entities identified by a store-assigned integer key.

    The generic repository is constrained to subclasses of this type. Keys
    outside MIN_ID..MAX_ID cannot be stored, so lookups treat them as absent.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields one unit-of-work session per request.

    Nothing is committed implicitly: callers persist staged changes through
    the repository's save_changes(); anything left uncommitted is rolled back
    when the session closes.
    """
    async with AsyncSessionLocal() as session:
        yield session
