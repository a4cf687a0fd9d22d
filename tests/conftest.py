"""Shared fixtures: an in-memory SQLite database and an HTTP client.

Every test gets a fresh schema.  StaticPool keeps the single in-memory
connection alive across sessions so separate sessions see the same data.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import src.infrastructure.persistence  # noqa: F401 — registers all mappers
from src.infrastructure.database import Base, get_session
from src.infrastructure.persistence.models.catalog import Product


def make_product(**overrides) -> Product:
    defaults = dict(
        name="Atomic Redster",
        description="Race carving ski",
        price=549.0,
        picture_url="images/products/redster.png",
        type="Skis",
        brand="Atomic",
        quantity_in_stock=10,
    )
    defaults.update(overrides)
    return Product(**defaults)


@pytest_asyncio.fixture()
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture()
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture()
async def seeded(session_factory):
    """Five products across three brands and two types; returns their ids."""
    rows = [
        make_product(name="Atomic Redster", brand="Atomic", type="Skis", price=549.0),
        make_product(name="Atomic Hawx", brand="Atomic", type="Boots", price=399.0),
        make_product(name="Salomon S/Max", brand="Salomon", type="Skis", price=499.0),
        make_product(name="Salomon Shift", brand="Salomon", type="Boots", price=299.0),
        make_product(name="Rossignol Hero", brand="Rossignol", type="Skis", price=649.0),
    ]
    async with session_factory() as s:
        s.add_all(rows)
        await s.commit()
    return [row.id for row in rows]


@pytest_asyncio.fixture()
async def client(session_factory):
    """HTTPX client against the app, each request with its own session."""
    from src.main import app

    async def _session_override():
        async with session_factory() as s:
            yield s

    app.dependency_overrides[get_session] = _session_override
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://testserver",
        ) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_session, None)


@pytest.fixture()
def product_factory():
    return make_product
