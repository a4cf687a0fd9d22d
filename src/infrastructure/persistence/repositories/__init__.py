"""Concrete SQLAlchemy repository implementations.

Exports the generic SqlRepository and the get_repositories() factory function
for wiring at the application boundary (FastAPI dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.models.catalog import Product

from .generic import SqlRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    products: SqlRepository[Product]


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a FastAPI dependency:

        async def handler(
            session: AsyncSession = Depends(get_session),
        ) -> ...:
            repos = get_repositories(session)
            product = await repos.products.get_by_id(product_id)
    """
    return Repositories(
        products=SqlRepository(session, Product),
    )


__all__ = [
    "SqlRepository",
    "Repositories",
    "get_repositories",
]
