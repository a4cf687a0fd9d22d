"""Catalog ORM models: products."""

from __future__ import annotations

from sqlalchemy import Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import BaseEntity


class Product(BaseEntity):
    """A sellable catalog item.

    type and brand are free-text tags; the distinct values across all rows
    make up the brand and type listings. Non-emptiness of the text columns
    and price > 0 are enforced at the API boundary.
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Numeric(18, 2, asdecimal=False), nullable=False)
    picture_url: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    brand: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    quantity_in_stock: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
