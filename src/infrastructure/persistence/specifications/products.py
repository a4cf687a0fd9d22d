"""Catalog specifications over the Product ORM model."""

from __future__ import annotations

from sqlalchemy import and_, func

from src.domain.models.enums import ProductSort
from src.domain.models.products import ProductSpecParams
from src.domain.specifications import Specification
from src.infrastructure.persistence.models.catalog import Product


def _criteria(params: ProductSpecParams):
    clauses = []
    if params.search:
        clauses.append(func.lower(Product.name).contains(params.search, autoescape=True))
    if params.brands:
        clauses.append(Product.brand.in_(params.brands))
    if params.types:
        clauses.append(Product.type.in_(params.types))
    return and_(*clauses) if clauses else None


def product_spec(params: ProductSpecParams) -> Specification[Product]:
    """Filtered, sorted, paged product listing."""
    ordering = {}
    if params.sort is ProductSort.PRICE_ASC:
        ordering["order_by"] = Product.price
    elif params.sort is ProductSort.PRICE_DESC:
        ordering["order_by_descending"] = Product.price
    else:
        ordering["order_by"] = Product.name

    return Specification.build(
        _criteria(params),
        page=(params.skip, params.page_size),
        **ordering,
    )


def product_count_spec(params: ProductSpecParams) -> Specification[Product]:
    """Same filter as product_spec(); used to report the total match count."""
    return Specification.build(_criteria(params))


def brand_spec() -> Specification[Product]:
    """Distinct brand names, alphabetical."""
    return Specification.build(order_by=Product.brand, selector=Product.brand, distinct=True)


def type_spec() -> Specification[Product]:
    """Distinct product types, alphabetical."""
    return Specification.build(order_by=Product.type, selector=Product.type, distinct=True)
