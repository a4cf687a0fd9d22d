"""Tests for the catalog specifications in specifications/products.py."""

from sqlalchemy import select

from src.domain.models.products import ProductSpecParams
from src.infrastructure.persistence.models.catalog import Product
from src.infrastructure.persistence.specifications import (
    brand_spec,
    evaluate,
    product_count_spec,
    product_spec,
    type_spec,
)


async def _names(session, spec):
    result = await session.execute(evaluate(select(Product), spec))
    return [p.name for p in result.scalars()]


# --- shape ---

def test_product_spec_without_filters_has_no_criteria():
    assert product_spec(ProductSpecParams()).criteria is None


def test_product_spec_pages_from_params():
    spec = product_spec(ProductSpecParams(page_index=2, page_size=4))
    assert (spec.skip, spec.take, spec.is_paging_enabled) == (4, 4, True)


def test_product_spec_defaults_to_name_ordering():
    spec = product_spec(ProductSpecParams())
    assert spec.order_by is not None
    assert spec.order_by_descending is None


def test_product_spec_price_desc_uses_descending_ordering():
    spec = product_spec(ProductSpecParams(sort="priceDesc"))
    assert spec.order_by is None
    assert spec.order_by_descending is not None


def test_count_spec_is_not_paged_or_ordered():
    spec = product_count_spec(ProductSpecParams(brands="Atomic", page_index=3))
    assert spec.is_paging_enabled is False
    assert spec.order_by is None
    assert spec.criteria is not None


def test_brand_and_type_specs_are_distinct_projections():
    for spec in (brand_spec(), type_spec()):
        assert spec.is_projection is True
        assert spec.is_distinct is True


# --- behaviour ---

async def test_default_listing_sorted_by_name(session, seeded):
    names = await _names(session, product_spec(ProductSpecParams(page_size=50)))
    assert names == sorted(names)
    assert len(names) == 5


async def test_brand_filter(session, seeded):
    names = await _names(session, product_spec(ProductSpecParams(brands="Atomic")))
    assert names == ["Atomic Hawx", "Atomic Redster"]


async def test_brand_and_type_filters_combine(session, seeded):
    params = ProductSpecParams(brands="Atomic,Salomon", types="Boots")
    names = await _names(session, product_spec(params))
    assert names == ["Atomic Hawx", "Salomon Shift"]


async def test_search_is_case_insensitive_substring(session, seeded):
    names = await _names(session, product_spec(ProductSpecParams(search="SHIFT")))
    assert names == ["Salomon Shift"]


async def test_search_treats_percent_literally(session, seeded):
    assert await _names(session, product_spec(ProductSpecParams(search="%"))) == []


async def test_price_ascending(session, seeded):
    names = await _names(session, product_spec(ProductSpecParams(sort="priceAsc", page_size=2)))
    assert names == ["Salomon Shift", "Atomic Hawx"]


async def test_price_descending(session, seeded):
    names = await _names(session, product_spec(ProductSpecParams(sort="priceDesc", page_size=1)))
    assert names == ["Rossignol Hero"]


async def test_second_page(session, seeded):
    params = ProductSpecParams(page_index=2, page_size=2)
    names = await _names(session, product_spec(params))
    assert names == ["Rossignol Hero", "Salomon S/Max"]


async def test_type_spec_lists_distinct_types(session, seeded):
    result = await session.execute(evaluate(select(Product), type_spec()))
    assert list(result.scalars()) == ["Boots", "Skis"]
