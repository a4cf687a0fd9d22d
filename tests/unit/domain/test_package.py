"""Tests for src/domain/models/__init__.py — package exports."""

from src.domain.models import __all__ as domain_all
from src.domain.models import Product, ProductPayload, ProductSort, ProductSpecParams


def test_domain_models_exports_8_names():
    assert len(domain_all) == 8


def test_product_sort_importable_from_package():
    assert ProductSort.NAME == "name"


def test_models_importable_from_package():
    assert Product.__name__ == "Product"
    assert ProductPayload.__name__ == "ProductPayload"
    assert ProductSpecParams.__name__ == "ProductSpecParams"
