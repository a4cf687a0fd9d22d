"""Specification evaluation and the catalog's concrete specifications."""

from .evaluator import evaluate
from .products import brand_spec, product_count_spec, product_spec, type_spec

__all__ = [
    "evaluate",
    "product_spec",
    "product_count_spec",
    "brand_spec",
    "type_spec",
]
