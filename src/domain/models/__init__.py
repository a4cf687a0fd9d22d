"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .enums import ProductSort
from .products import (
    DEFAULT_PAGE_SIZE,
    INT32_MAX,
    INT32_MIN,
    MAX_PAGE_SIZE,
    Product,
    ProductPayload,
    ProductSpecParams,
)

__all__ = [
    # enums
    "ProductSort",
    # products
    "DEFAULT_PAGE_SIZE",
    "INT32_MAX",
    "INT32_MIN",
    "MAX_PAGE_SIZE",
    "Product",
    "ProductPayload",
    "ProductSpecParams",
]
