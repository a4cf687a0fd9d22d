"""Product domain models.

These are pure domain objects — no ORM or persistence concerns. On the wire
every field uses its camelCase alias (pictureUrl, quantityInStock); requests
may use either the alias or the Python field name.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import ProductSort

MAX_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 6
INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

_CENT = Decimal("0.01")


class Product(BaseModel):
    """A persisted catalog product, as returned to API callers."""

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    name: str
    description: str
    price: float
    picture_url: str
    type: str
    brand: str
    quantity_in_stock: int = 0


class ProductPayload(BaseModel):
    """Request body for creating or replacing a product.

    Every field is optional at parse time so that an incomplete body reaches
    is_valid() and is rejected as a bad request rather than by the parser.
    id is ignored on create and must equal the path id on update. price is
    rounded half-up to cents, the precision the store keeps, before is_valid()
    checks it is positive.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = 0
    name: str | None = None
    description: str | None = None
    # NUMERIC(18, 2) holds at most 16 integer digits.
    price: float | None = Field(default=None, allow_inf_nan=False, lt=10**16)
    picture_url: str | None = None
    type: str | None = None
    brand: str | None = None
    quantity_in_stock: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)

    @field_validator("price", mode="after")
    @classmethod
    def _round_to_cents(cls, value: float | None) -> float | None:
        if value is None:
            return None
        return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))

    def is_valid(self) -> bool:
        """Return True when every required text field is non-empty and price > 0."""
        return (
            bool(self.name)
            and bool(self.description)
            and bool(self.picture_url)
            and bool(self.type)
            and bool(self.brand)
            and self.price is not None
            and self.price > 0
        )


class ProductSpecParams(BaseModel):
    """Query parameters for the product listing.

    brands and types accept comma-separated strings ("Salomon,Atomic") and
    drop blank entries. page_size is clamped to MAX_PAGE_SIZE rather than
    rejected. search is trimmed and lower-cased; an empty term means no search.
    """

    model_config = ConfigDict(frozen=True)

    brands: list[str] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)
    sort: ProductSort = ProductSort.NAME
    page_index: int = Field(default=1, ge=1, le=INT32_MAX)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    search: str | None = None

    @field_validator("brands", "types", mode="before")
    @classmethod
    def _split_csv(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list):
            return [
                part.strip()
                for item in value
                for part in str(item).split(",")
                if part.strip()
            ]
        return value

    @field_validator("sort", mode="before")
    @classmethod
    def _parse_sort(cls, value: object) -> ProductSort:
        if isinstance(value, ProductSort):
            return value
        return ProductSort.parse(value if isinstance(value, str) else None)

    @field_validator("page_size", mode="after")
    @classmethod
    def _clamp_page_size(cls, value: int) -> int:
        return min(value, MAX_PAGE_SIZE)

    @field_validator("search", mode="before")
    @classmethod
    def _normalise_search(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    @property
    def skip(self) -> int:
        """Number of rows preceding the requested page."""
        return self.page_size * (self.page_index - 1)
