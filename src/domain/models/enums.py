"""Domain enumerations for the catalog.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (FastAPI / Pydantic default behaviour).
"""

from enum import Enum


class ProductSort(str, Enum):
    NAME = "name"
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"

    @classmethod
    def parse(cls, value: str | None) -> "ProductSort":
        """Map a raw sort query value to a member; unknown values sort by name."""
        try:
            return cls(value)
        except ValueError:
            return cls.NAME
