"""Query specification descriptor.

A Specification describes the shape of a query over entities of type T:
which rows (criteria), which relations to load eagerly (includes), in what
order, which page, and optionally a single column to project instead of
whole entities.  It carries no behaviour of its own; the persistence layer
turns it into a statement with a single evaluation function.

criteria, order expressions, includes and selector are ORM expressions
supplied by the persistence layer; this module treats them as opaque.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Specification(Generic[T]):
    """Immutable description of a query shape over T.

    At most one of order_by / order_by_descending is set.  skip and take are
    only honoured when is_paging_enabled is True.  When selector is set the
    query yields scalar values instead of entities, de-duplicated when
    is_distinct is True.
    """

    criteria: Any = None
    includes: tuple[Any, ...] = ()
    order_by: Any = None
    order_by_descending: Any = None
    skip: int = 0
    take: int = 0
    is_paging_enabled: bool = False
    selector: Any = None
    is_distinct: bool = False

    def __post_init__(self) -> None:
        if self.order_by is not None and self.order_by_descending is not None:
            raise ValueError("order_by and order_by_descending are mutually exclusive")
        if self.is_paging_enabled and (self.skip < 0 or self.take < 1):
            raise ValueError(f"Invalid paging: skip={self.skip}, take={self.take}")

    @classmethod
    def build(
        cls,
        criteria: Any = None,
        *,
        includes: tuple[Any, ...] = (),
        order_by: Any = None,
        order_by_descending: Any = None,
        page: tuple[int, int] | None = None,
        selector: Any = None,
        distinct: bool = False,
    ) -> Specification[T]:
        """Named constructor; page is a (skip, take) pair that enables paging."""
        skip, take = page if page is not None else (0, 0)
        return cls(
            criteria=criteria,
            includes=tuple(includes),
            order_by=order_by,
            order_by_descending=order_by_descending,
            skip=skip,
            take=take,
            is_paging_enabled=page is not None,
            selector=selector,
            is_distinct=distinct,
        )

    @property
    def is_projection(self) -> bool:
        return self.selector is not None
