"""Turns a Specification into a SQLAlchemy Select."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select
from sqlalchemy.orm import selectinload

from src.domain.specifications import Specification


def evaluate(statement: Select[Any], spec: Specification[Any]) -> Select[Any]:
    """Apply spec to a base entity statement such as select(Product).

    Order of application: criteria, includes, ordering, paging, projection.
    Criteria must precede paging so that offset/limit count matching rows
    only.  Includes are skipped for projections since no entity is loaded.
    """
    if spec.criteria is not None:
        statement = statement.where(spec.criteria)

    if not spec.is_projection:
        for relationship in spec.includes:
            statement = statement.options(selectinload(relationship))

    if spec.order_by is not None:
        statement = statement.order_by(spec.order_by)
    elif spec.order_by_descending is not None:
        statement = statement.order_by(spec.order_by_descending.desc())

    if spec.is_paging_enabled:
        statement = statement.offset(spec.skip).limit(spec.take)

    if spec.is_projection:
        statement = statement.with_only_columns(spec.selector)
        if spec.is_distinct:
            statement = statement.distinct()

    return statement
