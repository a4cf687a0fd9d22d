"""Generic repository base interface.

Repository[T] is the root abstraction for data access in this domain layer.
The concrete implementation lives in src/infrastructure/persistence/ and is
wired at the application boundary via dependency injection.

Design notes:
  - All query methods are async to accommodate async database drivers
    (asyncpg / SQLAlchemy async).
  - T is an entity with an integer identity; one implementation serves
    every entity type.
  - add(), update() and remove() only stage changes in the current unit of
    work.  Nothing reaches the store until save_changes() is awaited.
  - Filtering, ordering, paging and projection are expressed as a
    Specification rather than as per-entity method parameters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from src.domain.specifications import Specification

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract unit-of-work repository for one entity type."""

    @abstractmethod
    async def get_by_id(self, id: int) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def list_all(self) -> list[T]:
        """Return every entity, unpaged."""

    @abstractmethod
    async def get_entity_with_spec(self, spec: Specification[T]) -> T | None:
        """Return the first entity matching spec, or None."""

    @abstractmethod
    async def list_with_spec(self, spec: Specification[T]) -> list[Any]:
        """Return all matches for spec: entities, or scalars for a projection."""

    @abstractmethod
    async def count_with_spec(self, spec: Specification[T]) -> int:
        """Return how many entities satisfy spec's criteria (paging ignored)."""

    @abstractmethod
    def add(self, entity: T) -> None:
        """Stage a new entity for insertion."""

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Stage a full replace of the stored entity sharing entity's id."""

    @abstractmethod
    async def remove(self, entity: T) -> None:
        """Stage deletion of a previously loaded entity."""

    @abstractmethod
    async def exists(self, id: int) -> bool:
        """Return True when a committed entity with this id exists."""

    @abstractmethod
    async def save_changes(self) -> bool:
        """Commit staged changes; return True iff at least one row was affected."""
