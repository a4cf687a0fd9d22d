"""Tests for src/domain/repositories/base.py."""

import pytest

from src.domain.repositories.base import Repository


def test_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Repository()  # type: ignore[abstract]


def test_repository_concrete_subclass_must_implement_all_methods():
    class _Partial(Repository):
        async def get_by_id(self, id): return None
        async def list_all(self): return []
        # missing the specification, staging and commit methods

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_repository_full_concrete_subclass_instantiates():
    class _Full(Repository):
        async def get_by_id(self, id): return None
        async def list_all(self): return []
        async def get_entity_with_spec(self, spec): return None
        async def list_with_spec(self, spec): return []
        async def count_with_spec(self, spec): return 0
        def add(self, entity): return None
        async def update(self, entity): return None
        async def remove(self, entity): return None
        async def exists(self, id): return False
        async def save_changes(self): return False

    assert _Full() is not None


def test_repository_declares_save_changes_abstract():
    assert "save_changes" in Repository.__abstractmethods__
