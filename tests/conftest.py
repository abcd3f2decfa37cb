"""Pytest fixtures for accessgate tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from accessgate.application.ability import Ability
from accessgate.domain.entities import Subject
from accessgate.domain.value_objects import AccessFieldConfig

from fakes import DOCUMENTS, CountingPermissionsBackend


@pytest.fixture
def backend() -> CountingPermissionsBackend:
    """Counting backend seeded with DOCUMENTS."""
    return CountingPermissionsBackend(DOCUMENTS)


@pytest.fixture
def alice() -> Subject:
    return Subject(user_key="alice", persisted=True)


@pytest.fixture
def editor() -> Subject:
    return Subject(user_key="eve", persisted=True, groups=frozenset({"editors"}))


@pytest.fixture
def make_ability(backend: CountingPermissionsBackend) -> Callable[..., Ability]:
    """Build an Ability over the counting backend."""

    def _make(user: object = None, options: dict | None = None, **kwargs: object) -> Ability:
        kwargs.setdefault("fields", AccessFieldConfig.default())
        return Ability(user, options, backend=backend, **kwargs)

    return _make
