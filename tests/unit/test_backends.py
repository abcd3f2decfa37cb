"""Unit tests for permissions backends."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import psycopg
import pytest

from accessgate.domain.exceptions import BackendFailure
from accessgate.domain.value_objects import DiscoveryFilter
from accessgate.infrastructure.persistence.in_memory import InMemoryPermissionsBackend
from accessgate.infrastructure.persistence.postgres.permissions_backend import (
    PostgresPermissionsBackend,
)


def _pool(conn) -> MagicMock:
    @asynccontextmanager
    async def connection():
        yield conn

    pool = MagicMock()
    pool.connection = connection
    return pool


@pytest.mark.asyncio
async def test_in_memory_add_fetch_remove() -> None:
    backend = InMemoryPermissionsBackend({"doc-1": {"read_access_group_ssim": ["public"]}})

    doc = await backend.fetch_permissions("doc-1")
    assert doc is not None
    assert doc.id == "doc-1"
    assert doc.values_for("read_access_group_ssim") == ["public"]

    backend.remove("doc-1")
    assert await backend.fetch_permissions("doc-1") is None


@pytest.mark.asyncio
async def test_postgres_returns_document() -> None:
    cursor = AsyncMock()
    cursor.fetchone.return_value = ("doc-1", {"read_access_group_ssim": ["editors"]})
    conn = AsyncMock()
    conn.execute.return_value = cursor

    doc = await PostgresPermissionsBackend(_pool(conn)).fetch_permissions("doc-1")

    assert doc is not None
    assert doc.id == "doc-1"
    assert doc["read_access_group_ssim"] == ["editors"]
    assert conn.execute.await_args.args[1] == ("doc-1",)


@pytest.mark.asyncio
async def test_postgres_missing_row_is_none() -> None:
    cursor = AsyncMock()
    cursor.fetchone.return_value = None
    conn = AsyncMock()
    conn.execute.return_value = cursor

    assert await PostgresPermissionsBackend(_pool(conn)).fetch_permissions("missing") is None


@pytest.mark.asyncio
async def test_postgres_error_becomes_backend_failure() -> None:
    conn = AsyncMock()
    conn.execute.side_effect = psycopg.OperationalError("connection refused")

    with pytest.raises(BackendFailure) as info:
        await PostgresPermissionsBackend(_pool(conn)).fetch_permissions("doc-1")

    assert info.value.resource_id == "doc-1"
    assert isinstance(info.value.__cause__, psycopg.OperationalError)


@pytest.mark.asyncio
async def test_postgres_ping() -> None:
    conn = AsyncMock()
    assert await PostgresPermissionsBackend(_pool(conn)).ping() is True

    conn.execute.side_effect = psycopg.OperationalError("connection refused")
    assert await PostgresPermissionsBackend(_pool(conn)).ping() is False


@pytest.mark.asyncio
async def test_postgres_discoverable_ids_binds_each_clause() -> None:
    cursor = AsyncMock()
    cursor.fetchall.return_value = [("doc-2",), ("public-doc",)]
    conn = AsyncMock()
    conn.execute.return_value = cursor
    discovery = DiscoveryFilter(
        (
            ("read_access_group_ssim", ("public", "registered")),
            ("read_access_person_ssim", ("alice",)),
        )
    )

    ids = await PostgresPermissionsBackend(_pool(conn)).discoverable_ids(discovery, limit=10)

    assert ids == ["doc-2", "public-doc"]
    assert conn.execute.await_args.args[1] == [
        "read_access_group_ssim",
        ["public", "registered"],
        "read_access_person_ssim",
        ["alice"],
        10,
    ]


@pytest.mark.asyncio
async def test_postgres_empty_discovery_skips_query() -> None:
    conn = AsyncMock()

    assert await PostgresPermissionsBackend(_pool(conn)).discoverable_ids(DiscoveryFilter(())) == []
    conn.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_postgres_discovery_error_becomes_backend_failure() -> None:
    conn = AsyncMock()
    conn.execute.side_effect = psycopg.OperationalError("connection refused")
    discovery = DiscoveryFilter((("read_access_group_ssim", ("public",)),))

    with pytest.raises(BackendFailure):
        await PostgresPermissionsBackend(_pool(conn)).discoverable_ids(discovery)
