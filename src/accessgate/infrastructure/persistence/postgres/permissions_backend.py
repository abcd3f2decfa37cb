"""PostgreSQL permissions backend - one JSONB document per resource."""

import logging

from psycopg import Error as PsycopgError
from psycopg import sql
from psycopg_pool import AsyncConnectionPool

from accessgate.domain.entities import PermissionsDocument
from accessgate.domain.exceptions import BackendFailure
from accessgate.domain.value_objects import DiscoveryFilter

logger = logging.getLogger(__name__)


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must call await pool.open()
    before use (e.g. via LifespanMiddleware in ASGI lifespan).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


class PostgresPermissionsBackend:
    """Reads permissions documents from ``<table>(id TEXT, fields JSONB)``."""

    def __init__(self, pool: AsyncConnectionPool, table: str = "resource_permissions") -> None:
        self._pool = pool
        self._table = sql.Identifier(table)
        self._query = sql.SQL("SELECT id, fields FROM {} WHERE id = %s").format(self._table)

    async def fetch_permissions(self, resource_id: str) -> PermissionsDocument | None:
        """Get permissions document by resource id."""
        try:
            async with self._pool.connection() as conn:
                cur = await conn.execute(self._query, (resource_id,))
                r = await cur.fetchone()
        except PsycopgError as exc:
            logger.warning("Permissions lookup for %s failed: %s", resource_id, exc)
            raise BackendFailure(
                f"Permissions lookup failed for {resource_id}", resource_id
            ) from exc
        if not r:
            return None
        return PermissionsDocument(r[0], r[1] or {})

    async def discoverable_ids(self, discovery: DiscoveryFilter, limit: int = 100) -> list[str]:
        """Ids of documents admitted by discovery, ordered by id.

        Each clause becomes `(fields -> field) ?| values`, which matches a
        string array holding any of the values as well as a bare string.
        """
        if not discovery.clauses:
            return []
        where = sql.SQL(" OR ").join(
            sql.SQL("(fields -> %s::text) ?| %s::text[]") for _ in discovery.clauses
        )
        query = sql.SQL("SELECT id FROM {} WHERE {} ORDER BY id LIMIT %s").format(
            self._table, where
        )
        params: list[object] = []
        for field_name, values in discovery.clauses:
            params.extend([field_name, list(values)])
        params.append(limit)
        try:
            async with self._pool.connection() as conn:
                cur = await conn.execute(query, params)
                rows = await cur.fetchall()
        except PsycopgError as exc:
            logger.warning("Discovery query failed: %s", exc)
            raise BackendFailure("Discovery query failed") from exc
        return [r[0] for r in rows]

    async def ping(self) -> bool:
        """True if the database answers."""
        try:
            async with self._pool.connection() as conn:
                await conn.execute("SELECT 1")
        except PsycopgError as exc:
            logger.warning("Database ping failed: %s", exc)
            return False
        return True
