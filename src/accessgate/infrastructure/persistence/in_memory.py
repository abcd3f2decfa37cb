"""In-memory permissions backend."""

from collections.abc import Mapping
from typing import Any

from accessgate.domain.entities import PermissionsDocument
from accessgate.domain.value_objects import DiscoveryFilter


class InMemoryPermissionsBackend:
    """Permissions documents held in a dict, keyed by resource id."""

    def __init__(self, documents: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._documents: dict[str, PermissionsDocument] = {}
        for resource_id, fields in (documents or {}).items():
            self.add(resource_id, fields)

    def add(self, resource_id: str, fields: Mapping[str, Any]) -> PermissionsDocument:
        document = PermissionsDocument(resource_id, fields)
        self._documents[resource_id] = document
        return document

    def remove(self, resource_id: str) -> None:
        self._documents.pop(resource_id, None)

    async def fetch_permissions(self, resource_id: str) -> PermissionsDocument | None:
        return self._documents.get(resource_id)

    async def discoverable_ids(self, discovery: DiscoveryFilter, limit: int = 100) -> list[str]:
        ids = sorted(rid for rid, doc in self._documents.items() if discovery.matches(doc))
        return ids[:limit]
