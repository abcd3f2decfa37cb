"""Per-session memo of resolved permissions documents."""

from accessgate.domain.entities import PermissionsDocument


class PermissionsCache:
    """Resource id to permissions document. No eviction; lives as long as its Ability."""

    def __init__(self) -> None:
        self._docs: dict[str, PermissionsDocument] = {}

    def get(self, resource_id: str) -> PermissionsDocument | None:
        return self._docs.get(resource_id)

    def put(self, resource_id: str, document: PermissionsDocument) -> None:
        self._docs[resource_id] = document

    def clear(self) -> None:
        self._docs.clear()

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._docs

    def __len__(self) -> int:
        return len(self._docs)
