"""Permissions document - access-control metadata of one resource."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any


class PermissionsDocument(Mapping[str, Any]):
    """Read-only mapping of field name to value, identified by ``id``."""

    def __init__(self, id: str, fields: Mapping[str, Any] | None = None) -> None:
        self._id = id
        self._fields = MappingProxyType(dict(fields or {}))

    @property
    def id(self) -> str:
        return self._id

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"PermissionsDocument(id={self._id!r}, fields={dict(self._fields)!r})"

    def values_for(self, field_name: str) -> list[str]:
        """Field value as a list: absent is empty, a scalar becomes one item."""
        value = self._fields.get(field_name)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)
