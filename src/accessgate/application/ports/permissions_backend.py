"""Permissions backend port - resolves a resource id to its permissions document."""

from typing import Protocol

from accessgate.domain.entities import PermissionsDocument


class PermissionsBackend(Protocol):
    """Port for looking up permissions documents.

    Returns None when the id is unknown. Failures raise BackendFailure.
    Must be safe to call repeatedly for the same id.
    """

    async def fetch_permissions(self, resource_id: str) -> PermissionsDocument | None: ...
