"""Permissions resolver - cache-backed lookup of per-tier actor lists."""

import logging

from accessgate.application.ports import PermissionsBackend
from accessgate.application.services.permissions_cache import PermissionsCache
from accessgate.domain.entities import PermissionsDocument
from accessgate.domain.value_objects import AccessFieldConfig, AccessTier

logger = logging.getLogger(__name__)


class PermissionsResolver:
    """Resolves documents through the cache, falling back to the backend."""

    def __init__(
        self,
        backend: PermissionsBackend,
        cache: PermissionsCache,
        fields: AccessFieldConfig,
    ) -> None:
        self._backend = backend
        self._cache = cache
        self._fields = fields

    async def permissions_doc(self, resource_id: str) -> PermissionsDocument | None:
        """Document for resource_id, or None when the backend does not know it.

        Backend errors propagate unchanged.
        """
        doc = self._cache.get(resource_id)
        if doc is not None:
            return doc

        doc = await self._backend.fetch_permissions(resource_id)
        if doc is None:
            logger.debug("No permissions document for %s", resource_id)
            return None
        self._cache.put(resource_id, doc)
        return doc

    async def users_with_access(self, resource_id: str, tier: AccessTier) -> set[str]:
        """Users listed in the tier's own user field."""
        doc = await self.permissions_doc(resource_id)
        if doc is None:
            return set()
        users = set(doc.values_for(self._fields.for_tier(tier).user_field))
        logger.debug("users with %s access to %s: %s", tier, resource_id, sorted(users))
        return users

    async def groups_with_access(self, resource_id: str, tier: AccessTier) -> set[str]:
        """Groups listed in the tier's own group field."""
        doc = await self.permissions_doc(resource_id)
        if doc is None:
            return set()
        groups = set(doc.values_for(self._fields.for_tier(tier).group_field))
        logger.debug("groups with %s access to %s: %s", tier, resource_id, sorted(groups))
        return groups
