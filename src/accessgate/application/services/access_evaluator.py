"""Tiered access evaluation.

A tier is granted when the subject's key is among the tier's users or one
of its groups is among the tier's groups. Under the legacy union, which is
still the default, a broader tier also admits the actors of the more
privileged tiers:

    download -> download
    read     -> read | download
    discover -> discover | read | download

With ``legacy_tier_union=False`` each tier consults only its own fields.
"""

import logging
from collections.abc import Set

from accessgate.application.services.permissions_resolver import PermissionsResolver
from accessgate.domain.entities import Subject
from accessgate.domain.value_objects import AccessTier

logger = logging.getLogger(__name__)

UNION_TIERS: dict[AccessTier, tuple[AccessTier, ...]] = {
    AccessTier.DISCOVER: (AccessTier.DISCOVER, AccessTier.READ, AccessTier.DOWNLOAD),
    AccessTier.READ: (AccessTier.READ, AccessTier.DOWNLOAD),
    AccessTier.DOWNLOAD: (AccessTier.DOWNLOAD,),
}


class AccessEvaluator:
    """Decides tier membership of a subject on a resource."""

    def __init__(self, resolver: PermissionsResolver, legacy_tier_union: bool = True) -> None:
        self._resolver = resolver
        self._legacy_tier_union = legacy_tier_union

    @property
    def legacy_tier_union(self) -> bool:
        return self._legacy_tier_union

    def consulted_tiers(self, tier: AccessTier) -> tuple[AccessTier, ...]:
        """Tiers whose actor lists count towards tier."""
        tier = AccessTier(tier)
        if self._legacy_tier_union:
            return UNION_TIERS[tier]
        return (tier,)

    async def tier_users(self, resource_id: str, tier: AccessTier) -> set[str]:
        """Users effectively holding tier on resource_id."""
        users: set[str] = set()
        for consulted in self.consulted_tiers(tier):
            users |= await self._resolver.users_with_access(resource_id, consulted)
        return users

    async def tier_groups(self, resource_id: str, tier: AccessTier) -> set[str]:
        """Groups effectively holding tier on resource_id."""
        groups: set[str] = set()
        for consulted in self.consulted_tiers(tier):
            groups |= await self._resolver.groups_with_access(resource_id, consulted)
        return groups

    async def test_access(
        self,
        resource_id: str,
        tier: AccessTier,
        subject: Subject,
        user_groups: Set[str],
    ) -> bool:
        """True if subject, a member of user_groups, holds tier on resource_id."""
        logger.debug(
            "Checking %s permissions on %s for user %s with groups %s",
            tier,
            resource_id,
            subject.user_key,
            sorted(user_groups),
        )
        if subject.user_key is not None and subject.user_key in await self.tier_users(
            resource_id, tier
        ):
            return True
        return bool(await self.tier_groups(resource_id, tier) & user_groups)
