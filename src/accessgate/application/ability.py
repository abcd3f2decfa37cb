"""Ability - per-session access decisions for one subject.

An Ability is built once per request. On construction it runs an ordered
list of rule setups, each registering granting rules through ``grant``.
Downstream code adds its own rules by appending to the list::

    Ability(user, backend=backend, setups=[*DEFAULT_ABILITY_LOGIC, setup_my_permissions])

The Ability owns a permissions cache and the memoized group set of its
subject for its whole lifetime.
"""

import logging
import warnings
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from accessgate.application.ports import PermissionsBackend
from accessgate.application.services import (
    UNION_TIERS,
    AccessEvaluator,
    PermissionsCache,
    PermissionsResolver,
    derive_user_groups,
)
from accessgate.domain.entities import PermissionsDocument, Subject
from accessgate.domain.value_objects import AccessFieldConfig, AccessTier, DiscoveryFilter

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], Awaitable[bool]]
RuleSetup = Callable[["Ability"], None]


@dataclass(frozen=True)
class Rule:
    """Grants capability on targets of target_type when predicate holds."""

    capability: str
    target_type: type
    predicate: Predicate

    def matches(self, target: Any) -> bool:
        return isinstance(target, self.target_type)


def _grant_tier(ability: "Ability", tier: AccessTier) -> None:
    async def by_id(resource_id: str) -> bool:
        return await ability.test_access(resource_id, tier)

    async def by_document(document: PermissionsDocument) -> bool:
        ability.cache.put(document.id, document)
        return await ability.test_access(document.id, tier)

    ability.grant(tier, str, by_id)
    ability.grant(tier, PermissionsDocument, by_document)


def discover_permissions(ability: "Ability") -> None:
    _grant_tier(ability, AccessTier.DISCOVER)


def read_permissions(ability: "Ability") -> None:
    # A string target is taken to be a document id; loading the object itself may be slow.
    _grant_tier(ability, AccessTier.READ)


def download_permissions(ability: "Ability") -> None:
    _grant_tier(ability, AccessTier.DOWNLOAD)


DEFAULT_ABILITY_LOGIC: tuple[RuleSetup, ...] = (
    discover_permissions,
    read_permissions,
    download_permissions,
)


def _deprecated(message: str) -> None:
    warnings.warn(message, DeprecationWarning, stacklevel=3)


class Ability:
    """Access decisions for one subject during one session."""

    def __init__(
        self,
        user: Any = None,
        options: Mapping[str, Any] | None = None,
        *,
        backend: PermissionsBackend,
        fields: AccessFieldConfig | None = None,
        setups: Sequence[RuleSetup] = DEFAULT_ABILITY_LOGIC,
        legacy_tier_union: bool = True,
    ) -> None:
        self._current_user = Subject.guest() if user is None else Subject.from_identity(user)
        self._options = dict(options or {})
        self._cache = PermissionsCache()
        self._fields = fields or AccessFieldConfig.default()
        self._resolver = PermissionsResolver(backend, self._cache, self._fields)
        self._evaluator = AccessEvaluator(self._resolver, legacy_tier_union)
        self._rules: dict[str, list[Rule]] = {}
        self._grant_permissions(setups)

    def _grant_permissions(self, setups: Sequence[RuleSetup]) -> None:
        for setup in setups:
            logger.debug("Applying rule setup %s", getattr(setup, "__name__", setup))
            setup(self)

    @property
    def current_user(self) -> Subject:
        return self._current_user

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    @property
    def cache(self) -> PermissionsCache:
        return self._cache

    @cached_property
    def user_groups(self) -> frozenset[str]:
        """Groups of the current user, derived on first access."""
        groups = derive_user_groups(self._current_user)
        logger.debug("User groups are %s", sorted(groups))
        return groups

    # --- rules ---

    def grant(self, capability: str, target_type: type, predicate: Predicate) -> None:
        """Register a rule granting capability on targets of target_type."""
        key = str(capability)
        self._rules.setdefault(key, []).append(Rule(key, target_type, predicate))

    async def can(self, capability: str, target: Any) -> bool:
        """True if any rule registered for capability grants it on target."""
        for rule in self._rules.get(str(capability), []):
            if rule.matches(target) and await rule.predicate(target):
                return True
        return False

    async def cannot(self, capability: str, target: Any) -> bool:
        return not await self.can(capability, target)

    # --- queries ---

    async def permissions_doc(self, resource_id: str) -> PermissionsDocument | None:
        return await self._resolver.permissions_doc(resource_id)

    async def users_with_access(self, resource_id: str, tier: AccessTier) -> set[str]:
        """Users named in tier's own field only."""
        return await self._resolver.users_with_access(resource_id, tier)

    async def groups_with_access(self, resource_id: str, tier: AccessTier) -> set[str]:
        """Groups named in tier's own field only."""
        return await self._resolver.groups_with_access(resource_id, tier)

    async def tier_users(self, resource_id: str, tier: AccessTier) -> set[str]:
        """Users that hold tier, including more privileged tiers under the legacy union."""
        return await self._evaluator.tier_users(resource_id, tier)

    async def tier_groups(self, resource_id: str, tier: AccessTier) -> set[str]:
        """Groups that hold tier, including more privileged tiers under the legacy union."""
        return await self._evaluator.tier_groups(resource_id, tier)

    async def test_access(self, resource_id: str, tier: AccessTier) -> bool:
        return await self._evaluator.test_access(
            resource_id, tier, self._current_user, self.user_groups
        )

    def discovery_filter(self) -> DiscoveryFilter:
        """Clauses selecting every document the current user may discover."""
        return DiscoveryFilter.build(
            self._fields,
            self._evaluator.consulted_tiers(AccessTier.DISCOVER),
            self.user_groups,
            self._current_user.user_key,
        )

    # --- legacy per-tier API ---

    async def test_discover(self, resource_id: str) -> bool:
        _deprecated("Ability.test_discover(id) is deprecated; use test_access(id, 'discover') instead")
        return await self.test_access(resource_id, AccessTier.DISCOVER)

    async def test_read(self, resource_id: str) -> bool:
        _deprecated("Ability.test_read(id) is deprecated; use test_access(id, 'read') instead")
        return await self.test_access(resource_id, AccessTier.READ)

    async def test_download(self, resource_id: str) -> bool:
        _deprecated("Ability.test_download(id) is deprecated; use test_access(id, 'download') instead")
        return await self.test_access(resource_id, AccessTier.DOWNLOAD)

    async def discover_groups(self, resource_id: str) -> set[str]:
        _deprecated(
            "In a future release Ability.discover_groups(id) will no longer include "
            "groups with only read or download access"
        )
        return await self._union_groups(resource_id, AccessTier.DISCOVER)

    async def discover_users(self, resource_id: str) -> set[str]:
        _deprecated(
            "In a future release Ability.discover_users(id) will no longer include "
            "users with only read or download access"
        )
        return await self._union_users(resource_id, AccessTier.DISCOVER)

    async def read_groups(self, resource_id: str) -> set[str]:
        _deprecated(
            "In a future release Ability.read_groups(id) will no longer include "
            "groups with only download access"
        )
        return await self._union_groups(resource_id, AccessTier.READ)

    async def read_users(self, resource_id: str) -> set[str]:
        _deprecated(
            "In a future release Ability.read_users(id) will no longer include "
            "users with only download access"
        )
        return await self._union_users(resource_id, AccessTier.READ)

    async def download_groups(self, resource_id: str) -> set[str]:
        return await self.groups_with_access(resource_id, AccessTier.DOWNLOAD)

    async def download_users(self, resource_id: str) -> set[str]:
        return await self.users_with_access(resource_id, AccessTier.DOWNLOAD)

    async def _union_users(self, resource_id: str, tier: AccessTier) -> set[str]:
        # Legacy names keep the union regardless of legacy_tier_union.
        users: set[str] = set()
        for consulted in UNION_TIERS[tier]:
            users |= await self.users_with_access(resource_id, consulted)
        return users

    async def _union_groups(self, resource_id: str, tier: AccessTier) -> set[str]:
        groups: set[str] = set()
        for consulted in UNION_TIERS[tier]:
            groups |= await self.groups_with_access(resource_id, consulted)
        return groups
