"""Discovery filter - selects the documents a subject may discover."""

from collections.abc import Iterable, Set
from dataclasses import dataclass

from accessgate.domain.entities import PermissionsDocument
from accessgate.domain.value_objects.access_fields import AccessFieldConfig
from accessgate.domain.value_objects.access_tier import AccessTier


@dataclass(frozen=True)
class DiscoveryFilter:
    """Disjunction of (field, values) clauses.

    A document passes when any clause's field holds at least one of its values.
    """

    clauses: tuple[tuple[str, tuple[str, ...]], ...]

    @classmethod
    def build(
        cls,
        fields: AccessFieldConfig,
        tiers: Iterable[AccessTier],
        user_groups: Set[str],
        user_key: str | None,
    ) -> "DiscoveryFilter":
        """One group clause per tier, plus one user clause per tier when user_key is set."""
        groups = tuple(sorted(user_groups))
        clauses: list[tuple[str, tuple[str, ...]]] = []
        for tier in tiers:
            tier_fields = fields.for_tier(tier)
            if groups:
                clauses.append((tier_fields.group_field, groups))
            if user_key is not None:
                clauses.append((tier_fields.user_field, (user_key,)))
        return cls(tuple(clauses))

    def matches(self, document: PermissionsDocument) -> bool:
        return any(
            not set(values).isdisjoint(document.values_for(field))
            for field, values in self.clauses
        )
