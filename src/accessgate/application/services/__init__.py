"""Permission evaluation services."""

from accessgate.application.services.access_evaluator import UNION_TIERS, AccessEvaluator
from accessgate.application.services.group_membership import (
    PUBLIC_GROUP,
    REGISTERED_GROUP,
    default_user_groups,
    derive_user_groups,
)
from accessgate.application.services.permissions_cache import PermissionsCache
from accessgate.application.services.permissions_resolver import PermissionsResolver

__all__ = [
    "UNION_TIERS",
    "AccessEvaluator",
    "PUBLIC_GROUP",
    "REGISTERED_GROUP",
    "PermissionsCache",
    "PermissionsResolver",
    "default_user_groups",
    "derive_user_groups",
]
