"""Domain value objects."""

from accessgate.domain.value_objects.access_fields import AccessFieldConfig, TierFields
from accessgate.domain.value_objects.access_tier import AccessTier
from accessgate.domain.value_objects.discovery_filter import DiscoveryFilter

__all__ = [
    "AccessFieldConfig",
    "AccessTier",
    "DiscoveryFilter",
    "TierFields",
]
