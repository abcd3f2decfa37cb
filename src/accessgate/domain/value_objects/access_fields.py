"""Document field names holding the actor lists of each tier."""

from dataclasses import dataclass

from accessgate.domain.value_objects.access_tier import AccessTier


@dataclass(frozen=True)
class TierFields:
    """User and group field names for one tier."""

    user_field: str
    group_field: str


@dataclass(frozen=True)
class AccessFieldConfig:
    """Tier to field-name mapping used to locate actor lists in a document."""

    discover: TierFields
    read: TierFields
    download: TierFields

    def for_tier(self, tier: AccessTier) -> TierFields:
        """Field names for tier."""
        return {
            AccessTier.DISCOVER: self.discover,
            AccessTier.READ: self.read,
            AccessTier.DOWNLOAD: self.download,
        }[AccessTier(tier)]

    @classmethod
    def default(cls) -> "AccessFieldConfig":
        """Field names used by a stock search index."""
        return cls(
            discover=TierFields("discover_access_person_ssim", "discover_access_group_ssim"),
            read=TierFields("read_access_person_ssim", "read_access_group_ssim"),
            download=TierFields("download_access_person_ssim", "download_access_group_ssim"),
        )
