"""Access tiers - the three recognized capabilities."""

from enum import StrEnum


class AccessTier(StrEnum):
    """Capabilities that can be granted on a document."""

    DISCOVER = "discover"
    READ = "read"
    DOWNLOAD = "download"
