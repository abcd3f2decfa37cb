"""Application ports - interfaces for external adapters."""

from accessgate.application.ports.discovery_backend import DiscoveryBackend
from accessgate.application.ports.identity_source import IdentitySource
from accessgate.application.ports.permissions_backend import PermissionsBackend

__all__ = [
    "DiscoveryBackend",
    "IdentitySource",
    "PermissionsBackend",
]
