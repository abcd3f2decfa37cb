"""Domain entities."""

from accessgate.domain.entities.permissions_document import PermissionsDocument
from accessgate.domain.entities.subject import Subject

__all__ = [
    "PermissionsDocument",
    "Subject",
]
