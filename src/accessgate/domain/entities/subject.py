"""Subject entity - the identity an access decision is made for."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Subject:
    """Acting identity. A guest has no user key and is not persisted."""

    user_key: str | None
    persisted: bool = False
    groups: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def guest(cls) -> "Subject":
        """A user who isn't logged in."""
        return cls(user_key=None)

    @classmethod
    def from_identity(cls, identity: Any) -> "Subject":
        """Adapt a caller-supplied user object.

        Reads ``user_key`` and, when present, ``groups`` and either
        ``persisted`` or ``new_record`` (inverted).
        """
        if isinstance(identity, Subject):
            return identity
        if hasattr(identity, "persisted"):
            persisted = bool(identity.persisted)
        else:
            persisted = not getattr(identity, "new_record", True)
        groups = getattr(identity, "groups", None) or ()
        if isinstance(groups, str):
            groups = [groups]
        return cls(
            user_key=getattr(identity, "user_key", None),
            persisted=persisted,
            groups=frozenset(groups),
        )

    @property
    def is_guest(self) -> bool:
        return self.user_key is None and not self.persisted
