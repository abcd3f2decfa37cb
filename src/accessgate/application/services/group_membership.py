"""Group membership derivation for a subject."""

from accessgate.domain.entities import Subject

PUBLIC_GROUP = "public"
REGISTERED_GROUP = "registered"


def default_user_groups() -> list[str]:
    """Everyone is automatically a member of group 'public'."""
    return [PUBLIC_GROUP]


def derive_user_groups(subject: Subject) -> frozenset[str]:
    """Effective groups: public, the subject's own groups, and registered if persisted."""
    groups = set(default_user_groups())
    groups |= subject.groups
    if subject.persisted:
        groups.add(REGISTERED_GROUP)
    return frozenset(groups)
