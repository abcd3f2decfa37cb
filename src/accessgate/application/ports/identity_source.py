"""Identity source port - turns a bearer token into a subject."""

from typing import Protocol

from accessgate.domain.entities import Subject


class IdentitySource(Protocol):
    """Port for resolving the acting subject of a request."""

    def subject_for_token(self, token: str) -> Subject | None: ...
