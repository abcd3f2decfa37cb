"""Discovery backend port - lists the resources a filter admits."""

from typing import Protocol

from accessgate.domain.value_objects import DiscoveryFilter


class DiscoveryBackend(Protocol):
    """Port for listing discoverable resource ids, ordered by id.

    An empty filter admits nothing. Failures raise BackendFailure.
    """

    async def discoverable_ids(self, discovery: DiscoveryFilter, limit: int = 100) -> list[str]: ...
