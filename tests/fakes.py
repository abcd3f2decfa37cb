"""In-memory fakes shared by the test suite."""

from accessgate.domain.entities import PermissionsDocument, Subject
from accessgate.domain.exceptions import BackendFailure
from accessgate.infrastructure.persistence.in_memory import InMemoryPermissionsBackend

DOCUMENTS = {
    "doc-1": {
        "read_access_group_ssim": ["editors"],
        "download_access_group_ssim": [],
    },
    "doc-2": {
        "discover_access_person_ssim": [],
        "read_access_person_ssim": [],
        "download_access_person_ssim": ["alice"],
    },
    "public-doc": {"read_access_group_ssim": ["public"]},
    "registered-doc": {"discover_access_group_ssim": ["registered"]},
    "mixed": {
        "discover_access_person_ssim": "bob",
        "read_access_group_ssim": ["readers"],
        "download_access_group_ssim": ["downloaders"],
        "download_access_person_ssim": ["carol"],
    },
}


class CountingPermissionsBackend(InMemoryPermissionsBackend):
    """In-memory backend that records every lookup."""

    def __init__(self, documents: dict | None = None) -> None:
        super().__init__(documents)
        self.calls: list[str] = []

    async def fetch_permissions(self, resource_id: str) -> PermissionsDocument | None:
        self.calls.append(resource_id)
        return await super().fetch_permissions(resource_id)


class FailingPermissionsBackend:
    """Backend whose every lookup fails."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def fetch_permissions(self, resource_id: str) -> PermissionsDocument | None:
        self.calls.append(resource_id)
        raise BackendFailure("search index unavailable", resource_id)


class FakeIdentitySource:
    """Maps fixed bearer tokens to subjects."""

    def __init__(self, subjects: dict[str, Subject]) -> None:
        self._subjects = subjects

    def subject_for_token(self, token: str) -> Subject | None:
        return self._subjects.get(token)
