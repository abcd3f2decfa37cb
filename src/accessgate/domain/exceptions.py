"""Domain exceptions."""


class AccessGateError(Exception):
    """Base exception for accessgate."""

    pass


class NotFound(AccessGateError):
    """Requested resource was not found."""

    def __init__(self, kind: str, resource_id: str) -> None:
        super().__init__(f"{kind} {resource_id} not found")
        self.kind = kind
        self.resource_id = resource_id


class BackendFailure(AccessGateError):
    """Permissions backend could not answer a lookup."""

    def __init__(self, message: str, resource_id: str | None = None) -> None:
        super().__init__(message)
        self.resource_id = resource_id


class AccessDenied(AccessGateError):
    """Subject lacks the capability required on a resource."""

    def __init__(self, message: str, capability: str, resource_id: str | None) -> None:
        super().__init__(message)
        self.capability = capability
        self.resource_id = resource_id
