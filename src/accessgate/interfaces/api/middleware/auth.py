"""Auth middleware - resolves the acting subject or falls back to a guest."""

import asyncio

import falcon.asgi

from accessgate.application.ports import IdentitySource


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.subject.

    A missing or rejected token leaves the subject as None, which the
    Ability turns into a guest. Token introspection is blocking HTTP, so it
    runs in a worker thread.
    """

    def __init__(self, identity_source: IdentitySource | None = None) -> None:
        self._identity = identity_source

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract subject from Authorization header."""
        req.context.subject = None
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer ") and self._identity:
            req.context.subject = await asyncio.to_thread(
                self._identity.subject_for_token, auth[7:]
            )
