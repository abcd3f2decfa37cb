"""Health check endpoints."""

from collections.abc import Awaitable, Callable, Mapping

import falcon
import falcon.asgi

from accessgate import __version__

ReadinessCheck = Callable[[], Awaitable[bool]]


class HealthResource:
    """Liveness, and readiness over named dependency checks."""

    def __init__(self, checks: Mapping[str, ReadinessCheck] | None = None) -> None:
        self._checks = dict(checks or {})

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok", "version": __version__}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - 503 unless every check passes."""
        results = {name: await check() for name, check in self._checks.items()}
        ready = all(results.values())
        resp.media = {"status": "ready" if ready else "unavailable", "checks": results}
        resp.status = falcon.HTTP_200 if ready else falcon.HTTP_503
