"""Falcon ASGI application."""

from collections.abc import Mapping, Sequence

import falcon.asgi

from accessgate.application.ports import DiscoveryBackend
from accessgate.interfaces.api.errors import register_error_handlers
from accessgate.interfaces.api.resources.documents import (
    DocumentAccessResource,
    DocumentListResource,
    DocumentResource,
)
from accessgate.interfaces.api.resources.health import HealthResource, ReadinessCheck


def create_app(
    middleware: Sequence[object] = (),
    readiness_checks: Mapping[str, ReadinessCheck] | None = None,
    discovery_backend: DiscoveryBackend | None = None,
) -> falcon.asgi.App:
    """Create Falcon ASGI app with routes.

    middleware must include AuthMiddleware and AbilityMiddleware, in that order.
    The document list is routed only when discovery_backend is given.
    """
    app = falcon.asgi.App(middleware=list(middleware))
    register_error_handlers(app)

    health = HealthResource(readiness_checks)
    access = DocumentAccessResource()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    if discovery_backend is not None:
        app.add_route("/v1/documents", DocumentListResource(discovery_backend))
    app.add_route("/v1/documents/{document_id}", DocumentResource())
    app.add_route("/v1/documents/{document_id}/access", access)
    app.add_route("/v1/documents/{document_id}/actors", access, suffix="actors")
    return app
