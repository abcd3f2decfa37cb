"""Error handlers mapping domain exceptions to HTTP responses."""

import logging

import falcon
import falcon.asgi

from accessgate.domain.exceptions import AccessDenied, BackendFailure, NotFound

logger = logging.getLogger(__name__)


async def handle_access_denied(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: AccessDenied, params: dict
) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {
        "title": "Forbidden",
        "description": str(ex),
        "capability": ex.capability,
        "resource_id": ex.resource_id,
    }


async def handle_not_found(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: NotFound, params: dict
) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"title": "Not Found", "description": str(ex), "resource_id": ex.resource_id}


async def handle_backend_failure(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: BackendFailure, params: dict
) -> None:
    resp.status = falcon.HTTP_502
    resp.media = {"title": "Bad Gateway", "description": str(ex)}


async def log_exception(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Attach the handlers, most generic first."""
    app.add_error_handler(Exception, log_exception)
    app.add_error_handler(BackendFailure, handle_backend_failure)
    app.add_error_handler(NotFound, handle_not_found)
    app.add_error_handler(AccessDenied, handle_access_denied)
