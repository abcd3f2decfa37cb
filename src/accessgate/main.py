"""Application entry point and composition root."""

import logging

import falcon.asgi

from accessgate import __version__
from accessgate.config import get_settings
from accessgate.infrastructure.auth.keycloak_identity import KeycloakIdentitySource
from accessgate.infrastructure.persistence.postgres.permissions_backend import (
    PostgresPermissionsBackend,
    create_pool,
)
from accessgate.interfaces.api.app import create_app
from accessgate.interfaces.api.middleware.ability import AbilityMiddleware
from accessgate.interfaces.api.middleware.auth import AuthMiddleware
from accessgate.interfaces.api.middleware.lifespan import LifespanMiddleware
from accessgate.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"accessgate v{__version__}")


def create_accessgate_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.debug)

    pool = create_pool(settings.database_url)
    backend = PostgresPermissionsBackend(pool, settings.permissions_table)

    identity_source = (
        KeycloakIdentitySource(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if identity_source is None:
        logger.warning("No Keycloak client secret configured; all requests run as guest")
    if not settings.legacy_tier_union:
        logger.info("Legacy tier union disabled; each tier consults only its own fields")

    return create_app(
        middleware=[
            LifespanMiddleware(pool),
            AuthMiddleware(identity_source),
            AbilityMiddleware(
                backend,
                settings.access_fields(),
                legacy_tier_union=settings.legacy_tier_union,
            ),
        ],
        readiness_checks={"database": backend.ping},
        discovery_backend=backend,
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_accessgate_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
