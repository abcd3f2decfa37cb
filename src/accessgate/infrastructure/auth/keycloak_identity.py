"""Keycloak OIDC identity source - token introspection to Subject."""

import logging

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from accessgate.domain.entities import Subject

logger = logging.getLogger(__name__)


class KeycloakIdentitySource:
    """Introspects bearer tokens; realm roles and groups become subject groups."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        user_key_claim: str = "preferred_username",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._user_key_claim = user_key_claim

    def subject_for_token(self, token: str) -> Subject | None:
        """Validate token, return its subject or None if inactive or rejected."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as exc:
            logger.info("Token introspection rejected: %s", exc)
            return None
        if not token_info.get("active"):
            return None
        return subject_from_claims(token_info, self._user_key_claim)


def subject_from_claims(claims: dict, user_key_claim: str = "preferred_username") -> Subject:
    """Build a persisted subject from introspected token claims."""
    groups = set(claims.get("realm_access", {}).get("roles", []))
    # Keycloak group paths look like "/editors"
    groups |= {g.lstrip("/") for g in claims.get("groups", []) if g}
    return Subject(
        user_key=claims.get(user_key_claim) or claims.get("sub"),
        persisted=True,
        groups=frozenset(groups),
    )
