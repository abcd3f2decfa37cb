"""Unit tests for the Keycloak identity source."""

from unittest.mock import MagicMock, patch

import pytest
from keycloak.exceptions import KeycloakError

from accessgate.infrastructure.auth.keycloak_identity import (
    KeycloakIdentitySource,
    subject_from_claims,
)


@pytest.fixture
def keycloak_client():
    with patch(
        "accessgate.infrastructure.auth.keycloak_identity.KeycloakOpenID"
    ) as openid_cls:
        client = MagicMock()
        openid_cls.return_value = client
        yield client


def _source() -> KeycloakIdentitySource:
    return KeycloakIdentitySource("http://kc", "realm", "client", "secret")


def test_active_token_becomes_persisted_subject(keycloak_client) -> None:
    keycloak_client.introspect.return_value = {
        "active": True,
        "sub": "8d1f",
        "preferred_username": "alice",
        "realm_access": {"roles": ["editors"]},
        "groups": ["/archivists"],
    }

    subject = _source().subject_for_token("token")

    assert subject is not None
    assert subject.user_key == "alice"
    assert subject.persisted is True
    assert subject.groups == {"editors", "archivists"}
    keycloak_client.introspect.assert_called_once_with("token")


def test_inactive_token_is_rejected(keycloak_client) -> None:
    keycloak_client.introspect.return_value = {"active": False}
    assert _source().subject_for_token("token") is None


def test_introspection_error_is_rejected(keycloak_client) -> None:
    keycloak_client.introspect.side_effect = KeycloakError("unauthorized", 401)
    assert _source().subject_for_token("token") is None


def test_claims_fall_back_to_sub() -> None:
    subject = subject_from_claims({"sub": "8d1f"})
    assert subject.user_key == "8d1f"
    assert subject.groups == frozenset()
