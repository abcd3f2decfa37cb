"""Document API resources."""

import falcon
import falcon.asgi

from accessgate.application.ports import DiscoveryBackend
from accessgate.domain.exceptions import NotFound
from accessgate.domain.value_objects import AccessTier
from accessgate.interfaces.api.hooks import enforce_show_permissions


class DocumentListResource:
    """GET /v1/documents - ids of the documents the current subject may discover."""

    def __init__(self, backend: DiscoveryBackend) -> None:
        self._backend = backend

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        limit = req.get_param_as_int("limit", min_value=1, max_value=1000, default=100)
        discovery = req.context.ability.discovery_filter()
        resp.media = {"items": await self._backend.discoverable_ids(discovery, limit)}
        resp.status = falcon.HTTP_200


class DocumentResource:
    """GET /v1/documents/{document_id} - show a readable document's permissions record."""

    @falcon.before(enforce_show_permissions)
    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        permissions = req.context.permissions
        resp.media = {"id": permissions.id, "fields": dict(permissions)}
        resp.status = falcon.HTTP_200


class DocumentAccessResource:
    """Access decisions and effective actors for the current subject.

    GET /v1/documents/{document_id}/access
    GET /v1/documents/{document_id}/actors
    """

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Whether the subject holds each tier."""
        ability = req.context.ability
        access = {tier.value: await ability.can(tier, document_id) for tier in AccessTier}
        resp.media = {
            "id": document_id,
            "user_key": ability.current_user.user_key,
            "groups": sorted(ability.user_groups),
            "access": access,
        }
        resp.status = falcon.HTTP_200

    async def on_get_actors(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Users and groups effectively holding each tier."""
        ability = req.context.ability
        if await ability.permissions_doc(document_id) is None:
            raise NotFound("Document", document_id)

        actors = {}
        for tier in AccessTier:
            actors[tier.value] = {
                "users": sorted(await ability.tier_users(document_id, tier)),
                "groups": sorted(await ability.tier_groups(document_id, tier)),
            }
        resp.media = {"id": document_id, "actors": actors}
        resp.status = falcon.HTTP_200
