"""Falcon hooks enforcing access controls."""

import falcon.asgi

from accessgate.domain.exceptions import AccessDenied
from accessgate.domain.value_objects import AccessTier

SHOW_DENIED_MESSAGE = (
    "You do not have sufficient access privileges to read this document, "
    "which has been marked private."
)


async def enforce_show_permissions(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    resource: object,
    params: dict,
) -> None:
    """Before hook for show routes: require read on params["document_id"].

    Stores the resolved document on req.context.permissions.
    """
    document_id = params["document_id"]
    ability = req.context.ability
    permissions = await ability.permissions_doc(document_id)
    if not await ability.can(AccessTier.READ, permissions):
        raise AccessDenied(SHOW_DENIED_MESSAGE, AccessTier.READ.value, document_id)
    req.context.permissions = permissions
