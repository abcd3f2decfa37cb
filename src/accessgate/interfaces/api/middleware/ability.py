"""Ability middleware - one Ability per request."""

from collections.abc import Sequence

import falcon.asgi

from accessgate.application.ability import DEFAULT_ABILITY_LOGIC, Ability, RuleSetup
from accessgate.application.ports import PermissionsBackend
from accessgate.domain.value_objects import AccessFieldConfig


class AbilityMiddleware:
    """Builds req.context.ability for the subject set by AuthMiddleware."""

    def __init__(
        self,
        backend: PermissionsBackend,
        fields: AccessFieldConfig,
        legacy_tier_union: bool = True,
        setups: Sequence[RuleSetup] = DEFAULT_ABILITY_LOGIC,
    ) -> None:
        self._backend = backend
        self._fields = fields
        self._legacy_tier_union = legacy_tier_union
        self._setups = tuple(setups)

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        req.context.ability = Ability(
            getattr(req.context, "subject", None),
            backend=self._backend,
            fields=self._fields,
            setups=self._setups,
            legacy_tier_union=self._legacy_tier_union,
        )
