"""Gateway discovery endpoints."""

from __future__ import annotations

from cordkit.api.objects import BotGatewayEndpoint, GatewayEndpoint
from cordkit.foundation import RestError, Result

from .base import RestAPI


class RestGatewayAPI(RestAPI):
    __slots__ = ()

    async def get_gateway(self) -> Result[GatewayEndpoint, RestError]:
        return await self._http.get("gateway", GatewayEndpoint, configure=lambda b: b.skip_authorization())

    async def get_gateway_bot(self) -> Result[BotGatewayEndpoint, RestError]:
        return await self._http.get("gateway/bot", BotGatewayEndpoint)
