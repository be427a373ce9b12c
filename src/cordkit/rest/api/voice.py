"""Voice endpoints."""

from __future__ import annotations

from cordkit.api.objects import VoiceRegion
from cordkit.foundation import RestError, Result

from .base import RestAPI


class RestVoiceAPI(RestAPI):
    __slots__ = ()

    async def list_voice_regions(self) -> Result[list[VoiceRegion], RestError]:
        return await self._http.get("voice/regions", list[VoiceRegion])
