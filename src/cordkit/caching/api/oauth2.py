from __future__ import annotations

from cordkit.api.objects import Application, AuthorizationInformation
from cordkit.foundation import RestError, Result
from cordkit.rest.api import RestOAuth2API

from ..keys import CurrentApplicationKey, CurrentAuthorizationInformationKey
from .base import CachingAPI


class CachingOAuth2API(CachingAPI[RestOAuth2API]):
    __slots__ = ()

    async def get_current_bot_application_information(self) -> Result[Application, RestError]:
        return await self._read_through(CurrentApplicationKey(), self._inner.get_current_bot_application_information)

    async def get_current_authorization_information(self) -> Result[AuthorizationInformation, RestError]:
        return await self._read_through(
            CurrentAuthorizationInformationKey(), self._inner.get_current_authorization_information,
        )
