"""OAuth2 introspection endpoints."""

from __future__ import annotations

from cordkit.api.objects import Application, AuthorizationInformation
from cordkit.foundation import RestError, Result

from .base import RestAPI


class RestOAuth2API(RestAPI):
    __slots__ = ()

    async def get_current_bot_application_information(self) -> Result[Application, RestError]:
        return await self._http.get("oauth2/applications/@me", Application)

    async def get_current_authorization_information(self) -> Result[AuthorizationInformation, RestError]:
        """Only valid with a bearer token."""
        return await self._http.get("oauth2/@me", AuthorizationInformation)
