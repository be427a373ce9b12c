"""Guild template endpoints."""

from __future__ import annotations

from cordkit.api.objects import Guild, Template
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset

from .base import RestAPI


class RestTemplateAPI(RestAPI):
    __slots__ = ()

    async def get_template(self, template_code: str) -> Result[Template, RestError]:
        return await self._http.get(f"guilds/templates/{template_code}", Template)

    async def create_guild_from_template(
        self, template_code: str, name: str, *, icon: str | Unset = UNSET,
    ) -> Result[Guild, RestError]:
        return await self._http.post(
            f"guilds/templates/{template_code}", Guild, configure=lambda b: b.with_json({"name": name, "icon": icon}),
        )

    async def get_guild_templates(self, guild_id: Snowflake) -> Result[list[Template], RestError]:
        return await self._http.get(f"guilds/{guild_id}/templates", list[Template])

    async def create_guild_template(
        self, guild_id: Snowflake, name: str, *, description: str | None | Unset = UNSET,
    ) -> Result[Template, RestError]:
        return await self._http.post(
            f"guilds/{guild_id}/templates", Template,
            configure=lambda b: b.with_json({"name": name, "description": description}),
        )

    async def sync_guild_template(self, guild_id: Snowflake, template_code: str) -> Result[Template, RestError]:
        return await self._http.put(f"guilds/{guild_id}/templates/{template_code}", Template)

    async def modify_guild_template(
        self,
        guild_id: Snowflake,
        template_code: str,
        *,
        name: str | Unset = UNSET,
        description: str | None | Unset = UNSET,
    ) -> Result[Template, RestError]:
        return await self._http.patch(
            f"guilds/{guild_id}/templates/{template_code}", Template,
            configure=lambda b: b.with_json({"name": name, "description": description}),
        )

    async def delete_guild_template(self, guild_id: Snowflake, template_code: str) -> Result[Template, RestError]:
        return await self._http.delete(f"guilds/{guild_id}/templates/{template_code}", Template)
