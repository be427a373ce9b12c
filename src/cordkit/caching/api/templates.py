from __future__ import annotations

from typing import Any

from cordkit.api.objects import Guild, Template
from cordkit.foundation import RestError, Result, Snowflake
from cordkit.rest.api import RestTemplateAPI

from ..keys import GuildKey, GuildTemplatesKey, TemplateKey
from .base import CachingAPI


def _template_key(template: Template) -> TemplateKey:
    return TemplateKey(template.code)


class CachingTemplateAPI(CachingAPI[RestTemplateAPI]):
    __slots__ = ()

    async def get_template(self, template_code: str) -> Result[Template, RestError]:
        return await self._read_through(TemplateKey(template_code), lambda: self._inner.get_template(template_code))

    async def get_guild_templates(self, guild_id: Snowflake) -> Result[list[Template], RestError]:
        return await self._read_through_collection(
            GuildTemplatesKey(guild_id), lambda: self._inner.get_guild_templates(guild_id), _template_key,
        )

    async def create_guild_template(self, guild_id: Snowflake, name: str, **kwargs: Any) -> Result[Template, RestError]:
        result = await self._inner.create_guild_template(guild_id, name, **kwargs)
        await self._store(result, _template_key)
        return await self._evict(result, GuildTemplatesKey(guild_id))

    async def sync_guild_template(self, guild_id: Snowflake, template_code: str) -> Result[Template, RestError]:
        result = await self._inner.sync_guild_template(guild_id, template_code)
        return await self._store(result, _template_key)

    async def modify_guild_template(self, guild_id: Snowflake, template_code: str, **kwargs: Any) -> Result[Template, RestError]:
        result = await self._inner.modify_guild_template(guild_id, template_code, **kwargs)
        return await self._store(result, _template_key)

    async def delete_guild_template(self, guild_id: Snowflake, template_code: str) -> Result[Template, RestError]:
        result = await self._inner.delete_guild_template(guild_id, template_code)
        return await self._evict(result, TemplateKey(template_code), GuildTemplatesKey(guild_id))

    async def create_guild_from_template(self, template_code: str, name: str, **kwargs: Any) -> Result[Guild, RestError]:
        result = await self._inner.create_guild_from_template(template_code, name, **kwargs)
        return await self._store(result, lambda g: GuildKey(g.id))
