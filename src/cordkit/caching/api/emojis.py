from __future__ import annotations

from typing import Any

from cordkit.api.objects import Emoji
from cordkit.foundation import RestError, Result, Snowflake
from cordkit.rest.api import RestEmojiAPI

from ..keys import EmojiKey, GuildEmojisKey
from .base import CachingAPI


class CachingEmojiAPI(CachingAPI[RestEmojiAPI]):
    __slots__ = ()

    async def list_guild_emojis(self, guild_id: Snowflake) -> Result[list[Emoji], RestError]:
        return await self._read_through_collection(
            GuildEmojisKey(guild_id),
            lambda: self._inner.list_guild_emojis(guild_id),
            lambda e: EmojiKey(guild_id, e.id) if e.id is not None else None,
        )

    async def get_guild_emoji(self, guild_id: Snowflake, emoji_id: Snowflake) -> Result[Emoji, RestError]:
        return await self._read_through(EmojiKey(guild_id, emoji_id), lambda: self._inner.get_guild_emoji(guild_id, emoji_id))

    async def create_guild_emoji(self, guild_id: Snowflake, name: str, image: str, **kwargs: Any) -> Result[Emoji, RestError]:
        result = await self._inner.create_guild_emoji(guild_id, name, image, **kwargs)
        await self._store(result, lambda e: EmojiKey(guild_id, e.id) if e.id is not None else None)
        return await self._evict(result, GuildEmojisKey(guild_id))

    async def modify_guild_emoji(self, guild_id: Snowflake, emoji_id: Snowflake, **kwargs: Any) -> Result[Emoji, RestError]:
        result = await self._inner.modify_guild_emoji(guild_id, emoji_id, **kwargs)
        return await self._store(result, lambda _: EmojiKey(guild_id, emoji_id))

    async def delete_guild_emoji(self, guild_id: Snowflake, emoji_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.delete_guild_emoji(guild_id, emoji_id, **kwargs)
        return await self._evict(result, EmojiKey(guild_id, emoji_id), GuildEmojisKey(guild_id))
