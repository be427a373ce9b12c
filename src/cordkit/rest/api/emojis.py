"""Guild emoji endpoints."""

from __future__ import annotations

from typing import Sequence

from cordkit.api.objects import Emoji
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset

from .base import RestAPI


class RestEmojiAPI(RestAPI):
    __slots__ = ()

    async def list_guild_emojis(self, guild_id: Snowflake) -> Result[list[Emoji], RestError]:
        return await self._http.get(f"guilds/{guild_id}/emojis", list[Emoji])

    async def get_guild_emoji(self, guild_id: Snowflake, emoji_id: Snowflake) -> Result[Emoji, RestError]:
        return await self._http.get(f"guilds/{guild_id}/emojis/{emoji_id}", Emoji)

    async def create_guild_emoji(
        self,
        guild_id: Snowflake,
        name: str,
        image: str,
        *,
        roles: Sequence[Snowflake] | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Emoji, RestError]:
        """Create an emoji from a ``data:`` URI encoded image."""
        return await self._http.post(
            f"guilds/{guild_id}/emojis", Emoji,
            configure=lambda b: b.with_json({"name": name, "image": image, "roles": roles}).with_reason(reason),
        )

    async def modify_guild_emoji(
        self,
        guild_id: Snowflake,
        emoji_id: Snowflake,
        *,
        name: str | Unset = UNSET,
        roles: Sequence[Snowflake] | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Emoji, RestError]:
        return await self._http.patch(
            f"guilds/{guild_id}/emojis/{emoji_id}", Emoji,
            configure=lambda b: b.with_json({"name": name, "roles": roles}).with_reason(reason),
        )

    async def delete_guild_emoji(
        self, guild_id: Snowflake, emoji_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(f"guilds/{guild_id}/emojis/{emoji_id}", configure=lambda b: b.with_reason(reason))
