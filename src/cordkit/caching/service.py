"""Cache service: stores entities and the related entities they embed.

Storing a guild also stores its channels, emojis, members and roles under
their own keys; storing a message also stores its author, and so on. The
value replaced by a write, or removed by an eviction, stays readable for a
while under the ``Evicted:`` namespace (see ``try_get_previous_value``).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from cordkit.api.objects import (
    Ban,
    Channel,
    Emoji,
    Guild,
    GuildMember,
    GuildPreview,
    Integration,
    Invite,
    Message,
    Template,
    Webhook,
)
from cordkit.foundation import RestError, Result

from .keys import (
    CacheKey,
    ChannelKey,
    EmojiKey,
    GuildMemberKey,
    GuildRoleKey,
    GuildRolesKey,
    MessageKey,
    UserKey,
    evicted,
)
from .providers import CacheProvider
from .settings import CacheSettings

logger = logging.getLogger("cordkit.caching")

T = TypeVar("T")


class CacheService:
    """Typed front door to a CacheProvider.

    Args:
        provider: Backing store
        settings: Expiration policy; defaults to 30s absolute / 10s sliding

    Example:
        >>> service = CacheService(MemoryCacheProvider())
        >>> await service.cache(ChannelKey(channel.id), channel)
        >>> (await service.try_get_value(ChannelKey(channel.id))).unwrap()
        Channel(...)
    """

    __slots__ = ("_provider", "_settings")

    def __init__(self, provider: CacheProvider, settings: CacheSettings | None = None) -> None:
        self._provider = provider
        self._settings = settings or CacheSettings()

    @property
    def provider(self) -> CacheProvider:
        return self._provider

    @property
    def settings(self) -> CacheSettings:
        return self._settings

    async def cache(self, key: CacheKey, instance: Any) -> None:
        """Store ``instance`` under ``key`` and fan out to the entities it embeds.

        Nothing is stored when the value type's absolute expiration is zero.
        A value already under ``key`` is moved to the evicted namespace first.
        """
        options = self._settings.get_entry_options(key.value_type)
        if options.disabled:
            return
        previous = await self._provider.retrieve(key)
        if previous.is_ok():
            await self._keep_evicted(key, previous.unwrap())
        await self._provider.cache(key, instance, options)
        await self._cache_dependencies(instance)

    async def cache_collection(self, key: CacheKey, items: Iterable[T], key_for: Callable[[T], CacheKey | None]) -> None:
        """Store a list under ``key`` and each element under ``key_for(element)``.

        Elements whose key cannot be derived (``key_for`` returns None) are
        only kept as part of the collection.
        """
        items = list(items)
        await self.cache(key, items)
        for item in items:
            if (item_key := key_for(item)) is not None:
                await self.cache(item_key, item)

    async def try_get_value(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        result = await self._provider.retrieve(key, type_)
        logger.debug(f"Cache {'hit' if result.is_ok() else 'miss'}: {key}")
        return result

    async def try_get_previous_value(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        """Get the value most recently replaced or evicted under ``key``."""
        return await self._provider.retrieve(evicted(key), type_)

    async def evict(self, key: CacheKey, type_: Any = None) -> Result[Any, RestError]:
        """Remove the value under ``key``, keeping a copy in the evicted namespace."""
        result = await self._provider.evict(key, type_)
        if result.is_ok():
            logger.debug(f"Evicted: {key}")
            await self._keep_evicted(key, result.unwrap())
        return result

    async def clear(self) -> None:
        await self._provider.clear()

    async def _keep_evicted(self, key: CacheKey, value: Any) -> None:
        options = self._settings.get_eviction_options(key.value_type)
        if not options.disabled:
            await self._provider.cache(evicted(key), value, options)

    # ─────────────────────────────────────────────────────────────────
    # Fan-out
    # ─────────────────────────────────────────────────────────────────

    async def _cache_user(self, user: Any) -> None:
        if user is not None:
            await self.cache(UserKey(user.id), user)

    async def _cache_dependencies(self, instance: Any) -> None:
        match instance:
            case Webhook() | Integration() | Ban() | GuildMember() | Emoji():
                await self._cache_user(instance.user)
            case Template():
                await self._cache_user(instance.creator)
            case Invite():
                await self._cache_user(instance.inviter)
            case GuildPreview():
                await self._cache_emojis(instance.id, instance.emojis)
            case Guild():
                await self._cache_guild_contents(instance)
            case Message():
                await self._cache_user(instance.author)
                if (referenced := instance.referenced_message) is not None:
                    await self.cache(MessageKey(referenced.channel_id, referenced.id), referenced)
            case Channel():
                for recipient in instance.recipients or ():
                    await self._cache_user(recipient)

    async def _cache_emojis(self, guild_id: Any, emojis: Iterable[Emoji]) -> None:
        for emoji in emojis:
            if emoji.id is not None:
                await self.cache(EmojiKey(guild_id, emoji.id), emoji)

    async def _cache_guild_contents(self, guild: Guild) -> None:
        for channel in guild.channels or ():
            if channel.guild_id is None and not channel.type.is_private:
                # Channels embedded in a guild payload omit their guild id
                channel = channel.model_copy(update={"guild_id": guild.id})
            await self.cache(ChannelKey(channel.id), channel)

        await self._cache_emojis(guild.id, guild.emojis)

        # A guild payload carries a partial member list, so no GuildMembersKey
        for member in guild.members or ():
            if member.user is not None:
                await self.cache(GuildMemberKey(guild.id, member.user.id), member)

        await self.cache_collection(GuildRolesKey(guild.id), guild.roles, lambda r: GuildRoleKey(guild.id, r.id))
