from __future__ import annotations

from typing import Any, Sequence

from cordkit.api.objects import Channel, Invite, Message, ThreadMember
from cordkit.foundation import RestError, Result, Snowflake
from cordkit.rest.api import RestChannelAPI

from ..keys import (
    ChannelInvitesKey,
    ChannelKey,
    InviteKey,
    MessageKey,
    PermissionOverwriteKey,
    PinnedMessagesKey,
    ThreadMemberKey,
    ThreadMembersKey,
)
from .base import CachingAPI


def _message_key(message: Message) -> MessageKey:
    return MessageKey(message.channel_id, message.id)


class CachingChannelAPI(CachingAPI[RestChannelAPI]):
    """Channels, messages, pins, invites and thread members."""

    __slots__ = ()

    # ─── Channels ────────────────────────────────────────────────────

    async def get_channel(self, channel_id: Snowflake) -> Result[Channel, RestError]:
        return await self._read_through(ChannelKey(channel_id), lambda: self._inner.get_channel(channel_id))

    async def modify_channel(self, channel_id: Snowflake, **kwargs: Any) -> Result[Channel, RestError]:
        result = await self._inner.modify_channel(channel_id, **kwargs)
        return await self._store(result, lambda c: ChannelKey(c.id))

    async def delete_channel(self, channel_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.delete_channel(channel_id, **kwargs)
        return await self._evict(result, ChannelKey(channel_id))

    # ─── Messages ────────────────────────────────────────────────────

    async def get_channel_message(self, channel_id: Snowflake, message_id: Snowflake) -> Result[Message, RestError]:
        return await self._read_through(
            MessageKey(channel_id, message_id), lambda: self._inner.get_channel_message(channel_id, message_id),
        )

    async def get_channel_messages(self, channel_id: Snowflake, **kwargs: Any) -> Result[list[Message], RestError]:
        """Always fetched; the returned messages are cached individually."""
        result = await self._inner.get_channel_messages(channel_id, **kwargs)
        return await self._store_each(result, _message_key)

    async def create_message(self, channel_id: Snowflake, **kwargs: Any) -> Result[Message, RestError]:
        result = await self._inner.create_message(channel_id, **kwargs)
        return await self._store(result, _message_key)

    async def crosspost_message(self, channel_id: Snowflake, message_id: Snowflake) -> Result[Message, RestError]:
        result = await self._inner.crosspost_message(channel_id, message_id)
        return await self._store(result, _message_key)

    async def edit_message(self, channel_id: Snowflake, message_id: Snowflake, **kwargs: Any) -> Result[Message, RestError]:
        result = await self._inner.edit_message(channel_id, message_id, **kwargs)
        return await self._store(result, _message_key)

    async def delete_message(self, channel_id: Snowflake, message_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.delete_message(channel_id, message_id, **kwargs)
        return await self._evict(result, MessageKey(channel_id, message_id))

    async def bulk_delete_messages(
        self, channel_id: Snowflake, message_ids: Sequence[Snowflake], **kwargs: Any,
    ) -> Result[None, RestError]:
        result = await self._inner.bulk_delete_messages(channel_id, message_ids, **kwargs)
        return await self._evict(result, *(MessageKey(channel_id, m) for m in message_ids))

    # ─── Permissions, invites, pins ──────────────────────────────────

    async def edit_channel_permissions(self, channel_id: Snowflake, overwrite_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.edit_channel_permissions(channel_id, overwrite_id, **kwargs)
        return await self._evict(result, PermissionOverwriteKey(channel_id, overwrite_id), ChannelKey(channel_id))

    async def delete_channel_permission(self, channel_id: Snowflake, overwrite_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.delete_channel_permission(channel_id, overwrite_id, **kwargs)
        return await self._evict(result, PermissionOverwriteKey(channel_id, overwrite_id), ChannelKey(channel_id))

    async def get_channel_invites(self, channel_id: Snowflake) -> Result[list[Invite], RestError]:
        return await self._read_through_collection(
            ChannelInvitesKey(channel_id), lambda: self._inner.get_channel_invites(channel_id), lambda i: InviteKey(i.code),
        )

    async def create_channel_invite(self, channel_id: Snowflake, **kwargs: Any) -> Result[Invite, RestError]:
        result = await self._inner.create_channel_invite(channel_id, **kwargs)
        return await self._store(result, lambda i: InviteKey(i.code))

    async def get_pinned_messages(self, channel_id: Snowflake) -> Result[list[Message], RestError]:
        return await self._read_through_collection(
            PinnedMessagesKey(channel_id), lambda: self._inner.get_pinned_messages(channel_id), _message_key,
        )

    async def pin_message(self, channel_id: Snowflake, message_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.pin_message(channel_id, message_id, **kwargs)
        return await self._evict(result, PinnedMessagesKey(channel_id))

    async def unpin_message(self, channel_id: Snowflake, message_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.unpin_message(channel_id, message_id, **kwargs)
        return await self._evict(result, PinnedMessagesKey(channel_id))

    # ─── Threads ─────────────────────────────────────────────────────

    async def start_thread_from_message(
        self, channel_id: Snowflake, message_id: Snowflake, name: str, **kwargs: Any,
    ) -> Result[Channel, RestError]:
        result = await self._inner.start_thread_from_message(channel_id, message_id, name, **kwargs)
        return await self._store(result, lambda c: ChannelKey(c.id))

    async def start_thread_without_message(
        self, channel_id: Snowflake, name: str, type: Any, **kwargs: Any,  # noqa: A002
    ) -> Result[Channel, RestError]:
        result = await self._inner.start_thread_without_message(channel_id, name, type, **kwargs)
        return await self._store(result, lambda c: ChannelKey(c.id))

    async def get_thread_member(self, channel_id: Snowflake, user_id: Snowflake) -> Result[ThreadMember, RestError]:
        return await self._read_through(
            ThreadMemberKey(channel_id, user_id), lambda: self._inner.get_thread_member(channel_id, user_id),
        )

    async def list_thread_members(self, channel_id: Snowflake) -> Result[list[ThreadMember], RestError]:
        return await self._read_through_collection(
            ThreadMembersKey(channel_id),
            lambda: self._inner.list_thread_members(channel_id),
            lambda m: ThreadMemberKey(channel_id, m.user_id) if m.user_id is not None else None,
        )

    async def remove_thread_member(self, channel_id: Snowflake, user_id: Snowflake) -> Result[None, RestError]:
        result = await self._inner.remove_thread_member(channel_id, user_id)
        return await self._evict(result, ThreadMemberKey(channel_id, user_id), ThreadMembersKey(channel_id))
