"""Channel, message, reaction, pin and thread endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence
from urllib.parse import quote

from cordkit.api.objects import (
    AllowedMentions,
    Channel,
    ChannelType,
    Embed,
    FollowedChannel,
    Invite,
    Message,
    MessageReference,
    PermissionOverwrite,
    PermissionOverwriteType,
    ThreadList,
    ThreadMember,
    User,
)
from cordkit.foundation import UNSET, Err, ErrorCode, RestError, Result, Snowflake, Unset

from ..request import FileData
from .base import RestAPI


def _emoji(emoji: str) -> str:
    return quote(emoji, safe="")


class RestChannelAPI(RestAPI):
    """Endpoints under ``/channels``."""

    __slots__ = ()

    async def get_channel(self, channel_id: Snowflake) -> Result[Channel, RestError]:
        return await self._http.get(f"channels/{channel_id}", Channel)

    async def modify_channel(
        self,
        channel_id: Snowflake,
        *,
        name: str | Unset = UNSET,
        type: ChannelType | Unset = UNSET,  # noqa: A002
        position: int | None | Unset = UNSET,
        topic: str | None | Unset = UNSET,
        nsfw: bool | None | Unset = UNSET,
        rate_limit_per_user: int | None | Unset = UNSET,
        bitrate: int | None | Unset = UNSET,
        user_limit: int | None | Unset = UNSET,
        permission_overwrites: Sequence[PermissionOverwrite] | None | Unset = UNSET,
        parent_id: Snowflake | None | Unset = UNSET,
        rtc_region: str | None | Unset = UNSET,
        video_quality_mode: int | None | Unset = UNSET,
        default_auto_archive_duration: int | None | Unset = UNSET,
        archived: bool | Unset = UNSET,
        auto_archive_duration: int | Unset = UNSET,
        locked: bool | Unset = UNSET,
        invitable: bool | Unset = UNSET,
        flags: int | Unset = UNSET,
        applied_tags: Sequence[Snowflake] | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Channel, RestError]:
        body = {
            "name": name, "type": type, "position": position, "topic": topic, "nsfw": nsfw,
            "rate_limit_per_user": rate_limit_per_user, "bitrate": bitrate, "user_limit": user_limit,
            "permission_overwrites": permission_overwrites, "parent_id": parent_id,
            "rtc_region": rtc_region, "video_quality_mode": video_quality_mode,
            "default_auto_archive_duration": default_auto_archive_duration,
            "archived": archived, "auto_archive_duration": auto_archive_duration, "locked": locked,
            "invitable": invitable, "flags": flags, "applied_tags": applied_tags,
        }
        return await self._http.patch(
            f"channels/{channel_id}", Channel,
            configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def delete_channel(self, channel_id: Snowflake, *, reason: str | Unset = UNSET) -> Result[None, RestError]:
        return await self._http.delete(f"channels/{channel_id}", configure=lambda b: b.with_reason(reason))

    # ─── Messages ────────────────────────────────────────────────────

    async def get_channel_messages(
        self,
        channel_id: Snowflake,
        *,
        around: Snowflake | Unset = UNSET,
        before: Snowflake | Unset = UNSET,
        after: Snowflake | Unset = UNSET,
        limit: int | Unset = UNSET,
    ) -> Result[list[Message], RestError]:
        anchors = [a for a in (around, before, after) if a is not UNSET]
        if len(anchors) > 1:
            return Err(RestError(message="around, before and after are mutually exclusive", code=ErrorCode.INVALID_PARAMS))
        return await self._http.get(
            f"channels/{channel_id}/messages", list[Message],
            configure=lambda b: (
                b.add_query_parameter("around", around)
                .add_query_parameter("before", before)
                .add_query_parameter("after", after)
                .add_query_parameter("limit", limit)
            ),
        )

    async def get_channel_message(self, channel_id: Snowflake, message_id: Snowflake) -> Result[Message, RestError]:
        return await self._http.get(f"channels/{channel_id}/messages/{message_id}", Message)

    async def create_message(
        self,
        channel_id: Snowflake,
        *,
        content: str | Unset = UNSET,
        nonce: str | int | Unset = UNSET,
        tts: bool | Unset = UNSET,
        embeds: Sequence[Embed] | Unset = UNSET,
        allowed_mentions: AllowedMentions | Unset = UNSET,
        message_reference: MessageReference | Unset = UNSET,
        components: Sequence[dict[str, Any]] | Unset = UNSET,
        sticker_ids: Sequence[Snowflake] | Unset = UNSET,
        files: Sequence[FileData] | Unset = UNSET,
        flags: int | Unset = UNSET,
    ) -> Result[Message, RestError]:
        body = {
            "content": content, "nonce": nonce, "tts": tts, "embeds": embeds,
            "allowed_mentions": allowed_mentions, "message_reference": message_reference,
            "components": components, "sticker_ids": sticker_ids, "flags": flags,
        }
        return await self._http.post(
            f"channels/{channel_id}/messages", Message,
            configure=lambda b: b.with_json(body).add_files(files),
        )

    async def crosspost_message(self, channel_id: Snowflake, message_id: Snowflake) -> Result[Message, RestError]:
        return await self._http.post(f"channels/{channel_id}/messages/{message_id}/crosspost", Message)

    async def edit_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        *,
        content: str | None | Unset = UNSET,
        embeds: Sequence[Embed] | None | Unset = UNSET,
        flags: int | None | Unset = UNSET,
        allowed_mentions: AllowedMentions | None | Unset = UNSET,
        components: Sequence[dict[str, Any]] | None | Unset = UNSET,
        files: Sequence[FileData] | Unset = UNSET,
    ) -> Result[Message, RestError]:
        body = {
            "content": content, "embeds": embeds, "flags": flags,
            "allowed_mentions": allowed_mentions, "components": components,
        }
        return await self._http.patch(
            f"channels/{channel_id}/messages/{message_id}", Message,
            configure=lambda b: b.with_json(body).add_files(files),
        )

    async def delete_message(
        self, channel_id: Snowflake, message_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(
            f"channels/{channel_id}/messages/{message_id}", configure=lambda b: b.with_reason(reason),
        )

    async def bulk_delete_messages(
        self, channel_id: Snowflake, message_ids: Sequence[Snowflake], *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.post(
            f"channels/{channel_id}/messages/bulk-delete",
            configure=lambda b: b.with_json({"messages": list(message_ids)}).with_reason(reason),
        )

    # ─── Reactions ───────────────────────────────────────────────────

    async def create_reaction(self, channel_id: Snowflake, message_id: Snowflake, emoji: str) -> Result[None, RestError]:
        return await self._http.put(f"channels/{channel_id}/messages/{message_id}/reactions/{_emoji(emoji)}/@me")

    async def delete_own_reaction(self, channel_id: Snowflake, message_id: Snowflake, emoji: str) -> Result[None, RestError]:
        return await self._http.delete(f"channels/{channel_id}/messages/{message_id}/reactions/{_emoji(emoji)}/@me")

    async def delete_user_reaction(
        self, channel_id: Snowflake, message_id: Snowflake, emoji: str, user_id: Snowflake,
    ) -> Result[None, RestError]:
        return await self._http.delete(
            f"channels/{channel_id}/messages/{message_id}/reactions/{_emoji(emoji)}/{user_id}",
        )

    async def get_reactions(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        emoji: str,
        *,
        after: Snowflake | Unset = UNSET,
        limit: int | Unset = UNSET,
    ) -> Result[list[User], RestError]:
        return await self._http.get(
            f"channels/{channel_id}/messages/{message_id}/reactions/{_emoji(emoji)}", list[User],
            configure=lambda b: b.add_query_parameter("after", after).add_query_parameter("limit", limit),
        )

    async def delete_all_reactions(self, channel_id: Snowflake, message_id: Snowflake) -> Result[None, RestError]:
        return await self._http.delete(f"channels/{channel_id}/messages/{message_id}/reactions")

    async def delete_all_reactions_for_emoji(
        self, channel_id: Snowflake, message_id: Snowflake, emoji: str,
    ) -> Result[None, RestError]:
        return await self._http.delete(f"channels/{channel_id}/messages/{message_id}/reactions/{_emoji(emoji)}")

    # ─── Permissions & invites ───────────────────────────────────────

    async def edit_channel_permissions(
        self,
        channel_id: Snowflake,
        overwrite_id: Snowflake,
        *,
        type: PermissionOverwriteType,  # noqa: A002
        allow: str | None | Unset = UNSET,
        deny: str | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.put(
            f"channels/{channel_id}/permissions/{overwrite_id}",
            configure=lambda b: b.with_json({"type": type, "allow": allow, "deny": deny}).with_reason(reason),
        )

    async def delete_channel_permission(
        self, channel_id: Snowflake, overwrite_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(
            f"channels/{channel_id}/permissions/{overwrite_id}", configure=lambda b: b.with_reason(reason),
        )

    async def get_channel_invites(self, channel_id: Snowflake) -> Result[list[Invite], RestError]:
        return await self._http.get(f"channels/{channel_id}/invites", list[Invite])

    async def create_channel_invite(
        self,
        channel_id: Snowflake,
        *,
        max_age: int | Unset = UNSET,
        max_uses: int | Unset = UNSET,
        temporary: bool | Unset = UNSET,
        unique: bool | Unset = UNSET,
        target_type: int | Unset = UNSET,
        target_user_id: Snowflake | Unset = UNSET,
        target_application_id: Snowflake | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Invite, RestError]:
        body = {
            "max_age": max_age, "max_uses": max_uses, "temporary": temporary, "unique": unique,
            "target_type": target_type, "target_user_id": target_user_id,
            "target_application_id": target_application_id,
        }
        return await self._http.post(
            f"channels/{channel_id}/invites", Invite,
            configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def follow_announcement_channel(
        self, channel_id: Snowflake, webhook_channel_id: Snowflake,
    ) -> Result[FollowedChannel, RestError]:
        return await self._http.post(
            f"channels/{channel_id}/followers", FollowedChannel,
            configure=lambda b: b.with_json({"webhook_channel_id": webhook_channel_id}),
        )

    async def trigger_typing_indicator(self, channel_id: Snowflake) -> Result[None, RestError]:
        return await self._http.post(f"channels/{channel_id}/typing")

    # ─── Pins ────────────────────────────────────────────────────────

    async def get_pinned_messages(self, channel_id: Snowflake) -> Result[list[Message], RestError]:
        return await self._http.get(f"channels/{channel_id}/pins", list[Message])

    async def pin_message(
        self, channel_id: Snowflake, message_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.put(f"channels/{channel_id}/pins/{message_id}", configure=lambda b: b.with_reason(reason))

    async def unpin_message(
        self, channel_id: Snowflake, message_id: Snowflake, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(f"channels/{channel_id}/pins/{message_id}", configure=lambda b: b.with_reason(reason))

    # ─── Group DMs ───────────────────────────────────────────────────

    async def group_dm_add_recipient(
        self, channel_id: Snowflake, user_id: Snowflake, access_token: str, *, nick: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.put(
            f"channels/{channel_id}/recipients/{user_id}",
            configure=lambda b: b.with_json({"access_token": access_token, "nick": nick}),
        )

    async def group_dm_remove_recipient(self, channel_id: Snowflake, user_id: Snowflake) -> Result[None, RestError]:
        return await self._http.delete(f"channels/{channel_id}/recipients/{user_id}")

    # ─── Threads ─────────────────────────────────────────────────────

    async def start_thread_from_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        name: str,
        *,
        auto_archive_duration: int | Unset = UNSET,
        rate_limit_per_user: int | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Channel, RestError]:
        body = {"name": name, "auto_archive_duration": auto_archive_duration, "rate_limit_per_user": rate_limit_per_user}
        return await self._http.post(
            f"channels/{channel_id}/messages/{message_id}/threads", Channel,
            configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def start_thread_without_message(
        self,
        channel_id: Snowflake,
        name: str,
        type: ChannelType,  # noqa: A002
        *,
        auto_archive_duration: int | Unset = UNSET,
        invitable: bool | Unset = UNSET,
        rate_limit_per_user: int | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Channel, RestError]:
        body = {
            "name": name, "type": type, "auto_archive_duration": auto_archive_duration,
            "invitable": invitable, "rate_limit_per_user": rate_limit_per_user,
        }
        return await self._http.post(
            f"channels/{channel_id}/threads", Channel,
            configure=lambda b: b.with_json(body).with_reason(reason),
        )

    async def join_thread(self, channel_id: Snowflake) -> Result[None, RestError]:
        return await self._http.put(f"channels/{channel_id}/thread-members/@me")

    async def add_thread_member(self, channel_id: Snowflake, user_id: Snowflake) -> Result[None, RestError]:
        return await self._http.put(f"channels/{channel_id}/thread-members/{user_id}")

    async def leave_thread(self, channel_id: Snowflake) -> Result[None, RestError]:
        return await self._http.delete(f"channels/{channel_id}/thread-members/@me")

    async def remove_thread_member(self, channel_id: Snowflake, user_id: Snowflake) -> Result[None, RestError]:
        return await self._http.delete(f"channels/{channel_id}/thread-members/{user_id}")

    async def get_thread_member(self, channel_id: Snowflake, user_id: Snowflake) -> Result[ThreadMember, RestError]:
        return await self._http.get(f"channels/{channel_id}/thread-members/{user_id}", ThreadMember)

    async def list_thread_members(self, channel_id: Snowflake) -> Result[list[ThreadMember], RestError]:
        return await self._http.get(f"channels/{channel_id}/thread-members", list[ThreadMember])

    async def list_public_archived_threads(
        self, channel_id: Snowflake, *, before: datetime | Unset = UNSET, limit: int | Unset = UNSET,
    ) -> Result[ThreadList, RestError]:
        return await self._http.get(
            f"channels/{channel_id}/threads/archived/public", ThreadList,
            configure=lambda b: b.add_query_parameter("before", before).add_query_parameter("limit", limit),
        )

    async def list_private_archived_threads(
        self, channel_id: Snowflake, *, before: datetime | Unset = UNSET, limit: int | Unset = UNSET,
    ) -> Result[ThreadList, RestError]:
        return await self._http.get(
            f"channels/{channel_id}/threads/archived/private", ThreadList,
            configure=lambda b: b.add_query_parameter("before", before).add_query_parameter("limit", limit),
        )

    async def list_joined_private_archived_threads(
        self, channel_id: Snowflake, *, before: Snowflake | Unset = UNSET, limit: int | Unset = UNSET,
    ) -> Result[ThreadList, RestError]:
        return await self._http.get(
            f"channels/{channel_id}/users/@me/threads/archived/private", ThreadList,
            configure=lambda b: b.add_query_parameter("before", before).add_query_parameter("limit", limit),
        )
