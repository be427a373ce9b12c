"""Webhook endpoints, including token-authenticated execution and message editing."""

from __future__ import annotations

from typing import Any, Sequence

from cordkit.api.objects import AllowedMentions, Embed, Message, Webhook
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset

from ..request import FileData
from .base import RestAPI


class RestWebhookAPI(RestAPI):
    """Endpoints under ``/webhooks`` plus the channel/guild webhook listings.

    Routes that embed the webhook token are sent without the bot Authorization
    header.
    """

    __slots__ = ()

    async def create_webhook(
        self,
        channel_id: Snowflake,
        name: str,
        *,
        avatar: str | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Webhook, RestError]:
        return await self._http.post(
            f"channels/{channel_id}/webhooks", Webhook,
            configure=lambda b: b.with_json({"name": name, "avatar": avatar}).with_reason(reason),
        )

    async def get_channel_webhooks(self, channel_id: Snowflake) -> Result[list[Webhook], RestError]:
        return await self._http.get(f"channels/{channel_id}/webhooks", list[Webhook])

    async def get_guild_webhooks(self, guild_id: Snowflake) -> Result[list[Webhook], RestError]:
        return await self._http.get(f"guilds/{guild_id}/webhooks", list[Webhook])

    async def get_webhook(self, webhook_id: Snowflake) -> Result[Webhook, RestError]:
        return await self._http.get(f"webhooks/{webhook_id}", Webhook)

    async def get_webhook_with_token(self, webhook_id: Snowflake, token: str) -> Result[Webhook, RestError]:
        return await self._http.get(
            f"webhooks/{webhook_id}/{token}", Webhook, configure=lambda b: b.skip_authorization(),
        )

    async def modify_webhook(
        self,
        webhook_id: Snowflake,
        *,
        name: str | Unset = UNSET,
        avatar: str | None | Unset = UNSET,
        channel_id: Snowflake | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Webhook, RestError]:
        return await self._http.patch(
            f"webhooks/{webhook_id}", Webhook,
            configure=lambda b: b.with_json({"name": name, "avatar": avatar, "channel_id": channel_id}).with_reason(reason),
        )

    async def modify_webhook_with_token(
        self,
        webhook_id: Snowflake,
        token: str,
        *,
        name: str | Unset = UNSET,
        avatar: str | None | Unset = UNSET,
        reason: str | Unset = UNSET,
    ) -> Result[Webhook, RestError]:
        return await self._http.patch(
            f"webhooks/{webhook_id}/{token}", Webhook,
            configure=lambda b: b.with_json({"name": name, "avatar": avatar}).with_reason(reason).skip_authorization(),
        )

    async def delete_webhook(self, webhook_id: Snowflake, *, reason: str | Unset = UNSET) -> Result[None, RestError]:
        return await self._http.delete(f"webhooks/{webhook_id}", configure=lambda b: b.with_reason(reason))

    async def delete_webhook_with_token(
        self, webhook_id: Snowflake, token: str, *, reason: str | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(
            f"webhooks/{webhook_id}/{token}", configure=lambda b: b.with_reason(reason).skip_authorization(),
        )

    async def execute_webhook(
        self,
        webhook_id: Snowflake,
        token: str,
        *,
        wait: bool | Unset = UNSET,
        thread_id: Snowflake | Unset = UNSET,
        content: str | Unset = UNSET,
        username: str | Unset = UNSET,
        avatar_url: str | Unset = UNSET,
        tts: bool | Unset = UNSET,
        embeds: Sequence[Embed] | Unset = UNSET,
        allowed_mentions: AllowedMentions | Unset = UNSET,
        components: Sequence[dict[str, Any]] | Unset = UNSET,
        files: Sequence[FileData] | Unset = UNSET,
        flags: int | Unset = UNSET,
        thread_name: str | Unset = UNSET,
    ) -> Result[Message | None, RestError]:
        """Execute the webhook. The created message is only returned when ``wait`` is true."""
        body = {
            "content": content, "username": username, "avatar_url": avatar_url, "tts": tts,
            "embeds": embeds, "allowed_mentions": allowed_mentions, "components": components,
            "flags": flags, "thread_name": thread_name,
        }
        return await self._http.post(
            f"webhooks/{webhook_id}/{token}", Message,
            configure=lambda b: (
                b.add_query_parameter("wait", wait)
                .add_query_parameter("thread_id", thread_id)
                .with_json(body)
                .add_files(files)
                .skip_authorization()
            ),
            allow_null=True,
        )

    async def get_webhook_message(
        self, webhook_id: Snowflake, token: str, message_id: Snowflake, *, thread_id: Snowflake | Unset = UNSET,
    ) -> Result[Message, RestError]:
        return await self._http.get(
            f"webhooks/{webhook_id}/{token}/messages/{message_id}", Message,
            configure=lambda b: b.add_query_parameter("thread_id", thread_id).skip_authorization(),
        )

    async def edit_webhook_message(
        self,
        webhook_id: Snowflake,
        token: str,
        message_id: Snowflake,
        *,
        thread_id: Snowflake | Unset = UNSET,
        content: str | None | Unset = UNSET,
        embeds: Sequence[Embed] | None | Unset = UNSET,
        allowed_mentions: AllowedMentions | None | Unset = UNSET,
        components: Sequence[dict[str, Any]] | None | Unset = UNSET,
        files: Sequence[FileData] | Unset = UNSET,
    ) -> Result[Message, RestError]:
        body = {"content": content, "embeds": embeds, "allowed_mentions": allowed_mentions, "components": components}
        return await self._http.patch(
            f"webhooks/{webhook_id}/{token}/messages/{message_id}", Message,
            configure=lambda b: (
                b.add_query_parameter("thread_id", thread_id).with_json(body).add_files(files).skip_authorization()
            ),
        )

    async def delete_webhook_message(
        self, webhook_id: Snowflake, token: str, message_id: Snowflake, *, thread_id: Snowflake | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.delete(
            f"webhooks/{webhook_id}/{token}/messages/{message_id}",
            configure=lambda b: b.add_query_parameter("thread_id", thread_id).skip_authorization(),
        )
