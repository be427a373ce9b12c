from __future__ import annotations

from typing import Any

from cordkit.api.objects import Message, Webhook
from cordkit.foundation import RestError, Result, Snowflake
from cordkit.rest.api import RestWebhookAPI

from ..keys import ChannelWebhooksKey, GuildWebhooksKey, MessageKey, WebhookKey, WebhookMessageKey
from .base import CachingAPI


def _webhook_key(webhook: Webhook) -> WebhookKey:
    return WebhookKey(webhook.id)


class CachingWebhookAPI(CachingAPI[RestWebhookAPI]):
    __slots__ = ()

    async def create_webhook(self, channel_id: Snowflake, name: str, **kwargs: Any) -> Result[Webhook, RestError]:
        result = await self._inner.create_webhook(channel_id, name, **kwargs)
        await self._store(result, _webhook_key)
        return await self._evict(result, ChannelWebhooksKey(channel_id))

    async def get_channel_webhooks(self, channel_id: Snowflake) -> Result[list[Webhook], RestError]:
        return await self._read_through_collection(
            ChannelWebhooksKey(channel_id), lambda: self._inner.get_channel_webhooks(channel_id), _webhook_key,
        )

    async def get_guild_webhooks(self, guild_id: Snowflake) -> Result[list[Webhook], RestError]:
        return await self._read_through_collection(
            GuildWebhooksKey(guild_id), lambda: self._inner.get_guild_webhooks(guild_id), _webhook_key,
        )

    async def get_webhook(self, webhook_id: Snowflake) -> Result[Webhook, RestError]:
        return await self._read_through(WebhookKey(webhook_id), lambda: self._inner.get_webhook(webhook_id))

    async def get_webhook_with_token(self, webhook_id: Snowflake, token: str) -> Result[Webhook, RestError]:
        return await self._read_through(
            WebhookKey(webhook_id), lambda: self._inner.get_webhook_with_token(webhook_id, token),
        )

    async def modify_webhook(self, webhook_id: Snowflake, **kwargs: Any) -> Result[Webhook, RestError]:
        result = await self._inner.modify_webhook(webhook_id, **kwargs)
        return await self._store(result, _webhook_key)

    async def modify_webhook_with_token(self, webhook_id: Snowflake, token: str, **kwargs: Any) -> Result[Webhook, RestError]:
        result = await self._inner.modify_webhook_with_token(webhook_id, token, **kwargs)
        return await self._store(result, _webhook_key)

    async def delete_webhook(self, webhook_id: Snowflake, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.delete_webhook(webhook_id, **kwargs)
        return await self._evict(result, WebhookKey(webhook_id))

    async def delete_webhook_with_token(self, webhook_id: Snowflake, token: str, **kwargs: Any) -> Result[None, RestError]:
        result = await self._inner.delete_webhook_with_token(webhook_id, token, **kwargs)
        return await self._evict(result, WebhookKey(webhook_id))

    async def execute_webhook(self, webhook_id: Snowflake, token: str, **kwargs: Any) -> Result[Message | None, RestError]:
        """The created message is cached when the call waited for it."""
        result = await self._inner.execute_webhook(webhook_id, token, **kwargs)
        return await self._store(
            result, lambda m: (MessageKey(m.channel_id, m.id), WebhookMessageKey(webhook_id, token, m.id)),
        )

    async def get_webhook_message(
        self, webhook_id: Snowflake, token: str, message_id: Snowflake, **kwargs: Any,
    ) -> Result[Message, RestError]:
        return await self._read_through(
            WebhookMessageKey(webhook_id, token, message_id),
            lambda: self._inner.get_webhook_message(webhook_id, token, message_id, **kwargs),
        )

    async def edit_webhook_message(
        self, webhook_id: Snowflake, token: str, message_id: Snowflake, **kwargs: Any,
    ) -> Result[Message, RestError]:
        result = await self._inner.edit_webhook_message(webhook_id, token, message_id, **kwargs)
        return await self._store(
            result, lambda m: (WebhookMessageKey(webhook_id, token, message_id), MessageKey(m.channel_id, m.id)),
        )

    async def delete_webhook_message(
        self, webhook_id: Snowflake, token: str, message_id: Snowflake, **kwargs: Any,
    ) -> Result[None, RestError]:
        result = await self._inner.delete_webhook_message(webhook_id, token, message_id, **kwargs)
        return await self._evict(result, WebhookMessageKey(webhook_id, token, message_id))
