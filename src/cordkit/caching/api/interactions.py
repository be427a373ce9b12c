from __future__ import annotations

from typing import Any

from cordkit.api.objects import Message
from cordkit.foundation import RestError, Result, Snowflake
from cordkit.rest.api import RestInteractionAPI

from ..keys import FollowupMessageKey, MessageKey, OriginalInteractionMessageKey
from .base import CachingAPI


class CachingInteractionAPI(CachingAPI[RestInteractionAPI]):
    """Interaction messages are stored under their token-scoped key and as plain messages."""

    __slots__ = ()

    async def get_original_interaction_response(self, application_id: Snowflake, token: str) -> Result[Message, RestError]:
        return await self._read_through(
            OriginalInteractionMessageKey(token),
            lambda: self._inner.get_original_interaction_response(application_id, token),
            lambda m: MessageKey(m.channel_id, m.id),
        )

    async def edit_original_interaction_response(
        self, application_id: Snowflake, token: str, **kwargs: Any,
    ) -> Result[Message, RestError]:
        result = await self._inner.edit_original_interaction_response(application_id, token, **kwargs)
        return await self._store(result, lambda m: (OriginalInteractionMessageKey(token), MessageKey(m.channel_id, m.id)))

    async def delete_original_interaction_response(self, application_id: Snowflake, token: str) -> Result[None, RestError]:
        result = await self._inner.delete_original_interaction_response(application_id, token)
        return await self._evict(result, OriginalInteractionMessageKey(token))

    async def create_followup_message(self, application_id: Snowflake, token: str, **kwargs: Any) -> Result[Message, RestError]:
        result = await self._inner.create_followup_message(application_id, token, **kwargs)
        return await self._store(result, lambda m: (FollowupMessageKey(token, m.id), MessageKey(m.channel_id, m.id)))

    async def get_followup_message(
        self, application_id: Snowflake, token: str, message_id: Snowflake,
    ) -> Result[Message, RestError]:
        return await self._read_through(
            FollowupMessageKey(token, message_id),
            lambda: self._inner.get_followup_message(application_id, token, message_id),
        )

    async def edit_followup_message(
        self, application_id: Snowflake, token: str, message_id: Snowflake, **kwargs: Any,
    ) -> Result[Message, RestError]:
        result = await self._inner.edit_followup_message(application_id, token, message_id, **kwargs)
        return await self._store(result, lambda m: (FollowupMessageKey(token, message_id), MessageKey(m.channel_id, m.id)))

    async def delete_followup_message(
        self, application_id: Snowflake, token: str, message_id: Snowflake,
    ) -> Result[None, RestError]:
        result = await self._inner.delete_followup_message(application_id, token, message_id)
        return await self._evict(result, FollowupMessageKey(token, message_id))
