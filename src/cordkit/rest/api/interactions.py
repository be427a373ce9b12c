"""Interaction callback, original response and followup message endpoints."""

from __future__ import annotations

from typing import Any, Sequence

from cordkit.api.objects import AllowedMentions, Embed, InteractionResponse, Message
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset

from ..request import FileData
from .base import RestAPI

ORIGINAL = "@original"


class RestInteractionAPI(RestAPI):
    """All routes are authenticated by the interaction token, not the bot token."""

    __slots__ = ()

    async def create_interaction_response(
        self,
        interaction_id: Snowflake,
        token: str,
        response: InteractionResponse,
        *,
        files: Sequence[FileData] | Unset = UNSET,
    ) -> Result[None, RestError]:
        return await self._http.post(
            f"interactions/{interaction_id}/{token}/callback",
            configure=lambda b: b.with_json(response.model_dump(mode="json", exclude_none=True)).add_files(files).skip_authorization(),
        )

    async def get_original_interaction_response(self, application_id: Snowflake, token: str) -> Result[Message, RestError]:
        return await self._http.get(
            f"webhooks/{application_id}/{token}/messages/{ORIGINAL}", Message,
            configure=lambda b: b.skip_authorization(),
        )

    async def edit_original_interaction_response(
        self,
        application_id: Snowflake,
        token: str,
        *,
        content: str | None | Unset = UNSET,
        embeds: Sequence[Embed] | None | Unset = UNSET,
        allowed_mentions: AllowedMentions | None | Unset = UNSET,
        components: Sequence[dict[str, Any]] | None | Unset = UNSET,
        files: Sequence[FileData] | Unset = UNSET,
    ) -> Result[Message, RestError]:
        body = {"content": content, "embeds": embeds, "allowed_mentions": allowed_mentions, "components": components}
        return await self._http.patch(
            f"webhooks/{application_id}/{token}/messages/{ORIGINAL}", Message,
            configure=lambda b: b.with_json(body).add_files(files).skip_authorization(),
        )

    async def delete_original_interaction_response(self, application_id: Snowflake, token: str) -> Result[None, RestError]:
        return await self._http.delete(
            f"webhooks/{application_id}/{token}/messages/{ORIGINAL}", configure=lambda b: b.skip_authorization(),
        )

    async def create_followup_message(
        self,
        application_id: Snowflake,
        token: str,
        *,
        content: str | Unset = UNSET,
        tts: bool | Unset = UNSET,
        embeds: Sequence[Embed] | Unset = UNSET,
        allowed_mentions: AllowedMentions | Unset = UNSET,
        components: Sequence[dict[str, Any]] | Unset = UNSET,
        files: Sequence[FileData] | Unset = UNSET,
        flags: int | Unset = UNSET,
    ) -> Result[Message, RestError]:
        body = {
            "content": content, "tts": tts, "embeds": embeds, "allowed_mentions": allowed_mentions,
            "components": components, "flags": flags,
        }
        return await self._http.post(
            f"webhooks/{application_id}/{token}", Message,
            configure=lambda b: b.with_json(body).add_files(files).skip_authorization(),
        )

    async def get_followup_message(
        self, application_id: Snowflake, token: str, message_id: Snowflake,
    ) -> Result[Message, RestError]:
        return await self._http.get(
            f"webhooks/{application_id}/{token}/messages/{message_id}", Message,
            configure=lambda b: b.skip_authorization(),
        )

    async def edit_followup_message(
        self,
        application_id: Snowflake,
        token: str,
        message_id: Snowflake,
        *,
        content: str | None | Unset = UNSET,
        embeds: Sequence[Embed] | None | Unset = UNSET,
        allowed_mentions: AllowedMentions | None | Unset = UNSET,
        components: Sequence[dict[str, Any]] | None | Unset = UNSET,
        files: Sequence[FileData] | Unset = UNSET,
    ) -> Result[Message, RestError]:
        body = {"content": content, "embeds": embeds, "allowed_mentions": allowed_mentions, "components": components}
        return await self._http.patch(
            f"webhooks/{application_id}/{token}/messages/{message_id}", Message,
            configure=lambda b: b.with_json(body).add_files(files).skip_authorization(),
        )

    async def delete_followup_message(
        self, application_id: Snowflake, token: str, message_id: Snowflake,
    ) -> Result[None, RestError]:
        return await self._http.delete(
            f"webhooks/{application_id}/{token}/messages/{message_id}", configure=lambda b: b.skip_authorization(),
        )
