"""Application and application command endpoints."""

from __future__ import annotations

from typing import Any, Sequence

from cordkit.api.objects import Application, ApplicationCommand, ApplicationCommandOption, ApplicationCommandType
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset

from .base import RestAPI


def _command_body(
    name: str | Unset,
    description: str | Unset,
    options: Sequence[ApplicationCommandOption] | Unset,
    type_: ApplicationCommandType | Unset,
    default_member_permissions: str | None | Unset,
    nsfw: bool | Unset,
    name_localizations: dict[str, str] | None | Unset,
    description_localizations: dict[str, str] | None | Unset,
) -> dict[str, Any]:
    return {
        "name": name, "description": description, "options": options, "type": type_,
        "default_member_permissions": default_member_permissions, "nsfw": nsfw,
        "name_localizations": name_localizations, "description_localizations": description_localizations,
    }


class RestApplicationAPI(RestAPI):
    __slots__ = ()

    async def get_current_application(self) -> Result[Application, RestError]:
        return await self._http.get("applications/@me", Application)

    # ─── Global commands ─────────────────────────────────────────────

    async def get_global_application_commands(
        self, application_id: Snowflake, *, with_localizations: bool | Unset = UNSET,
    ) -> Result[list[ApplicationCommand], RestError]:
        return await self._http.get(
            f"applications/{application_id}/commands", list[ApplicationCommand],
            configure=lambda b: b.add_query_parameter("with_localizations", with_localizations),
        )

    async def create_global_application_command(
        self,
        application_id: Snowflake,
        name: str,
        *,
        description: str | Unset = UNSET,
        options: Sequence[ApplicationCommandOption] | Unset = UNSET,
        type: ApplicationCommandType | Unset = UNSET,  # noqa: A002
        default_member_permissions: str | None | Unset = UNSET,
        nsfw: bool | Unset = UNSET,
        name_localizations: dict[str, str] | None | Unset = UNSET,
        description_localizations: dict[str, str] | None | Unset = UNSET,
    ) -> Result[ApplicationCommand, RestError]:
        body = _command_body(name, description, options, type, default_member_permissions, nsfw,
                             name_localizations, description_localizations)
        return await self._http.post(
            f"applications/{application_id}/commands", ApplicationCommand, configure=lambda b: b.with_json(body),
        )

    async def get_global_application_command(
        self, application_id: Snowflake, command_id: Snowflake,
    ) -> Result[ApplicationCommand, RestError]:
        return await self._http.get(f"applications/{application_id}/commands/{command_id}", ApplicationCommand)

    async def edit_global_application_command(
        self,
        application_id: Snowflake,
        command_id: Snowflake,
        *,
        name: str | Unset = UNSET,
        description: str | Unset = UNSET,
        options: Sequence[ApplicationCommandOption] | Unset = UNSET,
        default_member_permissions: str | None | Unset = UNSET,
        nsfw: bool | Unset = UNSET,
        name_localizations: dict[str, str] | None | Unset = UNSET,
        description_localizations: dict[str, str] | None | Unset = UNSET,
    ) -> Result[ApplicationCommand, RestError]:
        body = _command_body(name, description, options, UNSET, default_member_permissions, nsfw,
                             name_localizations, description_localizations)
        return await self._http.patch(
            f"applications/{application_id}/commands/{command_id}", ApplicationCommand,
            configure=lambda b: b.with_json(body),
        )

    async def delete_global_application_command(
        self, application_id: Snowflake, command_id: Snowflake,
    ) -> Result[None, RestError]:
        return await self._http.delete(f"applications/{application_id}/commands/{command_id}")

    async def bulk_overwrite_global_application_commands(
        self, application_id: Snowflake, commands: Sequence[dict[str, Any]],
    ) -> Result[list[ApplicationCommand], RestError]:
        return await self._http.put(
            f"applications/{application_id}/commands", list[ApplicationCommand],
            configure=lambda b: b.with_json_array(commands),
        )

    # ─── Guild commands ──────────────────────────────────────────────

    async def get_guild_application_commands(
        self, application_id: Snowflake, guild_id: Snowflake, *, with_localizations: bool | Unset = UNSET,
    ) -> Result[list[ApplicationCommand], RestError]:
        return await self._http.get(
            f"applications/{application_id}/guilds/{guild_id}/commands", list[ApplicationCommand],
            configure=lambda b: b.add_query_parameter("with_localizations", with_localizations),
        )

    async def create_guild_application_command(
        self,
        application_id: Snowflake,
        guild_id: Snowflake,
        name: str,
        *,
        description: str | Unset = UNSET,
        options: Sequence[ApplicationCommandOption] | Unset = UNSET,
        type: ApplicationCommandType | Unset = UNSET,  # noqa: A002
        default_member_permissions: str | None | Unset = UNSET,
        nsfw: bool | Unset = UNSET,
        name_localizations: dict[str, str] | None | Unset = UNSET,
        description_localizations: dict[str, str] | None | Unset = UNSET,
    ) -> Result[ApplicationCommand, RestError]:
        body = _command_body(name, description, options, type, default_member_permissions, nsfw,
                             name_localizations, description_localizations)
        return await self._http.post(
            f"applications/{application_id}/guilds/{guild_id}/commands", ApplicationCommand,
            configure=lambda b: b.with_json(body),
        )

    async def edit_guild_application_command(
        self,
        application_id: Snowflake,
        guild_id: Snowflake,
        command_id: Snowflake,
        *,
        name: str | Unset = UNSET,
        description: str | Unset = UNSET,
        options: Sequence[ApplicationCommandOption] | Unset = UNSET,
        default_member_permissions: str | None | Unset = UNSET,
        nsfw: bool | Unset = UNSET,
    ) -> Result[ApplicationCommand, RestError]:
        body = _command_body(name, description, options, UNSET, default_member_permissions, nsfw, UNSET, UNSET)
        return await self._http.patch(
            f"applications/{application_id}/guilds/{guild_id}/commands/{command_id}", ApplicationCommand,
            configure=lambda b: b.with_json(body),
        )

    async def delete_guild_application_command(
        self, application_id: Snowflake, guild_id: Snowflake, command_id: Snowflake,
    ) -> Result[None, RestError]:
        return await self._http.delete(f"applications/{application_id}/guilds/{guild_id}/commands/{command_id}")

    async def bulk_overwrite_guild_application_commands(
        self, application_id: Snowflake, guild_id: Snowflake, commands: Sequence[dict[str, Any]],
    ) -> Result[list[ApplicationCommand], RestError]:
        return await self._http.put(
            f"applications/{application_id}/guilds/{guild_id}/commands", list[ApplicationCommand],
            configure=lambda b: b.with_json_array(commands),
        )
