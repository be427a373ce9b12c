"""Applications, OAuth2 authorization info and application commands."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from pydantic import Field

from cordkit.foundation import Snowflake

from .base import DiscordModel
from .users import User


class TeamMember(DiscordModel):
    membership_state: int
    team_id: Snowflake
    user: User
    role: str = "admin"


class Team(DiscordModel):
    id: Snowflake
    icon: str | None = None
    name: str
    owner_user_id: Snowflake
    members: list[TeamMember] = Field(default_factory=list)


class Application(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    description: str = ""
    rpc_origins: list[str] | None = None
    bot_public: bool = True
    bot_require_code_grant: bool = False
    bot: User | None = None
    terms_of_service_url: str | None = None
    privacy_policy_url: str | None = None
    owner: User | None = None
    verify_key: str | None = None
    team: Team | None = None
    guild_id: Snowflake | None = None
    cover_image: str | None = None
    flags: int | None = None
    approximate_guild_count: int | None = None
    tags: list[str] | None = None
    custom_install_url: str | None = None


class AuthorizationInformation(DiscordModel):
    application: Application
    scopes: list[str]
    expires: datetime
    user: User | None = None


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class ApplicationCommandOptionType(IntEnum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class ApplicationCommandOptionChoice(DiscordModel):
    name: str
    name_localizations: dict[str, str] | None = None
    value: str | int | float


class ApplicationCommandOption(DiscordModel):
    type: ApplicationCommandOptionType
    name: str
    description: str
    name_localizations: dict[str, str] | None = None
    description_localizations: dict[str, str] | None = None
    required: bool | None = None
    choices: list[ApplicationCommandOptionChoice] | None = None
    options: list[ApplicationCommandOption] | None = None
    channel_types: list[int] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    autocomplete: bool | None = None


class ApplicationCommand(DiscordModel):
    id: Snowflake
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    application_id: Snowflake
    guild_id: Snowflake | None = None
    name: str
    name_localizations: dict[str, str] | None = None
    description: str = ""
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommandOption] | None = None
    default_member_permissions: str | None = None
    nsfw: bool | None = None
    version: Snowflake

