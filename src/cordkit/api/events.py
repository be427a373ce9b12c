"""Decoded gateway dispatch events.

Only the events the cache responders consume are modelled. Events that carry
a full entity subclass that entity's model, so they can be cached as-is.
"""

from __future__ import annotations

from datetime import datetime

from cordkit.foundation import Snowflake

from .objects import Channel, Emoji, Guild, GuildMember, Interaction, Message, Presence, Role, User
from .objects.base import DiscordModel


class ChannelCreate(Channel):
    pass


class ChannelUpdate(Channel):
    pass


class ChannelDelete(Channel):
    pass


class GuildCreate(Guild):
    pass


class GuildDelete(DiscordModel):
    id: Snowflake
    unavailable: bool | None = None


class GuildBanAdd(DiscordModel):
    guild_id: Snowflake
    user: User


class GuildBanRemove(DiscordModel):
    guild_id: Snowflake
    user: User


class GuildEmojisUpdate(DiscordModel):
    guild_id: Snowflake
    emojis: list[Emoji]


class GuildMemberAdd(GuildMember):
    guild_id: Snowflake


class GuildMemberUpdate(DiscordModel):
    """Partial member update; fields absent from the payload stay unset."""
    guild_id: Snowflake
    roles: list[Snowflake]
    user: User
    nick: str | None = None
    avatar: str | None = None
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    deaf: bool | None = None
    mute: bool | None = None
    pending: bool | None = None
    communication_disabled_until: datetime | None = None
    flags: int | None = None


class GuildMemberRemove(DiscordModel):
    guild_id: Snowflake
    user: User


class GuildMembersChunk(DiscordModel):
    guild_id: Snowflake
    members: list[GuildMember]
    chunk_index: int
    chunk_count: int
    not_found: list[Snowflake] | None = None
    presences: list[Presence] | None = None
    nonce: str | None = None


class GuildRoleCreate(DiscordModel):
    guild_id: Snowflake
    role: Role


class GuildRoleUpdate(DiscordModel):
    guild_id: Snowflake
    role: Role


class GuildRoleDelete(DiscordModel):
    guild_id: Snowflake
    role_id: Snowflake


class InviteDelete(DiscordModel):
    channel_id: Snowflake
    guild_id: Snowflake | None = None
    code: str


class MessageCreate(Message):
    guild_id: Snowflake | None = None
    member: GuildMember | None = None


class MessageDelete(DiscordModel):
    id: Snowflake
    channel_id: Snowflake
    guild_id: Snowflake | None = None


class MessageDeleteBulk(DiscordModel):
    ids: list[Snowflake]
    channel_id: Snowflake
    guild_id: Snowflake | None = None


class MessageReactionAdd(DiscordModel):
    user_id: Snowflake
    channel_id: Snowflake
    message_id: Snowflake
    guild_id: Snowflake | None = None
    member: GuildMember | None = None
    emoji: Emoji
    message_author_id: Snowflake | None = None


class UserUpdate(User):
    pass


class InteractionCreate(Interaction):
    pass


GatewayEvent = (
    ChannelCreate | ChannelUpdate | ChannelDelete
    | GuildCreate | GuildDelete | GuildBanAdd | GuildBanRemove | GuildEmojisUpdate
    | GuildMemberAdd | GuildMemberUpdate | GuildMemberRemove | GuildMembersChunk
    | GuildRoleCreate | GuildRoleUpdate | GuildRoleDelete
    | InviteDelete | MessageCreate | MessageDelete | MessageDeleteBulk | MessageReactionAdd
    | UserUpdate | InteractionCreate
)

# Dispatch name (the "t" field of a gateway payload) -> event model
EVENT_TYPES: dict[str, type[DiscordModel]] = {
    "CHANNEL_CREATE": ChannelCreate,
    "CHANNEL_UPDATE": ChannelUpdate,
    "CHANNEL_DELETE": ChannelDelete,
    "GUILD_CREATE": GuildCreate,
    "GUILD_DELETE": GuildDelete,
    "GUILD_BAN_ADD": GuildBanAdd,
    "GUILD_BAN_REMOVE": GuildBanRemove,
    "GUILD_EMOJIS_UPDATE": GuildEmojisUpdate,
    "GUILD_MEMBER_ADD": GuildMemberAdd,
    "GUILD_MEMBER_UPDATE": GuildMemberUpdate,
    "GUILD_MEMBER_REMOVE": GuildMemberRemove,
    "GUILD_MEMBERS_CHUNK": GuildMembersChunk,
    "GUILD_ROLE_CREATE": GuildRoleCreate,
    "GUILD_ROLE_UPDATE": GuildRoleUpdate,
    "GUILD_ROLE_DELETE": GuildRoleDelete,
    "INVITE_DELETE": InviteDelete,
    "MESSAGE_CREATE": MessageCreate,
    "MESSAGE_DELETE": MessageDelete,
    "MESSAGE_DELETE_BULK": MessageDeleteBulk,
    "MESSAGE_REACTION_ADD": MessageReactionAdd,
    "USER_UPDATE": UserUpdate,
    "INTERACTION_CREATE": InteractionCreate,
}


def parse_event(name: str, data: dict) -> DiscordModel | None:
    """Decode a dispatch payload's ``d`` field; None for events not modelled here."""
    model = EVENT_TYPES.get(name)
    return model.model_validate(data) if model is not None else None
