"""Payload builders shared by the test modules."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from cordkit.api.objects import Channel, ChannelType, Emoji, Guild, GuildMember, Message, Role, User
from cordkit.foundation import Snowflake

NOW = datetime(2024, 1, 1, tzinfo=UTC)


def user(id: int = 1, name: str = "alice", **kwargs: Any) -> User:  # noqa: A002
    return User(id=Snowflake(id), username=name, **kwargs)


def channel(id: int = 10, type: ChannelType = ChannelType.GUILD_TEXT, **kwargs: Any) -> Channel:  # noqa: A002
    return Channel(id=Snowflake(id), type=type, name=kwargs.pop("name", "general"), **kwargs)


def message(id: int = 100, channel_id: int = 10, author: User | None = None, **kwargs: Any) -> Message:  # noqa: A002
    return Message(
        id=Snowflake(id), channel_id=Snowflake(channel_id), author=author or user(), timestamp=NOW, **kwargs,
    )


def member(user_id: int = 1, **kwargs: Any) -> GuildMember:
    return GuildMember(user=user(user_id, f"user{user_id}"), joined_at=NOW, **kwargs)


def role(id: int = 50, name: str = "mods", **kwargs: Any) -> Role:  # noqa: A002
    return Role(id=Snowflake(id), name=name, **kwargs)


def emoji(id: int = 70, name: str = "blob", **kwargs: Any) -> Emoji:  # noqa: A002
    return Emoji(id=Snowflake(id), name=name, **kwargs)


def guild(id: int = 5, **kwargs: Any) -> Guild:  # noqa: A002
    return Guild(id=Snowflake(id), name=kwargs.pop("name", "Guild"), **kwargs)
