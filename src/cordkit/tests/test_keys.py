"""Tests for cache key canonical forms and value types."""

from __future__ import annotations

import pytest

from cordkit.api.objects import Channel, GuildMember, Message, Role
from cordkit.caching import EvictedKey, LocalizedStringKey, StringKey, evicted
from cordkit.caching.keys import (
    ChannelKey,
    CurrentUserKey,
    EmojiKey,
    FollowupMessageKey,
    GuildMemberKey,
    GuildMembersKey,
    GuildRolesKey,
    MessageKey,
    OriginalInteractionMessageKey,
    PermissionOverwriteKey,
    PinnedMessagesKey,
    ThreadMemberKey,
    UserKey,
    WebhookMessageKey,
)
from cordkit.foundation import Snowflake

S = Snowflake


@pytest.mark.parametrize(("key", "expected"), [
    (StringKey("hello"), "hello"),
    (LocalizedStringKey("app", "hello"), "app:hello"),
    (ChannelKey(S(1)), "Channel:1"),
    (MessageKey(S(1), S(2)), "Channel:1:Message:2"),
    (PinnedMessagesKey(S(1)), "Channel:1:Pins"),
    (PermissionOverwriteKey(S(1), S(3)), "Channel:1:Overwrite:3"),
    (ThreadMemberKey(S(1), S(4)), "Channel:1:Member:4"),
    (UserKey(S(9)), "User:9"),
    (CurrentUserKey(), "User:@me"),
    (EmojiKey(S(5), S(6)), "Guild:5:Emoji:6"),
    (GuildMemberKey(S(5), S(9)), "Guild:5:Member:9"),
    (GuildMembersKey(S(5)), "Guild:5:Members"),
    (GuildMembersKey(S(5), 100, S(7)), "Guild:5:Members:Limit:100:After:7"),
    (WebhookMessageKey(S(8), "tok", S(2)), "Webhook:8:tok:Message:2"),
    (OriginalInteractionMessageKey("tok"), "Interaction:tok:Message:@original"),
    (FollowupMessageKey("tok", S(2)), "Interaction:tok:Message:2"),
    (evicted(ChannelKey(S(1))), "Evicted:Channel:1"),
])
def test_canonical_strings(key: object, expected: str) -> None:
    assert str(key) == expected


def test_keys_compare_by_type_and_value() -> None:
    assert ChannelKey(S(1)) == ChannelKey(S(1))
    assert hash(ChannelKey(S(1))) == hash(ChannelKey(S(1)))
    assert ChannelKey(S(1)) != UserKey(S(1))
    assert len({MessageKey(S(1), S(2)), MessageKey(S(1), S(2)), MessageKey(S(1), S(3))}) == 2


def test_keys_are_immutable() -> None:
    key = ChannelKey(S(1))
    with pytest.raises(AttributeError):
        key.channel_id = S(2)  # type: ignore[misc]


def test_value_types() -> None:
    assert ChannelKey.value_type is Channel
    assert MessageKey(S(1), S(2)).value_type is Message
    assert GuildMemberKey.value_type is GuildMember
    assert GuildRolesKey(S(1)).value_type == list[Role]


def test_evicted_key_inherits_value_type() -> None:
    key = evicted(MessageKey(S(1), S(2)))
    assert isinstance(key, EvictedKey)
    assert key.value_type is Message
    assert key != MessageKey(S(1), S(2))
