"""Tests for request building and JSON conversion."""

from __future__ import annotations

from datetime import timedelta

import orjson
import pytest

from cordkit.api.objects import AllowedMentions, PermissionOverwriteType
from cordkit.foundation import UNSET, Snowflake
from cordkit.rest import AUDIT_LOG_REASON, FileData, RestRequestBuilder, to_json


def test_to_json_converts_nested_values() -> None:
    payload = to_json({
        "id": Snowflake(5),
        "kind": PermissionOverwriteType.MEMBER,
        "duration": timedelta(minutes=2),
        "ids": (Snowflake(1), Snowflake(2)),
        "mentions": AllowedMentions(parse=["users"]),
        "skip": UNSET,
        "clear": None,
    })
    assert payload == {
        "id": "5",
        "kind": 1,
        "duration": 120,
        "ids": ["1", "2"],
        "mentions": {"parse": ["users"]},
        "clear": None,
    }
    assert "skip" not in payload


def test_builder_drops_unset_and_keeps_null() -> None:
    request = (
        RestRequestBuilder("channels/1", "PATCH")
        .with_json({"name": "x", "topic": None, "nsfw": UNSET})
        .build()
    )
    assert request.method == "PATCH"
    assert request.json == {"name": "x", "topic": None}


def test_with_json_merges() -> None:
    request = RestRequestBuilder("x", "POST").with_json({"a": 1}).with_json({"b": 2}).build()
    assert request.json == {"a": 1, "b": 2}


def test_json_object_and_array_are_exclusive() -> None:
    builder = RestRequestBuilder("x", "PUT").with_json_array([1, 2])
    with pytest.raises(ValueError):
        builder.with_json({"a": 1})
    with pytest.raises(ValueError):
        RestRequestBuilder("x", "PUT").with_json({"a": 1}).with_json_array([1])


def test_query_parameters() -> None:
    request = (
        RestRequestBuilder("guilds/1/members")
        .add_query_parameter("limit", 100)
        .add_query_parameter("after", Snowflake(9))
        .add_query_parameter("with_counts", True)
        .add_query_parameter("before", UNSET)
        .add_query_parameter("around", None)
        .build()
    )
    assert request.params == (("limit", "100"), ("after", "9"), ("with_counts", "true"))


def test_reason_is_url_encoded() -> None:
    request = RestRequestBuilder("x", "DELETE").with_reason("spam & abuse").build()
    assert request.headers[AUDIT_LOG_REASON] == "spam %26 abuse"
    assert AUDIT_LOG_REASON not in RestRequestBuilder("x").with_reason(UNSET).build().headers


def test_skip_authorization() -> None:
    assert RestRequestBuilder("x").build().authorize
    assert not RestRequestBuilder("x").skip_authorization().build().authorize


def test_to_httpx_json_body() -> None:
    kwargs = RestRequestBuilder("x", "POST").with_json({"content": "hi"}).build().to_httpx()
    assert orjson.loads(kwargs["content"]) == {"content": "hi"}
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["params"] is None


def test_to_httpx_multipart_with_files() -> None:
    request = (
        RestRequestBuilder("channels/1/messages", "POST")
        .with_json({"content": "see attached"})
        .add_files([FileData("a.txt", b"hello", description="greeting")])
        .build()
    )
    kwargs = request.to_httpx()
    payload = orjson.loads(kwargs["data"]["payload_json"])
    assert payload["content"] == "see attached"
    assert payload["attachments"] == [{"id": 0, "filename": "a.txt", "description": "greeting"}]
    assert kwargs["files"] == [("files[0]", ("a.txt", b"hello", "application/octet-stream"))]
    assert "content" not in kwargs
