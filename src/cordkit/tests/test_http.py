"""Tests for the HTTP transport and REST endpoint groups using httpx.MockTransport."""

from __future__ import annotations

from typing import Callable

import httpx
import orjson
import pytest

from cordkit.api.objects import Channel, ChannelType, Message, User
from cordkit.foundation import ErrorCode, Snowflake
from cordkit.foundation.config import RestSettings
from cordkit.rest import BearerAuth, ConstantBackoff, RestClient, RestHttpClient

Handler = Callable[[httpx.Request], httpx.Response]

USER = {"id": "1", "username": "alice"}
CHANNEL = {"id": "10", "type": 0, "name": "general", "guild_id": "5"}
MESSAGE = {"id": "100", "channel_id": "10", "author": USER, "content": "hi", "timestamp": "2024-01-01T00:00:00+00:00"}


class Sleeps:
    """Records requested delays instead of sleeping."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def make_client(handler: Handler, sleeps: Sleeps | None = None, **settings: object) -> RestHttpClient:
    return RestHttpClient(
        RestSettings(token="secret", **settings),
        transport=httpx.MockTransport(handler),
        backoff=ConstantBackoff(0.5),
        sleep=sleeps or Sleeps(),
    )


def json_response(status: int, body: object, headers: dict[str, str] | None = None) -> httpx.Response:
    return httpx.Response(status, content=orjson.dumps(body), headers={"Content-Type": "application/json", **(headers or {})})


# ═════════════════════════════════════════════════════════════════════════════
# Transport
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_get_parses_model_and_sends_auth() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(200, USER)

    async with make_client(handler) as http:
        result = await http.get("users/@me", User)

    assert result.unwrap() == User(id=Snowflake(1), username="alice")
    assert seen[0].url == "https://discord.com/api/v10/users/@me"
    assert seen[0].headers["Authorization"] == "Bot secret"
    assert seen[0].headers["User-Agent"].startswith("DiscordBot")


@pytest.mark.asyncio
async def test_bearer_auth() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(200, USER)

    http = RestHttpClient(
        RestSettings(), auth=BearerAuth(token="oauth"), transport=httpx.MockTransport(handler), sleep=Sleeps(),
    )
    await http.get("users/@me", User)
    await http.aclose()
    assert seen[0].headers["Authorization"] == "Bearer oauth"


@pytest.mark.asyncio
async def test_discord_error_body_becomes_err() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return json_response(404, {"code": 10003, "message": "Unknown Channel"})

    async with make_client(handler) as http:
        error = (await http.get("channels/1", Channel)).unwrap_err()

    assert error.code is ErrorCode.NOT_FOUND
    assert error.discord_code == 10003


@pytest.mark.asyncio
async def test_empty_body_when_value_expected() -> None:
    async with make_client(lambda r: httpx.Response(204)) as http:
        assert (await http.get("x", User)).unwrap_err().code is ErrorCode.PARSE_ERROR
        assert (await http.get("x", User, allow_null=True)).unwrap() is None
        assert (await http.delete("x")).unwrap() is None


@pytest.mark.asyncio
async def test_invalid_payload_is_parse_error() -> None:
    async with make_client(lambda r: json_response(200, {"id": "nope"})) as http:
        error = (await http.get("users/1", User)).unwrap_err()
    assert error.code is ErrorCode.PARSE_ERROR
    assert error.details


@pytest.mark.asyncio
async def test_429_is_retried_once_after_retry_after() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        if calls == 1:
            return json_response(429, {"message": "You are being rate limited.", "retry_after": 0.25, "global": False, "code": 0})
        return json_response(200, USER)

    sleeps = Sleeps()
    async with make_client(handler, sleeps) as http:
        assert (await http.get("users/@me", User)).is_ok()
    assert calls == 2
    assert sleeps.delays == [0.25]


@pytest.mark.asyncio
async def test_second_429_is_returned() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return json_response(429, {"message": "slow", "code": 0}, headers={"Retry-After": "2"})

    sleeps = Sleeps()
    async with make_client(handler, sleeps) as http:
        error = (await http.get("users/@me", User)).unwrap_err()
    assert error.code is ErrorCode.RATE_LIMITED
    assert error.retry_after == 2.0
    assert sleeps.delays == [2.0]


@pytest.mark.asyncio
async def test_server_errors_retry_with_backoff() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(503) if calls < 3 else json_response(200, USER)

    sleeps = Sleeps()
    async with make_client(handler, sleeps) as http:
        assert (await http.get("users/@me", User)).is_ok()
    assert sleeps.delays == [0.5, 0.5]


@pytest.mark.asyncio
async def test_server_errors_exhaust_retries() -> None:
    sleeps = Sleeps()
    async with make_client(lambda r: httpx.Response(500), sleeps, max_retries=1) as http:
        error = (await http.get("users/@me", User)).unwrap_err()
    assert error.status_code == 500
    assert len(sleeps.delays) == 1


@pytest.mark.asyncio
async def test_network_error_is_retried_then_reported() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    sleeps = Sleeps()
    async with make_client(handler, sleeps, max_retries=2) as http:
        error = (await http.get("users/@me", User)).unwrap_err()
    assert error.code is ErrorCode.NETWORK_ERROR
    assert len(sleeps.delays) == 2


@pytest.mark.asyncio
async def test_exhausted_bucket_waits_before_sending() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        headers = {
            "X-RateLimit-Limit": "1", "X-RateLimit-Remaining": "0",
            "X-RateLimit-Reset-After": "0.75", "X-RateLimit-Bucket": "b",
        }
        return json_response(200, USER, headers)

    sleeps = Sleeps()
    async with make_client(handler, sleeps) as http:
        assert (await http.get("users/@me", User)).is_ok()
        second = await http.get("users/@me", User)
    # The local bucket refuses twice: once before the sleep, once after (the clock did not move)
    assert second.unwrap_err().code is ErrorCode.RATE_LIMITED
    assert calls == 1
    assert len(sleeps.delays) == 1


@pytest.mark.asyncio
async def test_customize_applies_inside_block_only() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(200, USER)

    async with make_client(handler) as http:
        with http.customize(lambda b: b.add_header("X-Debug", "1")):
            await http.get("users/@me", User)
        await http.get("users/@me", User)

    assert seen[0].headers["X-Debug"] == "1"
    assert "X-Debug" not in seen[1].headers


# ═════════════════════════════════════════════════════════════════════════════
# Endpoint groups
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_create_message_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(200, MESSAGE)

    rest = RestClient(make_client(handler))
    result = await rest.channels.create_message(Snowflake(10), content="hi")
    await rest.aclose()

    assert isinstance(result.unwrap(), Message)
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/api/v10/channels/10/messages"
    assert orjson.loads(seen[0].content) == {"content": "hi"}


@pytest.mark.asyncio
async def test_modify_channel_sends_reason_and_nulls() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(200, CHANNEL)

    rest = RestClient(make_client(handler))
    channel = (await rest.channels.modify_channel(Snowflake(10), topic=None, reason="cleanup")).unwrap()
    await rest.aclose()

    assert channel.type is ChannelType.GUILD_TEXT
    assert orjson.loads(seen[0].content) == {"topic": None}
    assert seen[0].headers["X-Audit-Log-Reason"] == "cleanup"


@pytest.mark.asyncio
async def test_conflicting_message_anchors_fail_without_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    rest = RestClient(make_client(handler))
    result = await rest.channels.get_channel_messages(Snowflake(10), before=Snowflake(1), after=Snowflake(2))
    assert result.unwrap_err().code is ErrorCode.INVALID_PARAMS


@pytest.mark.asyncio
async def test_message_list_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(200, [MESSAGE])

    rest = RestClient(make_client(handler))
    messages = (await rest.channels.get_channel_messages(Snowflake(10), before=Snowflake(99), limit=5)).unwrap()
    await rest.aclose()

    assert [m.id for m in messages] == [100]
    assert dict(seen[0].url.params) == {"before": "99", "limit": "5"}
