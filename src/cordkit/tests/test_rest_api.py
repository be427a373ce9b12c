"""Route-level tests for REST endpoint groups."""

from __future__ import annotations

import httpx
import orjson
import pytest

from cordkit.foundation import Snowflake
from cordkit.foundation.config import RestSettings
from cordkit.rest import FileData, RestClient, RestHttpClient

S = Snowflake

USER = {"id": "1", "username": "alice"}
MESSAGE = {"id": "100", "channel_id": "10", "author": USER, "timestamp": "2024-01-01T00:00:00+00:00"}
COMMAND = {"id": "300", "application_id": "200", "name": "ping", "description": "Ping", "version": "1"}


class Recorder:
    """MockTransport handler that records requests and replies with a fixed body."""

    def __init__(self, status: int = 200, body: object = None, content: bytes | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.status = status
        self.body = body
        self.content = content

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        if self.body is None:
            return httpx.Response(204)
        return httpx.Response(self.status, content=orjson.dumps(self.body))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def client(recorder: Recorder) -> RestClient:
    async def no_sleep(_: float) -> None:
        return None

    return RestClient(RestHttpClient(RestSettings(token="secret"), transport=httpx.MockTransport(recorder), sleep=no_sleep))


# ─── Webhooks ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_execute_webhook_without_wait_returns_none() -> None:
    recorder = Recorder()
    result = await client(recorder).webhooks.execute_webhook(S(8), "tok", content="hi")
    assert result.unwrap() is None
    assert recorder.last.url.path == "/api/v10/webhooks/8/tok"
    assert "Authorization" not in recorder.last.headers


@pytest.mark.asyncio
async def test_execute_webhook_with_wait_returns_message() -> None:
    recorder = Recorder(body=MESSAGE)
    result = await client(recorder).webhooks.execute_webhook(S(8), "tok", wait=True, thread_id=S(31), content="hi")
    assert result.unwrap().id == 100
    assert dict(recorder.last.url.params) == {"wait": "true", "thread_id": "31"}


@pytest.mark.asyncio
async def test_webhook_by_id_is_authorized() -> None:
    recorder = Recorder(body={"id": "8", "type": 1})
    await client(recorder).webhooks.get_webhook(S(8))
    assert recorder.last.headers["Authorization"] == "Bot secret"


@pytest.mark.asyncio
async def test_webhook_upload_is_multipart() -> None:
    recorder = Recorder(body=MESSAGE)
    await client(recorder).webhooks.execute_webhook(
        S(8), "tok", wait=True, content="file", files=[FileData("a.txt", b"data")],
    )
    assert recorder.last.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="payload_json"' in recorder.last.content
    assert b'name="files[0]"; filename="a.txt"' in recorder.last.content


# ─── Interactions ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_interaction_routes_skip_authorization() -> None:
    recorder = Recorder(body=MESSAGE)
    rest = client(recorder)
    await rest.interactions.get_original_interaction_response(S(200), "tok")
    assert recorder.last.url.path == "/api/v10/webhooks/200/tok/messages/@original"
    assert "Authorization" not in recorder.last.headers

    await rest.interactions.create_followup_message(S(200), "tok", content="later")
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/api/v10/webhooks/200/tok"


# ─── Applications ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_bulk_overwrite_sends_json_array() -> None:
    recorder = Recorder(body=[COMMAND])
    commands = await client(recorder).applications.bulk_overwrite_global_application_commands(
        S(200), [{"name": "ping", "description": "Ping"}],
    )
    assert [c.name for c in commands.unwrap()] == ["ping"]
    assert recorder.last.method == "PUT"
    assert orjson.loads(recorder.last.content) == [{"name": "ping", "description": "Ping"}]


@pytest.mark.asyncio
async def test_command_listing_query() -> None:
    recorder = Recorder(body=[COMMAND])
    await client(recorder).applications.get_global_application_commands(S(200), with_localizations=True)
    assert recorder.last.url.path == "/api/v10/applications/200/commands"
    assert dict(recorder.last.url.params) == {"with_localizations": "true"}


# ─── Guilds ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_guild_with_counts() -> None:
    recorder = Recorder(body={"id": "5", "name": "Guild", "approximate_member_count": 12})
    guild = (await client(recorder).guilds.get_guild(S(5), with_counts=True)).unwrap()
    assert guild.approximate_member_count == 12
    assert dict(recorder.last.url.params) == {"with_counts": "true"}


@pytest.mark.asyncio
async def test_widget_image_returns_bytes() -> None:
    recorder = Recorder(content=b"\x89PNG")
    image = await client(recorder).guilds.get_guild_widget_image(S(5), style="banner1")
    assert image.unwrap() == b"\x89PNG"
    assert "Authorization" not in recorder.last.headers


@pytest.mark.asyncio
async def test_audit_log_filters() -> None:
    recorder = Recorder(body={"audit_log_entries": [], "users": [], "webhooks": []})
    await client(recorder).audit_log.get_guild_audit_log(S(5), user_id=S(1), limit=10)
    assert recorder.last.url.path == "/api/v10/guilds/5/audit-logs"
    assert dict(recorder.last.url.params) == {"user_id": "1", "limit": "10"}
