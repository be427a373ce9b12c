"""Fluent construction of Discord REST requests.

API methods describe a call by configuring a RestRequestBuilder; the HTTP
client turns the built RestRequest into an httpx request. JSON bodies are
assembled field by field and unset parameters never reach the wire.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, BinaryIO, Iterable, Literal, Mapping, Self
from urllib.parse import quote

import orjson
from pydantic import BaseModel

from cordkit.foundation import UNSET, Snowflake

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

AUDIT_LOG_REASON = "X-Audit-Log-Reason"


@dataclass(frozen=True, slots=True)
class FileData:
    """A file to upload alongside a message payload."""

    name: str
    content: bytes | BinaryIO
    description: str | None = None
    content_type: str = "application/octet-stream"


def to_json(value: Any) -> Any:
    """Convert request parameters into JSON-ready primitives.

    Models dump without None fields, snowflakes become strings, durations
    become whole seconds, and UNSET entries are dropped from mappings.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Snowflake):
        return str(int(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if isinstance(value, Mapping):
        return {str(k): to_json(v) for k, v in value.items() if v is not UNSET}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json(v) for v in value]
    return value


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    converted = to_json(value)
    return converted if isinstance(converted, str) else str(converted)


@dataclass(frozen=True, slots=True)
class RestRequest:
    """Immutable, transport-ready description of one REST call."""

    method: HttpMethod
    endpoint: str
    params: tuple[tuple[str, str], ...] = ()
    headers: Mapping[str, str] = field(default_factory=dict)
    json: Any = None
    files: tuple[FileData, ...] = ()
    authorize: bool = True

    def to_httpx(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.AsyncClient.request``."""
        kwargs: dict[str, Any] = {
            "method": self.method,
            "url": self.endpoint,
            "params": list(self.params) or None,
            "headers": dict(self.headers),
        }
        if self.files:
            payload = dict(self.json) if isinstance(self.json, dict) else {}
            payload.setdefault("attachments", [
                {"id": i, "filename": f.name, **({"description": f.description} if f.description else {})}
                for i, f in enumerate(self.files)
            ])
            kwargs["data"] = {"payload_json": orjson.dumps(payload).decode()}
            kwargs["files"] = [
                (f"files[{i}]", (f.name, f.content, f.content_type)) for i, f in enumerate(self.files)
            ]
        elif self.json is not None:
            kwargs["content"] = orjson.dumps(self.json)
            kwargs["headers"]["Content-Type"] = "application/json"
        return kwargs


class RestRequestBuilder:
    """Builder for a single REST request.

    Example:
        >>> request = (
        ...     RestRequestBuilder("channels/1/messages", "POST")
        ...     .with_json({"content": "hi", "tts": UNSET})
        ...     .with_reason("greeting")
        ...     .build()
        ... )
        >>> request.json
        {'content': 'hi'}
    """

    __slots__ = ("_endpoint", "_method", "_params", "_headers", "_json", "_json_array", "_files", "_authorize")

    def __init__(self, endpoint: str, method: HttpMethod = "GET") -> None:
        self._endpoint = endpoint
        self._method: HttpMethod = method
        self._params: list[tuple[str, str]] = []
        self._headers: dict[str, str] = {}
        self._json: dict[str, Any] | None = None
        self._json_array: list[Any] | None = None
        self._files: list[FileData] = []
        self._authorize = True

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def method(self) -> HttpMethod:
        return self._method

    def with_method(self, method: HttpMethod) -> Self:
        self._method = method
        return self

    def add_query_parameter(self, name: str, value: Any) -> Self:
        """Append a query parameter; UNSET and None values are skipped."""
        if value is not UNSET and value is not None:
            self._params.append((name, _query_value(value)))
        return self

    def with_json(self, fields: Mapping[str, Any]) -> Self:
        """Merge fields into the JSON object body. Cannot be combined with a JSON array body."""
        if self._json_array is not None:
            raise ValueError("A request body cannot be both a JSON object and a JSON array")
        self._json = {**(self._json or {}), **to_json(fields)}
        return self

    def with_json_array(self, items: Iterable[Any]) -> Self:
        if self._json is not None:
            raise ValueError("A request body cannot be both a JSON object and a JSON array")
        self._json_array = to_json(list(items))
        return self

    def add_header(self, name: str, value: str) -> Self:
        self._headers[name] = value
        return self

    def with_reason(self, reason: str | Any) -> Self:
        """Attach an audit log reason (URL-encoded as Discord requires)."""
        if isinstance(reason, str):
            self._headers[AUDIT_LOG_REASON] = quote(reason, safe=" ")
        return self

    def add_files(self, files: Iterable[FileData] | Any) -> Self:
        if files is not UNSET and files is not None:
            self._files.extend(files)
        return self

    def skip_authorization(self) -> Self:
        """Send without the Authorization header (webhook-token and interaction routes)."""
        self._authorize = False
        return self

    def build(self) -> RestRequest:
        body = self._json_array if self._json_array is not None else self._json
        return RestRequest(
            method=self._method,
            endpoint=self._endpoint,
            params=tuple(self._params),
            headers=dict(self._headers),
            json=body,
            files=tuple(self._files),
            authorize=self._authorize,
        )
