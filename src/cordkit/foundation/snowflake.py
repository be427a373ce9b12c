"""Discord snowflake identifiers.

A snowflake packs a millisecond timestamp (relative to the Discord epoch),
internal worker and process ids, and a per-process increment into 64 bits.
Discord sends them as JSON strings; pydantic fields typed ``Snowflake``
accept either form and serialize back to strings in JSON mode.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import Err, ErrorCode, Ok, RestError, Result

DISCORD_EPOCH = 1420070400000


class Snowflake(int):
    """Integer subclass exposing the decoded snowflake fields.

    Example:
        >>> s = Snowflake(175928847299117063)
        >>> s.created_at.isoformat()
        '2016-04-30T11:18:25.796000+00:00'
    """

    __slots__ = ()

    @property
    def timestamp(self) -> int:
        """Unix timestamp in milliseconds."""
        return (self >> 22) + DISCORD_EPOCH

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, tz=UTC)

    @property
    def worker_id(self) -> int:
        return (self & 0x3E0000) >> 17

    @property
    def process_id(self) -> int:
        return (self & 0x1F000) >> 12

    @property
    def increment(self) -> int:
        return self & 0xFFF

    @classmethod
    def from_datetime(cls, value: datetime) -> Snowflake:
        """Smallest snowflake for the given moment; useful for before/after paging."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        millis = int(value.timestamp() * 1000) - DISCORD_EPOCH
        if millis < 0:
            raise ValueError(f"{value.isoformat()} precedes the Discord epoch")
        return cls(millis << 22)

    @classmethod
    def parse(cls, text: str) -> Result[Snowflake, RestError]:
        """Parse a decimal snowflake string."""
        text = text.strip()
        if not (text.isascii() and text.isdigit()):
            return Err(RestError(message=f"Not a snowflake: {text!r}", code=ErrorCode.PARSE_ERROR))
        value = cls(int(text))
        if value.bit_length() > 64:
            return Err(RestError(message=f"Snowflake out of range: {text}", code=ErrorCode.PARSE_ERROR))
        return Ok(value)

    def __repr__(self) -> str:
        return f"Snowflake({int(self)})"

    __str__ = int.__repr__

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: str(int(v)), when_used="json",
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> Snowflake:
        if isinstance(value, Snowflake):
            return value
        if isinstance(value, bool):
            raise ValueError("booleans are not snowflakes")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return cls(int(value))
        raise ValueError(f"invalid snowflake: {value!r}")
