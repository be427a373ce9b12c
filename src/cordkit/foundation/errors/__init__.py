"""Unified error handling for cordkit.

- ErrorCode/DiscordErrorCode: library and Discord error classifications
- RestError/CordkitError: structured errors and the exception wrapping them
- Result/Ok/Err: monadic error handling used by every REST and cache call
"""

from __future__ import annotations

from typing import TypeVar

from .errors import CordkitError, DiscordErrorCode, ErrorCode, JsonDict, RestError, classify_exception
from .result import Err, Ok, Result, sequence

T = TypeVar("T")

RestResult = Result[T, RestError]


def unwrap_or_raise(result: Result[T, RestError]) -> T:
    """Return the Ok value or raise CordkitError with the carried RestError."""
    if result.is_ok():
        return result.unwrap()
    raise CordkitError(result.unwrap_err())


__all__ = [
    "ErrorCode", "DiscordErrorCode", "RestError", "CordkitError", "classify_exception", "JsonDict",
    "Result", "Ok", "Err", "RestResult", "sequence", "unwrap_or_raise",
]
