"""Core building blocks shared by the REST and caching layers."""

from .errors import CordkitError, DiscordErrorCode, Err, ErrorCode, Ok, RestError, RestResult, Result, unwrap_or_raise
from .optional import UNSET, Unset, is_set, strip_unset
from .snowflake import DISCORD_EPOCH, Snowflake

__all__ = [
    "Snowflake", "DISCORD_EPOCH",
    "UNSET", "Unset", "is_set", "strip_unset",
    "Result", "Ok", "Err", "RestResult", "RestError", "ErrorCode", "DiscordErrorCode",
    "CordkitError", "unwrap_or_raise",
]
