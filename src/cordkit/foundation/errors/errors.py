"""Standardized error handling for REST and cache operations.

Provides error codes and a structured, immutable error payload that every
failed Result carries. Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

import traceback
from enum import IntEnum, StrEnum
from functools import lru_cache
from typing import Annotated, Any, Mapping, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

JsonDict = dict[str, Any]


class ErrorCode(StrEnum):
    """Library-level error classification.

    Callers branch on these; ``RestError.is_retryable`` derives from them.
    """
    NOT_FOUND = "NOT_FOUND"
    HTTP_ERROR = "HTTP_ERROR"
    DISCORD_ERROR = "DISCORD_ERROR"
    RATE_LIMITED = "RATE_LIMITED"
    TIMEOUT = "TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    INVALID_PARAMS = "INVALID_PARAMS"
    UNAUTHORIZED = "UNAUTHORIZED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    CACHE_ERROR = "CACHE_ERROR"
    UNKNOWN = "UNKNOWN"


class DiscordErrorCode(IntEnum):
    """JSON error codes returned in Discord error bodies."""
    GENERAL_ERROR = 0
    UNKNOWN_ACCOUNT = 10001
    UNKNOWN_APPLICATION = 10002
    UNKNOWN_CHANNEL = 10003
    UNKNOWN_GUILD = 10004
    UNKNOWN_INTEGRATION = 10005
    UNKNOWN_INVITE = 10006
    UNKNOWN_MEMBER = 10007
    UNKNOWN_MESSAGE = 10008
    UNKNOWN_PERMISSION_OVERWRITE = 10009
    UNKNOWN_PROVIDER = 10010
    UNKNOWN_ROLE = 10011
    UNKNOWN_TOKEN = 10012
    UNKNOWN_USER = 10013
    UNKNOWN_EMOJI = 10014
    UNKNOWN_WEBHOOK = 10015
    UNKNOWN_WEBHOOK_SERVICE = 10016
    UNKNOWN_SESSION = 10020
    UNKNOWN_BAN = 10026
    UNKNOWN_SKU = 10027
    UNKNOWN_STORE_LISTING = 10028
    UNKNOWN_ENTITLEMENT = 10029
    UNKNOWN_BUILD = 10030
    UNKNOWN_LOBBY = 10031
    UNKNOWN_BRANCH = 10032
    UNKNOWN_REDISTRIBUTABLE = 10036
    UNKNOWN_GUILD_TEMPLATE = 10057
    UNKNOWN_APPLICATION_COMMAND = 10063
    UNKNOWN_INTERACTION = 10062
    UNKNOWN_THREAD_MEMBER = 10065
    BOTS_CANNOT_USE_ENDPOINT = 20001
    ONLY_BOTS_CAN_USE_ENDPOINT = 20002
    MESSAGE_CANNOT_BE_EDITED = 20022
    RATE_LIMITED_ON_CHANNEL_WRITE = 20028
    MAX_GUILDS_REACHED = 30001
    MAX_FRIENDS_REACHED = 30002
    MAX_PINS_REACHED = 30003
    MAX_GUILD_ROLES_REACHED = 30005
    MAX_WEBHOOKS_REACHED = 30007
    MAX_REACTIONS_REACHED = 30010
    MAX_GUILD_CHANNELS_REACHED = 30013
    MAX_ATTACHMENTS_REACHED = 30015
    MAX_INVITES_REACHED = 30016
    GUILD_ALREADY_HAS_TEMPLATE = 30031
    UNAUTHORIZED = 40001
    ACCOUNT_VERIFICATION_REQUIRED = 40002
    REQUEST_TOO_LARGE = 40005
    FEATURE_DISABLED = 40006
    USER_BANNED = 40007
    INTERACTION_ALREADY_ACKNOWLEDGED = 40060
    MISSING_ACCESS = 50001
    INVALID_ACCOUNT_TYPE = 50002
    CANNOT_EXECUTE_ON_DM_CHANNEL = 50003
    GUILD_WIDGET_DISABLED = 50004
    CANNOT_EDIT_OTHER_USERS_MESSAGE = 50005
    CANNOT_SEND_EMPTY_MESSAGE = 50006
    CANNOT_SEND_MESSAGES_TO_USER = 50007
    CANNOT_SEND_MESSAGES_IN_VOICE_CHANNEL = 50008
    CHANNEL_VERIFICATION_TOO_HIGH = 50009
    OAUTH2_APPLICATION_HAS_NO_BOT = 50010
    OAUTH2_APPLICATION_LIMIT_REACHED = 50011
    INVALID_OAUTH2_STATE = 50012
    MISSING_PERMISSIONS = 50013
    INVALID_AUTHENTICATION_TOKEN = 50014
    NOTE_TOO_LONG = 50015
    INVALID_BULK_DELETE_COUNT = 50016
    CANNOT_PIN_MESSAGE_IN_OTHER_CHANNEL = 50019
    INVALID_INVITE_CODE = 50020
    CANNOT_EXECUTE_ON_SYSTEM_MESSAGE = 50021
    INVALID_OAUTH2_ACCESS_TOKEN = 50025
    MESSAGE_TOO_OLD_TO_BULK_DELETE = 50034
    INVALID_FORM_BODY = 50035
    INVITE_ACCEPTED_TO_GUILD_WITHOUT_BOT = 50036
    INVALID_API_VERSION = 50041
    CANNOT_DELETE_REQUIRED_CHANNEL = 50074
    INVALID_STICKER_SENT = 50081
    TWO_FACTOR_REQUIRED = 60003
    REACTION_BLOCKED = 90001
    API_RESOURCE_OVERLOADED = 130000


# Status code -> library code for HTTP failures
_STATUS_CODES: dict[int, ErrorCode] = {
    400: ErrorCode.INVALID_PARAMS,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.PERMISSION_DENIED,
    404: ErrorCode.NOT_FOUND,
    429: ErrorCode.RATE_LIMITED,
}

_PATTERN_CODES: dict[str, ErrorCode] = {
    "timeout": ErrorCode.TIMEOUT,
    "connection": ErrorCode.NETWORK_ERROR,
    "network": ErrorCode.NETWORK_ERROR,
    "ratelimit": ErrorCode.RATE_LIMITED,
    "permission": ErrorCode.PERMISSION_DENIED,
    "forbidden": ErrorCode.PERMISSION_DENIED,
    "validation": ErrorCode.PARSE_ERROR,
    "json": ErrorCode.PARSE_ERROR,
    "decode": ErrorCode.PARSE_ERROR,
    "redis": ErrorCode.CACHE_ERROR,
    "value": ErrorCode.INVALID_PARAMS,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES.keys())

_RETRYABLE_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.RATE_LIMITED,
    ErrorCode.TIMEOUT,
    ErrorCode.NETWORK_ERROR,
})


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.UNKNOWN


def classify_exception(exc: Exception) -> ErrorCode:
    """Pick an ErrorCode from keywords in the exception's type name and message."""
    return _classify_cached(f"{type(exc).__name__} {exc}")


class RestError(BaseModel):
    """Structured error for failed REST or cache operations.

    Attributes:
        message: Human-readable error message
        code: Library-level classification
        status_code: HTTP status of the failed response, if any
        discord_code: JSON error code from the Discord error body, if any
        errors: Nested field errors from an invalid form body
        retry_after: Seconds to wait before retrying (rate limits)
        details: Optional detailed information (e.g., stack trace)
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        json_schema_extra={
            "title": "REST Error",
            "examples": [{
                "message": "Unknown Channel",
                "code": "NOT_FOUND",
                "status_code": 404,
                "discord_code": 10003,
            }],
        },
    )

    message: Annotated[str, Field(min_length=1)]
    code: ErrorCode = ErrorCode.UNKNOWN
    status_code: int | None = None
    discord_code: int | None = None
    errors: JsonDict | None = Field(default=None, repr=False)
    retry_after: float | None = None
    details: str | None = Field(default=None, repr=False)

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Exceptions passed as the message are stringified."""
        return str(v) if isinstance(v, Exception) else v

    @computed_field
    @property
    def is_retryable(self) -> bool:
        """Rate limits, timeouts, network failures and 5xx responses."""
        return self.code in _RETRYABLE_CODES or (self.status_code is not None and self.status_code >= 500)

    @property
    def discord_error(self) -> DiscordErrorCode | None:
        """The typed Discord error code, when the body carried a known one."""
        if self.discord_code is None:
            return None
        try:
            return DiscordErrorCode(self.discord_code)
        except ValueError:
            return None

    @classmethod
    def not_found(cls, key: object) -> Self:
        return cls(message=f'The key "{key}" held no value in the cache.', code=ErrorCode.NOT_FOUND)

    @classmethod
    def from_response(
        cls,
        status_code: int,
        reason: str,
        body: Mapping[str, Any] | None = None,
        *,
        retry_after: float | None = None,
    ) -> Self:
        """Build from a failed HTTP response, using the JSON error body when present."""
        code = _STATUS_CODES.get(status_code, ErrorCode.HTTP_ERROR)
        if body and "code" in body and "message" in body:
            if code is ErrorCode.HTTP_ERROR:
                code = ErrorCode.DISCORD_ERROR
            return cls(
                message=str(body["message"]) or reason,
                code=code,
                status_code=status_code,
                discord_code=int(body["code"]),
                errors=body.get("errors"),
                retry_after=retry_after if retry_after is not None else body.get("retry_after"),
            )
        return cls(
            message=f"{status_code} {reason}".strip(),
            code=code,
            status_code=status_code,
            retry_after=retry_after,
        )

    @classmethod
    def from_exception(cls, exc: Exception, context: str = "", *, include_trace: bool = False) -> Self:
        """Wrap an exception raised while performing ``operation``."""
        return cls(
            message=f"{context}: {exc}" if context else (str(exc) or type(exc).__name__),
            code=classify_exception(exc),
            details=traceback.format_exc() if include_trace else type(exc).__name__,
        )

    def __str__(self) -> str:
        status = f" [{self.status_code}]" if self.status_code is not None else ""
        discord = f" (code {self.discord_code})" if self.discord_code is not None else ""
        return f"{self.code.value}{status}{discord}: {self.message}"


class CordkitError(Exception):
    """Exception wrapping a RestError for callers that prefer raising."""

    __slots__ = ("error",)

    def __init__(self, error: RestError) -> None:
        self.error = error
        super().__init__(str(error))
