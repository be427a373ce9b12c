"""Token authentication strategies.

Discord accepts bot tokens (``Bot <token>``) and OAuth2 access tokens
(``Bearer <token>``). Tokens are held as SecretStr and masked on dump.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_serializer

if TYPE_CHECKING:
    from cordkit.foundation.config import RestSettings


class _TokenAuth(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    scheme: str = ""
    token: SecretStr

    def apply(self, headers: dict[str, str]) -> dict[str, str]:
        headers["Authorization"] = f"{self.scheme} {self.token.get_secret_value()}"
        return headers

    @field_serializer("token", when_used="always")
    def _mask_token(self, v: SecretStr) -> str:
        return "***"


class BotAuth(_TokenAuth):
    """Bot token authentication."""

    auth_type: Literal["bot"] = "bot"
    scheme: Literal["Bot"] = "Bot"


class BearerAuth(_TokenAuth):
    """OAuth2 bearer token authentication."""

    auth_type: Literal["bearer"] = "bearer"
    scheme: Literal["Bearer"] = "Bearer"


TokenAuth = Annotated[Union[BotAuth, BearerAuth], Field(discriminator="auth_type")]


def auth_from_settings(settings: RestSettings) -> BotAuth | BearerAuth | None:
    if settings.token is None or not settings.token.get_secret_value().strip():
        return None
    if settings.token_type == "bearer":
        return BearerAuth(token=settings.token)
    return BotAuth(token=settings.token)
