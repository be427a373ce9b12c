"""Invite endpoints."""

from __future__ import annotations

from cordkit.api.objects import Invite
from cordkit.foundation import UNSET, RestError, Result, Unset

from .base import RestAPI


class RestInviteAPI(RestAPI):
    __slots__ = ()

    async def get_invite(
        self,
        code: str,
        *,
        with_counts: bool | Unset = UNSET,
        with_expiration: bool | Unset = UNSET,
    ) -> Result[Invite, RestError]:
        return await self._http.get(
            f"invites/{code}", Invite,
            configure=lambda b: (
                b.add_query_parameter("with_counts", with_counts)
                .add_query_parameter("with_expiration", with_expiration)
            ),
        )

    async def delete_invite(self, code: str, *, reason: str | Unset = UNSET) -> Result[Invite, RestError]:
        return await self._http.delete(f"invites/{code}", Invite, configure=lambda b: b.with_reason(reason))
