from __future__ import annotations

from typing import Any

from cordkit.api.objects import Invite
from cordkit.foundation import RestError, Result
from cordkit.rest.api import RestInviteAPI

from ..keys import InviteKey
from .base import CachingAPI


class CachingInviteAPI(CachingAPI[RestInviteAPI]):
    __slots__ = ()

    async def get_invite(self, code: str, **kwargs: Any) -> Result[Invite, RestError]:
        return await self._read_through(InviteKey(code), lambda: self._inner.get_invite(code, **kwargs))

    async def delete_invite(self, code: str, **kwargs: Any) -> Result[Invite, RestError]:
        result = await self._inner.delete_invite(code, **kwargs)
        return await self._evict(result, InviteKey(code))
