"""Audit log endpoint."""

from __future__ import annotations

from cordkit.api.objects import AuditLog, AuditLogEvent
from cordkit.foundation import UNSET, RestError, Result, Snowflake, Unset

from .base import RestAPI


class RestAuditLogAPI(RestAPI):
    __slots__ = ()

    async def get_guild_audit_log(
        self,
        guild_id: Snowflake,
        *,
        user_id: Snowflake | Unset = UNSET,
        action_type: AuditLogEvent | Unset = UNSET,
        before: Snowflake | Unset = UNSET,
        after: Snowflake | Unset = UNSET,
        limit: int | Unset = UNSET,
    ) -> Result[AuditLog, RestError]:
        return await self._http.get(
            f"guilds/{guild_id}/audit-logs", AuditLog,
            configure=lambda b: (
                b.add_query_parameter("user_id", user_id)
                .add_query_parameter("action_type", action_type)
                .add_query_parameter("before", before)
                .add_query_parameter("after", after)
                .add_query_parameter("limit", limit)
            ),
        )
