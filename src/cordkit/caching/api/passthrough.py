"""Surfaces wrapped for a uniform client shape but served without caching."""

from __future__ import annotations

from cordkit.rest.api import RestAuditLogAPI, RestVoiceAPI

from .base import CachingAPI


class CachingAuditLogAPI(CachingAPI[RestAuditLogAPI]):
    """Audit logs are append-only and paged; every call goes to Discord."""

    __slots__ = ()


class CachingVoiceAPI(CachingAPI[RestVoiceAPI]):
    __slots__ = ()
