"""Caching decorators for the REST endpoint groups."""

from .base import CachingAPI
from .channels import CachingChannelAPI
from .emojis import CachingEmojiAPI
from .guilds import CachingGuildAPI
from .interactions import CachingInteractionAPI
from .invites import CachingInviteAPI
from .oauth2 import CachingOAuth2API
from .passthrough import CachingAuditLogAPI, CachingVoiceAPI
from .templates import CachingTemplateAPI
from .users import CachingUserAPI
from .webhooks import CachingWebhookAPI

__all__ = [
    "CachingAPI",
    "CachingAuditLogAPI",
    "CachingChannelAPI",
    "CachingEmojiAPI",
    "CachingGuildAPI",
    "CachingInteractionAPI",
    "CachingInviteAPI",
    "CachingOAuth2API",
    "CachingTemplateAPI",
    "CachingUserAPI",
    "CachingVoiceAPI",
    "CachingWebhookAPI",
]
