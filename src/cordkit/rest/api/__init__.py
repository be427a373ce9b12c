"""REST endpoint groups."""

from .applications import RestApplicationAPI
from .audit_log import RestAuditLogAPI
from .base import RestAPI
from .channels import RestChannelAPI
from .emojis import RestEmojiAPI
from .gateway import RestGatewayAPI
from .guilds import RestGuildAPI
from .interactions import RestInteractionAPI
from .invites import RestInviteAPI
from .oauth2 import RestOAuth2API
from .templates import RestTemplateAPI
from .users import RestUserAPI
from .voice import RestVoiceAPI
from .webhooks import RestWebhookAPI

__all__ = [
    "RestAPI",
    "RestApplicationAPI",
    "RestAuditLogAPI",
    "RestChannelAPI",
    "RestEmojiAPI",
    "RestGatewayAPI",
    "RestGuildAPI",
    "RestInteractionAPI",
    "RestInviteAPI",
    "RestOAuth2API",
    "RestTemplateAPI",
    "RestUserAPI",
    "RestVoiceAPI",
    "RestWebhookAPI",
]
