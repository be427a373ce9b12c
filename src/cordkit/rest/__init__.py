"""Discord REST transport and endpoint groups.

Every endpoint method is a coroutine returning ``Result[T, RestError]``.
"""

from .api import (
    RestAPI,
    RestApplicationAPI,
    RestAuditLogAPI,
    RestChannelAPI,
    RestEmojiAPI,
    RestGatewayAPI,
    RestGuildAPI,
    RestInteractionAPI,
    RestInviteAPI,
    RestOAuth2API,
    RestTemplateAPI,
    RestUserAPI,
    RestVoiceAPI,
    RestWebhookAPI,
)
from .auth import BearerAuth, BotAuth, TokenAuth, auth_from_settings
from .backoff import Backoff, ConstantBackoff, ExponentialBackoff
from .client import RestClient
from .http import RestHttpClient, error_from_response
from .ratelimit import GLOBAL_LIMIT, RateLimitBucket, RateLimiter
from .request import AUDIT_LOG_REASON, FileData, RestRequest, RestRequestBuilder, to_json

__all__ = [
    "RestClient", "RestHttpClient", "error_from_response",
    "RestRequest", "RestRequestBuilder", "FileData", "AUDIT_LOG_REASON", "to_json",
    "BotAuth", "BearerAuth", "TokenAuth", "auth_from_settings",
    "Backoff", "ExponentialBackoff", "ConstantBackoff",
    "RateLimitBucket", "RateLimiter", "GLOBAL_LIMIT",
    "RestAPI", "RestApplicationAPI", "RestAuditLogAPI", "RestChannelAPI", "RestEmojiAPI",
    "RestGatewayAPI", "RestGuildAPI", "RestInteractionAPI", "RestInviteAPI", "RestOAuth2API",
    "RestTemplateAPI", "RestUserAPI", "RestVoiceAPI", "RestWebhookAPI",
]
