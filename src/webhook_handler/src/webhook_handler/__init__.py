"""Public exports for the Telegram echo webhook."""

from webhook_handler.handler import ReplyOutcome, UpdateHandler
from webhook_handler.settings import MissingBotTokenError, WebhookSettings, load_settings

__all__ = [
    "MissingBotTokenError",
    "ReplyOutcome",
    "UpdateHandler",
    "WebhookSettings",
    "load_settings",
]
