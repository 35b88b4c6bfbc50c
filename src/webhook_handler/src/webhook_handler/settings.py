"""Environment-backed settings for the webhook service."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

logger = logging.getLogger("webhook_handler")

DEFAULT_API_BASE_URL = "https://api.telegram.org"
DEFAULT_UPDATE_LOG = "bot.log"
DEFAULT_TIMEOUT_SECONDS = 10.0


class MissingBotTokenError(RuntimeError):
    """Raised when TELEGRAM_BOT_TOKEN is not configured."""


class WebhookSettings(BaseModel):
    """Values the update handler needs for one request."""

    bot_token: str
    api_base_url: str = DEFAULT_API_BASE_URL
    update_log_path: Path = Path(DEFAULT_UPDATE_LOG)
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def send_message_url(self) -> str:
        """Return the Bot API ``sendMessage`` endpoint for this token."""
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}/sendMessage"


def _float_from_env(name: str, default: float) -> float:
    """Read a float from the environment, falling back to ``default`` when malformed."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r; using %s", name, raw, default)
        return default


def load_settings() -> WebhookSettings:
    """Read settings from the process environment.

    Raises:
        MissingBotTokenError: If TELEGRAM_BOT_TOKEN is unset or empty.

    """
    token = os.environ.get("TELEGRAM_BOT_TOKEN")
    if not token:
        raise MissingBotTokenError("Telegram Bot Token not set in environment variables!")  # noqa: TRY003, EM101
    return WebhookSettings(
        bot_token=token,
        api_base_url=os.environ.get("TELEGRAM_API_BASE_URL", DEFAULT_API_BASE_URL),
        update_log_path=Path(os.environ.get("WEBHOOK_UPDATE_LOG", DEFAULT_UPDATE_LOG)),
        request_timeout_seconds=_float_from_env("WEBHOOK_REQUEST_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
    )
