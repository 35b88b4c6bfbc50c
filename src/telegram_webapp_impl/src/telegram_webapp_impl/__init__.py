"""Public exports for the Telegram WebApp bridge implementation package."""

from telegram_webapp_impl.webapp_impl import TelegramWebAppBridge, locate_webapp
from telegram_webapp_impl.webapp_impl import register as _register_bridge

__all__ = ["TelegramWebAppBridge", "locate_webapp", "register"]


def register() -> None:
    """Register the Telegram WebApp bridge implementation."""
    _register_bridge()


register()
