"""Settings for the WebApp bridge client."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, PositiveFloat

load_dotenv()

logger = logging.getLogger("webapp_client")

DEFAULT_DETECT_TIMEOUT_MS = 8000
DEFAULT_POLL_INTERVAL_MS = 200
DEFAULT_BUTTON_TEXT = "Start Task"


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r; using %s", name, raw, default)
        return default


class ClientSettings(BaseModel):
    """Timing and presentation defaults for a bridge session.

    Times are in seconds.
    """

    detect_timeout: PositiveFloat = DEFAULT_DETECT_TIMEOUT_MS / 1000
    poll_interval: PositiveFloat = DEFAULT_POLL_INTERVAL_MS / 1000
    initial_button_text: str = DEFAULT_BUTTON_TEXT
    header_color: str = "bg_color"
    background_color: str = "bg_color"

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Build settings from ``WEBAPP_*`` environment variables (milliseconds)."""
        timeout_ms = _float_from_env("WEBAPP_DETECT_TIMEOUT_MS", DEFAULT_DETECT_TIMEOUT_MS)
        interval_ms = _float_from_env("WEBAPP_POLL_INTERVAL_MS", DEFAULT_POLL_INTERVAL_MS)
        return cls(
            detect_timeout=timeout_ms / 1000,
            poll_interval=interval_ms / 1000,
            initial_button_text=os.environ.get("WEBAPP_MAIN_BUTTON_TEXT", DEFAULT_BUTTON_TEXT),
        )
