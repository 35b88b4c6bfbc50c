"""Echo handler for Telegram webhook updates.

Each update is dumped to an append-only log and, when it carries a message,
echoed back through the Bot API ``sendMessage`` method. Nothing is retried and
the provider's response is never inspected.
"""

from __future__ import annotations

import json
import logging
import pprint
from enum import Enum
from typing import TYPE_CHECKING

import requests
from pydantic import ValidationError

from webhook_handler.models import OutboundReply, Update

if TYPE_CHECKING:
    from webhook_handler.settings import WebhookSettings

logger = logging.getLogger("webhook_handler")


class ReplyOutcome(str, Enum):
    """What ``handle_update`` did with a request body."""

    SENT = "sent"
    NO_MESSAGE = "no_message"
    INVALID_BODY = "invalid_body"


class UpdateHandler:
    """Handle one inbound update per call.

    Attributes:
        _settings: Token, endpoint and log location for this request.
        _session: HTTP session used for the outbound reply.

    """

    def __init__(self, settings: WebhookSettings, session: requests.Session | None = None) -> None:
        """Bind the handler to explicit settings and an optional HTTP session."""
        self._settings = settings
        self._session = session or requests.Session()

    def handle_update(self, raw_body: bytes) -> ReplyOutcome:
        """Log the update and echo its message text back to the chat."""
        try:
            data = json.loads(raw_body)
        except ValueError:
            logger.warning("Ignoring webhook body that is not JSON (%d bytes)", len(raw_body))
            return ReplyOutcome.INVALID_BODY

        self._append_update_log(data)

        if not isinstance(data, dict):
            return ReplyOutcome.NO_MESSAGE
        try:
            update = Update.model_validate(data)
        except ValidationError as exc:
            logger.warning("Ignoring update with unexpected shape: %s", exc.error_count())
            return ReplyOutcome.NO_MESSAGE
        if update.message is None:
            return ReplyOutcome.NO_MESSAGE

        reply = OutboundReply.echo(update.message)
        self._send(reply)
        return ReplyOutcome.SENT

    def _append_update_log(self, data: object) -> None:
        """Append a human-readable dump of the decoded update."""
        path = self._settings.update_log_path
        try:
            with path.open("a", encoding="utf-8") as handle:
                handle.write(pprint.pformat(data) + "\n")
        except OSError:
            logger.exception("Failed to append update to %s", path)

    def _send(self, reply: OutboundReply) -> None:
        """Issue the ``sendMessage`` GET; failures are logged and dropped."""
        try:
            self._session.get(
                self._settings.send_message_url,
                params=reply.to_params(),
                timeout=self._settings.request_timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.warning("sendMessage request failed: %s", exc)
