"""FastAPI webhook endpoint for the Telegram echo bot.

Telegram POSTs each update here; the handler echoes message text back through
the Bot API. Every request is answered with an empty 200 so Telegram does not
redeliver. Callers are not authenticated.
"""

from __future__ import annotations

import asyncio
import logging

import requests
from fastapi import FastAPI, Request, Response

from webhook_handler.handler import UpdateHandler
from webhook_handler.settings import MissingBotTokenError, load_settings

app = FastAPI(title="Telegram Echo Webhook", version="0.1.0")

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("webhook_handler")


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/health")
async def health() -> dict[str, str]:
    """Return a basic health payload."""
    return {"status": "ok"}


@app.post("/webhook")
@app.post("/bot.php")
async def telegram_webhook(request: Request) -> Response:
    """Receive one Telegram update and echo its message text."""
    raw_body = await request.body()
    try:
        settings = load_settings()
    except MissingBotTokenError as exc:
        logger.error("%s", exc)  # noqa: TRY400
        return Response(status_code=200)

    with requests.Session() as session:
        handler = UpdateHandler(settings, session=session)
        outcome = await asyncio.to_thread(handler.handle_update, raw_body)
    logger.info("Webhook update handled: %s", outcome.value)
    return Response(status_code=200)
