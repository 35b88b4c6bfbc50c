"""End-to-end test that boots the webhook with uvicorn against a local Bot API stub."""

from __future__ import annotations

import os
import socket
import subprocess
import sys
import threading
import time
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

if TYPE_CHECKING:
    from collections.abc import Iterator

pytestmark = pytest.mark.e2e

HEALTH_TIMEOUT_SECONDS = 12.0
REQUEST_TIMEOUT_SECONDS = 10.0
BOT_TOKEN = "1234:e2e-token"  # noqa: S105
MODULE_PATHS = (
    "webhook_handler",
    "webapp_bridge_api",
    "telegram_webapp_impl",
    "webapp_client",
)


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return int(sock.getsockname()[1])


def _pythonpath(root: Path) -> str:
    paths = [str(root)] + [str(root / "src" / name / "src") for name in MODULE_PATHS]
    existing = os.environ.get("PYTHONPATH")
    if existing:
        paths.append(existing)
    return os.pathsep.join(paths)


def _wait_for_health(base_url: str) -> None:
    deadline = time.time() + HEALTH_TIMEOUT_SECONDS
    while time.time() < deadline:
        try:
            response = requests.get(f"{base_url}/health", timeout=1.0)
            if response.status_code == HTTPStatus.OK:
                return
        except requests.RequestException:
            time.sleep(0.2)
    raise AssertionError("Webhook did not become healthy in time.")  # noqa: TRY003, EM101


@pytest.fixture
def bot_api() -> Iterator[tuple[str, list[str]]]:
    """Serve a stub Bot API that records request paths."""
    received: list[str] = []

    class _Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            received.append(self.path)
            body = b'{"ok":true}'
            self.send_response(HTTPStatus.OK)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, *_args: object) -> None:
            return

    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}", received
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def webhook_url(tmp_path: Path, bot_api: tuple[str, list[str]]) -> Iterator[str]:
    """Start the webhook under uvicorn and return its base URL."""
    root = Path(__file__).resolve().parents[2]
    base_url = f"http://127.0.0.1:{_free_port()}"
    full_env = os.environ.copy()
    full_env.update(
        {
            "PYTHONPATH": _pythonpath(root),
            "TELEGRAM_BOT_TOKEN": BOT_TOKEN,
            "TELEGRAM_API_BASE_URL": bot_api[0],
            "WEBHOOK_UPDATE_LOG": str(tmp_path / "bot.log"),
        }
    )

    process = subprocess.Popen(  # noqa: S603
        [
            sys.executable,
            "-m",
            "uvicorn",
            "webhook_handler.main:app",
            "--host",
            "127.0.0.1",
            "--port",
            base_url.rsplit(":", 1)[1],
        ],
        cwd=str(tmp_path),
        env=full_env,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
    )
    try:
        _wait_for_health(base_url)
        yield base_url
    finally:
        process.terminate()
        try:
            process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            process.kill()


def test_webhook_echo_flow(webhook_url: str, bot_api: tuple[str, list[str]], tmp_path: Path) -> None:
    """A posted update is logged and echoed to the Bot API stub."""
    response = requests.post(
        f"{webhook_url}/webhook",
        json={"update_id": 1, "message": {"chat": {"id": 321}, "text": "e2e check"}},
        timeout=REQUEST_TIMEOUT_SECONDS,
    )

    assert response.status_code == HTTPStatus.OK
    received = bot_api[1]
    assert len(received) == 1
    path = urlsplit(received[0])
    assert path.path == f"/bot{BOT_TOKEN}/sendMessage"
    assert parse_qs(path.query) == {"chat_id": ["321"], "text": ["You said: e2e check"]}
    assert "e2e check" in (tmp_path / "bot.log").read_text(encoding="utf-8")
