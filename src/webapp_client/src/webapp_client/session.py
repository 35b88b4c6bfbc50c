"""Bridge session for a page hosted inside the Telegram client.

Detects the host-injected WebApp bridge, performs the ready handshake, mirrors
the main button, haptics and colour scheme, and forwards a JSON payload to the
bot when the main button is clicked. No call in this module raises because the
host lacks a capability or fails; capability failures are logged by the bridge
implementation, and missing capabilities are logged here where the page needs
them.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
import webbrowser
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

import telegram_webapp_impl  # noqa: F401  # ensure bridge implementation registers itself
import webapp_bridge_api
from webapp_bridge_api import Cancelled, Detection, Found
from webapp_client.config import ClientSettings
from webapp_client.detection import detect_bridge

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from webapp_bridge_api import Bridge, CapabilityResult

    Detector = Callable[..., Awaitable[Detection]]

logger = logging.getLogger("webapp_client")

THEME_CHANGED_EVENT = "themeChanged"
MAIN_BUTTON_CLICKED_EVENT = "mainButtonClicked"
CLICK_ACTION = "main_button_clicked"
COLOR_SCHEMES = ("light", "dark")
DEFAULT_COLOR_SCHEME = "light"
DEFAULT_SHOW_TEXT = "Continue"
HAPTIC_KINDS = ("impact", "notification", "selection")


class SessionSnapshot(BaseModel):
    """Developer-facing view of the session state."""

    bridge_available: bool
    ready: bool
    color_scheme: str
    button_visible: bool
    status: str


def build_click_payload(now_ms: int | None = None) -> dict[str, Any]:
    """Return the payload sent when the main button is clicked."""
    ts = now_ms if now_ms is not None else int(time.time() * 1000)
    return {"action": CLICK_ACTION, "ts": ts}


class BridgeClient:
    """Page-lifecycle session against the host bridge.

    Attributes:
        bridge: The detected bridge, or None before/without detection.
        ready: One-way flag set once the handshake sequence ran.
        color_scheme: Last colour scheme read from the host.
        button_visible: Reflects the last show/hide call that did not fail.

    """

    def __init__(
        self,
        host: object,
        settings: ClientSettings | None = None,
        *,
        detector: Detector = detect_bridge,
    ) -> None:
        """Create a session for ``host`` (the page's global object)."""
        self._host = host
        self._settings = settings or ClientSettings()
        self._detector = detector
        self._poll_task: asyncio.Task[Detection] | None = None
        self._torn_down = False
        self._click_via_event = False
        # Bound once so the host sees the same callable on subscribe and unsubscribe.
        self._click_handler = self.handle_main_button_click
        self._theme_handler = self._on_theme_changed
        self.bridge: Bridge | None = None
        self.ready = False
        self.color_scheme = DEFAULT_COLOR_SCHEME
        self.button_visible = False

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    async def initialize(self) -> Detection:
        """Detect the bridge and run the readiness sequence.

        Returns:
            The detection outcome. ``Cancelled`` when ``teardown`` released the
            poll before it resolved.

        """
        self._poll_task = asyncio.create_task(
            self._detector(
                self._locate,
                timeout=self._settings.detect_timeout,
                interval=self._settings.poll_interval,
            )
        )
        try:
            detection = await self._poll_task
        except asyncio.CancelledError:
            if not self._torn_down:
                raise
            return Cancelled()
        finally:
            self._poll_task = None

        if self._torn_down:
            return Cancelled()
        if not isinstance(detection, Found):
            logger.warning("Telegram.WebApp not found (not inside Telegram or timed out).")
            return detection

        bridge = detection.bridge
        bridge.ready()
        self.bridge = bridge
        self._read_color_scheme()
        self.ready = True
        logger.info("Bridge ready (colorScheme=%s)", self.color_scheme)

        bridge.on_event(THEME_CHANGED_EVENT, self._theme_handler)
        bridge.set_header_color(self._settings.header_color)
        bridge.set_background_color(self._settings.background_color)

        self.set_button_text(self._settings.initial_button_text)
        self._show()
        self._attach_click_handler()
        return detection

    def teardown(self) -> None:
        """Release the detection poll and unsubscribe host listeners."""
        self._torn_down = True
        if self._poll_task is not None and not self._poll_task.done():
            self._poll_task.cancel()
        bridge = self.bridge
        if bridge is None:
            return
        bridge.off_event(THEME_CHANGED_EVENT, self._theme_handler)
        if self._click_via_event:
            bridge.off_event(MAIN_BUTTON_CLICKED_EVENT, self._click_handler)
        else:
            bridge.off_main_button_click(self._click_handler)

    # -----------------------------------------------------------------------
    # Main button
    # -----------------------------------------------------------------------

    def show_button(self, text: str = DEFAULT_SHOW_TEXT) -> bool:
        """Set the main button label and show it.

        ``button_visible`` only flips when both host calls succeed.
        """
        if self.bridge is None:
            return False
        result = self.bridge.set_main_button_text(text)
        if not result.succeeded:
            _report_absent("MainButton.setText", result)
            return False
        return self._show()

    def hide_button(self) -> bool:
        """Hide the main button."""
        if self.bridge is None:
            return False
        result = self.bridge.hide_main_button()
        if not result.succeeded:
            _report_absent("MainButton.hide", result)
            return False
        self.button_visible = False
        return True

    def set_button_text(self, text: str) -> bool:
        """Change the main button label without touching visibility."""
        if self.bridge is None:
            return False
        result = self.bridge.set_main_button_text(text)
        if not result.succeeded:
            _report_absent("MainButton.setText", result)
        return result.succeeded

    def handle_main_button_click(self, *_args: object) -> str:
        """Pulse a haptic and forward the click payload to the bot."""
        self.trigger_haptic("impact", "light")
        return self.send_payload(build_click_payload())

    # -----------------------------------------------------------------------
    # Bridge helpers
    # -----------------------------------------------------------------------

    def send_payload(self, obj: object) -> str:
        """Serialize ``obj`` to JSON and send it through the bridge data channel.

        Returns:
            The JSON text, whether it was sent or discarded.

        """
        payload = json.dumps(obj, separators=(",", ":"))
        result = self.bridge.send_data(payload) if self.bridge is not None else None
        if result is None or (not result.succeeded and result.error is None):
            logger.info("tg.sendData not available, payload: %s", payload)
        return payload

    def trigger_haptic(self, kind: str, *args: str) -> bool:
        """Forward a haptic to the host; absence of haptics is a silent no-op.

        Args:
            kind: ``impact``, ``notification`` or ``selection``.
            args: Style or type passed to the host (``light``, ``success``...).

        """
        if kind not in HAPTIC_KINDS:
            msg = f"Unsupported haptic kind: {kind}"
            raise ValueError(msg)
        if self.bridge is None:
            return False
        if kind == "impact":
            result = self.bridge.impact_occurred(*(args or ("light",)))
        elif kind == "notification":
            result = self.bridge.notification_occurred(*(args or ("success",)))
        else:
            result = self.bridge.selection_changed()
        return result.succeeded

    def close(self) -> bool:
        """Ask the host to close the page."""
        if self.bridge is None:
            logger.warning("tg.close not available")
            return False
        result = self.bridge.close()
        if not result.succeeded:
            _report_absent("closeWebApp", result)
        return result.succeeded

    def open_link(self, url: str) -> bool:
        """Open ``url`` through the host, or in a new browser tab as a fallback."""
        if self.bridge is not None:
            result = self.bridge.open_link(url)
            if result.succeeded:
                return True
            if result.error is not None:
                return False
        return webbrowser.open_new_tab(url)

    def snapshot(self) -> SessionSnapshot:
        """Return a developer-facing view of the session state."""
        return SessionSnapshot(
            bridge_available=self.bridge is not None,
            ready=self.ready,
            color_scheme=self.color_scheme,
            button_visible=self.button_visible,
            status="Ready inside Telegram" if self.ready else "Not running inside Telegram WebApp",
        )

    # -----------------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------------

    def _locate(self) -> Bridge | None:
        return webapp_bridge_api.get_bridge(self._host)

    def _show(self) -> bool:
        assert self.bridge is not None
        result = self.bridge.show_main_button()
        if not result.succeeded:
            _report_absent("MainButton.show", result)
            return False
        self.button_visible = True
        return True

    def _attach_click_handler(self) -> None:
        """Prefer ``MainButton.onClick``; fall back to the generic event channel."""
        assert self.bridge is not None
        result = self.bridge.on_main_button_click(self._click_handler)
        if result.succeeded or result.error is not None:
            return
        fallback = self.bridge.on_event(MAIN_BUTTON_CLICKED_EVENT, self._click_handler)
        self._click_via_event = fallback.succeeded

    def _read_color_scheme(self) -> None:
        assert self.bridge is not None
        result = self.bridge.color_scheme()
        value = result.value if result.succeeded else None
        self.color_scheme = value if value in COLOR_SCHEMES else DEFAULT_COLOR_SCHEME

    def _on_theme_changed(self, *_args: object) -> None:
        if self.bridge is not None:
            self._read_color_scheme()


def _report_absent(label: str, result: CapabilityResult) -> None:
    """Log a missing capability; failures were already logged by the bridge."""
    if result.error is None:
        logger.warning("%s failed: %s not available", label, result.capability)
