"""Telegram WebApp Bridge Implementation.

Concrete webapp_bridge_api.Bridge backed by the ``Telegram.WebApp`` object the
Telegram client injects into a hosted page. Every capability is probed at call
time; a missing attribute becomes an ``ABSENT`` result and anything the host
raises is classified into a ``FAILED`` result, so callers branch on results
instead of catching exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

import webapp_bridge_api
from webapp_bridge_api import Bridge, CapabilityResult

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("telegram_webapp_impl")

_MISSING = object()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _lookup(target: object, name: str) -> object:
    """Read ``name`` from an attribute-style or mapping-style host object."""
    if target is None:
        return None
    if isinstance(target, Mapping):
        return target.get(name)
    return getattr(target, name, None)


def locate_webapp(host: object) -> object | None:
    """Return ``host.Telegram.WebApp`` when present, otherwise None.

    A host whose ``Telegram`` or ``WebApp`` attribute raises is treated as not
    carrying the bridge yet.
    """
    try:
        return _lookup(_lookup(host, "Telegram"), "WebApp")
    except Exception as exc:  # noqa: BLE001
        logger.debug("Telegram.WebApp lookup failed: %s", exc)
        return None


def degrade(capability: str, exc: BaseException) -> CapabilityResult:
    """Map a capability failure to a uniform degraded result and log it once."""
    logger.warning("%s failed: %s", capability, exc)
    return CapabilityResult.failed(capability, exc)


# ---------------------------------------------------------------------------
# Bridge implementation
# ---------------------------------------------------------------------------


class TelegramWebAppBridge(Bridge):
    """Concrete webapp_bridge_api.Bridge over a ``Telegram.WebApp`` object.

    Attributes:
        _webapp: The host-injected WebApp object (duck-typed).

    """

    def __init__(self, webapp: object) -> None:
        """Wrap the host-injected WebApp object."""
        self._webapp = webapp

    @property
    def webapp(self) -> object:
        """Get the wrapped WebApp object."""
        return self._webapp

    def _call(self, path: str, *args: object) -> CapabilityResult:
        """Invoke the callable at dotted ``path`` under the WebApp object."""
        try:
            target: object = self._webapp
            for part in path.split("."):
                target = _lookup(target, part)
            if not callable(target):
                logger.debug("%s not available", path)
                return CapabilityResult.absent(path)
            value = target(*args)
        except Exception as exc:  # noqa: BLE001
            return degrade(path, exc)
        return CapabilityResult.ok(path, value)

    def ready(self) -> CapabilityResult:
        """Call ``WebApp.ready()``."""
        return self._call("ready")

    def color_scheme(self) -> CapabilityResult:
        """Read ``WebApp.colorScheme``."""
        try:
            value = getattr(self._webapp, "colorScheme", _MISSING)
            if value is _MISSING and isinstance(self._webapp, Mapping):
                value = self._webapp.get("colorScheme", _MISSING)
        except Exception as exc:  # noqa: BLE001
            return degrade("colorScheme", exc)
        if value is _MISSING:
            return CapabilityResult.absent("colorScheme")
        return CapabilityResult.ok("colorScheme", value)

    def on_event(self, event: str, handler: Callable[..., object]) -> CapabilityResult:
        """Call ``WebApp.onEvent(event, handler)``."""
        return self._call("onEvent", event, handler)

    def off_event(self, event: str, handler: Callable[..., object]) -> CapabilityResult:
        """Call ``WebApp.offEvent(event, handler)``."""
        return self._call("offEvent", event, handler)

    def set_main_button_text(self, text: str) -> CapabilityResult:
        """Call ``WebApp.MainButton.setText(text)``."""
        return self._call("MainButton.setText", text)

    def show_main_button(self) -> CapabilityResult:
        """Call ``WebApp.MainButton.show()``."""
        return self._call("MainButton.show")

    def hide_main_button(self) -> CapabilityResult:
        """Call ``WebApp.MainButton.hide()``."""
        return self._call("MainButton.hide")

    def on_main_button_click(self, handler: Callable[..., object]) -> CapabilityResult:
        """Call ``WebApp.MainButton.onClick(handler)``."""
        return self._call("MainButton.onClick", handler)

    def off_main_button_click(self, handler: Callable[..., object]) -> CapabilityResult:
        """Call ``WebApp.MainButton.offClick(handler)``."""
        return self._call("MainButton.offClick", handler)

    def impact_occurred(self, style: str) -> CapabilityResult:
        """Call ``WebApp.HapticFeedback.impactOccurred(style)``."""
        return self._call("HapticFeedback.impactOccurred", style)

    def notification_occurred(self, kind: str) -> CapabilityResult:
        """Call ``WebApp.HapticFeedback.notificationOccurred(kind)``."""
        return self._call("HapticFeedback.notificationOccurred", kind)

    def selection_changed(self) -> CapabilityResult:
        """Call ``WebApp.HapticFeedback.selectionChanged()``."""
        return self._call("HapticFeedback.selectionChanged")

    def send_data(self, data: str) -> CapabilityResult:
        """Call ``WebApp.sendData(data)``."""
        return self._call("sendData", data)

    def close(self) -> CapabilityResult:
        """Call ``WebApp.close()``."""
        return self._call("close")

    def open_link(self, url: str) -> CapabilityResult:
        """Call ``WebApp.openLink(url)``."""
        return self._call("openLink", url)

    def set_header_color(self, color: str) -> CapabilityResult:
        """Call ``WebApp.setHeaderColor(color)``."""
        return self._call("setHeaderColor", color)

    def set_background_color(self, color: str) -> CapabilityResult:
        """Call ``WebApp.setBackgroundColor(color)``."""
        return self._call("setBackgroundColor", color)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def get_bridge_impl(host: object) -> TelegramWebAppBridge | None:
    """Return a TelegramWebAppBridge when ``host`` carries ``Telegram.WebApp``."""
    webapp = locate_webapp(host)
    if webapp is None:
        return None
    return TelegramWebAppBridge(webapp)


# ---------------------------------------------------------------------------
# Factory registration
# ---------------------------------------------------------------------------


def register() -> None:
    """Bind the Telegram bridge factory into webapp_bridge_api.get_bridge."""
    webapp_bridge_api.get_bridge = get_bridge_impl
