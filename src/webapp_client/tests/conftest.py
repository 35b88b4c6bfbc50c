"""Shared fakes for bridge client tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable


class FakeMainButton:
    """Records the calls a page makes against Telegram.WebApp.MainButton."""

    def __init__(self) -> None:
        self.text: str | None = None
        self.visible = False
        self.click_handlers: list[Callable[..., Any]] = []
        self.fail_show = False

    def setText(self, text: str) -> None:  # noqa: N802
        self.text = text

    def show(self) -> None:
        if self.fail_show:
            raise RuntimeError("show failed")
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def onClick(self, handler: Callable[..., Any]) -> None:  # noqa: N802
        self.click_handlers.append(handler)

    def offClick(self, handler: Callable[..., Any]) -> None:  # noqa: N802
        self.click_handlers.remove(handler)

    def click(self) -> list[Any]:
        return [handler() for handler in list(self.click_handlers)]


class FakeHaptics:
    """Records haptic calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def impactOccurred(self, *args: Any) -> None:  # noqa: N802
        self.calls.append(("impact", args))

    def notificationOccurred(self, *args: Any) -> None:  # noqa: N802
        self.calls.append(("notification", args))

    def selectionChanged(self) -> None:  # noqa: N802
        self.calls.append(("selection", ()))


class FakeWebApp:
    """In-memory stand-in for the injected Telegram.WebApp object."""

    def __init__(self) -> None:
        self.colorScheme = "dark"  # noqa: N815
        self.MainButton = FakeMainButton()  # noqa: N815
        self.HapticFeedback = FakeHaptics()  # noqa: N815
        self.ready_calls = 0
        self.sent: list[str] = []
        self.opened: list[str] = []
        self.closed = 0
        self.header_color: str | None = None
        self.background_color: str | None = None
        self.events: dict[str, list[Callable[..., Any]]] = {}

    def ready(self) -> None:
        self.ready_calls += 1

    def sendData(self, data: str) -> None:  # noqa: N802
        self.sent.append(data)

    def openLink(self, url: str) -> None:  # noqa: N802
        self.opened.append(url)

    def close(self) -> None:
        self.closed += 1

    def setHeaderColor(self, color: str) -> None:  # noqa: N802
        self.header_color = color

    def setBackgroundColor(self, color: str) -> None:  # noqa: N802
        self.background_color = color

    def onEvent(self, event: str, handler: Callable[..., Any]) -> None:  # noqa: N802
        self.events.setdefault(event, []).append(handler)

    def offEvent(self, event: str, handler: Callable[..., Any]) -> None:  # noqa: N802
        self.events.get(event, []).remove(handler)

    def emit(self, event: str) -> None:
        for handler in list(self.events.get(event, [])):
            handler()


@pytest.fixture
def webapp() -> FakeWebApp:
    """A fresh fake WebApp object."""
    return FakeWebApp()


@pytest.fixture
def host(webapp: FakeWebApp) -> SimpleNamespace:
    """A ``window``-like host carrying ``Telegram.WebApp``."""
    return SimpleNamespace(Telegram=SimpleNamespace(WebApp=webapp))


@pytest.fixture
def empty_host() -> SimpleNamespace:
    """A ``window``-like host without the bridge."""
    return SimpleNamespace()
