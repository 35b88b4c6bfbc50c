"""Abstract interface for a host-injected WebApp bridge."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from webapp_bridge_api.models import CapabilityResult

__all__ = ["Bridge", "get_bridge"]


class Bridge(ABC):
    """The contract for the native capabilities a hosted page can reach.

    Every capability is optional on the host side. Implementations never raise:
    a missing capability yields an ``ABSENT`` result and a capability that
    raises yields a ``FAILED`` result.
    """

    @abstractmethod
    def ready(self) -> CapabilityResult:
        """Signal the host that the page finished loading."""
        raise NotImplementedError

    @abstractmethod
    def color_scheme(self) -> CapabilityResult:
        """Read the host's current colour scheme ("light" or "dark")."""
        raise NotImplementedError

    @abstractmethod
    def on_event(self, event: str, handler: Callable[..., object]) -> CapabilityResult:
        """Subscribe ``handler`` to a named host event."""
        raise NotImplementedError

    @abstractmethod
    def off_event(self, event: str, handler: Callable[..., object]) -> CapabilityResult:
        """Remove a handler previously passed to ``on_event``."""
        raise NotImplementedError

    @abstractmethod
    def set_main_button_text(self, text: str) -> CapabilityResult:
        """Set the label of the host-rendered main button."""
        raise NotImplementedError

    @abstractmethod
    def show_main_button(self) -> CapabilityResult:
        """Make the main button visible."""
        raise NotImplementedError

    @abstractmethod
    def hide_main_button(self) -> CapabilityResult:
        """Hide the main button."""
        raise NotImplementedError

    @abstractmethod
    def on_main_button_click(self, handler: Callable[..., object]) -> CapabilityResult:
        """Register a click handler on the main button."""
        raise NotImplementedError

    @abstractmethod
    def off_main_button_click(self, handler: Callable[..., object]) -> CapabilityResult:
        """Remove a click handler from the main button."""
        raise NotImplementedError

    @abstractmethod
    def impact_occurred(self, style: str) -> CapabilityResult:
        """Fire an impact haptic ("light", "medium", "heavy", "rigid", "soft")."""
        raise NotImplementedError

    @abstractmethod
    def notification_occurred(self, kind: str) -> CapabilityResult:
        """Fire a notification haptic ("error", "success", "warning")."""
        raise NotImplementedError

    @abstractmethod
    def selection_changed(self) -> CapabilityResult:
        """Fire a selection-change haptic."""
        raise NotImplementedError

    @abstractmethod
    def send_data(self, data: str) -> CapabilityResult:
        """Send a string payload to the bot through the host."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> CapabilityResult:
        """Ask the host to close the page."""
        raise NotImplementedError

    @abstractmethod
    def open_link(self, url: str) -> CapabilityResult:
        """Ask the host to open ``url`` in an external browser."""
        raise NotImplementedError

    @abstractmethod
    def set_header_color(self, color: str) -> CapabilityResult:
        """Set the host header colour (theme key or hex value)."""
        raise NotImplementedError

    @abstractmethod
    def set_background_color(self, color: str) -> CapabilityResult:
        """Set the host background colour (theme key or hex value)."""
        raise NotImplementedError


def get_bridge(host: object) -> Bridge | None:
    """Return the bridge injected into ``host``, if any.

    Args:
        host: The page's global object (the ``window`` equivalent).

    Returns:
        Bridge implementation, or None when the host carries no bridge yet.

    """
    raise NotImplementedError
