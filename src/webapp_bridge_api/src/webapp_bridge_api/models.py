"""Result types shared by bridge implementations and their consumers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from webapp_bridge_api.client import Bridge

__all__ = [
    "CapabilityResult",
    "CapabilityStatus",
    "Cancelled",
    "Detection",
    "Found",
    "TimedOut",
]


class CapabilityStatus(str, Enum):
    """Outcome of a single capability call against the host bridge."""

    OK = "ok"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass(frozen=True)
class CapabilityResult:
    """Uniform result of a bridge capability call.

    Attributes:
        capability: Dotted capability name, e.g. ``MainButton.show``.
        status: Whether the call ran, was unavailable, or raised.
        value: Return value (or read value) when the call succeeded.
        error: The exception raised by the host, when the call failed.

    """

    capability: str
    status: CapabilityStatus
    value: object | None = None
    error: BaseException | None = None

    @classmethod
    def ok(cls, capability: str, value: object | None = None) -> CapabilityResult:
        """Build a successful result."""
        return cls(capability=capability, status=CapabilityStatus.OK, value=value)

    @classmethod
    def absent(cls, capability: str) -> CapabilityResult:
        """Build a result for a capability the host does not provide."""
        return cls(capability=capability, status=CapabilityStatus.ABSENT)

    @classmethod
    def failed(cls, capability: str, error: BaseException) -> CapabilityResult:
        """Build a result for a capability that raised."""
        return cls(capability=capability, status=CapabilityStatus.FAILED, error=error)

    @property
    def succeeded(self) -> bool:
        """Return True when the capability ran without raising."""
        return self.status is CapabilityStatus.OK


# ---------------------------------------------------------------------------
# Detection outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Found:
    """The bridge object was located."""

    bridge: Bridge


@dataclass(frozen=True)
class TimedOut:
    """The bridge object never appeared within the detection window."""

    waited: float


@dataclass(frozen=True)
class Cancelled:
    """Detection was released before it resolved."""


Detection = Found | TimedOut | Cancelled
