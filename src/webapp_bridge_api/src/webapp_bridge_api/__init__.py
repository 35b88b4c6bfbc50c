"""Public export surface for ``webapp_bridge_api``."""

from webapp_bridge_api.client import Bridge, get_bridge
from webapp_bridge_api.models import (
    CapabilityResult,
    CapabilityStatus,
    Cancelled,
    Detection,
    Found,
    TimedOut,
)

__all__ = [
    "Bridge",
    "CapabilityResult",
    "CapabilityStatus",
    "Cancelled",
    "Detection",
    "Found",
    "TimedOut",
    "get_bridge",
]
