"""Public exports for the WebApp bridge client."""

from webapp_client.config import ClientSettings
from webapp_client.detection import detect_bridge
from webapp_client.session import BridgeClient, SessionSnapshot, build_click_payload

__all__ = [
    "BridgeClient",
    "ClientSettings",
    "SessionSnapshot",
    "build_click_payload",
    "detect_bridge",
]
