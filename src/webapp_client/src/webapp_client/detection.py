"""Polling detection for a late-injected bridge object."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

from webapp_bridge_api import Detection, Found, TimedOut

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from webapp_bridge_api import Bridge


async def detect_bridge(
    locate: Callable[[], Bridge | None],
    *,
    timeout: float,
    interval: float,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> Detection:
    """Wait for ``locate`` to return a bridge.

    Checks once immediately, then every ``interval`` seconds. Resolves with
    ``TimedOut`` at the first check where more than ``timeout`` seconds have
    passed, so a miss resolves between ``timeout`` and ``timeout + interval``.

    Args:
        locate: Returns the bridge if the host carries one yet.
        timeout: Detection window in seconds.
        interval: Delay between checks in seconds.
        clock: Monotonic time source.
        sleep: Awaitable delay; cancelling it cancels the poll.

    Returns:
        ``Found`` with the bridge, or ``TimedOut`` with the elapsed wait.

    """
    bridge = locate()
    if bridge is not None:
        return Found(bridge)

    start = clock()
    while True:
        await sleep(interval)
        bridge = locate()
        if bridge is not None:
            return Found(bridge)
        elapsed = clock() - start
        if elapsed > timeout:
            return TimedOut(waited=elapsed)
