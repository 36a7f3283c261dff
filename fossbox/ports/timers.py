"""Timer protocols.

Controllers arm one-shot timers through these protocols. A running asyncio
event loop satisfies Timer as-is (``loop.call_later`` returns a cancellable
``asyncio.TimerHandle``), which is the default everywhere; tests substitute a
manually advanced clock.
"""

import asyncio
from collections.abc import Callable
from typing import Any, Protocol


class TimerHandle(Protocol):
    """A pending one-shot callback."""

    def cancel(self) -> None:
        """Prevent the callback from running. Idempotent."""
        ...


class Timer(Protocol):
    """Source of one-shot timers."""

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> TimerHandle:
        """Run ``callback(*args)`` after ``delay`` seconds.

        The callback must never be run synchronously from this call.
        """
        ...


def resolve_timer(timer: Timer | None) -> Timer:
    """Return ``timer`` or, if None, the running event loop."""
    if timer is not None:
        return timer
    return asyncio.get_running_loop()
