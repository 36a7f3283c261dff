"""Timer-based coalescing of bursts of calls."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fossbox.core.logging import get_logger
from fossbox.ports.timers import Timer, TimerHandle, resolve_timer

logger = get_logger(__name__)


class DebounceScheduler:
    """Runs only the last of a burst of scheduled actions.

    Each schedule() call cancels the pending action, if any, and arms a fresh
    one-shot timer. A burst of calls spaced closer than the delay therefore
    fires once, ``delay_ms`` after the last call, with the last call's
    arguments. Actions always run from the timer, never from schedule().

    Example:
        debounce = DebounceScheduler()
        debounce.schedule(300, run_query, "star wa")
        debounce.schedule(300, run_query, "star war")  # only this one runs
    """

    def __init__(self, timer: Timer | None = None) -> None:
        """Initialize the scheduler.

        Args:
            timer: Timer source. Defaults to the running asyncio loop,
                resolved when the first action is scheduled.
        """
        self._timer = timer
        self._handle: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        """Whether an action is armed and has not fired yet."""
        return self._handle is not None

    def schedule(self, delay_ms: int, action: Callable[..., Any], *args: Any) -> None:
        """Replace any pending action with ``action(*args)`` after ``delay_ms``."""
        self.cancel()
        timer = resolve_timer(self._timer)
        self._handle = timer.call_later(
            max(delay_ms, 0) / 1000, self._fire, action, args
        )

    def cancel(self) -> None:
        """Drop the pending action, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, action: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self._handle = None
        logger.debug("debounce_fired", action=getattr(action, "__name__", repr(action)))
        action(*args)
