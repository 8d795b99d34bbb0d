"""
Neon Yahtzee - Roll Animation Lock

Gates input while the dice-roll animation plays. Each arm bumps a
generation id and schedules a timer tagged with it; the timer only
releases the lock if its tag is still current, so a cancelled or
superseded timer can never clear a newer roll's lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class Cancellable(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[..., Cancellable]


def _daemon_timer(interval: float, function: Callable[..., Any], args: list[Any]) -> threading.Timer:
    timer = threading.Timer(interval, function, args=args)
    timer.daemon = True
    return timer


class RollAnimationLock:
    """Single-outstanding, cancellable deferred release of ``is_rolling``.

    Args:
        duration: Seconds the lock stays engaged after :meth:`arm`.
        timer_factory: ``(interval, function, args) -> timer`` with
            ``start()``/``cancel()``. Defaults to a daemon
            ``threading.Timer``.
        on_release: Called (from the timer thread) when a timer releases
            the lock.
    """

    def __init__(
        self,
        duration: float,
        *,
        timer_factory: TimerFactory | None = None,
        on_release: Callable[[], None] | None = None,
    ) -> None:
        self._duration = duration
        self._timer_factory = timer_factory or _daemon_timer
        self._on_release = on_release
        self._lock = threading.Lock()
        self._timer: Cancellable | None = None
        self._generation = 0
        self._engaged = False

    @property
    def is_engaged(self) -> bool:
        return self._engaged

    @property
    def generation(self) -> int:
        return self._generation

    def arm(self) -> int:
        """Engage the lock and schedule its release.

        Any outstanding timer is cancelled before the new one is armed.

        Returns:
            The generation id of the new timer.
        """
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            generation = self._generation
            self._engaged = True
            if self._duration <= 0:
                self._engaged = False
                return generation
            timer = self._timer_factory(self._duration, self._release, [generation])
            self._timer = timer
        timer.start()
        logger.debug("Roll lock armed (generation %d)", generation)
        return generation

    def cancel(self) -> None:
        """Release the lock immediately and invalidate any pending timer."""
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._engaged = False

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _release(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Ignoring stale roll timer (generation %d)", generation)
                return
            self._engaged = False
            self._timer = None
        if self._on_release is not None:
            self._on_release()
