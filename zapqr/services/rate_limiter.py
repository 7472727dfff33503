from __future__ import annotations

import math
import time
from typing import Callable

from PyQt6.QtCore import QCoreApplication, QEventLoop, Qt, QTimer

from zapqr.domain.interfaces import IRateLimiter

DEFAULT_INTERVAL_MS = 300


def event_loop_sleep(seconds: float) -> None:
    """
    Wait without blocking the Qt event loop when an application exists.
    Plain time.sleep() otherwise (headless scripts, no QCoreApplication).
    """
    if seconds <= 0:
        return
    if QCoreApplication.instance() is None:
        time.sleep(seconds)
        return
    loop = QEventLoop()
    QTimer.singleShot(math.ceil(seconds * 1000), Qt.TimerType.PreciseTimer, loop.quit)
    loop.exec()


class MinimumIntervalGate(IRateLimiter):
    """Lets one caller through at a time, never closer than `interval_ms` apart."""

    def __init__(
        self,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = event_loop_sleep,
    ) -> None:
        if interval_ms < 0:
            raise ValueError("interval_ms must be >= 0")
        self.interval = interval_ms / 1000
        self._clock = clock
        self._sleep = sleep
        self._last: float | None = None

    def acquire(self) -> None:
        now = self._clock()
        if self._last is not None:
            # Timers may wake early; loop until the full interval has passed.
            remaining = self._last + self.interval - now
            while remaining > 0:
                self._sleep(remaining)
                now = self._clock()
                remaining = self._last + self.interval - now
        self._last = now

    def reset(self) -> None:
        self._last = None
