"""
Countdown timer used by timed writing.

Each timer is a handle owned by one session: cancel it and no callback will
fire afterwards. Ticks run on a daemon thread; tick() is public so callers
(and tests) can also drive the countdown by hand.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional


class CountdownTimer:
    """
    Single-shot countdown with tick and expiry callbacks.
    """

    def __init__(
        self,
        duration: int,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expire: Optional[Callable[[], None]] = None,
        interval: float = 1.0
    ):
        self.duration = duration
        self.remaining = duration
        self.interval = interval
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stopped.is_set()

    @property
    def cancelled(self) -> bool:
        return self._stopped.is_set() and self.remaining > 0

    def start(self) -> None:
        """Start ticking on a background thread."""
        if self._thread is not None:
            raise RuntimeError("Timer already started")
        self._thread = threading.Thread(target=self._run, name="countdown", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            self.tick()

    def tick(self) -> None:
        """
        Advance the countdown by one unit.

        Fires on_tick with the remaining time, then on_expire once when it
        reaches zero. No-op after cancel or expiry.
        """
        with self._lock:
            if self._stopped.is_set():
                return
            self.remaining -= 1
            remaining = self.remaining
            expired = remaining <= 0
            if expired:
                self._stopped.set()

        if self._on_tick is not None:
            self._on_tick(max(remaining, 0))
        if expired and self._on_expire is not None:
            self._on_expire()

    def cancel(self) -> None:
        """Stop the countdown; pending callbacks never fire."""
        with self._lock:
            self._stopped.set()
