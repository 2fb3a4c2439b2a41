"""Concrete Unix clocks."""

from __future__ import annotations

import time

from .interfaces import UnixClock


class TransientUnixClock(UnixClock):
    """A clock driven by elapsed time since start-up plus a fixed offset."""

    def __init__(self, offset: int = 0) -> None:
        self.offset = offset
        self._last = 0
        self.update(0)

    def now(self) -> int:
        """Return the time recorded by the last update."""
        return self._last

    def update(self, time_since_startup: int) -> None:
        """Record the elapsed time since start-up."""
        self._last = time_since_startup + self.offset


class SystemUnixClock(UnixClock):
    """A clock that reads the system wall-clock time."""

    def now(self) -> int:
        """Return the current Unix time in whole seconds."""
        return int(time.time())