"""Positions of a moment within the lunar cycles of the bundled ephemerides."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import apogee, new_moon, nodal_ascending
from .ephemeris import MemorySource, fraction_at


class LunarEvent(Enum):
    """The lunar cycles with bundled ephemeris tables."""

    NEW_MOON = 0
    APOGEE = 1
    NODAL_ASCENDING = 2


@dataclass(frozen=True)
class LunarEventInfo:
    """Where a moment falls within one lunar cycle."""

    bin: int
    bin_octal: int
    progress: float
    event: LunarEvent
    normalized: float


class LunarTime:
    """Maps moments to bins of ``base ** digits`` within each lunar cycle."""

    def __init__(self, digits: int = 4, base: int = 8) -> None:
        self.digits = digits
        self.base = base
        self.resolution = base ** digits
        self._sources: dict[LunarEvent, MemorySource] = {
            LunarEvent.NEW_MOON: new_moon.source(),
            LunarEvent.APOGEE: apogee.source(),
            LunarEvent.NODAL_ASCENDING: nodal_ascending.source(),
        }

    def event_info(self, timestamp: int, event: LunarEvent) -> LunarEventInfo:
        """Return the bin of ``timestamp`` within the cycle of ``event``.

        The timestamp is taken as an unsigned 32-bit number of seconds.
        Moments outside the table yield bin 0 with zero progress.
        """
        fraction = fraction_at(
            self._sources[event], timestamp & 0xFFFFFFFF, self.resolution
        )
        return LunarEventInfo(
            bin=fraction.bin,
            bin_octal=fraction.bin_octal,
            progress=fraction.progress,
            event=event,
            normalized=fraction.normalized,
        )