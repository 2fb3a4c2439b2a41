"""Reading compact ephemeris timestamp tables and locating times within them.

Binary file format (little-endian): a 16-byte header of uint32 magic
("FRAC"), uint32 entry count and uint64 reserved, followed by int64
timestamps.
"""

from __future__ import annotations

import bisect
import math
import os
import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Optional, Union

MAGIC = 0x43415246
HEADER_SIZE = 16

_HEADER = struct.Struct("<IIQ")
_TIMESTAMP = struct.Struct("<q")


class EphemerisError(Exception):
    """Raised when an ephemeris file is malformed or unusable."""


@dataclass(frozen=True)
class EphemerisHeader:
    """The fixed header at the start of an ephemeris file."""

    magic: int
    entry_count: int
    reserved: int = 0

    @classmethod
    def parse(cls, data: bytes) -> "EphemerisHeader":
        """Decode a header from its 16 bytes."""
        if len(data) != HEADER_SIZE:
            raise EphemerisError(
                f"header must be {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_HEADER.unpack(data))

    def pack(self) -> bytes:
        """Encode the header as 16 bytes."""
        return _HEADER.pack(self.magic, self.entry_count, self.reserved)

    @property
    def has_valid_magic(self) -> bool:
        return self.magic == MAGIC


class EphemerisFile:
    """An ephemeris file read on demand, one timestamp at a time."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self._file: BinaryIO = open(path, "rb")
        try:
            self.header = EphemerisHeader.parse(self._file.read(HEADER_SIZE))
        except EphemerisError:
            self._file.close()
            raise

    def __len__(self) -> int:
        return self.header.entry_count

    def timestamp(self, index: int) -> int:
        """Return the timestamp stored at ``index``."""
        if self._file.closed:
            raise EphemerisError("ephemeris file is closed")
        if not 0 <= index < self.header.entry_count:
            raise IndexError(f"index {index} out of range")
        self._file.seek(HEADER_SIZE + index * _TIMESTAMP.size)
        data = self._file.read(_TIMESTAMP.size)
        if len(data) != _TIMESTAMP.size:
            raise EphemerisError(f"truncated entry at index {index}")
        return _TIMESTAMP.unpack(data)[0]

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "EphemerisFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemorySource:
    """An ephemeris held in memory as a sorted sequence of timestamps."""

    def __init__(self, timestamps: Iterable[int]) -> None:
        self.timestamps = tuple(timestamps)

    def timestamp(self, index: int) -> int:
        """Return the timestamp stored at ``index``."""
        if not 0 <= index < len(self.timestamps):
            raise IndexError(f"index {index} out of range")
        return self.timestamps[index]

    def __len__(self) -> int:
        return len(self.timestamps)


@dataclass(frozen=True)
class SearchResult:
    """Indices of the entries at or before and at or after a timestamp."""

    past_index: Optional[int] = None
    future_index: Optional[int] = None

    @property
    def found_past(self) -> bool:
        return self.past_index is not None

    @property
    def found_future(self) -> bool:
        return self.future_index is not None


@dataclass
class EphemerisWindow:
    """A cached [start, end] window between two neighbouring entries."""

    start: int = 0
    end: int = 0

    def contains(self, timestamp: int) -> bool:
        return self.end > self.start and self.start <= timestamp <= self.end


@dataclass(frozen=True)
class EphemerisFraction:
    """Where a timestamp falls within its surrounding ephemeris period."""

    bin: int = 0
    bin_octal: int = 0
    normalized: float = 0.0
    progress: float = 0.0
    valid: bool = False
    past_index: Optional[int] = None
    future_index: Optional[int] = None


def find_closest(source: MemorySource, timestamp: int) -> SearchResult:
    """Find the entries surrounding ``timestamp``.

    On an exact match both indices point at the matching entry.
    """
    stamps = source.timestamps
    if not stamps:
        return SearchResult()
    if timestamp < stamps[0]:
        return SearchResult(future_index=0)
    if timestamp > stamps[-1]:
        return SearchResult(past_index=len(stamps) - 1)

    left = bisect.bisect_left(stamps, timestamp)
    if left < len(stamps) and stamps[left] == timestamp:
        return SearchResult(past_index=left, future_index=left)
    return SearchResult(
        past_index=left - 1 if left > 0 else None,
        future_index=left if left < len(stamps) else None,
    )


def decimal_to_octal(number: int) -> int:
    """Return the integer whose decimal digits are the octal digits of ``number``."""
    if number < 0:
        raise ValueError("number must not be negative")
    return int(format(number, "o"))


def fraction_at(
    source: MemorySource,
    unix_ts: int,
    resolution: int,
    window: Optional[EphemerisWindow] = None,
) -> EphemerisFraction:
    """Map ``unix_ts`` to a bin of ``resolution`` within its ephemeris period.

    If ``window`` is given and contains ``unix_ts`` it is used instead of
    searching the source; otherwise it is updated with the window found.
    The result is marked invalid when no surrounding period exists.
    """
    if resolution <= 0:
        raise ValueError("resolution must be positive")
    if len(source) < 2:
        return EphemerisFraction()

    if window is not None and window.contains(unix_ts):
        t0, t1 = window.start, window.end
        past_index = future_index = None
    else:
        found = find_closest(source, unix_ts)
        past_index, future_index = found.past_index, found.future_index
        invalid = EphemerisFraction(past_index=past_index, future_index=future_index)
        if not (found.found_past and found.found_future):
            return invalid
        t0 = source.timestamp(past_index)
        t1 = source.timestamp(future_index)
        if t1 <= t0:
            return invalid
        if window is not None:
            window.start, window.end = t0, t1

    unix_ts = min(max(unix_ts, t0), t1)
    normalized = min(max((unix_ts - t0) / (t1 - t0), 0.0), 1.0)
    pos = normalized * resolution

    ceiled = min(max(math.ceil(pos), 1), resolution)
    next_boundary = float(ceiled)
    prev_boundary = next_boundary - 1.0
    if pos <= prev_boundary:
        progress = 0.0
    elif pos >= next_boundary:
        progress = 1.0
    else:
        progress = pos - prev_boundary

    bin_index = ceiled - 1
    return EphemerisFraction(
        bin=bin_index,
        bin_octal=decimal_to_octal(bin_index),
        normalized=normalized,
        progress=progress,
        valid=True,
        past_index=past_index,
        future_index=future_index,
    )