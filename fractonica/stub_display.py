"""A display that accepts every call, shows nothing and keeps a record of what it was asked to do."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .colors import color, color_hsv
from .interfaces import Display, Vector2

_log = logging.getLogger(__name__)


class StubDisplay(Display):
    """A zero-sized display that is always open.

    Nothing is drawn; each call is appended to ``calls`` as a
    ``(name, args)`` pair, and log messages go to the standard logging system.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        self._record("draw_pixel", x, y, color)

    def begin(self) -> bool:
        self._record("begin")
        return True

    def flush(self) -> None:
        self._record("flush")

    def clear(self) -> None:
        self._record("clear")

    def get_color(self, r: int, g: int, b: int) -> int:
        return color(r, g, b)

    def get_color_hsv(self, h: int, s: int, v: int) -> int:
        return color_hsv(h, s, v)

    def print_text(self, msg: str, x: int, y: int, size: int) -> None:
        self._record("print_text", msg, x, y, size)

    def log(self, msg: str) -> None:
        self._record("log", msg)
        _log.info("%s", msg)

    def log_error(self, msg: str) -> None:
        self._record("log_error", msg)
        _log.error("%s", msg)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        self._record("draw_line", x1, y1, x2, y2, color)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        self._record("draw_rect", x, y, w, h, color)

    def draw_bitmap(
        self, x: int, y: int, width: int, height: int, bitmap: Sequence[int]
    ) -> None:
        self._record("draw_bitmap", x, y, width, height, tuple(bitmap))

    def update(self) -> None:
        self._record("update")

    def is_open(self) -> bool:
        return True

    def size(self) -> Vector2:
        return Vector2(0, 0)