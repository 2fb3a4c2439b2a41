"""A base-8 clock drawn as nested heptagonal rings of filled sectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .interfaces import Display

MAX_RINGS = 8
_SIDES = 7
_PI = 3.14159265359
_TWO_PI = 6.28318530718

Point = tuple[int, int]


@dataclass
class HeptClockConfig:
    """Ring count, ring width and the two colours of a heptagonal clock."""

    num_rings: int = 3
    ring_width: int = 16
    color_white: int = 0xFFFF
    color_black: int = 0x0000


def heptagon_vertex(
    index: int, radius: int, orientation: int, x: int, y: int
) -> Point:
    """Return vertex ``index`` of a heptagon of ``radius`` centred at (x, y).

    Vertex 0 points straight up; each step of ``orientation`` turns the
    heptagon by half a sector.
    """
    theta = -_PI / 2.0 + index * (_TWO_PI / _SIDES)
    rot = (_PI / _SIDES) * orientation
    angle = theta + rot
    return x + int(radius * math.cos(angle)), y + int(radius * math.sin(angle))


def _edge(a: Point, b: Point, p: Point) -> int:
    return (p[0] - a[0]) * (b[1] - a[1]) - (p[1] - a[1]) * (b[0] - a[0])


class Base8HeptClock:
    """Shows a counter as octal digits, one heptagonal ring per digit.

    Ring 0 holds the lowest digit. Each draw only fills the sectors that
    changed since the previous counter value.
    """

    def __init__(self, num_rings: int, ring_width: int, display: Display) -> None:
        if not 0 <= num_rings <= MAX_RINGS:
            raise ValueError(f"num_rings must be between 0 and {MAX_RINGS}")
        self.display = display
        size = display.size()
        self.screen_width = size.x
        self.screen_height = size.y
        self.config = HeptClockConfig(num_rings=num_rings, ring_width=ring_width)

    def draw(self, current: int, last: int, orientation: int, x: int, y: int) -> int:
        """Draw ``current`` centred at (x, y), given the previously drawn ``last``.

        Returns the counter to pass as ``last`` next time.
        """
        cfg = self.config
        current &= 0xFFFFFFFF
        last &= 0xFFFFFFFF
        if cfg.num_rings == 0:
            return current
        if cfg.num_rings > MAX_RINGS:
            raise ValueError(f"num_rings must not exceed {MAX_RINGS}")

        rings = [
            [
                heptagon_vertex(i, (r + 1) * cfg.ring_width, orientation, x, y)
                for i in range(_SIDES)
            ]
            for r in range(cfg.num_rings)
        ]

        centre = (x, y)
        for r, outer in enumerate(rings):
            shift = r * 3
            curr_d = (current >> shift) & 0x07
            prev_d = (last >> shift) & 0x07
            if curr_d == prev_d:
                continue
            inner = rings[r - 1] if r > 0 else None
            rollover = curr_d < prev_d
            if rollover:
                for i in range(min(prev_d, _SIDES)):
                    self._fill_sector(centre, inner, outer, i, cfg.color_black)
            start = 0 if rollover else prev_d
            for i in range(start, min(curr_d, _SIDES)):
                self._fill_sector(centre, inner, outer, i, cfg.color_white)

        boundary = rings[-1]
        for i, a in enumerate(boundary):
            b = boundary[(i + 1) % _SIDES]
            self.display.draw_line(a[0], a[1], b[0], b[1], cfg.color_white)

        return current

    def _fill_sector(
        self,
        centre: Point,
        inner: Optional[Sequence[Point]],
        outer: Sequence[Point],
        i: int,
        color: int,
    ) -> None:
        nxt = (i + 1) % _SIDES
        if inner is None:
            self._fill_triangle(centre, outer[i], outer[nxt], color)
        else:
            self._fill_triangle(inner[i], inner[nxt], outer[nxt], color)
            self._fill_triangle(inner[i], outer[nxt], outer[i], color)

    def _fill_triangle(self, p0: Point, p1: Point, p2: Point, color: int) -> None:
        xs = (p0[0], p1[0], p2[0])
        ys = (p0[1], p1[1], p2[1])
        min_x = max(min(xs), 0)
        min_y = max(min(ys), 0)
        max_x = min(max(xs), self.screen_width - 1)
        max_y = min(max(ys), self.screen_height - 1)

        for py in range(min_y, max_y + 1):
            for px in range(min_x, max_x + 1):
                p = (px, py)
                w0 = _edge(p1, p2, p)
                w1 = _edge(p2, p0, p)
                w2 = _edge(p0, p1, p)
                if (w0 >= 0 and w1 >= 0 and w2 >= 0) or (
                    w0 <= 0 and w1 <= 0 and w2 <= 0
                ):
                    self.display.draw_pixel(px, py, color)