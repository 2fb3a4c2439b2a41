"""An 8x8 glyph encoding the current position in three lunar cycles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .interfaces import Display, Matrix
from .lunar_time import LunarEvent, LunarTime


def _bit(x: int, y: int) -> int:
    return 1 << (y * 4 + x)


_STEP_MASKS = (
    _bit(2, 1),
    _bit(1, 1),
    _bit(1, 2),
    _bit(2, 2),
    _bit(3, 0) | _bit(3, 1) | _bit(3, 2),
    _bit(0, 0) | _bit(1, 0) | _bit(2, 0),
    _bit(0, 1) | _bit(0, 2) | _bit(0, 3),
    _bit(1, 3) | _bit(2, 3) | _bit(3, 3),
)

# Top-left corner of each 4x4 quadrant in the 8x8 grid, in drawing order.
_QUADRANT_ORIGINS = ((0, 0), (4, 0), (4, 4), (0, 4))


class QuadOp(IntEnum):
    """A symmetry of the 4x4 square applied to a glyph."""

    IDENTITY = 0
    ROT90 = 1
    ROT180 = 2
    ROT270 = 3
    MIRROR_X = 4
    MIRROR_Y = 5
    MIRROR_DIAG = 6
    MIRROR_ANTI_DIAG = 7


@dataclass
class GlyphState:
    """The bins last drawn, so unchanged glyphs are not redrawn."""

    new_moon: int = 0
    node: int = 0
    apogee: int = 0


def glyph_mask(n: int) -> int:
    """Return the 16-bit row-major 4x4 mask for digit ``n`` (capped at 7)."""
    n = min(n, 7)
    mask = 0
    for step in _STEP_MASKS[: n + 1]:
        mask |= step
    return mask


def apply_op(x: int, y: int, op: QuadOp) -> tuple[int, int]:
    """Transform a cell of the 4x4 square by ``op``."""
    op = QuadOp(op)
    if op is QuadOp.IDENTITY:
        return x, y
    if op is QuadOp.ROT90:
        return 3 - y, x
    if op is QuadOp.ROT180:
        return 3 - x, 3 - y
    if op is QuadOp.ROT270:
        return y, 3 - x
    if op is QuadOp.MIRROR_X:
        return 3 - x, y
    if op is QuadOp.MIRROR_Y:
        return x, 3 - y
    if op is QuadOp.MIRROR_DIAG:
        return y, x
    return 3 - y, 3 - x


def _glyph_cells(n: int, quadrant: int, op: QuadOp):
    """Yield the 8x8 grid cells lit by digit ``n`` in ``quadrant``."""
    base_x, base_y = _QUADRANT_ORIGINS[quadrant & 3]
    mask = glyph_mask(n)
    for gy in range(4):
        for gx in range(4):
            if mask & (1 << (gy * 4 + gx)):
                tx, ty = apply_op(gx, gy, op)
                yield base_x + tx, base_y + ty


def _glyph_layout(new_moon_bin: int, node_bin: int):
    """Yield (digit, quadrant, op) for the four glyphs of a lunar moment."""
    for quadrant in range(4):
        digit = (new_moon_bin >> (9 - 3 * quadrant)) % 8
        op = QuadOp((node_bin >> (3 * quadrant)) % 8)
        yield digit, quadrant, op


class LunarGlyph:
    """Draws new moon digits, shaped by node phase and coloured by apogee phase."""

    def __init__(self, time: Optional[LunarTime] = None) -> None:
        self.time = time if time is not None else LunarTime(4, 8)

    def _bins(self, timestamp: int) -> tuple[int, int, int]:
        return (
            self.time.event_info(timestamp, LunarEvent.NEW_MOON).bin,
            self.time.event_info(timestamp, LunarEvent.NODAL_ASCENDING).bin,
            self.time.event_info(timestamp, LunarEvent.APOGEE).bin,
        )

    def draw(self, timestamp: int, matrix: Matrix) -> None:
        """Clear ``matrix``, draw the glyph for ``timestamp`` and flush it."""
        matrix.clear()
        new_moon_bin, node_bin, apogee_bin = self._bins(timestamp)
        color = matrix.get_color_hsv((apogee_bin + 2048) % 4096 * 16, 255, 255)
        for digit, quadrant, op in _glyph_layout(new_moon_bin, node_bin):
            for cx, cy in _glyph_cells(digit, quadrant, op):
                matrix.draw_pixel(cx, cy, color)
        matrix.flush()

    def draw_on_display(
        self,
        state: GlyphState,
        timestamp: int,
        x: int,
        y: int,
        size: int,
        display: Display,
    ) -> bool:
        """Draw the glyph as ``size``-pixel cells at (x, y) if any bin changed.

        ``state`` is updated with the bins drawn. Returns True if drawn.
        """
        new_moon_bin, node_bin, apogee_bin = self._bins(timestamp)
        if (state.new_moon, state.node, state.apogee) == (
            new_moon_bin,
            node_bin,
            apogee_bin,
        ):
            return False
        state.new_moon, state.node, state.apogee = new_moon_bin, node_bin, apogee_bin

        display.draw_rect(x, y, 8 * size, 8 * size, 0x0000)
        color = apogee_bin * 8
        for digit, quadrant, op in _glyph_layout(new_moon_bin, node_bin):
            for cx, cy in _glyph_cells(digit, quadrant, op):
                display.draw_rect(x + cx * size, y + cy * size, size, size, color)
        return True