"""An in-memory LED matrix that keeps its pixels in a frame buffer."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .colors import color, color_hsv
from .interfaces import Matrix

DEFAULT_WINDOW_NAME = "Matrix"


class LedShape(Enum):
    """How each LED is drawn when the matrix is shown."""

    SQUARE = "square"
    CIRCLE = "circle"


class FrameBufferMatrix(Matrix):
    """A matrix of packed 0xRRGGBB pixels, stored row-major.

    ``flush`` publishes a snapshot of the buffer as ``frame`` once ``begin``
    has been called.
    """

    def __init__(
        self,
        width: int,
        height: int,
        scale: float = 10.0,
        shape: LedShape = LedShape.CIRCLE,
        window_name: Optional[str] = DEFAULT_WINDOW_NAME,
    ) -> None:
        self._width = width
        self._height = height
        self.scale = scale
        self.shape = shape
        self.window_name = window_name
        self._pixels = [0] * (width * height)
        self._begun = False
        self.frame: Optional[tuple[tuple[int, ...], ...]] = None
        self.flush_count = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        self._scale = max(1.0, float(value))

    @property
    def window_name(self) -> str:
        return self._window_name

    @window_name.setter
    def window_name(self, name: Optional[str]) -> None:
        self._window_name = name if name else DEFAULT_WINDOW_NAME

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; coordinates outside the matrix are ignored."""
        if 0 <= x < self._width and 0 <= y < self._height:
            self._pixels[y * self._width + x] = color

    def pixel(self, x: int, y: int) -> int:
        """Return the colour of the pixel at (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height}")
        return self._pixels[y * self._width + x]

    def begin(self) -> bool:
        self._begun = True
        return True

    def flush(self) -> None:
        """Publish the current buffer as ``frame``; does nothing before ``begin``."""
        if not self._begun:
            return
        self.frame = tuple(
            tuple(self._pixels[row * self._width:(row + 1) * self._width])
            for row in range(self._height)
        )
        self.flush_count += 1

    def clear(self) -> None:
        self._pixels = [0] * (self._width * self._height)

    def get_color(self, r: int, g: int, b: int) -> int:
        return color(r, g, b)

    def get_color_hsv(self, h: int, s: int, v: int) -> int:
        return color_hsv(h, s, v)