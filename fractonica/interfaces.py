"""Abstract device interfaces and the small value types they exchange."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Sequence


@dataclass(frozen=True)
class Vector2:
    """An integer 2D vector, used for screen sizes and positions."""

    x: int
    y: int


class InputEventType(Enum):
    """Kinds of events an input device can report."""

    BUTTON_PRESSED = auto()
    BUTTON_RELEASED = auto()
    VALUE_CHANGED = auto()


@dataclass(frozen=True)
class InputEvent:
    """A single event reported by an input device."""

    type: InputEventType
    id: int
    value: int = 0
    name: str = ""


InputCallback = Callable[[InputEvent], None]


class Matrix(ABC):
    """A grid of coloured pixels, such as an LED matrix."""

    @abstractmethod
    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to a packed 0xRRGGBB colour."""

    @abstractmethod
    def begin(self) -> bool:
        """Prepare the device; return True on success."""

    @abstractmethod
    def flush(self) -> None:
        """Push the buffered pixels to the device."""

    @abstractmethod
    def clear(self) -> None:
        """Set every pixel to black."""

    @abstractmethod
    def get_color(self, r: int, g: int, b: int) -> int:
        """Pack red, green and blue components into a device colour."""

    @abstractmethod
    def get_color_hsv(self, h: int, s: int, v: int) -> int:
        """Convert a 16-bit hue, saturation and value into a device colour."""


class Display(Matrix):
    """A pixel display that can also draw text, lines, rectangles and bitmaps."""

    @abstractmethod
    def print_text(self, msg: str, x: int, y: int, size: int) -> None:
        """Draw text at (x, y) with the given size."""

    @abstractmethod
    def log(self, msg: str) -> None:
        """Report an informational message."""

    @abstractmethod
    def log_error(self, msg: str) -> None:
        """Report an error message."""

    @abstractmethod
    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Draw a line between two points."""

    @abstractmethod
    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Draw a rectangle."""

    @abstractmethod
    def draw_bitmap(
        self, x: int, y: int, width: int, height: int, bitmap: Sequence[int]
    ) -> None:
        """Draw a row-major bitmap of colours with its top-left corner at (x, y)."""

    @abstractmethod
    def update(self) -> None:
        """Process one frame of display work."""

    @abstractmethod
    def is_open(self) -> bool:
        """Return True while the display is usable."""

    @abstractmethod
    def size(self) -> Vector2:
        """Return the display size in pixels."""


class Input(ABC):
    """A source of input events."""

    @abstractmethod
    def update(self) -> None:
        """Poll the device for new events."""

    @abstractmethod
    def set_callback(self, callback: Optional[InputCallback]) -> None:
        """Register the function that receives every event."""


class UnixClock(ABC):
    """A clock that tells the time in seconds since the Unix epoch."""

    @abstractmethod
    def now(self) -> int:
        """Return the current Unix time in seconds."""