# fractonica

Lunar timekeeping for small displays. The package includes ephemeris tables for
three lunar cycles: new moon, apogee and ascending node. Each table holds 512
events, starting in January 2010. For a Unix timestamp, the package works out
how far the current cycle has run and counts that position in discrete bins.
The bins can then be drawn as glyphs on an 8×8 LED matrix or as base-8
heptagon dials.

The package uses only the standard library.

## Installation

```
pip install fractonica
```

To run the test suite:

```
pip install "fractonica[test]"
pytest
```

## Where are we in the lunar month?

```python
from fractonica.lunar_time import LunarTime, LunarEvent
from fractonica.clocks import SystemUnixClock

lunar = LunarTime()                      # 4 base-8 digits, so 4096 bins
info = lunar.event_info(SystemUnixClock().now(), LunarEvent.NEW_MOON)
print(info.bin, info.bin_octal, info.normalized, info.progress)
```

- `normalized` is how far the current cycle has run, from 0 to 1.
- `bin` is that position as an integer bin.
- `bin_octal` is the integer whose decimal digits are the octal digits of `bin`.
- `progress` is how far the timestamp has moved towards the next bin boundary.

For moments outside a table's range, you get bin 0 with zero progress.

## Working with the ephemeris directly

Each table module (`new_moon`, `apogee`, `nodal_ascending`) provides:

- `TIMESTAMPS`
- `EPOCH`
- `AVERAGE_PERIOD`
- `COUNT`
- `source()`, which returns a cached `MemorySource`.

```python
from fractonica import new_moon
from fractonica.ephemeris import find_closest, fraction_at, EphemerisWindow

moon = new_moon.source()
hit = find_closest(moon, 1_700_000_000)
print(hit.past_index, hit.future_index)

window = EphemerisWindow()               # optional cache of the last window
frac = fraction_at(moon, 1_700_000_000, 4096, window)
print(frac.valid, frac.bin, frac.bin_octal, frac.normalized)
```

If the timestamp is an exact match, `find_closest` sets both indices to that
entry.

`fraction_at` has the following behaviour:

- It raises `ValueError` when the resolution is not positive.
- It returns a result with `valid=False` when no period surrounds the timestamp.
- When you pass a window that already contains the timestamp, it uses that
  window instead of searching the table.
- Otherwise it updates the window with the period it found.

### Ephemeris files

Ephemeris files use a small little-endian binary format:

- a 16-byte header: the magic `FRAC`, a `uint32` entry count and a `uint64` reserved word
- then the timestamps, each an `int64`

`EphemerisFile` opens such a file and can be used as a context manager:

```python
from fractonica.ephemeris import EphemerisFile

with EphemerisFile("moon.bin") as eph:
    print(eph.header.has_valid_magic, len(eph), eph.timestamp(0))
```

Errors are reported as follows:

- An index out of range raises `IndexError`.
- A short header or a truncated entry raises `EphemerisError`.
- A closed file raises `EphemerisError`.

The magic is not checked when the file is opened. Check
`header.has_valid_magic` yourself.

## Drawing a glyph

```python
from fractonica.framebuffer import FrameBufferMatrix
from fractonica.lunar_glyph import LunarGlyph

matrix = FrameBufferMatrix(8, 8)
matrix.begin()
LunarGlyph().draw(1_700_000_000, matrix)
print(matrix.pixel(2, 1))
print(matrix.frame)                      # snapshot published by flush()
```

Each lunar bin controls one part of the glyph:

- The new moon bin chooses the shape in each quadrant.
- The node bin chooses how each quadrant is rotated or mirrored (`QuadOp`).
- The apogee bin sets the hue.

`LunarGlyph.draw_on_display` draws the same glyph on a `Display` as filled
rectangles. It only redraws when one of the bins in the given `GlyphState`
has changed.

## Heptagon dials

`Base8HeptClock` shows a counter as octal digits on a `Display`, with one
heptagonal ring per digit. Each call to `draw(current, last, orientation, x, y)`
fills only the sectors that changed. It returns the value to pass as `last` on
the next call.

## Building your own devices

`fractonica.interfaces` defines the abstract interfaces `Matrix`, `Display`,
`Input` and `UnixClock`, together with `Vector2`, `InputEvent` and
`InputEventType`. Implement these interfaces to connect the drawing code to
real hardware or to a GUI.

Ready-made pieces for testing and simulation:

- `StubDisplay`, which records every call it receives.
- `FrameBufferMatrix`, which keeps pixels in memory.
- `TransientUnixClock`, which returns elapsed time plus an offset.
- `SystemUnixClock`, which reads the wall clock.

Colour helpers are in `fractonica.colors`: `color` and `color_hsv`.

## What the package does not do

The package has no application, no command and no main loop. Nothing in it
opens a window, polls input devices or drives LED hardware. You supply a
`Display` or `Matrix` implementation and call the drawing functions yourself.
Likewise, `Input` is only an interface: nothing in the package responds to
input events.