"""Lunar ephemeris tables, cycle bins and glyph and heptagon-dial drawing for small displays."""

__version__ = "0.0.3"