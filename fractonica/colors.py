"""Packed RGB colour helpers."""

from __future__ import annotations


def color(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue components into 0xRRGGBB."""
    r &= 0xFF
    g &= 0xFF
    b &= 0xFF
    return (r << 16) | (g << 8) | b


def color_hsv(hue: int, sat: int, val: int) -> int:
    """Convert a 16-bit hue with 8-bit saturation and value into 0xRRGGBB.

    Inputs wider than their field are truncated, as fixed-width integers would be.
    """
    hue &= 0xFFFF
    sat &= 0xFF
    val &= 0xFF

    hue = (hue * 1530 + 32768) // 65536

    if hue < 510:
        b = 0
        if hue < 255:
            r, g = 255, hue
        else:
            r, g = 510 - hue, 255
    elif hue < 1020:
        r = 0
        if hue < 765:
            g, b = 255, hue - 510
        else:
            g, b = 1020 - hue, 255
    elif hue < 1530:
        g = 0
        if hue < 1275:
            r, b = hue - 1020, 255
        else:
            r, b = 255, 1530 - hue
    else:
        r, g, b = 255, 0, 0

    v1 = 1 + val
    s1 = 1 + sat
    s2 = 255 - sat

    def scale(component: int) -> int:
        return (((component * s1) >> 8) + s2) * v1

    return (
        ((scale(r) & 0xFF00) << 8)
        | (scale(g) & 0xFF00)
        | (scale(b) >> 8)
    )