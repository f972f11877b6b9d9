"""Colors for the dock strip and its default tiles.

Tile colors come from the Material "primaries" swatches. An item picks
its swatch by a CRC-32 of its repr, so the same item gets the same color
on every run (Python's built-in hash() of str is salted per process).
"""

from __future__ import annotations

import zlib
from typing import Hashable

# Color types as Cairo-compatible floats (0.0-1.0)
RGB = tuple[float, float, float]
RGBA = tuple[float, float, float, float]


def _rgb(hex_value: int) -> RGB:
    """Convert 0xRRGGBB to a Cairo-compatible (0.0-1.0) tuple."""
    return (
        ((hex_value >> 16) & 0xFF) / 255,
        ((hex_value >> 8) & 0xFF) / 255,
        (hex_value & 0xFF) / 255,
    )


# Material design 500 swatches, in the order Flutter lists Colors.primaries
PRIMARIES: tuple[RGB, ...] = tuple(
    _rgb(v)
    for v in (
        0xF44336,  # red
        0xE91E63,  # pink
        0x9C27B0,  # purple
        0x673AB7,  # deep purple
        0x3F51B5,  # indigo
        0x2196F3,  # blue
        0x03A9F4,  # light blue
        0x00BCD4,  # cyan
        0x009688,  # teal
        0x4CAF50,  # green
        0x8BC34A,  # light green
        0xCDDC39,  # lime
        0xFFEB3B,  # yellow
        0xFFC107,  # amber
        0xFF9800,  # orange
        0xFF5722,  # deep orange
        0x795548,  # brown
        0x9E9E9E,  # grey
        0x607D8B,  # blue grey
    )
)

STRIP_COLOR: RGBA = (0.0, 0.0, 0.0, 0.12)  # black12
STRIP_RADIUS = 8.0
TILE_RADIUS = 8.0
GLYPH_COLOR: RGBA = (1.0, 1.0, 1.0, 1.0)
PLACEHOLDER_COLOR: RGBA = (0.0, 0.0, 0.0, 0.26)  # black26
PLACEHOLDER_LINE_WIDTH = 2.0


def color_for(key: Hashable) -> RGB:
    """Stable palette color for an item."""
    digest = zlib.crc32(repr(key).encode("utf-8"))
    return PRIMARIES[digest % len(PRIMARIES)]
