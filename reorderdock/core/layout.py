"""Slot geometry -- pure functions, no GTK dependency.

The dock is a row of fixed-width slots. One slot holds an icon plus its
margin on both sides:

    |<------------- slot extent ------------->|
    | margin |<------ icon_size ------>| margin |

The controller turns pointer positions into slot indices with the same
extent the view uses to place items. If the two sides disagree, the
placeholder gap drifts away from the pointer.
"""

from __future__ import annotations

import math

DEFAULT_ICON_SIZE = 48
DEFAULT_ITEM_MARGIN = 8


def slot_extent(
    icon_size: float = DEFAULT_ICON_SIZE, item_margin: float = DEFAULT_ITEM_MARGIN
) -> float:
    """Width of one slot: the icon plus a margin on each side."""
    return icon_size + 2 * item_margin


DEFAULT_SLOT_EXTENT = slot_extent()


def hover_index_for(pointer_x: float, extent: float, display_length: int) -> int:
    """Map a strip-local pointer x to a slot index in [0, display_length].

    Positions left of the strip clamp to 0, positions past its end clamp
    to display_length (the slot after the last shown item). NaN counts as
    left of the strip.
    """
    if extent <= 0:
        raise ValueError(f"extent must be positive, got {extent!r}")
    if math.isnan(pointer_x) or pointer_x <= 0:
        return 0
    # Clamp in float space: floor(inf) raises
    slots = min(pointer_x / extent, float(display_length))
    return max(0, min(math.floor(slots), display_length))


def slot_offsets(count: int, extent: float) -> list[float]:
    """Left edge of each of `count` consecutive slots."""
    return [i * extent for i in range(count)]


def strip_width(positions: int, extent: float) -> float:
    """Total strip width for the given number of occupied slots."""
    return max(positions, 0) * extent
