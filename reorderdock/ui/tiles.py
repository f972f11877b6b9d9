"""Cairo visuals for dock items -- rounded tiles with a symbolic icon glyph."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Hashable, Protocol

import cairo

import gi

gi.require_version("Gtk", "3.0")
gi.require_version("Gdk", "3.0")
from gi.repository import Gdk, GdkPixbuf, GLib, Gtk  # noqa: E402

from reorderdock.core.theme import GLYPH_COLOR, TILE_RADIUS, color_for
from reorderdock.log import get_logger

log = get_logger(name="tiles")

GLYPH_SCALE = 0.5  # glyph edge as a fraction of the tile edge


class Visual(Protocol):
    """Anything the dock can paint into a square of `size` pixels."""

    def paint(self, cr: cairo.Context, x: float, y: float, size: float) -> None: ...


def rounded_rect(
    cr: cairo.Context,
    x: float,
    y: float,
    width: float,
    height: float,
    radius: float,
) -> None:
    """Add a rounded rectangle path to the context."""
    radius = min(radius, width / 2, height / 2)
    cr.new_sub_path()
    cr.arc(x + width - radius, y + radius, radius, -math.pi / 2, 0)
    cr.arc(x + width - radius, y + height - radius, radius, 0, math.pi / 2)
    cr.arc(x + radius, y + height - radius, radius, math.pi / 2, math.pi)
    cr.arc(x + radius, y + radius, radius, math.pi, 3 * math.pi / 2)
    cr.close_path()


# Loaded glyphs: {(icon_name, px): pixbuf or None if the theme lacks it}
_glyph_cache: dict[tuple[str, int], GdkPixbuf.Pixbuf | None] = {}


def load_glyph(icon_name: str, px: int) -> GdkPixbuf.Pixbuf | None:
    """Load a symbolic icon recolored to the glyph color, cached per size."""
    key = (icon_name, px)
    if key in _glyph_cache:
        return _glyph_cache[key]

    pixbuf = None
    theme = Gtk.IconTheme.get_default()
    info = theme.lookup_icon(icon_name, px, Gtk.IconLookupFlags.FORCE_SYMBOLIC)
    if info is None:
        log.debug("icon %s not found in theme", icon_name)
    else:
        fg = Gdk.RGBA(*GLYPH_COLOR)
        try:
            pixbuf, _was_symbolic = info.load_symbolic(fg, None, None, None)
        except GLib.Error as e:
            log.debug("icon %s failed to load: %s", icon_name, e)
    _glyph_cache[key] = pixbuf
    return pixbuf


@dataclass(frozen=True)
class IconTile:
    """Colored rounded square with an icon-theme glyph centered on it."""

    color: tuple[float, float, float]
    icon_name: str = ""
    radius: float = TILE_RADIUS

    def paint(self, cr: cairo.Context, x: float, y: float, size: float) -> None:
        rounded_rect(cr, x, y, size, size, self.radius)
        cr.set_source_rgb(*self.color)
        cr.fill()

        if not self.icon_name:
            return
        glyph = load_glyph(self.icon_name, int(size * GLYPH_SCALE))
        if glyph is None:
            return
        gx = x + (size - glyph.get_width()) / 2
        gy = y + (size - glyph.get_height()) / 2
        Gdk.cairo_set_source_pixbuf(cr, glyph, gx, gy)
        cr.paint()


def tile_for(item: Hashable) -> IconTile:
    """Default renderer: palette color by item, item's str as icon name."""
    return IconTile(color=color_for(item), icon_name=str(item))


def feedback_surface(visual: Visual, size: int) -> cairo.ImageSurface:
    """Paint a visual onto its own surface, hotspot at the center.

    Used as the drag icon that follows the pointer.
    """
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, size, size)
    cr = cairo.Context(surface)
    visual.paint(cr, 0, 0, size)
    surface.flush()
    surface.set_device_offset(-size / 2, -size / 2)
    return surface
