"""Dock widget -- GTK drawing area hosting the reorder controller."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable

import cairo
import gi

gi.require_version("Gtk", "3.0")
gi.require_version("Gdk", "3.0")
from gi.repository import Gdk, GLib, Gtk  # noqa: E402

from reorderdock.core.config import Config
from reorderdock.core.controller import DockController
from reorderdock.core.layout import strip_width
from reorderdock.log import get_logger
from reorderdock.ui.dnd import DnDHandler
from reorderdock.ui.renderer import DockRenderer
from reorderdock.ui.tiles import Visual, tile_for

_log = get_logger("dock")

FRAME_MS = 16  # animation pump interval while a transition runs


def strip_origin(
    alloc_w: float, alloc_h: float, item_count: int, extent: float
) -> tuple[float, float]:
    """Top-left corner of the strip, centered on its full-length box.

    The box is sized for every item, so the origin does not move while
    the drawn strip shrinks by one slot during a drag.
    """
    full = strip_width(item_count, extent)
    return max((alloc_w - full) / 2, 0.0), max((alloc_h - extent) / 2, 0.0)


class Dock(Gtk.DrawingArea):
    """Horizontal strip of draggable items.

        strip_x
          |<------- len(items) * slot_extent ------->|
          [ slot 0 ][ slot 1 ][ slot 2 ] ...
          |margin|icon|margin|
    """

    def __init__(
        self,
        items: Iterable[Hashable],
        renderer: Callable[[Any], Visual] = tile_for,
        slot_extent: float | None = None,
        config: Config | None = None,
    ) -> None:
        super().__init__()
        self._setup(items, renderer, slot_extent, config)

    def _setup(
        self,
        items: Iterable[Hashable],
        renderer: Callable[[Any], Visual],
        slot_extent: float | None,
        config: Config | None,
    ) -> None:
        """Build controller, renderer and drag handling on the bare widget."""
        config = config or Config()
        extent = config.slot_extent if slot_extent is None else slot_extent
        icon_size = extent - 2 * config.item_margin
        if icon_size <= 0:
            raise ValueError(
                f"slot_extent {extent!r} leaves no room for an icon "
                f"with {config.item_margin!r}px margins"
            )
        self.config = config
        self.icon_size = icon_size
        self.controller: DockController = DockController(items, slot_extent=extent)
        self.renderer = DockRenderer(
            renderer,
            icon_size=icon_size,
            item_margin=config.item_margin,
            duration_ms=config.effective_animation_ms,
        )
        self.press_x: float = -1.0
        self._tick_source: int = 0

        full = strip_width(len(self.controller.order), extent)
        self.set_size_request(int(full), int(extent))
        self.add_events(Gdk.EventMask.BUTTON_PRESS_MASK)
        self.connect("draw", self._on_draw)
        self.connect("button-press-event", self._on_button_press)

        self.controller.on_change = self._on_state_changed
        self.renderer.retarget(self.controller, GLib.get_monotonic_time())
        self.dnd = DnDHandler(self, self.controller, renderer)
        _log.debug(
            "dock ready: %d items, slot_extent=%.1f", len(self.controller.order), extent
        )

    @property
    def strip_x(self) -> float:
        return self._origin()[0]

    def _origin(self) -> tuple[float, float]:
        return strip_origin(
            self.get_allocated_width(),
            self.get_allocated_height(),
            len(self.controller.order),
            self.controller.slot_extent,
        )

    def _on_button_press(self, _widget: Gtk.Widget, event: Gdk.EventButton) -> bool:
        """Remember where a drag may start; drag-begin carries no coordinates."""
        self.press_x = event.x
        return False  # Propagate so the GTK drag source sees the press

    def _on_state_changed(self) -> None:
        """Controller changed: retarget the tweens and queue a redraw."""
        now = GLib.get_monotonic_time()
        self.renderer.retarget(self.controller, now)
        self.queue_draw()
        if not self._tick_source and self.renderer.running(now):
            self._tick_source = GLib.timeout_add(FRAME_MS, self._tick)

    def _tick(self) -> bool:
        """Animation pump: redraw every frame until the tweens settle."""
        self.queue_draw()
        if self.renderer.running(GLib.get_monotonic_time()):
            return True
        self._tick_source = 0
        return False

    def _on_draw(self, _widget: Gtk.Widget, cr: cairo.Context) -> bool:
        x, y = self._origin()
        self.renderer.draw(cr, self.controller, x, y, GLib.get_monotonic_time())
        return True
