"""Cairo renderer for the dock -- strip background, slot tweening, item tiles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from reorderdock.core.controller import Placeholder, SlotKey, VisibleItem
from reorderdock.core.layout import strip_width
from reorderdock.core.motion import SlotTween, ease_in_out, ease_out
from reorderdock.core.theme import (
    PLACEHOLDER_COLOR,
    PLACEHOLDER_LINE_WIDTH,
    STRIP_COLOR,
    STRIP_RADIUS,
    TILE_RADIUS,
)
from reorderdock.ui.tiles import rounded_rect

if TYPE_CHECKING:
    import cairo

    from reorderdock.core.controller import DockController
    from reorderdock.ui.tiles import Visual

_STRIP_KEY = "strip"


class DockRenderer:
    """Paints a controller's render sequence with animated slot positions.

    Two tweens run side by side:

      slots -- one track per item key plus the placeholder. Items ease out,
               the placeholder eases in and out.
      strip -- the background width, which grows and shrinks as the
               placeholder appears and the dragged item leaves the row.

    With duration_ms=0 both snap (the plain row layout).
    """

    def __init__(
        self,
        item_renderer: Callable[[Any], Visual],
        icon_size: float,
        item_margin: float,
        duration_ms: int = 300,
    ) -> None:
        self.item_renderer = item_renderer
        self.icon_size = icon_size
        self.item_margin = item_margin
        self._slots = SlotTween(duration_ms=duration_ms)
        self._strip = SlotTween(duration_ms=duration_ms)

    def retarget(self, controller: DockController, now: int) -> None:
        """Aim every slot, and the strip width, at the controller's layout."""
        slots = controller.render_sequence()
        self._slots.retarget(
            {slot.key: slot.x for slot in slots},
            now,
            easing=ease_out,
            easings={SlotKey.PLACEHOLDER: ease_in_out},
        )
        self._strip.retarget(
            {_STRIP_KEY: strip_width(len(slots), controller.slot_extent)},
            now,
            easing=ease_in_out,
        )

    def running(self, now: int) -> bool:
        return self._slots.running(now) or self._strip.running(now)

    def draw(
        self,
        cr: cairo.Context,
        controller: DockController,
        origin_x: float,
        origin_y: float,
        now: int,
    ) -> None:
        """Draw one frame with the strip's top-left corner at the origin."""
        positions = self._slots.positions(now)
        extent = controller.slot_extent

        width = self._strip.value(_STRIP_KEY, now) or 0.0
        if width > 0:
            rounded_rect(cr, origin_x, origin_y, width, extent, STRIP_RADIUS)
            cr.set_source_rgba(*STRIP_COLOR)
            cr.fill()

        # The placeholder is an empty slot, marked by an outline only
        for slot in controller.render_sequence():
            x = origin_x + positions.get(slot.key, slot.x) + self.item_margin
            y = origin_y + self.item_margin
            if isinstance(slot, Placeholder):
                rounded_rect(cr, x, y, self.icon_size, self.icon_size, TILE_RADIUS)
                cr.set_source_rgba(*PLACEHOLDER_COLOR)
                cr.set_line_width(PLACEHOLDER_LINE_WIDTH)
                cr.stroke()
                continue
            cr.save()
            self.item_renderer(slot.item).paint(cr, x, y, self.icon_size)
            cr.restore()
