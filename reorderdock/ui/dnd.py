"""Drag-and-drop: translate GTK drag signals into controller gestures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import Gdk, GLib, Gtk  # noqa: E402

from reorderdock.log import get_logger
from reorderdock.ui.tiles import feedback_surface

if TYPE_CHECKING:
    from reorderdock.core.controller import DockController
    from reorderdock.ui.dock import Dock
    from reorderdock.ui.tiles import Visual

log = get_logger(name="dnd")

# Delay before a drag-leave hides the placeholder. GTK emits drag-leave
# right before drag-drop, so the hover index must survive that long.
LEAVE_DEFER_MS = 100

# Internal reorder only: the payload never leaves this widget
_DOCK_ITEM_TARGET = Gtk.TargetEntry.new(
    "reorderdock-item", Gtk.TargetFlags.SAME_WIDGET, 0
)


class DnDHandler:
    """Drives a DockController from the drag signals of its Dock widget.

    Signal to gesture mapping:

        drag-begin   -> start_drag(item under the press point)
        drag-motion  -> update_hover(strip-local x)
        drag-leave   -> leave()            (deferred, see LEAVE_DEFER_MS)
        drag-drop    -> commit()           (drop landed on the dock)
        drag-end     -> cancel_drag()      (only if nothing committed)
    """

    def __init__(
        self,
        dock: Dock,
        controller: DockController,
        renderer: Callable[[Any], Visual],
    ) -> None:
        self._dock = dock
        self._controller = controller
        self._renderer = renderer
        self._leave_source: int = 0

        self._setup_dnd()

    def _setup_dnd(self) -> None:
        """Make the dock both drag source and drop target for its items.

        The dest uses no DestDefaults: motion and drop are answered by
        hand so the hover index can follow the pointer.
        """
        dock = self._dock
        dock.drag_source_set(
            Gdk.ModifierType.BUTTON1_MASK,
            [_DOCK_ITEM_TARGET],
            Gdk.DragAction.MOVE,
        )
        dock.drag_dest_set(0, [_DOCK_ITEM_TARGET], Gdk.DragAction.MOVE)

        dock.connect("drag-begin", self._on_drag_begin)
        dock.connect("drag-motion", self._on_drag_motion)
        dock.connect("drag-leave", self._on_drag_leave)
        dock.connect("drag-drop", self._on_drag_drop)
        dock.connect("drag-end", self._on_drag_end)

    def _on_drag_begin(self, _widget: Gtk.Widget, context: Gdk.DragContext) -> None:
        """Pick the item under the press point and show it under the pointer."""
        local_x = self._dock.press_x - self._dock.strip_x
        item = self._controller.item_at(local_x)
        log.debug(
            "drag-begin: press_x=%.1f local_x=%.1f item=%r",
            self._dock.press_x,
            local_x,
            item,
        )
        if item is None:
            return

        self._controller.start_drag(item)
        size = int(self._dock.icon_size)
        surface = feedback_surface(self._renderer(item), size)
        Gtk.drag_set_icon_surface(context, surface)

    def _on_drag_motion(
        self,
        _widget: Gtk.Widget,
        context: Gdk.DragContext,
        x: int,
        _y: int,
        time: int,
    ) -> bool:
        """Move the placeholder under the pointer."""
        self._cancel_pending_leave()
        if not self._controller.is_dragging:
            Gdk.drag_status(context, 0, time)
            return False

        self._controller.update_hover(x - self._dock.strip_x)
        Gdk.drag_status(context, Gdk.DragAction.MOVE, time)
        return True

    def _on_drag_leave(
        self, _widget: Gtk.Widget, _context: Gdk.DragContext, _time: int
    ) -> None:
        """Schedule hiding the placeholder.

        GTK fires drag-leave before drag-drop, so leave() cannot run here:
        commit() still needs the hover index. If a drop follows, it cancels
        the pending leave first.
        """
        if not self._controller.is_dragging or self._leave_source:
            return
        self._leave_source = GLib.timeout_add(LEAVE_DEFER_MS, self._deferred_leave)

    def _deferred_leave(self) -> bool:
        """Hide the placeholder if the drag is still live and away."""
        self._leave_source = 0
        if self._controller.is_dragging:
            self._controller.leave()
        return False

    def _cancel_pending_leave(self) -> None:
        if self._leave_source:
            GLib.source_remove(self._leave_source)
            self._leave_source = 0

    def _on_drag_drop(
        self,
        _widget: Gtk.Widget,
        context: Gdk.DragContext,
        _x: int,
        _y: int,
        time: int,
    ) -> bool:
        """Drop landed on the dock: commit at the hover index (or the end)."""
        self._cancel_pending_leave()
        if not self._controller.is_dragging:
            log.debug("drag-drop: no drag in progress, rejecting")
            Gtk.drag_finish(context, False, False, time)
            return False

        log.debug("drag-drop: hover=%r", self._controller.hover_index)
        self._controller.commit()
        Gtk.drag_finish(context, True, False, time)
        return True

    def _on_drag_end(self, _widget: Gtk.Widget, _context: Gdk.DragContext) -> None:
        """Cancel a drag that ended anywhere but on the dock."""
        self._cancel_pending_leave()
        if self._controller.is_dragging:
            log.debug("drag-end: no drop on the dock, cancelling")
            self._controller.cancel_drag()
