"""Drag-to-reorder state machine for the dock -- pure logic, no GTK dependency.

The controller owns two pieces of state:

  order  -- the items in display order. Only commit() rearranges it.
  state  -- Idle, or Dragging(item, hover_index) while a gesture is live.

A gesture runs start_drag -> update_hover* / leave* -> commit | cancel_drag.
Calling an operation outside that sequence raises DragStateError.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterable, TypeVar, Union

from reorderdock.core.layout import DEFAULT_SLOT_EXTENT, hover_index_for
from reorderdock.log import get_logger

log = get_logger(name="controller")

T = TypeVar("T", bound=Hashable)


class DragStateError(RuntimeError):
    """An operation was called in a drag state it does not accept."""


class SlotKey(enum.Enum):
    """Rendering keys that do not belong to any item."""

    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class Idle:
    """No drag in progress."""


@dataclass(frozen=True)
class Dragging(Generic[T]):
    """An item is being dragged.

    hover_index is None while the pointer is outside the dock; otherwise
    it is the slot where the placeholder gap is shown.
    """

    item: T
    hover_index: int | None = None


DragState = Union[Idle, Dragging]

IDLE = Idle()


@dataclass(frozen=True)
class Placeholder:
    """Empty gap reserved where the dragged item would land."""

    x: float

    @property
    def key(self) -> Hashable:
        return SlotKey.PLACEHOLDER


@dataclass(frozen=True)
class VisibleItem(Generic[T]):
    """An item shown in the strip at offset x."""

    item: T
    x: float

    @property
    def key(self) -> Hashable:
        return self.item


RenderSlot = Union[Placeholder, VisibleItem]


class DockController(Generic[T]):
    """Ordered dock items plus the drag gesture currently acting on them."""

    def __init__(
        self,
        items: Iterable[T],
        slot_extent: float = DEFAULT_SLOT_EXTENT,
    ) -> None:
        order = list(items)
        if len(set(order)) != len(order):
            raise ValueError("dock items must be unique")
        if slot_extent <= 0:
            raise ValueError(f"slot_extent must be positive, got {slot_extent!r}")
        self._order: list[T] = order
        self._state: DragState = IDLE
        self.slot_extent = slot_extent
        self.on_change: Callable[[], None] | None = None

    # -- queries ---------------------------------------------------------

    @property
    def order(self) -> tuple[T, ...]:
        return tuple(self._order)

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return isinstance(self._state, Dragging)

    @property
    def dragging_item(self) -> T | None:
        return self._state.item if isinstance(self._state, Dragging) else None

    @property
    def hover_index(self) -> int | None:
        return self._state.hover_index if isinstance(self._state, Dragging) else None

    def display_items(self) -> list[T]:
        """Items currently shown: the order minus the dragged item."""
        dragged = self._state
        if isinstance(dragged, Dragging):
            return [item for item in self._order if item != dragged.item]
        return list(self._order)

    @property
    def display_length(self) -> int:
        return len(self._order) - 1 if self.is_dragging else len(self._order)

    def item_at(self, pointer_x: float) -> T | None:
        """Hit-test a strip-local x against the sequence as rendered now."""
        slots = self.render_sequence()
        if not 0 <= pointer_x < len(slots) * self.slot_extent:
            return None
        slot = slots[int(pointer_x // self.slot_extent)]
        return slot.item if isinstance(slot, VisibleItem) else None

    def render_sequence(self) -> list[RenderSlot]:
        """Slots to draw, left to right, with the placeholder spliced in.

        Walks the displayed items keeping a running offset; when the walk
        reaches hover_index the placeholder takes that slot and the
        remaining items shift one slot right.
        """
        hover = self.hover_index
        slots: list[RenderSlot] = []
        x = 0.0
        for position, item in enumerate(self.display_items()):
            if position == hover:
                slots.append(Placeholder(x=x))
                x += self.slot_extent
            slots.append(VisibleItem(item=item, x=x))
            x += self.slot_extent
        if hover is not None and hover == self.display_length:
            slots.append(Placeholder(x=x))
        return slots

    # -- gesture ---------------------------------------------------------

    def start_drag(self, item: T) -> None:
        """Begin dragging `item`; the order is left untouched."""
        if self.is_dragging:
            raise DragStateError(
                f"cannot start dragging {item!r}: {self.dragging_item!r} is already dragged"
            )
        if item not in self._order:
            raise DragStateError(f"cannot drag {item!r}: not in the dock")
        self._state = Dragging(item=item)
        log.debug("start_drag: %r", item)
        self.notify()

    def update_hover(self, pointer_x: float, item_extent: float | None = None) -> bool:
        """Move the placeholder under `pointer_x` (strip-local).

        Returns True if the hover index changed. Repeated calls with the
        same position leave the state alone and do not notify.
        """
        state = self._require_dragging("update_hover")
        extent = self.slot_extent if item_extent is None else item_extent
        index = hover_index_for(pointer_x, extent, self.display_length)
        if index == state.hover_index:
            return False
        log.debug("update_hover: %r -> %d (x=%.1f)", state.hover_index, index, pointer_x)
        self._state = Dragging(item=state.item, hover_index=index)
        self.notify()
        return True

    def leave(self) -> None:
        """Pointer left the drop region; hide the placeholder, keep the drag."""
        state = self._require_dragging("leave")
        if state.hover_index is None:
            return
        log.debug("leave: hover %d cleared", state.hover_index)
        self._state = Dragging(item=state.item)
        self.notify()

    def commit(self) -> None:
        """Drop inside the dock: move the item to the hovered slot.

        Without a hover index the item goes to the end.
        """
        state = self._require_dragging("commit")
        try:
            self._order.remove(state.item)
        except ValueError:
            raise DragStateError(
                f"dragged item {state.item!r} vanished from the dock"
            ) from None
        insert_index = (
            state.hover_index if state.hover_index is not None else len(self._order)
        )
        self._order.insert(insert_index, state.item)
        self._state = IDLE
        log.debug("commit: %r -> %d", state.item, insert_index)
        self.notify()

    def cancel_drag(self) -> None:
        """Drag ended without a drop on the dock; the order is unchanged."""
        state = self._require_dragging("cancel_drag")
        self._state = IDLE
        log.debug("cancel_drag: %r", state.item)
        self.notify()

    def _require_dragging(self, operation: str) -> Dragging:
        state = self._state
        if not isinstance(state, Dragging):
            raise DragStateError(f"{operation}() called with no drag in progress")
        return state

    def notify(self) -> None:
        """Fire on_change callback to trigger a dock redraw."""
        if self.on_change:
            self.on_change()
