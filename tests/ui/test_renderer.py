"""Tests for the dock renderer: slot tweening and what gets painted."""

from __future__ import annotations

import sys
from unittest.mock import MagicMock

import pytest

try:
    import gi

    gi.require_version("Gtk", "3.0")
    from gi.repository import Gtk  # noqa: F401
except (ImportError, ValueError):  # pragma: no cover
    gi_mock = MagicMock()
    gi_mock.require_version = MagicMock()
    sys.modules["gi"] = gi_mock
    sys.modules["gi.repository"] = gi_mock.repository

try:
    import cairo  # noqa: F401
except ImportError:  # pragma: no cover
    sys.modules["cairo"] = MagicMock()

from reorderdock.core.controller import DockController  # noqa: E402
from reorderdock.core.theme import PLACEHOLDER_COLOR, STRIP_COLOR  # noqa: E402
from reorderdock.ui.renderer import DockRenderer  # noqa: E402

MS = 1000
EXTENT = 64.0
ITEMS = ["A", "B", "C", "D", "E"]


def _make(duration_ms: int = 0):
    visuals: dict[str, MagicMock] = {}

    def item_renderer(item):
        return visuals.setdefault(item, MagicMock(name=f"visual-{item}"))

    renderer = DockRenderer(
        item_renderer, icon_size=48, item_margin=8, duration_ms=duration_ms
    )
    controller = DockController(ITEMS, slot_extent=EXTENT)
    renderer.retarget(controller, 0)
    return renderer, controller, visuals


def _painted_x(visuals: dict[str, MagicMock]) -> dict[str, float]:
    return {
        item: v.paint.call_args.args[1] for item, v in visuals.items() if v.paint.called
    }


class TestDraw:
    def test_idle_paints_every_item_in_order(self):
        # Given
        renderer, controller, visuals = _make()
        cr = MagicMock()
        # When
        renderer.draw(cr, controller, origin_x=10.0, origin_y=4.0, now=0)
        # Then -- origin + slot offset + margin
        assert _painted_x(visuals) == {
            "A": 18.0,
            "B": 82.0,
            "C": 146.0,
            "D": 210.0,
            "E": 274.0,
        }
        for v in visuals.values():
            assert v.paint.call_args.args[2:] == (12.0, 48)

    def test_strip_background(self):
        # Given
        renderer, controller, _visuals = _make()
        cr = MagicMock()
        # When
        renderer.draw(cr, controller, 0.0, 0.0, now=0)
        # Then
        cr.set_source_rgba.assert_called_once_with(*STRIP_COLOR)
        cr.fill.assert_called_once()

    def test_dragged_item_not_painted(self):
        # Given
        renderer, controller, visuals = _make()
        controller.start_drag("C")
        controller.update_hover(EXTENT + 1)
        renderer.retarget(controller, 0)
        # When
        renderer.draw(MagicMock(), controller, 0.0, 0.0, now=0)
        # Then -- gap at slot 1 pushes B, D, E right
        assert _painted_x(visuals) == {"A": 8.0, "B": 136.0, "D": 200.0, "E": 264.0}

    def test_placeholder_outlined_in_its_slot(self):
        # Given
        renderer, controller, _visuals = _make()
        controller.start_drag("C")
        controller.update_hover(EXTENT + 1)
        renderer.retarget(controller, 0)
        cr = MagicMock()
        # When
        renderer.draw(cr, controller, 0.0, 0.0, now=0)
        # Then -- slot 1 outline: first arc of its rounded rect is at its right edge
        cr.set_source_rgba.assert_any_call(*PLACEHOLDER_COLOR)
        cr.stroke.assert_called_once()
        outline_arc = cr.arc.call_args_list[4].args
        assert outline_arc[0] + outline_arc[2] == EXTENT + 8.0 + 48

    def test_no_outline_without_hover(self):
        # Given
        renderer, controller, _visuals = _make()
        controller.start_drag("C")
        renderer.retarget(controller, 0)
        cr = MagicMock()
        # When
        renderer.draw(cr, controller, 0.0, 0.0, now=0)
        # Then
        cr.stroke.assert_not_called()

    def test_item_renderer_called_once_per_visible_item(self):
        # Given
        calls = []
        renderer = DockRenderer(
            lambda item: calls.append(item) or MagicMock(), 48, 8, duration_ms=0
        )
        controller = DockController(ITEMS, slot_extent=EXTENT)
        controller.start_drag("A")
        renderer.retarget(controller, 0)
        # When
        renderer.draw(MagicMock(), controller, 0.0, 0.0, now=0)
        # Then
        assert calls == ["B", "C", "D", "E"]

    def test_empty_dock_draws_nothing(self):
        # Given
        renderer = DockRenderer(MagicMock(), 48, 8, duration_ms=0)
        controller = DockController([], slot_extent=EXTENT)
        renderer.retarget(controller, 0)
        cr = MagicMock()
        # When
        renderer.draw(cr, controller, 0.0, 0.0, now=0)
        # Then
        cr.fill.assert_not_called()


class TestAnimation:
    def test_items_glide_to_new_slots(self):
        # Given
        renderer, controller, visuals = _make(duration_ms=300)
        controller.start_drag("A")
        renderer.retarget(controller, 0)
        # When -- halfway through the transition
        renderer.draw(MagicMock(), controller, 0.0, 0.0, now=150 * MS)
        # Then -- B is between slot 1 and slot 0
        x = _painted_x(visuals)["B"] - 8.0
        assert 0.0 < x < EXTENT
        assert renderer.running(150 * MS) is True

    def test_settles_at_targets(self):
        # Given
        renderer, controller, visuals = _make(duration_ms=300)
        controller.start_drag("A")
        renderer.retarget(controller, 0)
        # When
        renderer.draw(MagicMock(), controller, 0.0, 0.0, now=300 * MS)
        # Then
        assert _painted_x(visuals)["B"] == pytest.approx(8.0)
        assert renderer.running(300 * MS) is False

    def test_row_layout_never_runs(self):
        # Given
        renderer, controller, _visuals = _make(duration_ms=0)
        controller.start_drag("A")
        controller.update_hover(3 * EXTENT)
        # When
        renderer.retarget(controller, 10)
        # Then
        assert renderer.running(10) is False

    def test_strip_width_animates(self):
        # Given
        renderer, controller, _visuals = _make(duration_ms=300)
        controller.start_drag("A")
        renderer.retarget(controller, 0)
        cr = MagicMock()
        # When
        renderer.draw(cr, controller, 0.0, 0.0, now=150 * MS)
        # Then -- rounded_rect's right edge sits between 4 and 5 slots
        right_arc_x = cr.arc.call_args_list[0].args[0]
        radius = cr.arc.call_args_list[0].args[2]
        width = right_arc_x + radius
        assert 4 * EXTENT < width < 5 * EXTENT

    def test_placeholder_glides_between_slots(self):
        # Given -- gap shown at slot 1, then moved to slot 3
        renderer, controller, _visuals = _make(duration_ms=300)
        controller.start_drag("A")
        controller.update_hover(EXTENT + 1)
        renderer.retarget(controller, 0)
        controller.update_hover(3 * EXTENT + 1)
        renderer.retarget(controller, 0)
        cr = MagicMock()
        # When
        renderer.draw(cr, controller, 0.0, 0.0, now=150 * MS)
        # Then -- the outline's left arc center lies between slot 1 and slot 3
        left_arc_x = cr.arc.call_args_list[7].args[0]
        assert EXTENT + 8.0 + 8.0 < left_arc_x < 3 * EXTENT + 8.0 + 8.0
