"""Tests for slot geometry helpers."""

import pytest

from reorderdock.core.layout import (
    DEFAULT_SLOT_EXTENT,
    hover_index_for,
    slot_extent,
    slot_offsets,
    strip_width,
)


class TestSlotExtent:
    def test_default_is_icon_plus_both_margins(self):
        assert DEFAULT_SLOT_EXTENT == 64
        assert slot_extent() == 48 + 2 * 8

    def test_custom_sizes(self):
        assert slot_extent(icon_size=32, item_margin=4) == 40


class TestHoverIndexFor:
    @pytest.mark.parametrize(
        "x, expected",
        [(0.0, 0), (63.99, 0), (64.0, 1), (191.0, 2), (-1.0, 0), (1e9, 3)],
    )
    def test_floor_and_clamp(self, x, expected):
        # Given -- 3 shown items, slots 0..3
        # When / Then
        assert hover_index_for(x, 64.0, 3) == expected

    @pytest.mark.parametrize(
        "x, expected", [(float("inf"), 3), (float("-inf"), 0), (float("nan"), 0)]
    )
    def test_non_finite_pointer_clamped(self, x, expected):
        assert hover_index_for(x, 64.0, 3) == expected

    def test_zero_extent_rejected(self):
        with pytest.raises(ValueError):
            hover_index_for(10.0, 0.0, 3)

    def test_empty_display_always_zero(self):
        assert hover_index_for(500.0, 64.0, 0) == 0
        assert hover_index_for(-500.0, 64.0, 0) == 0


class TestOffsetsAndWidth:
    def test_slot_offsets(self):
        assert slot_offsets(3, 64.0) == [0.0, 64.0, 128.0]

    def test_no_slots(self):
        assert slot_offsets(0, 64.0) == []

    def test_strip_width(self):
        assert strip_width(5, 64.0) == 320.0

    def test_strip_width_never_negative(self):
        assert strip_width(-1, 64.0) == 0.0
