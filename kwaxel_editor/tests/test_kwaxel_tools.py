#!/usr/bin/env python3
"""
Unit tests for Kwaxel drawing tools
Tests pencil, eraser, fill and eyedropper
"""

import numpy as np
import pytest

from kwaxel_editor.core.kwaxel_exceptions import ToolError
from kwaxel_editor.core.kwaxel_models import PixelBuffer
from kwaxel_editor.core.kwaxel_tools import ToolType, apply_tool, brush_footprint

BLUE = 0xFF3B82F6
RED = 0xFFEF4444


class TestBrushFootprint:
    """Test brush offsets"""

    def test_size_one(self):
        assert brush_footprint(5, 5, 1) == [(5, 5)]

    def test_size_two_leans_negative(self):
        assert sorted(brush_footprint(5, 5, 2)) == [(4, 4), (4, 5), (5, 4), (5, 5)]

    def test_size_four_range(self):
        cells = brush_footprint(10, 10, 4)
        xs = {x for x, _ in cells}
        ys = {y for _, y in cells}

        assert len(cells) == 16
        assert xs == {8, 9, 10, 11}
        assert ys == {8, 9, 10, 11}


class TestToolType:
    def test_from_name(self):
        assert ToolType.from_name("Fill") is ToolType.FILL
        assert ToolType.from_name(ToolType.ERASER) is ToolType.ERASER

    def test_unknown_name(self):
        with pytest.raises(ToolError):
            ToolType.from_name("airbrush")


class TestPencilTool:
    """Test pencil painting"""

    def test_paints_single_cell(self, blank_buffer):
        result = apply_tool(blank_buffer, "pencil", 5, 5, "#3b82f6")

        assert result.changed is True
        assert result.buffer.get_pixel(5, 5) == BLUE
        assert int(np.count_nonzero(result.buffer.data)) == 1

    def test_input_buffer_untouched(self, blank_buffer):
        apply_tool(blank_buffer, "pencil", 5, 5, "#3b82f6")
        assert blank_buffer.is_blank()

    def test_forces_opaque(self, blank_buffer):
        result = apply_tool(blank_buffer, "pencil", 0, 0, "#203b82f6")
        assert result.buffer.get_pixel(0, 0) == BLUE

    def test_unchanged_when_same_color(self, blank_buffer):
        first = apply_tool(blank_buffer, "pencil", 3, 3, "#3b82f6").buffer
        second = apply_tool(first, "pencil", 3, 3, "#3b82f6")

        assert second.changed is False
        assert second.buffer == first

    def test_brush_clipped_at_edges(self, blank_buffer):
        result = apply_tool(blank_buffer, "pencil", 0, 0, "#3b82f6", brush_size=4)

        # Footprint -2..1 clipped to 0..1
        assert int(np.count_nonzero(result.buffer.data)) == 4
        assert result.buffer.get_pixel(1, 1) == BLUE

    def test_invalid_color_paints_black(self, blank_buffer):
        result = apply_tool(blank_buffer, "pencil", 2, 2, "not-a-color")
        assert result.buffer.get_pixel(2, 2) == 0xFF000000


class TestEraserTool:
    def test_erases_footprint(self, blank_buffer):
        painted = apply_tool(blank_buffer, "pencil", 5, 5, "#3b82f6", brush_size=2).buffer
        result = apply_tool(painted, "eraser", 5, 5, "#3b82f6", brush_size=2)

        assert result.changed is True
        assert result.buffer.is_blank()

    def test_erase_blank_is_unchanged(self, blank_buffer):
        assert apply_tool(blank_buffer, "eraser", 5, 5, "#3b82f6").changed is False


class TestFillTool:
    """Test 4-connected flood fill"""

    def test_fill_blank_canvas(self, blank_buffer):
        result = apply_tool(blank_buffer, "fill", 0, 0, "#3b82f6")

        assert result.changed is True
        assert np.all(result.buffer.data == BLUE)

    def test_fill_respects_boundary(self, blank_buffer):
        # Vertical wall at x == 10
        buffer = blank_buffer.clone()
        for y in range(buffer.height):
            buffer.set_pixel(10, y, RED)

        result = apply_tool(buffer, "fill", 0, 0, "#3b82f6").buffer

        assert result.get_pixel(9, 31) == BLUE
        assert result.get_pixel(10, 0) == RED
        assert result.get_pixel(11, 0) == 0

    def test_fill_is_not_diagonal(self):
        buffer = PixelBuffer.from_values([RED, 0, 0, RED], width=2, height=2)
        result = apply_tool(buffer, "fill", 0, 0, "#3b82f6").buffer

        assert result.get_pixel(0, 0) == BLUE
        assert result.get_pixel(1, 1) == RED

    def test_same_color_is_noop(self, blank_buffer):
        filled = apply_tool(blank_buffer, "fill", 0, 0, "#3b82f6").buffer
        result = apply_tool(filled, "fill", 4, 4, "#3b82f6")

        assert result.changed is False
        assert result.buffer == filled

    def test_fill_twice_at_same_origin(self, blank_buffer):
        buffer = blank_buffer.clone()
        for y in range(buffer.height):
            buffer.set_pixel(10, y, RED)

        once = apply_tool(buffer, "fill", 3, 7, "#3b82f6").buffer
        twice = apply_tool(once, "fill", 3, 7, "#3b82f6")

        assert twice.changed is False
        assert twice.buffer == once
        assert np.array_equal(twice.buffer.data, once.data)

    def test_fill_keeps_alpha(self, blank_buffer):
        result = apply_tool(blank_buffer, "fill", 0, 0, "#803b82f6")
        assert result.buffer.get_pixel(31, 31) == 0x803B82F6

    def test_ignores_brush_size(self, blank_buffer):
        a = apply_tool(blank_buffer, "fill", 0, 0, "#3b82f6", brush_size=1).buffer
        b = apply_tool(blank_buffer, "fill", 0, 0, "#3b82f6", brush_size=4).buffer
        assert a == b


class TestEyedropperTool:
    def test_picks_color(self, blank_buffer):
        painted = apply_tool(blank_buffer, "pencil", 7, 8, "#ef4444").buffer
        result = apply_tool(painted, "eyedropper", 7, 8, "#000000")

        assert result.changed is False
        assert result.picked_color == RED
        assert result.buffer == painted

    def test_picks_transparent(self, blank_buffer):
        assert apply_tool(blank_buffer, "eyedropper", 0, 0, "#fff").picked_color == 0
