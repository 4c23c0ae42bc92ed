#!/usr/bin/env python3
"""
Unit tests for the Kwaxel ToolManager
"""

import pytest

from kwaxel_editor.core.kwaxel_managers import ToolManager
from kwaxel_editor.core.kwaxel_tools import ToolType


class TestToolManager:
    """Test tool, color and brush selection"""

    @pytest.fixture
    def manager(self):
        return ToolManager()

    def test_defaults(self, manager):
        assert manager.current_tool is ToolType.PENCIL
        assert manager.current_tool_name == "pencil"
        assert manager.current_color == "#3b82f6"
        assert manager.get_brush_size() == 1

    def test_set_tool(self, manager):
        assert manager.set_tool("fill") is True
        assert manager.current_tool is ToolType.FILL
        assert manager.set_tool(ToolType.FILL) is False

    def test_unknown_tool_ignored(self, manager):
        assert manager.set_tool("lasso") is False
        assert manager.current_tool is ToolType.PENCIL

    @pytest.mark.parametrize(
        "color,expected",
        [
            ("#EF4444", "#ef4444"),
            ("#abc", "#aabbcc"),
            ("#ff10b981", "#10b981"),
            ("#8010b981", "#8010b981"),
            ("garbage", "#000000"),
            (0xFF102030, "#102030"),
        ],
    )
    def test_set_color_normalizes(self, manager, color, expected):
        assert manager.set_color(color) == expected
        assert manager.current_color == expected

    @pytest.mark.parametrize("size", [True, False, 0, 3, 1.5, "2"])
    def test_invalid_brush_size_rejected(self, manager, size):
        assert manager.set_brush_size(size) is False
        assert manager.get_brush_size() == 1
        assert type(manager.get_brush_size()) is int

    def test_brush_sizes(self, manager):
        assert manager.set_brush_size(4) is True
        assert manager.set_brush_size(4) is False
        assert manager.set_brush_size(3) is False
        assert manager.get_brush_size() == 4

    def test_brush_pixels(self, manager):
        manager.set_brush_size(2)
        assert len(manager.get_brush_pixels(3, 3)) == 4

    def test_invalid_constructor_values(self):
        manager = ToolManager(color="nope", brush_size=7)

        assert manager.current_color == "#000000"
        assert manager.get_brush_size() == 1
