#!/usr/bin/env python3
"""
Manager classes for the Kwaxel editor
Hold the session-scoped tool selection state
"""

# Standard library imports
from typing import List, Tuple, Union

from .kwaxel_color import ColorValue, format_hex, parse_color
from .kwaxel_constants import BRUSH_SIZES, DEFAULT_BRUSH_SIZE, DEFAULT_COLOR, DEFAULT_TOOL
from .kwaxel_exceptions import ToolError
from .kwaxel_tools import ToolType, brush_footprint
from .kwaxel_utils import debug_log


class ToolManager:
    """Manages the current tool, drawing color and brush size"""

    def __init__(
        self,
        tool: Union[ToolType, str] = DEFAULT_TOOL,
        color: ColorValue = DEFAULT_COLOR,
        brush_size: int = DEFAULT_BRUSH_SIZE,
    ) -> None:
        self.current_tool = ToolType.from_name(tool)
        self.current_color = DEFAULT_COLOR
        self.current_brush_size = DEFAULT_BRUSH_SIZE
        self.set_color(color)
        self.set_brush_size(brush_size)

    def set_tool(self, tool_type: Union[ToolType, str]) -> bool:
        """Set the current tool (accepts ToolType enum or string)

        Returns True if the tool changed; unknown names are ignored.
        """
        try:
            tool_type = ToolType.from_name(tool_type)
        except ToolError:
            debug_log("TOOL", f"Ignoring unknown tool {tool_type!r}", "WARNING")
            return False

        if tool_type == self.current_tool:
            return False
        self.current_tool = tool_type
        debug_log("TOOL", f"Tool changed to {tool_type.name}")
        return True

    @property
    def current_tool_name(self) -> str:
        """Get the name of the current tool"""
        return self.current_tool.value

    def set_color(self, color: ColorValue) -> str:
        """Set the current drawing color; returns its normalized text form

        Opaque colors normalize to #rrggbb, translucent ones keep #aarrggbb;
        unparseable text falls back to opaque black.
        """
        value = parse_color(color)
        opaque_color = (value >> 24) == 0xFF
        self.current_color = format_hex(value, include_alpha=not opaque_color)
        return self.current_color

    def set_brush_size(self, size: int) -> bool:
        """Set brush size with validation"""
        if not isinstance(size, bool) and size in BRUSH_SIZES:
            changed = size != self.current_brush_size
            self.current_brush_size = size
            debug_log("BRUSH", f"Brush size changed to {size}")
            return changed
        debug_log("BRUSH", f"Invalid brush size {size}, must be one of {BRUSH_SIZES}", "WARNING")
        return False

    def get_brush_size(self) -> int:
        """Get current brush size"""
        return self.current_brush_size

    def get_brush_pixels(self, center_x: int, center_y: int) -> List[Tuple[int, int]]:
        """Calculate cells affected by the brush at given position"""
        return brush_footprint(center_x, center_y, self.current_brush_size)
