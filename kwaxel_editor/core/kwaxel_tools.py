#!/usr/bin/env python3
"""
Drawing tools for the Kwaxel editor

Every tool works clone-then-mutate: the buffer passed in is never modified,
so callers can keep references to earlier states for undo/redo.
"""

# Standard library imports
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .kwaxel_color import ColorValue, opaque, parse_color
from .kwaxel_constants import (
    TOOL_ERASER,
    TOOL_EYEDROPPER,
    TOOL_FILL,
    TOOL_PENCIL,
    TRANSPARENT,
)
from .kwaxel_exceptions import ToolError
from .kwaxel_models import PixelBuffer


class ToolType(Enum):
    """Available drawing tools"""

    PENCIL = TOOL_PENCIL
    ERASER = TOOL_ERASER
    FILL = TOOL_FILL
    EYEDROPPER = TOOL_EYEDROPPER

    @classmethod
    def from_name(cls, tool: Union["ToolType", str]) -> "ToolType":
        """Resolve a ToolType or tool name"""
        if isinstance(tool, ToolType):
            return tool
        try:
            return cls(str(tool).strip().lower())
        except ValueError:
            raise ToolError(f"Unknown tool: {tool}") from None


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of applying a tool.

    changed is False when the buffer is value-identical to the input, in which
    case no history or redraw work is needed. picked_color is only set by the
    eyedropper.
    """

    buffer: PixelBuffer
    changed: bool
    picked_color: Optional[int] = None


def brush_footprint(x: int, y: int, size: int) -> List[Tuple[int, int]]:
    """
    Cells covered by a square brush centered on (x, y).
    Even sizes lean toward negative offsets: size 2 covers x-1..x, size 4 x-2..x+1.
    """
    size = max(1, int(size))
    radius = size // 2
    offsets = range(-radius, size - radius)
    return [(x + dx, y + dy) for dy in offsets for dx in offsets]


class Tool(ABC):
    """Abstract base class for drawing tools"""

    tool_type: ToolType

    @abstractmethod
    def apply(
        self, buffer: PixelBuffer, x: int, y: int, color: ColorValue, brush_size: int
    ) -> ToolResult:
        """Apply the tool at (x, y) and return the resulting state"""


class PencilTool(Tool):
    """Paints the brush footprint with the current color, always fully opaque"""

    tool_type = ToolType.PENCIL

    def _value(self, color: ColorValue) -> int:
        return opaque(parse_color(color))

    def apply(self, buffer, x, y, color, brush_size):
        value = self._value(color)
        result = buffer.clone()
        changed = False
        for px, py in brush_footprint(x, y, brush_size):
            changed = result.set_pixel(px, py, value) or changed
        return ToolResult(result, changed)


class EraserTool(PencilTool):
    """Clears the brush footprint to transparent"""

    tool_type = ToolType.ERASER

    def _value(self, color: ColorValue) -> int:
        return TRANSPARENT


class FillTool(Tool):
    """4-connected flood fill"""

    tool_type = ToolType.FILL

    def apply(self, buffer, x, y, color, brush_size):
        if not buffer.in_bounds(x, y):
            return ToolResult(buffer.clone(), False)

        replacement = parse_color(color)
        target = buffer.get_pixel(x, y)
        if target == replacement:
            return ToolResult(buffer.clone(), False)

        result = buffer.clone()
        grid = result.as_grid()
        width, height = result.width, result.height
        stack = [(x, y)]

        # Iterative so large grids cannot exhaust the call stack
        while stack:
            cx, cy = stack.pop()
            if not (0 <= cx < width and 0 <= cy < height):
                continue
            if grid[cy, cx] != target:
                continue
            grid[cy, cx] = replacement
            stack.extend([(cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)])

        return ToolResult(result, True)


class EyedropperTool(Tool):
    """Reads the color under the cursor; never changes the buffer"""

    tool_type = ToolType.EYEDROPPER

    def apply(self, buffer, x, y, color, brush_size):
        return ToolResult(buffer.clone(), False, picked_color=buffer.get_pixel(x, y))


TOOLS = {
    ToolType.PENCIL: PencilTool(),
    ToolType.ERASER: EraserTool(),
    ToolType.FILL: FillTool(),
    ToolType.EYEDROPPER: EyedropperTool(),
}


def apply_tool(
    buffer: PixelBuffer,
    tool: Union[ToolType, str],
    x: int,
    y: int,
    color: ColorValue,
    brush_size: int = 1,
) -> ToolResult:
    """Apply a tool to a copy of buffer; the input buffer is never modified"""
    return TOOLS[ToolType.from_name(tool)].apply(buffer, int(x), int(y), color, brush_size)
