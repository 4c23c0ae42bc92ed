"""
UI Panel components for the Kwaxel editor
Each panel encapsulates a specific part of the UI
"""

from .color_panel import ColorPanel
from .options_panel import OptionsPanel
from .tool_panel import ToolPanel

__all__ = ["ColorPanel", "OptionsPanel", "ToolPanel"]
