"""Core Kwaxel editor modules"""

# Make key classes available at package level
from .kwaxel_canvas import KwaxelCanvas
from .kwaxel_controller import KwaxelController
from .kwaxel_editor_window import KwaxelEditorWindow

__all__ = ["KwaxelCanvas", "KwaxelController", "KwaxelEditorWindow"]
