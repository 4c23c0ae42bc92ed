#!/usr/bin/env python3
"""
Constants for the Kwaxel pixel editor
Centralizes all magic numbers and configuration values
"""

# ============================================================================
# GRID CONSTANTS
# ============================================================================

GRID_WIDTH = 32  # Fixed canvas width in cells
GRID_HEIGHT = 32  # Fixed canvas height in cells

# ============================================================================
# COLOR CONSTANTS
# ============================================================================

TRANSPARENT = 0x00000000  # Initial / erased cell value
OPAQUE_BLACK = 0xFF000000  # Fallback for unparseable colors
ALPHA_MASK = 0xFF000000
ARGB_MASK = 0xFFFFFFFF

DEFAULT_COLOR = "#3b82f6"

# Fixed swatch list shown next to the canvas
SWATCH_COLORS = [
    "#000000",
    "#ffffff",
    "#ef4444",
    "#f59e0b",
    "#fbbf24",
    "#10b981",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
]

# Grid overlay color (RGBA) - black at 10% opacity
GRID_LINE_COLOR = (0, 0, 0, 26)

# Checkerboard shown behind transparent cells
CHECKER_LIGHT = (255, 255, 255)
CHECKER_DARK = (235, 235, 235)

# ============================================================================
# TOOL CONSTANTS
# ============================================================================

TOOL_PENCIL = "pencil"
TOOL_ERASER = "eraser"
TOOL_FILL = "fill"
TOOL_EYEDROPPER = "eyedropper"

DEFAULT_TOOL = TOOL_PENCIL

BRUSH_SIZES = (1, 2, 4)
DEFAULT_BRUSH_SIZE = 1

# ============================================================================
# UNDO/REDO CONSTANTS
# ============================================================================

MAX_HISTORY = 200

# ============================================================================
# ZOOM CONSTANTS
# ============================================================================

ZOOM_MIN = 8  # Pixels per cell
ZOOM_MAX = 32
ZOOM_DEFAULT = 16
ZOOM_STEP = 1

# ============================================================================
# IMPORT / EXPORT CONSTANTS
# ============================================================================

EXPORT_MULTIPLIERS = (1, 2, 4, 8)
EXPORT_FILENAME_TEMPLATE = "kwaxel_{width}x{height}_x{multiplier}.png"
DEFAULT_ASSET_NAME = "kwaxel_default.png"

IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp);;All Files (*)"
PNG_FILE_FILTER = "PNG Files (*.png);;All Files (*)"

MAX_IMPORT_BYTES = 50 * 1024 * 1024  # Refuse absurdly large files

# ============================================================================
# KEYBOARD SHORTCUTS
# ============================================================================

# Single key tool shortcuts (lowercase key identifiers)
TOOL_SHORTCUTS = {
    "b": TOOL_PENCIL,
    "e": TOOL_ERASER,
    "g": TOOL_FILL,
    "i": TOOL_EYEDROPPER,
}

KEY_UNDO = "z"  # Ctrl/Cmd+Z, Ctrl/Cmd+Shift+Z redoes
KEY_REDO = "y"  # Ctrl/Cmd+Y

# ============================================================================
# UI DIMENSIONS
# ============================================================================

MAIN_WINDOW_WIDTH = 820
MAIN_WINDOW_HEIGHT = 720
SWATCH_BUTTON_SIZE = 24
STATUS_MESSAGE_TIMEOUT = 3000  # Status bar message duration in milliseconds
