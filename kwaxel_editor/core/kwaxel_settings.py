#!/usr/bin/env python3
"""
Editor configuration for Kwaxel
Defaults come from kwaxel_constants; a JSON file may override them
"""

# Standard library imports
import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

from .kwaxel_constants import (
    BRUSH_SIZES,
    DEFAULT_BRUSH_SIZE,
    DEFAULT_COLOR,
    DEFAULT_TOOL,
    MAX_HISTORY,
    TOOL_SHORTCUTS,
    ZOOM_DEFAULT,
    ZOOM_MAX,
    ZOOM_MIN,
)
from .kwaxel_utils import clamp, debug_log


@dataclass
class EditorSettings:
    """Start-up configuration for an editor instance"""

    history_limit: int = MAX_HISTORY
    zoom: int = ZOOM_DEFAULT
    zoom_min: int = ZOOM_MIN
    zoom_max: int = ZOOM_MAX
    grid_visible: bool = True
    default_color: str = DEFAULT_COLOR
    brush_size: int = DEFAULT_BRUSH_SIZE
    tool: str = DEFAULT_TOOL
    load_default_asset: bool = True

    def __post_init__(self):
        """Replace invalid values with defaults"""
        if not isinstance(self.history_limit, int) or self.history_limit < 1:
            debug_log("SETTINGS", f"Invalid history_limit {self.history_limit!r}", "WARNING")
            self.history_limit = MAX_HISTORY

        if not (isinstance(self.zoom_min, int) and isinstance(self.zoom_max, int)) or (
            self.zoom_min < 1 or self.zoom_min > self.zoom_max
        ):
            debug_log("SETTINGS", f"Invalid zoom range {self.zoom_min!r}-{self.zoom_max!r}", "WARNING")
            self.zoom_min, self.zoom_max = ZOOM_MIN, ZOOM_MAX

        if not isinstance(self.zoom, int):
            self.zoom = ZOOM_DEFAULT
        self.zoom = clamp(self.zoom, self.zoom_min, self.zoom_max)

        if isinstance(self.brush_size, bool) or self.brush_size not in BRUSH_SIZES:
            debug_log("SETTINGS", f"Invalid brush_size {self.brush_size!r}", "WARNING")
            self.brush_size = DEFAULT_BRUSH_SIZE

        if self.tool not in TOOL_SHORTCUTS.values():
            debug_log("SETTINGS", f"Invalid tool {self.tool!r}", "WARNING")
            self.tool = DEFAULT_TOOL

        if not isinstance(self.default_color, str):
            self.default_color = DEFAULT_COLOR

        self.grid_visible = bool(self.grid_visible)
        self.load_default_asset = bool(self.load_default_asset)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditorSettings":
        """Build settings from a dict, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            debug_log("SETTINGS", f"Ignoring unknown settings: {sorted(unknown)}", "WARNING")
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_settings(file_path: Optional[Union[str, Path]] = None) -> EditorSettings:
    """Load settings from a JSON file

    A missing or corrupted file yields the defaults.
    """
    if file_path is None:
        return EditorSettings()

    path = Path(file_path)
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        debug_log("SETTINGS", f"Using defaults, cannot read {path}: {e}", "WARNING")
        return EditorSettings()

    if not isinstance(data, dict):
        debug_log("SETTINGS", f"Using defaults, {path} is not a JSON object", "WARNING")
        return EditorSettings()

    debug_log("SETTINGS", f"Loaded settings from {path}")
    return EditorSettings.from_dict(data)
