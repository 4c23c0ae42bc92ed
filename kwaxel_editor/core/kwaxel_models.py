#!/usr/bin/env python3
"""
Core data models for the Kwaxel editor
These models hold editor state without any UI dependencies
"""

# Standard library imports
from dataclasses import dataclass, field
from typing import Iterable, Optional

# Third-party imports
import numpy as np

from .kwaxel_constants import (
    ARGB_MASK,
    GRID_HEIGHT,
    GRID_WIDTH,
    ZOOM_DEFAULT,
    ZOOM_MAX,
    ZOOM_MIN,
)
from .kwaxel_utils import clamp, debug_log


@dataclass(eq=False)
class PixelBuffer:
    """
    Fixed-size grid of packed 0xAARRGGBB values.

    Stored as a flat row-major uint32 array; index = y * width + x.
    Reads outside the grid return 0 and writes outside it are ignored.
    """

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    data: Optional[np.ndarray] = field(default=None)

    def __post_init__(self):
        """Ensure data array matches dimensions"""
        expected = self.width * self.height
        if self.data is None:
            self.data = np.zeros(expected, dtype=np.uint32)
            return

        data = np.asarray(self.data)
        if data.size != expected:
            debug_log(
                "BUFFER",
                f"Discarding {data.size} values for a {self.width}x{self.height} buffer",
                "WARNING",
            )
            self.data = np.zeros(expected, dtype=np.uint32)
        else:
            self.data = data.reshape(expected).astype(np.uint32)

    @classmethod
    def blank(cls, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> "PixelBuffer":
        """Create an all-transparent buffer"""
        return cls(width=width, height=height)

    @classmethod
    def from_values(
        cls, values: Iterable[int], width: int = GRID_WIDTH, height: int = GRID_HEIGHT
    ) -> "PixelBuffer":
        """Create a buffer from row-major packed values"""
        if isinstance(values, np.ndarray):
            data = values.astype(np.uint32)
        else:
            data = np.array([int(v) & ARGB_MASK for v in values], dtype=np.uint32)
        return cls(width=width, height=height, data=data)

    def __len__(self) -> int:
        return int(self.data.size)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )

    def __repr__(self) -> str:
        filled = int(np.count_nonzero(self.data))
        return f"PixelBuffer({self.width}x{self.height}, {filled} non-transparent)"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> int:
        """Get pixel value at coordinates, 0 outside the grid"""
        if self.in_bounds(x, y):
            return int(self.data[self.index(x, y)])
        return 0

    def set_pixel(self, x: int, y: int, value: int) -> bool:
        """
        Set pixel value at coordinates
        Returns True if the pixel changed; only call on a buffer you own
        """
        if not self.in_bounds(x, y):
            return False
        idx = self.index(x, y)
        value = int(value) & ARGB_MASK
        if self.data[idx] == value:
            return False
        self.data[idx] = value
        return True

    def clone(self) -> "PixelBuffer":
        """Independent deep copy"""
        return PixelBuffer(width=self.width, height=self.height, data=self.data.copy())

    def as_grid(self) -> np.ndarray:
        """(height, width) view of the data"""
        return self.data.reshape(self.height, self.width)

    def is_blank(self) -> bool:
        return not np.any(self.data)


@dataclass
class ViewportState:
    """
    View-only state: zoom (pixels per cell), grid overlay flag and the
    device pixel ratio used to size backing surfaces.
    None of it touches the pixel data.
    """

    zoom: int = ZOOM_DEFAULT
    grid_visible: bool = True
    device_pixel_ratio: float = 1.0
    zoom_min: int = ZOOM_MIN
    zoom_max: int = ZOOM_MAX

    def __post_init__(self):
        self.zoom = clamp(int(self.zoom), self.zoom_min, self.zoom_max)
        if self.device_pixel_ratio <= 0:
            self.device_pixel_ratio = 1.0

    def set_zoom(self, zoom: int) -> bool:
        """Clamp and apply a zoom level; returns True if it changed"""
        new_zoom = clamp(int(zoom), self.zoom_min, self.zoom_max)
        if new_zoom == self.zoom:
            return False
        self.zoom = new_zoom
        return True

    def set_device_pixel_ratio(self, dpr: float) -> bool:
        dpr = float(dpr)
        if dpr <= 0 or dpr == self.device_pixel_ratio:
            return False
        self.device_pixel_ratio = dpr
        return True

    def logical_size(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> tuple[int, int]:
        """Canvas size in logical (device independent) pixels"""
        return (width * self.zoom, height * self.zoom)
