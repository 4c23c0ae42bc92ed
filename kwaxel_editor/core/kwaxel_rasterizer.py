#!/usr/bin/env python3
"""
Rasterizer for the Kwaxel editor
Turns a PixelBuffer into device pixels at any zoom and device pixel ratio

Rendering is nearest-neighbor only, so cell edges stay crisp. The grid
overlay is produced as a separate layer and is never blended into the buffer.
"""

# Standard library imports
import math
from typing import NamedTuple, Optional

# Third-party imports
import numpy as np
from PyQt6.QtCore import QPointF
from PyQt6.QtGui import QImage, QPainter

from .kwaxel_color import argb_to_rgba
from .kwaxel_constants import GRID_HEIGHT, GRID_LINE_COLOR, GRID_WIDTH
from .kwaxel_models import PixelBuffer
from .kwaxel_utils import clamp


class RasterLayers(NamedTuple):
    """Rendered RGBA layers, bottom to top"""

    pixels: np.ndarray
    grid: Optional[np.ndarray]


def nearest_indices(source_size: int, target_size: int) -> np.ndarray:
    """Source index sampled by each destination pixel (pixel-center rule)"""
    centers = (np.arange(target_size, dtype=np.float64) + 0.5) * source_size / target_size
    return np.clip(np.floor(centers).astype(np.int64), 0, source_size - 1)


class Rasterizer:
    """Renders pixel buffers; stateless apart from the grid line color"""

    def __init__(self, grid_color: tuple[int, int, int, int] = GRID_LINE_COLOR) -> None:
        self.grid_color = grid_color

    @staticmethod
    def surface_size(width: int, height: int, scale: float, dpr: float = 1.0) -> tuple[int, int]:
        """Backing surface size in device pixels"""
        factor = float(scale) * float(dpr)
        return (max(1, int(round(width * factor))), max(1, int(round(height * factor))))

    def render(self, buffer: PixelBuffer, scale: float, dpr: float = 1.0) -> np.ndarray:
        """Render the buffer as an (h, w, 4) RGBA array"""
        surface_w, surface_h = self.surface_size(buffer.width, buffer.height, scale, dpr)
        rgba = argb_to_rgba(buffer.data).reshape(buffer.height, buffer.width, 4)

        factor = float(scale) * float(dpr)
        if factor >= 1 and factor.is_integer():
            # Same result as the index path below, without the gather
            factor = int(factor)
            return np.repeat(np.repeat(rgba, factor, axis=0), factor, axis=1)

        rows = nearest_indices(buffer.height, surface_h)
        cols = nearest_indices(buffer.width, surface_w)
        return rgba[rows[:, None], cols[None, :]]

    def render_grid(
        self,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
        scale: float = 1,
        dpr: float = 1.0,
    ) -> np.ndarray:
        """Render the cell grid (width + 1 vertical, height + 1 horizontal lines)"""
        surface_w, surface_h = self.surface_size(width, height, scale, dpr)
        overlay = np.zeros((surface_h, surface_w, 4), dtype=np.uint8)
        line_width = max(1, int(round(dpr)))
        factor = float(scale) * float(dpr)
        color = np.array(self.grid_color, dtype=np.uint8)

        for i in range(width + 1):
            start = clamp(int(round(i * factor)), 0, surface_w - line_width)
            overlay[:, start:start + line_width] = color
        for j in range(height + 1):
            start = clamp(int(round(j * factor)), 0, surface_h - line_width)
            overlay[start:start + line_width, :] = color
        return overlay

    def render_layers(
        self, buffer: PixelBuffer, scale: float, dpr: float = 1.0, grid_visible: bool = True
    ) -> RasterLayers:
        """Render the pixel layer and, if enabled, the grid layer"""
        pixels = self.render(buffer, scale, dpr)
        grid = self.render_grid(buffer.width, buffer.height, scale, dpr) if grid_visible else None
        return RasterLayers(pixels, grid)

    @staticmethod
    def cell_at(
        x: float,
        y: float,
        scale: float,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
    ) -> tuple[int, int]:
        """Map a logical surface point to the nearest in-bounds cell"""

        def to_cell(value: float, limit: int) -> int:
            if not math.isfinite(value) or scale <= 0:
                return 0
            return clamp(int(math.floor(value / scale)), 0, limit - 1)

        return (to_cell(float(x), width), to_cell(float(y), height))

    @staticmethod
    def to_qimage(rgba: np.ndarray, dpr: float = 1.0) -> QImage:
        """Wrap an RGBA array in a QImage that owns its memory"""
        height, width = rgba.shape[:2]
        data = np.ascontiguousarray(rgba, dtype=np.uint8).tobytes()
        image = QImage(data, width, height, width * 4, QImage.Format.Format_RGBA8888).copy()
        image.setDevicePixelRatio(dpr)
        return image

    def draw(
        self,
        painter: QPainter,
        buffer: PixelBuffer,
        scale: float,
        dpr: float = 1.0,
        grid_visible: bool = True,
    ) -> None:
        """Paint the buffer (and grid above it) onto an externally owned painter

        Covers the logical region (width * scale) x (height * scale), which is
        (width * scale * dpr) device pixels wide.
        """
        layers = self.render_layers(buffer, scale, dpr, grid_visible)
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)
        painter.drawImage(QPointF(0, 0), self.to_qimage(layers.pixels, dpr))
        if layers.grid is not None:
            painter.drawImage(QPointF(0, 0), self.to_qimage(layers.grid, dpr))
        painter.restore()
