#!/usr/bin/env python3
"""
Tests for nearest-neighbor rendering, the grid overlay and hit-testing
"""

import numpy as np
import pytest
from PyQt6.QtGui import QImage, QPainter

from kwaxel_editor.core.kwaxel_constants import GRID_LINE_COLOR
from kwaxel_editor.core.kwaxel_models import PixelBuffer
from kwaxel_editor.core.kwaxel_rasterizer import Rasterizer, nearest_indices

BLUE = 0xFF3B82F6


@pytest.fixture
def rasterizer():
    return Rasterizer()


@pytest.fixture
def checker_buffer():
    """4x4 buffer with one blue cell at (1, 2)"""
    buffer = PixelBuffer.blank(4, 4)
    buffer.set_pixel(1, 2, BLUE)
    return buffer


class TestNearestIndices:
    def test_integer_upscale(self):
        assert nearest_indices(2, 6).tolist() == [0, 0, 0, 1, 1, 1]

    def test_downscale_samples_centers(self):
        assert nearest_indices(4, 2).tolist() == [1, 3]

    def test_fractional(self):
        # (d + 0.5) * 3 / 4 -> 0.375, 1.125, 1.875, 2.625
        assert nearest_indices(3, 4).tolist() == [0, 1, 1, 2]


class TestRender:
    """Test the pixel layer"""

    def test_surface_size(self, rasterizer):
        assert rasterizer.surface_size(32, 32, 16, 1.0) == (512, 512)
        assert rasterizer.surface_size(32, 32, 16, 2.0) == (1024, 1024)
        assert rasterizer.surface_size(32, 32, 8, 1.5) == (384, 384)

    def test_integer_scale_blocks(self, rasterizer, checker_buffer):
        out = rasterizer.render(checker_buffer, 3)

        assert out.shape == (12, 12, 4)
        assert out.dtype == np.uint8
        block = out[6:9, 3:6]
        assert np.all(block == [0x3B, 0x82, 0xF6, 0xFF])
        assert np.all(out[0:6] == 0)

    def test_fractional_dpr_matches_sampling_rule(self, rasterizer, checker_buffer):
        out = rasterizer.render(checker_buffer, 2, dpr=1.25)

        # 4 cells at 2.5 device pixels each -> 10 pixels
        assert out.shape == (10, 10, 4)
        rows = nearest_indices(4, 10)
        cols = nearest_indices(4, 10)
        for dy in range(10):
            for dx in range(10):
                expected = 0xFF if (rows[dy], cols[dx]) == (2, 1) else 0
                assert out[dy, dx, 3] == expected

    def test_no_blending(self, rasterizer):
        buffer = PixelBuffer.from_values([0xFFFF0000, 0xFF0000FF], width=2, height=1)
        out = rasterizer.render(buffer, 7, dpr=1.3)
        colors = {tuple(px) for px in out.reshape(-1, 4).tolist()}

        assert colors == {(255, 0, 0, 255), (0, 0, 255, 255)}


class TestRenderGrid:
    """Test the grid overlay layer"""

    def test_grid_lines(self, rasterizer):
        grid = rasterizer.render_grid(4, 4, scale=4)

        assert grid.shape == (16, 16, 4)
        assert tuple(grid[0, 5]) == GRID_LINE_COLOR
        assert tuple(grid[5, 4]) == GRID_LINE_COLOR
        # Last line is clamped inside the surface
        assert tuple(grid[5, 15]) == GRID_LINE_COLOR
        assert tuple(grid[5, 5]) == (0, 0, 0, 0)

    def test_line_width_follows_dpr(self, rasterizer):
        grid = rasterizer.render_grid(2, 2, scale=8, dpr=2.0)

        assert grid.shape == (32, 32, 4)
        assert grid[5, 16, 3] == GRID_LINE_COLOR[3]
        assert grid[5, 17, 3] == GRID_LINE_COLOR[3]
        assert grid[5, 18, 3] == 0

    def test_layers_without_grid(self, rasterizer, checker_buffer):
        layers = rasterizer.render_layers(checker_buffer, 2, grid_visible=False)

        assert layers.grid is None
        assert layers.pixels.shape == (8, 8, 4)

    def test_grid_never_touches_pixels(self, rasterizer, checker_buffer):
        with_grid = rasterizer.render_layers(checker_buffer, 4, grid_visible=True)
        without = rasterizer.render_layers(checker_buffer, 4, grid_visible=False)

        assert np.array_equal(with_grid.pixels, without.pixels)


class TestCellAt:
    """Test hit-testing"""

    def test_inside(self, rasterizer):
        assert rasterizer.cell_at(80, 80, 16) == (5, 5)
        assert rasterizer.cell_at(95.9, 0, 16) == (5, 0)

    def test_clamped(self, rasterizer):
        assert rasterizer.cell_at(-10, 9999, 16) == (0, 31)

    def test_non_finite(self, rasterizer):
        assert rasterizer.cell_at(float("nan"), float("inf"), 16) == (0, 0)


class TestQtPainting:
    """Test painting through QPainter"""

    def test_to_qimage(self, qapp, rasterizer, checker_buffer):
        image = rasterizer.to_qimage(rasterizer.render(checker_buffer, 2), dpr=2.0)

        assert image.width() == 8
        assert image.height() == 8
        assert image.devicePixelRatio() == 2.0
        assert image.pixelColor(2, 4).name() == "#3b82f6"

    def test_draw(self, qapp, rasterizer, checker_buffer):
        target = QImage(16, 16, QImage.Format.Format_ARGB32)
        target.fill(0)
        painter = QPainter(target)
        rasterizer.draw(painter, checker_buffer, 4, 1.0, grid_visible=False)
        painter.end()

        assert target.pixel(5, 9) == BLUE
        assert target.pixel(0, 0) == 0
