#!/usr/bin/env python3
"""
Canvas widget for the Kwaxel editor
Paints the controller's buffer through the rasterizer and forwards pointer input
"""

# Standard library imports
from typing import Optional

# Third-party imports
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QMouseEvent, QPainter, QPen, QWheelEvent
from PyQt6.QtWidgets import QWidget

from .kwaxel_constants import (
    CHECKER_DARK,
    CHECKER_LIGHT,
    TOOL_ERASER,
    TOOL_EYEDROPPER,
    TOOL_FILL,
    TOOL_PENCIL,
)


class KwaxelCanvas(QWidget):
    """Canvas that delegates all editing to the controller"""

    def __init__(self, controller, parent=None):
        super().__init__(parent)

        self.controller = controller

        # Interaction state (view only)
        self.hover_cell: Optional[tuple[int, int]] = None

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # Connect to controller signals
        self.controller.imageChanged.connect(self.update)
        self.controller.viewportChanged.connect(self._on_viewport_changed)
        self.controller.toolChanged.connect(self._update_cursor_for_tool)
        self.controller.brushSizeChanged.connect(lambda _size: self.update())

        self._update_size()
        self._update_cursor_for_tool(self.controller.get_current_tool_name())

    def _on_viewport_changed(self):
        self._update_size()
        self.update()

    def _update_size(self):
        """Fix widget size to the logical size at the current zoom"""
        width, height = self.controller.get_image_size()
        self.setFixedSize(*self.controller.viewport.logical_size(width, height))

    def _update_cursor_for_tool(self, tool_name: str):
        """Update cursor based on the current tool"""
        if tool_name in (TOOL_PENCIL, TOOL_ERASER):
            self.setCursor(Qt.CursorShape.CrossCursor)
        elif tool_name == TOOL_FILL:
            self.setCursor(Qt.CursorShape.PointingHandCursor)
        elif tool_name == TOOL_EYEDROPPER:
            # Qt has no built-in eyedropper cursor
            self.setCursor(Qt.CursorShape.WhatsThisCursor)
        else:
            self.setCursor(Qt.CursorShape.ArrowCursor)

    def _draw_checkerboard(self, painter: QPainter, width: int, height: int):
        """Draw a checkerboard behind transparent cells, half a cell per square"""
        checker_size = max(1, self.controller.viewport.zoom // 2)
        light_color = QColor(*CHECKER_LIGHT)
        dark_color = QColor(*CHECKER_DARK)

        painter.fillRect(0, 0, width, height, light_color)
        for y in range(0, height, checker_size):
            for x in range(0, width, checker_size):
                if (x // checker_size + y // checker_size) % 2:
                    painter.fillRect(
                        x,
                        y,
                        min(checker_size, width - x),
                        min(checker_size, height - y),
                        dark_color,
                    )

    def _draw_hover_highlight(self, painter: QPainter):
        """Outline the cells the brush would touch"""
        if self.hover_cell is None:
            return
        zoom = self.controller.viewport.zoom
        width, height = self.controller.get_image_size()

        painter.setPen(QPen(QColor(255, 255, 255, 160), 1))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        for px, py in self.controller.tool_manager.get_brush_pixels(*self.hover_cell):
            if 0 <= px < width and 0 <= py < height:
                painter.drawRect(px * zoom, py * zoom, zoom - 1, zoom - 1)

    def paintEvent(self, event):
        """Paint checkerboard, pixels, grid and hover outline"""
        self.controller.set_device_pixel_ratio(self.devicePixelRatioF())
        viewport = self.controller.viewport

        painter = QPainter(self)
        self._draw_checkerboard(painter, self.width(), self.height())
        self.controller.rasterizer.draw(
            painter,
            self.controller.buffer,
            viewport.zoom,
            viewport.device_pixel_ratio,
            viewport.grid_visible,
        )
        if self.controller.get_current_tool_name() in (TOOL_PENCIL, TOOL_ERASER):
            self._draw_hover_highlight(painter)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent):
        """Left button paints; right button picks a color"""
        pos = event.position()
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.pointer_down(pos.x(), pos.y())
        elif event.button() == Qt.MouseButton.RightButton:
            self.controller.pick_color_at(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent):
        pos = event.position()
        cell = self.controller.cell_at(pos.x(), pos.y())
        if cell != self.hover_cell:
            self.hover_cell = cell
            self.update()

        if event.buttons() & Qt.MouseButton.LeftButton:
            self.controller.pointer_move(pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.pointer_up()

    def leaveEvent(self, event):
        """Pointer left the canvas: end the session and clear hover"""
        self.controller.pointer_leave()
        self.hover_cell = None
        self.update()
        super().leaveEvent(event)

    def wheelEvent(self, event: QWheelEvent):
        """Ctrl+wheel zooms; plain wheel scrolls the parent"""
        if not event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            event.ignore()
            return

        delta = event.angleDelta().y()
        if delta > 0:
            self.controller.zoom_in()
        elif delta < 0:
            self.controller.zoom_out()
        event.accept()

    def enterEvent(self, event):
        self.setToolTip("Left click: Draw • Right click: Pick color • Ctrl+Wheel: Zoom")
        super().enterEvent(event)
