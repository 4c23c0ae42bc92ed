#!/usr/bin/env python3
"""
Kwaxel Editor - a 32x32 pixel art editor
Main window wiring the canvas and panels to the controller
"""

# Standard library imports
import argparse
import sys
from typing import Optional

# Third-party imports
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeyEvent, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QStatusBar,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from .kwaxel_canvas import KwaxelCanvas
from .kwaxel_constants import (
    EXPORT_MULTIPLIERS,
    IMAGE_FILE_FILTER,
    MAIN_WINDOW_HEIGHT,
    MAIN_WINDOW_WIDTH,
    PNG_FILE_FILTER,
    ZOOM_DEFAULT,
)
from .kwaxel_controller import KwaxelController
from .kwaxel_import_export import export_filename
from .kwaxel_settings import EditorSettings, load_settings
from .kwaxel_utils import debug_log, set_debug_mode
from .views.panels import ColorPanel, OptionsPanel, ToolPanel

__all__ = ["KwaxelEditorWindow", "main"]


def key_name(event: QKeyEvent) -> str:
    """Lowercase letter for A-Z key events, empty string otherwise"""
    key = event.key()
    if Qt.Key.Key_A.value <= key <= Qt.Key.Key_Z.value:
        return chr(key).lower()
    return ""


class KwaxelEditorWindow(QMainWindow):
    """Main window for the Kwaxel editor"""

    def __init__(
        self,
        settings: Optional[EditorSettings] = None,
        controller: Optional[KwaxelController] = None,
    ):
        super().__init__()

        self.controller = controller or KwaxelController(settings, parent=self)

        self.init_ui()
        self._connect_controller_signals()
        self._sync_from_controller()

    def _connect_controller_signals(self):
        """Connect all controller signals to UI updates"""
        self.controller.colorChanged.connect(self.color_panel.set_color)
        self.controller.toolChanged.connect(self.tool_panel.set_tool)
        self.controller.brushSizeChanged.connect(self.tool_panel.set_brush_size)
        self.controller.viewportChanged.connect(self._on_viewport_changed)
        self.controller.historyChanged.connect(self._on_history_changed)
        self.controller.statusMessage.connect(self._show_status_message)
        self.controller.error.connect(self._show_error)

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle("Kwaxel Editor")
        self.resize(MAIN_WINDOW_WIDTH, MAIN_WINDOW_HEIGHT)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QHBoxLayout(central_widget)

        layout.addWidget(self._create_left_panel())
        layout.addWidget(self._create_right_panel(), 1)

        self.create_menu_bar()
        self.create_toolbar()

        # Status bar
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.zoom_label = QLabel(f"Zoom: {ZOOM_DEFAULT}px")
        self.status_bar.addPermanentWidget(self.zoom_label)

    def _create_left_panel(self) -> QWidget:
        """Create the left panel with tools, colors and options"""
        left_panel = QWidget()
        left_layout = QVBoxLayout(left_panel)
        left_panel.setMaximumWidth(220)

        self.tool_panel = ToolPanel()
        self.tool_panel.toolChanged.connect(self.controller.set_tool)
        self.tool_panel.brushSizeChanged.connect(self.controller.set_brush_size)
        left_layout.addWidget(self.tool_panel)

        self.color_panel = ColorPanel()
        self.color_panel.colorSelected.connect(self.controller.set_color)
        left_layout.addWidget(self.color_panel)

        viewport = self.controller.viewport
        self.options_panel = OptionsPanel(viewport.zoom_min, viewport.zoom_max)
        self.options_panel.gridToggled.connect(self.controller.set_grid_visible)
        self.options_panel.zoomChanged.connect(self.controller.set_zoom)
        left_layout.addWidget(self.options_panel)

        left_layout.addStretch()
        return left_panel

    def _create_right_panel(self) -> QWidget:
        """Create the right panel with the canvas"""
        right_panel = QWidget()
        right_layout = QVBoxLayout(right_panel)

        scroll_area = QScrollArea()
        self.canvas = KwaxelCanvas(self.controller)
        scroll_area.setWidget(self.canvas)
        scroll_area.setWidgetResizable(False)
        scroll_area.setAlignment(Qt.AlignmentFlag.AlignCenter)

        right_layout.addWidget(scroll_area)
        return right_panel

    def create_menu_bar(self):
        """Create the menu bar"""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("File")

        import_action = QAction("Import Image...", self)
        import_action.setShortcut(QKeySequence.StandardKey.Open)
        import_action.triggered.connect(self.import_image)
        file_menu.addAction(import_action)

        export_menu = file_menu.addMenu("Export PNG")
        for multiplier in EXPORT_MULTIPLIERS:
            action = QAction(f"x{multiplier}...", self)
            action.triggered.connect(lambda checked, m=multiplier: self.export_image(m))
            export_menu.addAction(action)

        file_menu.addSeparator()
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        # Edit menu; undo/redo keys go through keyPressEvent
        edit_menu = menubar.addMenu("Edit")

        self.undo_action = QAction("Undo\tCtrl+Z", self)
        self.undo_action.triggered.connect(self.controller.undo)
        self.redo_action = QAction("Redo\tCtrl+Y", self)
        self.redo_action.triggered.connect(self.controller.redo)
        edit_menu.addAction(self.undo_action)
        edit_menu.addAction(self.redo_action)

        # View menu
        view_menu = menubar.addMenu("View")

        zoom_in_action = QAction("Zoom In", self)
        zoom_in_action.setShortcut(QKeySequence.StandardKey.ZoomIn)
        zoom_in_action.triggered.connect(self.controller.zoom_in)

        zoom_out_action = QAction("Zoom Out", self)
        zoom_out_action.setShortcut(QKeySequence.StandardKey.ZoomOut)
        zoom_out_action.triggered.connect(self.controller.zoom_out)

        zoom_reset_action = QAction("Reset Zoom", self)
        zoom_reset_action.setShortcut("Ctrl+0")
        zoom_reset_action.triggered.connect(
            lambda: self.controller.set_zoom(self.controller.settings.zoom)
        )

        view_menu.addAction(zoom_in_action)
        view_menu.addAction(zoom_out_action)
        view_menu.addAction(zoom_reset_action)

    def create_toolbar(self):
        """Create the toolbar"""
        toolbar = QToolBar()
        toolbar.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.addToolBar(toolbar)

        toolbar.addAction("Import", self.import_image)
        toolbar.addAction("Export x4", lambda: self.export_image(4))
        toolbar.addSeparator()
        toolbar.addAction(self.undo_action)
        toolbar.addAction(self.redo_action)

    def _sync_from_controller(self):
        """Push the controller's initial state into the panels"""
        manager = self.controller.tool_manager
        self.tool_panel.set_tool(manager.current_tool_name)
        self.tool_panel.set_brush_size(manager.current_brush_size)
        self.color_panel.set_color(manager.current_color)
        self._on_viewport_changed()
        self._on_history_changed(self.controller.history.can_undo, self.controller.history.can_redo)

    # File operations
    def import_image(self):
        """Import an image file, resampled onto the grid"""
        file_path, _ = QFileDialog.getOpenFileName(self, "Import Image", "", IMAGE_FILE_FILTER)
        if file_path:
            self.controller.import_file(file_path)

    def export_image(self, multiplier: int):
        """Export the canvas as a PNG scaled by multiplier"""
        width, height = self.controller.get_image_size()
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            f"Export PNG x{multiplier}",
            export_filename(multiplier, width, height),
            PNG_FILE_FILTER,
        )
        if file_path:
            self.controller.save_export(file_path, multiplier)

    # Controller signal handlers
    def _on_viewport_changed(self):
        viewport = self.controller.viewport
        self.options_panel.set_zoom(viewport.zoom)
        self.options_panel.set_grid_visible(viewport.grid_visible)
        self.zoom_label.setText(f"Zoom: {viewport.zoom}px")

    def _on_history_changed(self, can_undo: bool, can_redo: bool):
        self.undo_action.setEnabled(can_undo)
        self.redo_action.setEnabled(can_redo)

    def _show_status_message(self, message: str, timeout: int):
        """Show status bar message"""
        self.status_bar.showMessage(message, timeout)

    def _show_error(self, message: str):
        """Show error dialog"""
        QMessageBox.critical(self, "Error", message)

    def keyPressEvent(self, event: QKeyEvent):
        """Route keyboard shortcuts through the controller"""
        modifiers = event.modifiers()
        handled = self.controller.handle_key(
            key_name(event),
            ctrl=bool(modifiers & Qt.KeyboardModifier.ControlModifier),
            meta=bool(modifiers & Qt.KeyboardModifier.MetaModifier),
            shift=bool(modifiers & Qt.KeyboardModifier.ShiftModifier),
        )
        if handled:
            event.accept()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event):
        self.controller.close()
        super().closeEvent(event)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="kwaxel-editor", description="32x32 pixel art editor")
    parser.add_argument("image", nargs="?", help="image to import on start-up")
    parser.add_argument("--settings", help="JSON settings file")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    if args.debug:
        set_debug_mode(True)

    app = QApplication(sys.argv[:1])
    editor = KwaxelEditorWindow(load_settings(args.settings))
    editor.show()

    if args.image:
        debug_log("MAIN", f"Importing {args.image}")
        editor.controller.import_file(args.image)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
