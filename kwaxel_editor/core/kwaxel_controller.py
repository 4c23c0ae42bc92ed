#!/usr/bin/env python3
"""
Controller for the Kwaxel editor
Turns pointer and keyboard input into tool applications, owns the
painting-session lifecycle and coordinates history, import and export
"""

# Standard library imports
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union

# Third-party imports
from PyQt6.QtCore import QObject, pyqtSignal

from .kwaxel_color import ColorValue, format_hex
from .kwaxel_constants import (
    KEY_REDO,
    KEY_UNDO,
    MAX_IMPORT_BYTES,
    STATUS_MESSAGE_TIMEOUT,
    TOOL_SHORTCUTS,
    ZOOM_STEP,
)
from .kwaxel_exceptions import KwaxelError, ValidationError, format_error_message
from .kwaxel_history import HistoryManager
from .kwaxel_import_export import (
    DecodedImage,
    encode_png,
    export_filename,
    import_decoded,
    load_default_buffer,
)
from .kwaxel_managers import ToolManager
from .kwaxel_models import PixelBuffer, ViewportState
from .kwaxel_rasterizer import Rasterizer
from .kwaxel_settings import EditorSettings
from .kwaxel_tools import ToolType, apply_tool
from .kwaxel_utils import debug_exception, debug_log
from .kwaxel_workers import ImageDecodeWorker


class PaintState(Enum):
    """Pointer session state"""

    IDLE = auto()
    PAINTING = auto()


class KwaxelController(QObject):
    """Controller coordinating all editor operations

    The current buffer is replaced, never mutated in place: every tool,
    history and import result is a fresh PixelBuffer, so earlier references
    stay valid.
    """

    # Signals
    imageChanged = pyqtSignal()
    colorChanged = pyqtSignal(str)  # normalized color text
    toolChanged = pyqtSignal(str)  # tool name
    brushSizeChanged = pyqtSignal(int)
    viewportChanged = pyqtSignal()
    historyChanged = pyqtSignal(bool, bool)  # can_undo, can_redo
    statusMessage = pyqtSignal(str, int)  # message, timeout
    error = pyqtSignal(str)

    def __init__(
        self,
        settings: Optional[EditorSettings] = None,
        initial_buffer: Optional[PixelBuffer] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)

        self.settings = settings or EditorSettings()

        # Managers
        self.tool_manager = ToolManager(
            self.settings.tool, self.settings.default_color, self.settings.brush_size
        )
        self.history = HistoryManager(self.settings.history_limit)
        self.rasterizer = Rasterizer()
        self.viewport = ViewportState(
            zoom=self.settings.zoom,
            grid_visible=self.settings.grid_visible,
            zoom_min=self.settings.zoom_min,
            zoom_max=self.settings.zoom_max,
        )

        # Session state
        self.state = PaintState.IDLE
        self._session_recorded = False

        # Import state: only the newest token may complete
        self._import_token = 0
        self._workers: list[ImageDecodeWorker] = []
        self._closed = False

        self._buffer = PixelBuffer.blank()
        if initial_buffer is not None:
            self._buffer = initial_buffer.clone()
        elif self.settings.load_default_asset:
            self.load_default()

    # ========== State access ==========

    @property
    def buffer(self) -> PixelBuffer:
        """Current buffer; treat as read-only"""
        return self._buffer

    @property
    def is_painting(self) -> bool:
        return self.state is PaintState.PAINTING

    @property
    def current_color(self) -> str:
        return self.tool_manager.current_color

    def get_current_tool_name(self) -> str:
        return self.tool_manager.current_tool_name

    def get_image_size(self) -> tuple[int, int]:
        return (self._buffer.width, self._buffer.height)

    def _replace_buffer(self, buffer: PixelBuffer) -> None:
        self._buffer = buffer
        self.imageChanged.emit()

    def _emit_history(self) -> None:
        self.historyChanged.emit(self.history.can_undo, self.history.can_redo)

    # ========== Tool selection ==========

    def set_tool(self, tool_name: Union[ToolType, str]) -> None:
        """Set the current drawing tool"""
        if self.tool_manager.set_tool(tool_name):
            debug_log("CONTROLLER", f"Tool changed to: {self.get_current_tool_name()}")
            self.toolChanged.emit(self.get_current_tool_name())

    def set_color(self, color: ColorValue) -> None:
        """Set the current drawing color"""
        previous = self.tool_manager.current_color
        normalized = self.tool_manager.set_color(color)
        if normalized != previous:
            debug_log("CONTROLLER", f"Drawing color set to: {normalized}")
            self.colorChanged.emit(normalized)

    def set_brush_size(self, size: int) -> None:
        """Set the brush size (1, 2 or 4)"""
        if self.tool_manager.set_brush_size(size):
            self.brushSizeChanged.emit(size)

    # ========== Viewport ==========

    def set_zoom(self, zoom: int) -> None:
        if self.viewport.set_zoom(zoom):
            debug_log("CONTROLLER", f"Zoom set to {self.viewport.zoom}", "DEBUG")
            self.viewportChanged.emit()

    def zoom_in(self) -> None:
        self.set_zoom(self.viewport.zoom + ZOOM_STEP)

    def zoom_out(self) -> None:
        self.set_zoom(self.viewport.zoom - ZOOM_STEP)

    def set_grid_visible(self, visible: bool) -> None:
        if self.viewport.grid_visible != bool(visible):
            self.viewport.grid_visible = bool(visible)
            self.viewportChanged.emit()

    def toggle_grid(self) -> None:
        self.set_grid_visible(not self.viewport.grid_visible)

    def set_device_pixel_ratio(self, dpr: float) -> None:
        if self.viewport.set_device_pixel_ratio(dpr):
            debug_log("CONTROLLER", f"Device pixel ratio set to {dpr}", "DEBUG")
            self.viewportChanged.emit()

    # ========== Pointer input ==========

    def cell_at(self, x: float, y: float) -> tuple[int, int]:
        """Grid cell under a logical surface point (clamped to the grid)"""
        return self.rasterizer.cell_at(
            x, y, self.viewport.zoom, self._buffer.width, self._buffer.height
        )

    def pointer_down(self, x: float, y: float) -> None:
        """Start a painting session at a surface point"""
        if self._closed:
            return
        if self.state is PaintState.IDLE:
            self.state = PaintState.PAINTING
            self._session_recorded = False
            debug_log("CONTROLLER", "Painting session started", "DEBUG")
        self._apply_at(*self.cell_at(x, y))

    def pointer_move(self, x: float, y: float) -> None:
        """Continue the current session; ignored while idle"""
        if self.state is not PaintState.PAINTING:
            return
        self._apply_at(*self.cell_at(x, y))

    def pointer_up(self) -> None:
        """End the painting session"""
        if self.state is PaintState.PAINTING:
            debug_log("CONTROLLER", "Painting session ended", "DEBUG")
        self.state = PaintState.IDLE
        self._session_recorded = False

    def pointer_leave(self) -> None:
        """Pointer left the surface; ends the session like pointer_up"""
        self.pointer_up()

    def pick_color_at(self, x: float, y: float) -> None:
        """One-shot eyedropper that leaves the current tool selected"""
        cx, cy = self.cell_at(x, y)
        self._apply_tool(ToolType.EYEDROPPER, cx, cy)

    def _apply_at(self, cx: int, cy: int) -> None:
        tool = self.tool_manager.current_tool
        if tool is not ToolType.EYEDROPPER and not self._session_recorded:
            # One snapshot per session so a drag undoes as one step
            self.history.begin_mutation(self._buffer)
            self._session_recorded = True
            self._emit_history()
        self._apply_tool(tool, cx, cy)

    def _apply_tool(self, tool: ToolType, cx: int, cy: int) -> None:
        result = apply_tool(
            self._buffer,
            tool,
            cx,
            cy,
            self.tool_manager.current_color,
            self.tool_manager.current_brush_size,
        )
        if result.picked_color is not None:
            self.set_color(format_hex(result.picked_color))
        elif result.changed:
            self._replace_buffer(result.buffer)

    # ========== Keyboard input ==========

    def handle_key(
        self, key: str, ctrl: bool = False, meta: bool = False, shift: bool = False
    ) -> bool:
        """Handle a keyboard shortcut

        Returns True if the key was consumed.
        """
        key = (key or "").lower()
        command = ctrl or meta

        if command and key == KEY_UNDO:
            if shift:
                self.redo()
            else:
                self.undo()
            return True
        if command and key == KEY_REDO:
            self.redo()
            return True
        if not command and key in TOOL_SHORTCUTS:
            self.set_tool(TOOL_SHORTCUTS[key])
            return True
        return False

    # ========== Undo/Redo operations ==========

    def undo(self) -> bool:
        """Undo the last session or import"""
        if not self.history.can_undo:
            self.statusMessage.emit("Nothing to undo", 1000)
            return False
        # A drag in progress ends here so its snapshot stays the only one
        self.pointer_up()
        self._replace_buffer(self.history.undo(self._buffer))
        self._emit_history()
        self.statusMessage.emit("Undo", 1000)
        return True

    def redo(self) -> bool:
        """Redo the last undone operation"""
        if not self.history.can_redo:
            self.statusMessage.emit("Nothing to redo", 1000)
            return False
        self.pointer_up()
        self._replace_buffer(self.history.redo(self._buffer))
        self._emit_history()
        self.statusMessage.emit("Redo", 1000)
        return True

    # ========== Import ==========

    def load_default(self) -> bool:
        """Replace the buffer with the bundled default sprite (no history entry)"""
        try:
            buffer = load_default_buffer()
        except (OSError, KwaxelError) as e:
            debug_log("CONTROLLER", f"Failed to load default sprite: {e}", "WARNING")
            return False
        self._replace_buffer(buffer)
        return True

    def begin_import(self) -> int:
        """Start a new import and return its token; older imports become stale"""
        self._import_token += 1
        for worker in self._workers:
            worker.cancel()
        debug_log("CONTROLLER", f"Import {self._import_token} started", "DEBUG")
        return self._import_token

    def _is_current_import(self, token: int) -> bool:
        if self._closed or token != self._import_token:
            debug_log("CONTROLLER", f"Ignoring stale import {token}", "DEBUG")
            return False
        return True

    def complete_import(self, token: int, decoded: DecodedImage) -> bool:
        """Apply a decoded image if token is still the latest import"""
        if not self._is_current_import(token):
            return False

        try:
            buffer = import_decoded(decoded, self._buffer.width, self._buffer.height)
        except KwaxelError as e:
            debug_exception("CONTROLLER", e)
            self.error.emit(format_error_message("import image", e))
            return False

        self.pointer_up()
        self.history.begin_mutation(self._buffer)
        self._replace_buffer(buffer)
        self._emit_history()
        self.statusMessage.emit(
            f"Imported {decoded.width}x{decoded.height} image", STATUS_MESSAGE_TIMEOUT
        )
        debug_log("CONTROLLER", f"Import {token} applied")
        return True

    def fail_import(self, token: int, message: str) -> bool:
        """Report a failed import; buffer and history stay untouched"""
        if not self._is_current_import(token):
            return False
        debug_log("CONTROLLER", f"Import {token} failed: {message}", "ERROR")
        self.error.emit(message)
        return True

    def report_import_progress(self, token: int, value: int, message: str) -> None:
        """Relay decode progress of the latest import to the status bar"""
        if token != self._import_token or self._closed:
            return
        debug_log("CONTROLLER", f"Import {token}: {value}% {message}", "DEBUG")
        if message:
            self.statusMessage.emit(message, STATUS_MESSAGE_TIMEOUT)

    def import_bytes(self, data: bytes) -> int:
        """Decode image bytes in a worker thread and import the result"""
        token = self.begin_import()
        worker = ImageDecodeWorker(token, bytes(data))
        worker.progress.connect(self.report_import_progress)
        worker.result.connect(self.complete_import)
        worker.failed.connect(self.fail_import)
        worker.finished.connect(self._release_finished_workers)
        self._workers.append(worker)
        worker.start()
        return token

    def import_file(self, file_path: Union[str, Path]) -> Optional[int]:
        """Read an image file and import it asynchronously"""
        try:
            path = Path(file_path)
            if path.stat().st_size > MAX_IMPORT_BYTES:
                raise ValidationError(f"File too large: {path.name}")
            data = path.read_bytes()
        except (OSError, ValidationError) as e:
            debug_exception("CONTROLLER", e)
            self.error.emit(format_error_message("import image", e))
            return None

        debug_log("CONTROLLER", f"Importing {path.name} ({len(data)} bytes)")
        return self.import_bytes(data)

    def _release_finished_workers(self) -> None:
        self._workers = [w for w in self._workers if not w.isFinished()]

    # ========== Export ==========

    def export_png(self, multiplier: int) -> tuple[str, bytes]:
        """Encode the current buffer; returns (file name, PNG bytes)"""
        data = encode_png(self._buffer, multiplier)
        name = export_filename(multiplier, self._buffer.width, self._buffer.height)
        return name, data

    def save_export(self, target: Union[str, Path], multiplier: int) -> Optional[Path]:
        """Write a PNG export; a directory target gets the standard file name"""
        try:
            name, data = self.export_png(multiplier)
            path = Path(target)
            if path.is_dir():
                path = path / name
            path.write_bytes(data)
        except (OSError, KwaxelError) as e:
            debug_exception("CONTROLLER", e)
            self.error.emit(format_error_message("export image", e))
            return None

        self.statusMessage.emit(f"Exported {path.name}", STATUS_MESSAGE_TIMEOUT)
        debug_log("CONTROLLER", f"Exported x{multiplier} to {path}")
        return path

    # ========== Lifecycle ==========

    def close(self) -> None:
        """Tear down: pending imports are ignored from now on"""
        self._closed = True
        self._import_token += 1
        self.pointer_up()
        for worker in self._workers:
            worker.cancel()
            worker.wait()
        self._workers.clear()
        debug_log("CONTROLLER", "Controller closed", "DEBUG")
