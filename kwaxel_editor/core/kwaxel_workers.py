"""
Worker threads for async image decoding in the Kwaxel editor.

Decoding an imported file is the only operation that leaves the GUI thread.
Every result is tagged with the import token it was started for, so the
controller can drop completions that a newer import has superseded.
"""

# Standard library imports
from typing import Optional

# Third-party imports
from PyQt6.QtCore import QObject, QThread, pyqtSignal

from .kwaxel_exceptions import ImageFormatError, format_error_message
from .kwaxel_import_export import decode_image
from .kwaxel_utils import debug_exception, debug_log


class BaseWorker(QThread):
    """Base worker class for async operations.

    Signals:
        progress: Emitted with the import token, a percentage (0-100) and a message
        failed: Emitted with the import token and an error message
    """

    progress = pyqtSignal(int, int, str)  # Token, percentage 0-100, message
    failed = pyqtSignal(int, str)  # Token, error message

    def __init__(self, token: int, parent: Optional[QObject] = None):
        """Initialize the base worker.

        Args:
            token: Import token the result belongs to
            parent: Parent QObject for proper cleanup
        """
        super().__init__(parent)
        self.token = token
        self._is_cancelled = False

    def cancel(self) -> None:
        """Cancel the operation; no further signals are emitted."""
        self._is_cancelled = True

    def is_cancelled(self) -> bool:
        return self._is_cancelled

    def emit_progress(self, value: int, message: str = "") -> None:
        """Emit progress signal if not cancelled."""
        if not self._is_cancelled:
            self.progress.emit(self.token, value, message)

    def emit_error(self, message: str) -> None:
        """Emit failure signal if not cancelled."""
        if not self._is_cancelled:
            self.failed.emit(self.token, message)


class ImageDecodeWorker(BaseWorker):
    """Worker decoding raw image bytes into RGBA samples.

    Signals:
        result: Emitted with the import token and a DecodedImage
    """

    result = pyqtSignal(int, object)  # Token, DecodedImage

    def __init__(self, token: int, data: bytes, parent: Optional[QObject] = None):
        super().__init__(token, parent)
        self.data = data

    def run(self) -> None:
        """Decode the image in background thread."""
        try:
            debug_log("WORKER", f"Decoding {len(self.data)} bytes for import {self.token}", "DEBUG")
            self.emit_progress(0, "Decoding image...")
            decoded = decode_image(self.data)
            if self.is_cancelled():
                debug_log("WORKER", f"Import {self.token} cancelled", "DEBUG")
                return

            self.emit_progress(100, "Decoding complete!")
            self.result.emit(self.token, decoded)
        except ImageFormatError as e:
            debug_log("WORKER", f"Decode failed: {e}", "ERROR")
            self.emit_error(format_error_message("import image", e))
        except Exception as e:
            debug_exception("WORKER", e)
            self.emit_error(format_error_message("import image", e))
        finally:
            # Drop the payload; the worker object may outlive the import
            self.data = b""
