"""
Qt configuration for pytest in headless environments.
Provides shared fixtures for Kwaxel editor tests.
"""

import os
import sys

import pytest

# Detect if we're in a headless environment
IS_HEADLESS = (
    not os.environ.get("DISPLAY")
    or os.environ.get("QT_QPA_PLATFORM") == "offscreen"
    or os.environ.get("CI")
    or (sys.platform == "linux" and "microsoft" in os.uname().release.lower())
)

if IS_HEADLESS:
    # Must happen before the first QApplication is created
    os.environ["QT_QPA_PLATFORM"] = "offscreen"
    os.environ["QT_LOGGING_RULES"] = "*.debug=false"


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "gui: mark test as requiring a QApplication")


@pytest.fixture
def blank_buffer():
    """Transparent 32x32 buffer"""
    from kwaxel_editor.core.kwaxel_models import PixelBuffer

    return PixelBuffer.blank()


@pytest.fixture
def editor_settings():
    """Settings that start from a blank canvas"""
    from kwaxel_editor.core.kwaxel_settings import EditorSettings

    return EditorSettings(load_default_asset=False)


@pytest.fixture
def controller(qapp, editor_settings):
    """Controller on a blank canvas, closed after the test"""
    from kwaxel_editor.core.kwaxel_controller import KwaxelController

    controller = KwaxelController(editor_settings)
    yield controller
    controller.close()


@pytest.fixture
def png_bytes():
    """Build PNG bytes from an (h, w, 4) uint8 RGBA array"""
    import io

    import numpy as np
    from PIL import Image

    def _encode(samples):
        image = Image.fromarray(np.asarray(samples, dtype=np.uint8))
        output = io.BytesIO()
        image.save(output, format="PNG")
        return output.getvalue()

    return _encode
