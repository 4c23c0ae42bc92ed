"""
Options panel for the Kwaxel editor
Contains grid and zoom controls
"""

# Third-party imports
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from ...kwaxel_constants import ZOOM_DEFAULT, ZOOM_MAX, ZOOM_MIN


class OptionsPanel(QWidget):
    """Panel for editor options and zoom controls"""

    # Signals
    gridToggled = pyqtSignal(bool)
    zoomChanged = pyqtSignal(int)

    def __init__(self, zoom_min: int = ZOOM_MIN, zoom_max: int = ZOOM_MAX, parent=None):
        super().__init__(parent)
        self.zoom_min = zoom_min
        self.zoom_max = zoom_max
        self.init_ui()

    def init_ui(self):
        """Initialize the options panel UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        options_group = QGroupBox("Options")
        options_layout = QVBoxLayout()

        # Grid checkbox
        self.grid_checkbox = QCheckBox("Show Grid")
        self.grid_checkbox.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.grid_checkbox.setChecked(True)
        self.grid_checkbox.toggled.connect(self.gridToggled.emit)

        # Zoom slider with label
        zoom_slider_layout = QHBoxLayout()
        zoom_slider_layout.addWidget(QLabel("Zoom:"))

        self.zoom_slider = QSlider(Qt.Orientation.Horizontal)
        self.zoom_slider.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.zoom_slider.setRange(self.zoom_min, self.zoom_max)
        self.zoom_slider.setValue(ZOOM_DEFAULT)
        self.zoom_slider.valueChanged.connect(self._on_zoom_changed)

        self.zoom_label = QLabel(f"{ZOOM_DEFAULT}px")
        zoom_slider_layout.addWidget(self.zoom_slider)
        zoom_slider_layout.addWidget(self.zoom_label)

        # Quick zoom buttons
        zoom_buttons_layout = QHBoxLayout()
        for value in (self.zoom_min, ZOOM_DEFAULT, self.zoom_max):
            if not self.zoom_min <= value <= self.zoom_max:
                continue
            btn = QPushButton(f"{value}px")
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.setMaximumWidth(48)
            btn.clicked.connect(lambda checked, v=value: self.zoom_slider.setValue(v))
            zoom_buttons_layout.addWidget(btn)

        options_layout.addWidget(self.grid_checkbox)
        options_layout.addLayout(zoom_slider_layout)
        options_layout.addLayout(zoom_buttons_layout)
        options_group.setLayout(options_layout)
        layout.addWidget(options_group)

    def _on_zoom_changed(self, value: int):
        """Handle zoom slider change"""
        self.zoom_label.setText(f"{value}px")
        self.zoomChanged.emit(value)

    def set_zoom(self, value: int):
        """Reflect the zoom level without re-emitting"""
        self.zoom_slider.blockSignals(True)
        self.zoom_slider.setValue(value)
        self.zoom_slider.blockSignals(False)
        self.zoom_label.setText(f"{self.zoom_slider.value()}px")

    def get_zoom(self) -> int:
        return self.zoom_slider.value()

    def set_grid_visible(self, visible: bool):
        self.grid_checkbox.blockSignals(True)
        self.grid_checkbox.setChecked(visible)
        self.grid_checkbox.blockSignals(False)
