"""
Color panel for the Kwaxel editor
Shows the drawing color and the fixed swatch list
"""

# Third-party imports
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QColorDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...kwaxel_constants import DEFAULT_COLOR, SWATCH_BUTTON_SIZE, SWATCH_COLORS

SWATCH_COLUMNS = 3


class ColorPanel(QWidget):
    """Panel for the current color, a hex entry and swatches"""

    # Signals
    colorSelected = pyqtSignal(str)  # Emits color text (#rrggbb or #aarrggbb)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.current_color = DEFAULT_COLOR
        self.swatch_buttons: list[QPushButton] = []
        self.init_ui()

    def init_ui(self):
        """Initialize the color panel UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        color_group = QGroupBox("Color")
        color_layout = QVBoxLayout()

        # Current color preview and hex entry
        current_layout = QHBoxLayout()
        self.color_button = QPushButton()
        self.color_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.color_button.setFixedSize(SWATCH_BUTTON_SIZE * 2, SWATCH_BUTTON_SIZE)
        self.color_button.setToolTip("Choose color...")
        self.color_button.clicked.connect(self._choose_color)

        self.hex_edit = QLineEdit()
        self.hex_edit.setMaxLength(9)
        self.hex_edit.setPlaceholderText("#rrggbb")
        self.hex_edit.editingFinished.connect(self._on_hex_entered)

        current_layout.addWidget(self.color_button)
        current_layout.addWidget(self.hex_edit)
        color_layout.addLayout(current_layout)

        # Swatches
        swatch_layout = QGridLayout()
        swatch_layout.setSpacing(2)
        for i, color in enumerate(SWATCH_COLORS):
            btn = QPushButton()
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.setFixedSize(SWATCH_BUTTON_SIZE, SWATCH_BUTTON_SIZE)
            btn.setToolTip(color)
            btn.setStyleSheet(f"background-color: {color}; border: 1px solid #888;")
            btn.clicked.connect(lambda checked, c=color: self.colorSelected.emit(c))
            swatch_layout.addWidget(btn, i // SWATCH_COLUMNS, i % SWATCH_COLUMNS)
            self.swatch_buttons.append(btn)
        color_layout.addLayout(swatch_layout)

        color_group.setLayout(color_layout)
        layout.addWidget(color_group)

        self.set_color(self.current_color)

    def _choose_color(self):
        """Open the color dialog seeded with the current color"""
        color = QColorDialog.getColor(QColor(self.current_color), self, "Choose Color")
        if color.isValid():
            self.colorSelected.emit(color.name())

    def _on_hex_entered(self):
        text = self.hex_edit.text().strip()
        if text and text != self.current_color:
            self.colorSelected.emit(text)
        # Shows the normalized color, or the previous one when nothing changed
        self.hex_edit.setText(self.current_color)

    def set_color(self, color: str):
        """Reflect the controller's normalized color"""
        self.current_color = color
        self.hex_edit.setText(color)
        # QColor reads #aarrggbb the same way the editor stores it
        preview = QColor(color).name(QColor.NameFormat.HexRgb)
        self.color_button.setStyleSheet(f"background-color: {preview}; border: 1px solid #444;")
