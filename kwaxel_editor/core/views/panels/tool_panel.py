"""
Tool selection panel for the Kwaxel editor
Provides UI for selecting drawing tools and brush size
"""

# Third-party imports
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from ...kwaxel_constants import (
    BRUSH_SIZES,
    DEFAULT_BRUSH_SIZE,
    DEFAULT_TOOL,
    TOOL_ERASER,
    TOOL_EYEDROPPER,
    TOOL_FILL,
    TOOL_PENCIL,
)

# Button id -> (tool name, label with shortcut)
TOOL_BUTTONS = {
    0: (TOOL_PENCIL, "Pencil (B)"),
    1: (TOOL_ERASER, "Eraser (E)"),
    2: (TOOL_FILL, "Fill (G)"),
    3: (TOOL_EYEDROPPER, "Eyedropper (I)"),
}


class ToolPanel(QWidget):
    """Panel for tool selection (pencil, eraser, fill, eyedropper)"""

    # Signals
    toolChanged = pyqtSignal(str)  # Emits tool name when changed
    brushSizeChanged = pyqtSignal(int)  # Emits brush size when changed

    def __init__(self, parent=None):
        super().__init__(parent)
        self.tool_buttons: dict[str, QRadioButton] = {}
        self.init_ui()

    def init_ui(self):
        """Initialize the tool panel UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # Tool group box
        tool_group = QGroupBox("Tools")
        tool_layout = QVBoxLayout()

        self.tool_group = QButtonGroup(self)
        for button_id, (tool_name, label) in TOOL_BUTTONS.items():
            button = QRadioButton(label)
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            self.tool_group.addButton(button, button_id)
            tool_layout.addWidget(button)
            self.tool_buttons[tool_name] = button
        self.tool_buttons[DEFAULT_TOOL].setChecked(True)
        tool_group.setLayout(tool_layout)

        self.tool_group.idClicked.connect(self._on_tool_clicked)
        layout.addWidget(tool_group)

        # Brush size group box
        brush_group = QGroupBox("Brush Size")
        brush_layout = QHBoxLayout()

        self.brush_size_label = QLabel("Size:")
        self.brush_size_combo = QComboBox()
        self.brush_size_combo.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        for size in BRUSH_SIZES:
            self.brush_size_combo.addItem(f"{size} x {size}", size)
        self.brush_size_combo.setCurrentIndex(BRUSH_SIZES.index(DEFAULT_BRUSH_SIZE))
        self.brush_size_combo.setToolTip("Brush size in cells (pencil and eraser)")
        self.brush_size_combo.currentIndexChanged.connect(self._on_brush_size_changed)

        brush_layout.addWidget(self.brush_size_label)
        brush_layout.addWidget(self.brush_size_combo)
        brush_group.setLayout(brush_layout)
        layout.addWidget(brush_group)

    def _on_tool_clicked(self, button_id: int):
        self.toolChanged.emit(TOOL_BUTTONS[button_id][0])

    def _on_brush_size_changed(self, index: int):
        size = self.brush_size_combo.itemData(index)
        if size is not None:
            self.brushSizeChanged.emit(size)

    def get_current_tool(self) -> str:
        """Get the currently selected tool name"""
        checked_id = self.tool_group.checkedId()
        return TOOL_BUTTONS.get(checked_id, (DEFAULT_TOOL, ""))[0]

    def set_tool(self, tool_name: str):
        """Reflect the current tool without re-emitting"""
        button = self.tool_buttons.get(tool_name)
        if button is not None:
            button.setChecked(True)

    def get_brush_size(self) -> int:
        return self.brush_size_combo.currentData()

    def set_brush_size(self, size: int):
        """Reflect the brush size without re-emitting"""
        index = self.brush_size_combo.findData(size)
        if index >= 0:
            self.brush_size_combo.blockSignals(True)
            self.brush_size_combo.setCurrentIndex(index)
            self.brush_size_combo.blockSignals(False)
