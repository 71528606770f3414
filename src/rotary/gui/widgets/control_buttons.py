"""
Control Buttons Widget

Add Digit / Remove Digit / Enable Input buttons in three equal columns.
"""

from PyQt6 import QtCore, QtWidgets

from rotary.constants import (
    BUTTON_ADD_TEXT,
    BUTTON_DISABLE_INPUT_TEXT,
    BUTTON_ENABLE_INPUT_TEXT,
    BUTTON_REMOVE_TEXT,
)
from rotary.gui.config.display_config import DisplayConfig
from rotary.gui.styles.widget_styles import LAYOUT, WidgetStyles


class ControlButtonsWidget(QtWidgets.QWidget):
    """Button row driving a digit sequence. Holds no sequence state itself."""

    add_requested = QtCore.pyqtSignal()
    remove_requested = QtCore.pyqtSignal()
    toggle_input_requested = QtCore.pyqtSignal()

    def __init__(self, config: DisplayConfig | None = None, parent=None):
        super().__init__(parent)
        self.config = config or DisplayConfig()
        self.setup_ui()

    def setup_ui(self):
        """Set up the user interface."""
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(0, LAYOUT["margin"], 0, 0)
        layout.setSpacing(LAYOUT["spacing"])

        self.add_button = self._create_button(BUTTON_ADD_TEXT)
        self.add_button.clicked.connect(self.add_requested)

        self.remove_button = self._create_button(BUTTON_REMOVE_TEXT)
        self.remove_button.setEnabled(False)
        self.remove_button.clicked.connect(self.remove_requested)

        self.toggle_input_button = self._create_button(BUTTON_ENABLE_INPUT_TEXT)
        self.toggle_input_button.clicked.connect(self.toggle_input_requested)

        for button in (self.add_button, self.remove_button, self.toggle_input_button):
            layout.addWidget(button, 1, QtCore.Qt.AlignmentFlag.AlignCenter)

    def _create_button(self, text: str) -> QtWidgets.QPushButton:
        button = QtWidgets.QPushButton(text)
        button.setFixedSize(self.config.button_width, self.config.button_height)
        button.setStyleSheet(WidgetStyles.button(padding="0px", min_width=self.config.button_width))
        button.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        return button

    def set_can_remove(self, can_remove: bool):
        self.remove_button.setEnabled(can_remove)

    def set_input_enabled(self, enabled: bool):
        """Label the toggle with the action it will perform next."""
        self.toggle_input_button.setText(BUTTON_DISABLE_INPUT_TEXT if enabled else BUTTON_ENABLE_INPUT_TEXT)
