"""
Digit Sequence Widget

Qt host for a DigitSequence of DigitWidgets. Places new digits at the right
end of a wrapping row, detaches removed ones, and re-emits sequence state
as signals for the window chrome.
"""

import logging

from PyQt6 import QtCore, QtWidgets

from rotary.core.digit_sequence import DigitSequence
from rotary.gui.config.display_config import DisplayConfig

from .digit_row_layout import DigitRowLayout
from .digit_widget import DigitWidget

logger = logging.getLogger(__name__)


class DigitSequenceWidget(QtWidgets.QWidget):
    """
    Row of digits with add/remove/toggle commands.

    Usage:
        row = DigitSequenceWidget(config)
        row.can_remove_changed.connect(remove_button.setEnabled)
        row.add_digit()
        row.toggle_input()
        row.values()  # [0, 0]
    """

    digit_count_changed = QtCore.pyqtSignal(int)
    can_remove_changed = QtCore.pyqtSignal(bool)
    input_enabled_changed = QtCore.pyqtSignal(bool)
    # Emitted with display_text() whenever any digit value or the count changes
    digits_changed = QtCore.pyqtSignal(str)

    def __init__(self, config: DisplayConfig | None = None, parent=None):
        super().__init__(parent)
        self.config = config or DisplayConfig()

        self._layout = DigitRowLayout(self, spacing=2 * self.config.digit_spacing)
        margin = self.config.digit_spacing
        self._layout.setContentsMargins(margin, margin, margin, margin)

        self._sequence: DigitSequence[DigitWidget] = DigitSequence(
            factory=self._create_digit,
            input_enabled=self.config.input_enabled,
            initial_digits=self.config.initial_digits,
        )
        logger.info(f"Digit row created with {len(self._sequence)} digit(s)")

    @property
    def sequence(self) -> DigitSequence[DigitWidget]:
        return self._sequence

    @property
    def input_enabled(self) -> bool:
        return self._sequence.input_enabled

    def digits(self) -> tuple[DigitWidget, ...]:
        return self._sequence.digits

    def count(self) -> int:
        return len(self._sequence)

    def values(self) -> list[int]:
        """Digit values, left to right."""
        return [digit.value for digit in self._sequence]

    def display_text(self) -> str:
        return "".join(str(value) for value in self.values())

    # --- Commands ---

    def add_digit(self) -> DigitWidget:
        could_remove = self._sequence.can_remove()
        digit = self._sequence.add_digit()
        self._emit_count_changed(could_remove)
        return digit

    def remove_digit(self) -> bool:
        """Remove the rightmost digit. Returns False when only one is left."""
        could_remove = self._sequence.can_remove()
        digit = self._sequence.remove_digit()
        if digit is None:
            return False

        self._layout.removeWidget(digit)
        self._emit_count_changed(could_remove)
        return True

    def toggle_input(self) -> bool:
        enabled = self._sequence.toggle_input()
        self.input_enabled_changed.emit(enabled)
        return enabled

    def can_remove(self) -> bool:
        return self._sequence.can_remove()

    def teardown(self) -> None:
        """Release every digit; the row accepts no further commands."""
        if self._sequence.closed:
            return
        digits = self._sequence.digits
        self._sequence.teardown()
        for digit in digits:
            self._layout.removeWidget(digit)

    # --- Internals ---

    def _create_digit(self) -> DigitWidget:
        digit = DigitWidget(self.config, self)
        digit.value_changed.connect(self._on_digit_value_changed)
        self._layout.addWidget(digit)
        return digit

    def _emit_count_changed(self, could_remove: bool) -> None:
        self.digit_count_changed.emit(len(self._sequence))
        if self._sequence.can_remove() != could_remove:
            self.can_remove_changed.emit(self._sequence.can_remove())
        self.digits_changed.emit(self.display_text())
        self.updateGeometry()

    def _on_digit_value_changed(self, _value: int) -> None:
        self.digits_changed.emit(self.display_text())
