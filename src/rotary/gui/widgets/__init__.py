"""
UI components and custom widgets for the Rotary GUI.

- digit_widget          - Single painted 0-9 digit
- digit_sequence_widget - Row of digits hosting a DigitSequence
- control_buttons       - Add / Remove / Toggle input buttons
- digit_row_layout      - Left-to-right wrapping layout for digits
"""

from .control_buttons import ControlButtonsWidget
from .digit_row_layout import DigitRowLayout
from .digit_sequence_widget import DigitSequenceWidget
from .digit_widget import DigitPaintResources, DigitWidget

__all__ = [
    "ControlButtonsWidget",
    "DigitPaintResources",
    "DigitRowLayout",
    "DigitSequenceWidget",
    "DigitWidget",
]
