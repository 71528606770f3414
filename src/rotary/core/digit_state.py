"""
Digit State Machine

Toolkit-independent model of a single spinnable digit. Holds the value,
the Idle/Editing state, the one-character edit buffer, the input-enabled
flag and the zone geometry. The Qt widget forwards host events to the named
transitions here and repaints whenever a transition reports a change.
"""

import logging
import string
from enum import Enum

from rotary.constants import DIGIT_BASE, KEY_ENTER, KEY_ESCAPE
from rotary.core.errors import InvalidDigitError
from rotary.core.geometry import Zone, ZoneBounds, compute_bounds

logger = logging.getLogger(__name__)


class EditState(Enum):
    """Edit state of a digit."""

    IDLE = "idle"
    EDITING = "editing"


class DigitState:
    """State machine for one digit.

    Every transition returns True when the displayed state changed, so the
    caller knows a repaint is needed.

    Example:
        state = DigitState()
        state.resize(40, 60)
        state.pointer_down(20, 5)   # increment zone -> value 1
        state.set_input_enabled(True)
        state.pointer_down(20, 30)  # value zone -> EDITING
        state.key_press("7")        # value 7, back to IDLE
    """

    def __init__(self, value: int = 0, input_enabled: bool = False, width: int = 0, height: int = 0):
        self._value = 0
        self.value = value
        self.edit_state = EditState.IDLE
        self.edit_buffer = ""
        self.input_enabled = bool(input_enabled)
        self.released = False
        self.bounds: ZoneBounds = compute_bounds(width, height)

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < DIGIT_BASE:
            raise InvalidDigitError(value)
        self._value = value

    @property
    def is_editing(self) -> bool:
        return self.edit_state is EditState.EDITING

    @property
    def display_text(self) -> str:
        """Text shown in the value zone: the live buffer while editing."""
        if self.is_editing:
            return self.edit_buffer
        return str(self._value)

    def resize(self, width: int, height: int) -> bool:
        """Recompute zone bounds for a new widget size."""
        bounds = compute_bounds(width, height)
        changed = bounds != self.bounds
        self.bounds = bounds
        return changed

    def increment_value(self) -> bool:
        self._value = (self._value + 1) % DIGIT_BASE
        return True

    def decrement_value(self) -> bool:
        self._value = (self._value - 1 + DIGIT_BASE) % DIGIT_BASE
        return True

    def pointer_down(self, x: float, y: float) -> bool:
        """Handle a pointer press at widget-local coordinates."""
        zone = self.bounds.zone_at(x, y)

        if zone is Zone.INCREMENT:
            return self.increment_value()
        if zone is Zone.DECREMENT:
            return self.decrement_value()
        if zone is Zone.VALUE and self.input_enabled:
            self._begin_edit()
            return True
        return False

    def key_press(self, char: str) -> bool:
        """
        Handle one typed character while editing.

        A digit commits immediately and leaves edit mode. Enter or Escape
        leaves edit mode without touching the value. Anything else is ignored.
        """
        if not self.is_editing or not self.input_enabled:
            return False

        if len(char) == 1 and char in string.digits:
            self.edit_buffer = char
            self._value = int(char)
            self._end_edit()
            return True

        if char in KEY_ENTER or char == KEY_ESCAPE:
            self._end_edit()
            return True

        return False

    def set_input_enabled(self, enabled: bool) -> bool:
        """Apply a new input-enabled flag; any actual change cancels editing."""
        enabled = bool(enabled)
        if enabled == self.input_enabled:
            return False
        self.input_enabled = enabled
        self._end_edit()
        return True

    def focus_lost(self) -> bool:
        self._end_edit()
        return True

    # Sequence hooks, so a bare DigitState can be owned by a DigitSequence
    def on_input_enabled_changed(self, enabled: bool) -> None:
        self.set_input_enabled(enabled)

    def release(self) -> None:
        self.released = True

    def _begin_edit(self) -> None:
        self.edit_buffer = ""
        self.edit_state = EditState.EDITING
        logger.debug(f"Digit entered edit mode (value={self._value})")

    def _end_edit(self) -> None:
        self.edit_state = EditState.IDLE
        self.edit_buffer = ""

    def __repr__(self) -> str:
        return (
            f"DigitState(value={self._value}, state={self.edit_state.value}, "
            f"input_enabled={self.input_enabled})"
        )
