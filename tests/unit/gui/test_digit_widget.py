"""Unit tests for the Qt digit widget adapter."""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

pytestmark = pytest.mark.gui

from PyQt6 import QtCore, QtTest

from rotary.core.digit_state import EditState
from rotary.gui.app import RotaryWindow
from rotary.gui.config.display_config import DisplayConfig
from rotary.gui.widgets.digit_widget import DigitPaintResources, DigitWidget
from tests.test_helpers import SignalRecorder, lose_focus, press, type_key

Key = QtCore.Qt.Key

# Zone centres for the default 40x60 digit
INCREMENT = (20, 10)
VALUE = (20, 30)
DECREMENT = (20, 50)


@pytest.fixture
def digit(qapp, config):
    widget = DigitWidget(config)
    yield widget
    widget.release()


@pytest.fixture
def editing_digit(digit):
    digit.on_input_enabled_changed(True)
    press(digit, *VALUE)
    assert digit.edit_state is EditState.EDITING
    return digit


class TestGeometry:
    def test_fixed_size_from_config(self, digit):
        assert (digit.width(), digit.height()) == (40, 60)

    def test_bounds_synced_on_construction(self, digit):
        assert digit.state.bounds.value.y == 20
        assert digit.state.bounds.decrement.height == 20

    def test_custom_size(self, qapp):
        widget = DigitWidget(DisplayConfig(digit_width=30, digit_height=91))
        try:
            assert widget.state.bounds.increment.height == 30
            assert widget.state.bounds.decrement.height == 31
        finally:
            widget.release()


class TestPointer:
    def test_increment_zone(self, digit):
        recorder = SignalRecorder(digit.value_changed)
        for _ in range(3):
            press(digit, *INCREMENT)
        assert digit.value == 3
        assert recorder.calls == [1, 2, 3]

    def test_decrement_zone_wraps(self, digit):
        press(digit, *DECREMENT)
        assert digit.value == 9

    def test_value_zone_ignored_when_disabled(self, digit):
        press(digit, *VALUE)
        assert digit.edit_state is EditState.IDLE

    def test_value_zone_starts_edit(self, digit):
        recorder = SignalRecorder(digit.editing_changed)
        digit.on_input_enabled_changed(True)
        press(digit, *VALUE)
        assert digit.edit_state is EditState.EDITING
        assert recorder.calls == [True]


class TestKeyboard:
    def test_digit_key_commits(self, editing_digit):
        type_key(editing_digit, Key.Key_7, "7")
        assert editing_digit.value == 7
        assert editing_digit.edit_state is EditState.IDLE

    @pytest.mark.parametrize("key,text", [(Key.Key_Return, "\r"), (Key.Key_Enter, "\r"), (Key.Key_Escape, "\x1b")])
    def test_enter_escape_cancel(self, editing_digit, key, text):
        type_key(editing_digit, key, text)
        assert editing_digit.value == 0
        assert editing_digit.edit_state is EditState.IDLE

    def test_escape_without_text(self, editing_digit):
        """Special keys are recognised by key code, not by event text."""
        type_key(editing_digit, Key.Key_Escape)
        assert editing_digit.edit_state is EditState.IDLE

    def test_letter_ignored(self, editing_digit):
        type_key(editing_digit, Key.Key_A, "a")
        assert editing_digit.edit_state is EditState.EDITING
        assert editing_digit.value == 0

    def test_keys_ignored_when_idle(self, digit):
        digit.on_input_enabled_changed(True)
        type_key(digit, Key.Key_5, "5")
        assert digit.value == 0


class TestCancellation:
    def test_focus_out_cancels_edit(self, editing_digit):
        lose_focus(editing_digit)
        assert editing_digit.edit_state is EditState.IDLE

    def test_input_flag_change_cancels_edit(self, editing_digit):
        editing_digit.on_input_enabled_changed(False)
        assert editing_digit.edit_state is EditState.IDLE
        assert editing_digit.input_enabled is False


class TestFocusHandoff:
    """Clicks inside a shown window move keyboard focus between digits."""

    @pytest.fixture
    def shown_window(self, qapp):
        window = RotaryWindow(DisplayConfig(initial_digits=2, input_enabled=True))
        window.show()
        assert QtTest.QTest.qWaitForWindowActive(window)
        yield window
        window.close()

    @staticmethod
    def click(widget, x, y):
        QtTest.QTest.mouseClick(
            widget, QtCore.Qt.MouseButton.LeftButton, QtCore.Qt.KeyboardModifier.NoModifier, QtCore.QPoint(x, y)
        )

    def test_click_takes_focus_in_every_zone(self, shown_window):
        a, b = shown_window.digit_row.digits()
        for zone, target in ((INCREMENT, a), (DECREMENT, b), (VALUE, a)):
            self.click(target, *zone)
            assert target.hasFocus()

    def test_click_on_sibling_ends_edit(self, shown_window):
        a, b = shown_window.digit_row.digits()
        self.click(a, *VALUE)
        assert a.hasFocus()
        assert a.edit_state is EditState.EDITING

        self.click(b, *INCREMENT)
        assert b.hasFocus()
        assert a.edit_state is EditState.IDLE
        assert b.value == 1


class TestPaintingAndRelease:
    def test_paints_in_both_states(self, digit):
        """Rendering idle and editing digits produces a full-size image."""
        assert not digit.grab().isNull()
        digit.on_input_enabled_changed(True)
        press(digit, *VALUE)
        pixmap = digit.grab()
        assert (pixmap.width(), pixmap.height()) == (40, 60)

    def test_release_is_idempotent(self, qapp, config):
        widget = DigitWidget(config)
        widget.release()
        widget.release()
        assert widget.released
        assert widget._resources.released

    def test_resources_release_once(self, qapp, config):
        resources = DigitPaintResources(config)
        assert resources.release() is True
        assert resources.release() is False
        assert resources.font is None

    def test_font_scaled(self, qapp):
        resources = DigitPaintResources(DisplayConfig(font_point_size=10, font_scale=1.3))
        assert resources.font.pointSizeF() == pytest.approx(13.0)
        assert resources.font.bold()
