"""
Digit Widget

Single spinnable digit painted in three stacked zones: an up arrow, the
value, and a down arrow. Qt events are translated into DigitState
transitions; the widget repaints whenever a transition reports a change.
"""

import logging

from PyQt6 import QtCore, QtGui, QtWidgets

from rotary.constants import KEY_ESCAPE
from rotary.core.digit_state import DigitState, EditState
from rotary.core.geometry import Rect, ZoneBounds, triangle_points
from rotary.gui.config.display_config import DisplayConfig
from rotary.gui.styles.design_tokens import BG_DIGIT, DIGIT_ARROW, DIGIT_EDIT_TEXT, DIGIT_TEXT

logger = logging.getLogger(__name__)

_ENTER_KEYS = (QtCore.Qt.Key.Key_Return, QtCore.Qt.Key.Key_Enter)


def _to_qrect(rect: Rect) -> QtCore.QRectF:
    return QtCore.QRectF(rect.x, rect.y, rect.width, rect.height)


def _triangle_path(rect: Rect, point_up: bool) -> QtGui.QPainterPath:
    path = QtGui.QPainterPath()
    points = triangle_points(rect, point_up)
    if points:
        path.addPolygon(QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in points]))
        path.closeSubpath()
    return path


class DigitPaintResources:
    """Font, brushes and arrow paths owned by one digit.

    Acquired when the digit is built and released exactly once through
    release(); painting with released resources is a no-op.
    """

    def __init__(self, config: DisplayConfig):
        self.font = QtGui.QFont(config.font_family)
        self.font.setPointSizeF(config.rendered_point_size)
        self.font.setBold(True)
        self.font.setStyleHint(QtGui.QFont.StyleHint.SansSerif)

        self.background = QtGui.QBrush(QtGui.QColor(BG_DIGIT))
        self.arrow_brush = QtGui.QBrush(QtGui.QColor(DIGIT_ARROW))
        self.text_pen = QtGui.QPen(QtGui.QColor(DIGIT_TEXT))
        self.edit_pen = QtGui.QPen(QtGui.QColor(DIGIT_EDIT_TEXT))

        self.up_path = QtGui.QPainterPath()
        self.down_path = QtGui.QPainterPath()
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def rebuild_arrows(self, bounds: ZoneBounds) -> None:
        """Recompute cached triangle paths for new zone bounds."""
        if self._released:
            return
        self.up_path = _triangle_path(bounds.increment, point_up=True)
        self.down_path = _triangle_path(bounds.decrement, point_up=False)

    def release(self) -> bool:
        """Drop all drawing resources. Returns False if already released."""
        if self._released:
            logger.warning("Digit paint resources released more than once")
            return False
        self._released = True
        self.font = None
        self.background = None
        self.arrow_brush = None
        self.text_pen = None
        self.edit_pen = None
        self.up_path = None
        self.down_path = None
        return True


class DigitWidget(QtWidgets.QWidget):
    """
    Interactive 0-9 digit.

    Interaction:
        - Click the top third to increment, the bottom third to decrement
          (always allowed, wraps 9 -> 0 and 0 -> 9)
        - Click the middle third while input is enabled to start editing;
          the next digit key commits, Enter/Escape cancels
        - Losing focus or a change of the input flag cancels editing

    Usage:
        digit = DigitWidget(config)
        digit.value_changed.connect(self.on_digit_changed)
        digit.on_input_enabled_changed(True)
    """

    # Emitted with the new value whenever the committed digit changes
    value_changed = QtCore.pyqtSignal(int)
    # Emitted with True on entering edit mode, False on leaving it
    editing_changed = QtCore.pyqtSignal(bool)

    def __init__(self, config: DisplayConfig | None = None, parent=None):
        """
        Initialize digit.

        Args:
            config: Display configuration (defaults when None)
            parent: Parent widget
        """
        super().__init__(parent)
        self.config = config or DisplayConfig()
        self.state = DigitState(width=self.config.digit_width, height=self.config.digit_height)
        self._resources = DigitPaintResources(self.config)
        self._released = False

        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self.setFixedSize(self.config.digit_width, self.config.digit_height)
        self.setCursor(QtCore.Qt.CursorShape.PointingHandCursor)

        # Resize events are deferred until shown, so sync geometry now
        self._sync_bounds()

    @property
    def value(self) -> int:
        return self.state.value

    @property
    def edit_state(self) -> EditState:
        return self.state.edit_state

    @property
    def input_enabled(self) -> bool:
        return self.state.input_enabled

    @property
    def released(self) -> bool:
        return self._released

    # --- State machine entry points ---

    def increment_value(self) -> None:
        self._apply(self.state.increment_value)

    def decrement_value(self) -> None:
        self._apply(self.state.decrement_value)

    def on_input_enabled_changed(self, enabled: bool) -> None:
        """Push a new input-enabled flag; an actual change cancels editing."""
        self._apply(self.state.set_input_enabled, enabled)

    def on_focus_lost(self) -> None:
        self._apply(self.state.focus_lost)

    def release(self) -> None:
        """Release drawing resources and schedule deletion. Runs once."""
        if self._released:
            return
        self._released = True
        self._resources.release()
        self.hide()
        self.deleteLater()

    def _apply(self, transition, *args) -> bool:
        old_value = self.state.value
        was_editing = self.state.is_editing

        changed = transition(*args)
        if changed:
            self.update()

        if self.state.value != old_value:
            self.value_changed.emit(self.state.value)
        if self.state.is_editing != was_editing:
            self.editing_changed.emit(self.state.is_editing)
        return changed

    def _sync_bounds(self) -> None:
        self.state.resize(self.width(), self.height())
        self._resources.rebuild_arrows(self.state.bounds)

    # --- Qt event handlers ---

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._sync_bounds()
        self.update()

    def mousePressEvent(self, event) -> None:
        """Take focus, then dispatch the press to the zone under the pointer."""
        self.setFocus(QtCore.Qt.FocusReason.MouseFocusReason)
        pos = event.position()
        self._apply(self.state.pointer_down, pos.x(), pos.y())
        event.accept()

    def keyPressEvent(self, event) -> None:
        key = event.key()
        if key in _ENTER_KEYS:
            char = "\r"
        elif key == QtCore.Qt.Key.Key_Escape:
            char = KEY_ESCAPE
        else:
            char = event.text()

        if self.state.is_editing and self.state.input_enabled:
            # Swallow every key while editing, handled or not
            self._apply(self.state.key_press, char)
            event.accept()
            return
        super().keyPressEvent(event)

    def focusOutEvent(self, event) -> None:
        super().focusOutEvent(event)
        self.on_focus_lost()

    def paintEvent(self, event) -> None:
        """Full redraw: background, arrows, then the centred text."""
        resources = self._resources
        if resources.released:
            return

        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)

        painter.fillRect(self.rect(), resources.background)

        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.fillPath(resources.up_path, resources.arrow_brush)
        painter.fillPath(resources.down_path, resources.arrow_brush)

        value_rect = self.state.bounds.value
        if not value_rect.is_empty:
            painter.setFont(resources.font)
            painter.setPen(resources.edit_pen if self.state.is_editing else resources.text_pen)
            painter.drawText(
                _to_qrect(value_rect), QtCore.Qt.AlignmentFlag.AlignCenter, self.state.display_text
            )

        painter.end()
