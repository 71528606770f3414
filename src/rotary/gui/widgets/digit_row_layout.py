"""
Digit Row Layout

Places digits left to right in insertion order at their size hints and
starts a new row when the next digit would cross the right edge.
"""

from PyQt6 import QtCore, QtWidgets


class DigitRowLayout(QtWidgets.QLayout):
    """Wrapping left-to-right layout for fixed-size digits."""

    def __init__(self, parent=None, spacing: int = 6):
        super().__init__(parent)
        self._items: list[QtWidgets.QLayoutItem] = []
        self._gap = spacing

    # --- QLayout item protocol ---

    def addItem(self, item):
        self._items.append(item)

    def count(self):
        return len(self._items)

    def itemAt(self, index):
        return self._items[index] if 0 <= index < len(self._items) else None

    def takeAt(self, index):
        return self._items.pop(index) if 0 <= index < len(self._items) else None

    def spacing(self):
        return self._gap

    def setSpacing(self, spacing):
        self._gap = spacing
        self.invalidate()

    # --- Sizing ---

    def hasHeightForWidth(self):
        return True

    def heightForWidth(self, width):
        return self._arrange(QtCore.QRect(0, 0, width, 0), apply=False)

    def setGeometry(self, rect):
        super().setGeometry(rect)
        self._arrange(rect, apply=True)

    def sizeHint(self):
        """Preferred size: every digit on a single row."""
        margins = self.contentsMargins()
        hints = [item.sizeHint() for item in self._items]
        width = sum(h.width() for h in hints) + self._gap * max(0, len(hints) - 1)
        height = max((h.height() for h in hints), default=0)
        return QtCore.QSize(
            width + margins.left() + margins.right(),
            height + margins.top() + margins.bottom(),
        )

    def minimumSize(self):
        """Smallest size that still fits the widest single digit."""
        margins = self.contentsMargins()
        size = QtCore.QSize()
        for item in self._items:
            size = size.expandedTo(item.minimumSize())
        return size.grownBy(margins)

    def _arrange(self, rect: QtCore.QRect, apply: bool) -> int:
        """Position items inside rect; returns the total height used."""
        margins = self.contentsMargins()
        area = rect.marginsRemoved(margins)
        left, top = area.x(), area.y()
        x, y, row_height = left, top, 0

        for item in self._items:
            hint = item.sizeHint()
            starts_row = x == left
            if not starts_row and x + hint.width() > area.x() + area.width():
                x, y = left, y + row_height + self._gap
                row_height = 0

            if apply:
                item.setGeometry(QtCore.QRect(QtCore.QPoint(x, y), hint))

            x += hint.width() + self._gap
            row_height = max(row_height, hint.height())

        return (y + row_height) - rect.y() + margins.bottom()
