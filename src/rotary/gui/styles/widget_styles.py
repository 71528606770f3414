#!/usr/bin/env python3
"""Widget styling system with builder methods and design token integration."""

from PyQt6 import QtGui

from .design_tokens import (
    ACCENT,
    BG_DISABLED,
    BG_ELEVATED,
    BG_MAIN,
    BG_PANEL,
    BORDER,
    BORDER_DISABLED,
    BUTTON_HOVER_BG,
    BUTTON_HOVER_SUBTLE,
    FONT_SIZE,
    PADDING,
    RADIUS,
    SPACING,
    TEXT_DISABLED_MUTED,
    TEXT_LABEL,
    TEXT_MAIN,
)

LAYOUT = {
    "spacing": SPACING["md"],
    "padding_sm": PADDING["sm"],
    "padding_lg": PADDING["lg"],
    "margin": SPACING["md"],
    "window_padding": SPACING["window_padding"],
    "radius": RADIUS["md"],
}


class WidgetStyles:
    """Widget styles using builder methods and design tokens."""

    @classmethod
    def button(
        cls,
        padding: str | None = None,
        min_width: int | None = None,
        text_color: str | None = None,
    ) -> str:
        """Primary push button.

        Args:
            padding: CSS padding override
            min_width: Minimum width in pixels
            text_color: Text color override
        """
        final_padding = padding or f"{LAYOUT['padding_sm']}px {LAYOUT['padding_lg']}px"
        final_min_width = min_width or 70
        color = text_color or TEXT_LABEL

        return f"""
            QPushButton {{
                background-color: {BG_ELEVATED};
                color: {color};
                border: 1px solid {BUTTON_HOVER_SUBTLE};
                padding: {final_padding};
                border-radius: {LAYOUT["radius"]}px;
                font-size: {FONT_SIZE["md"]}px;
                min-width: {final_min_width}px;
            }}
            QPushButton:hover {{
                background-color: {BUTTON_HOVER_BG};
                color: {TEXT_MAIN};
                border-color: {BUTTON_HOVER_SUBTLE};
            }}
            QPushButton:pressed {{ background-color: {BG_PANEL}; }}
            QPushButton:disabled {{
                background-color: {BG_DISABLED};
                color: {TEXT_DISABLED_MUTED};
                border: 1px solid {BORDER_DISABLED};
            }}
        """

    @classmethod
    def status_bar(cls) -> str:
        return f"QStatusBar {{ background: {BG_PANEL}; color: {TEXT_LABEL}; border-top: 1px solid {BORDER}; }}"


def apply_app_styles(app) -> None:
    """Apply global styles to the entire application."""
    global_style = f"""
        QMainWindow {{ background-color: {BG_MAIN}; color: {TEXT_LABEL}; }}
        QWidget#main_panel {{ background-color: {BG_MAIN}; }}
        {WidgetStyles.button()}
        {WidgetStyles.status_bar()}
    """
    app.setStyleSheet(global_style)

    palette = app.palette()
    palette.setColor(QtGui.QPalette.ColorRole.Highlight, QtGui.QColor(ACCENT))
    palette.setColor(QtGui.QPalette.ColorRole.HighlightedText, QtGui.QColor("#ffffff"))
    app.setPalette(palette)
