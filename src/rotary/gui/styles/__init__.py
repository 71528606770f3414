"""Rotary GUI Styles - widget styling system with builder methods."""

from .design_tokens import (
    ACCENT,
    BG_DIGIT,
    BG_MAIN,
    BG_PANEL,
    DIGIT_ARROW,
    DIGIT_EDIT_TEXT,
    DIGIT_TEXT,
    TEXT_LABEL,
    TEXT_MAIN,
)
from .widget_styles import LAYOUT, WidgetStyles, apply_app_styles

__all__ = [
    "LAYOUT",
    "WidgetStyles",
    "apply_app_styles",
    "ACCENT",
    "BG_DIGIT",
    "BG_MAIN",
    "BG_PANEL",
    "DIGIT_ARROW",
    "DIGIT_EDIT_TEXT",
    "DIGIT_TEXT",
    "TEXT_LABEL",
    "TEXT_MAIN",
]
