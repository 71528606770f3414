"""
Rotary GUI Package

For widgets, import from submodules:
- `from rotary.gui.widgets import DigitWidget, DigitSequenceWidget`
- `from rotary.gui.styles import WidgetStyles`
"""

from . import styles

__all__ = ["styles"]
