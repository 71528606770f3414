#!/usr/bin/env python3
"""Design tokens for the Rotary visual language. Modify here, not in widget_styles.py."""

# Neutral Colors
BG_MAIN = "#151515"  # Main window background (dark base)
BG_PANEL = "#1a1a1a"  # Panel backgrounds
BG_ELEVATED = "#2c2c2c"  # Buttons
BG_DIGIT = "#202020"  # Digit face background

TEXT_MAIN = "#ffffff"  # Primary text
TEXT_LABEL = "#cccccc"  # Secondary text (labels, captions)

BORDER = "#4a4a4a"  # Standard borders and dividers

# Disabled state colors
BG_DISABLED = "#1a1a1a"
TEXT_DISABLED_MUTED = "#444444"
BORDER_DISABLED = "#252525"

# Brand Colors
ACCENT = "#2a8be8"  # Primary brand color (edit cursor, hover)

# Button hover states
BUTTON_HOVER_SUBTLE = "rgba(255, 255, 255, 0.10)"
BUTTON_HOVER_BG = "#2e2e2e"

# Digit face colors
DIGIT_ARROW = "#cccccc"  # Increment/decrement triangles
DIGIT_TEXT = "#ffffff"  # Committed digit
DIGIT_EDIT_TEXT = ACCENT  # Buffer shown while editing

SPACING = {
    # Base spacing units (8pt grid)
    "md": 8,  # DEFAULT
    # Semantic aliases
    "window_padding": 10,  # Main panel padding
}

PADDING = {
    "sm": 4,
    "lg": 9,
}

RADIUS = {
    "md": 4,
}

FONT_SIZE = {
    "md": 11,  # DEFAULT
}
