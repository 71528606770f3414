"""
Rotary Constants

"""

from rotary import DATA_DIR, __version__

# --- Version & Identity ---
VERSION = __version__
APP_NAME = "Rotary"
APPLICATION_TITLE = APP_NAME

# --- Digit Geometry (pixels) ---
DIGIT_WIDTH = 40
DIGIT_HEIGHT = 60
DIGIT_SPACING = 5
DIGIT_BASE = 10  # Values wrap modulo this

# --- Digit Text ---
DIGIT_FONT_FAMILY = "Arial"
DIGIT_FONT_POINT_SIZE = 12.0
DIGIT_FONT_SCALE = 1.3  # Rendered size over nominal size

# --- Chrome ---
BUTTON_WIDTH = 100
BUTTON_HEIGHT = 30
DEFAULT_WINDOW_SIZE = (400, 180)
DEFAULT_INITIAL_DIGITS = 1

BUTTON_ADD_TEXT = "Add Digit"
BUTTON_REMOVE_TEXT = "Remove Digit"
BUTTON_ENABLE_INPUT_TEXT = "Enable Input"
BUTTON_DISABLE_INPUT_TEXT = "Disable Input"

# --- Keys ---
KEY_ENTER = ("\r", "\n")
KEY_ESCAPE = "\x1b"

# --- Data Storage ---
CONFIG_DIR = DATA_DIR / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "display.json"
LOG_DIR = DATA_DIR / "logger"
