"""Main window and entry point for the Rotary digit display."""

import argparse
import sys

from pydantic import ValidationError
from PyQt6 import QtWidgets

from rotary.constants import APP_NAME, APPLICATION_TITLE, DEFAULT_CONFIG_PATH, VERSION
from rotary.core.errors import ConfigError
from rotary.gui.config.display_config import DisplayConfig, load_display_config
from rotary.gui.styles.widget_styles import LAYOUT, WidgetStyles, apply_app_styles
from rotary.gui.widgets import ControlButtonsWidget, DigitSequenceWidget
from rotary.utils.logger_central import configure_file_logging, get_logger, parse_level, set_level, setup_logger

logger = get_logger(__name__)


class RotaryWindow(QtWidgets.QMainWindow):
    """Window hosting one digit row above the Add / Remove / Toggle buttons."""

    def __init__(self, config: DisplayConfig | None = None):
        super().__init__()
        self.config = config or DisplayConfig()
        self.setup_ui()
        self._connect_signals()
        self._sync_controls()

        logger.info(f"{APP_NAME} window initialized with {self.digit_row.count()} digit(s)")

    def setup_ui(self):
        self.setWindowTitle(APPLICATION_TITLE)
        self.resize(self.config.window_width, self.config.window_height)
        self._center_on_screen()

        central = QtWidgets.QWidget()
        central.setObjectName("main_panel")
        self.setCentralWidget(central)
        main_layout = QtWidgets.QVBoxLayout(central)
        padding = LAYOUT["window_padding"]
        main_layout.setContentsMargins(padding, padding, padding, padding)
        main_layout.setSpacing(LAYOUT["spacing"])

        self.digit_row = DigitSequenceWidget(self.config)
        main_layout.addWidget(self.digit_row)
        main_layout.addStretch()

        self.controls = ControlButtonsWidget(self.config)
        main_layout.addWidget(self.controls)

        self.statusBar().setStyleSheet(WidgetStyles.status_bar())

    def _center_on_screen(self):
        screen = self.screen()
        if screen is None:
            return
        self.move(screen.availableGeometry().center() - self.rect().center())

    def _connect_signals(self):
        self.controls.add_requested.connect(self.add_digit)
        self.controls.remove_requested.connect(self.remove_digit)
        self.controls.toggle_input_requested.connect(self.toggle_input)

        self.digit_row.can_remove_changed.connect(self.controls.set_can_remove)
        self.digit_row.input_enabled_changed.connect(self.controls.set_input_enabled)
        self.digit_row.digits_changed.connect(self._show_digits)

    def _sync_controls(self):
        self.controls.set_can_remove(self.digit_row.can_remove())
        self.controls.set_input_enabled(self.digit_row.input_enabled)
        self._show_digits(self.digit_row.display_text())

    # --- Command surface ---

    def add_digit(self):
        self.digit_row.add_digit()

    def remove_digit(self):
        self.digit_row.remove_digit()

    def toggle_input(self):
        self.digit_row.toggle_input()

    def _show_digits(self, text: str):
        self.statusBar().showMessage(f"{text}  ({len(text)} digit{'s' if len(text) != 1 else ''})")

    def closeEvent(self, event):
        self.digit_row.teardown()
        logger.info(f"{APP_NAME} window closed")
        event.accept()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rotary", description="Odometer-style row of spinnable digits.")
    parser.add_argument(
        "--config", type=str, default=str(DEFAULT_CONFIG_PATH), help="Path to display config JSON"
    )
    parser.add_argument("--digits", type=int, default=None, help="Number of digits to start with")
    parser.add_argument(
        "--enable-input", action="store_true", help="Start with keyboard entry enabled"
    )
    parser.add_argument("--log-level", type=str, default="info", help="Logging level (debug, info, ...)")
    parser.add_argument("--log-dir", type=str, default=None, help="Also write rotating logs to this directory")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def resolve_config(args: argparse.Namespace) -> DisplayConfig:
    """Load the config file and apply command-line overrides."""
    config = load_display_config(args.config)
    if args.digits is not None:
        config.initial_digits = args.digits
    if args.enable_input:
        config.input_enabled = True
    return config


def configure_logging(log_level: str, log_dir: str | None = None) -> int:
    """Console logging, plus a rotating file when log_dir is given. Returns the level."""
    level = parse_level(log_level)
    setup_logger(APP_NAME, level=level)
    if log_dir:
        configure_file_logging(log_dir=log_dir, level=level)
    # configure_file_logging keeps an existing file setup at its old level
    set_level(level)
    return level


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level, args.log_dir)
    except ValueError as e:
        parser.error(str(e))

    try:
        config = resolve_config(args)
    except (ConfigError, ValidationError) as e:
        parser.error(str(e))

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    apply_app_styles(app)

    window = RotaryWindow(config)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
