"""Exception hierarchy for the digit display core."""


class RotaryError(Exception):
    """Base class for all Rotary errors."""


class InvalidDigitError(RotaryError, ValueError):
    """Raised when a digit value outside [0, 9] is assigned directly."""

    def __init__(self, value):
        super().__init__(f"Digit value must be in [0, 9], got {value!r}")
        self.value = value


class SequenceClosedError(RotaryError, RuntimeError):
    """Raised when a command is issued to a sequence after teardown."""


class ConfigError(RotaryError):
    """Raised when a display configuration file cannot be loaded."""
