"""
Pydantic schema for the digit display configuration.

DisplayConfig: Digit geometry, font, chrome sizes and start-up state.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rotary.constants import (
    BUTTON_HEIGHT,
    BUTTON_WIDTH,
    DEFAULT_INITIAL_DIGITS,
    DEFAULT_WINDOW_SIZE,
    DIGIT_FONT_FAMILY,
    DIGIT_FONT_POINT_SIZE,
    DIGIT_FONT_SCALE,
    DIGIT_HEIGHT,
    DIGIT_SPACING,
    DIGIT_WIDTH,
)
from rotary.core.errors import ConfigError

logger = logging.getLogger(__name__)


class DisplayConfig(BaseModel):
    """
    Display configuration with validation.

    Values are read once at start-up; changing them does not resize digits
    that already exist.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True, str_strip_whitespace=True)

    digit_width: int = Field(default=DIGIT_WIDTH, gt=0, description="Digit width in pixels")
    digit_height: int = Field(default=DIGIT_HEIGHT, gt=0, description="Digit height in pixels")
    digit_spacing: int = Field(default=DIGIT_SPACING, ge=0, description="Margin around each digit")
    initial_digits: int = Field(default=DEFAULT_INITIAL_DIGITS, ge=1, description="Digits shown at start-up")
    input_enabled: bool = Field(default=False, description="Start with keyboard entry enabled")

    font_family: str = Field(default=DIGIT_FONT_FAMILY, min_length=1)
    font_point_size: float = Field(default=DIGIT_FONT_POINT_SIZE, gt=0)
    font_scale: float = Field(default=DIGIT_FONT_SCALE, gt=0, description="Rendered size over nominal size")

    button_width: int = Field(default=BUTTON_WIDTH, gt=0)
    button_height: int = Field(default=BUTTON_HEIGHT, gt=0)
    window_width: int = Field(default=DEFAULT_WINDOW_SIZE[0], gt=0)
    window_height: int = Field(default=DEFAULT_WINDOW_SIZE[1], gt=0)

    @field_validator("font_family")
    @classmethod
    def validate_font_family(cls, v: str) -> str:
        """Ensure font family is not just whitespace."""
        if not v.strip():
            raise ValueError("Font family cannot be empty or whitespace")
        return v

    @property
    def rendered_point_size(self) -> float:
        return self.font_point_size * self.font_scale


def load_display_config(file_path: str | Path) -> DisplayConfig:
    """
    Load display configuration from a JSON file.

    Args:
        file_path: Path to configuration JSON file

    Returns:
        Validated DisplayConfig; defaults when the file does not exist

    Raises:
        ConfigError: File is unreadable, not JSON, or fails validation
    """
    path = Path(file_path)
    if not path.exists():
        logger.warning(f"Config file not found, using defaults: {path}")
        return DisplayConfig()

    try:
        with open(path) as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    try:
        config = DisplayConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid display configuration in {path}: {e}") from e

    logger.info(f"Loaded display configuration from {path}")
    return config


def save_display_config(config: DisplayConfig, file_path: str | Path) -> Path:
    """Write configuration as JSON, creating parent directories."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.model_dump(), f, indent=2)
    logger.info(f"Saved display configuration to {path}")
    return path
