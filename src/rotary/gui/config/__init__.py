"""
Rotary GUI Configuration Module

Display configuration schema and JSON persistence helpers.
"""

from .display_config import DisplayConfig, load_display_config, save_display_config

__all__ = [
    "DisplayConfig",
    "load_display_config",
    "save_display_config",
]
