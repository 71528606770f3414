"""
Utilities package for Rotary.
"""

from rotary.utils.logger_central import configure_file_logging, get_logger, set_level, setup_logger

__all__ = ["configure_file_logging", "get_logger", "set_level", "setup_logger"]
