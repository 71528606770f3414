"""
Rotary - interactive odometer-style row of independently spinnable digits.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

try:
    __version__ = version("rotary")
except PackageNotFoundError:
    __version__ = "unknown"

# Project paths (src/rotary/__init__.py -> parents[2] -> project root)
PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = PROJECT_ROOT / "data"

from rotary.core import DigitSequence, DigitState, EditState, Zone, compute_bounds

__all__ = [
    "PROJECT_ROOT",
    "DATA_DIR",
    "DigitSequence",
    "DigitState",
    "EditState",
    "Zone",
    "compute_bounds",
]
