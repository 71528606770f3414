"""
Toolkit-independent core of the digit display.

- geometry       - Zone partitioning and arrow triangle vertices
- digit_state    - Idle/Editing state machine for one digit
- digit_sequence - Ordered, never-empty collection with a shared input flag
"""

from .digit_sequence import DigitLike, DigitSequence
from .digit_state import DigitState, EditState
from .errors import ConfigError, InvalidDigitError, RotaryError, SequenceClosedError
from .geometry import Rect, Zone, ZoneBounds, compute_bounds, triangle_points, triangle_size

__all__ = [
    "ConfigError",
    "DigitLike",
    "DigitSequence",
    "DigitState",
    "EditState",
    "InvalidDigitError",
    "Rect",
    "RotaryError",
    "SequenceClosedError",
    "Zone",
    "ZoneBounds",
    "compute_bounds",
    "triangle_points",
    "triangle_size",
]
