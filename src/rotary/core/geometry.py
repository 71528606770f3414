"""
Zone geometry for a single digit.

A digit is split into three horizontal bands stacked top to bottom:
increment zone, value zone and decrement zone. The bottom band absorbs the
rounding remainder so the three bands tile the full height exactly.
"""

from dataclasses import dataclass
from enum import Enum


class Zone(Enum):
    """Interactive region of a digit."""

    INCREMENT = "increment"
    VALUE = "value"
    DECREMENT = "decrement"


@dataclass(frozen=True)
class Rect:
    """Integer rectangle with half-open hit testing."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, px: float, py: float) -> bool:
        """Return True if (px, py) lies inside [x, right) x [y, bottom)."""
        return self.x <= px < self.right and self.y <= py < self.bottom


@dataclass(frozen=True)
class ZoneBounds:
    """The three stacked zones of a digit."""

    increment: Rect
    value: Rect
    decrement: Rect

    def zone_at(self, px: float, py: float) -> Zone | None:
        """Hit-test a point; increment wins over decrement over value."""
        if self.increment.contains(px, py):
            return Zone.INCREMENT
        if self.decrement.contains(px, py):
            return Zone.DECREMENT
        if self.value.contains(px, py):
            return Zone.VALUE
        return None

    def rect_for(self, zone: Zone) -> Rect:
        return {
            Zone.INCREMENT: self.increment,
            Zone.VALUE: self.value,
            Zone.DECREMENT: self.decrement,
        }[zone]


def compute_bounds(width: int, height: int) -> ZoneBounds:
    """
    Partition a width x height digit into its three zones.

    Args:
        width: Digit width in pixels (negative values are clamped to 0)
        height: Digit height in pixels (negative values are clamped to 0)

    Returns:
        ZoneBounds whose heights are h//3, h//3 and h - 2*(h//3)
    """
    width = max(0, int(width))
    height = max(0, int(height))
    band = height // 3

    return ZoneBounds(
        increment=Rect(0, 0, width, band),
        value=Rect(0, band, width, band),
        decrement=Rect(0, 2 * band, width, height - 2 * band),
    )


def triangle_size(rect: Rect) -> int:
    """Triangle edge length for a zone: half the smaller zone dimension."""
    if rect.is_empty:
        return 0
    return min(rect.width, rect.height) // 2


def triangle_points(rect: Rect, point_up: bool) -> list[tuple[int, int]]:
    """
    Vertices of an arrow triangle centred in a zone.

    Returns an empty list when the zone is too small to draw anything.
    """
    size = triangle_size(rect)
    if size <= 0:
        return []

    half = size // 2
    center_x = rect.x + rect.width // 2
    center_y = rect.y + rect.height // 2

    if point_up:
        return [
            (center_x, center_y - half),
            (center_x - half, center_y + half),
            (center_x + half, center_y + half),
        ]
    return [
        (center_x, center_y + half),
        (center_x - half, center_y - half),
        (center_x + half, center_y - half),
    ]
