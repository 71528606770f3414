"""Unit tests for digit zone geometry."""

import pytest

from rotary.core.geometry import Rect, Zone, compute_bounds, triangle_points, triangle_size


class TestComputeBounds:
    """Tests for partitioning a digit into three stacked zones."""

    @pytest.mark.parametrize("height", [0, 1, 2, 3, 4, 5, 59, 60, 61, 62, 100])
    def test_zones_tile_full_height(self, height):
        """Zones are contiguous and cover [0, height) exactly."""
        bounds = compute_bounds(40, height)
        band = height // 3

        assert bounds.increment.y == 0
        assert bounds.increment.height == band
        assert bounds.value.y == bounds.increment.bottom
        assert bounds.value.height == band
        assert bounds.decrement.y == bounds.value.bottom
        assert bounds.decrement.height == height - 2 * band
        assert bounds.decrement.bottom == height

    def test_default_digit_size(self):
        """A 40x60 digit has three 20px bands."""
        bounds = compute_bounds(40, 60)
        assert bounds.increment == Rect(0, 0, 40, 20)
        assert bounds.value == Rect(0, 20, 40, 20)
        assert bounds.decrement == Rect(0, 40, 40, 20)

    def test_remainder_goes_to_decrement_zone(self):
        """The bottom band absorbs the rounding remainder."""
        bounds = compute_bounds(40, 62)
        assert bounds.increment.height == 20
        assert bounds.value.height == 20
        assert bounds.decrement.height == 22

    def test_zones_span_full_width(self):
        bounds = compute_bounds(37, 60)
        for rect in (bounds.increment, bounds.value, bounds.decrement):
            assert rect.x == 0
            assert rect.width == 37

    def test_negative_size_clamped_to_zero(self):
        """Negative sizes produce empty zones instead of raising."""
        bounds = compute_bounds(-10, -30)
        for rect in (bounds.increment, bounds.value, bounds.decrement):
            assert rect.width == 0
            assert rect.height == 0
            assert rect.is_empty


class TestHitTesting:
    """Tests for mapping points to zones."""

    def test_each_zone_hit(self):
        bounds = compute_bounds(40, 60)
        assert bounds.zone_at(20, 5) is Zone.INCREMENT
        assert bounds.zone_at(20, 30) is Zone.VALUE
        assert bounds.zone_at(20, 55) is Zone.DECREMENT

    def test_zone_edges_are_half_open(self):
        """A boundary row belongs to the zone below it."""
        bounds = compute_bounds(40, 60)
        assert bounds.zone_at(0, 19) is Zone.INCREMENT
        assert bounds.zone_at(0, 20) is Zone.VALUE
        assert bounds.zone_at(0, 40) is Zone.DECREMENT
        assert bounds.zone_at(39, 59) is Zone.DECREMENT

    def test_outside_points_miss(self):
        bounds = compute_bounds(40, 60)
        assert bounds.zone_at(-1, 10) is None
        assert bounds.zone_at(40, 10) is None
        assert bounds.zone_at(10, 60) is None

    def test_empty_zone_contains_nothing(self):
        bounds = compute_bounds(0, 0)
        assert bounds.zone_at(0, 0) is None

    def test_rect_for(self):
        bounds = compute_bounds(40, 60)
        assert bounds.rect_for(Zone.VALUE) == bounds.value


class TestTriangles:
    """Tests for arrow triangle vertices."""

    def test_size_is_half_smaller_dimension(self):
        assert triangle_size(Rect(0, 0, 40, 20)) == 10
        assert triangle_size(Rect(0, 0, 8, 30)) == 4

    def test_up_triangle_centred(self):
        points = triangle_points(Rect(0, 0, 40, 20), point_up=True)
        assert points == [(20, 5), (15, 15), (25, 15)]

    def test_down_triangle_centred(self):
        points = triangle_points(Rect(0, 40, 40, 20), point_up=False)
        assert points == [(20, 55), (15, 45), (25, 45)]

    @pytest.mark.parametrize("rect", [Rect(0, 0, 0, 0), Rect(0, 0, 40, 0), Rect(0, 0, 1, 1)])
    def test_degenerate_zone_draws_nothing(self, rect):
        assert triangle_points(rect, point_up=True) == []
