"""Tests for eased value interpolation."""

import pytest

from ezing import UnknownEasingError, interpolate, lerp, quad_in


class TestLerp:
    def test_lerp_endpoints(self):
        assert lerp(10.0, 20.0, 0.0) == 10.0
        assert lerp(10.0, 20.0, 1.0) == 20.0

    def test_lerp_midpoint(self):
        assert lerp(-4.0, 4.0, 0.5) == 0.0


class TestInterpolate:
    def test_linear_by_default(self):
        """Tween from 0 to 100 halfway should be 50."""
        assert interpolate(0.0, 100.0, 0.5) == 50.0

    def test_easing_by_name(self):
        """Quad-in at half progress covers a quarter of the range."""
        assert interpolate(0.0, 100.0, 0.5, "quad_in") == 25.0

    def test_easing_by_callable(self):
        assert interpolate(0.0, 100.0, 0.5, quad_in) == 25.0

    def test_full_progress_lands_on_end(self):
        """Overshooting easings still finish exactly on the end value."""
        assert interpolate(3.0, 7.3, 1.0, "elastic_out") == 7.3

    def test_progress_is_clamped(self):
        assert interpolate(0.0, 10.0, -0.5, "quad_out") == 0.0
        assert interpolate(0.0, 10.0, 2.0, "quad_out") == 10.0

    def test_descending_range(self):
        assert interpolate(100.0, 0.0, 0.5, "quad_in") == 75.0

    def test_back_overshoots_start(self):
        """Back-in pulls the value below the start before moving on."""
        assert interpolate(0.0, 100.0, 0.3, "back_in") < 0.0

    def test_unknown_easing_raises(self):
        with pytest.raises(UnknownEasingError):
            interpolate(0.0, 1.0, 0.5, "slow_then_fast")
