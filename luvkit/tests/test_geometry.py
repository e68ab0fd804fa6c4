"""Tests for the gamut boundary solver."""

import math

import numpy as np
import pytest

from luvkit import (
    LUV,
    Line,
    get_bounds,
    luv_to_xyz,
    max_chroma_for_lh,
    max_safe_chroma_for_l,
    rgb_to_lch,
    xyz_to_linear_rgb,
)
from luvkit import arrays
from luvkit.constants import MAX_CHROMA_SENTINEL
from luvkit.geometry import distance_from_pole, intersect_line_line, ray_length_until_intersect


class TestLineHelpers:
    """Small line/ray helpers."""

    def test_intersect_line_line(self):
        """v = u and v = -u + 2 cross at u = 1."""
        assert intersect_line_line(Line(1.0, 0.0), Line(-1.0, 2.0)) == pytest.approx(1.0)

    def test_intersect_parallel_lines_is_not_an_error(self):
        """Parallel lines give an infinite crossing instead of raising."""
        assert math.isinf(intersect_line_line(Line(2.0, 0.0), Line(2.0, 1.0)))

    def test_distance_from_pole(self):
        assert distance_from_pole(3.0, 4.0) == pytest.approx(5.0)

    def test_ray_length_forward(self):
        """Ray straight up (90 deg) hits v = 5 after 5 units."""
        assert ray_length_until_intersect(math.pi / 2, Line(0.0, 5.0)) == pytest.approx(5.0)

    def test_ray_length_behind_pole_is_negative(self):
        """A line below the pole is behind an upward ray."""
        assert ray_length_until_intersect(math.pi / 2, Line(0.0, -5.0)) < 0


class TestGetBounds:
    """Gamut hexagon edges."""

    def test_six_lines(self):
        bounds = get_bounds(50.0)
        assert len(bounds) == 6
        assert all(isinstance(line, Line) for line in bounds)

    @pytest.mark.parametrize("l", [5.0, 30.0, 53.0, 75.0, 95.0])
    def test_lines_are_channel_clip_planes(self, l):
        """Points on line 2*channel + t have that linear channel equal to t."""
        for index, line in enumerate(get_bounds(l)):
            channel, t = divmod(index, 2)
            for u in (-20.0, 0.0, 20.0):
                v = line.slope * u + line.intercept
                rgb = xyz_to_linear_rgb(luv_to_xyz(LUV(l, u, v)))
                assert rgb[channel] == pytest.approx(t, abs=1e-7)

    def test_zero_lightness_does_not_raise(self):
        """l = 0 hits a zero denominator; result is NaN rather than an exception."""
        bounds = get_bounds(0.0)
        assert len(bounds) == 6
        assert any(math.isnan(line.slope) for line in bounds)


class TestMaxChroma:
    """Max chroma per lightness (HPLuv) and per lightness/hue (HSLuv)."""

    def test_red_is_on_the_boundary(self):
        """Pure red is fully saturated, so its chroma is the boundary chroma."""
        l, c, h = rgb_to_lch(1.0, 0.0, 0.0)
        assert max_chroma_for_lh(l, h) == pytest.approx(c, rel=1e-9)

    def test_safe_chroma_is_inscribed_circle(self):
        """The hue-independent bound equals the minimum over all hue rays."""
        hues = np.linspace(0, 360, 3600, endpoint=False)
        for l in (10.0, 40.0, 60.0, 90.0):
            ray_min = min(max_chroma_for_lh(l, h) for h in hues)
            assert max_safe_chroma_for_l(l) == pytest.approx(ray_min, rel=1e-3)

    def test_safe_chroma_never_exceeds_hue_chroma(self):
        """The inscribed circle lies inside the hexagon for every hue."""
        for l in np.linspace(1, 99, 15):
            safe = max_safe_chroma_for_l(l)
            for h in range(0, 360, 10):
                assert safe <= max_chroma_for_lh(l, h) + 1e-9

    def test_positive_in_open_range(self):
        for l in (0.5, 25.0, 50.0, 75.0, 99.5):
            assert max_safe_chroma_for_l(l) > 0
            assert max_chroma_for_lh(l, 200.0) > 0

    def test_black_has_no_chroma(self):
        """At l = 0 the gamut shrinks to the pole."""
        assert max_safe_chroma_for_l(0.0) == 0.0
        assert max_chroma_for_lh(0.0, 45.0) == 0.0

    def test_chroma_shrinks_towards_white(self):
        """Near white the hexagon collapses."""
        assert max_safe_chroma_for_l(99.9) < max_safe_chroma_for_l(90.0)

    def test_huge_lightness_falls_back_to_sentinel(self):
        """Overflowing edges become NaN lines, so no edge is ever selected."""
        assert max_chroma_for_lh(1e200, 10.0) == MAX_CHROMA_SENTINEL
        assert max_safe_chroma_for_l(1e200) == MAX_CHROMA_SENTINEL
        assert all(math.isnan(line.slope) for line in get_bounds(1e200))

    def test_infinite_hue_is_nan_ray(self):
        assert math.isnan(ray_length_until_intersect(math.inf, Line(0.0, 5.0)))
        assert max_chroma_for_lh(50.0, math.inf) == MAX_CHROMA_SENTINEL

    def test_edge_terms_shared_with_arrays(self):
        """Array bounds come from the same edge equations."""
        L = np.array([0.5, 8.0, 42.0, 99.0])
        for index, (slope, intercept) in enumerate(arrays.get_bounds(L)):
            for i, l in enumerate(L):
                expected = get_bounds(float(l))[index]
                assert slope[i] == pytest.approx(expected.slope, rel=1e-12)
                assert intercept[i] == pytest.approx(expected.intercept, rel=1e-12)
