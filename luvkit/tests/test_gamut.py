"""Tests for gamut checking and mapping of raw LCh."""

import logging

import numpy as np
import pytest

from luvkit import arrays
from luvkit.errors import GamutMethodError
from luvkit.gamut import (
    gamut_clip,
    gamut_compress,
    gamut_map_to_rgb,
    is_in_gamut,
    lch_in_gamut,
)


class TestGamutCheck:
    """Test gamut checking."""

    def test_rgb_cube(self):
        rgb = np.array([[0.0, 0.5, 1.0], [1.2, 0.5, 0.5], [0.5, -0.1, 0.5]])
        np.testing.assert_array_equal(is_in_gamut(rgb), [True, False, False])

    def test_tolerance(self):
        rgb = np.array([[1.00005, 0.5, 0.5]])
        assert is_in_gamut(rgb).all()
        assert not is_in_gamut(rgb, tolerance=0.0).any()

    def test_in_gamut_grays(self):
        """Neutral grays should always be in gamut."""
        L = np.linspace(0, 100, 11)
        assert lch_in_gamut(L, np.zeros(11), np.zeros(11)).all()

    def test_hsluv_colors_are_in_gamut(self, hsl_grid):
        L, C, H = arrays.hsluv_to_lch(hsl_grid[:, 0], hsl_grid[:, 1], hsl_grid[:, 2])
        assert lch_in_gamut(L, C, H).all()

    def test_out_of_gamut_high_chroma(self):
        assert not lch_in_gamut(np.array([50.0]), np.array([200.0]), np.array([0.0])).any()


class TestGamutCompress:
    """Test gamut compression functions."""

    def test_chroma_method_preserves_l_and_h(self):
        L = np.array([30.0, 60.0, 85.0])
        C = np.array([300.0, 300.0, 300.0])
        H = np.array([0.0, 120.0, 240.0])

        L2, C2, H2 = gamut_compress(L, C, H, method='chroma')

        np.testing.assert_allclose(L2, L)
        np.testing.assert_allclose(H2, H)
        assert (C2 < C).all()
        np.testing.assert_allclose(C2, arrays.max_chroma_for_lh(L, H))
        assert lch_in_gamut(L2, C2, H2).all()

    def test_in_gamut_untouched(self):
        L = np.array([50.0])
        C = np.array([10.0])
        H = np.array([200.0])
        _, C2, _ = gamut_compress(L, C, H)
        np.testing.assert_allclose(C2, C)

    def test_scalar_broadcast(self):
        """Scalar L and C broadcast against an array of hues."""
        H = np.arange(0, 360, 45.0)
        L2, C2, H2 = gamut_compress(55.0, 500.0, H)
        assert L2.shape == C2.shape == H2.shape == H.shape

    def test_clip_method(self):
        """Clip method should produce valid RGB."""
        L2, C2, H2 = gamut_compress(np.array([70.0]), np.array([200.0]), np.array([30.0]), method='clip')
        assert lch_in_gamut(L2, C2, H2).all()

    def test_unknown_method(self):
        with pytest.raises(GamutMethodError, match="Unknown gamut method"):
            gamut_compress(np.array([50.0]), np.array([10.0]), np.array([0.0]), method='squash')

    def test_debug_log(self, caplog):
        caplog.set_level(logging.DEBUG, logger="luvkit.gamut")
        gamut_compress(np.array([50.0, 50.0]), np.array([10.0, 400.0]), np.array([0.0, 0.0]))
        assert "Compressed chroma of 1 of 2 colors" in caplog.text


class TestGamutMap:
    """LCh -> in-gamut sRGB."""

    def test_clip_stays_valid(self):
        rgb = gamut_clip(np.array([50.0, 90.0, 10.0]), np.array([250.0, 150.0, 150.0]), np.array([0, 120, 240]))
        assert (rgb >= 0).all()
        assert (rgb <= 1).all()

    def test_compress_preserves_lightness_and_hue(self):
        L = np.array([70.0])
        C = np.array([400.0])
        H = np.array([30.0])

        rgb = gamut_map_to_rgb(L, C, H, method='compress')
        assert (rgb >= 0).all()
        assert (rgb <= 1).all()

        lch = arrays.rgb_to_lch(rgb)
        np.testing.assert_allclose(lch[..., 0], L, atol=1e-6)
        np.testing.assert_allclose(lch[..., 2], H, atol=1e-6)

    def test_2d_arrays(self):
        """2D arrays (images) should work."""
        shape = (16, 16)
        L = np.full(shape, 65.0)
        C = np.full(shape, 120.0)
        H = np.linspace(0, 360, shape[1])[None, :] * np.ones((shape[0], 1))

        rgb = gamut_map_to_rgb(L, C, H)

        assert rgb.shape == (16, 16, 3)
        assert (rgb >= 0).all()
        assert (rgb <= 1).all()

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            gamut_map_to_rgb(np.array([50.0]), np.array([10.0]), np.array([0.0]), method='nope')
