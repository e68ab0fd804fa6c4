"""Public scalar conversions between sRGB and HSLuv / HPLuv.

Each function is a fixed chain of stage conversions:

    HSLuv/HPLuv -> LCh -> LUV -> XYZ -> sRGB
    sRGB -> XYZ -> LUV -> LCh -> HSLuv/HPLuv

Inputs are not clamped or validated. Out-of-range values go through the same
formulas and may come back out of gamut.
"""

from .adapters import hpluv_to_lch, hsluv_to_lch, lch_to_hpluv, lch_to_hsluv
from .transforms import lch_to_luv, luv_to_lch, luv_to_xyz, rgb_to_xyz, xyz_to_luv, xyz_to_rgb
from .types import HPLuv, HSLuv, LCH, RGB


def lch_to_rgb(l: float, c: float, h: float) -> RGB:
    """LCh(uv) -> sRGB."""
    return xyz_to_rgb(luv_to_xyz(lch_to_luv(LCH(l, c, h))))


def rgb_to_lch(r: float, g: float, b: float) -> LCH:
    """sRGB -> LCh(uv)."""
    return luv_to_lch(xyz_to_luv(rgb_to_xyz(RGB(r, g, b))))


def hsluv_to_rgb(h: float, s: float, l: float) -> RGB:
    """HSLuv -> sRGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 100]
        l: Lightness [0, 100]

    Returns:
        RGB with channels in [0, 1] for in-range input
    """
    return lch_to_rgb(*hsluv_to_lch(HSLuv(h, s, l)))


def hpluv_to_rgb(h: float, s: float, l: float) -> RGB:
    """HPLuv -> sRGB. Same conventions as hsluv_to_rgb."""
    return lch_to_rgb(*hpluv_to_lch(HPLuv(h, s, l)))


def rgb_to_hsluv(r: float, g: float, b: float) -> HSLuv:
    """sRGB -> HSLuv.

    Args:
        r, g, b: Gamma-encoded sRGB channels in [0, 1]

    Returns:
        HSLuv(h, s, l) with h in degrees, s and l in [0, 100]
    """
    return lch_to_hsluv(rgb_to_lch(r, g, b))


def rgb_to_hpluv(r: float, g: float, b: float) -> HPLuv:
    """sRGB -> HPLuv. Saturation can exceed 100 for colors outside the HPLuv circle."""
    return lch_to_hpluv(rgb_to_lch(r, g, b))
