"""HSLuv and HPLuv color conversions.

HSLuv and HPLuv are hue/saturation/lightness models built on CIE LUV. Unlike
HSL, every (h, s, l) with s and l in [0, 100] is a displayable sRGB color,
because saturation is measured against the exact sRGB gamut boundary.

This package provides:
- Scalar conversions: sRGB <-> HSLuv / HPLuv / LCh, plus every pipeline stage
- The gamut boundary solver (max chroma per lightness, or lightness and hue)
- luvkit.arrays: the same pipeline over numpy arrays or torch tensors
- luvkit.gamut: in-gamut checks and chroma compression for raw LCh

Example:
    from luvkit import hsluv_to_rgb, rgb_to_hsluv

    h, s, l = rgb_to_hsluv(1.0, 0.0, 0.0)   # (12.177..., 100.0, 53.237...)
    r, g, b = hsluv_to_rgb(h, 60.0, l)       # desaturated red, same lightness
"""

from .convert import (
    hsluv_to_rgb,
    hpluv_to_rgb,
    rgb_to_hsluv,
    rgb_to_hpluv,
    lch_to_rgb,
    rgb_to_lch,
)

from .adapters import (
    hsluv_to_lch,
    lch_to_hsluv,
    hpluv_to_lch,
    lch_to_hpluv,
)

from .transforms import (
    from_linear,
    to_linear,
    rgb_to_linear_rgb,
    linear_rgb_to_rgb,
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    rgb_to_xyz,
    xyz_to_rgb,
    y_to_l,
    l_to_y,
    xyz_to_luv,
    luv_to_xyz,
    luv_to_lch,
    lch_to_luv,
)

from .geometry import (
    get_bounds,
    max_safe_chroma_for_l,
    max_chroma_for_lh,
)

from .types import RGB, LinearRGB, XYZ, LUV, LCH, HSLuv, HPLuv, Line
from .errors import LuvkitError, ChannelShapeError, GamutMethodError

__version__ = "0.1.0"

__all__ = [
    # High-level API
    'hsluv_to_rgb',
    'hpluv_to_rgb',
    'rgb_to_hsluv',
    'rgb_to_hpluv',
    'lch_to_rgb',
    'rgb_to_lch',
    # HSLuv / HPLuv <-> LCh
    'hsluv_to_lch',
    'lch_to_hsluv',
    'hpluv_to_lch',
    'lch_to_hpluv',
    # Pipeline stages
    'from_linear',
    'to_linear',
    'rgb_to_linear_rgb',
    'linear_rgb_to_rgb',
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'rgb_to_xyz',
    'xyz_to_rgb',
    'y_to_l',
    'l_to_y',
    'xyz_to_luv',
    'luv_to_xyz',
    'luv_to_lch',
    'lch_to_luv',
    # Gamut boundary
    'get_bounds',
    'max_safe_chroma_for_l',
    'max_chroma_for_lh',
    # Types
    'RGB',
    'LinearRGB',
    'XYZ',
    'LUV',
    'LCH',
    'HSLuv',
    'HPLuv',
    'Line',
    # Errors
    'LuvkitError',
    'ChannelShapeError',
    'GamutMethodError',
]
