"""Pairwise conversions between sRGB, linear RGB, XYZ, LUV and LCh.

All functions are closed-form. The only special cases are the black and gray
points, where LUV's chroma axes and LCh's hue become undefined.

Reference: http://en.wikipedia.org/wiki/CIELUV
The reference white is D65 with Yn = 1, which simplifies the L <-> Y relation.
"""

import math

from .constants import (
    EPSILON,
    KAPPA,
    L_THRESHOLD,
    M,
    M_INV,
    NEAR_ZERO,
    REF_U,
    REF_V,
    SRGB_ENCODED_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    SRGB_SLOPE,
)
from .linalg import cos, div, dot, power, sin
from .types import LCH, LUV, RGB, XYZ, LinearRGB


# === sRGB transfer function ===

def from_linear(c: float) -> float:
    """Linear channel -> gamma-encoded sRGB channel."""
    if c <= SRGB_LINEAR_THRESHOLD:
        return SRGB_SLOPE * c
    return (1.0 + SRGB_OFFSET) * power(c, 1.0 / SRGB_GAMMA) - SRGB_OFFSET


def to_linear(c: float) -> float:
    """Gamma-encoded sRGB channel -> linear channel."""
    if c > SRGB_ENCODED_THRESHOLD:
        return power((c + SRGB_OFFSET) / (1.0 + SRGB_OFFSET), SRGB_GAMMA)
    return c / SRGB_SLOPE


def rgb_to_linear_rgb(rgb: RGB) -> LinearRGB:
    return LinearRGB(to_linear(rgb.r), to_linear(rgb.g), to_linear(rgb.b))


def linear_rgb_to_rgb(rgb: LinearRGB) -> RGB:
    return RGB(from_linear(rgb.r), from_linear(rgb.g), from_linear(rgb.b))


# === Linear RGB <-> XYZ ===

def linear_rgb_to_xyz(rgb: LinearRGB) -> XYZ:
    return XYZ(dot(M_INV[0], rgb), dot(M_INV[1], rgb), dot(M_INV[2], rgb))


def xyz_to_linear_rgb(xyz: XYZ) -> LinearRGB:
    return LinearRGB(dot(M[0], xyz), dot(M[1], xyz), dot(M[2], xyz))


def rgb_to_xyz(rgb: RGB) -> XYZ:
    """sRGB -> XYZ (gamma decode, then matrix)."""
    return linear_rgb_to_xyz(rgb_to_linear_rgb(rgb))


def xyz_to_rgb(xyz: XYZ) -> RGB:
    """XYZ -> sRGB (matrix, then gamma encode). Out-of-gamut values are not clipped."""
    return linear_rgb_to_rgb(xyz_to_linear_rgb(xyz))


# === XYZ <-> LUV ===

def y_to_l(y: float) -> float:
    """Relative luminance Y -> CIE lightness L*."""
    if y <= EPSILON:
        return y * KAPPA
    return 116.0 * power(y, 1.0 / 3.0) - 16.0


def l_to_y(l: float) -> float:
    """CIE lightness L* -> relative luminance Y."""
    if l <= L_THRESHOLD:
        return l / KAPPA
    return power((l + 16.0) / 116.0, 3.0)


def xyz_to_luv(xyz: XYZ) -> LUV:
    """XYZ -> LUV. Near-black input (L < 1e-8) gets u = v = 0."""
    l = y_to_l(xyz.y)
    if l < NEAR_ZERO:
        return LUV(l, 0.0, 0.0)

    denominator = xyz.x + 15.0 * xyz.y + 3.0 * xyz.z
    var_u = div(4.0 * xyz.x, denominator)
    var_v = div(9.0 * xyz.y, denominator)
    return LUV(l, 13.0 * l * (var_u - REF_U), 13.0 * l * (var_v - REF_V))


def luv_to_xyz(luv: LUV) -> XYZ:
    """LUV -> XYZ. L <= 1e-8 is black."""
    if luv.l <= NEAR_ZERO:
        return XYZ(0.0, 0.0, 0.0)

    var_u = luv.u / (13.0 * luv.l) + REF_U
    var_v = luv.v / (13.0 * luv.l) + REF_V
    y = l_to_y(luv.l)
    x = div(-(9.0 * y * var_u), (var_u - 4.0) * var_v - var_u * var_v)
    z = div(9.0 * y - 15.0 * var_v * y - var_v * x, 3.0 * var_v)
    return XYZ(x, y, z)


# === LUV <-> LCh ===

def luv_to_lch(luv: LUV) -> LCH:
    """LUV -> LCh. Grays (C < 1e-8) get hue 0."""
    c = math.hypot(luv.u, luv.v)
    if c < NEAR_ZERO:
        h = 0.0
    else:
        h = math.degrees(math.atan2(luv.v, luv.u))
        if h < 0.0:
            h += 360.0
    return LCH(luv.l, c, h)


def lch_to_luv(lch: LCH) -> LUV:
    hrad = math.radians(lch.h)
    return LUV(lch.l, cos(hrad) * lch.c, sin(hrad) * lch.c)
