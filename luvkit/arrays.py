"""Array versions of the HSLuv / HPLuv pipeline.

Same formulas and thresholds as the scalar functions in luvkit.convert, applied
elementwise. Degenerate branches (black, white, gray) are picked with where(),
so numpy's divide/invalid warnings from the discarded branch are silenced.

All functions accept numpy arrays or torch tensors.
GPU acceleration automatic when torch GPU tensors are passed.

Example:
    import numpy as np
    from luvkit import arrays

    hues = np.linspace(0, 360, 12, endpoint=False)
    hsl = np.stack([hues, np.full(12, 100.0), np.full(12, 60.0)], axis=-1)
    palette = arrays.hsluv_to_rgb(hsl)  # (12, 3), all channels in [0, 1]
"""

from math import pi

from . import _backend as B
from ._backend import Array
from .constants import (
    BOUNDS_CUBE_SCALE,
    EPSILON,
    KAPPA,
    L_THRESHOLD,
    M,
    M_INV,
    NEAR_WHITE,
    NEAR_ZERO,
    REF_U,
    REF_V,
    SRGB_ENCODED_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    SRGB_SLOPE,
)
from .errors import ChannelShapeError
from .geometry import edge_terms

Channels = tuple[Array, Array, Array]


# === sRGB transfer function ===

def srgb_to_linear(x: Array) -> Array:
    """sRGB -> Linear RGB gamma decoding (per channel)."""
    with B.ignore_float_errors():
        low = x / SRGB_SLOPE
        high = B.pow((x + SRGB_OFFSET) / (1.0 + SRGB_OFFSET), SRGB_GAMMA)
        return B.where(x > SRGB_ENCODED_THRESHOLD, high, low)


def linear_to_srgb(x: Array) -> Array:
    """Linear RGB -> sRGB gamma encoding (per channel)."""
    with B.ignore_float_errors():
        low = x * SRGB_SLOPE
        high = (1.0 + SRGB_OFFSET) * B.pow(x, 1.0 / SRGB_GAMMA) - SRGB_OFFSET
        return B.where(x <= SRGB_LINEAR_THRESHOLD, low, high)


# === Linear RGB <-> XYZ ===

def _apply_matrix(matrix, a: Array, b: Array, c: Array) -> Channels:
    return tuple(row[0] * a + row[1] * b + row[2] * c for row in matrix)


def linear_rgb_to_xyz(r: Array, g: Array, b: Array) -> Channels:
    return _apply_matrix(M_INV, r, g, b)


def xyz_to_linear_rgb(x: Array, y: Array, z: Array) -> Channels:
    return _apply_matrix(M, x, y, z)


# === XYZ <-> LUV ===

def y_to_l(y: Array) -> Array:
    with B.ignore_float_errors():
        return B.where(y <= EPSILON, y * KAPPA, 116.0 * B.pow(y, 1.0 / 3.0) - 16.0)


def l_to_y(l: Array) -> Array:
    return B.where(l <= L_THRESHOLD, l / KAPPA, B.pow((l + 16.0) / 116.0, 3.0))


def xyz_to_luv(x: Array, y: Array, z: Array) -> Channels:
    """XYZ -> LUV. Near-black (L < 1e-8) gets u = v = 0."""
    l = y_to_l(y)
    black = l < NEAR_ZERO
    with B.ignore_float_errors():
        denominator = x + 15.0 * y + 3.0 * z
        u = 13.0 * l * (4.0 * x / denominator - REF_U)
        v = 13.0 * l * (9.0 * y / denominator - REF_V)
    zero = B.zeros_like(u)
    return l, B.where(black, zero, u), B.where(black, zero, v)


def luv_to_xyz(l: Array, u: Array, v: Array) -> Channels:
    """LUV -> XYZ. L <= 1e-8 maps to black."""
    black = l <= NEAR_ZERO
    with B.ignore_float_errors():
        var_u = u / (13.0 * l) + REF_U
        var_v = v / (13.0 * l) + REF_V
        y = l_to_y(l)
        x = -(9.0 * y * var_u) / ((var_u - 4.0) * var_v - var_u * var_v)
        z = (9.0 * y - 15.0 * var_v * y - var_v * x) / (3.0 * var_v)
    zero = B.zeros_like(x)
    return B.where(black, zero, x), B.where(black, zero, y), B.where(black, zero, z)


# === LUV <-> LCh ===

def luv_to_lch(l: Array, u: Array, v: Array) -> Channels:
    """LUV -> LCh. Returns H in degrees [0, 360), 0 for grays."""
    c = B.hypot(u, v)
    h = B.atan2(v, u) * (180.0 / pi)
    h = B.where(h < 0.0, h + 360.0, h)
    h = B.where(c < NEAR_ZERO, B.zeros_like(h), h)
    return l, c, h


def lch_to_luv(l: Array, c: Array, h: Array) -> Channels:
    """LCh -> LUV. H in degrees."""
    hrad = h * (pi / 180.0)
    return l, B.cos(hrad) * c, B.sin(hrad) * c


# === Gamut boundary ===

def get_bounds(l: Array) -> list[tuple[Array, Array]]:
    """(slope, intercept) of the six gamut edges at lightness l."""
    with B.ignore_float_errors():
        sub1 = B.pow(l + 16.0, 3.0) / BOUNDS_CUBE_SCALE
        sub2 = B.where(sub1 > EPSILON, sub1, l / KAPPA)
        return [(top1 / bottom, top2 / bottom) for top1, top2, bottom in edge_terms(l, sub2)]


def _min_non_negative(candidates: list[Array]) -> Array:
    best = B.finfo_max_like(candidates[0])
    with B.ignore_float_errors():
        for length in candidates:
            # NaN fails both comparisons and is skipped
            keep = (length >= 0) & (length < best)
            best = B.where(keep, length, best)
    return best


def max_safe_chroma_for_l(l: Array) -> Array:
    """Largest chroma in gamut at lightness l for every hue."""
    distances = []
    with B.ignore_float_errors():
        for slope, intercept in get_bounds(l):
            u = intercept / (-1.0 / slope - slope)
            v = intercept + u * slope
            distances.append(B.hypot(u, v))
    return _min_non_negative(distances)


def max_chroma_for_lh(l: Array, h: Array) -> Array:
    """Largest chroma in gamut at lightness l and hue h (degrees)."""
    hrad = h * (pi / 180.0)
    sin_h, cos_h = B.sin(hrad), B.cos(hrad)
    lengths = []
    with B.ignore_float_errors():
        for slope, intercept in get_bounds(l):
            lengths.append(intercept / (sin_h - slope * cos_h))
    return _min_non_negative(lengths)


# === HSLuv / HPLuv <-> LCh ===

def _is_pole(l: Array) -> Array:
    return (l > NEAR_WHITE) | (l < NEAR_ZERO)


def hsluv_to_lch(h: Array, s: Array, l: Array) -> Channels:
    with B.ignore_float_errors():
        c = max_chroma_for_lh(l, h) / 100.0 * s
    c = B.where(_is_pole(l), B.zeros_like(c), c)
    h = B.where(s < NEAR_ZERO, B.zeros_like(h), h)
    return l, c, h


def lch_to_hsluv(l: Array, c: Array, h: Array) -> Channels:
    with B.ignore_float_errors():
        s = c / max_chroma_for_lh(l, h) * 100.0
    s = B.where(_is_pole(l), B.zeros_like(s), s)
    h = B.where(c < NEAR_ZERO, B.zeros_like(h), h)
    return h, s, l


def hpluv_to_lch(h: Array, s: Array, l: Array) -> Channels:
    with B.ignore_float_errors():
        c = max_safe_chroma_for_l(l) / 100.0 * s
    c = B.where(_is_pole(l), B.zeros_like(c), c)
    h = B.where(s < NEAR_ZERO, B.zeros_like(h), h)
    return l, c, h


def lch_to_hpluv(l: Array, c: Array, h: Array) -> Channels:
    with B.ignore_float_errors():
        s = c / max_safe_chroma_for_l(l) * 100.0
    s = B.where(_is_pole(l), B.zeros_like(s), s)
    h = B.where(c < NEAR_ZERO, B.zeros_like(h), h)
    return h, s, l


# === Composites on (..., 3) arrays ===

def _split_channels(x: Array, name: str) -> Channels:
    x = B.as_float_array(x)
    if x.ndim == 0 or x.shape[-1] != 3:
        raise ChannelShapeError(
            f"{name}: input must have last dimension 3, got shape {tuple(x.shape)}"
        )
    return x[..., 0], x[..., 1], x[..., 2]


def _lch_channels_to_rgb(l: Array, c: Array, h: Array) -> Array:
    r, g, b = xyz_to_linear_rgb(*luv_to_xyz(*lch_to_luv(l, c, h)))
    return B.stack([linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)], axis=-1)


def _rgb_to_lch_channels(rgb: Array, name: str) -> Channels:
    r, g, b = _split_channels(rgb, name)
    linear = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return luv_to_lch(*xyz_to_luv(*linear_rgb_to_xyz(*linear)))


def lch_to_rgb(lch: Array) -> Array:
    """LCh(uv) (..., 3) -> sRGB (..., 3). Out-of-gamut values are not clipped."""
    return _lch_channels_to_rgb(*_split_channels(lch, "lch_to_rgb"))


def rgb_to_lch(rgb: Array) -> Array:
    """sRGB (..., 3) -> LCh(uv) (..., 3)."""
    return B.stack(list(_rgb_to_lch_channels(rgb, "rgb_to_lch")), axis=-1)


def hsluv_to_rgb(hsluv: Array) -> Array:
    """HSLuv -> sRGB.

    Args:
        hsluv: Array with shape (..., 3) holding (h, s, l); h in degrees,
            s and l in [0, 100]

    Returns:
        sRGB array with shape (..., 3), in [0, 1] for in-range input

    Raises:
        ChannelShapeError: If the last dimension is not 3
    """
    return _lch_channels_to_rgb(*hsluv_to_lch(*_split_channels(hsluv, "hsluv_to_rgb")))


def hpluv_to_rgb(hpluv: Array) -> Array:
    """HPLuv (..., 3) -> sRGB (..., 3)."""
    return _lch_channels_to_rgb(*hpluv_to_lch(*_split_channels(hpluv, "hpluv_to_rgb")))


def rgb_to_hsluv(rgb: Array) -> Array:
    """sRGB -> HSLuv.

    Args:
        rgb: sRGB array with shape (..., 3), values in [0, 1]

    Returns:
        Array with shape (..., 3) holding (h, s, l)

    Raises:
        ChannelShapeError: If the last dimension is not 3
    """
    l, c, h = _rgb_to_lch_channels(rgb, "rgb_to_hsluv")
    return B.stack(list(lch_to_hsluv(l, c, h)), axis=-1)


def rgb_to_hpluv(rgb: Array) -> Array:
    """sRGB (..., 3) -> HPLuv (..., 3)."""
    l, c, h = _rgb_to_lch_channels(rgb, "rgb_to_hpluv")
    return B.stack(list(lch_to_hpluv(l, c, h)), axis=-1)
