"""Gamut handling for arbitrary LCh(uv) input.

HSLuv and HPLuv are in gamut by construction, but raw LCh is not: chroma
beyond the hexagon boundary produces RGB outside [0, 1].

Strategies:
- clip: Hard-clip RGB to [0,1]. Can shift hue and lightness.
- compress: Reduce C to the exact boundary, keeping L and H.
"""

import logging
from typing import Literal

from . import _backend as B
from ._backend import Array
from .arrays import lch_to_rgb, max_chroma_for_lh, rgb_to_lch
from .constants import DEFAULT_GAMUT_TOLERANCE
from .errors import GamutMethodError

logger = logging.getLogger(__name__)


# === Gamut checking ===

def is_in_gamut(rgb: Array, tolerance: float = DEFAULT_GAMUT_TOLERANCE) -> Array:
    """Check if sRGB values (..., 3) lie in [0,1] on every channel."""
    in_range = (rgb >= -tolerance) & (rgb <= 1 + tolerance)
    return B.all_along_axis(in_range, axis=-1)


def lch_in_gamut(L: Array, C: Array, H: Array, tolerance: float = DEFAULT_GAMUT_TOLERANCE) -> Array:
    """Check if LCh values produce valid sRGB."""
    return is_in_gamut(_lch_to_rgb(L, C, H), tolerance)


def _lch_to_rgb(L: Array, C: Array, H: Array) -> Array:
    L, C, H = B.broadcast_arrays(B.as_float_array(L), B.as_float_array(C), B.as_float_array(H))
    return lch_to_rgb(B.stack([L, C, H], axis=-1))


# === Gamut mapping methods ===

def gamut_clip(L: Array, C: Array, H: Array) -> Array:
    """Convert to sRGB and hard-clip to [0,1].

    Returns:
        RGB array (..., 3) with values clamped to [0,1]
    """
    return B.clip(_lch_to_rgb(L, C, H), 0.0, 1.0)


def gamut_compress(
    L: Array,
    C: Array,
    H: Array,
    method: Literal['clip', 'chroma'] = 'chroma'
) -> tuple[Array, Array, Array]:
    """Bring out-of-gamut colors into sRGB gamut.

    Args:
        L, C, H: LCh(uv) values, L in [0, 100], H in degrees
        method: 'clip' for RGB clipping, 'chroma' for chroma reduction

    Returns:
        (L, C, H) tuple with adjusted values

    Raises:
        GamutMethodError: If method is not recognised
    """
    if method == 'clip':
        lch = rgb_to_lch(gamut_clip(L, C, H))
        return lch[..., 0], lch[..., 1], lch[..., 2]

    elif method == 'chroma':
        L, C, H = B.broadcast_arrays(B.as_float_array(L), B.as_float_array(C), B.as_float_array(H))
        max_C = max_chroma_for_lh(L, H)
        C_compressed = B.minimum(C, max_C)
        if logger.isEnabledFor(logging.DEBUG):
            n_compressed = int(B.to_numpy(C_compressed < C).sum())
            logger.debug("Compressed chroma of %d of %d colors", n_compressed, B.to_numpy(C).size)
        return L, C_compressed, H

    raise GamutMethodError(f"Unknown gamut method: {method}")


def gamut_map_to_rgb(
    L: Array,
    C: Array,
    H: Array,
    method: Literal['clip', 'compress'] = 'compress'
) -> Array:
    """Map LCh(uv) to sRGB with gamut handling.

    Args:
        L: Lightness (0-100)
        C: Chroma (>= 0)
        H: Hue degrees (0-360)
        method: 'clip' for fast RGB clipping, 'compress' for chroma reduction

    Returns:
        RGB array (..., 3) with values in [0, 1]

    Raises:
        GamutMethodError: If method is not recognised
    """
    if method == 'clip':
        return gamut_clip(L, C, H)

    elif method == 'compress':
        L_safe, C_safe, H_safe = gamut_compress(L, C, H, method='chroma')
        rgb = _lch_to_rgb(L_safe, C_safe, H_safe)
        # Final clip for numerical safety
        return B.clip(rgb, 0.0, 1.0)

    raise GamutMethodError(f"Unknown gamut method: {method}")
