"""HSLuv / HPLuv <-> LCh.

Saturation is chroma expressed as a percentage of the largest in-gamut chroma:
per lightness and hue for HSLuv, per lightness only for HPLuv. At the black
and white poles the gamut collapses to a point, so saturation and chroma are
pinned to 0 there instead of being divided out.
"""

from .constants import NEAR_WHITE, NEAR_ZERO
from .geometry import max_chroma_for_lh, max_safe_chroma_for_l
from .linalg import div
from .types import HPLuv, HSLuv, LCH


def _is_pole(l: float) -> bool:
    return l > NEAR_WHITE or l < NEAR_ZERO


def hsluv_to_lch(hsluv: HSLuv) -> LCH:
    h, s, l = hsluv
    if _is_pole(l):
        c = 0.0
    else:
        c = max_chroma_for_lh(l, h) / 100.0 * s
    if s < NEAR_ZERO:
        h = 0.0
    return LCH(l, c, h)


def lch_to_hsluv(lch: LCH) -> HSLuv:
    l, c, h = lch
    if _is_pole(l):
        s = 0.0
    else:
        s = div(c, max_chroma_for_lh(l, h)) * 100.0
    if c < NEAR_ZERO:
        h = 0.0
    return HSLuv(h, s, l)


def hpluv_to_lch(hpluv: HPLuv) -> LCH:
    h, s, l = hpluv
    if _is_pole(l):
        c = 0.0
    else:
        c = max_safe_chroma_for_l(l) / 100.0 * s
    if s < NEAR_ZERO:
        h = 0.0
    return LCH(l, c, h)


def lch_to_hpluv(lch: LCH) -> HPLuv:
    l, c, h = lch
    if _is_pole(l):
        s = 0.0
    else:
        s = div(c, max_safe_chroma_for_l(l)) * 100.0
    if c < NEAR_ZERO:
        h = 0.0
    return HPLuv(h, s, l)
