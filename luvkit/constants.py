"""Central place for luvkit numeric constants."""

import sys

# === sRGB <-> CIE XYZ (D65) ===

# XYZ -> linear RGB
M: tuple[tuple[float, float, float], ...] = (
    (3.2409699419045214, -1.5373831775700935, -0.49861076029300328),
    (-0.96924363628087983, 1.8759675015077207, 0.041555057407175613),
    (0.055630079696993609, -0.20397695888897657, 1.0569715142428786),
)

# Linear RGB -> XYZ
M_INV: tuple[tuple[float, float, float], ...] = (
    (0.41239079926595948, 0.35758433938387796, 0.18048078840183429),
    (0.21263900587151036, 0.71516867876775593, 0.072192315360733715),
    (0.019330818715591851, 0.11919477979462599, 0.95053215224966058),
)

# D65 white point chromaticity (u', v')
REF_U: float = 0.19783000664283681
REF_V: float = 0.468319994938791

# CIE lightness constants
KAPPA: float = 903.2962962962963
EPSILON: float = 0.0088564516790356308

# L* at which the L <-> Y relation switches from linear to cubic
L_THRESHOLD: float = 8.0

# === sRGB transfer function ===
SRGB_LINEAR_THRESHOLD: float = 0.0031308
SRGB_ENCODED_THRESHOLD: float = 0.04045
SRGB_SLOPE: float = 12.92
SRGB_OFFSET: float = 0.055
SRGB_GAMMA: float = 2.4

# === Degenerate-point thresholds ===
NEAR_ZERO: float = 1e-8  # black lightness, gray chroma, zero saturation
NEAR_WHITE: float = 99.9999999  # lightness within NEAR_ZERO of 100

# 116^3, scales (l + 16)^3 in the gamut edge equations
BOUNDS_CUBE_SCALE: float = 1560896.0

# Starting value for the boundary solver's running minimum
MAX_CHROMA_SENTINEL: float = sys.float_info.max

# === Gamut utilities ===
DEFAULT_GAMUT_TOLERANCE: float = 1e-4
