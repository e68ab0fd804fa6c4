"""Typed triplets for each stage of the conversion pipeline.

Each stage gets its own NamedTuple so that, for example, an XYZ value can't
be passed where an LCh value is expected. They unpack like plain tuples.
"""

from typing import NamedTuple


class RGB(NamedTuple):
    """Gamma-encoded sRGB, channels nominally in [0, 1]."""
    r: float
    g: float
    b: float


class LinearRGB(NamedTuple):
    """Linear-light sRGB."""
    r: float
    g: float
    b: float


class XYZ(NamedTuple):
    """CIE XYZ under D65, Y of reference white = 1."""
    x: float
    y: float
    z: float


class LUV(NamedTuple):
    """CIE L*u*v*, L in [0, 100]."""
    l: float
    u: float
    v: float


class LCH(NamedTuple):
    """Polar CIE LUV: lightness, chroma, hue in degrees [0, 360)."""
    l: float
    c: float
    h: float


class HSLuv(NamedTuple):
    """HSLuv: hue degrees, saturation and lightness in [0, 100]."""
    h: float
    s: float
    l: float


class HPLuv(NamedTuple):
    """HPLuv: hue degrees, saturation and lightness in [0, 100]."""
    h: float
    s: float
    l: float


class Line(NamedTuple):
    """Line v = slope * u + intercept in the (u, v) chroma plane."""
    slope: float
    intercept: float
