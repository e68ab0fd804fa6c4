"""Gamut boundary geometry in the CIE LUV chroma plane.

At a fixed lightness the sRGB gamut, projected onto the (u, v) plane, is a
convex hexagon around the achromatic pole. Each of its six edges is where one
RGB channel hits 0 or 1. The edges are computed in closed form from the rows
of the XYZ -> RGB matrix, which gives two chroma limits:

- max_chroma_for_lh: distance from the pole to the hexagon along one hue ray.
  Scaling saturation by it (HSLuv) uses the full gamut at every hue.
- max_safe_chroma_for_l: radius of the largest circle around the pole that
  fits inside the hexagon. Scaling by it (HPLuv) keeps chroma comparable
  across hues at the cost of some gamut.
"""

import math

from .constants import BOUNDS_CUBE_SCALE, EPSILON, KAPPA, M, MAX_CHROMA_SENTINEL
from .linalg import cos, div, power, sin
from .types import Line


def edge_terms(l, sub2):
    """Yield (top1, top2, bottom) for each gamut edge, channel-major then clip plane (0, 1).

    Edge k is the line v = (top1 / bottom) * u + top2 / bottom. Only plain
    arithmetic is used, so l and sub2 may be floats or arrays.
    """
    for m1, m2, m3 in M:
        for t in (0, 1):
            top1 = (284517.0 * m1 - 94839.0 * m3) * sub2
            top2 = (838422.0 * m3 + 769860.0 * m2 + 731718.0 * m1) * l * sub2 - 769860.0 * t * l
            bottom = (632260.0 * m3 - 126452.0 * m2) * sub2 + 126452.0 * t
            yield top1, top2, bottom


def get_bounds(l: float) -> list[Line]:
    """The six gamut edges at lightness l, ordered channel-major then clip plane (0, 1)."""
    sub1 = power(l + 16.0, 3.0) / BOUNDS_CUBE_SCALE
    sub2 = sub1 if sub1 > EPSILON else l / KAPPA
    return [Line(div(top1, bottom), div(top2, bottom)) for top1, top2, bottom in edge_terms(l, sub2)]


def intersect_line_line(line1: Line, line2: Line) -> float:
    """u coordinate where two lines cross."""
    return div(line1.intercept - line2.intercept, line2.slope - line1.slope)


def distance_from_pole(u: float, v: float) -> float:
    return math.sqrt(u * u + v * v)


def ray_length_until_intersect(theta: float, line: Line) -> float:
    """Length along the ray at angle theta (radians) from the pole to line.

    Negative when the line lies behind the pole in that direction.
    """
    return div(line.intercept, sin(theta) - line.slope * cos(theta))


def max_safe_chroma_for_l(l: float) -> float:
    """Largest chroma that is in gamut at lightness l for every hue."""
    min_len = MAX_CHROMA_SENTINEL
    for line in get_bounds(l):
        # foot of the perpendicular dropped from the pole onto the line
        perpendicular = Line(div(-1.0, line.slope), 0.0)
        u = intersect_line_line(line, perpendicular)
        distance = distance_from_pole(u, line.intercept + u * line.slope)
        if distance >= 0 and distance < min_len:
            min_len = distance
    return min_len


def max_chroma_for_lh(l: float, h: float) -> float:
    """Largest chroma that is in gamut at lightness l and hue h (degrees)."""
    min_len = MAX_CHROMA_SENTINEL
    hrad = h / 360.0 * math.pi * 2.0
    for line in get_bounds(l):
        length = ray_length_until_intersect(hrad, line)
        if length >= 0 and length < min_len:
            min_len = length
    return min_len
