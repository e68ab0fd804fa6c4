"""Small arithmetic helpers shared by the scalar pipeline.

Python floats raise where C doubles overflow or go undefined. These helpers
give inf or nan instead, so out-of-range input flows through every stage.
"""

import math
from typing import Sequence

Vector3 = Sequence[float]


def dot(a: Vector3, b: Vector3) -> float:
    """Dot product of two 3-vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def div(num: float, den: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError.

    x/0 gives a signed infinity, 0/0 and nan/0 give nan.
    """
    if den != 0.0:
        return num / den
    if num == 0.0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def power(base: float, exp: float) -> float:
    """base ** exp, overflowing to a signed infinity instead of raising OverflowError."""
    try:
        return base ** exp
    except OverflowError:
        return math.copysign(math.inf, base)


def sin(x: float) -> float:
    """math.sin, but nan for an infinite angle instead of ValueError."""
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def cos(x: float) -> float:
    """math.cos, but nan for an infinite angle instead of ValueError."""
    if math.isinf(x):
        return math.nan
    return math.cos(x)
