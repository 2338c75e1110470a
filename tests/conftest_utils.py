"""Shared numeric helpers and sample data for the test suite.

Used by:
- tests/conftest.py (fixtures)
- tests/transforms/*
- tests/infrastructure/*
"""

from __future__ import annotations

import math
from typing import Any

from twodim.transforms.value_objects import AffineTransform

# Absolute tolerance for float64 round trips
TOL = 1e-12

# Coefficients (xx, xy, x, yx, yy, y) of the sample transforms
COEFFS_A = (1, 0, -3, 0.1, 1, 2)
COEFFS_B = (-0.4, 0.1, -4.2, -0.3, 0.7, 1.1)
COEFFS_C = (2.3, -0.9, -6.1, 0.7, -3.1, -5.2)

VECTORS: tuple[tuple[float, float], ...] = (
    (0.2, 1.3),
    (-1.0, math.pi),
    (-math.sqrt(2), 0.75),
)
SCALES: tuple[float, ...] = (2.0, 0.1, (1 + math.sqrt(5)) / 2)
ANGLES: tuple[float, ...] = (-2 * math.pi / 11, math.pi / 7, 0.1)


def distance(a: Any, b: Any) -> float:
    """Distance between two scalars, two points or two transforms.

    Points use the Euclidean norm; transforms use the largest absolute
    coefficient difference.
    """
    if isinstance(a, AffineTransform):
        return max(
            abs(float(p) - float(q))
            for p, q in zip(a.coefficients(), b.coefficients())
        )
    if isinstance(a, tuple):
        return math.hypot(float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))
    return abs(float(a) - float(b))
