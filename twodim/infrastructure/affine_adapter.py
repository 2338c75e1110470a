"""Adapter between AffineTransform and affine.Affine.

affine.Affine stores a 3x3 augmented matrix as the named tuple
(a, b, c, d, e, f, g, h, i), whose first six members are exactly
(xx, xy, x, yx, yy, y). Its coefficients are Python floats, so converting
a transform to Affine goes through float64.
"""

from __future__ import annotations

import logging
from typing import Any

from affine import Affine

from twodim.transforms.precision import DEFAULT_PRECISION, Precision
from twodim.transforms.services import new
from twodim.transforms.value_objects import AffineTransform

logger = logging.getLogger(__name__)


def to_affine(transform: AffineTransform) -> Affine:
    """Return the equivalent affine.Affine (coefficients as Python floats)."""
    if transform.precision is Precision.EXTENDED:
        logger.debug("Narrowing %s transform to float for Affine", transform.precision)
    return Affine(*(float(c) for c in transform.coefficients()))


def from_affine(matrix: Affine, precision: Any = DEFAULT_PRECISION) -> AffineTransform:
    """Build an AffineTransform from an affine.Affine.

    Raises:
        ValueError: If the last row of the matrix is not (0, 0, 1)
    """
    if (matrix.g, matrix.h, matrix.i) != (0.0, 0.0, 1.0):
        raise ValueError(
            f"Not an affine matrix, last row is {(matrix.g, matrix.h, matrix.i)}"
        )
    return new(
        matrix.a,
        matrix.b,
        matrix.c,
        matrix.d,
        matrix.e,
        matrix.f,
        precision=precision,
    )
