"""Transforms Bounded Context - Floating-point Precision.

Every AffineTransform carries a Precision tag naming the numpy floating
scalar type of its six coefficients. Combining transforms of different
precision promotes to the widest one, using the explicit widening order
below rather than numpy's own casting rules.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

import numpy as np

from twodim.transforms.errors import MissingOperandError, UnsupportedPrecisionError


class Precision(str, Enum):
    """Supported coefficient types (value is the numpy dtype name)."""

    HALF = "float16"
    SINGLE = "float32"
    DOUBLE = "float64"
    EXTENDED = "longdouble"

    @property
    def scalar_type(self) -> type[np.floating]:
        return _SCALAR_TYPES[self]

    @property
    def bits(self) -> int:
        """Storage width in bits (128 for EXTENDED on x86-64 Linux)."""
        return np.dtype(self.scalar_type).itemsize * 8

    def cast(self, value: Any) -> np.floating:
        """Coerce a real number to this precision.

        Narrowing a value beyond the representable range yields +/-inf, as
        IEEE arithmetic does; numpy's overflow warning is silenced. Integers
        too large for any float become +/-inf the same way.
        """
        try:
            with np.errstate(over="ignore"):
                return self.scalar_type(value)
        except OverflowError:
            return self.scalar_type(math.inf if value > 0 else -math.inf)

    @classmethod
    def of(cls, tag: Any) -> "Precision":
        """Resolve a precision tag.

        Accepts a Precision member, a dtype string ("float32", "f8",
        "longdouble", ...), a numpy scalar type or dtype, a numpy scalar
        instance, or the builtin ``float``.

        Raises:
            UnsupportedPrecisionError: If the tag is not a supported
                floating-point type (integers, bool, complex, unknown names)
        """
        if isinstance(tag, Precision):
            return tag
        # np.dtype(None) would silently mean float64
        if tag is None:
            raise UnsupportedPrecisionError(tag)
        dtype_like = tag.dtype if isinstance(tag, np.generic) else tag
        try:
            scalar_type = np.dtype(dtype_like).type
        except (TypeError, ValueError) as err:
            raise UnsupportedPrecisionError(tag) from err
        try:
            return _BY_SCALAR_TYPE[scalar_type]
        except KeyError:
            raise UnsupportedPrecisionError(tag) from None

    def __str__(self) -> str:
        return self.value


_SCALAR_TYPES: dict[Precision, type[np.floating]] = {
    Precision.HALF: np.float16,
    Precision.SINGLE: np.float32,
    Precision.DOUBLE: np.float64,
    Precision.EXTENDED: np.longdouble,
}

_BY_SCALAR_TYPE: dict[type, Precision] = {t: p for p, t in _SCALAR_TYPES.items()}

# Promotion rule table: narrowest first. Combining operands yields the member
# with the highest index among them.
WIDENING_ORDER: tuple[Precision, ...] = (
    Precision.HALF,
    Precision.SINGLE,
    Precision.DOUBLE,
    Precision.EXTENDED,
)

DEFAULT_PRECISION = Precision.DOUBLE


def promote(*precisions: Any) -> Precision:
    """Return the widest of the given precisions.

    Raises:
        MissingOperandError: If called without arguments
        UnsupportedPrecisionError: If any tag is not a supported precision
    """
    if not precisions:
        raise MissingOperandError("promote() needs at least one precision")
    return max((Precision.of(p) for p in precisions), key=WIDENING_ORDER.index)
