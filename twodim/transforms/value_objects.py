"""Transforms Bounded Context - Value Objects.

Immutable affine transform of the plane. All validation and coercion occurs
at construction time via Pydantic; the algebra itself lives in
twodim.transforms.services and the operators below delegate to it.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, model_validator

from twodim.transforms.precision import DEFAULT_PRECISION, Precision

# Coefficient order used by coefficients(), repr and the affine library.
COEFFICIENT_NAMES: tuple[str, ...] = ("xx", "xy", "x", "yx", "yy", "y")


def _is_pair(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2


def _is_factor(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class AffineTransform(BaseModel):
    """2D affine coordinate transform (Value Object).

    Maps a point (px, py) to:
        (xx*px + xy*py + x,
         yx*px + yy*py + y)

    All six coefficients share the numpy floating type named by
    ``precision``; real inputs of any other type are cast at construction.

    Operators (thin sugar over twodim.transforms.services):
        A(px, py), A((px, py)), A * (px, py)  -> apply
        A @ B, A * B                          -> compose (B first, then A)
        (dx, dy) + A                          -> translate_output
        A + (dx, dy)                          -> translate_input
        rho * A                               -> scale_output
        A * rho                               -> scale_input
        A / B                                 -> right_divide

    Example:
        >>> A = AffineTransform(xx=1, xy=0, x=-3, yx=0.1, yy=1, y=2)
        >>> qx, qy = A(0, 0)  # (-3.0, 2.0)
    """

    xx: np.floating
    xy: np.floating
    x: np.floating
    yx: np.floating
    yy: np.floating
    y: np.floating
    precision: Precision = DEFAULT_PRECISION

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Make numpy scalars defer to our reflected operators (np.float32(2) * A).
    __array_ufunc__ = None

    @model_validator(mode="before")
    @classmethod
    def coerce_coefficients(cls, data: Any) -> Any:
        """Resolve the precision tag and cast real coefficients to it.

        Non-real values are left untouched so that field validation rejects
        them.
        """
        if not isinstance(data, dict):
            return data
        precision = Precision.of(data.get("precision", DEFAULT_PRECISION))
        coerced = dict(data, precision=precision)
        for name in COEFFICIENT_NAMES:
            value = coerced.get(name)
            if isinstance(value, numbers.Real):
                coerced[name] = precision.cast(value)
        return coerced

    def coefficients(self) -> tuple[np.floating, ...]:
        """Return (xx, xy, x, yx, yy, y)."""
        return (self.xx, self.xy, self.x, self.yx, self.yy, self.y)

    def to_matrix(self) -> NDArray[np.floating]:
        """Return the 3x3 augmented matrix with this transform's dtype."""
        return np.array(
            [[self.xx, self.xy, self.x], [self.yx, self.yy, self.y], [0, 0, 1]],
            dtype=self.precision.scalar_type,
        )

    # ------------------------------------------------------------------
    # Operator sugar
    # ------------------------------------------------------------------
    def __call__(self, *args: Any) -> tuple[np.floating, np.floating]:
        from twodim.transforms import services

        point = args[0] if len(args) == 1 else args
        return services.apply(self, point)

    def __matmul__(self, other: Any) -> Any:
        from twodim.transforms import services

        if isinstance(other, AffineTransform):
            return services.compose(self, other)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        from twodim.transforms import services

        if isinstance(other, AffineTransform):
            return services.compose(self, other)
        if _is_pair(other):
            return services.apply(self, other)
        if _is_factor(other):
            return services.scale_input(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        from twodim.transforms import services

        if _is_factor(other):
            return services.scale_output(other, self)
        return NotImplemented

    def __add__(self, other: Any) -> Any:
        from twodim.transforms import services

        if _is_pair(other):
            return services.translate_input(self, *other)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        from twodim.transforms import services

        if _is_pair(other):
            return services.translate_output(*other, self)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        from twodim.transforms import services

        if isinstance(other, AffineTransform):
            return services.right_divide(self, other)
        return NotImplemented

    def __repr__(self) -> str:
        xx, xy, x, yx, yy, y = (str(c) for c in self.coefficients())
        return f"AffineTransform[{self.precision}]({xx}, {xy}, {x},  {yx}, {yy}, {y})"

    __str__ = __repr__
