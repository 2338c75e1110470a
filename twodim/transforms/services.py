"""Transforms Bounded Context - Domain Services.

Pure functions implementing the algebra of 2D affine transforms. Nothing here
mutates its inputs: every operation returns a new AffineTransform (or a
point), and scalar arguments are cast to the transform's precision so that a
scalar never changes the precision of the result.

Naming convention for the non-commutative operations:
    *_output(..., A)  adjusts what A produces   (adjustment applied after A)
    *_input(A, ...)   adjusts what A receives   (adjustment applied before A)
"""

from __future__ import annotations

import logging
from functools import reduce, wraps
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from twodim.transforms.errors import MissingOperandError, SingularTransformError
from twodim.transforms.precision import (
    DEFAULT_PRECISION,
    WIDENING_ORDER,
    Precision,
    promote,
)
from twodim.transforms.value_objects import AffineTransform

logger = logging.getLogger(__name__)

Point = tuple[Any, Any]


def _quiet_ieee(func):
    """Run func with numpy's overflow and invalid-value warnings silenced.

    Coefficient arithmetic yields inf and NaN as plain IEEE values; they are
    never reported as warnings or errors.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(over="ignore", invalid="ignore"):
            return func(*args, **kwargs)

    return wrapper


# ---------------------------------------------------------------------------
# Construction & Conversion
# ---------------------------------------------------------------------------
def identity(precision: Any = DEFAULT_PRECISION) -> AffineTransform:
    """Return the identity transform with the given precision."""
    return new(1, 0, 0, 0, 1, 0, precision=precision)


def new(
    xx: Any,
    xy: Any,
    x: Any,
    yx: Any,
    yy: Any,
    y: Any,
    precision: Any = DEFAULT_PRECISION,
) -> AffineTransform:
    """Build a transform from six real coefficients, in row order.

    Raises:
        UnsupportedPrecisionError: If precision is not a floating-point type
        pydantic.ValidationError: If a coefficient is not a real number
    """
    target = Precision.of(precision)
    return AffineTransform(xx=xx, xy=xy, x=x, yx=yx, yy=yy, y=y, precision=target)


def precision(transform: AffineTransform) -> Precision:
    """Return the coefficient precision of a transform."""
    return transform.precision


def convert(transform: AffineTransform, target: Any) -> AffineTransform:
    """Return the transform with its coefficients cast to another precision.

    No-op (the very same object is returned) when the transform already has
    the target precision.
    """
    target = Precision.of(target)
    if transform.precision is target:
        return transform
    if WIDENING_ORDER.index(target) < WIDENING_ORDER.index(transform.precision):
        logger.debug("Narrowing transform from %s to %s", transform.precision, target)
    return new(*transform.coefficients(), precision=target)


def from_matrix(matrix: ArrayLike, precision: Any = None) -> AffineTransform:
    """Build a transform from a 2x3 or 3x3 augmented matrix.

    Args:
        matrix: Rows [[xx, xy, x], [yx, yy, y]] optionally followed by [0, 0, 1]
        precision: Target precision. If None, a floating numpy array keeps its
            own precision and anything else uses DEFAULT_PRECISION

    Raises:
        ValueError: If the shape is wrong or the last row of a 3x3 matrix is
            not (0, 0, 1)
    """
    arr = np.asarray(matrix)
    if arr.shape not in ((2, 3), (3, 3)):
        raise ValueError(f"Affine matrix must be 2x3 or 3x3, got shape {arr.shape}")
    if arr.shape == (3, 3) and tuple(arr[2]) != (0, 0, 1):
        raise ValueError(
            f"Last row of affine matrix must be (0, 0, 1), got {tuple(arr[2])}"
        )
    if precision is None:
        floating = np.issubdtype(arr.dtype, np.floating)
        precision = arr.dtype if floating else DEFAULT_PRECISION
    (xx, xy, x), (yx, yy, y) = arr[0], arr[1]
    return new(xx, xy, x, yx, yy, y, precision=precision)


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
@_quiet_ieee
def apply(
    transform: AffineTransform, point: Point
) -> tuple[np.floating, np.floating]:
    """Map a point through the transform.

    Coordinates are cast to the transform's precision first. NaN and
    infinities propagate per IEEE arithmetic without raising.
    """
    cast = transform.precision.cast
    px, py = point
    px, py = cast(px), cast(py)
    return (
        transform.xx * px + transform.xy * py + transform.x,
        transform.yx * px + transform.yy * py + transform.y,
    )


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------
@_quiet_ieee
def translate_output(dx: Any, dy: Any, transform: AffineTransform) -> AffineTransform:
    """Return B such that B(p) = A(p) + (dx, dy)."""
    A = transform
    cast = A.precision.cast
    return new(
        A.xx,
        A.xy,
        A.x + cast(dx),
        A.yx,
        A.yy,
        A.y + cast(dy),
        precision=A.precision,
    )


@_quiet_ieee
def translate_input(transform: AffineTransform, dx: Any, dy: Any) -> AffineTransform:
    """Return C such that C(p) = A(p + (dx, dy))."""
    A = transform
    cast = A.precision.cast
    dx, dy = cast(dx), cast(dy)
    return new(
        A.xx,
        A.xy,
        A.xx * dx + A.xy * dy + A.x,
        A.yx,
        A.yy,
        A.yx * dx + A.yy * dy + A.y,
        precision=A.precision,
    )


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------
@_quiet_ieee
def scale_output(rho: Any, transform: AffineTransform) -> AffineTransform:
    """Return B such that B(p) = rho * A(p)."""
    A = transform
    rho = A.precision.cast(rho)
    return new(
        rho * A.xx,
        rho * A.xy,
        rho * A.x,
        rho * A.yx,
        rho * A.yy,
        rho * A.y,
        precision=A.precision,
    )


@_quiet_ieee
def scale_input(transform: AffineTransform, rho: Any) -> AffineTransform:
    """Return C such that C(p) = A(rho * p); the offset is left untouched."""
    A = transform
    rho = A.precision.cast(rho)
    return new(
        rho * A.xx,
        rho * A.xy,
        A.x,
        rho * A.yx,
        rho * A.yy,
        A.y,
        precision=A.precision,
    )


# ---------------------------------------------------------------------------
# Rotation (theta in radians, counter-clockwise about the origin)
# ---------------------------------------------------------------------------
@_quiet_ieee
def rotate_output(theta: Any, transform: AffineTransform) -> AffineTransform:
    """Return R∘A: apply A, then rotate the result by theta."""
    A = transform
    theta = A.precision.cast(theta)
    c, s = np.cos(theta), np.sin(theta)
    return new(
        c * A.xx - s * A.yx,
        c * A.xy - s * A.yy,
        c * A.x - s * A.y,
        c * A.yx + s * A.xx,
        c * A.yy + s * A.xy,
        c * A.y + s * A.x,
        precision=A.precision,
    )


@_quiet_ieee
def rotate_input(transform: AffineTransform, theta: Any) -> AffineTransform:
    """Return A∘R: rotate the input by theta, then apply A."""
    A = transform
    theta = A.precision.cast(theta)
    c, s = np.cos(theta), np.sin(theta)
    return new(
        A.xx * c + A.xy * s,
        A.xy * c - A.xx * s,
        A.x,
        A.yx * c + A.yy * s,
        A.yy * c - A.yx * s,
        A.y,
        precision=A.precision,
    )


# ---------------------------------------------------------------------------
# Determinant, Jacobian, Inversion
# ---------------------------------------------------------------------------
@_quiet_ieee
def determinant(transform: AffineTransform) -> np.floating:
    """Determinant of the linear part; the offset plays no role."""
    return transform.xx * transform.yy - transform.xy * transform.yx


def jacobian(transform: AffineTransform) -> np.floating:
    """Absolute value of the determinant (area scaling factor)."""
    return abs(determinant(transform))


def _nonzero_determinant(transform: AffineTransform, role: str) -> np.floating:
    d = determinant(transform)
    # Exact test: any nonzero determinant, however tiny, is invertible.
    if d == 0:
        logger.debug("Singular %s (determinant %s): %r", role, d, transform)
        raise SingularTransformError(transform, d, role=role)
    return d


@_quiet_ieee
def invert(transform: AffineTransform) -> AffineTransform:
    """Return the reciprocal transform.

    Raises:
        SingularTransformError: If the determinant is exactly zero
    """
    A = transform
    d = _nonzero_determinant(A, "transform")
    Txx = A.yy / d
    Txy = -A.xy / d
    Tyx = -A.yx / d
    Tyy = A.xx / d
    return new(
        Txx,
        Txy,
        -Txx * A.x - Txy * A.y,
        Tyx,
        Tyy,
        -Tyx * A.x - Tyy * A.y,
        precision=A.precision,
    )


@_quiet_ieee
def intercept(transform: AffineTransform) -> tuple[np.floating, np.floating]:
    """Return the point (px, py) that the transform maps to (0, 0).

    Raises:
        SingularTransformError: If the determinant is exactly zero
    """
    A = transform
    d = _nonzero_determinant(A, "transform")
    return ((A.xy * A.y - A.yy * A.x) / d, (A.yx * A.x - A.xx * A.y) / d)


# ---------------------------------------------------------------------------
# Composition & Division
# ---------------------------------------------------------------------------
@_quiet_ieee
def _compose_pair(A: AffineTransform, B: AffineTransform) -> AffineTransform:
    return new(
        A.xx * B.xx + A.xy * B.yx,
        A.xx * B.xy + A.xy * B.yy,
        A.xx * B.x + A.xy * B.y + A.x,
        A.yx * B.xx + A.yy * B.yx,
        A.yx * B.xy + A.yy * B.yy,
        A.yx * B.x + A.yy * B.y + A.y,
        precision=A.precision,
    )


def compose(*transforms: AffineTransform) -> AffineTransform:
    """Compose transforms right to left.

    compose(A, B) applies B then A; compose(A, B, C) applies C, then B,
    then A. The result has the widest precision among the operands.

    Raises:
        MissingOperandError: If called without arguments

    Example:
        >>> R = rotate_output(0.5, identity())
        >>> T = translate_output(1, 2, identity())
        >>> qx, qy = apply(compose(R, T), (0, 0))  # translated, then rotated
    """
    if not transforms:
        raise MissingOperandError("compose() needs at least one transform")
    if len(transforms) == 1:
        return transforms[0]
    target = promote(*(t.precision for t in transforms))
    return reduce(_compose_pair, (convert(t, target) for t in transforms))


def _promoted(
    A: AffineTransform, B: AffineTransform
) -> tuple[AffineTransform, AffineTransform]:
    target = promote(A.precision, B.precision)
    return convert(A, target), convert(B, target)


@_quiet_ieee
def right_divide(A: AffineTransform, B: AffineTransform) -> AffineTransform:
    """Return A / B, the transform X solving X∘B = A (i.e. A∘inv(B)).

    Raises:
        SingularTransformError: If B is not invertible
    """
    A, B = _promoted(A, B)
    d = _nonzero_determinant(B, "right operand")
    # Linear part R = A_lin · inv(B_lin)
    Rxx = (A.xx * B.yy - A.xy * B.yx) / d
    Rxy = (A.xy * B.xx - A.xx * B.xy) / d
    Ryx = (A.yx * B.yy - A.yy * B.yx) / d
    Ryy = (A.yy * B.xx - A.yx * B.xy) / d
    # Offset: X(B(0)) must equal A(0), so t = A_t - R·B_t
    return new(
        Rxx,
        Rxy,
        A.x - (Rxx * B.x + Rxy * B.y),
        Ryx,
        Ryy,
        A.y - (Ryx * B.x + Ryy * B.y),
        precision=A.precision,
    )


@_quiet_ieee
def left_divide(A: AffineTransform, B: AffineTransform) -> AffineTransform:
    """Return A \\ B, the transform X solving A∘X = B (i.e. inv(A)∘B).

    Raises:
        SingularTransformError: If A is not invertible
    """
    A, B = _promoted(A, B)
    d = _nonzero_determinant(A, "left operand")
    Txx = A.yy / d
    Txy = -A.xy / d
    Tyx = -A.yx / d
    Tyy = A.xx / d
    tx = B.x - A.x
    ty = B.y - A.y
    return new(
        Txx * B.xx + Txy * B.yx,
        Txx * B.xy + Txy * B.yy,
        Txx * tx + Txy * ty,
        Tyx * B.xx + Tyy * B.yx,
        Tyx * B.xy + Tyy * B.yy,
        Tyx * tx + Tyy * ty,
        precision=A.precision,
    )
