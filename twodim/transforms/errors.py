"""Transforms Bounded Context - Error Hierarchy.

Custom exceptions for the affine transform algebra.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from twodim.transforms.value_objects import AffineTransform


class TransformError(Exception):
    """Base error for affine transform operations."""


class SingularTransformError(TransformError):
    """Linear part of a transform has an exactly zero determinant.

    Attributes:
        transform: The non-invertible operand
        determinant: Its determinant (always zero, possibly negative zero)
    """

    def __init__(
        self, transform: "AffineTransform", determinant: Any, role: str = "transform"
    ) -> None:
        self.transform = transform
        self.determinant = determinant
        super().__init__(f"{role} is not invertible: {transform!r}")


class MissingOperandError(TransformError):
    """Operation needs at least one operand and received none."""


class UnsupportedPrecisionError(TransformError, TypeError):
    """Precision tag does not name a supported floating-point type.

    Attributes:
        tag: The rejected tag, as given by the caller
    """

    def __init__(self, tag: Any) -> None:
        self.tag = tag
        super().__init__(f"Unsupported precision (not a floating-point type): {tag!r}")
