"""Transforms Bounded Context.

Affine coordinate transforms of the plane:
- Value Objects: AffineTransform, Precision
- Services: apply, compose, invert, translate/scale/rotate (input and output
  variants), determinant, jacobian, intercept, left/right division
"""

from twodim.transforms.errors import (
    MissingOperandError,
    SingularTransformError,
    TransformError,
    UnsupportedPrecisionError,
)
from twodim.transforms.precision import DEFAULT_PRECISION, Precision, promote
from twodim.transforms.services import (
    apply,
    compose,
    convert,
    determinant,
    from_matrix,
    identity,
    intercept,
    invert,
    jacobian,
    left_divide,
    new,
    precision,
    right_divide,
    rotate_input,
    rotate_output,
    scale_input,
    scale_output,
    translate_input,
    translate_output,
)
from twodim.transforms.value_objects import AffineTransform

__all__ = [
    "DEFAULT_PRECISION",
    "AffineTransform",
    "MissingOperandError",
    "Precision",
    "SingularTransformError",
    "TransformError",
    "UnsupportedPrecisionError",
    "apply",
    "compose",
    "convert",
    "determinant",
    "from_matrix",
    "identity",
    "intercept",
    "invert",
    "jacobian",
    "left_divide",
    "new",
    "precision",
    "promote",
    "right_divide",
    "rotate_input",
    "rotate_output",
    "scale_input",
    "scale_output",
    "translate_input",
    "translate_output",
]
