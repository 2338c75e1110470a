"""twodim - algebra of 2D affine coordinate transforms.

This package is organized in layers:
- transforms: pure domain logic (AffineTransform value object and its algebra)
- infrastructure: adapters to third-party transform types (affine.Affine)

The public API of the transforms layer is re-exported here.
"""

# Imports alphabetized per project style (isort)
from twodim import infrastructure, transforms
from twodim.transforms import *  # noqa: F403
from twodim.transforms import __all__ as _transforms_all

__version__ = "0.1.0"

__all__ = ["infrastructure", "transforms", *_transforms_all]
