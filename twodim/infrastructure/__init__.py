"""Infrastructure adapters for the transforms bounded context.

Conversions between AffineTransform and the `affine` package's Affine, the
type used by rasterio and most of the Python GIS stack.
"""

from .affine_adapter import from_affine, to_affine

__all__ = ["from_affine", "to_affine"]
