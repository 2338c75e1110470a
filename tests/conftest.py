"""Root pytest configuration for all tests.

Provides the sample transforms shared by the domain and infrastructure tests.
Sample coefficients and point sets live in tests/conftest_utils.py so that
test modules can parametrize over them directly.
"""

import pytest

from tests.conftest_utils import COEFFS_A, COEFFS_B, COEFFS_C
from twodim.transforms.services import identity, new
from twodim.transforms.value_objects import AffineTransform


@pytest.fixture
def eye() -> AffineTransform:
    """Float64 identity."""
    return identity()


@pytest.fixture
def A() -> AffineTransform:
    """Shear plus offset: (1, 0, -3,  0.1, 1, 2), determinant exactly 1."""
    return new(*COEFFS_A)


@pytest.fixture
def B() -> AffineTransform:
    """General invertible transform with distinct x and y offsets."""
    return new(*COEFFS_B)


@pytest.fixture
def C() -> AffineTransform:
    return new(*COEFFS_C)


@pytest.fixture
def singular() -> AffineTransform:
    """Rank-1 linear part (second row is twice the first)."""
    return new(1, 2, 5, 2, 4, -1)
