"""Tests for precision tags and the promotion table."""

from __future__ import annotations

import itertools

import numpy as np
import pytest

from twodim.transforms.errors import MissingOperandError, UnsupportedPrecisionError
from twodim.transforms.precision import (
    DEFAULT_PRECISION,
    WIDENING_ORDER,
    Precision,
    promote,
)
from twodim.transforms.services import identity, new


class TestPrecisionOf:
    @pytest.mark.parametrize(
        "tag, expected",
        [
            (Precision.SINGLE, Precision.SINGLE),
            ("float16", Precision.HALF),
            ("f4", Precision.SINGLE),
            ("float64", Precision.DOUBLE),
            ("longdouble", Precision.EXTENDED),
            (np.float32, Precision.SINGLE),
            (np.longdouble, Precision.EXTENDED),
            (np.dtype("f8"), Precision.DOUBLE),
            (np.float16(1.5), Precision.HALF),
            (float, Precision.DOUBLE),
        ],
    )
    def test_supported_tags(self, tag, expected):
        assert Precision.of(tag) is expected

    @pytest.mark.parametrize(
        "tag",
        [
            int,
            bool,
            complex,
            np.int32,
            np.uint8,
            "complex128",
            np.complex64,
            "bogus",
            None,
        ],
    )
    def test_non_floating_tags_rejected(self, tag):
        with pytest.raises(UnsupportedPrecisionError) as exc_info:
            Precision.of(tag)

        assert exc_info.value.tag is tag

    def test_unsupported_precision_is_a_type_error(self):
        with pytest.raises(TypeError):
            Precision.of("int64")

    def test_constructors_reject_integer_precision(self):
        with pytest.raises(UnsupportedPrecisionError):
            identity(precision=np.int32)
        with pytest.raises(UnsupportedPrecisionError):
            new(1, 0, 0, 0, 1, 0, precision="complex128")


class TestPrecisionMembers:
    def test_default_is_double(self):
        assert DEFAULT_PRECISION is Precision.DOUBLE
        assert identity().precision is Precision.DOUBLE

    @pytest.mark.parametrize(
        "member, bits",
        [(Precision.HALF, 16), (Precision.SINGLE, 32), (Precision.DOUBLE, 64)],
    )
    def test_bits(self, member, bits):
        assert member.bits == bits

    def test_extended_is_at_least_double(self):
        assert Precision.EXTENDED.bits >= 64

    def test_cast_returns_scalar_of_member_type(self):
        for member in Precision:
            assert type(member.cast(0.1)) is member.scalar_type

    def test_cast_overflow_is_infinite(self):
        assert np.isinf(Precision.HALF.cast(1e10))

    @pytest.mark.parametrize(
        "member", [Precision.HALF, Precision.SINGLE, Precision.DOUBLE]
    )
    def test_cast_huge_integer_is_signed_infinity(self, member):
        assert member.cast(10**400) == np.inf
        assert member.cast(-(10**400)) == -np.inf
        assert type(member.cast(10**400)) is member.scalar_type

    def test_construction_from_huge_integer(self):
        T = new(10**400, 0, 0, 0, 1, -(10**400))

        assert T.xx == np.inf
        assert T.y == -np.inf

    def test_str_is_dtype_name(self):
        assert str(Precision.EXTENDED) == "longdouble"


class TestPromote:
    def test_widening_order(self):
        assert WIDENING_ORDER == (
            Precision.HALF,
            Precision.SINGLE,
            Precision.DOUBLE,
            Precision.EXTENDED,
        )

    @pytest.mark.parametrize("p1, p2", itertools.product(Precision, repeat=2))
    def test_promote_pairs_is_symmetric_and_widest(self, p1, p2):
        result = promote(p1, p2)

        assert result is promote(p2, p1)
        assert WIDENING_ORDER.index(result) == max(
            WIDENING_ORDER.index(p1), WIDENING_ORDER.index(p2)
        )

    def test_promote_single_and_double(self):
        assert promote(Precision.SINGLE, Precision.DOUBLE) is Precision.DOUBLE
        assert promote("float32", np.float64) is Precision.DOUBLE

    def test_promote_many(self):
        assert promote("float16", "float16", "float32") is Precision.SINGLE

    def test_promote_requires_operand(self):
        with pytest.raises(MissingOperandError):
            promote()
