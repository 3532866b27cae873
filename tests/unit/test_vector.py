"""Tests for the generic three-dimensional vector."""

import pytest

from numerics import Arbitrary, Scientific, Vec3
from numerics.errors import DivisionByZero


def arb_vec(x, y, z):
    return Vec3(Arbitrary.of(x), Arbitrary.of(y), Arbitrary.of(z))


class TestVec3Arithmetic:
    """Tests for component-wise arithmetic."""

    def test_add_and_subtract(self):
        a = Vec3(1, 2, 3)
        b = Vec3(4, 5, 6)
        assert a + b == Vec3(5, 7, 9)
        assert b - a == Vec3(3, 3, 3)

    def test_negate_and_flip(self):
        assert -Vec3(1, -2, 3) == Vec3(-1, 2, -3)
        assert Vec3(1, -2, 3).flipped == Vec3(-1, 2, -3)
        v = Vec3(1, 2, 3)
        assert +v is v

    def test_scalar_multiply_both_sides(self):
        assert Vec3(1, 2, 3) * 2 == Vec3(2, 4, 6)
        assert 2 * Vec3(1, 2, 3) == Vec3(2, 4, 6)

    def test_scalar_divide(self):
        result = arb_vec(1, 2, 3) / Arbitrary(2)
        assert result == arb_vec(0.5, 1, 1.5)

    def test_vector_times_vector_raises(self):
        with pytest.raises(TypeError):
            Vec3(1, 2, 3) * Vec3(1, 2, 3)  # type: ignore

    def test_dot_and_cross(self):
        x = Vec3(1, 0, 0)
        y = Vec3(0, 1, 0)
        assert Vec3.dot(x, y) == 0
        assert Vec3.dot(Vec3(1, 2, 3), Vec3(4, 5, 6)) == 32
        assert Vec3.cross(x, y) == Vec3(0, 0, 1)
        assert Vec3.cross(y, x) == Vec3(0, 0, -1)

    def test_iter(self):
        assert list(Vec3(1, 2, 3)) == [1, 2, 3]

    def test_map(self):
        assert Vec3(1.5, 2, 0.25).map(Arbitrary.of) == arb_vec(1.5, 2, 0.25)

    def test_str(self):
        assert str(Vec3(1, 2, 3)) == "(x:1,y:2,z:3)"


class TestVec3Length:
    """Tests for length, distance and normalization."""

    def test_arbitrary_length_is_exact(self):
        v = arb_vec(1, 2, 2)
        assert v.sqr_length == Arbitrary(9)
        assert v.length == Arbitrary(3)

    def test_int_length_truncates(self):
        assert Vec3(1, 1, 1).length == 1

    def test_float_length(self):
        assert Vec3(3.0, 4.0, 0.0).length == pytest.approx(5.0)

    def test_scientific_length(self):
        v = Vec3(Scientific(3, 10), Scientific(4, 10), Scientific(0))
        assert float(v.length) == pytest.approx(5e10)

    def test_distance(self):
        a = arb_vec(1, 1, 1)
        b = arb_vec(2, 3, 3)
        assert Vec3.sqr_distance(a, b) == Arbitrary(9)
        assert Vec3.distance(a, b) == Arbitrary(3)

    def test_normalized(self):
        v = arb_vec(0, 0, 5).normalized
        assert v == arb_vec(0, 0, 1)

    def test_normalized_zero_vector_raises(self):
        with pytest.raises(DivisionByZero):
            arb_vec(0, 0, 0).normalized
