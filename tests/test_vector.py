"""
Tests for vectormath.core.vector
================================

Covers:
- add/subtract/dot operand kinds (vector, sequence, broadcast, scalar) and errors
- cross product, element-wise ops, distance
- in-place chainable ops: normalize, invert, rotate2d
- signed and unsigned angles
"""

import math

import numpy as np
import pytest

from vectormath.core.vector import Vector
from vectormath.errors import ShapeMismatchError, TypeMismatchError


# =============================================================================
# Construction & protocol
# =============================================================================

def test_construction_and_access():
    v = Vector(4, -1, 9)
    assert len(v) == 3
    assert v[0] == 4.0 and v[-1] == 9.0
    assert list(v) == [4.0, -1.0, 9.0]
    assert Vector.from_sequence([4, 5, 6]) == [4, 5, 6]
    assert Vector.from_sequence(x for x in (1, 2)) == Vector(1, 2)
    assert Vector.of_size(3) == [0, 0, 0]
    assert len(Vector()) == 0


def test_from_sequence_copies():
    source = [1.0, 2.0]
    v = Vector.from_sequence(source)
    v[0] = 10
    assert source == [1.0, 2.0]


def test_from_sequence_rejects_non_numeric():
    with pytest.raises(TypeMismatchError):
        Vector.from_sequence("abc")
    with pytest.raises(TypeMismatchError):
        Vector.from_sequence([1, "x"])


def test_copy_is_independent():
    v = Vector(1, 2)
    c = v.copy()
    c[0] = 5
    assert v == [1, 2]


# =============================================================================
# add / subtract
# =============================================================================

def test_add_vector_sequence_and_scalar():
    v = Vector(1, 2, 3)
    assert v.add(Vector(1, 1, 1)) == [2, 3, 4]
    assert v.add([1, 2, 3]) == [2, 4, 6]
    assert v.add(2) == [3, 4, 5]
    assert v.add(0.5) == [1.5, 2.5, 3.5]
    # self is untouched
    assert v == [1, 2, 3]


def test_add_broadcasts_length_one():
    assert Vector(1, 2, 3).add([10]) == [11, 12, 13]
    assert Vector(1, 2, 3).add(Vector(10)) == [11, 12, 13]


def test_add_shape_mismatch():
    with pytest.raises(ShapeMismatchError, match="unequal dimensions"):
        Vector(1, 2, 3).add([1, 2])


@pytest.mark.parametrize("bad", ["abc", None, float("nan"), True, {"x": 1}])
def test_add_type_mismatch(bad):
    with pytest.raises(TypeMismatchError):
        Vector(1, 2).add(bad)


def test_subtract():
    v = Vector(5, 5)
    other = Vector(1, 2)
    assert v.subtract(other) == [4, 3]
    assert other == [1, 2]
    assert v.subtract([1, 1]) == [4, 4]
    assert v.subtract(1) == [4, 4]
    with pytest.raises(ShapeMismatchError):
        v.subtract([1, 2, 3])


# =============================================================================
# dot / cross / element-wise
# =============================================================================

def test_dot_inner_product():
    assert Vector(1, 2, 3).dot([4, 5, 6]) == 32.0


def test_dot_scalar_and_length_one():
    assert Vector(1, 2).dot(3) == [3, 6]
    assert Vector(1, 2).dot([3]) == [3, 6]


def test_dot_errors():
    with pytest.raises(ShapeMismatchError):
        Vector(1, 2, 3).dot([1, 2])
    with pytest.raises(TypeMismatchError):
        Vector(1, 2).dot("2")


def test_cross_example():
    assert Vector(12, 3, 1).cross(Vector(-1, 2, 3)) == [7, -37, 27]


def test_cross_dimension_checked_before_length():
    with pytest.raises(ShapeMismatchError, match="dimension not equal to 3"):
        Vector(1, 2).cross([1, 2])
    with pytest.raises(ShapeMismatchError, match="unequally sized"):
        Vector(1, 2, 3).cross([1, 2])


def test_element_wise():
    assert Vector(1, 2, 3).multiply_element_wise([2, 3, 4]) == [2, 6, 12]
    assert Vector(2, 6).divide_element_wise([2, 3]) == [1, 2]
    with pytest.raises(ShapeMismatchError):
        Vector(1, 2).multiply_element_wise([1])
    with pytest.raises(ShapeMismatchError):
        Vector(1, 2).divide_element_wise([1, 2, 3])


def test_divide_by_zero_is_not_guarded():
    out = Vector(1, 0).divide_element_wise([0, 0])
    assert math.isinf(out[0])
    assert math.isnan(out[1])


# =============================================================================
# distance / normalize / invert / rotate
# =============================================================================

def test_distance():
    assert Vector(3, 4).distance == 5.0
    assert Vector().distance == 0.0


def test_normalize_gives_unit_length(rng):
    for _ in range(20):
        v = Vector.from_sequence(rng.normal(size=4))
        assert v.copy().normalize().distance == pytest.approx(1.0)


def test_normalize_is_in_place_and_chainable():
    v = Vector(0, 2)
    assert v.normalize() is v
    assert v == [0, 1]


def test_normalize_zero_vector_yields_nan():
    v = Vector(0, 0).normalize()
    assert all(math.isnan(x) for x in v)


def test_invert_involution(rng):
    for _ in range(10):
        v = Vector.from_sequence(rng.normal(size=5))
        assert v.copy().invert().invert() == v
    assert Vector(-2, 4).invert() == [2, -4]


def test_rotate2d_uses_pre_rotation_components():
    v = Vector(1, 1).rotate2d(math.pi / 2)
    np.testing.assert_allclose(v.tolist(), [-1.0, 1.0], atol=1e-12)
    w = Vector(1, 0).rotate2d(math.pi)
    np.testing.assert_allclose(w.tolist(), [-1.0, 0.0], atol=1e-12)


def test_rotate2d_preserves_length(rng):
    v = Vector.from_sequence(rng.normal(size=2))
    length = v.distance
    assert v.rotate2d(1.234).distance == pytest.approx(length)


def test_rotate2d_requires_2d():
    with pytest.raises(ShapeMismatchError):
        Vector(1, 0, 0).rotate2d(1.0)


# =============================================================================
# angles
# =============================================================================

def test_signed_angle_sign_convention():
    east = Vector(1, 0)
    assert east.signed_angle(Vector(0, 1)) == pytest.approx(math.pi / 2)
    assert east.signed_angle(Vector(0, -1)) == pytest.approx(-math.pi / 2)
    assert east.signed_angle(Vector(-1, 0)) == pytest.approx(math.pi)


def test_signed_angle_wraps_into_half_open_interval():
    # raw difference is about -3*pi/2 and must wrap to +pi/2
    a = Vector(-1, 1e-9)
    b = Vector(0, -1)
    angle = a.signed_angle(b)
    assert -math.pi < angle <= math.pi
    assert angle == pytest.approx(math.pi / 2)


def test_signed_angle_requires_2d():
    with pytest.raises(ShapeMismatchError):
        Vector(1, 0, 0).signed_angle(Vector(0, 1, 0))
    with pytest.raises(ShapeMismatchError):
        Vector(1, 0).signed_angle(Vector(0, 1, 0))


def test_angle_n_dimensional():
    assert Vector(1, 0, 0).angle(Vector(0, 0, 2)) == pytest.approx(math.pi / 2)
    assert Vector(1, 1).angle(Vector(2, 2)) == pytest.approx(0.0, abs=1e-7)
    assert Vector(1, 0).angle(Vector(-3, 0)) == pytest.approx(math.pi)


def test_angle_requires_equal_lengths():
    with pytest.raises(ShapeMismatchError):
        Vector(1, 0).angle(Vector(1, 0, 0))


def test_fill_helpers(rng):
    v = Vector.of_size(3)
    assert v.ones() == [1, 1, 1]
    assert v.zeros() == [0, 0, 0]
    v.random(rng)
    assert all(0.0 <= x < 1.0 for x in v)
