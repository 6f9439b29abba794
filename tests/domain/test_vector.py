import math

import pytest

from flightpath.domain.entities.vector import Vec2
from flightpath.domain.errors import (
    DivisionByZeroError,
    InvalidInputError,
    NonFiniteComponentError,
    NonNumericComponentError,
    SingularOperationError,
    ZeroVectorError,
)


def test_constructor_validates_input():
    with pytest.raises(NonNumericComponentError):
        Vec2("1", 2)
    with pytest.raises(NonNumericComponentError):
        Vec2(True, 2)
    with pytest.raises(NonFiniteComponentError):
        Vec2(1, math.nan)
    with pytest.raises(NonFiniteComponentError):
        Vec2(1, math.inf)


def test_component_errors_are_distinct_invalid_input():
    assert issubclass(NonNumericComponentError, InvalidInputError)
    assert issubclass(NonFiniteComponentError, InvalidInputError)
    assert not issubclass(NonNumericComponentError, NonFiniteComponentError)
    assert not issubclass(NonFiniteComponentError, NonNumericComponentError)


def test_basic_vector_operations():
    v1, v2 = Vec2(1, 2), Vec2(3, 4)
    assert v1.add(v2) == Vec2(4, 6)
    assert v1.sub(v2) == Vec2(-2, -2)
    assert v1.mul(2) == Vec2(2, 4)
    assert v1.div(2) == Vec2(0.5, 1)
    # operator sugar goes through the same operations
    assert v1 + v2 == Vec2(4, 6)
    assert v2 - v1 == Vec2(2, 2)
    assert 2 * v1 == v1 * 2 == Vec2(2, 4)
    assert v1 / 2 == Vec2(0.5, 1)
    assert -v1 == Vec2(-1, -2)


def test_vector_products():
    ex, ey = Vec2(1, 0), Vec2(0, 1)
    assert ex.dot(ey) == 0
    assert ex.cross(ey) == 1
    assert ey.cross(ex) == -1
    assert Vec2(2, 3).dot(Vec2(4, 5)) == 23


def test_roundtrip_identities():
    a, b = Vec2(1.25, -7.5), Vec2(3.0, 0.5)
    assert a.add(b).sub(b).equals(a)
    s = 3.7
    back = a.mul(s).div(s)
    assert abs(back.x - a.x) < 1e-12 and abs(back.y - a.y) < 1e-12


def test_normalization():
    n = Vec2(3, 4).norm()
    assert abs(n.length() - 1.0) < 1e-12
    assert abs(n.x - 0.6) < 1e-12 and abs(n.y - 0.8) < 1e-12
    assert Vec2(0, 0).norm_or_zero().equals(Vec2.ZERO)
    assert Vec2(0, -2).norm_or_zero() == Vec2(0, -1)


def test_singular_operations():
    with pytest.raises(DivisionByZeroError):
        Vec2(1, 1).div(0)
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / 0.0
    with pytest.raises(ZeroVectorError):
        Vec2(0, 0).norm()
    assert not issubclass(ZeroVectorError, InvalidInputError)
    assert issubclass(ZeroVectorError, SingularOperationError)


def test_operations_reject_wrong_argument_types():
    v = Vec2(1, 1)
    with pytest.raises(InvalidInputError):
        v.add((1, 1))
    with pytest.raises(InvalidInputError):
        v.dot("x")
    with pytest.raises(InvalidInputError):
        v.mul("2")
    assert v.equals((1, 1)) is False


def test_immutable():
    v = Vec2(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5  # frozen


def test_plain_form():
    v = Vec2(1.5, -2)
    assert v.to_dict() == {"x": 1.5, "y": -2}
    assert Vec2.from_dict({"x": 1.5, "y": -2}) == v
    with pytest.raises(InvalidInputError):
        Vec2.from_dict({"x": 1.0})
    with pytest.raises(InvalidInputError):
        Vec2.from_dict({"x": "1", "y": 2})
    assert Vec2.from_pair((3, 4)) == Vec2(3.0, 4.0)
