# flightpath/domain/entities/vector.py
from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar

from flightpath.domain.errors import (
    DivisionByZeroError,
    InvalidInputError,
    NonFiniteComponentError,
    NonNumericComponentError,
    ZeroVectorError,
)


def _is_number(v) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)


def _check_vec(v, op: str) -> None:
    if not isinstance(v, Vec2):
        raise InvalidInputError(f"Can only {op} Vec2 instances")


def _check_scalar(s, op: str) -> None:
    if not _is_number(s):
        raise InvalidInputError(f"Can only {op} by number")


# Core geometry type used by every flight path
@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    ZERO: ClassVar[Vec2]

    def __post_init__(self):
        if not (_is_number(self.x) and _is_number(self.y)):
            raise NonNumericComponentError("Vec2 coordinates must be numbers")
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise NonFiniteComponentError("Vec2 coordinates must be finite numbers")

    @classmethod
    def zero(cls) -> Vec2:
        return cls.ZERO

    # --------------- arithmetic -----------------------------

    def add(self, v: Vec2) -> Vec2:
        _check_vec(v, "add")
        return Vec2(self.x + v.x, self.y + v.y)

    def sub(self, v: Vec2) -> Vec2:
        _check_vec(v, "subtract")
        return Vec2(self.x - v.x, self.y - v.y)

    def mul(self, s: float) -> Vec2:
        _check_scalar(s, "multiply")
        return Vec2(self.x * s, self.y * s)

    def div(self, s: float) -> Vec2:
        _check_scalar(s, "divide")
        if s == 0:
            raise DivisionByZeroError("Division by zero")
        return Vec2(self.x / s, self.y / s)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def norm(self) -> Vec2:
        n = self.length()
        if n == 0:
            raise ZeroVectorError("Cannot normalize zero vector")
        return self.div(n)

    def norm_or_zero(self) -> Vec2:
        """Unit vector, or the zero vector when this vector has no length."""
        n = self.length()
        return Vec2.ZERO if n == 0 else self.div(n)

    def dot(self, v: Vec2) -> float:
        _check_vec(v, "dot product with")
        return self.x * v.x + self.y * v.y

    def cross(self, v: Vec2) -> float:
        """2D scalar cross product x1*y2 - y1*x2."""
        _check_vec(v, "cross product with")
        return self.x * v.y - self.y * v.x

    def equals(self, v) -> bool:
        if not isinstance(v, Vec2):
            return False
        return self.x == v.x and self.y == v.y

    # operators delegate to the named operations
    def __add__(self, v: Vec2) -> Vec2:
        return self.add(v)

    def __sub__(self, v: Vec2) -> Vec2:
        return self.sub(v)

    def __mul__(self, s: float) -> Vec2:
        return self.mul(s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vec2:
        return self.div(s)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    # --------------- plain form -----------------------------

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, obj: Mapping) -> Vec2:
        if not isinstance(obj, Mapping) or not all(_is_number(obj.get(k)) for k in ("x", "y")):
            raise InvalidInputError("Invalid plain form for Vec2")
        return cls(obj["x"], obj["y"])

    @classmethod
    def from_pair(cls, p: Vec2 | tuple[float, float]) -> Vec2:
        return p if isinstance(p, Vec2) else cls(float(p[0]), float(p[1]))


Vec2.ZERO = Vec2(0.0, 0.0)
