"""Generic three-dimensional vector."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from numerics.calculators import Calculator, get_calculator

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Vec3(Generic[T]):
    """Vector of three components of the same numeric type.

    All arithmetic goes through the component type's calculator, so
    ``Vec3(Arbitrary(1), Arbitrary(2), Arbitrary(2)).length`` is computed
    with Arbitrary's exact arithmetic and truncating square root.
    """

    x: T
    y: T
    z: T

    @property
    def calculator(self) -> Calculator[Any]:
        return get_calculator(self.x)

    @property
    def sqr_length(self) -> T:
        """Squared length of the vector."""
        return Vec3.dot(self, self)

    @property
    def length(self) -> T:
        return self.calculator.sqrt(self.sqr_length)

    @property
    def normalized(self) -> Vec3[T]:
        """Vector of unit length in the same direction.

        Raises:
            DivisionByZero: If the vector has zero length
        """
        return self / self.length

    @property
    def flipped(self) -> Vec3[T]:
        """Vector pointing in the opposite direction."""
        return -self

    @staticmethod
    def dot(lhs: Vec3[T], rhs: Vec3[T]) -> T:
        calc = lhs.calculator
        xx = calc.multiply(lhs.x, rhs.x)
        yy = calc.multiply(lhs.y, rhs.y)
        zz = calc.multiply(lhs.z, rhs.z)
        return calc.add(calc.add(xx, yy), zz)

    @staticmethod
    def cross(lhs: Vec3[T], rhs: Vec3[T]) -> Vec3[T]:
        calc = lhs.calculator
        i = calc.subtract(calc.multiply(lhs.y, rhs.z), calc.multiply(lhs.z, rhs.y))
        j = calc.subtract(calc.multiply(lhs.z, rhs.x), calc.multiply(lhs.x, rhs.z))
        k = calc.subtract(calc.multiply(lhs.x, rhs.y), calc.multiply(lhs.y, rhs.x))
        return Vec3(i, j, k)

    @staticmethod
    def distance(lhs: Vec3[T], rhs: Vec3[T]) -> T:
        return (rhs - lhs).length

    @staticmethod
    def sqr_distance(lhs: Vec3[T], rhs: Vec3[T]) -> T:
        return (rhs - lhs).sqr_length

    def map(self, converter: Callable[[T], U]) -> Vec3[U]:
        """Convert every component, e.g. ``vec.map(Arbitrary.from_float)``."""
        return Vec3(converter(self.x), converter(self.y), converter(self.z))

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vec3[T]:
        calc = self.calculator
        return Vec3(calc.negate(self.x), calc.negate(self.y), calc.negate(self.z))

    def __pos__(self) -> Vec3[T]:
        return self

    def __add__(self, other: Vec3[T]) -> Vec3[T]:
        if not isinstance(other, Vec3):
            return NotImplemented
        calc = self.calculator
        return Vec3(calc.add(self.x, other.x), calc.add(self.y, other.y), calc.add(self.z, other.z))

    def __sub__(self, other: Vec3[T]) -> Vec3[T]:
        if not isinstance(other, Vec3):
            return NotImplemented
        calc = self.calculator
        return Vec3(
            calc.subtract(self.x, other.x),
            calc.subtract(self.y, other.y),
            calc.subtract(self.z, other.z),
        )

    def __mul__(self, scalar: T) -> Vec3[T]:
        if isinstance(scalar, Vec3):
            return NotImplemented
        calc = self.calculator
        return Vec3(
            calc.multiply(self.x, scalar),
            calc.multiply(self.y, scalar),
            calc.multiply(self.z, scalar),
        )

    def __rmul__(self, scalar: T) -> Vec3[T]:
        if isinstance(scalar, Vec3):
            return NotImplemented
        calc = self.calculator
        return Vec3(
            calc.multiply(scalar, self.x),
            calc.multiply(scalar, self.y),
            calc.multiply(scalar, self.z),
        )

    def __truediv__(self, scalar: T) -> Vec3[T]:
        if isinstance(scalar, Vec3):
            return NotImplemented
        calc = self.calculator
        return Vec3(
            calc.divide(self.x, scalar),
            calc.divide(self.y, scalar),
            calc.divide(self.z, scalar),
        )

    def __str__(self) -> str:
        return f"(x:{self.x},y:{self.y},z:{self.z})"
