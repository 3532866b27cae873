"""Generic fraction of two values of the same numeric type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from numerics.calculators import Calculator, get_calculator

T = TypeVar("T")


@dataclass(frozen=True)
class Fraction(Generic[T]):
    """Numerator over denominator, combined through the element type's calculator.

    No reduction to lowest terms is performed: ``Fraction(1, 2) + Fraction(1, 3)``
    is ``5/6`` and ``Fraction(1, 2) * Fraction(2, 4)`` is ``2/8``. Equality is
    structural on the (numerator, denominator) pair.

    Attributes:
        numerator: Value above the line
        denominator: Value below the line
    """

    numerator: T
    denominator: T

    @property
    def calculator(self) -> Calculator[Any]:
        return get_calculator(self.numerator)

    def value(self) -> T:
        """Collapse into a single value by dividing numerator by denominator."""
        return self.calculator.divide(self.numerator, self.denominator)

    def __add__(self, other: Fraction[T]) -> Fraction[T]:
        if not isinstance(other, Fraction):
            return NotImplemented
        calc = self.calculator
        left = calc.multiply(self.numerator, other.denominator)
        right = calc.multiply(other.numerator, self.denominator)
        return Fraction(calc.add(left, right), calc.multiply(self.denominator, other.denominator))

    def __sub__(self, other: Fraction[T]) -> Fraction[T]:
        if not isinstance(other, Fraction):
            return NotImplemented
        calc = self.calculator
        left = calc.multiply(self.numerator, other.denominator)
        right = calc.multiply(other.numerator, self.denominator)
        return Fraction(
            calc.subtract(left, right), calc.multiply(self.denominator, other.denominator)
        )

    def __mul__(self, other: Fraction[T]) -> Fraction[T]:
        if not isinstance(other, Fraction):
            return NotImplemented
        calc = self.calculator
        return Fraction(
            calc.multiply(self.numerator, other.numerator),
            calc.multiply(self.denominator, other.denominator),
        )

    def __truediv__(self, other: Fraction[T]) -> Fraction[T]:
        if not isinstance(other, Fraction):
            return NotImplemented
        calc = self.calculator
        return Fraction(
            calc.multiply(self.numerator, other.denominator),
            calc.multiply(self.denominator, other.numerator),
        )

    def __neg__(self) -> Fraction[T]:
        return Fraction(self.calculator.negate(self.numerator), self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
