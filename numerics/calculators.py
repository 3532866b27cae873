"""Calculators: arithmetic dispatched by value type.

Generic containers (Fraction, Vec3) do not call operators on their
elements. Instead they look up a Calculator for the element's type, so
the same container code works for ints, floats, Decimals, Scientific and
Arbitrary values.

Usage:
    calculator = get_calculator(Arbitrary(144, -2))
    calculator.add(a, b)

    # Custom types either register a calculator...
    DEFAULT_CALCULATOR_REGISTRY.register(MyNumber, MyCalculator())
    # ...or provide one themselves via a create_calculator() classmethod.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

import structlog

from numerics.errors import CalculatorNotFound, DivisionByZero, NegativeSquareRoot
from numerics.math.arbitrary import Arbitrary
from numerics.math.integers import div_trunc, integer_sqrt
from numerics.scientific import Scientific

logger = structlog.get_logger()

T = TypeVar("T")


class Calculator(Protocol[T]):
    """Protocol for arithmetic on values of a single type."""

    def add(self, lhs: T, rhs: T) -> T: ...

    def subtract(self, lhs: T, rhs: T) -> T: ...

    def multiply(self, lhs: T, rhs: T) -> T: ...

    def divide(self, lhs: T, rhs: T) -> T: ...

    def negate(self, value: T) -> T: ...

    def sqrt(self, value: T) -> T: ...


@runtime_checkable
class CalculatorProvider(Protocol[T]):
    """Type that supplies its own calculator.

    Checked against the value type itself, not its instances.
    """

    @classmethod
    def create_calculator(cls) -> Calculator[T]: ...


class IntCalculator:
    """Integer arithmetic with truncating division and integer square root."""

    def add(self, lhs: int, rhs: int) -> int:
        return lhs + rhs

    def subtract(self, lhs: int, rhs: int) -> int:
        return lhs - rhs

    def multiply(self, lhs: int, rhs: int) -> int:
        return lhs * rhs

    def divide(self, lhs: int, rhs: int) -> int:
        """Division truncating toward zero.

        Raises:
            DivisionByZero: If rhs is zero
        """
        return div_trunc(lhs, rhs)

    def negate(self, value: int) -> int:
        return -value

    def sqrt(self, value: int) -> int:
        return integer_sqrt(value)


class FloatCalculator:
    def add(self, lhs: float, rhs: float) -> float:
        return lhs + rhs

    def subtract(self, lhs: float, rhs: float) -> float:
        return lhs - rhs

    def multiply(self, lhs: float, rhs: float) -> float:
        return lhs * rhs

    def divide(self, lhs: float, rhs: float) -> float:
        if rhs == 0:
            raise DivisionByZero(f"Division by zero: {lhs} / 0")
        return lhs / rhs

    def negate(self, value: float) -> float:
        return -value

    def sqrt(self, value: float) -> float:
        if value < 0:
            raise NegativeSquareRoot(f"Square root of negative value: {value}")
        return math.sqrt(value)


class DecimalCalculator:
    """Decimal arithmetic in the current decimal context."""

    def add(self, lhs: Decimal, rhs: Decimal) -> Decimal:
        return lhs + rhs

    def subtract(self, lhs: Decimal, rhs: Decimal) -> Decimal:
        return lhs - rhs

    def multiply(self, lhs: Decimal, rhs: Decimal) -> Decimal:
        return lhs * rhs

    def divide(self, lhs: Decimal, rhs: Decimal) -> Decimal:
        if rhs == 0:
            raise DivisionByZero(f"Division by zero: {lhs} / 0")
        return lhs / rhs

    def negate(self, value: Decimal) -> Decimal:
        return -value

    def sqrt(self, value: Decimal) -> Decimal:
        if value < 0:
            raise NegativeSquareRoot(f"Square root of negative value: {value}")
        return value.sqrt()


class NumericCalculator(Generic[T]):
    """Calculator forwarding to the value's own Numeric methods.

    Used for Scientific and Arbitrary, which implement negate/add/subtract/
    multiply_by/divide_by/sqrt themselves.
    """

    def add(self, lhs: Any, rhs: Any) -> T:
        return lhs.add(rhs)

    def subtract(self, lhs: Any, rhs: Any) -> T:
        return lhs.subtract(rhs)

    def multiply(self, lhs: Any, rhs: Any) -> T:
        return lhs.multiply_by(rhs)

    def divide(self, lhs: Any, rhs: Any) -> T:
        return lhs.divide_by(rhs)

    def negate(self, value: Any) -> T:
        return value.negate()

    def sqrt(self, value: Any) -> T:
        return value.sqrt()


class ScientificCalculator(NumericCalculator[Scientific]):
    pass


class ArbitraryCalculator(NumericCalculator[Arbitrary]):
    """Arbitrary arithmetic with a fixed scale for divide and sqrt.

    Attributes:
        scale: Digits kept after the decimal point, or None for the
            configured default
    """

    def __init__(self, scale: int | None = None) -> None:
        self.scale = scale

    def divide(self, lhs: Arbitrary, rhs: Arbitrary) -> Arbitrary:
        return lhs.divide(rhs, self.scale)

    def sqrt(self, value: Arbitrary) -> Arbitrary:
        return value.sqrt(self.scale)


class CalculatorRegistry:
    """Registry mapping value types to calculators.

    Lookup walks the value type's MRO, so a calculator registered for a
    base class also serves its subclasses. Types without a registration
    may provide a ``create_calculator()`` classmethod instead.

    Usage:
        registry = CalculatorRegistry()
        registry.register(int, IntCalculator())

        calculator = registry.get(42)
        calculator.add(40, 2)
    """

    def __init__(self) -> None:
        self._calculators: dict[type, Calculator[Any]] = {}

    def register(self, value_type: type, calculator: Calculator[Any]) -> None:
        """Register (or replace) the calculator for a value type."""
        self._calculators[value_type] = calculator
        logger.debug(
            "calculator_registered",
            value_type=value_type.__name__,
            calculator=type(calculator).__name__,
        )

    def unregister(self, value_type: type) -> None:
        self._calculators.pop(value_type, None)

    def is_registered(self, value_type: type) -> bool:
        return value_type in self._calculators

    def get_for_type(self, value_type: type) -> Calculator[Any]:
        """Return the calculator for a type.

        Raises:
            CalculatorNotFound: If neither the type nor any of its bases is
                registered and the type does not provide its own calculator
        """
        for base in value_type.__mro__:
            calculator = self._calculators.get(base)
            if calculator is not None:
                return calculator

        if isinstance(value_type, CalculatorProvider):
            return value_type.create_calculator()

        logger.warning("calculator_not_found", value_type=value_type.__name__)
        raise CalculatorNotFound(f"No calculator registered for type {value_type.__name__}")

    def get(self, value: Any) -> Calculator[Any]:
        """Return the calculator for a value's type."""
        return self.get_for_type(type(value))

    @property
    def registered_types(self) -> list[type]:
        return list(self._calculators)


def build_default_registry() -> CalculatorRegistry:
    """Registry with calculators for the builtin and library numeric types."""
    registry = CalculatorRegistry()
    registry.register(int, IntCalculator())
    registry.register(float, FloatCalculator())
    registry.register(Decimal, DecimalCalculator())
    registry.register(Scientific, ScientificCalculator())
    registry.register(Arbitrary, ArbitraryCalculator())
    return registry


DEFAULT_CALCULATOR_REGISTRY = build_default_registry()


def get_calculator(value: Any) -> Calculator[Any]:
    """Return the default registry's calculator for a value."""
    return DEFAULT_CALCULATOR_REGISTRY.get(value)
