"""Arbitrary-precision decimal numbers.

An Arbitrary is an immutable ``significand × 10^exponent`` pair where the
significand is an unbounded Python int. Addition, subtraction and
multiplication are exact. Division and square root cannot always
terminate, so they take a scale (digits kept after the decimal point) and
truncate toward zero beyond it.

Values are kept in canonical form: the significand never ends in a decimal
zero (zero itself is always ``(0, 0)``), so equality and hashing can be
structural on the pair.

Usage:
    from numerics import Arbitrary

    a = Arbitrary(144, -2)          # 1.44
    b = Arbitrary.from_float(8.2)   # 82E-1
    (a + b).significand             # 964
    Arbitrary(1).divide(Arbitrary(3), scale=25)
"""

from __future__ import annotations

import decimal
import math
from decimal import Decimal
from typing import ClassVar, Union

import structlog

from numerics.config import DEFAULT_NUMERICS_CONFIG
from numerics.errors import ConversionError, DivisionByZero, NegativeSquareRoot, PrecisionOverflow
from numerics.math.integers import (
    digit_count,
    div_trunc,
    int_to_string,
    integer_sqrt,
    is_even,
    pow10,
)
from numerics.scientific import Scientific

__all__ = ["Arbitrary", "ArbitraryLike"]

logger = structlog.get_logger()

# Largest finite double is ~1.8e308; anything with more integer digits overflows
_FLOAT_MAX_DIGITS = 309
# Below 10^-400 every value rounds to a (signed) zero double
_FLOAT_MIN_MAGNITUDE = -400

ArbitraryLike = Union["Arbitrary", int, float, Decimal, Scientific]


class Arbitrary:
    """Arbitrary-precision decimal number stored as significand × 10^exponent.

    Example: 1.44 is stored as significand=144, exponent=-2.

    Equality and hashing only match other Arbitrary values, so
    ``Arbitrary(5) != 5``. Ordering converts int, float and Decimal operands
    exactly, so ``Arbitrary(5) <= 5`` and ``Arbitrary(5) >= 5`` both hold.
    Use ``compare()`` or ``Arbitrary.of()`` to test numeric equality across
    types.

    Attributes:
        significand: Digits of the number as a signed int (read-only)
        exponent: Power of ten applied to the significand (read-only)
        precision: Total significant digits, counting the zeros implied by
            a positive exponent
        scale: Digits to the right of the decimal point
    """

    ZERO: ClassVar[Arbitrary]
    ONE: ClassVar[Arbitrary]

    __slots__ = ("_significand", "_exponent", "_precision", "_scale")
    _significand: int
    _exponent: int
    _precision: int
    _scale: int

    def __init__(self, significand: int, exponent: int = 0) -> None:
        """Create a normalized Arbitrary.

        Trailing decimal zeros of the significand are moved into the
        exponent, so ``Arbitrary(1200, 0)`` is stored as ``12E2``.

        Raises:
            TypeError: If significand or exponent is not an int
        """
        if isinstance(significand, bool) or not isinstance(significand, int):
            raise TypeError(f"Arbitrary significand must be int, got {type(significand).__name__}")
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Arbitrary exponent must be int, got {type(exponent).__name__}")

        if significand == 0:
            exponent = 0
        else:
            while True:
                shortened, remainder = divmod(significand, 10)
                if remainder:
                    break
                significand = shortened
                exponent += 1
        self._assign(significand, exponent)

    @classmethod
    def _from_normalized(cls, significand: int, exponent: int) -> Arbitrary:
        """Build from a pair already known to be in canonical form."""
        value = object.__new__(cls)
        value._assign(significand, 0 if significand == 0 else exponent)
        return value

    def _assign(self, significand: int, exponent: int) -> None:
        self._significand = significand
        self._exponent = exponent
        self._precision = digit_count(significand) + max(0, exponent)
        self._scale = max(0, -exponent)

    # --- Properties ---

    @property
    def significand(self) -> int:
        return self._significand

    @property
    def exponent(self) -> int:
        return self._exponent

    @property
    def precision(self) -> int:
        """Total number of significant digits."""
        return self._precision

    @property
    def scale(self) -> int:
        """Number of digits to the right of the decimal point."""
        return self._scale

    @property
    def sign(self) -> int:
        """-1, 0 or 1 for negative, zero or positive values."""
        return (self._significand > 0) - (self._significand < 0)

    def is_zero(self) -> bool:
        return self._significand == 0

    # --- Conversion into Arbitrary ---

    @classmethod
    def from_int(cls, value: int) -> Arbitrary:
        """Create from an integer (exponent 0, then normalized)."""
        return cls(value, 0)

    @classmethod
    def from_decimal(cls, value: Decimal, digit_limit: int | None = None) -> Arbitrary:
        """Create the exact Arbitrary equal to a Decimal.

        Scales the value by increasing powers of ten until it is integral;
        the number of steps taken becomes the (negated) exponent.

        Args:
            value: Finite Decimal to convert
            digit_limit: Maximum number of fractional digits to search.
                Uses DEFAULT_NUMERICS_CONFIG.conversion_digit_limit if not provided.

        Raises:
            ConversionError: If value is NaN or infinite
            PrecisionOverflow: If value has more than digit_limit fractional digits
        """
        if not value.is_finite():
            raise ConversionError(f"Cannot convert non-finite Decimal {value} to Arbitrary")
        limit = (
            DEFAULT_NUMERICS_CONFIG.conversion_digit_limit if digit_limit is None else digit_limit
        )

        # Precision covering every coefficient digit, so scaleb never rounds
        context = decimal.Context(
            prec=max(len(value.as_tuple().digits), 1),
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
        )
        for step in range(limit + 1):
            scaled = value.scaleb(step, context=context)
            if scaled == scaled.to_integral_value(rounding=decimal.ROUND_DOWN):
                return cls(int(scaled), -step)

        logger.warning(
            "arbitrary_conversion_digit_limit_exceeded",
            value=str(value),
            digit_limit=limit,
        )
        raise PrecisionOverflow(
            f"Exact conversion of {value} needs more than {limit} fractional digits"
        )

    @classmethod
    def from_float(cls, value: float, digit_limit: int | None = None) -> Arbitrary:
        """Create from a float using its shortest round-trip decimal form.

        The result reproduces the float as it is printed (``repr``), not its
        exact binary value: ``from_float(0.1)`` is ``1E-1``.

        Raises:
            ConversionError: If value is NaN or infinite
            PrecisionOverflow: If the printed form exceeds digit_limit fractional digits
        """
        if not math.isfinite(value):
            raise ConversionError(f"Cannot convert non-finite float {value!r} to Arbitrary")
        return cls.from_decimal(Decimal(repr(float(value))), digit_limit=digit_limit)

    @classmethod
    def from_scientific(cls, value: Scientific) -> Arbitrary:
        """Create from a Scientific: its significand shifted by its exponent."""
        return cls.from_float(value.significand).x10(value.exponent)

    @classmethod
    def of(cls, value: ArbitraryLike) -> Arbitrary:
        """Convert any supported numeric value to Arbitrary.

        Raises:
            TypeError: If the value's type has no exact conversion
            ConversionError: If a float/Decimal cannot be converted exactly
        """
        if isinstance(value, Arbitrary):
            return value
        if isinstance(value, bool):
            raise TypeError("Cannot convert bool to Arbitrary")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, Decimal):
            return cls.from_decimal(value)
        if isinstance(value, Scientific):
            return cls.from_scientific(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Arbitrary")

    @classmethod
    def try_from(cls, value: ArbitraryLike) -> Arbitrary | None:
        """Convert, returning None instead of raising ConversionError.

        Unlike of(), a value that has no exact finite decimal expansion
        within the configured digit limit yields None.
        """
        try:
            return cls.of(value)
        except ConversionError:
            return None

    # --- Derived views ---

    def abs(self) -> Arbitrary:
        """Absolute value (canonical form does not depend on sign)."""
        return Arbitrary._from_normalized(abs(self._significand), self._exponent)

    def whole_part(self) -> Arbitrary:
        """The value without its fractional part."""
        return self.truncate()

    def fractional_part(self) -> Arbitrary:
        """The value without its whole part."""
        return self.subtract(self.whole_part())

    def x10(self, power: int) -> Arbitrary:
        """Multiply by 10^power by shifting the exponent."""
        return Arbitrary._from_normalized(self._significand, self._exponent + power)

    # --- Precision and rounding ---

    def set_precision(self, digits: int) -> Arbitrary:
        """Keep at most ``digits`` digits of the significand.

        Excess least-significant digits are dropped by truncating toward
        zero (no half-up rounding); the exponent grows by the number of
        digits dropped.
        """
        excess = digit_count(self._significand) - digits
        if excess <= 0:
            return self
        return Arbitrary(
            div_trunc(self._significand, pow10(excess)),
            self._exponent + excess,
        )

    def set_scale(self, decimals: int) -> Arbitrary:
        """Keep at most ``decimals`` digits after the decimal point (truncating)."""
        whole_digits = digit_count(self._significand) + self._exponent
        return self.set_precision(whole_digits + decimals)

    def truncate(self) -> Arbitrary:
        """Drop the fractional part, rounding toward zero."""
        return self.set_scale(0)

    def floor(self) -> Arbitrary:
        """Largest integral value not greater than self."""
        truncated = self.truncate()
        if truncated > self:
            return truncated.subtract(Arbitrary.ONE)
        return truncated

    def ceiling(self) -> Arbitrary:
        """Smallest integral value not less than self."""
        truncated = self.truncate()
        if self > truncated:
            return truncated.add(Arbitrary.ONE)
        return truncated

    def floor_to_integer(self) -> int:
        return self.floor().to_integer()

    def ceiling_to_integer(self) -> int:
        return self.ceiling().to_integer()

    # --- Arithmetic (named interface) ---

    def negate(self) -> Arbitrary:
        return Arbitrary._from_normalized(-self._significand, self._exponent)

    def add(self, other: Arbitrary) -> Arbitrary:
        left, right, exponent = _align(self, other)
        return Arbitrary(left + right, exponent)

    def subtract(self, other: Arbitrary) -> Arbitrary:
        return self.add(other.negate())

    def multiply_by(self, other: Arbitrary) -> Arbitrary:
        """Exact product: significands multiply, exponents add."""
        return Arbitrary(
            self._significand * other._significand,
            self._exponent + other._exponent,
        )

    def scale_by(self, other: Arbitrary) -> Arbitrary:
        return self.multiply_by(other)

    def divide_by(self, other: Arbitrary) -> Arbitrary:
        """Divide using the configured default scale."""
        return self.divide(other)

    def divide(self, divisor: Arbitrary, scale: int | None = None) -> Arbitrary:
        """Divide by another Arbitrary, keeping ``scale`` digits after the point.

        The dividend's significand is padded with zeros so that exact integer
        division yields the requested digits, then the quotient is
        truncated toward zero. For a divisor with exponent 0 the result has
        exactly ``scale`` fractional digits before normalization.

        Args:
            divisor: Value to divide by
            scale: Digits after the decimal point. Uses
                DEFAULT_NUMERICS_CONFIG.division_scale if not provided.

        Raises:
            DivisionByZero: If divisor is zero
            ValueError: If scale is negative
        """
        if divisor._significand == 0:
            raise DivisionByZero(f"Division by zero: {self} / {divisor}")
        exponent_change = self._padding_for(scale)
        quotient = div_trunc(self._significand * pow10(exponent_change), divisor._significand)
        return Arbitrary(quotient, self._exponent - divisor._exponent - exponent_change)

    def sqrt(self, scale: int | None = None) -> Arbitrary:
        """Square root, truncated toward zero.

        The significand is padded exactly as in divide(). Since
        sqrt(s × 10^e) only splits into sqrt(s) × 10^(e/2) for even e, an
        odd exponent first moves one factor of ten into the significand.

        Raises:
            NegativeSquareRoot: If self is negative
            ValueError: If scale is negative
        """
        if self._significand < 0:
            raise NegativeSquareRoot(f"Square root of negative value: {self}")
        exponent_change = self._padding_for(scale)
        padded = self._significand * pow10(exponent_change)
        exponent = self._exponent - exponent_change

        if is_even(exponent):
            return Arbitrary(integer_sqrt(padded), exponent // 2)
        return Arbitrary(integer_sqrt(padded * 10), (exponent - 1) // 2)

    def _padding_for(self, scale: int | None) -> int:
        """Zeros to append to the significand before dividing or rooting."""
        if scale is None:
            scale = DEFAULT_NUMERICS_CONFIG.division_scale
        if scale < 0:
            raise ValueError(f"Scale must be non-negative, got {scale}")
        # Padding never removes digits the value already has
        return max(0, (scale + max(self._exponent, 0)) - self._scale)

    def compare(self, other: Arbitrary) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        left, right, _ = _align(self, other)
        return (left > right) - (left < right)

    # --- Operators ---

    def __neg__(self) -> Arbitrary:
        return self.negate()

    def __pos__(self) -> Arbitrary:
        return self

    def __abs__(self) -> Arbitrary:
        return self.abs()

    def __add__(self, other: object) -> Arbitrary:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: object) -> Arbitrary:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.add(self)

    def __sub__(self, other: object) -> Arbitrary:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.subtract(rhs)

    def __rsub__(self, other: object) -> Arbitrary:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.subtract(self)

    def __mul__(self, other: object) -> Arbitrary:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.multiply_by(rhs)

    def __rmul__(self, other: object) -> Arbitrary:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.multiply_by(self)

    def __truediv__(self, other: object) -> Arbitrary:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divide(rhs)

    def __rtruediv__(self, other: object) -> Arbitrary:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.divide(self)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arbitrary):
            return NotImplemented
        return self._significand == other._significand and self._exponent == other._exponent

    def __hash__(self) -> int:
        return hash((self._significand, self._exponent))

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    # --- Conversion out of Arbitrary ---

    def to_integer(self) -> int:
        """Integer value, truncating any fractional digits toward zero."""
        if self._exponent >= 0:
            return self._significand * pow10(self._exponent)
        return div_trunc(self._significand, pow10(-self._exponent))

    def to_float(self) -> float:
        """Nearest float to the value.

        Raises:
            OverflowError: If the magnitude exceeds the float range
        """
        digits = digit_count(self._significand)
        if digits + self._exponent > _FLOAT_MAX_DIGITS:
            raise OverflowError(f"Arbitrary {self} is too large to convert to float")
        if digits + self._exponent < _FLOAT_MIN_MAGNITUDE:
            return math.copysign(0.0, self._significand)
        if self._exponent >= 0:
            return float(self._significand * pow10(self._exponent))
        # int / int is correctly rounded
        return self._significand / pow10(-self._exponent)

    def to_decimal(self) -> Decimal:
        """Exact Decimal equal to this value."""
        context = decimal.Context(
            prec=max(digit_count(self._significand), 1),
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
        )
        return Decimal(self._significand).scaleb(self._exponent, context=context)

    def to_scientific(self) -> Scientific:
        """Bounded-precision Scientific with a correctly rounded leading significand."""
        if self._significand == 0:
            return Scientific(0.0, 0)
        digits = digit_count(self._significand)
        leading = self._significand / pow10(digits - 1)
        return Scientific(leading, self._exponent + digits - 1)

    def __int__(self) -> int:
        return self.to_integer()

    def __float__(self) -> float:
        return self.to_float()

    def __trunc__(self) -> int:
        return self.to_integer()

    def __floor__(self) -> int:
        return self.floor_to_integer()

    def __ceil__(self) -> int:
        return self.ceiling_to_integer()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._significand != 0

    def __repr__(self) -> str:
        return f"Arbitrary({int_to_string(self._significand)}, {self._exponent})"

    def __str__(self) -> str:
        return f"{int_to_string(self._significand)}E{self._exponent}"


def _align(left: Arbitrary, right: Arbitrary) -> tuple[int, int, int]:
    """Bring two values to a common exponent.

    The operand with the larger exponent has its significand multiplied up
    to the smaller exponent, which is exact.

    Returns:
        (left significand, right significand, common exponent)
    """
    if left._exponent > right._exponent:
        shift = left._exponent - right._exponent
        return left._significand * pow10(shift), right._significand, right._exponent
    shift = right._exponent - left._exponent
    return left._significand, right._significand * pow10(shift), left._exponent


def _coerce(value: object) -> Arbitrary | None:
    """Convert an operator operand, or None if its type is not supported."""
    if isinstance(value, Arbitrary):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return Arbitrary.of(value)
    return None


Arbitrary.ZERO = Arbitrary(0, 0)
Arbitrary.ONE = Arbitrary(1, 0)
