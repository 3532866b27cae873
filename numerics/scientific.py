"""Double-precision numbers in scientific notation.

Scientific pairs a float significand with an int exponent so magnitudes far
outside the float range (e.g. 1.5E400) can still be multiplied and compared.
It is fast but holds only about 17 significant digits; use Arbitrary when
digits must not be lost.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from numerics.errors import DivisionByZero, NegativeSquareRoot

if TYPE_CHECKING:
    from numerics.math.arbitrary import Arbitrary

__all__ = ["Scientific"]


class Scientific:
    """Float significand × 10^exponent, normalized so 1 <= |significand| < 10.

    Zero is stored as (0.0, 0).

    Attributes:
        significand: Leading digits as a float (read-only)
        exponent: Power of ten (read-only)
    """

    __slots__ = ("_significand", "_exponent")
    _significand: float
    _exponent: int

    def __init__(self, significand: float, exponent: int = 0) -> None:
        """Create a normalized Scientific.

        Raises:
            ValueError: If significand is NaN or infinite
        """
        if not math.isfinite(significand):
            raise ValueError(f"Scientific significand must be finite, got {significand!r}")
        self._significand, self._exponent = _normalize(float(significand), exponent)

    @classmethod
    def from_float(cls, value: float) -> Scientific:
        return cls(value, 0)

    @property
    def significand(self) -> float:
        return self._significand

    @property
    def exponent(self) -> int:
        return self._exponent

    @property
    def sign(self) -> int:
        return (self._significand > 0) - (self._significand < 0)

    def abs(self) -> Scientific:
        return Scientific(abs(self._significand), self._exponent)

    def set_exponent(self, exponent: int) -> tuple[float, int]:
        """Rewrite the value with the given exponent.

        The result is generally not normalized, so it is returned as a raw
        (significand, exponent) pair rather than a Scientific.
        """
        if exponent == self._exponent:
            return self._significand, self._exponent
        return self._significand * 10.0 ** (self._exponent - exponent), exponent

    def shift_exponent(self, delta: int) -> tuple[float, int]:
        """Rewrite the value with its exponent moved by delta."""
        return self.set_exponent(self._exponent + delta)

    def x10(self, power: int) -> Scientific:
        """Multiply by 10^power."""
        return Scientific(self._significand, self._exponent + power)

    def floor(self) -> Scientific:
        """Largest integral value not greater than self."""
        if self._exponent >= 16 or self._significand == 0:
            # Every float significand at this magnitude is already integral
            return self
        if self._exponent < 0:
            return Scientific(-1.0 if self._significand < 0 else 0.0, 0)
        return Scientific(float(math.floor(self._significand * 10.0**self._exponent)), 0)

    # --- Arithmetic (named interface) ---

    def negate(self) -> Scientific:
        return Scientific(-self._significand, self._exponent)

    def add(self, other: Scientific) -> Scientific:
        """Sum at the larger of the two exponents."""
        common = max(self._exponent, other._exponent)
        left, _ = self.set_exponent(common)
        right, _ = other.set_exponent(common)
        return Scientific(left + right, common)

    def subtract(self, other: Scientific) -> Scientific:
        return self.add(other.negate())

    def multiply_by(self, other: Scientific) -> Scientific:
        return Scientific(self._significand * other._significand, self._exponent + other._exponent)

    def scale_by(self, other: Scientific) -> Scientific:
        return self.multiply_by(other)

    def divide_by(self, other: Scientific) -> Scientific:
        """Quotient of the significands at the difference of the exponents.

        Raises:
            DivisionByZero: If other is zero
        """
        if other._significand == 0:
            raise DivisionByZero(f"Division by zero: {self} / {other}")
        return Scientific(self._significand / other._significand, self._exponent - other._exponent)

    def sqrt(self) -> Scientific:
        """Square root, splitting off an even power of ten.

        Raises:
            NegativeSquareRoot: If self is negative
        """
        if self._significand < 0:
            raise NegativeSquareRoot(f"Square root of negative value: {self}")
        if self._exponent % 2 == 0:
            return Scientific(math.sqrt(self._significand), self._exponent // 2)
        return Scientific(math.sqrt(self._significand * 10), (self._exponent - 1) // 2)

    def compare(self, other: Scientific) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        if self.sign != other.sign:
            return (self.sign > other.sign) - (self.sign < other.sign)
        # Same sign, both normalized: a larger exponent means a larger magnitude
        if self._exponent != other._exponent:
            magnitude = (self._exponent > other._exponent) - (self._exponent < other._exponent)
            return magnitude * self.sign
        return (self._significand > other._significand) - (self._significand < other._significand)

    def to_arbitrary(self) -> Arbitrary:
        from numerics.math.arbitrary import Arbitrary

        return Arbitrary.from_scientific(self)

    # --- Operators ---

    def __neg__(self) -> Scientific:
        return self.negate()

    def __pos__(self) -> Scientific:
        return self

    def __abs__(self) -> Scientific:
        return self.abs()

    def __add__(self, other: object) -> Scientific:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: object) -> Scientific:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.add(self)

    def __sub__(self, other: object) -> Scientific:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.subtract(rhs)

    def __rsub__(self, other: object) -> Scientific:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.subtract(self)

    def __mul__(self, other: object) -> Scientific:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.multiply_by(rhs)

    def __rmul__(self, other: object) -> Scientific:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.multiply_by(self)

    def __truediv__(self, other: object) -> Scientific:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divide_by(rhs)

    def __rtruediv__(self, other: object) -> Scientific:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.divide_by(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scientific):
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

    def __float__(self) -> float:
        """Convert back into a float.

        Raises:
            OverflowError: If the value is outside the float range
        """
        return self._significand * 10.0**self._exponent

    def __bool__(self) -> bool:
        return self._significand != 0

    def __repr__(self) -> str:
        return f"Scientific({self._significand!r}, {self._exponent})"

    def __str__(self) -> str:
        return f"{self._significand}E{self._exponent}"


def _normalize(significand: float, exponent: int) -> tuple[float, int]:
    """Move powers of ten between significand and exponent until 1 <= |s| < 10."""
    if significand == 0:
        return 0.0, 0
    magnitude = abs(significand)
    power = math.floor(math.log10(magnitude))
    if power > 0:
        magnitude = magnitude / 10.0**power
    elif power < 0:
        # Split the scaling so subnormals do not multiply by an infinite 10**324
        half = -power // 2
        magnitude = magnitude * 10.0**half * 10.0 ** (-power - half)
    # log10 can land one off near powers of ten
    if magnitude >= 10:
        magnitude /= 10
        power += 1
    elif magnitude < 1:
        magnitude *= 10
        power -= 1
    return math.copysign(magnitude, significand), exponent + power


def _coerce(value: object) -> Scientific | None:
    if isinstance(value, Scientific):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return Scientific(float(value), 0)
    return None
