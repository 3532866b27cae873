"""Big-integer helpers shared by the decimal types.

All functions operate on plain Python ints of any size and never go through
``str()``, which CPython caps at a few thousand digits.
"""

from __future__ import annotations

import decimal
import math
from decimal import Decimal

from numerics.errors import DivisionByZero, NegativeSquareRoot

__all__ = [
    "div_trunc",
    "digit_count",
    "integer_sqrt",
    "is_even",
    "pow10",
    "int_to_string",
    "string_to_int",
]


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity, but decimal digit
    removal must truncate toward zero so that -2.7 truncates to -2.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        DivisionByZero: If b is zero

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        div_trunc(-7, 3) = -2 (truncates toward zero)
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {int_to_string(a)} / 0")

    # Same sign: result is non-negative, // already truncates
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def pow10(n: int) -> int:
    """Return 10**n for n >= 0."""
    if n < 0:
        raise ValueError(f"pow10 requires a non-negative exponent, got {n}")
    return 10**n


def int_to_string(value: int) -> str:
    """Decimal string of an int of any size.

    ``str(int)`` raises ValueError past ``sys.get_int_max_str_digits()``
    (4300 by default); Decimal's integer formatting has no such cap.
    """
    return format(Decimal(value), "f")


def string_to_int(text: str) -> int:
    """Parse a signed decimal integer string of any length.

    Raises:
        ValueError: If text is not an integer
    """
    try:
        value = Decimal(text)
    except decimal.InvalidOperation as exc:
        raise ValueError(f"Not a decimal integer: {text[:50]!r}") from exc
    if not value.is_finite() or value != value.to_integral_value():
        raise ValueError(f"Not a decimal integer: {text[:50]!r}")
    return int(value)


def is_even(n: int) -> bool:
    return n % 2 == 0


def digit_count(value: int) -> int:
    """Count the decimal digits of an integer, ignoring its sign.

    Uses ``ceil(log10(|value|))`` as a first guess. math.log10 accepts ints
    of any size but its result is a float, so the guess can be off by one
    near powers of ten; comparisons against ``10**candidate`` correct it.

    Returns:
        0 for 0, 1 for -1/1, otherwise the number of digits of |value|.
    """
    if value == 0:
        return 0
    value = abs(value)
    if value == 1:
        return 1

    candidate = math.ceil(math.log10(value))
    # digit count is the smallest d with value < 10**d
    while value >= 10**candidate:
        candidate += 1
    while candidate > 1 and value < 10 ** (candidate - 1):
        candidate -= 1
    return candidate


def integer_sqrt(value: int) -> int:
    """Floor of the square root of a non-negative integer.

    Binary search between 0 and ``value >> 1``: the midpoint's square is
    compared against the target and the bounds narrowed until they are
    adjacent. Inputs below 9 are answered directly, which also guarantees
    ``(value >> 1) ** 2 > value`` for the search.

    Args:
        value: Non-negative integer

    Returns:
        The largest n with n * n <= value

    Raises:
        NegativeSquareRoot: If value is negative
    """
    if value < 0:
        raise NegativeSquareRoot(f"Square root of negative integer: {int_to_string(value)}")
    if value < 9:
        if value == 0:
            return 0
        if value < 4:
            return 1
        return 2

    low = 0
    high = value >> 1
    # Invariant: low * low <= value < high * high
    while high > low + 1:
        mid = (low + high) >> 1
        square = mid * mid
        if square == value:
            return mid
        if square > value:
            high = mid
        else:
            low = mid
    return low
