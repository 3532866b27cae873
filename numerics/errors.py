"""Error classes for the numerics library.

Every error derives from NumericsError, and each also derives from the
builtin exception callers would expect (ZeroDivisionError, ValueError,
TypeError), so ``except ZeroDivisionError`` keeps working.
"""


class NumericsError(ArithmeticError):
    """Base class for numerics errors."""

    pass


class DivisionByZero(NumericsError, ZeroDivisionError):
    """Division by a zero significand."""

    pass


class NegativeSquareRoot(NumericsError, ValueError):
    """Square root of a negative value."""

    pass


class ConversionError(NumericsError, ValueError):
    """A value could not be converted exactly into the target type."""

    pass


class PrecisionOverflow(ConversionError):
    """Exact conversion needed more fractional digits than the configured limit."""

    pass


class CalculatorNotFound(NumericsError, TypeError):
    """No calculator is registered for the value's type."""

    pass


class NumberSystemError(NumericsError, ValueError):
    """Base class for number system encoding/decoding errors."""

    pass


class InvalidDigit(NumberSystemError):
    """Character is not a digit of the number system."""

    pass


class RomanRangeError(NumberSystemError):
    """Value cannot be written in Roman numerals (valid range is 1 to 3999)."""

    pass
