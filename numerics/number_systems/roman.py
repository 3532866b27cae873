"""Roman numerals."""

from __future__ import annotations

from numerics.errors import InvalidDigit, RomanRangeError
from numerics.number_systems.base import NumberSystem

# Values of 4000 and above need overlined numerals, which are not supported
ROMAN_MAX = 3999

_NUMERAL_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_THOUSANDS = ("", "M", "MM", "MMM")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")


class Roman(NumberSystem):
    """Roman numerals with subtractive notation (IV, XC, CM), 1 to 3999."""

    def parse(self, text: str) -> int:
        """Parse a numeral, case-insensitively. An empty string parses to 0.

        Reading right to left, a numeral smaller than the largest seen so
        far is subtracted, otherwise added.

        Raises:
            InvalidDigit: If a character is not a Roman numeral
            RomanRangeError: If the total is 4000 or more
        """
        total = 0
        largest = 0
        for char in reversed(text.upper()):
            value = _NUMERAL_VALUES.get(char)
            if value is None:
                raise InvalidDigit(f"Character {char!r} doesn't exist in the Roman number system")
            if value < largest:
                total -= value
            else:
                total += value
                largest = value

        if total > ROMAN_MAX:
            raise RomanRangeError(f"Roman numerals can only represent numbers up to {ROMAN_MAX}")
        return total

    def to_string(self, value: int) -> str:
        """Write a value as a numeral; zero and negative values give ``""``.

        Raises:
            RomanRangeError: If value is 4000 or more
        """
        if value <= 0:
            return ""
        if value > ROMAN_MAX:
            raise RomanRangeError(f"Roman numerals can only represent numbers up to {ROMAN_MAX}")
        return (
            _THOUSANDS[value // 1000]
            + _HUNDREDS[value % 1000 // 100]
            + _TENS[value % 100 // 10]
            + _ONES[value % 10]
        )

    def __repr__(self) -> str:
        return "Roman()"
