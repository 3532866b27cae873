"""Number system base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from numerics.errors import InvalidDigit


class NumberSystem(ABC):
    """System for writing integers as strings."""

    @abstractmethod
    def parse(self, text: str) -> int:
        """Parse a string written in this number system into an int."""
        ...

    @abstractmethod
    def to_string(self, value: int) -> str:
        """Write an int in this number system."""
        ...


class BaseNumberSystem(NumberSystem):
    """Positional system where each digit is a single character.

    The radix is the size of the character set; ``CHARACTER_SET[i]`` is the
    digit with value i. Negative values are written with a leading ``-``.

    Subclasses set CHARACTER_SET and, for letter digits, CASE_INSENSITIVE.
    """

    CHARACTER_SET: ClassVar[str] = ""
    CASE_INSENSITIVE: ClassVar[bool] = False

    def __init__(self) -> None:
        self._digit_values = {char: index for index, char in enumerate(self.CHARACTER_SET)}

    @property
    def radix(self) -> int:
        return len(self.CHARACTER_SET)

    def prepare_input(self, text: str) -> str:
        return text.lower() if self.CASE_INSENSITIVE else text

    def parse(self, text: str) -> int:
        """Parse digits, most significant first.

        An empty string parses to 0.

        Raises:
            InvalidDigit: If a character is not part of the character set
        """
        text = self.prepare_input(text)
        negative = text.startswith("-")
        if negative:
            text = text[1:]

        result = 0
        for char in text:
            digit = self._digit_values.get(char)
            if digit is None:
                raise InvalidDigit(
                    f"Character {char!r} doesn't exist in the base {self.radix} number system"
                )
            result = result * self.radix + digit
        return -result if negative else result

    def to_string(self, value: int) -> str:
        radix = self.radix
        magnitude = abs(value)
        digits: list[str] = []
        while True:
            magnitude, remainder = divmod(magnitude, radix)
            digits.append(self.CHARACTER_SET[remainder])
            if magnitude == 0:
                break
        if value < 0:
            digits.append("-")
        return "".join(reversed(digits))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
