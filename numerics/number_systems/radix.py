"""Positional number systems from base 2 to base 33."""

from __future__ import annotations

import string

from numerics.errors import NumberSystemError
from numerics.number_systems.base import BaseNumberSystem

_DIGITS = string.digits
_LETTERS = string.ascii_lowercase


class Binary(BaseNumberSystem):
    """Base 2."""

    CHARACTER_SET = _DIGITS[:2]


class Ternary(BaseNumberSystem):
    """Base 3."""

    CHARACTER_SET = _DIGITS[:3]


class Quaternary(BaseNumberSystem):
    """Base 4."""

    CHARACTER_SET = _DIGITS[:4]


class Quinary(BaseNumberSystem):
    """Base 5."""

    CHARACTER_SET = _DIGITS[:5]


class Senary(BaseNumberSystem):
    """Base 6."""

    CHARACTER_SET = _DIGITS[:6]


class Septenary(BaseNumberSystem):
    """Base 7."""

    CHARACTER_SET = _DIGITS[:7]


class Octal(BaseNumberSystem):
    """Base 8."""

    CHARACTER_SET = _DIGITS[:8]


class Nonary(BaseNumberSystem):
    """Base 9."""

    CHARACTER_SET = _DIGITS[:9]


class DecimalSystem(BaseNumberSystem):
    """Base 10."""

    CHARACTER_SET = _DIGITS


class Pentadecimal(BaseNumberSystem):
    """Base 15 (0-9, a-e)."""

    CHARACTER_SET = _DIGITS + _LETTERS[:5]
    CASE_INSENSITIVE = True


class Hexadecimal(BaseNumberSystem):
    """Base 16 (0-9, a-f)."""

    CHARACTER_SET = _DIGITS + _LETTERS[:6]
    CASE_INSENSITIVE = True


class Enneadecimal(BaseNumberSystem):
    """Base 19 (0-9, a-i)."""

    CHARACTER_SET = _DIGITS + _LETTERS[:9]
    CASE_INSENSITIVE = True


class Vigesimal(BaseNumberSystem):
    """Base 20 (0-9, a-j)."""

    CHARACTER_SET = _DIGITS + _LETTERS[:10]
    CASE_INSENSITIVE = True


class Duovigesimal(BaseNumberSystem):
    """Base 22 (0-9, a-l)."""

    CHARACTER_SET = _DIGITS + _LETTERS[:12]
    CASE_INSENSITIVE = True


class Septemvigesimal(BaseNumberSystem):
    """Base 27: space for zero, then a-z."""

    CHARACTER_SET = " " + _LETTERS
    CASE_INSENSITIVE = True


class Octovigesimal(BaseNumberSystem):
    """Base 28 (0-9, a-r)."""

    CHARACTER_SET = _DIGITS + _LETTERS[:18]
    CASE_INSENSITIVE = True


class Tritrigesimal(BaseNumberSystem):
    """Base 33: 0-9 and a-z without i, o and q."""

    CHARACTER_SET = _DIGITS + "".join(c for c in _LETTERS if c not in "ioq")
    CASE_INSENSITIVE = True


RADIX_SYSTEMS: dict[int, type[BaseNumberSystem]] = {
    len(system.CHARACTER_SET): system
    for system in (
        Binary,
        Ternary,
        Quaternary,
        Quinary,
        Senary,
        Septenary,
        Octal,
        Nonary,
        DecimalSystem,
        Pentadecimal,
        Hexadecimal,
        Enneadecimal,
        Vigesimal,
        Duovigesimal,
        Septemvigesimal,
        Octovigesimal,
        Tritrigesimal,
    )
}


def get_number_system(radix: int) -> BaseNumberSystem:
    """Return a number system instance for the given radix.

    Raises:
        NumberSystemError: If no system with that radix exists
    """
    system = RADIX_SYSTEMS.get(radix)
    if system is None:
        supported = ", ".join(str(r) for r in sorted(RADIX_SYSTEMS))
        raise NumberSystemError(f"No number system with radix {radix} (supported: {supported})")
    return system()
