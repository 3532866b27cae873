"""String encodings of integers: positional radix systems and Roman numerals.

Usage:
    from numerics.number_systems import Hexadecimal, Roman, get_number_system

    Hexadecimal().to_string(255)        # "ff"
    Roman().parse("MCMXCIV")            # 1994
    get_number_system(2).to_string(14)  # "1110"
"""

from numerics.number_systems.base import BaseNumberSystem, NumberSystem
from numerics.number_systems.radix import (
    RADIX_SYSTEMS,
    Binary,
    DecimalSystem,
    Duovigesimal,
    Enneadecimal,
    Hexadecimal,
    Nonary,
    Octal,
    Octovigesimal,
    Pentadecimal,
    Quaternary,
    Quinary,
    Senary,
    Septemvigesimal,
    Septenary,
    Ternary,
    Tritrigesimal,
    Vigesimal,
    get_number_system,
)
from numerics.number_systems.roman import ROMAN_MAX, Roman

__all__ = [
    # Base classes
    "NumberSystem",
    "BaseNumberSystem",
    # Radix systems
    "Binary",
    "Ternary",
    "Quaternary",
    "Quinary",
    "Senary",
    "Septenary",
    "Octal",
    "Nonary",
    "DecimalSystem",
    "Pentadecimal",
    "Hexadecimal",
    "Enneadecimal",
    "Vigesimal",
    "Duovigesimal",
    "Septemvigesimal",
    "Octovigesimal",
    "Tritrigesimal",
    "RADIX_SYSTEMS",
    "get_number_system",
    # Roman
    "Roman",
    "ROMAN_MAX",
]
