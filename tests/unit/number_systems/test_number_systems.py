"""Tests for positional number systems and Roman numerals."""

import pytest

from numerics.errors import InvalidDigit, NumberSystemError, RomanRangeError
from numerics.number_systems import (
    RADIX_SYSTEMS,
    ROMAN_MAX,
    Binary,
    DecimalSystem,
    Hexadecimal,
    Roman,
    Septemvigesimal,
    Tritrigesimal,
    get_number_system,
)

BINARY_CASES = [(0, "0"), (1, "1"), (2, "10"), (3, "11"), (4, "100"), (14, "1110")]

HEX_CASES = list(
    zip(
        range(1, 21),
        "1 2 3 4 5 6 7 8 9 a b c d e f 10 11 12 13 14".split(),
    )
)

ROMAN_CASES = list(
    zip(
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 20, 30, 40, 50, 60, 70, 80, 90]
        + [100, 200, 300, 400, 500, 600, 700, 800, 900, 1000, 1001],
        "I II III IV V VI VII VIII IX X XI XX XXX XL L LX LXX LXXX XC".split()
        + "C CC CCC CD D DC DCC DCCC CM M MI".split(),
    )
)


class TestBinary:
    @pytest.mark.parametrize("value,text", BINARY_CASES)
    def test_to_string(self, value, text):
        assert Binary().to_string(value) == text

    @pytest.mark.parametrize("value,text", BINARY_CASES)
    def test_parse(self, value, text):
        assert Binary().parse(text) == value

    def test_invalid_digit_raises(self):
        with pytest.raises(InvalidDigit, match="base 2"):
            Binary().parse("102")


class TestHexadecimal:
    @pytest.mark.parametrize("value,text", HEX_CASES)
    def test_to_string(self, value, text):
        assert Hexadecimal().to_string(value) == text

    @pytest.mark.parametrize("value,text", HEX_CASES)
    def test_parse(self, value, text):
        assert Hexadecimal().parse(text) == value

    def test_parse_is_case_insensitive(self):
        assert Hexadecimal().parse("FF") == 255
        assert Hexadecimal().parse("fF") == 255

    def test_invalid_digit_raises(self):
        with pytest.raises(InvalidDigit):
            Hexadecimal().parse("g")


class TestBaseNumberSystem:
    """Tests shared by every positional system."""

    def test_negative_values(self):
        assert Binary().to_string(-14) == "-1110"
        assert Binary().parse("-1110") == -14

    def test_empty_string_parses_to_zero(self):
        assert DecimalSystem().parse("") == 0

    def test_big_values(self):
        value = 3**200
        assert DecimalSystem().to_string(value) == str(value)
        assert Hexadecimal().parse(Hexadecimal().to_string(value)) == value

    def test_decimal_system_rejects_letters(self):
        with pytest.raises(InvalidDigit):
            DecimalSystem().parse("1a")

    def test_septemvigesimal_uses_space_for_zero(self):
        system = Septemvigesimal()
        assert system.to_string(0) == " "
        assert system.to_string(27) == "a "
        assert system.parse("A ") == 27

    def test_tritrigesimal_skips_confusable_letters(self):
        system = Tritrigesimal()
        assert system.radix == 33
        for letter in "ioq":
            assert letter not in system.CHARACTER_SET
        with pytest.raises(InvalidDigit):
            system.parse("o")

    def test_radix_matches_character_set(self):
        for radix, system in RADIX_SYSTEMS.items():
            assert system().radix == radix

    def test_supported_radixes(self):
        assert sorted(RADIX_SYSTEMS) == [2, 3, 4, 5, 6, 7, 8, 9, 10, 15, 16, 19, 20, 22, 27, 28, 33]

    def test_get_number_system(self):
        assert isinstance(get_number_system(16), Hexadecimal)
        assert get_number_system(2).to_string(14) == "1110"

    def test_get_unknown_radix_raises(self):
        with pytest.raises(NumberSystemError):
            get_number_system(11)


class TestRoman:
    @pytest.mark.parametrize("value,text", ROMAN_CASES)
    def test_to_string(self, value, text):
        assert Roman().to_string(value) == text

    @pytest.mark.parametrize("value,text", ROMAN_CASES)
    def test_parse(self, value, text):
        assert Roman().parse(text) == value

    def test_subtractive_forms(self):
        assert Roman().parse("MCMXCIV") == 1994
        assert Roman().to_string(1994) == "MCMXCIV"
        assert Roman().to_string(ROMAN_MAX) == "MMMCMXCIX"

    def test_parse_lowercase(self):
        assert Roman().parse("xiv") == 14

    def test_zero_and_negative_are_empty(self):
        assert Roman().to_string(0) == ""
        assert Roman().to_string(-5) == ""
        assert Roman().parse("") == 0

    def test_out_of_range_raises(self):
        with pytest.raises(RomanRangeError):
            Roman().to_string(ROMAN_MAX + 1)
        with pytest.raises(RomanRangeError):
            Roman().parse("MMMM")

    def test_invalid_character_raises(self):
        with pytest.raises(InvalidDigit):
            Roman().parse("XIZ")
