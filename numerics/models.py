"""Pydantic integration for Arbitrary values.

Arbitrary values travel over the wire as a significand/exponent pair with
the significand written as a decimal integer string, so big significands
survive JSON parsers that read numbers as doubles:

    {"significand": "144", "exponent": -2}

Usage:
    class Orbit(BaseModel):
        semi_major_axis: ArbitraryNumber

    Orbit(semi_major_axis=149598073)
    Orbit.model_validate({"semi_major_axis": {"significand": "144", "exponent": -2}})
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from numerics.math.arbitrary import Arbitrary
from numerics.math.integers import int_to_string, string_to_int


def validate_integer_string(value: Any) -> str:
    """Validate a signed decimal integer given as int or string.

    Args:
        value: Value to validate (string or int)

    Returns:
        The integer as a decimal string

    Raises:
        ValueError: If value is not an int or a decimal integer string
    """
    if isinstance(value, bool):
        raise ValueError("Significand must be an integer, got bool")
    if isinstance(value, int):
        return int_to_string(value)
    if not isinstance(value, str):
        raise ValueError(f"Significand must be string or int, got {type(value).__name__}")

    digits = value[1:] if value.startswith("-") else value
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"Significand must be a decimal integer string: '{value}'")
    return value


# Signed integer as decimal string (validated)
IntegerString = Annotated[
    str,
    BeforeValidator(validate_integer_string),
    Field(description="Signed integer as decimal string"),
]


class ArbitraryPayload(BaseModel):
    """Wire representation of an Arbitrary value."""

    significand: IntegerString
    exponent: int

    def to_arbitrary(self) -> Arbitrary:
        return Arbitrary(string_to_int(self.significand), self.exponent)

    @classmethod
    def from_arbitrary(cls, value: Arbitrary) -> ArbitraryPayload:
        return cls(significand=int_to_string(value.significand), exponent=value.exponent)


def validate_arbitrary(value: Any) -> Arbitrary:
    """Convert an incoming field value to Arbitrary.

    Accepts Arbitrary, int, float, Decimal, or a significand/exponent
    mapping. Decimal strings such as "1.44" are rejected.

    Raises:
        ValueError: If the value cannot be converted exactly
    """
    if isinstance(value, Arbitrary):
        return value
    if isinstance(value, bool):
        raise ValueError("Arbitrary value cannot be a bool")
    if isinstance(value, (int, float, Decimal)):
        return Arbitrary.of(value)
    if isinstance(value, Mapping):
        return ArbitraryPayload.model_validate(value).to_arbitrary()
    raise ValueError(f"Cannot convert {type(value).__name__} to Arbitrary")


def serialize_arbitrary(value: Arbitrary) -> dict[str, Any]:
    return {"significand": int_to_string(value.significand), "exponent": value.exponent}


class _ArbitraryPydanticAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_arbitrary,
            serialization=core_schema.plain_serializer_function_ser_schema(serialize_arbitrary),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, _handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return ArbitraryPayload.model_json_schema()


# Arbitrary field type for pydantic models
ArbitraryNumber = Annotated[Arbitrary, _ArbitraryPydanticAnnotation]
