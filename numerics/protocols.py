"""Arithmetic protocol implemented by the numeric value types.

Arbitrary and Scientific implement Numeric; their operators delegate to
the same named methods.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Numeric(Protocol[T]):
    """Protocol for types supporting all basic arithmetic operations.

    Implementations return new values; none of these methods mutate self.
    """

    def negate(self) -> T: ...

    def sqrt(self) -> T: ...

    def add(self, other: T) -> T: ...

    def subtract(self, other: T) -> T: ...

    def multiply_by(self, other: T) -> T: ...

    def divide_by(self, other: T) -> T: ...
