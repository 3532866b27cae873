"""Mathematical primitives for the numerics library.

This package provides:
- Arbitrary: arbitrary-precision decimal arithmetic
- Integer helpers: digit counting, truncating division, integer square root
"""

from numerics.math.arbitrary import Arbitrary, ArbitraryLike
from numerics.math.integers import digit_count, div_trunc, integer_sqrt

__all__ = ["Arbitrary", "ArbitraryLike", "digit_count", "div_trunc", "integer_sqrt"]
