"""Library-wide numeric constants.

Centralizes the defaults used by division, square root and exact
conversion when no explicit scale or digit limit is supplied.
"""

# Digits kept after the decimal point by divide/sqrt when no scale is given
DEFAULT_DIVISION_SCALE = 50

# Ceiling on the power-of-ten search used by exact conversions.
# A double needs at most 324 fractional digits (5e-324), so the default
# leaves headroom for Decimal inputs as well.
MAX_CONVERSION_DIGITS = 1_000

# Environment variables read by NumericsConfig.from_env()
ENV_DIVISION_SCALE = "NUMERICS_DIVISION_SCALE"
ENV_CONVERSION_DIGIT_LIMIT = "NUMERICS_CONVERSION_DIGIT_LIMIT"
