"""Numerics - exact arbitrary-precision decimal arithmetic."""

from numerics.calculators import (
    DEFAULT_CALCULATOR_REGISTRY,
    Calculator,
    CalculatorRegistry,
    get_calculator,
)
from numerics.config import DEFAULT_NUMERICS_CONFIG, NumericsConfig
from numerics.errors import (
    CalculatorNotFound,
    ConversionError,
    DivisionByZero,
    NegativeSquareRoot,
    NumericsError,
    PrecisionOverflow,
)
from numerics.fraction import Fraction
from numerics.math.arbitrary import Arbitrary
from numerics.protocols import Numeric
from numerics.scientific import Scientific
from numerics.vector import Vec3

__version__ = "0.1.0"
__all__ = [
    # Numbers
    "Arbitrary",
    "Scientific",
    "Fraction",
    "Vec3",
    # Arithmetic dispatch
    "Numeric",
    "Calculator",
    "CalculatorRegistry",
    "DEFAULT_CALCULATOR_REGISTRY",
    "get_calculator",
    # Config
    "NumericsConfig",
    "DEFAULT_NUMERICS_CONFIG",
    # Errors
    "NumericsError",
    "DivisionByZero",
    "NegativeSquareRoot",
    "ConversionError",
    "PrecisionOverflow",
    "CalculatorNotFound",
    "__version__",
]
