"""Pytest configuration and fixtures."""

import pytest

from numerics import Arbitrary, CalculatorRegistry
from numerics.calculators import build_default_registry


@pytest.fixture
def eight_point_two() -> Arbitrary:
    """8.2 stored as 82E-1."""
    return Arbitrary(82, -1)


@pytest.fixture
def one_point_four_four() -> Arbitrary:
    """1.44 stored as 144E-2."""
    return Arbitrary(144, -2)


@pytest.fixture
def registry() -> CalculatorRegistry:
    """Fresh calculator registry with the default registrations.

    Tests that register or unregister types use this instead of the
    module-level default so they cannot leak into each other.
    """
    return build_default_registry()
