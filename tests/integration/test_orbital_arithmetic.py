"""End-to-end arithmetic on Earth's orbit with every number type.

The semi-minor axis of an ellipse is ``a * sqrt(1 - e**2)``. For Earth
(a = 149598073 km, e = 0.01671022) that is about 149577185.30 km.
"""

import math

import pytest

from numerics import Arbitrary, Fraction, Scientific, Vec3
from numerics.models import ArbitraryPayload

# Semi-major axis of Earth's orbit in km, and its eccentricity
AU_KM = 149598073
EARTH_ECCENTRICITY = 0.01671022
SEMI_MINOR_AXIS_KM = 149577185.30


class TestSemiMinorAxis:
    """The same formula evaluated with floats, Scientific and Arbitrary."""

    def test_float(self):
        result = AU_KM * math.sqrt(1 - EARTH_ECCENTRICITY * EARTH_ECCENTRICITY)
        assert result == pytest.approx(SEMI_MINOR_AXIS_KM, abs=0.01)

    def test_scientific(self):
        factor = Scientific(1 - EARTH_ECCENTRICITY * EARTH_ECCENTRICITY).sqrt()
        result = Scientific(AU_KM) * factor
        assert float(result) == pytest.approx(SEMI_MINOR_AXIS_KM, abs=0.01)

    def test_arbitrary_from_float_factor(self):
        factor = Arbitrary.of(1 - EARTH_ECCENTRICITY * EARTH_ECCENTRICITY).sqrt()
        result = Arbitrary(AU_KM) * factor
        assert float(result) == pytest.approx(SEMI_MINOR_AXIS_KM, abs=0.01)

    def test_arbitrary_exact_factor(self):
        """Squaring the eccentricity exactly gives the same axis."""
        eccentricity = Arbitrary.of(EARTH_ECCENTRICITY)
        squared = eccentricity * eccentricity
        assert squared == Arbitrary(2792314524484, -16)

        result = Arbitrary(AU_KM) * (Arbitrary.ONE - squared).sqrt()
        assert float(result) == pytest.approx(SEMI_MINOR_AXIS_KM, abs=0.01)
        assert result.floor_to_integer() == 149577185

    def test_arbitrary_agrees_with_scientific(self):
        arbitrary = Arbitrary(AU_KM) * Arbitrary.of(1 - EARTH_ECCENTRICITY**2).sqrt()
        scientific = Scientific(AU_KM) * Scientific(1 - EARTH_ECCENTRICITY**2).sqrt()
        assert float(arbitrary.to_scientific()) == pytest.approx(float(scientific), rel=1e-12)


class TestGenericContainers:
    """Fractions and vectors built on Arbitrary elements."""

    def test_eccentricity_as_fraction(self):
        eccentricity = Fraction(Arbitrary(1671022), Arbitrary(10**8))
        assert eccentricity.value() == Arbitrary.of(EARTH_ECCENTRICITY)

    def test_perihelion_distance(self):
        """Distance from the sun at perihelion is a * (1 - e)."""
        sun = Vec3(Arbitrary.ZERO, Arbitrary.ZERO, Arbitrary.ZERO)
        axis = Arbitrary(AU_KM) * (1 - Arbitrary.of(EARTH_ECCENTRICITY))
        earth = Vec3(axis, Arbitrary.ZERO, Arbitrary.ZERO)

        distance = Vec3.distance(sun, earth)
        assert distance == axis
        assert float(distance) == pytest.approx(147098256.2886, abs=0.001)

    def test_payload_preserves_every_digit(self):
        result = Arbitrary(AU_KM) * Arbitrary.of(1 - EARTH_ECCENTRICITY**2).sqrt()
        payload = ArbitraryPayload.from_arbitrary(result)
        assert payload.to_arbitrary() == result
