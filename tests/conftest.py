"""Shared fixtures for the boiling simulator tests."""

import dataclasses

import matplotlib
matplotlib.use("Agg")

import pytest

from boilsim.substances import SubstanceProperties, load_substance
from boilsim.vapor_pressure import AntoineCoefficients


WATER_ANTOINE = AntoineCoefficients(a=8.07131, b=1730.63, c=233.426, t_min_c=1.0, t_max_c=100.0)


@pytest.fixture
def water() -> SubstanceProperties:
    return load_substance("water")


@pytest.fixture
def saltwater() -> SubstanceProperties:
    return load_substance("saltwater")


@pytest.fixture
def make_substance():
    """Build a water-like substance with selected fields overridden."""
    base = SubstanceProperties(
        id="test-fluid",
        name="Test Fluid",
        specific_heat=4.186,
        heat_of_vaporization=2257.0,
        boiling_point_sea_level=100.0,
        altitude_lapse_rate=0.0033,
        antoine_coefficients=WATER_ANTOINE,
        cooling_coefficient=0.0015,
        can_boil=True,
    )

    def _make(**overrides) -> SubstanceProperties:
        return dataclasses.replace(base, **overrides)

    return _make
