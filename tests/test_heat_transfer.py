#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Heat Transfer Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
License:        MIT License
================================================================================
"""

import math

import pytest
from boilsim.heat_transfer import HeatResult, apply_heat_energy, heating_energy, sensible_heat


class TestSensibleHeat:

    def test_water_to_boil(self, water):
        """1 kg of water from 20 °C to 100 °C needs 334,880 J."""
        assert heating_energy(1.0, 20.0, 100.0, water) == pytest.approx(334880.0)

    def test_kernel(self):
        assert sensible_heat(1000.0, 4.0, 10.0) == pytest.approx(40000.0)

    def test_negative_when_cooling(self, water):
        assert heating_energy(1.0, 50.0, 40.0, water) < 0


class TestApplyHeatEnergy:
    """Tests for splitting energy between sensible and latent heat."""

    def test_zero_energy(self, water):
        """No energy, no change."""
        result = apply_heat_energy(1.0, 20.0, 0.0, 100.0, water)
        assert result == HeatResult(new_temp=20.0)

    def test_below_boiling(self, water):
        """41,860 J warms 1 kg of water by 10 °C."""
        result = apply_heat_energy(1.0, 20.0, 41860.0, 100.0, water)
        assert result.new_temp == pytest.approx(30.0)
        assert result.steam_generated == 0.0
        assert result.energy_to_vaporization == 0.0

    def test_exactly_reaches_boiling(self, make_substance):
        """Energy landing exactly on the boiling point makes no steam."""
        fluid = make_substance(specific_heat=4.0)
        result = apply_heat_energy(1.0, 20.0, 320000.0, 100.0, fluid)
        assert result.new_temp == 100.0
        assert result.steam_generated == 0.0

    def test_surplus_becomes_steam(self, water):
        """Everything past the boiling point goes into vapor."""
        result = apply_heat_energy(1.0, 90.0, 41860.0 + 22570.0, 100.0, water)
        assert result.new_temp == 100.0
        assert result.energy_to_vaporization == pytest.approx(22570.0)
        assert result.steam_generated == pytest.approx(0.01)

    def test_at_boiling_point(self, water):
        """2,257 kJ vaporizes 1 kg of water already at 100 °C."""
        result = apply_heat_energy(1.0, 100.0, 2257000.0, 100.0, water)
        assert result.new_temp == 100.0
        assert result.steam_generated == pytest.approx(1.0)

    def test_no_heat_of_vaporization(self, make_substance):
        """Without latent heat data the temperature overshoots."""
        fluid = make_substance(heat_of_vaporization=0.0)
        result = apply_heat_energy(1.0, 95.0, 41860.0, 100.0, fluid)
        assert result.new_temp == pytest.approx(105.0)
        assert result.steam_generated == 0.0

    def test_no_boiling_point(self, water):
        result = apply_heat_energy(1.0, 95.0, 41860.0, None, water)
        assert result.new_temp == pytest.approx(105.0)
        assert result.steam_generated == 0.0

    def test_invalid_inputs(self, make_substance, water):
        """Zero mass or unusable specific heat leaves the fluid as it was."""
        assert apply_heat_energy(0.0, 20.0, 1000.0, 100.0, water).new_temp == 20.0
        fluid = make_substance(specific_heat=math.nan)
        assert apply_heat_energy(1.0, 20.0, 1000.0, 100.0, fluid).new_temp == 20.0

    def test_zero_specific_heat(self, make_substance):
        """Zero or negative specific heat is a no-op, not a division by zero."""
        for specific_heat in (0.0, -4.186):
            fluid = make_substance(specific_heat=specific_heat)
            assert apply_heat_energy(1.0, 20.0, 1000.0, 100.0, fluid) == HeatResult(new_temp=20.0)
            assert apply_heat_energy(1.0, 20.0, 0.0, 100.0, fluid) == HeatResult(new_temp=20.0)

    def test_energy_conserved(self, water):
        """Sensible plus latent energy adds up to the energy applied."""
        energy = 100000.0
        result = apply_heat_energy(0.5, 80.0, energy, 100.0, water)
        sensible = heating_energy(0.5, 80.0, result.new_temp, water)
        assert sensible + result.energy_to_vaporization == pytest.approx(energy)
