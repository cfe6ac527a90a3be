#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Simulation Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
License:        MIT License
================================================================================
"""

import dataclasses
import logging

import numpy as np
import pytest
from boilsim.boiling_point import resolve_boiling_point
from boilsim.errors import SimulationError
from boilsim.simulation import (
    BoilingSimulation, Phase, SimulationConfig, SimulationState,
    classify_phase, create_kettle_simulation, estimate_time_to_boil,
    simulate_time_step
)
from boilsim.substances import load_substance
from boilsim.vapor_pressure import AntoineCoefficients


class TestSimulateTimeStepHeating:
    """Heating and boiling ticks."""

    def test_heating_tick(self, water):
        """2000 W for 0.1 s warms 1 kg of water by 200/4186 °C."""
        state = SimulationState(fluid_mass=1.0, temperature=20.0)
        new = simulate_time_step(state, 2000.0, 0.1, water)
        assert new.temperature == pytest.approx(20.0 + 200.0 / 4186.0)
        assert new.fluid_mass == 1.0
        assert not new.is_boiling

    def test_input_not_modified(self, water):
        state = SimulationState(fluid_mass=1.0, temperature=20.0)
        new = simulate_time_step(state, 2000.0, 0.1, water)
        assert new is not state
        assert state.temperature == 20.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.temperature = 50.0

    def test_boiling_tick(self, water):
        """At the boiling point, heat turns into steam and mass drops."""
        bp = resolve_boiling_point(0.0, water).temperature
        state = SimulationState(fluid_mass=1.0, temperature=bp)
        new = simulate_time_step(state, 2000.0, 0.1, water)
        assert new.is_boiling
        assert new.temperature == pytest.approx(bp)
        assert new.steam_generated == pytest.approx(200.0 / 2257000.0)
        assert new.fluid_mass == pytest.approx(1.0 - 200.0 / 2257000.0)
        assert new.energy_to_vaporization == pytest.approx(200.0)

    def test_time_to_boil(self, water):
        """Boiling starts once m·c·ΔT has been delivered."""
        expected = estimate_time_to_boil(1.0, 20.0, 2000.0, water)
        assert expected == pytest.approx(167.4, abs=0.1)

        state = SimulationState(fluid_mass=1.0, temperature=20.0)
        elapsed = 0.0
        while not state.is_boiling and elapsed < 1000.0:
            state = simulate_time_step(state, 2000.0, 0.1, water)
            elapsed += 0.1

        assert expected - 1e-6 <= elapsed <= expected + 0.2
        assert state.temperature == pytest.approx(resolve_boiling_point(0.0, water).temperature)

    def test_boils_sooner_at_altitude(self, water):
        assert estimate_time_to_boil(1.0, 20.0, 2000.0, water, altitude=1609.0) < \
            estimate_time_to_boil(1.0, 20.0, 2000.0, water)

    def test_cannot_boil(self):
        """Oil heats past its nominal boiling point without losing mass."""
        oil = load_substance("vegetable-oil")
        state = SimulationState(fluid_mass=1.0, temperature=299.0)
        new = simulate_time_step(state, 100000.0, 1.0, oil)
        assert new.temperature == pytest.approx(349.0)
        assert new.fluid_mass == 1.0
        assert new.steam_generated == 0.0
        assert not new.is_boiling

    def test_no_sea_level_boiling_point(self, make_substance):
        fluid = make_substance(boiling_point_sea_level=None)
        state = SimulationState(fluid_mass=1.0, temperature=99.0)
        new = simulate_time_step(state, 2000.0, 10.0, fluid)
        assert new.temperature > 100.0
        assert new.fluid_mass == 1.0
        assert not new.is_boiling

    def test_no_boiling_without_heat(self, water):
        bp = resolve_boiling_point(0.0, water).temperature
        state = SimulationState(fluid_mass=1.0, temperature=bp)
        new = simulate_time_step(state, 0.0, 0.1, water)
        assert not new.is_boiling
        assert new.steam_generated == 0.0

    def test_extrapolation_reported(self, make_substance):
        fluid = make_substance(antoine_coefficients=AntoineCoefficients(
            a=8.07131, b=1730.63, c=233.426, t_min_c=1.0, t_max_c=90.0
        ))
        new = simulate_time_step(SimulationState(fluid_mass=1.0, temperature=20.0), 2000.0, 0.1, fluid)
        assert new.is_extrapolated
        assert new.verified_range.max == 90.0


class TestSimulateTimeStepCooling:
    """Newton's Law of Cooling with the burner off."""

    def test_cooling_tick(self, water):
        state = SimulationState(fluid_mass=1.0, temperature=90.0)
        new = simulate_time_step(state, 0.0, 1.0, water)
        assert new.temperature == pytest.approx(90.0 - 0.0015 * 70.0)

    def test_negative_power_cools(self, water):
        state = SimulationState(fluid_mass=1.0, temperature=90.0)
        new = simulate_time_step(state, -500.0, 0.1, water)
        assert new.temperature == pytest.approx(90.0 - 0.0015 * 70.0 * 0.1)

    def test_no_overshoot(self, make_substance):
        """A large k·Δt stops at ambient instead of undershooting."""
        fluid = make_substance(cooling_coefficient=5.0)
        state = SimulationState(fluid_mass=1.0, temperature=90.0)
        assert simulate_time_step(state, 0.0, 1.0, fluid).temperature == 20.0

    def test_custom_ambient(self, make_substance):
        fluid = make_substance(cooling_coefficient=5.0)
        state = SimulationState(fluid_mass=1.0, temperature=35.0)
        new = simulate_time_step(state, 0.0, 1.0, fluid, ambient_temperature=30.0)
        assert new.temperature == 30.0

    def test_below_ambient_unchanged(self, water):
        state = SimulationState(fluid_mass=1.0, temperature=10.0)
        assert simulate_time_step(state, 0.0, 1.0, water).temperature == 10.0

    def test_converges_to_ambient(self, water):
        """Long cooling approaches but never crosses room temperature."""
        state = SimulationState(fluid_mass=1.0, temperature=95.0)
        temps = []
        for _ in range(5000):
            state = simulate_time_step(state, 0.0, 1.0, water)
            temps.append(state.temperature)

        assert all(t >= 20.0 for t in temps)
        assert all(b <= a for a, b in zip(temps, temps[1:]))
        assert temps[-1] == pytest.approx(20.0, abs=0.1)


class TestResidueAndDepletion:
    """Non-evaporable residue and the terminal state."""

    def test_only_residue_left(self, water):
        state = SimulationState(fluid_mass=0.03, temperature=100.0, residue_mass=0.03)
        for power in (2000.0, 0.0, -100.0):
            new = simulate_time_step(state, power, 0.1, water)
            assert new.all_evaporated
            assert new.temperature == 100.0
            assert new.fluid_mass == 0.03

    def test_empty_pot(self, water):
        new = simulate_time_step(SimulationState(fluid_mass=0.0, temperature=20.0), 2000.0, 0.1, water)
        assert new.all_evaporated

    def test_no_substance(self):
        state = SimulationState(fluid_mass=1.0, temperature=20.0)
        assert simulate_time_step(state, 2000.0, 0.1, None) is state

    def test_zero_specific_heat(self, make_substance):
        """Degenerate substance data leaves the temperature alone."""
        fluid = make_substance(specific_heat=0.0)
        state = SimulationState(fluid_mass=1.0, temperature=20.0)
        new = simulate_time_step(state, 2000.0, 0.1, fluid)
        assert new.temperature == 20.0
        assert new.fluid_mass == 1.0
        assert not new.is_boiling

    def test_residue_floor(self, saltwater):
        """Mass never drops below the residue, then the pot is depleted."""
        state = SimulationState(fluid_mass=1.0, temperature=100.0, residue_mass=0.03)
        masses = [state.fluid_mass]
        for _ in range(10):
            state = simulate_time_step(state, 1.0e6, 1.0, saltwater)
            masses.append(state.fluid_mass)

        assert all(m >= 0.03 for m in masses)
        assert all(b <= a for a, b in zip(masses, masses[1:]))
        assert masses[-1] == 0.03
        assert state.all_evaporated

    def test_steam_limited_to_evaporable_mass(self, water):
        bp = resolve_boiling_point(0.0, water).temperature
        state = SimulationState(fluid_mass=0.05, temperature=bp, residue_mass=0.01)
        new = simulate_time_step(state, 1.0e6, 1.0, water)
        assert new.steam_generated == pytest.approx(0.04)
        assert new.fluid_mass == pytest.approx(0.01)
        assert not new.all_evaporated


class TestClassifyPhase:

    def test_phases(self):
        assert classify_phase(SimulationState(1.0, 50.0), 2000.0) == Phase.HEATING
        assert classify_phase(SimulationState(1.0, 50.0), 0.0) == Phase.COOLING
        assert classify_phase(SimulationState(1.0, 20.0), 0.0) == Phase.IDLE
        assert classify_phase(SimulationState(1.0, 100.0, is_boiling=True), 2000.0) == Phase.BOILING
        assert classify_phase(SimulationState(0.03, 100.0, residue_mass=0.03), 2000.0) == Phase.DEPLETED


class TestSimulationConfig:

    def test_default_config(self):
        config = SimulationConfig()
        assert config.time_step == 0.1
        assert config.ambient_temperature == 20.0
        assert config.record_history

    def test_invalid_time_step(self, water):
        with pytest.raises(SimulationError):
            BoilingSimulation(water, SimulationConfig(time_step=0.0))


class TestBoilingSimulation:
    """Tests for the session runner."""

    def test_not_initialized(self, water):
        sim = BoilingSimulation(water)
        assert sim.state is None
        with pytest.raises(SimulationError):
            sim.step(2000.0)
        with pytest.raises(SimulationError):
            sim.run_until_boiling(2000.0)

    def test_initialize(self, water):
        sim = BoilingSimulation(water)
        state = sim.initialize(mass=2.0, temperature=15.0, altitude=1609.0)
        assert state.fluid_mass == 2.0
        assert state.temperature == 15.0
        assert state.residue_mass == 0.0
        assert sim.boiling_point.temperature == pytest.approx(95.0, abs=1.0)
        assert len(sim.history) == 1

    def test_default_temperature_is_ambient(self, water):
        sim = BoilingSimulation(water, SimulationConfig(ambient_temperature=25.0))
        assert sim.initialize().temperature == 25.0

    def test_residue_from_substance(self, saltwater):
        sim = create_kettle_simulation(saltwater, mass=2.0)
        assert sim.state.residue_mass == pytest.approx(0.07)

    def test_invalid_initial_state(self, water):
        sim = BoilingSimulation(water)
        with pytest.raises(SimulationError):
            sim.initialize(mass=-1.0)
        with pytest.raises(SimulationError):
            sim.initialize(mass=1.0, residue_mass=2.0)

    def test_run_records_history(self, water):
        sim = create_kettle_simulation(water)
        sim.run_for(1.0, 2000.0)
        assert len(sim.history) == 11
        assert sim.time == pytest.approx(1.0)
        assert sim.phase == Phase.HEATING

        data = sim.history.as_arrays()
        assert data['temperature'].shape == (11,)
        assert data['is_boiling'].dtype == bool
        assert np.all(np.diff(data['temperature']) > 0)

    def test_history_disabled(self, water):
        sim = BoilingSimulation(water, SimulationConfig(record_history=False))
        sim.initialize()
        sim.run(5, 2000.0)
        assert len(sim.history) == 0

    def test_run_until_boiling(self, water):
        sim = create_kettle_simulation("water")
        elapsed = sim.run_until_boiling(2000.0)
        expected = estimate_time_to_boil(1.0, 20.0, 2000.0, water)
        assert elapsed == pytest.approx(expected, abs=0.2)
        assert sim.phase == Phase.BOILING

    def test_run_until_boiling_times_out(self, water):
        sim = create_kettle_simulation(water)
        assert sim.run_until_boiling(0.0, max_time=10.0) is None

    def test_set_altitude(self, water):
        sim = create_kettle_simulation(water)
        sea_level = sim.boiling_point.temperature
        sim.set_altitude(3000.0)
        assert sim.state.altitude == 3000.0
        assert sim.boiling_point.temperature < sea_level

    def test_reset(self, water):
        sim = create_kettle_simulation(water)
        sim.run(10, 2000.0)
        sim.reset()
        assert sim.state is None
        assert sim.time == 0.0
        assert len(sim.history) == 0

    def test_boil_and_cool_cycle(self, water):
        sim = create_kettle_simulation(water, temperature=99.0)
        sim.run_for(30.0, 2000.0)
        assert sim.phase == Phase.BOILING
        assert sim.state.fluid_mass < 1.0

        sim.run_for(60.0, 0.0)
        assert sim.phase == Phase.COOLING
        assert sim.state.temperature < sim.boiling_point.temperature

    def test_logs_boiling_start(self, water, caplog):
        caplog.set_level(logging.INFO, logger="boilsim.simulation")
        sim = create_kettle_simulation(water, temperature=99.9)
        sim.run_until_boiling(2000.0)
        assert "Boiling started" in caplog.text

    def test_extrapolation_warned_once(self, make_substance, caplog):
        fluid = make_substance(antoine_coefficients=AntoineCoefficients(
            a=8.07131, b=1730.63, c=233.426, t_min_c=1.0, t_max_c=90.0
        ))
        caplog.set_level(logging.WARNING, logger="boilsim.simulation")
        sim = create_kettle_simulation(fluid)
        sim.run(5, 2000.0)
        warnings = [r for r in caplog.records if "verified Antoine range" in r.getMessage()]
        assert len(warnings) == 1
