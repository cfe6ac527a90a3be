#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Time-Step Simulation Engine
================================================================================

Project:        Boiling Point Simulator
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Discrete-time heating, boiling and cooling of a fluid.

Each tick (typically 0.1 s of simulated time):
1. Heat energy is applied: E = P × Δt
2. The fluid warms up, or boils off mass once it reaches its boiling point
3. With the burner off, the fluid cools by Newton's Law of Cooling:

       dT/dt = -k (T - T_ambient)

   discretised as ΔT = k (T - T_ambient) Δt and never allowed to overshoot
   below ambient.

Example walkthrough (water): 1 kg at 20 °C at sea level on a 2000 W burner
gains 200 J per 0.1 s tick, i.e. 0.048 °C. It reaches 100 °C after about
334,880 J (~167 s), after which every tick converts ~0.09 g into steam.

:func:`simulate_time_step` is a pure function; :class:`BoilingSimulation`
threads its state from tick to tick and records history for plotting.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Union

import numpy as np

from .boiling_point import BoilingPointResult, resolve_boiling_point
from .constants import ROOM_TEMPERATURE, TIME_STEP
from .errors import SimulationError
from .heat_transfer import HeatResult, apply_heat_energy, heating_energy
from .substances import DEFAULT_SUBSTANCE, SubstanceProperties, load_substance
from .vapor_pressure import VerifiedRange

logger = logging.getLogger(__name__)


class Phase(Enum):
    """What the fluid is doing during a tick."""
    HEATING = "heating"
    COOLING = "cooling"
    IDLE = "idle"
    BOILING = "boiling"
    DEPLETED = "depleted"


@dataclass(frozen=True)
class SimulationState:
    """
    Physical state of the fluid between ticks.

    The first four fields are the persistent state; the rest are derived
    by the last tick and reported back to the caller.
    """
    fluid_mass: float                     # kg
    temperature: float                    # °C
    altitude: float = 0.0                 # m above sea level
    residue_mass: float = 0.0             # kg that never evaporates

    steam_generated: float = 0.0          # kg vaporized in the last tick
    energy_to_vaporization: float = 0.0   # J spent on phase change
    is_boiling: bool = False
    all_evaporated: bool = False
    is_extrapolated: bool = False
    verified_range: VerifiedRange = field(default_factory=VerifiedRange)

    @property
    def evaporable_mass(self) -> float:
        return max(0.0, self.fluid_mass - _residue(self))


def _residue(state: SimulationState) -> float:
    residue = state.residue_mass
    if residue is None or not math.isfinite(residue):
        return 0.0
    return residue


def simulate_time_step(
    state: SimulationState,
    heat_input_watts: float,
    delta_time: float,
    substance: Optional[SubstanceProperties],
    ambient_temperature: float = ROOM_TEMPERATURE
) -> SimulationState:
    """
    Advance the fluid by one discrete time step.

    Heating (``heat_input_watts > 0``) and Newtonian cooling
    (``heat_input_watts <= 0``) never happen in the same tick.

    Args:
        state: Current state (not modified)
        heat_input_watts: Burner power in W; 0 or negative for cooling only
        delta_time: Tick duration in seconds
        substance: Substance properties, or None
        ambient_temperature: Room temperature in °C

    Returns:
        The next SimulationState. Degenerate input (no evaporable mass,
        missing substance) returns the state unchanged apart from the
        ``all_evaporated`` flag.
    """
    residue = _residue(state)
    evaporable_mass = max(0.0, state.fluid_mass - residue)

    if state.fluid_mass <= 0 or evaporable_mass <= 0:
        return replace(state, all_evaporated=evaporable_mass <= 0)

    if substance is None:
        return state

    boiling = resolve_boiling_point(state.altitude, substance)
    boiling_point = boiling.temperature if boiling is not None else None
    can_boil = (
        bool(substance.can_boil)
        and boiling_point is not None
        and math.isfinite(boiling_point)
    )

    current_temp = state.temperature
    result = HeatResult(new_temp=current_temp)

    if heat_input_watts > 0:
        result = apply_heat_energy(
            state.fluid_mass,
            current_temp,
            heat_input_watts * delta_time,
            boiling_point,
            substance,
        )
        current_temp = result.new_temp

    coefficient = substance.cooling_coefficient
    if (
        heat_input_watts <= 0
        and current_temp > ambient_temperature
        and coefficient is not None
        and math.isfinite(coefficient)
    ):
        cooling = coefficient * (current_temp - ambient_temperature) * delta_time
        # Large k·Δt would otherwise overshoot past equilibrium
        current_temp = max(current_temp - cooling, ambient_temperature)

    steam_generated = min(result.steam_generated, evaporable_mass) if can_boil else 0.0
    next_mass = max(state.fluid_mass - steam_generated, residue)

    return replace(
        state,
        temperature=current_temp,
        fluid_mass=next_mass,
        steam_generated=steam_generated,
        energy_to_vaporization=result.energy_to_vaporization,
        is_boiling=can_boil and current_temp >= boiling_point and steam_generated > 0,
        is_extrapolated=boiling.is_extrapolated if boiling is not None else False,
        verified_range=boiling.verified_range if boiling is not None else VerifiedRange(),
    )


def classify_phase(
    state: SimulationState,
    heat_input_watts: float,
    ambient_temperature: float = ROOM_TEMPERATURE
) -> Phase:
    """Classify the tick that produced ``state``."""
    if state.all_evaporated or state.evaporable_mass <= 0:
        return Phase.DEPLETED
    if state.is_boiling:
        return Phase.BOILING
    if heat_input_watts > 0:
        return Phase.HEATING
    if state.temperature > ambient_temperature:
        return Phase.COOLING
    return Phase.IDLE


def estimate_time_to_boil(
    mass: float,
    temperature: float,
    heat_input_watts: float,
    substance: SubstanceProperties,
    altitude: float = 0.0
) -> Optional[float]:
    """
    Seconds of constant heating needed to reach the boiling point.

    Ignores cooling losses. Returns None if the substance has no boiling
    point or the burner is off, and 0 if the fluid is already there.
    """
    boiling = resolve_boiling_point(altitude, substance)
    if boiling is None or heat_input_watts <= 0:
        return None
    energy = heating_energy(mass, temperature, boiling.temperature, substance)
    return max(0.0, energy / heat_input_watts)


@dataclass
class SimulationConfig:
    """Configuration for a simulation session."""
    time_step: float = TIME_STEP                   # s per tick
    ambient_temperature: float = ROOM_TEMPERATURE  # °C
    record_history: bool = True


@dataclass
class SimulationHistory:
    """Per-tick record of a session, for plotting."""
    time: List[float] = field(default_factory=list)
    temperature: List[float] = field(default_factory=list)
    fluid_mass: List[float] = field(default_factory=list)
    steam_generated: List[float] = field(default_factory=list)
    heat_input: List[float] = field(default_factory=list)
    is_boiling: List[bool] = field(default_factory=list)

    def append(self, time: float, state: SimulationState, heat_input_watts: float) -> None:
        self.time.append(time)
        self.temperature.append(state.temperature)
        self.fluid_mass.append(state.fluid_mass)
        self.steam_generated.append(state.steam_generated)
        self.heat_input.append(heat_input_watts)
        self.is_boiling.append(state.is_boiling)

    def as_arrays(self) -> Dict[str, np.ndarray]:
        return {
            "time": np.array(self.time),
            "temperature": np.array(self.temperature),
            "fluid_mass": np.array(self.fluid_mass),
            "steam_generated": np.array(self.steam_generated),
            "heat_input": np.array(self.heat_input),
            "is_boiling": np.array(self.is_boiling, dtype=bool),
        }

    def __len__(self) -> int:
        return len(self.time)


class BoilingSimulation:
    """
    A heating/cooling session for one fluid sample.

    Owns the state and threads it linearly through
    :func:`simulate_time_step`. Not thread-safe: ticks must not overlap.
    """

    def __init__(
        self,
        substance: SubstanceProperties,
        config: Optional[SimulationConfig] = None
    ):
        self.substance = substance
        self.config = config or SimulationConfig()
        if not self.config.time_step > 0:
            raise SimulationError("time_step must be positive")

        self.state: Optional[SimulationState] = None
        self.time = 0.0
        self.phase = Phase.IDLE
        self.history = SimulationHistory()
        self.boiling_point: Optional[BoilingPointResult] = None
        self._warned_extrapolation = False

    def initialize(
        self,
        mass: float = 1.0,
        temperature: Optional[float] = None,
        altitude: float = 0.0,
        residue_mass: Optional[float] = None
    ) -> SimulationState:
        """
        Start a new session.

        Args:
            mass: Initial fluid mass in kg
            temperature: Initial temperature in °C (default: ambient)
            altitude: Altitude in meters
            residue_mass: Non-evaporable mass in kg (default: the
                substance's residue fraction of ``mass``)

        Returns:
            Initial simulation state
        """
        if mass < 0:
            raise SimulationError("mass must be non-negative")
        if temperature is None:
            temperature = self.config.ambient_temperature
        if residue_mass is None:
            residue_mass = mass * self.substance.residue_fraction
        if not 0 <= residue_mass <= mass:
            raise SimulationError("residue_mass must be between 0 and mass")

        self.state = SimulationState(
            fluid_mass=mass,
            temperature=temperature,
            altitude=altitude,
            residue_mass=residue_mass,
        )
        self.time = 0.0
        self.phase = Phase.IDLE
        self.history = SimulationHistory()
        self._warned_extrapolation = False
        self._update_boiling_point()

        if self.config.record_history:
            self.history.append(self.time, self.state, 0.0)
        return self.state

    def _update_boiling_point(self) -> None:
        self.boiling_point = resolve_boiling_point(self.state.altitude, self.substance)
        if self.boiling_point is None:
            logger.warning(
                "%s has no sea-level boiling point; boiling is disabled",
                self.substance.name or "Substance",
            )

    def set_altitude(self, altitude: float) -> SimulationState:
        """Move the session to another altitude."""
        if self.state is None:
            raise SimulationError("Simulation not initialized")
        self.state = replace(self.state, altitude=altitude)
        self._warned_extrapolation = False
        self._update_boiling_point()
        return self.state

    def step(self, heat_input_watts: float = 0.0) -> SimulationState:
        """
        Advance one tick.

        Args:
            heat_input_watts: Burner power in W (0 lets the fluid cool)

        Returns:
            Updated simulation state
        """
        if self.state is None:
            raise SimulationError("Simulation not initialized")

        previous = self.state
        self.state = simulate_time_step(
            previous,
            heat_input_watts,
            self.config.time_step,
            self.substance,
            self.config.ambient_temperature,
        )
        self.time += self.config.time_step
        self.phase = classify_phase(
            self.state, heat_input_watts, self.config.ambient_temperature
        )
        self._log_transitions(previous, self.state)

        if self.config.record_history:
            self.history.append(self.time, self.state, heat_input_watts)
        return self.state

    def _log_transitions(self, previous: SimulationState, current: SimulationState) -> None:
        if current.is_boiling and not previous.is_boiling:
            logger.info("Boiling started at t=%.1f s, T=%.2f °C", self.time, current.temperature)
        elif previous.is_boiling and not current.is_boiling:
            logger.info("Boiling stopped at t=%.1f s", self.time)

        if current.all_evaporated and not previous.all_evaporated:
            logger.info(
                "All evaporable fluid gone at t=%.1f s (%.3f kg residue left)",
                self.time, current.fluid_mass,
            )

        if current.is_extrapolated and not self._warned_extrapolation:
            verified = current.verified_range
            logger.warning(
                "Boiling point is outside the verified Antoine range [%s, %s] °C",
                verified.min, verified.max,
            )
            self._warned_extrapolation = True

    def run(self, n_steps: int, heat_input_watts: float = 0.0) -> SimulationState:
        """Run the simulation for n_steps at constant power."""
        for _ in range(n_steps):
            self.step(heat_input_watts)
        return self.state

    def run_for(self, seconds: float, heat_input_watts: float = 0.0) -> SimulationState:
        """Run for (at least) the given simulated duration."""
        n_steps = int(math.ceil(seconds / self.config.time_step - 1e-9))
        return self.run(max(0, n_steps), heat_input_watts)

    def run_until_boiling(
        self,
        heat_input_watts: float,
        max_time: float = 3600.0
    ) -> Optional[float]:
        """
        Heat until the fluid starts boiling.

        Returns:
            Elapsed session time when boiling began, or None if it did not
            boil within ``max_time`` seconds of simulated time
        """
        if self.state is None:
            raise SimulationError("Simulation not initialized")

        deadline = self.time + max_time
        while self.time < deadline:
            state = self.step(heat_input_watts)
            if state.is_boiling:
                return self.time
            if state.all_evaporated:
                break
        return None

    def reset(self) -> None:
        """Discard the current session."""
        self.state = None
        self.time = 0.0
        self.phase = Phase.IDLE
        self.history = SimulationHistory()
        self.boiling_point = None
        self._warned_extrapolation = False


def create_kettle_simulation(
    substance: Union[str, SubstanceProperties] = DEFAULT_SUBSTANCE,
    mass: float = 1.0,
    temperature: float = ROOM_TEMPERATURE,
    altitude: float = 0.0,
    time_step: float = TIME_STEP,
    ambient_temperature: float = ROOM_TEMPERATURE,
    residue_mass: Optional[float] = None
) -> BoilingSimulation:
    """
    Create an initialized session (default: 1 kg of water at 20 °C at sea level).

    Args:
        substance: Substance id or SubstanceProperties
        mass: Fluid mass in kg
        temperature: Initial temperature in °C
        altitude: Altitude in meters
        time_step: Seconds per tick
        ambient_temperature: Room temperature in °C
        residue_mass: Non-evaporable mass in kg (default from the substance)

    Returns:
        Initialized BoilingSimulation
    """
    if isinstance(substance, str):
        substance = load_substance(substance)

    config = SimulationConfig(
        time_step=time_step,
        ambient_temperature=ambient_temperature,
    )

    sim = BoilingSimulation(substance, config)
    sim.initialize(mass, temperature, altitude, residue_mass)

    return sim
