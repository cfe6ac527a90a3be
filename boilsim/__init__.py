#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Boiling Point Simulator
================================================================================

Project:        Boiling Point Simulator
Description:    Educational simulation of liquids heating, boiling and cooling
                at different altitudes and compositions

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This package implements a discrete-time thermodynamic simulation featuring:
- ISA troposphere pressure vs altitude
- Antoine-equation boiling points with verified-range reporting
- Colligative boiling point elevation for solutions
- Sensible and latent heat transfer with mass loss to vapor
- Newton's Law of Cooling when the burner is off

Modules:
    - atmosphere: Ambient pressure at altitude
    - vapor_pressure: Antoine equation solver
    - colligative: Boiling point elevation of solutions
    - boiling_point: Boiling point resolution with fallback
    - heat_transfer: Heat energy to temperature and vapor
    - simulation: Time-step simulator and session runner
    - substances: Substance data loading
    - units: Unit conversion and formatting
    - visualization: Matplotlib plots
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"

from .atmosphere import pressure_at_altitude
from .boiling_point import BoilingPointResult, resolve_boiling_point
from .colligative import boiling_point_elevation
from .heat_transfer import HeatResult, apply_heat_energy
from .simulation import (
    BoilingSimulation,
    SimulationConfig,
    SimulationState,
    create_kettle_simulation,
    simulate_time_step,
)
from .substances import SubstanceProperties, load_substance
from .units import celsius_to_fahrenheit, fahrenheit_to_celsius, format_temperature
from .vapor_pressure import AntoineCoefficients, solve_antoine

__all__ = [
    "pressure_at_altitude",
    "solve_antoine",
    "boiling_point_elevation",
    "resolve_boiling_point",
    "apply_heat_energy",
    "simulate_time_step",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "format_temperature",
    "AntoineCoefficients",
    "BoilingPointResult",
    "HeatResult",
    "SimulationState",
    "SimulationConfig",
    "BoilingSimulation",
    "create_kettle_simulation",
    "SubstanceProperties",
    "load_substance",
]
