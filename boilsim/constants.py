#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physical Constants and Simulation Defaults
================================================================================

Project:        Boiling Point Simulator
Module:         constants.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================
"""

# International Standard Atmosphere (troposphere)
SEA_LEVEL_TEMPERATURE_K = 288.15   # T0
ISA_LAPSE_RATE = 0.0065            # L, K/m
STANDARD_PRESSURE = 101325.0       # P0, Pa
STANDARD_GRAVITY = 9.80665         # g, m/s^2
MOLAR_MASS_AIR = 0.0289644         # M, kg/mol
AIR_GAS_CONSTANT = 8.31447         # R, J/(mol K)
TROPOPAUSE_ALTITUDE = 11000.0      # m

# Antoine coefficients are tabulated in mmHg
PA_PER_MMHG = 133.322

# Colligative properties
GAS_CONSTANT = 8.314               # J/(mol K)
KELVIN_OFFSET = 273.15
WATER_MOLAR_MASS = 18.015          # g/mol
WATER_HEAT_OF_VAPORIZATION = 40.66 # kJ/mol

# Linear boiling point fallback, roughly 1 °C per 300 m for water
DEFAULT_BOILING_LAPSE_RATE = 0.0033  # °C/m

# Game defaults
ROOM_TEMPERATURE = 20.0            # °C
TIME_STEP = 0.1                    # s of simulated time per tick
