#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Atmospheric Model
================================================================================

Project:        Boiling Point Simulator
Module:         atmosphere.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Ambient pressure as a function of altitude, using the International Standard
Atmosphere (ISA) troposphere model.

In the troposphere (0-11 km) temperature falls linearly with height:
    T = T₀ - L·h

and pressure follows the non-isothermal barometric formula:
    P = P₀ · (T/T₀)^(g·M / (R·L))

Where:
    - T₀ = 288.15 K, P₀ = 101325 Pa (sea level)
    - L = 0.0065 K/m (temperature lapse rate)
    - g = 9.80665 m/s², M = 0.0289644 kg/mol, R = 8.31447 J/(mol·K)

Reference values:
    - Sea level (0 m):       101,325 Pa
    - Denver (1,609 m):       83,436 Pa
    - Mount Everest (8,848 m): 31,436 Pa
    - Tropopause (11,000 m):  22,632 Pa

Above the tropopause the stratosphere is isothermal and this formula no
longer applies, so the model is held at its 11 km value instead of being
extrapolated.
"""

import math
from typing import Optional

import numpy as np
from numba import jit

from .constants import (
    SEA_LEVEL_TEMPERATURE_K,
    ISA_LAPSE_RATE,
    STANDARD_PRESSURE,
    STANDARD_GRAVITY,
    MOLAR_MASS_AIR,
    AIR_GAS_CONSTANT,
    TROPOPAUSE_ALTITUDE,
)


# g·M / (R·L) ≈ 5.2559
BAROMETRIC_EXPONENT = (STANDARD_GRAVITY * MOLAR_MASS_AIR) / (AIR_GAS_CONSTANT * ISA_LAPSE_RATE)


@jit(nopython=True, cache=True)
def troposphere_pressure(altitude: float) -> float:
    """
    ISA troposphere pressure for a finite altitude.

    Altitudes at or above the tropopause (or any altitude where the
    model temperature would drop to zero) return the 11 km pressure.

    Args:
        altitude: Altitude in meters

    Returns:
        Pressure in Pascals
    """
    h = altitude
    if h > TROPOPAUSE_ALTITUDE:
        h = TROPOPAUSE_ALTITUDE

    temperature = SEA_LEVEL_TEMPERATURE_K - ISA_LAPSE_RATE * h
    if temperature <= 0.0:
        temperature = SEA_LEVEL_TEMPERATURE_K - ISA_LAPSE_RATE * TROPOPAUSE_ALTITUDE

    return STANDARD_PRESSURE * (temperature / SEA_LEVEL_TEMPERATURE_K) ** BAROMETRIC_EXPONENT


def sanitize_altitude(altitude: Optional[float]) -> float:
    """Treat missing or non-finite altitudes as sea level."""
    if altitude is None:
        return 0.0
    try:
        value = float(altitude)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def pressure_at_altitude(altitude: Optional[float]) -> float:
    """
    Calculate atmospheric pressure at the given altitude.

    Args:
        altitude: Altitude in meters above sea level. None, NaN and
            infinities are treated as 0 (sea level).

    Returns:
        Pressure in Pascals (always finite and positive)
    """
    return float(troposphere_pressure(sanitize_altitude(altitude)))


def pressure_profile(altitudes: np.ndarray) -> np.ndarray:
    """
    Vectorized pressure calculation for an array of altitudes.

    Gives the same values as :func:`pressure_at_altitude` element-wise.

    Args:
        altitudes: Array of altitudes in meters

    Returns:
        Array of pressures in Pascals
    """
    h = np.asarray(altitudes, dtype=float)
    h = np.where(np.isfinite(h), h, 0.0)
    h = np.minimum(h, TROPOPAUSE_ALTITUDE)

    temperature = SEA_LEVEL_TEMPERATURE_K - ISA_LAPSE_RATE * h
    return STANDARD_PRESSURE * (temperature / SEA_LEVEL_TEMPERATURE_K) ** BAROMETRIC_EXPONENT
