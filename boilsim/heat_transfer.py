#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Heat Transfer Engine
================================================================================

Project:        Boiling Point Simulator
Module:         heat_transfer.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Converts applied heat into temperature rise and vaporization.

1. Below the boiling point (sensible heat):
       Q = m · c · ΔT   →   ΔT = Q / (m · c)

   Example: heating 1 kg of water from 20 °C to 100 °C takes
   1000 g × 4.186 J/(g·°C) × 80 °C = 334,880 J.

2. At the boiling point (latent heat):
       m_vapor = Q / L_v

   Temperature stays pinned at the boiling point while the surplus energy
   turns liquid into vapor (2,257 kJ/kg for water).

Masses are in kg, specific heat in J/(g·°C) and heat of vaporization in
kJ/kg, matching the substance data files.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional

from numba import jit


@dataclass(frozen=True)
class HeatResult:
    """Outcome of applying energy to a fluid."""
    new_temp: float
    energy_to_vaporization: float = 0.0  # J spent on phase change
    steam_generated: float = 0.0         # kg converted to vapor


@jit(nopython=True, cache=True)
def sensible_heat(mass_g: float, specific_heat: float, delta_t: float) -> float:
    """Q = m·c·ΔT with mass in grams and c in J/(g·°C)."""
    return mass_g * specific_heat * delta_t


def heating_energy(mass: float, temp_start: float, temp_end: float, substance: Any) -> float:
    """
    Energy needed to heat a liquid between two temperatures.

    Assumes the fluid stays liquid over the whole interval.

    Args:
        mass: Fluid mass in kg
        temp_start: Starting temperature (°C)
        temp_end: Target temperature (°C)
        substance: Object with ``specific_heat`` in J/(g·°C)

    Returns:
        Energy in Joules (negative when cooling)
    """
    return float(sensible_heat(mass * 1000.0, substance.specific_heat, temp_end - temp_start))


def _can_vaporize(boiling_point: Optional[float], substance: Any) -> bool:
    heat_of_vaporization = getattr(substance, "heat_of_vaporization", None)
    return (
        boiling_point is not None
        and math.isfinite(boiling_point)
        and heat_of_vaporization is not None
        and math.isfinite(heat_of_vaporization)
        and heat_of_vaporization > 0
    )


def apply_heat_energy(
    mass: float,
    current_temp: float,
    energy_joules: float,
    boiling_point: Optional[float],
    substance: Any
) -> HeatResult:
    """
    Apply heat energy to a fluid.

    Energy first raises the temperature. If that would carry the fluid to or
    past its boiling point, the fluid is pinned at the boiling point and the
    rest of the energy vaporizes mass.

    When the substance cannot boil (no heat of vaporization or no boiling
    point) all energy stays sensible heat and the temperature may exceed the
    nominal boiling point.

    The split uses the mass at the start of the tick for the sensible part,
    which is a first-order approximation for short ticks.

    Args:
        mass: Fluid mass in kg
        current_temp: Current temperature (°C)
        energy_joules: Heat applied (J)
        boiling_point: Boiling point at the current altitude (°C), or None
        substance: SubstanceProperties

    Returns:
        HeatResult with the new temperature, energy spent on vaporization
        and vapor mass generated (kg)
    """
    specific_heat = getattr(substance, "specific_heat", None)
    if (
        specific_heat is None
        or not math.isfinite(specific_heat)
        or specific_heat <= 0
        or mass <= 0
    ):
        return HeatResult(new_temp=current_temp)

    mass_g = mass * 1000.0
    potential_new_temp = current_temp + energy_joules / (mass_g * specific_heat)

    if not _can_vaporize(boiling_point, substance) or potential_new_temp < boiling_point:
        return HeatResult(new_temp=potential_new_temp)

    energy_to_boiling = heating_energy(mass, current_temp, boiling_point, substance)
    remaining_energy = energy_joules - energy_to_boiling

    # kJ/kg -> J/kg
    steam = remaining_energy / (substance.heat_of_vaporization * 1000.0)

    return HeatResult(
        new_temp=boiling_point,
        energy_to_vaporization=remaining_energy,
        steam_generated=max(0.0, steam),
    )
