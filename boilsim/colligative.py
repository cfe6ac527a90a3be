#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Colligative Boiling Point Elevation
================================================================================

Project:        Boiling Point Simulator
Module:         colligative.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Dissolved solute raises the boiling point of its solvent:

    ΔT_b = i · K_b · m

Where:
    - i: van't Hoff factor (particles per dissolved formula unit)
    - m: molality (mol solute per kg solvent)
    - K_b: ebullioscopic constant

K_b is not a true constant. It depends on the boiling temperature itself:

    K_b = R · T_b² · M_solvent / ΔH_vap

For water this gives 0.512 °C·kg/mol at 100 °C but only 0.423 at 66 °C, so
the elevation has to be evaluated at the pressure-adjusted boiling point.

Only water is currently supported as a solvent for the dynamic calculation;
other solvents would need their own molar mass and enthalpy of vaporization.
"""

import math
from typing import Any, Optional

from .constants import (
    GAS_CONSTANT,
    KELVIN_OFFSET,
    WATER_MOLAR_MASS,
    WATER_HEAT_OF_VAPORIZATION,
)


def _finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def dynamic_ebullioscopic_constant(
    boiling_temp_c: float,
    solvent_molar_mass: float = WATER_MOLAR_MASS,
    solvent_heat_of_vaporization: float = WATER_HEAT_OF_VAPORIZATION
) -> float:
    """
    Ebullioscopic constant at a given boiling temperature.

    Args:
        boiling_temp_c: Boiling temperature of the pure solvent (°C)
        solvent_molar_mass: Solvent molar mass (g/mol)
        solvent_heat_of_vaporization: Molar enthalpy of vaporization (kJ/mol)

    Returns:
        K_b in °C·kg/mol
    """
    tb = boiling_temp_c + KELVIN_OFFSET
    molar_mass = solvent_molar_mass / 1000.0           # kg/mol
    delta_h = solvent_heat_of_vaporization * 1000.0    # J/mol
    return (GAS_CONSTANT * tb * tb * molar_mass) / delta_h


def boiling_point_elevation(base_boiling_point_c: float, substance: Any) -> float:
    """
    Boiling point elevation of a solution.

    Uses the dynamic K_b when both ``van_hoff_factor`` and ``molality`` are
    known, otherwise the static ``boiling_point_elevation`` of the
    substance, otherwise zero.

    Args:
        base_boiling_point_c: Boiling point of the pure solvent at the
            current pressure (°C)
        substance: Object with optional ``van_hoff_factor``, ``molality``
            and ``boiling_point_elevation`` attributes

    Returns:
        Elevation in °C
    """
    if substance is None:
        return 0.0

    van_hoff_factor = getattr(substance, "van_hoff_factor", None)
    molality = getattr(substance, "molality", None)

    if not (_finite(van_hoff_factor) and _finite(molality)):
        static = getattr(substance, "boiling_point_elevation", None)
        return float(static) if _finite(static) else 0.0

    kb = dynamic_ebullioscopic_constant(base_boiling_point_c)
    return van_hoff_factor * kb * molality
