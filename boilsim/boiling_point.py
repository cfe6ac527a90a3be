#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Boiling Point Resolver
================================================================================

Project:        Boiling Point Simulator
Module:         boiling_point.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Boiling point of a substance at a given altitude.

Algorithm:
    1. Ambient pressure from the ISA atmosphere
    2. Antoine equation (if coefficients are available) for the temperature
       where vapor pressure equals ambient pressure  (±0.5 °C)
    3. Otherwise a linear lapse-rate approximation from the sea-level
       boiling point  (±2 °C)
    4. Solution elevation evaluated at the base boiling point from 2 or 3

Real-world check for water: 100 °C at sea level, ~95 °C in Denver (1609 m),
~70 °C on Mount Everest.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Optional

from .atmosphere import pressure_at_altitude, sanitize_altitude
from .colligative import boiling_point_elevation
from .constants import DEFAULT_BOILING_LAPSE_RATE
from .vapor_pressure import VerifiedRange, solve_antoine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoilingPointResult:
    """Boiling point with provenance metadata."""
    temperature: float          # Final boiling point including elevation (°C)
    base_boiling_point: float   # Pure-solvent boiling point (°C)
    elevation: float            # Colligative elevation (°C)
    is_extrapolated: bool = False
    verified_range: VerifiedRange = field(default_factory=VerifiedRange)


def resolve_boiling_point(
    altitude: Optional[float],
    substance: Any,
    default_lapse_rate: float = DEFAULT_BOILING_LAPSE_RATE
) -> Optional[BoilingPointResult]:
    """
    Calculate the boiling point of a substance at altitude.

    Args:
        altitude: Altitude in meters (None/non-finite means sea level)
        substance: SubstanceProperties (or any object with the same fields)
        default_lapse_rate: °C/m used by the linear fallback when the
            substance has no lapse rate of its own

    Returns:
        BoilingPointResult, or None if the substance has no finite sea-level
        boiling point. None means the substance data is unusable for boiling.
    """
    if substance is None:
        return None

    sea_level = getattr(substance, "boiling_point_sea_level", None)
    if sea_level is None or not math.isfinite(sea_level):
        return None

    altitude = sanitize_altitude(altitude)
    pressure = pressure_at_altitude(altitude)

    coefficients = getattr(substance, "antoine_coefficients", None)
    if coefficients is not None:
        solution = solve_antoine(pressure, coefficients)
        if solution is not None and math.isfinite(solution.temperature):
            elevation = boiling_point_elevation(solution.temperature, substance)
            return BoilingPointResult(
                temperature=solution.temperature + elevation,
                base_boiling_point=solution.temperature,
                elevation=elevation,
                is_extrapolated=solution.is_extrapolated,
                verified_range=solution.verified_range,
            )
        logger.debug("Antoine solve failed at %.0f m, using linear fallback", altitude)

    lapse_rate = getattr(substance, "altitude_lapse_rate", None)
    if lapse_rate is None or not math.isfinite(lapse_rate):
        lapse_rate = default_lapse_rate

    base = sea_level - altitude * lapse_rate
    elevation = boiling_point_elevation(base, substance)

    return BoilingPointResult(
        temperature=base + elevation,
        base_boiling_point=base,
        elevation=elevation,
        is_extrapolated=False,
        verified_range=VerifiedRange(),
    )
