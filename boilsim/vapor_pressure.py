#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Vapor-Pressure Solver (Antoine Equation)
================================================================================

Project:        Boiling Point Simulator
Module:         vapor_pressure.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

A liquid boils when its vapor pressure equals the ambient pressure. The
Antoine equation is an empirical vapor-pressure correlation:

    log₁₀(P_vap) = A - B / (C + T)

with P_vap in mmHg and T in °C. Solved for the temperature at which the
vapor pressure reaches a given pressure P:

    T = B / (A - log₁₀(P)) - C

TminC/TmaxC bound the range over which the coefficients were fitted. They are
NOT physical limits: the curve stays smooth outside that range and its
accuracy degrades gradually (about 0.1-0.5 °C at 10 °C outside, 1-5 °C at
50 °C outside, breaking down only near the critical point). Results outside
the range are therefore reported with ``is_extrapolated=True`` and are never
clamped to the bounds.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from numba import jit

from .constants import PA_PER_MMHG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AntoineCoefficients:
    """
    Empirical Antoine constants for one substance.

    A, B and C use mmHg and °C. Zero is never a valid value for any of them
    and is read as "unset".
    """
    a: float
    b: float
    c: float
    t_min_c: Optional[float] = None  # Lower bound of the verified range (°C)
    t_max_c: Optional[float] = None  # Upper bound of the verified range (°C)

    @property
    def is_complete(self) -> bool:
        """True when A, B and C are all finite and non-zero."""
        return all(
            value is not None and math.isfinite(value) and value != 0
            for value in (self.a, self.b, self.c)
        )


@dataclass(frozen=True)
class VerifiedRange:
    """Empirically verified temperature range; None means unbounded/unknown."""
    min: Optional[float] = None
    max: Optional[float] = None

    def contains(self, temperature: float) -> bool:
        if self.min is not None and temperature < self.min:
            return False
        if self.max is not None and temperature > self.max:
            return False
        return True


@dataclass(frozen=True)
class AntoineSolution:
    """Boiling temperature solved from the Antoine equation."""
    temperature: float
    is_extrapolated: bool
    verified_range: VerifiedRange = field(default_factory=VerifiedRange)


@jit(nopython=True, cache=True)
def antoine_temperature(pressure_mmhg: float, a: float, b: float, c: float) -> float:
    """
    Invert the Antoine equation for temperature.

    Args:
        pressure_mmhg: Vapor pressure in mmHg (must be positive)
        a, b, c: Antoine coefficients

    Returns:
        Temperature in °C, or NaN when A - log₁₀(P) is too close to zero
    """
    denominator = a - math.log10(pressure_mmhg)
    if abs(denominator) < 1e-10:
        return math.nan
    return b / denominator - c


def _bound(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return float(value)


def solve_antoine(
    pressure_pa: float,
    coefficients: Optional[AntoineCoefficients]
) -> Optional[AntoineSolution]:
    """
    Find the temperature at which vapor pressure equals ``pressure_pa``.

    Args:
        pressure_pa: Ambient pressure in Pascals
        coefficients: Antoine coefficients, or None

    Returns:
        AntoineSolution, or None if the coefficients are missing/unset or the
        equation is numerically degenerate at this pressure. None tells the
        caller to use its fallback model.
    """
    if coefficients is None or not coefficients.is_complete:
        return None

    if not math.isfinite(pressure_pa) or pressure_pa <= 0:
        logger.debug("Antoine solve skipped for non-positive pressure %r", pressure_pa)
        return None

    pressure_mmhg = pressure_pa / PA_PER_MMHG
    temperature = float(antoine_temperature(
        pressure_mmhg, coefficients.a, coefficients.b, coefficients.c
    ))

    if math.isnan(temperature):
        logger.debug("Antoine denominator vanished at %.1f Pa", pressure_pa)
        return None

    verified_range = VerifiedRange(
        min=_bound(coefficients.t_min_c),
        max=_bound(coefficients.t_max_c),
    )

    return AntoineSolution(
        temperature=temperature,
        is_extrapolated=not verified_range.contains(temperature),
        verified_range=verified_range,
    )


def vapor_pressure(temperature_c: float, coefficients: AntoineCoefficients) -> float:
    """
    Forward Antoine equation: vapor pressure at a temperature.

    Args:
        temperature_c: Temperature in °C
        coefficients: Antoine coefficients

    Returns:
        Vapor pressure in Pascals
    """
    log_p = coefficients.a - coefficients.b / (coefficients.c + temperature_c)
    return (10.0 ** log_p) * PA_PER_MMHG
