#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Unit Conversion and Formatting
================================================================================

Project:        Boiling Point Simulator
Module:         units.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Temperature, altitude and mass conversions used by the front ends.
The physics always works in °C, meters and kilograms.
"""

import math

FEET_PER_METER = 3.28084
METERS_PER_FOOT = 0.3048
POUNDS_PER_KILOGRAM = 2.20462
KILOGRAMS_PER_POUND = 0.453592


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def celsius_to_fahrenheit(celsius: float) -> float:
    """°F = °C × 9/5 + 32  (100 °C = 212 °F)"""
    return celsius * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """°C = (°F - 32) × 5/9  (212 °F = 100 °C)"""
    return (fahrenheit - 32.0) * 5.0 / 9.0


def format_temperature(celsius: float, unit: str = "C", decimals: int = 1) -> str:
    """
    Format a temperature for display.

    Args:
        celsius: Temperature in °C
        unit: "C" or "F"
        decimals: Number of decimal places

    Returns:
        String like "98.5°C" or "209.3°F"
    """
    temperature = celsius_to_fahrenheit(celsius) if unit == "F" else celsius
    return f"{temperature:.{decimals}f}°{unit}"


def format_temperature_range(
    min_celsius: float,
    max_celsius: float,
    unit: str = "C",
    decimals: int = 1
) -> str:
    """Format a range like "20.0°C → 100.0°C"."""
    low = format_temperature(min_celsius, unit, decimals)
    high = format_temperature(max_celsius, unit, decimals)
    return f"{low} → {high}"


def temperature_label(unit: str) -> str:
    if unit == "F":
        return "Fahrenheit (°F)"
    return "Celsius (°C)"


def meters_to_feet(meters: float) -> float:
    return meters * FEET_PER_METER


def feet_to_meters(feet: float) -> float:
    return feet * METERS_PER_FOOT


def format_altitude(meters: float, unit: str = "metric") -> str:
    """Format an altitude like "1,500 m" or "4,921 ft"."""
    if unit == "imperial":
        return f"{_round_half_up(meters_to_feet(meters)):,} ft"
    return f"{_round_half_up(meters):,} m"


def kilograms_to_pounds(kg: float) -> float:
    return kg * POUNDS_PER_KILOGRAM


def pounds_to_kilograms(pounds: float) -> float:
    return pounds * KILOGRAMS_PER_POUND


def format_mass(kg: float, unit: str = "metric") -> str:
    """
    Format a mass for display.

    Metric masses below 1 kg are shown in grams ("500 g"), larger ones in
    kilograms ("1.50 kg"); imperial masses in pounds ("1.10 lbs").
    """
    if unit == "imperial":
        return f"{kilograms_to_pounds(kg):.2f} lbs"
    if kg < 1:
        return f"{_round_half_up(kg * 1000)} g"
    return f"{kg:.2f} kg"
