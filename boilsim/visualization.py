#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module
================================================================================

Project:        Boiling Point Simulator
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Matplotlib plots for a heating session:
- Heating curve (temperature vs time) with the boiling point marked
- Remaining fluid mass vs time
- Boiling point vs altitude, with the extrapolated Antoine region shaded
- A combined dashboard and PNG export for Streamlit
"""

import io
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from .atmosphere import pressure_profile
from .boiling_point import resolve_boiling_point
from .simulation import SimulationHistory
from .substances import SubstanceProperties


def get_phase_indicator_color(phase_name: str) -> str:
    """Get color for phase indicator."""
    colors = {
        'heating': '#f97316',   # Orange
        'boiling': '#ef4444',   # Red
        'cooling': '#3b82f6',   # Blue
        'idle': '#6b7280',      # Gray
        'depleted': '#a16207',  # Brown
    }
    return colors.get(phase_name.lower(), colors['idle'])


def plot_heating_curve(
    history: SimulationHistory,
    boiling_point: Optional[float] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Plot temperature vs time.

    Boiling ticks are highlighted so the isothermal plateau stands out.

    Args:
        history: Session history
        boiling_point: Boiling point to mark (°C), optional
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    else:
        fig = ax.figure

    data = history.as_arrays()
    ax.clear()
    ax.plot(data['time'], data['temperature'], 'r-', linewidth=1.5, label='Temperature')

    boiling = data['is_boiling']
    if np.any(boiling):
        ax.plot(data['time'][boiling], data['temperature'][boiling], 'o',
                color='#ef4444', markersize=2, alpha=0.5, label='Boiling')

    if boiling_point is not None:
        ax.axhline(y=boiling_point, color='k', linestyle='--', alpha=0.5,
                   label=f'Boiling point ({boiling_point:.1f} °C)')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Temperature (°C)')
    ax.set_title('Heating Curve')
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)

    return fig


def plot_mass_curve(
    history: SimulationHistory,
    residue_mass: float = 0.0,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Plot remaining fluid mass vs time.

    Args:
        history: Session history
        residue_mass: Non-evaporable mass to mark (kg)
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    else:
        fig = ax.figure

    data = history.as_arrays()
    ax.clear()
    ax.plot(data['time'], data['fluid_mass'], 'b-', linewidth=1.5, label='Fluid mass')

    if residue_mass > 0:
        ax.axhline(y=residue_mass, color='#a16207', linestyle=':', label='Residue')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Mass (kg)')
    ax.set_title('Fluid Remaining')
    ax.set_ylim(bottom=0)
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)

    return fig


def plot_boiling_point_vs_altitude(
    substance: SubstanceProperties,
    max_altitude: float = 11000.0,
    n_points: int = 200,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Plot the boiling point of a substance against altitude.

    Altitudes where the Antoine equation is used outside its verified range
    are shaded.

    Args:
        substance: Substance to plot
        max_altitude: Upper altitude limit (m)
        n_points: Number of sample altitudes
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 5))
    else:
        fig = ax.figure

    altitudes = np.linspace(0.0, max_altitude, n_points)
    results = [resolve_boiling_point(h, substance) for h in altitudes]

    ax.clear()
    if all(result is None for result in results):
        ax.text(0.5, 0.5, 'No boiling point data', ha='center', va='center',
                transform=ax.transAxes)
        return fig

    temperatures = np.array([r.temperature if r else np.nan for r in results])
    extrapolated = np.array([bool(r and r.is_extrapolated) for r in results])

    ax.plot(altitudes, temperatures, 'r-', linewidth=2, label=substance.name or 'Boiling point')
    if np.any(extrapolated):
        ax.fill_between(altitudes, np.nanmin(temperatures), np.nanmax(temperatures),
                        where=extrapolated, color='orange', alpha=0.15,
                        label='Extrapolated (outside verified range)')

    pressure_ax = ax.twinx()
    pressure_ax.plot(altitudes, pressure_profile(altitudes) / 1000.0, 'b--', alpha=0.4)
    pressure_ax.set_ylabel('Pressure (kPa)', color='b')

    ax.set_xlabel('Altitude (m)')
    ax.set_ylabel('Boiling point (°C)')
    ax.set_title('Boiling Point vs Altitude')
    ax.legend(loc='upper right', fontsize=8)
    ax.grid(True, alpha=0.3)

    return fig


def create_dashboard(
    history: SimulationHistory,
    substance: SubstanceProperties,
    boiling_point: Optional[float] = None,
    residue_mass: float = 0.0
) -> plt.Figure:
    """
    Combined figure: heating curve, mass curve and boiling point vs altitude.

    Returns:
        Matplotlib figure
    """
    fig = plt.figure(figsize=(14, 8))

    ax_temp = fig.add_subplot(2, 2, 1)
    plot_heating_curve(history, boiling_point, ax=ax_temp)

    ax_mass = fig.add_subplot(2, 2, 3)
    plot_mass_curve(history, residue_mass, ax=ax_mass)

    ax_altitude = fig.add_subplot(1, 2, 2)
    plot_boiling_point_vs_altitude(substance, ax=ax_altitude)

    plt.tight_layout()

    return fig


def figure_to_png(fig: plt.Figure, dpi: int = 100) -> bytes:
    """Render a figure to PNG bytes and close it."""
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()
