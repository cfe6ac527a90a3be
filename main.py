#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Boiling Point Simulator - Command Line Interface
================================================================================

Project:        Boiling Point Simulator
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Command line interface for running heating/boiling/cooling scenarios.
"""

import argparse
import logging
import sys
import time
from typing import Optional

from boilsim.errors import BoilSimError
from boilsim.simulation import create_kettle_simulation, estimate_time_to_boil
from boilsim.substances import available_substances, load_substance
from boilsim.units import format_altitude, format_mass, format_temperature


def run_scenario(
    substance_id: str = "water",
    mass: float = 1.0,
    temperature: float = 20.0,
    altitude: float = 0.0,
    power: float = 2000.0,
    duration: float = 300.0,
    cool: float = 0.0,
    dt: float = 0.1,
    ambient: float = 20.0,
    unit: str = "C",
    plot: bool = False,
    save: Optional[str] = None
):
    """
    Heat a fluid sample for a while, optionally let it cool, and report.

    Args:
        substance_id: Substance to simulate
        mass: Initial mass (kg)
        temperature: Initial temperature (°C)
        altitude: Altitude (m)
        power: Burner power (W)
        duration: Heating time (s)
        cool: Cooling time after heating (s)
        dt: Time step (s)
        ambient: Room temperature (°C)
        unit: Display unit, "C" or "F"
        plot: Show plots when done
        save: Save the dashboard to this path
    """
    print("=" * 60)
    print("Boiling Point Simulator")
    print("=" * 60)

    substance = load_substance(substance_id)
    sim = create_kettle_simulation(
        substance, mass=mass, temperature=temperature, altitude=altitude,
        time_step=dt, ambient_temperature=ambient,
    )

    print(f"\nSubstance:   {substance.name}")
    print(f"Mass:        {format_mass(mass)}")
    print(f"Altitude:    {format_altitude(altitude)}")
    print(f"Start temp:  {format_temperature(temperature, unit)}")

    result = sim.boiling_point
    if result is None:
        print("Boiling point: unavailable (no sea-level boiling point data)")
    else:
        print(f"Boiling point: {format_temperature(result.temperature, unit, 2)}"
              f" (base {format_temperature(result.base_boiling_point, unit, 2)},"
              f" elevation {result.elevation:.3f} °C)")
        if result.is_extrapolated:
            verified = result.verified_range
            print(f"  ⚠ Outside verified Antoine range [{verified.min}, {verified.max}] °C")

    estimate = estimate_time_to_boil(mass, temperature, power, substance, altitude)
    if estimate is not None and substance.can_boil:
        print(f"Estimated time to boil at {power:.0f} W: {estimate:.1f} s")

    print(f"\nHeating at {power:.0f} W for {duration:.0f} s...")
    t_start = time.time()

    boil_time = None
    n_steps = int(round(duration / dt))
    for _ in range(n_steps):
        state = sim.step(power)
        if boil_time is None and state.is_boiling:
            boil_time = sim.time
        if state.all_evaporated:
            print(f"  All evaporable fluid gone at t = {sim.time:.1f} s")
            break

    if cool > 0 and not sim.state.all_evaporated:
        print(f"Cooling for {cool:.0f} s...")
        sim.run_for(cool, 0.0)

    t_end = time.time()
    print(f"\nSimulated {sim.time:.1f} s in {t_end - t_start:.2f} s wall time")

    state = sim.state
    evaporated = mass - state.fluid_mass
    print("\nFinal State:")
    print(f"  Temperature:   {format_temperature(state.temperature, unit)}")
    print(f"  Fluid mass:    {format_mass(state.fluid_mass)}")
    print(f"  Evaporated:    {format_mass(evaporated)}")
    print(f"  Phase:         {sim.phase.value}")
    if boil_time is not None:
        print(f"  Boiling began: t = {boil_time:.1f} s")

    if plot or save:
        import matplotlib.pyplot as plt
        from boilsim.visualization import create_dashboard

        fig = create_dashboard(
            sim.history, substance,
            boiling_point=result.temperature if result else None,
            residue_mass=state.residue_mass,
        )
        if save:
            fig.savefig(save, dpi=120)
            print(f"\nDashboard saved to {save}")
        if plot:
            plt.show()

    return sim


def list_substances():
    """Print the bundled substances and their sea-level boiling points."""
    print("Available substances:")
    for substance_id in available_substances():
        substance = load_substance(substance_id)
        bp = substance.boiling_point_sea_level
        bp_text = f"{bp:.2f} °C" if bp is not None else "n/a"
        flag = "" if substance.can_boil else " (does not boil)"
        print(f"  {substance_id:15s} {substance.name:28s} bp {bp_text}{flag}")


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Boiling Point Simulator - heating, boiling and cooling at altitude",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --list                          List substances
  python main.py                                 1 kg water, sea level, 2000 W
  python main.py --altitude 1609 --duration 400  Boil water in Denver
  python main.py -s saltwater --cool 600 --plot  Boil, cool and plot
  python main.py --app                           Launch Streamlit app
        """
    )

    parser.add_argument('--substance', '-s', default='water',
                        help='Substance id (default: water)')
    parser.add_argument('--mass', '-m', type=float, default=1.0,
                        help='Initial mass in kg (default: 1.0)')
    parser.add_argument('--temperature', '-t', type=float, default=20.0,
                        help='Initial temperature in °C (default: 20)')
    parser.add_argument('--altitude', '-a', type=float, default=0.0,
                        help='Altitude in meters (default: 0)')
    parser.add_argument('--power', '-p', type=float, default=2000.0,
                        help='Burner power in W (default: 2000)')
    parser.add_argument('--duration', '-d', type=float, default=300.0,
                        help='Heating time in s (default: 300)')
    parser.add_argument('--cool', type=float, default=0.0,
                        help='Cooling time after heating in s (default: 0)')
    parser.add_argument('--dt', type=float, default=0.1,
                        help='Time step in s (default: 0.1)')
    parser.add_argument('--ambient', type=float, default=20.0,
                        help='Room temperature in °C (default: 20)')
    parser.add_argument('--fahrenheit', action='store_true',
                        help='Display temperatures in °F')
    parser.add_argument('--list', action='store_true',
                        help='List available substances')
    parser.add_argument('--plot', action='store_true',
                        help='Show plots when done')
    parser.add_argument('--save', default=None,
                        help='Save the dashboard figure to a file')
    parser.add_argument('--app', action='store_true',
                        help='Launch Streamlit web app')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Debug logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        list_substances()
        return
    if args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
        return

    try:
        run_scenario(
            substance_id=args.substance,
            mass=args.mass,
            temperature=args.temperature,
            altitude=args.altitude,
            power=args.power,
            duration=args.duration,
            cool=args.cool,
            dt=args.dt,
            ambient=args.ambient,
            unit="F" if args.fahrenheit else "C",
            plot=args.plot,
            save=args.save,
        )
    except BoilSimError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
