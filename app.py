#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Boiling Point Simulator - Interactive Streamlit Application
================================================================================

Project:        Boiling Point Simulator
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This is the main Streamlit application for the Boiling Point Simulator.
Users can:
- Pick a substance, altitude, mass and burner power
- Heat the pot or switch the burner off and let it cool
- Watch the boiling point change with altitude
- View heating and mass-loss curves
"""

import matplotlib.pyplot as plt
import streamlit as st

from boilsim.errors import BoilSimError
from boilsim.simulation import BoilingSimulation, Phase, create_kettle_simulation
from boilsim.substances import available_substances, load_substance
from boilsim.units import format_altitude, format_mass, format_temperature
from boilsim.visualization import (
    get_phase_indicator_color,
    plot_boiling_point_vs_altitude,
    plot_heating_curve,
    plot_mass_curve,
)


# Page configuration
st.set_page_config(
    page_title="Boiling Point Simulator",
    page_icon="🫖",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
.phase-indicator {
    font-size: 24px;
    font-weight: bold;
    padding: 10px;
    border-radius: 8px;
    text-align: center;
    margin: 5px 0;
    color: white;
}
</style>
""", unsafe_allow_html=True)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'simulation' not in st.session_state:
        st.session_state.simulation = None
    if 'unit' not in st.session_state:
        st.session_state.unit = 'C'
    if 'power' not in st.session_state:
        st.session_state.power = 2000.0


def create_simulation(
    substance_id: str,
    mass: float,
    temperature: float,
    altitude: float
) -> BoilingSimulation:
    """Create a new session with the chosen parameters."""
    return create_kettle_simulation(
        substance_id, mass=mass, temperature=temperature, altitude=altitude
    )


def render_figure(fig):
    """Show a matplotlib figure and release it."""
    st.pyplot(fig)
    plt.close(fig)


def render_sidebar():
    """Render the sidebar with controls."""
    st.sidebar.title("🫖 Boiling Point Simulator")

    st.sidebar.markdown("""
    ---
    Liquids boil when their **vapor pressure** equals the surrounding air
    pressure. Higher up there is less air above you, so water boils
    below 100 °C:

    $$\\log_{10} P = A - \\frac{B}{C + T}$$
    ---
    """)

    st.sidebar.subheader("⚙️ Setup")

    substance_id = st.sidebar.selectbox("Substance", available_substances())
    altitude = st.sidebar.slider("Altitude (m)", 0, 11000, 0, step=100)
    mass = st.sidebar.slider("Mass (kg)", 0.1, 5.0, 1.0, step=0.1)
    temperature = st.sidebar.slider("Start temperature (°C)", 0.0, 90.0, 20.0, step=1.0)

    if st.sidebar.button("🚀 Fill the Pot", use_container_width=True):
        try:
            st.session_state.simulation = create_simulation(
                substance_id, mass, temperature, float(altitude)
            )
        except BoilSimError as exc:
            st.sidebar.error(str(exc))

    st.sidebar.markdown("---")
    st.sidebar.subheader("🔥 Burner")
    st.session_state.power = st.sidebar.slider(
        "Power (W)", 0, 5000, int(st.session_state.power), step=100
    )

    st.sidebar.markdown("---")
    fahrenheit = st.sidebar.checkbox("Show °F", value=st.session_state.unit == 'F')
    st.session_state.unit = 'F' if fahrenheit else 'C'

    return substance_id


def render_phase_indicator(phase: Phase):
    """Render a colored phase indicator."""
    color = get_phase_indicator_color(phase.value)
    st.markdown(f"""
    <div class="phase-indicator" style="background-color: {color};">
        {phase.value.upper()}
    </div>
    """, unsafe_allow_html=True)


def render_main_content(substance_id: str):
    """Render the main simulation content."""
    sim = st.session_state.simulation
    unit = st.session_state.unit

    if sim is None:
        st.title("🫖 Boiling Point Simulator")
        st.markdown("""
        ## Why does water boil at a lower temperature in the mountains?

        Pick a substance and an altitude in the sidebar, fill the pot and turn
        on the burner. You will see:

        - **Heating**: temperature rises by Q = m·c·ΔT
        - **Boiling**: temperature stays put while mass turns into vapor
        - **Cooling**: with the burner off, the pot cools toward room temperature

        *👈 Use the sidebar to begin!*
        """)
        render_figure(plot_boiling_point_vs_altitude(load_substance(substance_id)))
        return

    col1, col2 = st.columns([2, 1])

    with col1:
        btn1, btn2, btn3, btn4 = st.columns(4)
        power = float(st.session_state.power)
        with btn1:
            if st.button("🔥 Heat 10 s", use_container_width=True):
                sim.run_for(10.0, power)
        with btn2:
            if st.button("🔥 Heat 60 s", use_container_width=True):
                sim.run_for(60.0, power)
        with btn3:
            if st.button("❄️ Cool 60 s", use_container_width=True):
                sim.run_for(60.0, 0.0)
        with btn4:
            if st.button("🔄 Reset", use_container_width=True):
                st.session_state.simulation = None
                st.rerun()

        boiling_point = sim.boiling_point.temperature if sim.boiling_point else None
        render_figure(plot_heating_curve(sim.history, boiling_point))
        render_figure(plot_mass_curve(sim.history, sim.state.residue_mass))

    with col2:
        state = sim.state
        st.markdown("### Current Phase")
        render_phase_indicator(sim.phase)

        st.markdown("### State")
        met1, met2 = st.columns(2)
        with met1:
            st.metric("Temperature", format_temperature(state.temperature, unit))
            st.metric("Time", f"{sim.time:.1f} s")
        with met2:
            st.metric("Mass", format_mass(state.fluid_mass))
            st.metric("Altitude", format_altitude(state.altitude))

        st.markdown("### Boiling Point")
        result = sim.boiling_point
        if result is None or not sim.substance.can_boil:
            st.info("This substance does not boil in this simulation.")
        else:
            st.metric("Boiling point", format_temperature(result.temperature, unit, 2))
            if result.elevation:
                st.caption(f"Includes {result.elevation:.3f} °C elevation from dissolved solute")
            if result.is_extrapolated:
                verified = result.verified_range
                st.warning(
                    f"Outside the verified Antoine range "
                    f"({verified.min} to {verified.max} °C); accuracy is reduced."
                )

        if state.all_evaporated:
            st.error("All evaporable fluid is gone. Reset to start again.")


def main():
    initialize_session_state()
    substance_id = render_sidebar()
    render_main_content(substance_id)


if __name__ == "__main__":
    main()
