import streamlit as st
import numpy as np
import pandas as pd
import plotly.express as px

from henry_calcs.gas_properties import GAS_NAMES, SALINITY_MODELS, UnknownGasError, solubility_mol_L_to_g_m3
from henry_calcs.solubility import compute, select_model, resolve_pressure
from henry_calcs.units import barg_to_atm, psi_to_atm, fahrenheit_to_celsius, mol_L_to_umol_L
from henry_calcs.salinity import salinity_to_psu, SALINITY_UNITS
from henry_calcs.constants import DEFAULT_TC, DEFAULT_S


# ------------------------------------ Streamlit Application ------------------------------------
st.set_page_config("Henry's Law Dissolved Gas Calculator", page_icon="ↂ", layout='wide')
st.title("Henry's Law Dissolved Gas Calculator")

with st.expander("Input Parameters", expanded=True):
    st.info("Defaults are ~lab conditions in seawater")
    col1, col2 = st.columns(2)

    # value
    with col1:
        x_ppm = st.number_input("Headspace concentration (ppm)", value=2.0, min_value=0.0)
        gas = st.selectbox("Gas Type", options=list(GAS_NAMES), index=0)
        temp_input = st.number_input("Temperature", value=DEFAULT_TC)
        t_s = st.number_input("Salinity value", value=DEFAULT_S)
        press_mode = st.radio("Pressure from", ["Pressure", "Depth"], horizontal=True)
        if press_mode == "Pressure":
            press_input = st.number_input("Pressure", value=1.0)
        else:
            depth_m = st.number_input("Depth (m)", value=0.0, min_value=0.0)

    # unit of measure / options
    with col2:
        temp_unit = st.selectbox("Unit", ["°C", "°F"], index=0)
        unit_s = st.selectbox("Salinity unit", list(SALINITY_UNITS), index=0)
        if press_mode == "Pressure":
            press_unit = st.selectbox("Pressure unit", ['atm', 'barg', 'psi'], index=0)
        temp_adj = st.checkbox("Temperature correction", value=True)
        sal_adj = st.checkbox("Salinity model (methane, hydrogen)", value=True,
                              disabled=gas not in SALINITY_MODELS)

# Temp Convert
Temp_C = fahrenheit_to_celsius(temp_input) if temp_unit == "°F" else temp_input
S_psu = salinity_to_psu(t_s, unit_s)

# Pressure: explicit pressure wins, otherwise derive from depth
if press_mode == "Pressure":
    if press_unit == "barg":
        Pressure_atm = barg_to_atm(press_input)
    elif press_unit == "psi":
        Pressure_atm = psi_to_atm(press_input)
    else:
        Pressure_atm = press_input
else:
    Pressure_atm = resolve_pressure(z=depth_m)


if st.button("Calculate"):
    try:
        model = select_model(gas, sal_adj=sal_adj, temp_adj=temp_adj)
        conc = compute(x_ppm, gas, TC=Temp_C, S=S_psu, P=Pressure_atm,
                       temp_adj=temp_adj, sal_adj=sal_adj)
    except UnknownGasError as e:
        st.error(str(e))
        st.stop()

    st.markdown(" # Results💡")

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Concentration (mol/L)",   f"{conc:.6e}")
        st.metric("Concentration (µmol/L)",  f"{mol_L_to_umol_L(conc):.6f}")

    with col2:
        st.metric("Concentration (g/m³)",    f"{solubility_mol_L_to_g_m3(conc, gas):.6f}")
        st.metric("Solubility model",        type(model).__name__)
        st.metric("Pressure (atm)",          f"{Pressure_atm:.3f}")

    # Graphs

    st.markdown("# Graphs 📊")

    # ----- Concentration vs Temp --------
    temps = np.linspace(0, Temp_C + 15.0, 20)
    conc_vs_T = compute(x_ppm, gas, TC=temps, S=S_psu, P=Pressure_atm,
                        temp_adj=temp_adj, sal_adj=sal_adj)

    df_Temp = pd.DataFrame({
        "Temperature (°C)": temps,
        "Concentration (µmol/L)": mol_L_to_umol_L(np.broadcast_to(conc_vs_T, temps.shape)),
        })

    fig_T = px.line(df_Temp, x="Temperature (°C)", y="Concentration (µmol/L)",
                    title=f"Concentration vs Temperature @ {Pressure_atm:.2f} atm, S = {S_psu:.1f} PSU for {gas.title()} 🥶",
                    markers=True)
    fig_T.update_traces(line_color='orange')
    st.plotly_chart(fig_T)

    # ------- Concentration vs Pressure -------
    pressures = np.linspace(0.1, Pressure_atm + 3, 20)
    conc_vs_P = compute(x_ppm, gas, TC=Temp_C, S=S_psu, P=pressures,
                        temp_adj=temp_adj, sal_adj=sal_adj)

    df_P = pd.DataFrame({
        "Pressure (atm)": pressures,
        "Concentration (µmol/L)": mol_L_to_umol_L(conc_vs_P),
        })

    fig_P = px.line(df_P, x="Pressure (atm)", y="Concentration (µmol/L)",
                    title=f"Concentration vs Pressure @ {Temp_C:.1f} °C, S = {S_psu:.1f} PSU for {gas.title()} 💎",
                    markers=True,
                    line_shape='linear')

    fig_P.update_traces(line_color='lightgreen')
    st.plotly_chart(fig_P)

    # ------- Combined Heat Map -------
    TT, PP = np.meshgrid(temps, pressures)
    grid = compute(x_ppm, gas, TC=TT, S=S_psu, P=PP, temp_adj=temp_adj, sal_adj=sal_adj)

    df_combined = pd.DataFrame({
        "Temperature (°C)": TT.ravel(),
        "Pressure (atm)":   PP.ravel(),
        "Concentration":    mol_L_to_umol_L(np.broadcast_to(grid, TT.shape)).ravel(),
        })

    pivot_combo = df_combined.pivot(index="Pressure (atm)", columns="Temperature (°C)", values="Concentration")

    fig_combo = px.imshow(pivot_combo, aspect='auto', origin='lower',
                          labels={
                                    "x": "Temperature (°C)",
                                    "y": "Pressure (atm)",
                                    "color": "Concentration (µmol/L)"
                          },
                          title=f"Concentration Heatmap @ S = {S_psu:.1f} PSU, Gas = {gas.title()} 🥵",
                          color_continuous_scale='Greys')

    st.plotly_chart(fig_combo)
