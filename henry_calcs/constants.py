T0 = 298.15  # reference temperature (25 °C) in Kelvin
KELVIN_OFFSET = 273.15

PPM = 1_000_000          # ppm -> mole fraction
NMOL_PER_MOL = 1e9
PA_M3_TO_ATM_L = 101.325  # mol/(m³·Pa) -> mol/(L·atm)

# Hydrostatic approximation: 1 atm of air plus 1 atm per 10 m of water
ATM_SURFACE = 1.0
M_PER_ATM = 10.0

# Defaults (~lab conditions, open-ocean salinity)
DEFAULT_TC = 22.0  # °C
DEFAULT_S = 34.0   # PSU

# Gas properties: Ko (Henry's solubility constant at T0, mol/(m³·Pa)),
# dT (van 't Hoff temperature coefficient, K), molar_mass (g/mol).
# Ko/dT are consensus values from Sander (2015), doi:10.5194/acp-15-4399-2015
GAS_DATA = {
    'methane':          {'Ko': 1.4e-5, 'dT': 1900.0, 'molar_mass': 16.04},
    'ethane':           {'Ko': 1.9e-5, 'dT': 2400.0, 'molar_mass': 30.07},
    'propane':          {'Ko': 1.5e-5, 'dT': 2700.0, 'molar_mass': 44.10},
    'butane':           {'Ko': 1.2e-5, 'dT': 3100.0, 'molar_mass': 58.12},
    'pentane':          {'Ko': 8.0e-6, 'dT': 3400.0, 'molar_mass': 72.15},
    'hexane':           {'Ko': 6.0e-6, 'dT': 3800.0, 'molar_mass': 86.18},
    'hydrogen':         {'Ko': 7.8e-6, 'dT': 530.0,  'molar_mass': 2.016},
    'oxygen':           {'Ko': 1.3e-5, 'dT': 1500.0, 'molar_mass': 32.00},
    'nitrogen':         {'Ko': 6.4e-6, 'dT': 1300.0, 'molar_mass': 28.01},
    'nitrous oxide':    {'Ko': 2.4e-4, 'dT': 2600.0, 'molar_mass': 44.01},
    'argon':            {'Ko': 1.4e-5, 'dT': 1500.0, 'molar_mass': 39.95},
    'hydrogen sulfide': {'Ko': 1.0e-3, 'dT': 2100.0, 'molar_mass': 34.08},
    # dissolved CO2 gas only, not total DIC (needs pH for the carbonate system)
    'carbon dioxide':   {'Ko': 3.3e-4, 'dT': 2400.0, 'molar_mass': 44.01},
}

# Wiesenburg & Guinasso (1979), doi:10.1021/je60083a006
# ln K (nmol/(L·atm)) = A0 + A1*(100/T) + A2*ln(T/100) + A3*(T/100)
#                       + S*(B0 + B1*(T/100) + B2*(T/100)^2)
SALINITY_COEFFS = {
    'methane':  {'A': (-415.2807, 596.8104, 379.2599, -62.0757),
                 'B': (-0.059160, 0.032174, -0.0048198)},
    'hydrogen': {'A': (-317.4669, 455.8526, 297.5313, -49.2778),
                 'B': (-0.070143, 0.041069, -0.0063763)},
}
