"""
Henry's law calculator for dissolved gases in water and seawater.

Example usage:
    >>> from henry_calcs import compute
    >>> compute(2, "methane", S=0)               # mol/L
    >>> compute(9340, "argon", TC=10) * 1e6      # µmol/L
"""

from henry_calcs.gas_properties import (
    GAS_NAMES,
    GAS_PROPERTIES,
    SALINITY_MODELS,
    GasProperties,
    SalinityCoefficients,
    UnknownGasError,
    get_gas_properties,
)
from henry_calcs.solubility import (
    GenericModel,
    SalinityModel,
    compute,
    resolve_pressure,
    select_model,
)

__version__ = "0.1.0"

__all__ = [
    "compute",
    "select_model",
    "resolve_pressure",
    "GenericModel",
    "SalinityModel",
    "GasProperties",
    "SalinityCoefficients",
    "GAS_NAMES",
    "GAS_PROPERTIES",
    "SALINITY_MODELS",
    "UnknownGasError",
    "get_gas_properties",
]
