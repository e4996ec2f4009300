"""
Henry's law dissolved-gas concentration from a headspace measurement.

Two solubility models are available:

* SalinityModel -- Wiesenburg & Guinasso (1979) joint temperature/salinity fit,
  methane and hydrogen only.
* GenericModel -- reference constant Ko at 298.15 K with an optional van 't Hoff
  temperature correction, every gas in the catalog. Salinity has no effect.

select_model() picks one per call; compute() turns it into mol/L.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .constants import (
    T0, KELVIN_OFFSET, PPM, NMOL_PER_MOL, ATM_SURFACE, M_PER_ATM,
    DEFAULT_TC, DEFAULT_S,
)
from .gas_properties import get_gas_properties, SALINITY_MODELS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenericModel:
    gas: str
    Ko: float  # mol/(L·atm) at T0
    dT: float  # K
    temp_adj: bool = True

    def kh(self, TK, S=None):
        """Solubility constant in mol/(L·atm). S is accepted and ignored."""
        if not self.temp_adj:
            return self.Ko
        # van 't Hoff
        return self.Ko * np.exp(self.dT * (1.0 / TK - 1.0 / T0))


@dataclass(frozen=True)
class SalinityModel:
    gas: str
    A: tuple
    B: tuple

    def kh(self, TK, S):
        """Solubility constant in mol/(L·atm) at temperature TK (K) and salinity S (PSU)."""
        A, B = self.A, self.B
        t = TK / 100.0
        ln_kh = (A[0] + A[1] * (100.0 / TK) + A[2] * np.log(t) + A[3] * t
                 + S * (B[0] + B[1] * t + B[2] * t ** 2))
        return np.exp(ln_kh) / NMOL_PER_MOL  # nmol/(L·atm) -> mol/(L·atm)


def select_model(gas, sal_adj=True, temp_adj=True):
    """
    Choose the solubility model for a gas and flag combination.

    The salinity fit is a joint function of T and S, so it is only used when
    both corrections are requested. Everything else, including methane and
    hydrogen with either flag off, falls back to the catalog constant.

    Raises:
        UnknownGasError: if gas is not in the catalog
    """
    props = get_gas_properties(gas)

    if sal_adj and temp_adj and gas in SALINITY_MODELS:
        coeffs = SALINITY_MODELS[gas]
        return SalinityModel(gas=gas, A=coeffs.A, B=coeffs.B)

    return GenericModel(gas=gas, Ko=props.Ko, dT=props.dT, temp_adj=bool(temp_adj))


def resolve_pressure(P=None, z=None):
    """Total pressure in atm. An explicit P always wins over depth z (m)."""
    if P is not None:
        return P
    return ATM_SURFACE + (z / M_PER_ATM if z is not None else 0.0)


def compute(x, gas, TC=DEFAULT_TC, S=DEFAULT_S, P=None, z=None,
            temp_adj=True, sal_adj=True):
    """
    Dissolved gas concentration (mol/L) at equilibrium with a headspace.

    Args:
        x: headspace concentration, ppm
        gas: catalog name, e.g. "methane" or "carbon dioxide"
        TC: water temperature, °C
        S: salinity, PSU (salinity model only)
        P: total pressure, atm; overrides z
        z: depth, m; used for P when P is not given
        temp_adj: apply a temperature correction
        sal_adj: use the salinity model where one exists (needs temp_adj)

    Numeric arguments may be numpy arrays and broadcast against each other.
    Physically meaningless inputs (x < 0, TK <= 0, P < 0) are not rejected.

    Examples:
        >>> compute(2, "methane", S=0)                     # ~atmospheric CH4 in DI water
        >>> compute(1_000_000, "methane", TC=4, z=1000)    # pure CH4 at a cold seep
        >>> compute(500_000, "hydrogen", P=100, sal_adj=False)
        >>> compute(0.21e6, "oxygen", TC=16) * 1e6         # µmol/L
    """
    TK = TC + KELVIN_OFFSET  # celsius -> kelvin
    xp = x / PPM             # ppm -> mole fraction
    P = resolve_pressure(P, z)

    model = select_model(gas, sal_adj=sal_adj, temp_adj=temp_adj)
    logger.debug("%s: using %s", gas, type(model).__name__)

    KH = model.kh(TK, S)  # mol/(L·atm)
    return KH * xp * P
