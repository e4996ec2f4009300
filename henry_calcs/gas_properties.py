"""
Catalog of supported gases.

Built once at import from the raw tables in constants.py and exposed as
read-only mappings.
"""

from dataclasses import dataclass
from types import MappingProxyType

from .constants import GAS_DATA, SALINITY_COEFFS, PA_M3_TO_ATM_L


class UnknownGasError(KeyError):
    """Raised when a gas name is not in the catalog."""

    def __init__(self, gas):
        self.gas = gas
        available = ", ".join(GAS_NAMES)
        super().__init__(f"Unknown gas '{gas}'. Available: {available}")

    def __str__(self):
        # KeyError repr()s its argument, keep the message readable
        return self.args[0]


@dataclass(frozen=True)
class GasProperties:
    """
    Generic-model entry for one gas.

    Attributes:
        name: catalog key
        Ko: solubility constant at 298.15 K, mol/(L·atm)
        dT: van 't Hoff temperature coefficient, K
        molar_mass: g/mol
    """

    name: str
    Ko: float
    dT: float
    molar_mass: float


@dataclass(frozen=True)
class SalinityCoefficients:
    """Wiesenburg & Guinasso fit coefficients (nmol/(L·atm) scale)."""

    A: tuple
    B: tuple


GAS_PROPERTIES = MappingProxyType({
    name: GasProperties(
        name=name,
        Ko=props['Ko'] * PA_M3_TO_ATM_L,   # mol/(m³·Pa) -> mol/(L·atm)
        dT=props['dT'],
        molar_mass=props['molar_mass'],
    )
    for name, props in GAS_DATA.items()
})

SALINITY_MODELS = MappingProxyType({
    name: SalinityCoefficients(A=tuple(c['A']), B=tuple(c['B']))
    for name, c in SALINITY_COEFFS.items()
})

GAS_NAMES = tuple(GAS_PROPERTIES)


def get_gas_properties(gas):
    """Look up a gas by its exact catalog name, raising UnknownGasError."""
    try:
        return GAS_PROPERTIES[gas]
    except (KeyError, TypeError):
        raise UnknownGasError(gas) from None


def solubility_mol_L_to_g_m3(sol_mol_L, gas):
    """
    Convert solubility from mol/L to g/m³ for the given gas.
    1 mol/L = 1000 mol/m³, then × molar_mass (g/mol) → g/m³.
    """
    mm = get_gas_properties(gas).molar_mass  # g/mol
    return sol_mol_L * 1000.0 * mm
