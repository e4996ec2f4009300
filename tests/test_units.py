"""Tests for unit and salinity conversions."""

import pytest

from henry_calcs.salinity import salinity_to_psu
from henry_calcs.units import (
    barg_to_atm,
    fahrenheit_to_celsius,
    mol_L_to_nmol_L,
    mol_L_to_umol_L,
    psi_to_atm,
)


class TestUnits:
    """Tests for input/output unit helpers."""

    def test_fahrenheit(self):
        assert fahrenheit_to_celsius(32.0) == pytest.approx(0.0)
        assert fahrenheit_to_celsius(212.0) == pytest.approx(100.0)

    def test_barg(self):
        # 0 barg is 1 bar absolute
        assert barg_to_atm(0.0) == pytest.approx(0.986923)

    def test_psi(self):
        assert psi_to_atm(14.696) == pytest.approx(1.0)

    def test_concentration(self):
        assert mol_L_to_umol_L(2.5e-4) == pytest.approx(250.0)
        assert mol_L_to_nmol_L(2.5e-9) == pytest.approx(2.5)


class TestSalinity:
    """Tests for salinity_to_psu."""

    @pytest.mark.parametrize("unit", ["PSU", "ppt"])
    def test_passthrough(self, unit):
        assert salinity_to_psu(34.0, unit) == 34.0

    def test_mg_L(self):
        assert salinity_to_psu(35000.0, "mg/L") == pytest.approx(35.0)

    def test_unknown_unit(self):
        with pytest.raises(ValueError, match="Unknown salinity unit"):
            salinity_to_psu(35.0, "g/L")
