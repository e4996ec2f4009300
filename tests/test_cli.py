"""Tests for the command-line interface."""

import logging

import pytest

from henry_calcs.cli import EXIT_UNKNOWN_GAS, main
from henry_calcs.solubility import compute


class TestCompute:
    """Tests for the compute command."""

    def test_prints_result(self, capsys):
        assert main(["compute", "9340", "argon", "--TC", "10"]) == 0
        out = capsys.readouterr().out
        value, units = out.split()
        assert units == "mol/L"
        assert float(value) == pytest.approx(compute(9340, "argon", TC=10), rel=1e-5)

    def test_gas_with_space(self, capsys):
        assert main(["compute", "1000", "carbon dioxide"]) == 0
        assert "mol/L" in capsys.readouterr().out

    def test_flags(self, capsys):
        assert main(["compute", "500000", "hydrogen", "--P", "100", "--no-sal-adj"]) == 0
        value = float(capsys.readouterr().out.split()[0])
        expected = compute(500_000, "hydrogen", P=100, sal_adj=False)
        assert value == pytest.approx(expected, rel=1e-5)

    def test_micromolar(self, capsys):
        assert main(["compute", "210000", "oxygen", "--TC", "16", "--units", "umol/L"]) == 0
        value, units = capsys.readouterr().out.split()
        assert units == "umol/L"
        assert float(value) == pytest.approx(compute(210000, "oxygen", TC=16) * 1e6, rel=1e-5)

    def test_unknown_gas(self, capsys, caplog):
        with caplog.at_level(logging.ERROR):
            assert main(["compute", "100", "xenon"]) == EXIT_UNKNOWN_GAS
        assert "Unknown gas 'xenon'" in caplog.text
        assert capsys.readouterr().out == ""

    def test_malformed_number(self):
        with pytest.raises(SystemExit) as exc:
            main(["compute", "lots", "methane"])
        assert exc.value.code == 2


class TestGases:
    """Tests for the gases command."""

    def test_lists_catalog(self, capsys):
        assert main(["gases"]) == 0
        out = capsys.readouterr().out
        assert "hydrogen sulfide" in out
        methane_line = next(line for line in out.splitlines() if line.startswith("methane"))
        assert methane_line.rstrip().endswith("yes")
