"""
Command-line interface for the Henry's law calculator.

Usage:
    henry-calc compute 2 methane --S 0
    henry-calc compute 1000000 methane --TC 4 --z 1000
    henry-calc compute 500000 hydrogen --P 100 --no-sal-adj
    henry-calc gases
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from henry_calcs.constants import DEFAULT_S, DEFAULT_TC
from henry_calcs.gas_properties import GAS_PROPERTIES, SALINITY_MODELS, UnknownGasError
from henry_calcs.solubility import compute
from henry_calcs.units import mol_L_to_nmol_L, mol_L_to_umol_L

logger = logging.getLogger(__name__)

UNIT_CONVERTERS = {
    "mol/L": lambda c: c,
    "umol/L": mol_L_to_umol_L,
    "nmol/L": mol_L_to_nmol_L,
}

EXIT_UNKNOWN_GAS = 2


def cmd_compute(args: argparse.Namespace) -> int:
    """Compute and print one dissolved concentration."""
    try:
        conc = compute(
            args.x,
            args.gas,
            TC=args.TC,
            S=args.S,
            P=args.P,
            z=args.z,
            temp_adj=args.temp_adj,
            sal_adj=args.sal_adj,
        )
    except UnknownGasError as e:
        logger.error(str(e))
        return EXIT_UNKNOWN_GAS

    value = UNIT_CONVERTERS[args.units](conc)
    print(f"{value:.6g} {args.units}")
    return 0


def cmd_gases(args: argparse.Namespace) -> int:
    """List the gas catalog."""
    print(f"{'Gas':18} {'Ko (mol/L/atm)':>15} {'dT (K)':>8}  Salinity model")
    print("─" * 60)
    for name, props in GAS_PROPERTIES.items():
        sal = "yes" if name in SALINITY_MODELS else "-"
        print(f"{name:18} {props.Ko:15.4e} {props.dT:8.0f}  {sal}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="henry-calc",
        description="Dissolved gas concentration (mol/L) from headspace ppm via Henry's law",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("compute", help="Compute dissolved concentration")
    p.add_argument("x", type=float, help="Headspace concentration (ppm)")
    p.add_argument("gas", help="Gas name, e.g. methane or 'carbon dioxide'")
    p.add_argument("--TC", type=float, default=DEFAULT_TC, help="Temperature in °C (default: %(default)s)")
    p.add_argument("--S", type=float, default=DEFAULT_S, help="Salinity in PSU (default: %(default)s)")
    p.add_argument("--P", type=float, default=None, help="Pressure in atm, overrides --z")
    p.add_argument("--z", type=float, default=None, help="Depth in m, used when --P is not given")
    p.add_argument("--no-temp-adj", dest="temp_adj", action="store_false",
                   help="Disable temperature correction")
    p.add_argument("--no-sal-adj", dest="sal_adj", action="store_false",
                   help="Disable salinity model (methane, hydrogen)")
    p.add_argument("--units", choices=list(UNIT_CONVERTERS), default="mol/L",
                   help="Output units (default: %(default)s)")
    p.set_defaults(func=cmd_compute)

    g = sub.add_parser("gases", help="List supported gases")
    g.set_defaults(func=cmd_gases)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
