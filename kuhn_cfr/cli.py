"""
Command-line driver: solve Kuhn Poker and print the equilibrium report.

Usage:
    python -m kuhn_cfr [--iterations N] [--exploitability] [--log-level LEVEL]

The report goes to stdout, logs go to stderr.
"""

import argparse
import logging
from typing import List, Optional

from kuhn_cfr.report import display_results
from kuhn_cfr.solvers.vanilla import DEFAULT_ITERATIONS, VanillaCFR


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kuhn-cfr",
        description="Approximate the Kuhn Poker Nash equilibrium with vanilla CFR"
    )
    parser.add_argument(
        "-n", "--iterations", type=_positive_int, default=DEFAULT_ITERATIONS,
        help=f"CFR iterations (default: {DEFAULT_ITERATIONS})"
    )
    parser.add_argument(
        "--check-invariants", action="store_true",
        help="assert CFR invariants during every iteration (slower)"
    )
    parser.add_argument(
        "--exploitability", action="store_true",
        help="also print the exploitability of the average strategy"
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    solver = VanillaCFR(check_invariants=args.check_invariants)
    result = solver.solve(args.iterations)

    display_results(result)

    if args.exploitability:
        print(f"exploitability: {solver.exploitability()}")

    return 0
