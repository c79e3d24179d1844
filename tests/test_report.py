"""
Tests for the text report and the command-line driver.

Run with: pytest tests/test_report.py -v
"""

import re

import numpy as np
import pytest

from kuhn_cfr.cli import build_parser, main
from kuhn_cfr.report import format_results, format_strategy
from kuhn_cfr.solvers.vanilla import CfrResult

STRATEGY_LINE = re.compile(r"^[JQK] rr[cb]* \d\.\d\d \d\.\d\d$")


class TestFormatResults:

    @pytest.fixture
    def result(self):
        return CfrResult(
            expected_value=-0.05,
            iterations=10,
            player_1_strategies={
                "K rr": np.array([0.4, 0.6]),
                "J rr": np.array([0.8, 0.2]),
            },
            player_2_strategies={
                "Q rrb": np.array([2.0 / 3.0, 1.0 / 3.0]),
                "J rrc": None,
            },
        )

    def test_layout(self, result):
        lines = format_results(result).split("\n")
        assert lines == [
            "player 1 expected value: -0.05",
            "player 2 expected value: 0.05",
            "",
            "player 1 strategies:",
            "J rr 0.80 0.20",
            "K rr 0.40 0.60",
            "player 2 strategies:",
            "J rrc N/A",
            "Q rrb 0.67 0.33",
        ]

    def test_format_strategy(self):
        assert format_strategy("K rrcb", np.array([0.0, 1.0])) == "K rrcb 0.00 1.00"
        assert format_strategy("K rrcb", None) == "K rrcb N/A"


class TestCommandLine:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.iterations == 10000
        assert not args.check_invariants
        assert not args.exploitability
        assert args.log_level == "WARNING"

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_rejects_non_positive_iterations(self, value):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--iterations", value])

    def test_main_prints_report(self, capsys):
        assert main(["-n", "100"]) == 0

        lines = capsys.readouterr().out.rstrip("\n").split("\n")
        assert len(lines) == 4 + 6 + 1 + 6
        assert lines[0].startswith("player 1 expected value: ")
        assert lines[1].startswith("player 2 expected value: ")
        assert lines[2] == ""
        assert lines[3] == "player 1 strategies:"
        assert lines[10] == "player 2 strategies:"

        p1_lines = lines[4:10]
        p2_lines = lines[11:]
        for line in p1_lines + p2_lines:
            assert STRATEGY_LINE.match(line), line
        assert all(len(line.split()[1]) % 2 == 0 for line in p1_lines)
        assert all(len(line.split()[1]) % 2 == 1 for line in p2_lines)
        assert p1_lines == sorted(p1_lines)
        assert p2_lines == sorted(p2_lines)

    def test_expected_values_are_negations(self, capsys):
        main(["-n", "50"])
        lines = capsys.readouterr().out.split("\n")
        ev_1 = float(lines[0].split(": ")[1])
        ev_2 = float(lines[1].split(": ")[1])
        assert ev_1 == -ev_2

    def test_exploitability_flag(self, capsys):
        main(["-n", "50", "--exploitability", "--check-invariants"])
        out = capsys.readouterr().out
        assert out.rstrip("\n").split("\n")[-1].startswith("exploitability: ")
