"""
Plain-text report of a CFR run.

The layout is the output contract of the command-line tool:

    player 1 expected value: <ev>
    player 2 expected value: <-ev>

    player 1 strategies:
    <key> <p_pass> <p_bet>
    player 2 strategies:
    <key> <p_pass> <p_bet>
"""

from typing import List, Optional

import numpy as np

from kuhn_cfr.solvers.vanilla import CfrResult, Strategies


def format_strategy(key: str, strategy: Optional[np.ndarray]) -> str:
    """One report line: the key, then probabilities at 2 decimal places."""
    if strategy is None:
        return f"{key} N/A"
    return f"{key} " + " ".join(f"{p:.2f}" for p in strategy)


def _strategy_lines(strategies: Strategies) -> List[str]:
    return [format_strategy(key, strategies[key]) for key in sorted(strategies)]


def format_results(result: CfrResult) -> str:
    report_lines = [
        f"player 1 expected value: {result.expected_value}",
        f"player 2 expected value: {result.player_2_expected_value}",
        "",
        "player 1 strategies:",
    ]
    report_lines.extend(_strategy_lines(result.player_1_strategies))
    report_lines.append("player 2 strategies:")
    report_lines.extend(_strategy_lines(result.player_2_strategies))
    return "\n".join(report_lines)


def display_results(result: CfrResult) -> None:
    print(format_results(result))
