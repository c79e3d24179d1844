"""
Validation against the known Kuhn Poker Nash equilibria.

Kuhn Poker has a one-parameter family of equilibria, α ∈ [0, 1/3]:
- P1 with J: bet with probability α
- P1 with Q: always check; facing check-bet, call with probability α + 1/3
- P1 with K: bet with probability 3α; facing check-bet, always call
- P2 with J: fold to a bet; after a check, bet with probability 1/3
- P2 with Q: call a bet with probability 1/3; after a check, always check
- P2 with K: call a bet; after a check, always bet

Every equilibrium has the same game value, -1/18 for player 1.
"""

from typing import Optional, Tuple

from kuhn_cfr.solvers.vanilla import VanillaCFR

KUHN_GAME_VALUE = -1.0 / 18.0

# (infoset key, action index, low, high, description); action 0 = pass, 1 = bet
KNOWN_NASH_CHECKS = [
    ("J rr", 1, 0.0, 0.4, "P1 Jack bet frequency"),
    ("Q rr", 1, 0.0, 0.1, "P1 Queen bet frequency"),
    ("J rrcb", 0, 0.95, 1.0, "P1 Jack fold vs check-bet"),
    ("K rrcb", 1, 0.95, 1.0, "P1 King call vs check-bet"),
    ("J rrb", 0, 0.95, 1.0, "P2 Jack fold vs bet"),
    ("K rrb", 1, 0.95, 1.0, "P2 King call vs bet"),
    ("Q rrb", 1, 0.23, 0.43, "P2 Queen call vs bet"),
    ("J rrc", 1, 0.23, 0.43, "P2 Jack bet after check"),
    ("Q rrc", 1, 0.0, 0.1, "P2 Queen bet after check"),
    ("K rrc", 1, 0.95, 1.0, "P2 King bet after check"),
]


def validate_against_known_nash(
    solver: Optional[VanillaCFR] = None,
    iterations: int = 10000,
    value_tolerance: float = 0.01,
    max_exploitability: float = 0.01,
    alpha_tolerance: float = 0.1
) -> Tuple[bool, str]:
    """
    Validate a solved strategy against the known Kuhn Poker Nash equilibria.

    Args:
        solver: Solver that has already run; a fresh one is solved if None
        iterations: Iterations for a fresh solver
        value_tolerance: Allowed distance of the expected value from -1/18
        max_exploitability: Allowed exploitability of the average strategy
        alpha_tolerance: Allowed error in the α relationships

    Returns:
        (valid, report): Whether the strategy is close to Nash and detailed report
    """
    if solver is None:
        solver = VanillaCFR()
        solver.solve(iterations)

    report_lines = [
        "Nash Equilibrium Validation",
        "=" * 50,
        ""
    ]

    valid = True

    ev = solver.expected_value
    ev_ok = abs(ev - KUHN_GAME_VALUE) <= value_tolerance
    valid &= ev_ok
    report_lines.append(
        f"{'✓' if ev_ok else '✗'} Game value: {ev:.6f} (expected {KUHN_GAME_VALUE:.6f})"
    )

    expl = solver.exploitability()
    expl_ok = expl <= max_exploitability
    valid &= expl_ok
    report_lines.append(f"{'✓' if expl_ok else '✗'} Exploitability: {expl:.6f}")

    report_lines.append("")
    report_lines.append("Key Strategy Checks:")
    report_lines.append("-" * 40)

    strategies = solver.average_strategy

    for key, action_idx, low, high, description in KNOWN_NASH_CHECKS:
        strategy = strategies.get(key)
        if strategy is None:
            valid = False
            report_lines.append(f"  ✗ {description}: infoset {key!r} missing")
            continue

        prob = strategy[action_idx]
        ok = low <= prob <= high
        valid &= ok
        report_lines.append(
            f"  {'✓' if ok else '✗'} {description}: {prob:.3f} (expected {low:.2f}-{high:.2f})"
        )

    report_lines.append("")

    alpha_keys = ("J rr", "K rr", "Q rrcb")
    missing = [key for key in alpha_keys if strategies.get(key) is None]
    if missing:
        valid = False
        report_lines.append(f"  ✗ α relations: infosets {missing} missing")
        relations = []
    else:
        alpha = strategies["J rr"][1]
        relations = [
            ("P1 King bet = 3α", strategies["K rr"][1], min(3 * alpha, 1.0)),
            ("P1 Queen call vs check-bet = α + 1/3", strategies["Q rrcb"][1], alpha + 1.0 / 3.0),
        ]
        report_lines.append(f"α (P1 Jack bet) = {alpha:.3f}")

    for description, actual, expected in relations:
        ok = abs(actual - expected) <= alpha_tolerance
        valid &= ok
        report_lines.append(
            f"  {'✓' if ok else '✗'} {description}: {actual:.3f} (expected {expected:.3f})"
        )

    report_lines.append("")
    report_lines.append("=" * 50)
    report_lines.append(f"Validation: {'PASSED' if valid else 'FAILED'}")

    return bool(valid), "\n".join(report_lines)
