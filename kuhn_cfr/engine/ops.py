"""
Core CFR strategy operations.

- Regret matching: convert cumulative regrets to the next strategy
- Average strategy: normalise the accumulated strategy sums
- Invariant checks used while debugging the traversal

All operations work on per-infoset NumPy vectors of length num_actions.
"""

from typing import Optional

import numpy as np

# Average-strategy probabilities below this are treated as noise
AVERAGE_STRATEGY_THRESHOLD = 0.001


def positive_part(x: np.ndarray) -> np.ndarray:
    """Element-wise max(x, 0)."""
    return np.maximum(x, 0.0)


def uniform_strategy(num_actions: int) -> np.ndarray:
    """Equal probability for every action."""
    return np.full(num_actions, 1.0 / num_actions)


def regret_match(regret_sum: np.ndarray) -> np.ndarray:
    """
    Convert cumulative regrets to a strategy via regret matching.

        positive_regrets = max(0, regret_sum)
        if sum(positive_regrets) > 0:
            strategy = positive_regrets / sum(positive_regrets)
        else:
            strategy = uniform over actions

    Args:
        regret_sum: Cumulative regrets of shape (num_actions,)

    Returns:
        strategy: Valid probability distribution of shape (num_actions,)
    """
    positive_regrets = positive_part(regret_sum)
    total = positive_regrets.sum()

    if total > 0:
        return positive_regrets / total
    return uniform_strategy(len(regret_sum))


def average_strategy(
    strategy_sum: np.ndarray,
    reach_pr_sum: float,
    threshold: float = AVERAGE_STRATEGY_THRESHOLD
) -> Optional[np.ndarray]:
    """
    Time-averaged strategy: strategy_sum / reach_pr_sum.

    Probabilities below `threshold` are snapped to 0 and the result is
    renormalised.

    Args:
        strategy_sum: Reach-weighted strategy sums of shape (num_actions,)
        reach_pr_sum: Cumulative reach probability of the infoset
        threshold: Noise threshold

    Returns:
        Average strategy, or None if the infoset was never reached
    """
    if reach_pr_sum <= 0:
        return None

    strategy = strategy_sum / reach_pr_sum
    strategy = np.where(strategy < threshold, 0.0, strategy)

    total = strategy.sum()
    if total <= 0:
        return None
    return strategy / total


# =============================================================================
# Invariant checks for debugging CFR
# =============================================================================

def check_distribution(strategy: np.ndarray, tolerance: float = 1e-9) -> bool:
    """
    Check that a strategy is nonnegative and sums to 1.

    Returns:
        True if invariant holds, raises AssertionError otherwise
    """
    assert np.all(strategy >= 0), f"Negative probability in strategy {strategy}"
    assert abs(strategy.sum() - 1.0) < tolerance, \
        f"Strategy {strategy} sums to {strategy.sum():.12f}, not 1"
    return True


def check_regret_invariant(
    strategy: np.ndarray,
    regrets: np.ndarray,
    tolerance: float = 1e-9
) -> bool:
    """
    Check CFR invariant: sum_a sigma[a] * regret[a] ≈ 0 at a decision node.

    This must hold because:
    - regret[a] = u[a] - u
    - u = sum_a sigma[a] * u[a]
    - Therefore: sum_a sigma[a] * (u[a] - u) = u - u = 0

    Returns:
        True if invariant holds, raises AssertionError otherwise
    """
    sigma_regret_sum = float(np.dot(strategy, regrets))

    assert abs(sigma_regret_sum) < tolerance, \
        f"Regret invariant violated: " \
        f"sum(sigma * regret) = {sigma_regret_sum:.12f}, tolerance = {tolerance}"

    return True


def check_zero_sum_invariant(
    value_p1: float,
    value_p2: float,
    tolerance: float = 1e-9
) -> bool:
    """
    Check zero-sum invariant: EV_p1 + EV_p2 ≈ 0.

    Returns:
        True if invariant holds, raises AssertionError otherwise
    """
    total = value_p1 + value_p2

    assert abs(total) < tolerance, \
        f"Zero-sum invariant violated: " \
        f"EV_P1={value_p1:.6f}, EV_P2={value_p2:.6f}, sum={total:.6f}"

    return True
