"""
Exact evaluation of strategy profiles.

A policy maps infoset keys to action probability vectors. Keys that are
missing, or map to None, are played uniformly.

- policy_value: expected value for player 1 when both players follow the policy
- best_response_value: value a best-responding player gets against the policy
- nash_conv / exploitability: distance of the policy from Nash equilibrium
"""

from collections import defaultdict
from typing import Dict, Mapping, Optional

import numpy as np

from kuhn_cfr.games.base import Game, Player

Policy = Mapping[str, Optional[np.ndarray]]


def _strategy_at(game: Game, policy: Policy, card: int, history: str) -> np.ndarray:
    strategy = policy.get(game.infoset_key(card, history))
    if strategy is None:
        return np.full(game.num_actions, 1.0 / game.num_actions)
    return strategy


def _value(game: Game, policy: Policy, history: str, card_1: int, card_2: int) -> float:
    """Value for the player to move at `history` (negamax recursion)."""
    if game.is_terminal(history):
        return game.terminal_util(history, card_1, card_2)

    card = card_1 if game.current_player(history) == Player.PLAYER_1 else card_2
    strategy = _strategy_at(game, policy, card, history)

    value = 0.0
    for action in game.legal_actions(history):
        value -= strategy[action.id] * _value(game, policy, history + action.name, card_1, card_2)
    return value


def policy_value(game: Game, policy: Policy) -> float:
    """
    Expected value of the profile for player 1.

    Args:
        game: Game definition
        policy: infoset key -> action probabilities, used by both players

    Returns:
        Player 1's expected value (player 2's is its negation)
    """
    total = 0.0
    for card_1, card_2, chance_prob in game.chance_outcomes():
        total += chance_prob * _value(game, policy, game.deal_history, card_1, card_2)
    return total


def _best_response(
    game: Game,
    policy: Policy,
    history: str,
    player: Player,
    br_card: int,
    opp_weights: Dict[int, float]
) -> float:
    """
    Best-response value summed over the opponent cards still possible.

    opp_weights[card] = chance probability * opponent reach for that card.
    Holding every opponent card at once lets the max below act on the
    whole information set, not on a single node.
    """
    if game.is_terminal(history):
        sign = 1.0 if game.current_player(history) == player else -1.0
        value = 0.0
        for opp_card, weight in opp_weights.items():
            if player == Player.PLAYER_1:
                util = game.terminal_util(history, br_card, opp_card)
            else:
                util = game.terminal_util(history, opp_card, br_card)
            value += weight * sign * util
        return value

    actions = game.legal_actions(history)

    if game.current_player(history) == player:
        return max(
            _best_response(game, policy, history + a.name, player, br_card, opp_weights)
            for a in actions
        )

    value = 0.0
    for action in actions:
        next_weights = {
            opp_card: weight * _strategy_at(game, policy, opp_card, history)[action.id]
            for opp_card, weight in opp_weights.items()
        }
        value += _best_response(game, policy, history + action.name, player, br_card, next_weights)
    return value


def best_response_value(game: Game, policy: Policy, player: Player) -> float:
    """
    Value `player` obtains by best-responding to the opponent's policy.

    Args:
        game: Game definition
        policy: Policy followed by the opponent
        player: Player.PLAYER_1 or Player.PLAYER_2

    Returns:
        Expected value from `player`'s perspective
    """
    groups: Dict[int, Dict[int, float]] = defaultdict(dict)
    for card_1, card_2, chance_prob in game.chance_outcomes():
        if player == Player.PLAYER_1:
            groups[card_1][card_2] = chance_prob
        else:
            groups[card_2][card_1] = chance_prob

    return sum(
        _best_response(game, policy, game.deal_history, player, br_card, opp_weights)
        for br_card, opp_weights in groups.items()
    )


def nash_conv(game: Game, policy: Policy) -> float:
    """Sum of both players' best-response values (0 at Nash equilibrium)."""
    return (
        best_response_value(game, policy, Player.PLAYER_1)
        + best_response_value(game, policy, Player.PLAYER_2)
    )


def exploitability(game: Game, policy: Policy) -> float:
    """Average gain of a best responder over the equilibrium: nash_conv / 2."""
    return nash_conv(game, policy) / 2.0
