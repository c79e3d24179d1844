"""
Kuhn Poker rules.

Kuhn Poker is a simplified poker game:
- 3-card deck: Jack (J=0), Queen (Q=1), King (K=2)
- Each player posts a forced stake of 1 chip ("rr" in the history)
- Each player is dealt one private card
- Player 1 acts first: Pass (c) or Bet (b)
- Facing a bet, "c" folds and "b" calls
- Higher card wins at showdown

Histories are strings: "" is the chance node (the deal), every other
history starts with "rr". Even length means player 1 is to act.

Terminal histories and their payoffs live in one table, TERMINAL_PAYOFFS.
The decision histories are derived from it, so the two cannot drift apart.
"""

from itertools import permutations
from typing import Dict, Tuple

from .base import Action, ChanceOutcome, Game, Payoff, Player


# Card values
JACK = 0
QUEEN = 1
KING = 2
CARDS = (JACK, QUEEN, KING)
CARD_NAMES = {JACK: 'J', QUEEN: 'Q', KING: 'K'}

# Actions
PASS = Action(id=0, name='c')  # Check / Fold
BET = Action(id=1, name='b')   # Bet / Call
ACTIONS = (PASS, BET)
NUM_ACTIONS = len(ACTIONS)

CHANCE_HISTORY = ''
FORCED_STAKES = 'rr'

# Payoff to the player to move at each terminal history.
TERMINAL_PAYOFFS: Dict[str, Payoff] = {
    'rrcc': Payoff(1.0, showdown=True),    # Check-Check
    'rrbb': Payoff(2.0, showdown=True),    # Bet-Call
    'rrcbb': Payoff(2.0, showdown=True),   # Check-Bet-Call
    'rrbc': Payoff(1.0, showdown=False),   # Bet-Fold, bettor to move
    'rrcbc': Payoff(1.0, showdown=False),  # Check-Bet-Fold, bettor to move
}

_MAX_HISTORY_LENGTH = max(len(h) for h in TERMINAL_PAYOFFS)


def _walk_decision_histories() -> Tuple[str, ...]:
    """Enumerate every decision history reachable from the forced stakes."""
    found = []
    stack = [FORCED_STAKES]
    while stack:
        history = stack.pop()
        if history in TERMINAL_PAYOFFS:
            continue
        if len(history) >= _MAX_HISTORY_LENGTH:
            raise ValueError(f"History {history!r} never reaches a terminal")
        found.append(history)
        stack.extend(history + action.name for action in ACTIONS)
    return tuple(sorted(found))


DECISION_HISTORIES = _walk_decision_histories()


def is_chance_node(history: str) -> bool:
    return history == CHANCE_HISTORY


def is_terminal(history: str) -> bool:
    return history in TERMINAL_PAYOFFS


def decision_histories() -> Tuple[str, ...]:
    """All non-terminal histories after the deal, sorted."""
    return DECISION_HISTORIES


def current_player(history: str) -> Player:
    if is_chance_node(history):
        return Player.CHANCE
    return Player.PLAYER_1 if len(history) % 2 == 0 else Player.PLAYER_2


def terminal_util(history: str, card_1: int, card_2: int) -> float:
    """
    Payoff at a terminal history for the player whose turn it would be.

    Args:
        history: Terminal history, e.g. "rrcbb"
        card_1: Player 1's private card
        card_2: Player 2's private card

    Returns:
        Chips won (positive) or lost (negative) by the player to move

    Raises:
        ValueError: if history is not a terminal history
    """
    payoff = TERMINAL_PAYOFFS.get(history)
    if payoff is None:
        raise ValueError(f"Illegal line: {history!r} is not a terminal history")

    if not payoff.showdown:
        return payoff.amount

    if len(history) % 2 == 0:
        card_player, card_opponent = card_1, card_2
    else:
        card_player, card_opponent = card_2, card_1

    return payoff.amount if card_player > card_opponent else -payoff.amount


def legal_actions(history: str) -> Tuple[Action, ...]:
    """
    Actions available at a decision history.

    Raises:
        ValueError: for the chance node, terminals and unknown histories
    """
    if history not in DECISION_HISTORIES:
        raise ValueError(f"Illegal line: {history!r} is not a decision history")
    return ACTIONS


def chance_outcomes() -> Tuple[ChanceOutcome, ...]:
    """All 6 ordered deals of two distinct cards, each with probability 1/6."""
    card_deals = list(permutations(CARDS, 2))
    chance_prob = 1.0 / len(card_deals)
    return tuple((card_1, card_2, chance_prob) for card_1, card_2 in card_deals)


def card_str(card: int) -> str:
    return CARD_NAMES[card]


class KuhnPoker(Game):
    """Kuhn Poker game implementation."""

    @property
    def name(self) -> str:
        return "kuhn_poker"

    @property
    def num_actions(self) -> int:
        return NUM_ACTIONS

    @property
    def root_history(self) -> str:
        return CHANCE_HISTORY

    @property
    def deal_history(self) -> str:
        return FORCED_STAKES

    def is_chance_node(self, history: str) -> bool:
        return is_chance_node(history)

    def is_terminal(self, history: str) -> bool:
        return is_terminal(history)

    def terminal_util(self, history: str, card_1: int, card_2: int) -> float:
        return terminal_util(history, card_1, card_2)

    def legal_actions(self, history: str) -> Tuple[Action, ...]:
        return legal_actions(history)

    def current_player(self, history: str) -> Player:
        return current_player(history)

    def chance_outcomes(self) -> Tuple[ChanceOutcome, ...]:
        return chance_outcomes()

    def card_label(self, card: int) -> str:
        return card_str(card)

    def infoset_key(self, card: int, history: str) -> str:
        """
        Information set key for the player holding `card` at `history`.

        Player knows: their own card + public action history
        Player doesn't know: opponent's card
        """
        return f"{self.card_label(card)} {history}"
