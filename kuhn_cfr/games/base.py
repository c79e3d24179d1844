"""
Abstract base classes for game definitions.

This module defines the interface that the CFR engine expects from a game.
Histories are plain strings over the game's action alphabet.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Tuple


class Player(IntEnum):
    """Player identifiers."""
    CHANCE = -1
    PLAYER_1 = 0
    PLAYER_2 = 1


@dataclass(frozen=True)
class Action:
    """An action that can be taken at a decision node."""
    id: int
    name: str  # Symbol appended to the history


class Payoff(NamedTuple):
    """Payoff rule attached to a terminal history."""
    amount: float
    showdown: bool  # If False, the player to move collects `amount` regardless of cards


# A chance outcome: (card_1, card_2, probability)
ChanceOutcome = Tuple[int, int, float]


class Game(ABC):
    """Abstract base class for two-player zero-sum card games."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the game."""
        pass

    @property
    @abstractmethod
    def num_actions(self) -> int:
        """Number of actions at every decision node."""
        pass

    @property
    @abstractmethod
    def root_history(self) -> str:
        """History of the root (chance) node."""
        pass

    @property
    @abstractmethod
    def deal_history(self) -> str:
        """History of the first decision node, right after the deal."""
        pass

    @abstractmethod
    def is_chance_node(self, history: str) -> bool:
        pass

    @abstractmethod
    def is_terminal(self, history: str) -> bool:
        pass

    @abstractmethod
    def terminal_util(self, history: str, card_1: int, card_2: int) -> float:
        """Payoff to the player to move at a terminal history."""
        pass

    @abstractmethod
    def legal_actions(self, history: str) -> Tuple[Action, ...]:
        pass

    @abstractmethod
    def current_player(self, history: str) -> Player:
        pass

    @abstractmethod
    def chance_outcomes(self) -> Tuple[ChanceOutcome, ...]:
        """All private-card deals with their probabilities."""
        pass

    @abstractmethod
    def card_label(self, card: int) -> str:
        pass

    @abstractmethod
    def infoset_key(self, card: int, history: str) -> str:
        """
        Return a string key identifying the information set.

        Two decision nodes belong to the same infoset iff they have the same key.
        """
        pass
