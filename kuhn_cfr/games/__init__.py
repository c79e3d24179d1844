"""
Game definitions layer (Layer 1 - lowest).

This layer encodes game rules only. It must not import from any other layer.
"""

from kuhn_cfr.games.base import Action, Game, Payoff, Player
from kuhn_cfr.games.kuhn import KuhnPoker

__all__ = ['Action', 'Game', 'Payoff', 'Player', 'KuhnPoker']
