"""
Information sets and the information set store.

An information set groups the decision nodes a player cannot tell apart:
same private card, same public history. Each set carries the CFR
accumulators for its decision point.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, ItemsView, KeysView, List, Optional, ValuesView

import numpy as np

from kuhn_cfr.engine.ops import average_strategy, regret_match, uniform_strategy

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class InformationSet:
    """
    CFR accumulators for one (card, history) decision point.

    Attributes:
        key: "<card> <history>", e.g. "K rrcb"
        regret_sum: Cumulative counterfactual regret per action
        strategy_sum: Sum of strategy weighted by own reach probability
        strategy: Strategy played during the current iteration
        reach_pr: Own reach probability accumulated this iteration
        reach_pr_sum: Own reach probability accumulated over all iterations
    """
    key: str
    num_actions: int = 2
    regret_sum: np.ndarray = field(init=False)
    strategy_sum: np.ndarray = field(init=False)
    strategy: np.ndarray = field(init=False)
    reach_pr: float = 0.0
    reach_pr_sum: float = 0.0

    def __post_init__(self):
        self.regret_sum = np.zeros(self.num_actions)
        self.strategy_sum = np.zeros(self.num_actions)
        self.strategy = uniform_strategy(self.num_actions)

    def next_strategy(self) -> None:
        """Fold this iteration into the average, then regret-match."""
        self.strategy_sum += self.strategy * self.reach_pr
        self.strategy = self.calc_strategy()
        self.reach_pr_sum += self.reach_pr
        self.reach_pr = 0.0

    def calc_strategy(self) -> np.ndarray:
        return regret_match(self.regret_sum)

    def get_average_strategy(self) -> Optional[np.ndarray]:
        """Average strategy, or None if this set was never reached."""
        return average_strategy(self.strategy_sum, self.reach_pr_sum)

    @property
    def history(self) -> str:
        return self.key.split(' ', 1)[1]

    @property
    def player(self) -> int:
        """0 for player 1, 1 for player 2 (by history length parity)."""
        return len(self.history) % 2


class InfosetStore:
    """
    Keyed collection of information sets with get-or-create lookup.

    The store is owned by one solver and mutated in place during traversal.
    """

    def __init__(self, num_actions: int = 2):
        self.num_actions = num_actions
        self._infosets: Dict[str, InformationSet] = {}

    def get_or_create(self, key: str) -> InformationSet:
        info_set = self._infosets.get(key)
        if info_set is None:
            info_set = InformationSet(key, self.num_actions)
            self._infosets[key] = info_set
        return info_set

    def next_strategy(self) -> None:
        """Apply the strategy update to every information set."""
        for info_set in self._infosets.values():
            info_set.next_strategy()

    def for_player(self, player: int) -> List[InformationSet]:
        """Information sets where `player` (0 or 1) acts, sorted by key."""
        return sorted(
            (i for i in self._infosets.values() if i.player == player),
            key=lambda i: i.key
        )

    def average_strategies(self) -> Dict[str, Optional[np.ndarray]]:
        """Map every key to its average strategy (None if unreachable)."""
        strategies = {}
        for key in sorted(self._infosets):
            strategy = self._infosets[key].get_average_strategy()
            if strategy is None:
                logger.warning("Information set %r was never reached", key)
            strategies[key] = strategy
        return strategies

    def __getitem__(self, key: str) -> InformationSet:
        return self._infosets[key]

    def __contains__(self, key: object) -> bool:
        return key in self._infosets

    def __len__(self) -> int:
        return len(self._infosets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._infosets)

    def keys(self) -> KeysView[str]:
        return self._infosets.keys()

    def values(self) -> ValuesView[InformationSet]:
        return self._infosets.values()

    def items(self) -> ItemsView[str, InformationSet]:
        return self._infosets.items()
