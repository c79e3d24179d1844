"""
Vanilla CFR (Counterfactual Regret Minimization) Solver.

Implements the classic CFR algorithm as a recursive walk over the full game
tree. Every iteration enumerates all chance outcomes exactly, so runs are
deterministic.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from kuhn_cfr.engine.evaluation import exploitability, policy_value
from kuhn_cfr.engine.infoset import InformationSet, InfosetStore
from kuhn_cfr.engine.ops import (
    check_distribution,
    check_regret_invariant,
    check_zero_sum_invariant,
)
from kuhn_cfr.games.base import Game, Player
from kuhn_cfr.games.kuhn import KuhnPoker

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 10000

Strategies = Dict[str, Optional[np.ndarray]]


@dataclass
class CfrResult:
    """
    Output of a CFR run.

    Attributes:
        expected_value: Player 1's expected game value (mean over iterations)
        iterations: Number of iterations completed
        player_1_strategies: Average strategy per player 1 infoset key
        player_2_strategies: Average strategy per player 2 infoset key
    """
    expected_value: float
    iterations: int
    player_1_strategies: Strategies
    player_2_strategies: Strategies

    @property
    def player_2_expected_value(self) -> float:
        return -self.expected_value


class VanillaCFR:
    """
    Vanilla CFR solver over a string-history game.

    The solver owns a single InfosetStore and mutates it in place.
    """

    def __init__(
        self,
        game: Optional[Game] = None,
        check_invariants: bool = False,
        log_every: int = 1000
    ):
        """
        Initialize the CFR solver.

        Args:
            game: Game to solve (Kuhn Poker by default)
            check_invariants: If True, assert CFR invariants during traversal (slower)
            log_every: Log progress at DEBUG level every this many iterations
        """
        self.game = game if game is not None else KuhnPoker()
        self.check_invariants = check_invariants
        self.log_every = log_every

        self.store = InfosetStore(self.game.num_actions)

        # Sum of root values over all iterations
        self._cumulative_value = 0.0

        # Iteration counter
        self.iterations = 0

    def cfr(
        self,
        history: str,
        card_1: int,
        card_2: int,
        pr_1: float,
        pr_2: float,
        pr_c: float
    ) -> float:
        """
        Counterfactual utility of `history` for the player to move.

        Args:
            history: Current history
            card_1: Player 1's private card (unused at the chance node)
            card_2: Player 2's private card (unused at the chance node)
            pr_1: Player 1's contribution to the reach probability
            pr_2: Player 2's contribution to the reach probability
            pr_c: Chance contribution to the reach probability

        Returns:
            Utility from the perspective of the player to move
        """
        game = self.game

        if game.is_chance_node(history):
            return self._chance_util()

        if game.is_terminal(history):
            return game.terminal_util(history, card_1, card_2)

        is_player_1 = game.current_player(history) == Player.PLAYER_1
        card = card_1 if is_player_1 else card_2

        info_set = self.store.get_or_create(game.infoset_key(card, history))
        info_set.reach_pr += pr_1 if is_player_1 else pr_2
        strategy = info_set.strategy

        # Counterfactual utility per action
        actions = game.legal_actions(history)
        action_utils = np.zeros(len(actions))
        for action in actions:
            next_history = history + action.name
            if is_player_1:
                util = self.cfr(next_history, card_1, card_2, pr_1 * strategy[action.id], pr_2, pr_c)
            else:
                util = self.cfr(next_history, card_1, card_2, pr_1, pr_2 * strategy[action.id], pr_c)
            action_utils[action.id] = -util

        # Utility of information set
        util = float(np.dot(action_utils, strategy))
        regrets = action_utils - util

        if self.check_invariants:
            check_regret_invariant(strategy, regrets)

        # Weighted by the opponent's reach, not our own
        pr_opponent = pr_2 if is_player_1 else pr_1
        info_set.regret_sum += regrets * (pr_opponent * pr_c)

        return util

    def _chance_util(self) -> float:
        """Expected value over every deal, for player 1."""
        expected_value = 0.0
        player_2_value = 0.0
        for card_1, card_2, chance_prob in self.game.chance_outcomes():
            util = self.cfr(self.game.deal_history, card_1, card_2, 1.0, 1.0, chance_prob)
            expected_value += chance_prob * util
            player_2_value -= chance_prob * util

        if self.check_invariants:
            check_zero_sum_invariant(expected_value, player_2_value)

        return expected_value

    def iterate(self, num_iterations: int = 1) -> None:
        """
        Run CFR iterations.

        Args:
            num_iterations: Number of iterations to run
        """
        if num_iterations < 1:
            raise ValueError(f"num_iterations must be positive, got {num_iterations}")

        for _ in range(num_iterations):
            self._single_iteration()
            self.iterations += 1

            if self.log_every and self.iterations % self.log_every == 0:
                logger.debug(
                    "Iteration %d: expected value %.6f, %d infosets",
                    self.iterations, self.expected_value, len(self.store)
                )

    def _single_iteration(self) -> None:
        """One full tree pass followed by the strategy update."""
        self._cumulative_value += self.cfr(self.game.root_history, -1, -1, 1.0, 1.0, 1.0)
        self.store.next_strategy()

        if self.check_invariants:
            for info_set in self.store.values():
                check_distribution(info_set.strategy)

    def solve(self, iterations: int = DEFAULT_ITERATIONS) -> CfrResult:
        """
        Solve the game by running CFR iterations.

        Args:
            iterations: Number of iterations to run

        Returns:
            CfrResult with expected values and average strategies
        """
        logger.info("Running %d CFR iterations on %s", iterations, self.game.name)
        start = time.time()
        self.iterate(iterations)
        elapsed = time.time() - start
        logger.info(
            "Done in %.2fs: expected value %.6f, %d infosets",
            elapsed, self.expected_value, len(self.store)
        )
        return self.result()

    def result(self) -> CfrResult:
        return CfrResult(
            expected_value=self.expected_value,
            iterations=self.iterations,
            player_1_strategies=self.strategies_for_player(Player.PLAYER_1),
            player_2_strategies=self.strategies_for_player(Player.PLAYER_2),
        )

    @property
    def expected_value(self) -> float:
        """Player 1's game value averaged over completed iterations."""
        if self.iterations == 0:
            return 0.0
        return self._cumulative_value / self.iterations

    @property
    def average_strategy(self) -> Strategies:
        """Average strategy per infoset key (converges to Nash equilibrium)."""
        return self.store.average_strategies()

    @property
    def current_strategy(self) -> Dict[str, np.ndarray]:
        """Strategy the next iteration will play."""
        return {key: info_set.strategy.copy() for key, info_set in sorted(self.store.items())}

    def strategies_for_player(self, player: Player) -> Strategies:
        return {
            info_set.key: info_set.get_average_strategy()
            for info_set in self.store.for_player(int(player))
        }

    def get_infoset(self, card: int, history: str) -> InformationSet:
        return self.store[self.game.infoset_key(card, history)]

    def average_policy_value(self) -> float:
        """Exact value for player 1 of the average strategy profile."""
        return policy_value(self.game, self.average_strategy)

    def exploitability(self) -> float:
        """
        Exploitability of the average strategy.

        Mean of both players' best-response values; zero at Nash equilibrium.
        """
        return exploitability(self.game, self.average_strategy)
