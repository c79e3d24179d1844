"""
CFR engine layer (Layer 2).

Information sets, regret matching and policy evaluation.
It may only import from: kuhn_cfr.games
"""

from kuhn_cfr.engine.infoset import InformationSet, InfosetStore

from kuhn_cfr.engine.ops import (
    AVERAGE_STRATEGY_THRESHOLD,
    average_strategy,
    positive_part,
    regret_match,
    uniform_strategy,
)

from kuhn_cfr.engine.evaluation import (
    best_response_value,
    exploitability,
    nash_conv,
    policy_value,
)

__all__ = [
    'InformationSet',
    'InfosetStore',
    'AVERAGE_STRATEGY_THRESHOLD',
    'average_strategy',
    'positive_part',
    'regret_match',
    'uniform_strategy',
    'best_response_value',
    'exploitability',
    'nash_conv',
    'policy_value',
]
