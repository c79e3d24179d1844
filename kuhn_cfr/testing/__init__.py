"""
Testing infrastructure.

Known-equilibrium validation and OpenSpiel comparison.
It may import from any layer (test-only code).
"""

from kuhn_cfr.testing.nash import (
    KUHN_GAME_VALUE,
    validate_against_known_nash,
)

from kuhn_cfr.testing.openspiel_compare import (
    compare_strategies,
    is_openspiel_available,
    run_openspiel_cfr,
    to_openspiel_key,
)

__all__ = [
    'KUHN_GAME_VALUE',
    'validate_against_known_nash',
    'compare_strategies',
    'is_openspiel_available',
    'run_openspiel_cfr',
    'to_openspiel_key',
]
