"""
CFR solver algorithms layer (Layer 3 - highest).

It may import from: kuhn_cfr.games, kuhn_cfr.engine
"""

from kuhn_cfr.solvers.vanilla import DEFAULT_ITERATIONS, CfrResult, VanillaCFR

__all__ = ['DEFAULT_ITERATIONS', 'CfrResult', 'VanillaCFR']
