"""
Kuhn Poker CFR Solver

A tabular implementation of vanilla Counterfactual Regret Minimization
for Kuhn Poker, walking the full game tree on every iteration.
"""

__version__ = "0.1.0"
