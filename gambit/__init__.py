"""Gambit: a rules-complete chess engine with a tiered alpha-beta opponent."""

__version__ = "1.0.0"
