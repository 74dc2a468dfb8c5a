"""Solvers for twenty daily programming puzzles, one module per day, with a command line."""

__version__ = "0.1.0"