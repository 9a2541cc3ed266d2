"""Tabular Q-learning on a slippery Frozen Lake grid, with training statistics and a command-line trainer."""

__version__ = "0.1.0"