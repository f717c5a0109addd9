"""Class booking and workout leaderboard CLI for a fitness studio."""

__version__ = "0.1.0"
