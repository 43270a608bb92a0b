"""Gambit, a turn-based chess rule engine with a PyQt6 board."""

__version__ = "0.1.0"
