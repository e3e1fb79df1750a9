"""Oware rules engine: move application, captures, legality and game end."""

__version__ = "0.1.0"
