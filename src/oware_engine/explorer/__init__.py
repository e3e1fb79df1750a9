"""Move-generation exploration tools."""

from .perft import PerftCounter, perft, divide

__all__ = ["PerftCounter", "perft", "divide"]
