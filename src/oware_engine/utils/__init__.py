"""Utility modules for the Oware engine."""

from .rich_display import BoardDisplay, setup_rich_logging

__all__ = ["BoardDisplay", "setup_rich_logging"]
