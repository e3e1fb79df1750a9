"""Exceptions raised by the Oware engine."""


class OwareError(Exception):
    """Base class for every error raised by the engine."""


class InputValidationError(OwareError, ValueError):
    """A position or serialized position breaks the board invariants."""


class EmptyPitError(OwareError, ValueError):
    """Sowing was attempted from a pit holding no seeds."""


class EmptyPitMoveError(EmptyPitError):
    """A move targets an empty pit, or a pit the mover does not own."""


class GameOverError(OwareError, ValueError):
    """A move was requested on a finished game."""
