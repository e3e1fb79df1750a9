"""Core position representation and rules."""

from .board import (
    Board,
    GameStatus,
    create_board,
    create_starting_board,
    get_player_pits,
)
from .errors import (
    OwareError,
    InputValidationError,
    EmptyPitError,
    EmptyPitMoveError,
    GameOverError,
)
from .notation import board_to_string, board_from_string
from .rules import (
    sow,
    apply_captures,
    compute_legal_moves,
    compute_status,
    apply_move,
    validate_move,
    get_game_result,
)

__all__ = [
    "Board",
    "GameStatus",
    "create_board",
    "create_starting_board",
    "get_player_pits",
    "OwareError",
    "InputValidationError",
    "EmptyPitError",
    "EmptyPitMoveError",
    "GameOverError",
    "board_to_string",
    "board_from_string",
    "sow",
    "apply_captures",
    "compute_legal_moves",
    "compute_status",
    "apply_move",
    "validate_move",
    "get_game_result",
]
