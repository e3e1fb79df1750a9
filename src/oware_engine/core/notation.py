"""
Position notation.

A position is written as five '/'-separated fields:

    status/player/pit0,...,pit11/score0,score1/move1,move2,...

The last field lists the legal moves and is empty when there are none,
e.g. the starting position is "0/0/4,4,4,4,4,4,4,4,4,4,4,4/0,0/0,1,2,3,4,5".
"""

import re
from typing import List

from .board import Board
from .errors import InputValidationError

# Canonical non-negative integers only: no sign, no leading zeros
_INTEGER = re.compile(r"0|[1-9][0-9]*")


def board_to_string(board: Board) -> str:
    """
    Render a Board in notation form.

    Args:
        board: Position to render

    Returns:
        Notation string
    """
    fields = [
        str(int(board.status)),
        str(board.player),
        ",".join(str(seeds) for seeds in board.pits),
        ",".join(str(score) for score in board.scores),
        ",".join(str(move) for move in board.legal_moves),
    ]
    return "/".join(fields)


def _parse_int(field: str, what: str) -> int:
    if not _INTEGER.fullmatch(field):
        raise InputValidationError(
            f"Invalid {what} {field!r}: not a non-negative integer"
        )
    return int(field)


def _parse_list(field: str, what: str) -> List[int]:
    return [_parse_int(item, what) for item in field.split(",")]


def board_from_string(text: str) -> Board:
    """
    Parse a Board from notation form.

    Args:
        text: Notation string

    Returns:
        Validated Board

    Raises:
        InputValidationError: If the string is malformed or describes an
            invalid position
    """
    fields = text.split("/")
    if len(fields) != 5:
        raise InputValidationError(
            f"Invalid number of fields {len(fields)}, expected 5"
        )

    status = _parse_int(fields[0], "status")
    player = _parse_int(fields[1], "player")
    pits = _parse_list(fields[2], "pit")
    scores = _parse_list(fields[3], "score")
    moves = _parse_list(fields[4], "move") if fields[4] else []

    return Board(
        status=status,
        player=player,
        pits=tuple(pits),
        scores=tuple(scores),
        legal_moves=tuple(moves),
    )
