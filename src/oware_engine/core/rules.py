"""
Oware game rules implementation.

Implements the rules used by the engine:
- Counter-clockwise sowing that skips the origin pit and full pits
- Capture of 2 or 3 seeds backward from the last seed, on the opponent's side
- Captures that would leave the opponent without seeds are cancelled
- A move is legal only if the opponent keeps at least one seed
- When the side to move has no legal move, each side sweeps its own seeds
"""

import logging
from typing import List, Tuple

from .board import (
    Board,
    GameStatus,
    MAX_PIT_SEEDS,
    NUM_PITS,
    PITS_PER_PLAYER,
    WINNING_SCORE,
    get_player_pits,
    is_count,
    owner_of,
)
from .errors import EmptyPitError, EmptyPitMoveError, GameOverError, InputValidationError

logger = logging.getLogger(__name__)


def sow(pits: List[int], pit: int) -> int:
    """
    Distribute the seeds of `pit` around the ring, in place.

    One seed goes into each following pit. The origin pit and any pit
    already holding MAX_PIT_SEEDS are skipped without using up a seed.

    Args:
        pits: Mutable list of 12 seed counts
        pit: Pit to sow from

    Returns:
        Index of the pit that received the last seed

    Raises:
        EmptyPitError: If the pit holds no seeds
    """
    seeds = pits[pit]
    if seeds == 0:
        raise EmptyPitError(f"Cannot sow from empty pit {pit}")

    pits[pit] = 0
    current = pit
    for _ in range(seeds):
        current = (current + 1) % NUM_PITS
        skipped = 0
        while current == pit or pits[current] == MAX_PIT_SEEDS:
            skipped += 1
            if skipped == NUM_PITS:
                raise InputValidationError("Every other pit is full, cannot place seed")
            current = (current + 1) % NUM_PITS
        pits[current] += 1

    return current


def side_has_seeds(pits: List[int], player: int) -> bool:
    """Check whether any pit on a player's side holds seeds."""
    start = player * PITS_PER_PLAYER
    return any(pits[start : start + PITS_PER_PLAYER])


def apply_captures(pits: List[int], scores: List[int], player: int, landing: int) -> int:
    """
    Capture seeds for `player` backward from the landing pit, in place.

    Pits are taken while they lie on the opponent's side and hold exactly
    2 or 3 seeds. The scan stops before index 0. If the captures would
    leave the opponent with an empty side, pits and scores are restored.

    Args:
        pits: Mutable list of 12 seed counts, already sown
        scores: Mutable list of the two scores
        player: Player who made the move
        landing: Index returned by sow()

    Returns:
        Number of seeds captured (0 when nothing was taken or the capture was cancelled)
    """
    saved_pits = list(pits)
    saved_scores = list(scores)

    captured = 0
    current = landing
    while current > 0 and owner_of(current) != player and pits[current] in (2, 3):
        captured += pits[current]
        scores[player] += pits[current]
        pits[current] = 0
        current -= 1

    if not side_has_seeds(pits, 1 - player):
        if captured:
            logger.debug(
                f"Cancelling capture of {captured} seeds: player {1 - player} would have no seeds"
            )
        pits[:] = saved_pits
        scores[:] = saved_scores
        return 0

    return captured


def _play(pits: List[int], scores: List[int], player: int, pit: int) -> int:
    """Sow then capture, in place. Returns the captured seed count."""
    landing = sow(pits, pit)
    return apply_captures(pits, scores, player, landing)


def compute_legal_moves(board: Board) -> Tuple[int, ...]:
    """
    Compute the legal moves for the player to move.

    A pit is legal if it holds seeds and, once sown and its captures
    resolved, the opponent still has at least one seed on their side.

    Args:
        board: Position to enumerate

    Returns:
        Ascending tuple of legal pit indices
    """
    legal_moves = []
    for pit in get_player_pits(board.player):
        if board.pits[pit] == 0:
            continue

        pits = list(board.pits)
        scores = list(board.scores)
        _play(pits, scores, board.player, pit)

        if side_has_seeds(pits, board.opponent):
            legal_moves.append(pit)

    return tuple(legal_moves)


def compute_status(scores: Tuple[int, ...]) -> GameStatus:
    """
    Determine the game status from the scores alone.

    A player with more than WINNING_SCORE seeds has won. Both players on
    exactly WINNING_SCORE is a tie.
    """
    if scores[0] > WINNING_SCORE:
        return GameStatus.PLAYER0_WON
    if scores[1] > WINNING_SCORE:
        return GameStatus.PLAYER1_WON
    if scores[0] == WINNING_SCORE and scores[1] == WINNING_SCORE:
        return GameStatus.TIE
    return GameStatus.IN_PROGRESS


def _final_status(scores: Tuple[int, ...]) -> GameStatus:
    """Status of a game that cannot continue; falls back to comparing scores."""
    status = compute_status(scores)
    if status is not GameStatus.IN_PROGRESS:
        return status
    if scores[0] > scores[1]:
        return GameStatus.PLAYER0_WON
    if scores[1] > scores[0]:
        return GameStatus.PLAYER1_WON
    return GameStatus.TIE


def validate_move(board: Board, pit: int) -> None:
    """
    Check that `pit` may be played from `board`.

    Raises:
        GameOverError: If the game has already finished
        EmptyPitMoveError: If the pit is out of range, not owned by the
            player to move, or empty
    """
    if board.is_over:
        raise GameOverError(f"Game is over ({board.status.name}), no moves accepted")
    if not is_count(pit) or not 0 <= pit < NUM_PITS:
        raise EmptyPitMoveError(f"Pit {pit!r} is out of range 0-{NUM_PITS - 1}")
    if owner_of(pit) != board.player:
        raise EmptyPitMoveError(f"Pit {pit} does not belong to player {board.player}")
    if board.pits[pit] == 0:
        raise EmptyPitMoveError(f"Cannot make a move on empty pit {pit}")


def apply_move(board: Board, move: int) -> Board:
    """
    Apply a move and return the resulting position.

    Implements the full turn:
    1. Sow the seeds of the chosen pit
    2. Resolve captures (cancelled if they would starve the opponent)
    3. Pass the turn and compute the status from the scores
    4. If the game continues, compute the next legal moves
    5. If there are none, each side sweeps its remaining seeds

    The input board is never modified.

    Args:
        board: Current position
        move: Pit index to play

    Returns:
        New Board after the move

    Raises:
        GameOverError: If the game has already finished
        EmptyPitMoveError: If the pit cannot be played
    """
    validate_move(board, move)

    pits = list(board.pits)
    scores = list(board.scores)
    _play(pits, scores, board.player, move)
    next_player = 1 - board.player

    status = compute_status(tuple(scores))
    if status.is_terminal:
        logger.debug(f"Game over after move {move}: {status.name} {tuple(scores)}")
        return Board(status, next_player, tuple(pits), tuple(scores), ())

    legal_moves = compute_legal_moves(Board(status, next_player, tuple(pits), tuple(scores)))
    if legal_moves:
        return Board(status, next_player, tuple(pits), tuple(scores), legal_moves)

    # No legal reply: both sides collect what is left on their own side
    for player in (0, 1):
        for pit in get_player_pits(player):
            scores[player] += pits[pit]
            pits[pit] = 0

    status = _final_status(tuple(scores))
    logger.debug(
        f"Player {next_player} has no legal move, seeds swept: {status.name} {tuple(scores)}"
    )
    return Board(status, next_player, tuple(pits), tuple(scores), ())


def get_game_result(board: Board) -> str:
    """
    Get human-readable game result.

    Args:
        board: Position

    Returns:
        Result string, or a description of whose turn it is
    """
    if board.status is GameStatus.PLAYER0_WON:
        return f"Player 0 wins {board.scores[0]}-{board.scores[1]}"
    if board.status is GameStatus.PLAYER1_WON:
        return f"Player 1 wins {board.scores[1]}-{board.scores[0]}"
    if board.status is GameStatus.TIE:
        return f"Tie game {board.scores[0]}-{board.scores[1]}"
    return f"Player {board.player} to move"
