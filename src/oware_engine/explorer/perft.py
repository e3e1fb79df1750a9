"""
Perft: count the positions reached after a fixed number of plies.

Used to check move generation against known node counts. It walks every
legal move sequence; it never ranks or selects moves.
"""

import logging
from dataclasses import replace
from typing import Dict, Tuple

from tqdm import tqdm

from ..core import Board, apply_move, compute_legal_moves

logger = logging.getLogger(__name__)


class PerftCounter:
    """
    Depth-limited leaf counter with a transposition table.

    Positions are keyed by the Board itself plus the remaining depth,
    so transpositions reached by different move orders are counted once
    and reused.
    """

    def __init__(self, use_cache: bool = True):
        """
        Initialize perft counter.

        Args:
            use_cache: Reuse counts of already-visited (position, depth) pairs
        """
        self.use_cache = use_cache
        self.cache: Dict[Tuple[Board, int], int] = {}

        # Statistics
        self.nodes_visited = 0
        self.cache_hits = 0

    def count(self, board: Board, depth: int) -> int:
        """
        Count leaf positions `depth` plies below `board`.

        The root's legal moves are recomputed, since a parsed position may
        carry a stale list.

        Args:
            board: Root position
            depth: Number of plies to play

        Returns:
            Number of move sequences of exactly `depth` plies
        """
        if depth < 0:
            raise ValueError(f"Depth must be non-negative, got {depth}")
        return self._count(_with_legal_moves(board), depth)

    def _count(self, board: Board, depth: int) -> int:
        self.nodes_visited += 1
        if depth == 0:
            return 1
        if not board.legal_moves:
            return 0

        key = (board, depth)
        if self.use_cache and key in self.cache:
            self.cache_hits += 1
            return self.cache[key]

        nodes = sum(self._count(apply_move(board, move), depth - 1) for move in board.legal_moves)

        if self.use_cache:
            self.cache[key] = nodes
        return nodes

    def divide(self, board: Board, depth: int, show_progress: bool = False) -> Dict[int, int]:
        """
        Count leaves separately below each legal root move.

        Args:
            board: Root position
            depth: Number of plies, including the root move
            show_progress: Show a tqdm progress bar over root moves

        Returns:
            Mapping of root pit to leaf count
        """
        if depth < 1:
            raise ValueError(f"Divide needs depth >= 1, got {depth}")

        board = _with_legal_moves(board)
        results = {}
        for move in tqdm(board.legal_moves, desc=f"Perft {depth}", unit="move", disable=not show_progress):
            results[move] = self._count(apply_move(board, move), depth - 1)
            logger.debug(f"Pit {move}: {results[move]:,} nodes")

        logger.info(
            f"Perft({depth}) = {sum(results.values()):,} "
            f"({self.nodes_visited:,} visited, {self.cache_hits:,} cache hits)"
        )
        return results


def _with_legal_moves(board: Board) -> Board:
    if board.is_over:
        return board
    return replace(board, legal_moves=compute_legal_moves(board))


def perft(board: Board, depth: int) -> int:
    """Count leaf positions `depth` plies below `board`."""
    return PerftCounter().count(board, depth)


def divide(board: Board, depth: int, show_progress: bool = False) -> Dict[int, int]:
    """Per-root-move leaf counts. See PerftCounter.divide."""
    return PerftCounter().divide(board, depth, show_progress=show_progress)
