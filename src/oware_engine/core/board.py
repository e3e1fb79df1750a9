"""
Oware position representation.

An Oware position consists of:
- 12 pits arranged in a ring (6 per player)
- Two score counters (captured and swept seeds)
- The player to move, the game status, and the cached legal moves

Board layout:
          P1 Pits (11-6)
     [11][10][ 9][ 8][ 7][ 6]
     [ 0][ 1][ 2][ 3][ 4][ 5]
          P0 Pits (0-5)

Sowing runs counter-clockwise: index i is followed by (i + 1) % 12.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence, Tuple

from .errors import InputValidationError

NUM_PITS = 12
PITS_PER_PLAYER = 6
INITIAL_SEEDS = 4
MAX_PIT_SEEDS = 12  # A full pit is skipped while sowing
WINNING_SCORE = 24  # Strictly more than this wins; both equal to it ties


class GameStatus(IntEnum):
    """Game status, numbered as in the position notation."""

    IN_PROGRESS = 0
    PLAYER0_WON = 1
    PLAYER1_WON = 2
    TIE = 3

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


def get_player_pits(player: int) -> List[int]:
    """Get pit indices owned by a player."""
    start = player * PITS_PER_PLAYER
    return list(range(start, start + PITS_PER_PLAYER))


def owner_of(pit: int) -> int:
    """Get the player owning a pit index."""
    return pit // PITS_PER_PLAYER


def is_count(value) -> bool:
    """True for a plain int; bool is rejected even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Board:
    """
    Immutable Oware position.

    Every field is validated on construction, so a Board that exists is a
    valid position. Sequences are normalised to tuples.

    Attributes:
        status: Current GameStatus
        player: Player to move (0 or 1)
        pits: Seeds in each of the 12 pits
        scores: Seeds captured or swept by each player
        legal_moves: Ascending pit indices the mover may play
    """

    status: GameStatus
    player: int
    pits: Tuple[int, ...]
    scores: Tuple[int, ...]
    legal_moves: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Normalise containers and validate state invariants."""
        try:
            if isinstance(self.status, bool):
                raise ValueError(self.status)
            status = GameStatus(self.status)
        except ValueError:
            raise InputValidationError(f"Invalid status {self.status!r}") from None

        object.__setattr__(self, "status", status)
        object.__setattr__(self, "pits", tuple(self.pits))
        object.__setattr__(self, "scores", tuple(self.scores))
        object.__setattr__(self, "legal_moves", tuple(self.legal_moves))

        self._validate()

    def _validate(self) -> None:
        if len(self.pits) != NUM_PITS:
            raise InputValidationError(
                f"Invalid number of pits {len(self.pits)}, expected {NUM_PITS}"
            )
        if len(self.scores) != 2:
            raise InputValidationError(
                f"Invalid number of scores {len(self.scores)}, expected 2"
            )
        if not is_count(self.player) or self.player not in (0, 1):
            raise InputValidationError(f"Invalid player {self.player!r}, must be 0 or 1")
        if len(self.legal_moves) > PITS_PER_PLAYER:
            raise InputValidationError(
                f"Too many legal moves ({len(self.legal_moves)}), "
                f"at most {PITS_PER_PLAYER} allowed"
            )

        for seeds in self.pits:
            if not is_count(seeds) or not 0 <= seeds <= MAX_PIT_SEEDS:
                raise InputValidationError(
                    f"Invalid pit count {seeds!r}, must be 0-{MAX_PIT_SEEDS}"
                )
        for score in self.scores:
            if not is_count(score) or score < 0:
                raise InputValidationError(f"Invalid score {score!r}")

        own_pits = get_player_pits(self.player)
        for move in self.legal_moves:
            if not is_count(move) or move not in own_pits:
                raise InputValidationError(
                    f"Legal move {move!r} is not a pit of player {self.player}"
                )
        if list(self.legal_moves) != sorted(set(self.legal_moves)):
            raise InputValidationError("Legal moves must be strictly ascending")

        if self.status.is_terminal and self.legal_moves:
            raise InputValidationError("A finished game cannot have legal moves")

    @property
    def opponent(self) -> int:
        """The player who moves after the current one."""
        return 1 - self.player

    @property
    def total_seeds(self) -> int:
        """Seeds in pits plus seeds in both scores."""
        return sum(self.pits) + sum(self.scores)

    @property
    def seeds_in_pits(self) -> int:
        """Seeds still on the board."""
        return sum(self.pits)

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def side_seeds(self, player: int) -> int:
        """Seeds currently on a player's side of the board."""
        start = player * PITS_PER_PLAYER
        return sum(self.pits[start : start + PITS_PER_PLAYER])

    def current_player_won(self) -> bool:
        """
        Whether the player who just moved has won.

        The turn flips before the status is computed, so the player who made
        the last move is the opponent of `player`.
        """
        return (self.status is GameStatus.PLAYER0_WON and self.player == 1) or (
            self.status is GameStatus.PLAYER1_WON and self.player == 0
        )

    def move(self, pit: int) -> "Board":
        """Play `pit` and return the resulting Board. See rules.apply_move."""
        from .rules import apply_move

        return apply_move(self, pit)

    def to_string(self) -> str:
        """Render this position in notation form."""
        from .notation import board_to_string

        return board_to_string(self)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse a position from notation form."""
        from .notation import board_from_string

        return board_from_string(text)

    def __str__(self) -> str:
        """Human-readable board representation."""
        top = " ".join(f"{s:>3}" for s in reversed(self.pits[PITS_PER_PLAYER:]))
        bottom = " ".join(f"{s:>3}" for s in self.pits[:PITS_PER_PLAYER])

        if self.is_over:
            footer = self.status.name.replace("_", " ").title()
        else:
            footer = f"Player {self.player}'s turn"

        return f"""
[{self.scores[1]:>2}] {top}
     {bottom} [{self.scores[0]:>2}]

{footer}
"""


def create_board(
    player: int,
    scores: Sequence[int],
    pits: Sequence[int],
    legal_moves: Sequence[int] = (),
    status: GameStatus = GameStatus.IN_PROGRESS,
) -> Board:
    """
    Build a validated Board from plain sequences.

    Raises:
        InputValidationError: If any board invariant is violated
    """
    return Board(
        status=status,
        player=player,
        pits=tuple(pits),
        scores=tuple(scores),
        legal_moves=tuple(legal_moves),
    )


def create_starting_board() -> Board:
    """Create the initial position: 4 seeds per pit, player 0 to move."""
    return Board(
        status=GameStatus.IN_PROGRESS,
        player=0,
        pits=tuple([INITIAL_SEEDS] * NUM_PITS),
        scores=(0, 0),
        legal_moves=tuple(get_player_pits(0)),
    )
