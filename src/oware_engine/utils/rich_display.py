"""
Rich-based board display for the CLI.

Renders a position as a two-row table with:
- Player 1's pits on top (11 down to 6), player 0's below (0 up to 5)
- Legal moves highlighted
- Scores and game status in the panel title and subtitle
"""

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core import Board, GameStatus, get_game_result, get_player_pits

console = Console()


class BoardDisplay:
    """Rich display for Oware positions and CLI messages."""

    def __init__(self, output: Optional[Console] = None):
        self.console = output if output is not None else console

    def show_notation(self, board: Board):
        """Print the notation string of a position, without markup."""
        self.console.print(board.to_string(), markup=False, highlight=False)

    def report_success(self, message: str):
        self.console.print(f"[green]ok[/green] {message}")

    def report_error(self, message: str):
        self.console.print(f"[bold red]error:[/bold red] {message}")

    def _pit_cell(self, board: Board, pit: int) -> str:
        seeds = board.pits[pit]
        if pit in board.legal_moves:
            return f"[bold green]{seeds}[/bold green]"
        if seeds == 0:
            return f"[dim]{seeds}[/dim]"
        return str(seeds)

    def board_table(self, board: Board) -> Table:
        """Create the pit table for a position."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("", style="cyan")
        for _ in range(6):
            table.add_column(justify="center")

        top = list(reversed(get_player_pits(1)))
        bottom = get_player_pits(0)
        table.add_row("P1", *(self._pit_cell(board, pit) for pit in top))
        table.add_row("P0", *(self._pit_cell(board, pit) for pit in bottom))
        return table

    def board_panel(self, board: Board) -> Panel:
        """Wrap the pit table in a panel titled with the scores."""
        title = f"P0 [bold]{board.scores[0]}[/bold] : [bold]{board.scores[1]}[/bold] P1"
        color = "yellow" if board.status is GameStatus.IN_PROGRESS else "magenta"
        return Panel(
            self.board_table(board),
            title=title,
            subtitle=f"[{color}]{get_game_result(board)}[/{color}]",
            expand=False,
        )

    def show_board(self, board: Board):
        """Print a position."""
        self.console.print(self.board_panel(board))

    def show_perft(self, depth: int, results: Dict[int, int]):
        """Print per-move perft counts."""
        table = Table(title=f"Perft depth {depth}")
        table.add_column("Pit", justify="right", style="cyan")
        table.add_column("Nodes", justify="right")
        for pit, nodes in sorted(results.items()):
            table.add_row(str(pit), f"{nodes:,}")
        table.add_row("[bold]Total[/bold]", f"[bold]{sum(results.values()):,}[/bold]")
        self.console.print(table)


def setup_rich_logging(level: int = logging.INFO) -> None:
    """Route every log record through a RichHandler on the shared console."""
    from rich.logging import RichHandler

    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)
