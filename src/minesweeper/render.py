"""
Plain-text rendering of a board and game status.

Read-only: nothing here mutates the board or the game.
"""
from typing import List

from .board import Board
from .game import Game
from .tile import Tile


HIDDEN_CHAR = "."
FLAG_CHAR = "<"
MINE_CHAR = "X"
EMPTY_CHAR = " "


def render_tile(tile: Tile) -> str:
    """Single character shown for a tile."""
    if tile.is_hidden:
        return HIDDEN_CHAR
    if tile.is_flagged:
        return FLAG_CHAR
    if tile.is_mine:
        return MINE_CHAR
    if tile.adjacent_mines == 0:
        return EMPTY_CHAR
    return str(tile.adjacent_mines)


def _column_label(col: int) -> str:
    label = str(col)
    if len(label) < 2:
        return f" {label} "
    if len(label) < 3:
        return f" {label}"
    return label


def render_board(board: Board) -> str:
    """
    Render the board as a grid of characters.

    The first line labels the columns, the second is a rule, and each
    following line is one row ending with ``|<row number>``.
    """
    lines: List[str] = [
        "".join(_column_label(col) for col in range(board.width)),
        "___" * board.width,
    ]
    for row in range(board.height):
        cells = "".join(
            f" {render_tile(board.tile(row, col))} "
            for col in range(board.width)
        )
        lines.append(f"{cells}|{row}")
    return "\n".join(lines)


def render_status(game: Game) -> str:
    return (
        f"time: {game.elapsed_time()}   "
        f"mines left: {game.mines_remaining}    "
        f"tiles left: {game.tiles_remaining}"
    )


def render_game(game: Game) -> str:
    """Status line followed by the board."""
    return f"{render_status(game)}\n{render_board(game.board)}"
