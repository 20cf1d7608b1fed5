"""
Exceptions raised by the Minesweeper engine.

Each error also derives from the closest builtin so callers that only
know about ``ValueError`` or ``IndexError`` still catch it.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count are out of range."""


class OutOfBounds(MinesweeperError, IndexError):
    """A row/column or tile index lies outside the board."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"({row}, {col}) is outside the {height}x{width} board"
        )
        self.row = row
        self.col = col


class DoubleLay(MinesweeperError, RuntimeError):
    """Mines were already laid on this board."""


class ActionAfterGameOver(MinesweeperError, RuntimeError):
    """An action was attempted on a finished game."""


class CommandError(MinesweeperError, ValueError):
    """Player input could not be parsed into a command."""
