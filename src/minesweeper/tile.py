"""
Tile module for Minesweeper.

A tile is one grid square: whether it holds a mine, how many of its
neighbors do, and what the player currently sees (hidden, revealed or
flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class TileState(Enum):
    """Player-visible state of a tile."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    A single square of the Minesweeper grid.

    Attributes:
        is_mine: Whether this tile contains a mine.
        adjacent_mines: Mines among the up-to-8 neighbors (0-8). Only
            meaningful for non-mine tiles once mines are laid.
        state: Hidden, revealed or flagged.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: TileState = TileState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this tile.

        Returns:
            True if the tile was hidden and is now revealed, False if it
            was already revealed or is flagged.
        """
        if self.state != TileState.HIDDEN:
            return False
        self.state = TileState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Flag a hidden tile or unflag a flagged one.

        Returns:
            True if the flag was toggled, False if the tile is revealed.
        """
        if self.state == TileState.REVEALED:
            return False
        if self.state == TileState.HIDDEN:
            self.state = TileState.FLAGGED
        else:
            self.state = TileState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == TileState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == TileState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == TileState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode the visible state as a single integer.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Revealed tile with its adjacent mine count
            9: Revealed mine
        """
        if self.state == TileState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.state == TileState.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines
