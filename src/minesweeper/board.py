"""
Board module for Minesweeper.

Owns the grid of tiles, lays the mines (keeping the first tile the
player touches safe) and computes adjacency counts.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import DoubleLay, InvalidConfiguration, OutOfBounds
from .randomness import RandomSource, balanced_random
from .tile import Tile


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

DEFAULT_WIDTH = 10
GOLDEN_RATIO = 1.618
DEFAULT_MINE_PERCENT = 15


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to lay.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 1:
            raise InvalidConfiguration("Board needs at least one mine")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def tile_count(self) -> int:
        return self.width * self.height

    @property
    def safe_tile_count(self) -> int:
        return self.tile_count - self.num_mines

    @classmethod
    def from_defaults(
        cls,
        width: Optional[int] = None,
        height: Optional[int] = None,
        num_mines: Optional[int] = None,
    ) -> "BoardConfig":
        """
        Build a config, filling in whatever was not given.

        Height defaults to the width scaled by the golden ratio and the
        mine count to 15% of the tiles.
        """
        if width is None:
            width = DEFAULT_WIDTH
        if height is None:
            height = round(GOLDEN_RATIO * width)
        if num_mines is None:
            num_mines = round(width * height * DEFAULT_MINE_PERCENT / 100)
        return cls(width=width, height=height, num_mines=num_mines)


# Preset board sizes
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)
DEFAULT = BoardConfig.from_defaults()


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper board.

    Tiles live in one flat list indexed by ``row * width + col``. Mines
    are laid exactly once, by ``lay_mines``, after the player's first
    action is known.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[RandomSource] = field(default=None, repr=False)
    _tiles: List[Tile] = field(default_factory=list, repr=False)
    _mines_laid: bool = False

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()
        self._tiles = [Tile() for _ in range(self.config.tile_count)]

    # ========================================================================
    # Geometry (Low-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def index_of(self, row: int, col: int) -> int:
        """Linear index of (row, col); raises OutOfBounds."""
        self._check_position(row, col)
        return row * self.width + col

    def position_of(self, index: int) -> Position:
        """(row, col) of a linear index; raises OutOfBounds."""
        row, col = divmod(index, self.width)
        if not 0 <= index < self.config.tile_count:
            raise OutOfBounds(row, col, self.height, self.width)
        return row, col

    def _check_position(self, row: int, col: int) -> None:
        if not self.is_valid_position(row, col):
            raise OutOfBounds(row, col, self.height, self.width)

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the positions around a tile.

        Edges are clamped, never wrapped, so corner tiles have three
        neighbors and edge tiles five.

        Args:
            row: Row index of center tile.
            col: Column index of center tile.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    # ========================================================================
    # Mine Layout (Mid-level)
    # ========================================================================

    @property
    def mines_laid(self) -> bool:
        return self._mines_laid

    def lay_mines(self, safe_index: int) -> None:
        """
        Randomly lay the configured number of mines.

        The tile at ``safe_index`` is held as a placeholder mine while the
        others are drawn, so no draw can land on it, and is cleared
        afterwards. Adjacency counts are computed once the layout is final.

        Args:
            safe_index: Linear index of the tile that must stay mine-free.

        Raises:
            DoubleLay: If mines were already laid on this board.
            OutOfBounds: If ``safe_index`` is not a tile index.
        """
        if self._mines_laid:
            raise DoubleLay("Mines have already been laid on this board")
        self.position_of(safe_index)

        tile_count = self.config.tile_count
        safe_tile = self._tiles[safe_index]
        safe_tile.is_mine = True

        placed = 0
        while placed < self.config.num_mines:
            index = balanced_random(tile_count, self.rng)
            tile = self._tiles[index]
            if not tile.is_mine:
                tile.is_mine = True
                placed += 1

        safe_tile.is_mine = False
        self._calculate_adjacent_mines()
        self._mines_laid = True
        logger.debug(
            "Laid %d mines on %dx%d board, safe index %d",
            placed, self.height, self.width, safe_index,
        )

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine tiles."""
        for row, col in self.positions():
            tile = self._tiles[row * self.width + col]
            if not tile.is_mine:
                tile.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._tiles[neighbor_row * self.width + neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Tile Access (High-level)
    # ========================================================================

    def tile(self, row: int, col: int) -> Tile:
        """
        Get the live tile at a position.

        Raises:
            OutOfBounds: If (row, col) lies outside the board.
        """
        return self._tiles[self.index_of(row, col)]

    def __getitem__(self, position: Position) -> Tile:
        row, col = position
        return self.tile(row, col)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def mine_count(self) -> int:
        """Number of tiles currently holding a mine."""
        return sum(1 for tile in self._tiles if tile.is_mine)

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array of ``Tile.to_observation`` values, shaped
            (height, width).
        """
        obs = np.fromiter(
            (tile.to_observation() for tile in self._tiles),
            dtype=np.int8,
            count=len(self._tiles),
        )
        return obs.reshape(self.height, self.width)

    def hidden_positions(self) -> List[Position]:
        """Positions of tiles that are neither revealed nor flagged."""
        return [
            self.position_of(index)
            for index, tile in enumerate(self._tiles)
            if tile.is_hidden
        ]
