"""
Game module for Minesweeper.

Wraps a Board with session state: remaining counters, the clock and the
outcome. Mines are laid on the first reveal so the first tile revealed
is always safe.
"""
import logging
import time
from enum import Enum, auto
from typing import Callable, List, Optional

from .board import Board, BoardConfig, Position
from .errors import ActionAfterGameOver
from .randomness import RandomSource
from .tile import Tile


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


Clock = Callable[[], float]
ChangeListener = Callable[["Game"], None]


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single game of Minesweeper.

    Attributes:
        board: The owned board.
        mines_remaining: Mines minus flags placed. Goes negative when the
            player plants more flags than there are mines.
        tiles_remaining: Non-mine tiles still hidden.
        solve_time: Milliseconds taken to win, None until won.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[RandomSource] = None,
        clock: Clock = time.monotonic,
        on_change: Optional[ChangeListener] = None,
    ) -> None:
        """
        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source used to lay mines.
            clock: Returns the current time in seconds.
            on_change: Called with the game after every flag or reveal,
                typically to re-render.
        """
        self.config = config or BoardConfig()
        self.board = Board(self.config, rng)
        self.mines_remaining = self.config.num_mines
        self.tiles_remaining = self.config.safe_tile_count
        self.solve_time: Optional[int] = None
        self._clock = clock
        self._on_change = on_change
        self._state = GameState.PLAYING
        self._started = False
        self._start_time = 0.0
        self._end_time: Optional[float] = None

    @classmethod
    def create(
        cls, width: int, height: int, num_mines: int, **kwargs
    ) -> "Game":
        """Build a game from raw dimensions and mine count."""
        return cls(BoardConfig(width, height, num_mines), **kwargs)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def started(self) -> bool:
        return self._started

    @property
    def over(self) -> bool:
        return self._state != GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

    def elapsed_time(self) -> int:
        """
        Milliseconds since the first action.

        Zero before the game starts. The value stops advancing at the
        moment the game is won or lost.
        """
        if not self._started:
            return 0
        end = self._end_time if self._end_time is not None else self._clock()
        return int((end - self._start_time) * 1000)

    get_elapsed_time = elapsed_time

    # ========================================================================
    # Player Actions
    # ========================================================================

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a tile.

        Returns:
            True if the flag was toggled, False if the tile is revealed.

        Raises:
            OutOfBounds: If (row, col) is off the board.
            ActionAfterGameOver: If the game has finished.
        """
        self._ensure_playing()
        tile = self.board.tile(row, col)
        self._start()

        was_flagged = tile.is_flagged
        if not tile.toggle_flag():
            return False
        self.mines_remaining += 1 if was_flagged else -1

        self._notify()
        return True

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a tile, cascading through zero-count regions.

        The first reveal of the game lays the mines with this tile kept
        safe. Revealing a mine loses; revealing the last safe tile wins.

        Returns:
            True if at least one tile was revealed.

        Raises:
            OutOfBounds: If (row, col) is off the board.
            ActionAfterGameOver: If the game has finished.
        """
        self._ensure_playing()
        index = self.board.index_of(row, col)
        self._start()
        if not self.board.mines_laid:
            self.board.lay_mines(index)

        revealed = self._reveal_from([(row, col)])

        self._notify()
        self._check_win_condition()
        return revealed > 0

    def chord(self, row: int, col: int) -> bool:
        """
        Reveal every unflagged neighbor of a satisfied numbered tile.

        A numbered tile is satisfied when the flags around it match its
        count. Wrong flags mean a mine gets revealed and the game is lost.

        Returns:
            True if the chord was performed.

        Raises:
            OutOfBounds: If (row, col) is off the board.
            ActionAfterGameOver: If the game has finished.
        """
        self._ensure_playing()
        tile = self.board.tile(row, col)
        if not self._can_chord(row, col, tile):
            return False

        hidden = [
            (neighbor_row, neighbor_col)
            for neighbor_row, neighbor_col in self.board.neighbors(row, col)
            if self.board.tile(neighbor_row, neighbor_col).is_hidden
        ]
        revealed = self._reveal_from(hidden)

        self._notify()
        self._check_win_condition()
        return revealed > 0

    def _can_chord(self, row: int, col: int, tile: Tile) -> bool:
        if not tile.is_revealed or tile.adjacent_mines == 0:
            return False
        flag_count = sum(
            1 for neighbor in self.board.neighbors(row, col)
            if self.board[neighbor].is_flagged
        )
        return flag_count == tile.adjacent_mines

    # ========================================================================
    # Reveal Cascade
    # ========================================================================

    def _reveal_from(self, roots: List[Position]) -> int:
        """
        Flood-fill reveal starting from the given positions.

        Uses an explicit stack. Revealed and flagged tiles are skipped, so
        every tile is revealed at most once. Stops at the first mine.

        Returns:
            Number of tiles revealed.
        """
        stack = list(reversed(roots))
        revealed = 0
        while stack:
            row, col = stack.pop()
            tile = self.board.tile(row, col)
            if not tile.reveal():
                continue
            revealed += 1

            if tile.is_mine:
                self._lose(row, col)
                break

            self.tiles_remaining -= 1
            if tile.adjacent_mines == 0:
                stack.extend(self.board.neighbors(row, col))

        logger.debug("Revealed %d tiles from %s", revealed, roots)
        return revealed

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def _ensure_playing(self) -> None:
        if self.over:
            raise ActionAfterGameOver(
                f"Game is over ({self._state.name}); start a new game"
            )

    def _start(self) -> None:
        if self._started:
            return
        self._started = True
        self._start_time = self._clock()

    def _check_win_condition(self) -> None:
        if self._state == GameState.PLAYING and self.tiles_remaining <= 0:
            self._win()

    def _win(self) -> None:
        self._end_time = self._clock()
        self._state = GameState.WON
        self.solve_time = self.elapsed_time()
        logger.info("Game won in %d ms", self.solve_time)

    def _lose(self, row: int, col: int) -> None:
        self._end_time = self._clock()
        self._state = GameState.LOST
        logger.info("Game lost: mine revealed at (%d, %d)", row, col)

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)
