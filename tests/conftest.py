"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Game, Tile


# ============================================================================
# Test Doubles
# ============================================================================

class ScriptedRandom:
    """Random source that replays a fixed list of raw draws."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.calls = 0

    def getrandbits(self, k: int) -> int:
        self.calls += 1
        return next(self._values)


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def count_mine_neighbors(board: Board, row: int, col: int) -> int:
    """Brute-force neighbor mine count, independent of Board.neighbors."""
    count = 0
    for other_row in range(board.height):
        for other_col in range(board.width):
            if (other_row, other_col) == (row, col):
                continue
            if abs(other_row - row) <= 1 and abs(other_col - col) <= 1:
                if board.tile(other_row, other_col).is_mine:
                    count += 1
    return count


def revealed_positions(board: Board) -> List[tuple]:
    return [pos for pos in board.positions() if board[pos].is_revealed]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=random.Random(7))


@pytest.fixture
def small_board() -> Board:
    """Create a small 3x3 board with 1 mine."""
    return Board(BoardConfig(3, 3, 1), random.Random(3))


@pytest.fixture
def fixed_board() -> Board:
    """
    4x4 board with mines at indices 0 and 5, laid around safe index 15.

    Layout (M = mine):
        M 2 1 0
        2 M 1 0
        1 1 1 0
        0 0 0 0
    """
    # Draws of 15 land on the held safe tile and are redrawn
    board = Board(BoardConfig(4, 4, 2), ScriptedRandom([15, 0, 15, 5]))
    board.lay_mines(15)
    return board


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fixed_game(clock: FakeClock) -> Game:
    """4x4 game whose first reveal lays mines at indices 0 and 5 (see fixed_board)."""
    return Game(
        BoardConfig(4, 4, 2),
        rng=ScriptedRandom([0, 5]),
        clock=clock,
    )


@pytest.fixture
def seeded_game(clock: FakeClock) -> Game:
    """Beginner-sized game with a reproducible layout."""
    return Game(BoardConfig(9, 9, 10), rng=random.Random(42), clock=clock)


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(is_mine=True)
