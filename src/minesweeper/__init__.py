"""
Minesweeper rule engine.

Provides board generation with a safe first move, adjacency counts,
cascading reveal and win/loss tracking, plus text rendering, command
parsing and a Gymnasium environment around the engine.
"""
from .errors import (
    ActionAfterGameOver,
    CommandError,
    DoubleLay,
    InvalidConfiguration,
    MinesweeperError,
    OutOfBounds,
)
from .randomness import balanced_random
from .tile import Tile, TileState
from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT, DEFAULT
from .game import Game, GameState
from .parser import Command, QUIT, parse_command
from .render import render_board, render_game, render_status, render_tile
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "ActionAfterGameOver",
    "CommandError",
    "DoubleLay",
    "InvalidConfiguration",
    "MinesweeperError",
    "OutOfBounds",
    "balanced_random",
    "Tile",
    "TileState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DEFAULT",
    "Game",
    "GameState",
    "Command",
    "QUIT",
    "parse_command",
    "render_board",
    "render_game",
    "render_status",
    "render_tile",
    "MinesweeperEnv",
    "make_vec_env",
]
