"""
Gymnasium environment wrapper for Minesweeper.

Exposes a Game through the standard reset/step interface so external
agents can play it.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .game import Game
from .render import render_board
from .tile import FLAGGED_OBSERVATION, HIDDEN_OBSERVATION, MINE_OBSERVATION


# ============================================================================
# Rewards
# ============================================================================

SAFE_REWARD = 1.0
WIN_REWARD = 10.0
MINE_REWARD = -10.0
INVALID_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the tile at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an invalid action (already revealed or flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.game = Game(self.config)

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.tile_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(0, 2**32))
        self.game = Game(self.config, rng=random.Random(game_seed))
        self._steps = 0

        return self.game.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the tile encoded by ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self.game.board.position_of(int(action))
        self._steps += 1

        reward = self._apply_reveal(row, col)
        observation = self.game.board.get_observation()
        terminated = self.game.over

        return observation, reward, terminated, False, self._get_info()

    def _apply_reveal(self, row: int, col: int) -> float:
        tile = self.game.board.tile(row, col)
        if self.game.over or not tile.is_hidden:
            return INVALID_REWARD

        self.game.reveal(row, col)

        if self.game.is_won:
            return WIN_REWARD
        if self.game.is_lost:
            return MINE_REWARD
        return SAFE_REWARD

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "revealed": self.config.safe_tile_count - self.game.tiles_remaining,
            "total_safe": self.config.safe_tile_count,
            "game_state": self.game.state.name,
            "valid_actions": len(self.game.board.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.game.board)
        if self.render_mode == "human":
            print(render_board(self.game.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = tile can still be revealed.
        """
        return self.game.board.get_observation().ravel() == HIDDEN_OBSERVATION


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel play.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
