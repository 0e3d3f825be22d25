"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface so automated agents can play on the
board engine.
"""
import random
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import CellMarker
from .cli.render import render_board


# ============================================================================
# Constants
# ============================================================================

class ActionType(IntEnum):
    """Kind of move encoded in the upper part of an action index."""

    REVEAL = 0
    FLAG = 1
    QUESTION = 2


WIN_REWARD = 10.0
LOSS_REWARD = -10.0
REVEAL_REWARD = 1.0
MARK_REWARD = 0.0
INVALID_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = question-marked cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 3 * rows * columns.
        Action a has type ActionType(a // cells) and targets the cell
        at ((a % cells) // columns, (a % cells) % columns). Flag and
        question actions toggle the marker.

    Rewards:
        - +1 per cell uncovered by a reveal
        - +10 for winning the game (all mines flagged)
        - -10 for revealing a mine
        - 0 for changing a marker
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._cells = self.config.rows * self.config.columns
        self.board = Board(self.config)

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(ActionType) * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment with a freshly laid out board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        layout_seed = int(self.np_random.integers(0, 2**32))
        self.board = Board(self.config, rng=random.Random(layout_seed))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Encoded action (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action_type, row, col = self.decode_action(action)
        self._steps += 1

        reward = self._apply(action_type, row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[ActionType, int, int]:
        """Split an action index into (type, row, col)."""
        action_type, index = divmod(int(action), self._cells)
        row, col = divmod(index, self.config.columns)
        return ActionType(action_type), row, col

    def encode_action(self, action_type: ActionType, row: int, col: int) -> int:
        """Inverse of decode_action."""
        return int(action_type) * self._cells + row * self.config.columns + col

    def _apply(self, action_type: ActionType, row: int, col: int) -> float:
        """Perform an action on the board and compute its reward."""
        if action_type == ActionType.REVEAL:
            before = self.board.revealed_count
            if not self.board.reveal_cell(row, col):
                return INVALID_REWARD
            if self.board.is_game_lost():
                return LOSS_REWARD
            reward = REVEAL_REWARD * (self.board.revealed_count - before)
        else:
            marker = (
                CellMarker.FLAGGED
                if action_type == ActionType.FLAG
                else CellMarker.QUESTIONED
            )
            if not self.board.toggle_mark(row, col, marker):
                return INVALID_REWARD
            reward = MARK_REWARD

        if self.board.is_game_won():
            return WIN_REWARD
        return reward

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_mines": self.board.total_mines,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action. Every action type
            is valid on every non-revealed cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            for action_type in ActionType:
                mask[self.encode_action(action_type, row, col)] = True
        return mask
