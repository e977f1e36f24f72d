"""
Gymnasium environment wrapper for Minesweeper.

Maps flat integer actions onto (col, row, intent) triples for the board
engine and exposes the board as a numpy observation.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import Annotation
from .display import render_text
from .placement import Placer, rejection_sampling

REVEAL = 0
ANNOTATE = 1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array shaped (height, width) where:
        - -1 = undetermined cell
        - -2 = flagged cell
        - -3 = questioned cell
        - 0-8 = revealed cell with neighbor bomb count
        - 9 = revealed bomb

    Actions:
        Discrete action space of size 2 * width * height.
        Action a < width * height reveals cell (a % width, a // width).
        Action a >= width * height cycles the annotation of cell
        a - width * height.

    Rewards:
        - +1 for a reveal that changed the board
        - 0 for an annotation that changed the board
        - +10 for winning the game
        - -10 for hitting a bomb
        - -0.1 for a no-op action
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        placer: Optional[Placer] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 bombs).
            render_mode: How to render the environment.
            placer: Bomb placement strategy for every new board.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.placer = placer or rejection_sampling
        self.board = self._new_board(random.Random())

        self._cells = self.config.width * self.config.height

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One reveal and one annotate action per cell
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def _new_board(self, rng: random.Random) -> Board:
        return Board(config=self.config, rng=rng, placer=self.placer)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a fresh board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**32))
        self.board = self._new_board(random.Random(board_seed))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        intent, col, row = self.decode_action(action)
        self._steps += 1

        if intent == REVEAL:
            changed = self.board.reveal(col, row)
        else:
            changed = self.board.annotate_cycle(col, row)

        reward = self._calculate_reward(intent, changed)
        terminated = self.board.is_over
        truncated = False

        return (
            self.board.get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def decode_action(self, action: int) -> Tuple[int, int, int]:
        """Convert flat action index to (intent, col, row)."""
        intent, index = divmod(int(action), self._cells)
        row, col = divmod(index, self.config.width)
        return intent, col, row

    def encode_action(self, intent: int, col: int, row: int) -> int:
        """Convert (intent, col, row) to flat action index."""
        return intent * self._cells + row * self.config.width + col

    def _calculate_reward(self, intent: int, changed: bool) -> float:
        if not changed:
            return -0.1
        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        if intent == REVEAL:
            return 1.0
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = sum(
            1 for _, _, cell in self.board.iter_cells() if cell.is_revealed
        )

        return {
            "steps": self._steps,
            "revealed": revealed,
            "flagged": self.board.flagged_count,
            "bombs_left": self.board.bombs_left,
            "phase": self.board.phase.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.board)
        if self.render_mode == "human":
            print(self.board.status_text())
            print(render_text(self.board, coordinates=True))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        can_flag = self.board.flagged_count < self.board.bomb_count
        for col, row in self.board.get_valid_actions():
            mask[self.encode_action(REVEAL, col, row)] = True
            if not self.board.is_active:
                continue
            cell = self.board.get_cell(col, row)
            if cell.next_annotation() != Annotation.FLAGGED or can_flag:
                mask[self.encode_action(ANNOTATE, col, row)] = True
        return mask
