"""
Minesweeper board engine.

Provides the board state machine, cell model, bomb placement strategies,
display descriptions and a Gymnasium environment wrapper.
"""
from .cell import Annotation, Bomb, BOMB, Cell, CellContent, Empty
from .board import (
    Board,
    BoardConfig,
    Phase,
    create,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
)
from .display import CellDisplay, Color, render_text
from .exceptions import (
    ConstructionError,
    OutOfBoundsError,
    PlacementError,
    SweeperError,
)
from .placement import fixed, rejection_sampling, shuffled_candidates
from .environment import MinesweeperEnv

__all__ = [
    "Annotation",
    "Bomb",
    "BOMB",
    "Cell",
    "CellContent",
    "Empty",
    "Board",
    "BoardConfig",
    "Phase",
    "create",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "CellDisplay",
    "Color",
    "render_text",
    "ConstructionError",
    "OutOfBoundsError",
    "PlacementError",
    "SweeperError",
    "fixed",
    "rejection_sampling",
    "shuffled_candidates",
    "MinesweeperEnv",
]
