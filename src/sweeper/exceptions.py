"""
Exceptions raised by the Minesweeper board engine.

Only programming-contract violations are errors. Ordinary player misclicks
(revealing a revealed cell, flagging past the cap, acting after the game
ended) are silent no-ops and never raise.
"""
from typing import Any, Dict, Optional


class SweeperError(Exception):
    """
    Base exception for all board engine errors.

    Attributes:
        details: Additional context about the error.
    """

    def __init__(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.details = details or {}


class ConstructionError(SweeperError, ValueError):
    """Raised when a board cannot be built from the given configuration."""

    def __init__(
        self,
        message: str,
        width: int,
        height: int,
        bomb_count: int,
    ) -> None:
        super().__init__(
            message,
            details={"width": width, "height": height, "bomb_count": bomb_count},
        )
        self.width = width
        self.height = height
        self.bomb_count = bomb_count


class OutOfBoundsError(SweeperError, IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, col: int, row: int, width: int, height: int) -> None:
        message = (
            f"Cell ({col}, {row}) is outside the {width}x{height} board"
        )
        super().__init__(
            message,
            details={"col": col, "row": row, "width": width, "height": height},
        )
        self.col = col
        self.row = row


class PlacementError(SweeperError):
    """
    Raised when a placement strategy breaks the bomb placement contract.

    Examples:
    - Wrong number of positions returned
    - The same position returned twice
    - A position inside the opening exclusion zone
    """
