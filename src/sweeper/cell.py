"""
Cell module for Minesweeper game.

A cell has two independent facets: its content (a bomb, or the number of
bombs around it) and the player's annotation (undetermined, flagged,
questioned or revealed).
"""
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Union


# ============================================================================
# Constants
# ============================================================================

class Annotation(Enum):
    """What the player has recorded about a cell."""

    UNDETERMINED = auto()
    FLAGGED = auto()
    QUESTIONED = auto()
    REVEALED = auto()


# Right-click cycle; REVEALED never leaves itself.
_NEXT_ANNOTATION = {
    Annotation.UNDETERMINED: Annotation.FLAGGED,
    Annotation.FLAGGED: Annotation.QUESTIONED,
    Annotation.QUESTIONED: Annotation.UNDETERMINED,
}


# ============================================================================
# Cell Content
# ============================================================================

@dataclass(frozen=True)
class Empty:
    """
    No bomb in the cell.

    Attributes:
        count: Number of bombs among the (up to 8) neighbors.
    """

    count: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.count <= 8:
            raise ValueError(f"Neighbor count must be in 0..8, got {self.count}")


@dataclass(frozen=True)
class Bomb:
    """A bomb."""


CellContent = Union[Empty, Bomb]

BOMB = Bomb()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        content: Ground truth of the cell (Empty(n) or Bomb).
        annotation: The player's interaction with the cell.
    """

    content: CellContent = field(default_factory=Empty)
    annotation: Annotation = Annotation.UNDETERMINED

    def next_annotation(self) -> Annotation:
        """
        Annotation that a cycle click would move this cell to.

        Returns:
            The next annotation in the cycle, or REVEALED for revealed cells.
        """
        return _NEXT_ANNOTATION.get(self.annotation, self.annotation)

    @property
    def is_bomb(self) -> bool:
        """Check if cell contains a bomb."""
        return isinstance(self.content, Bomb)

    @property
    def neighbor_bombs(self) -> int:
        """Neighbor bomb count, 0 for bomb cells."""
        if isinstance(self.content, Empty):
            return self.content.count
        return 0

    @property
    def is_zero(self) -> bool:
        """Check if cell is Empty(0), the seed of a cascade reveal."""
        return self.content == Empty(0)

    @property
    def is_undetermined(self) -> bool:
        return self.annotation == Annotation.UNDETERMINED

    @property
    def is_flagged(self) -> bool:
        return self.annotation == Annotation.FLAGGED

    @property
    def is_questioned(self) -> bool:
        return self.annotation == Annotation.QUESTIONED

    @property
    def is_revealed(self) -> bool:
        return self.annotation == Annotation.REVEALED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agents.

        Returns:
            -1: Undetermined cell
            -2: Flagged cell
            -3: Questioned cell
            0-8: Revealed cell with neighbor bomb count
            9: Revealed bomb (lost game)
        """
        if self.annotation == Annotation.UNDETERMINED:
            return -1
        if self.annotation == Annotation.FLAGGED:
            return -2
        if self.annotation == Annotation.QUESTIONED:
            return -3
        if self.is_bomb:
            return 9
        return self.neighbor_bombs
