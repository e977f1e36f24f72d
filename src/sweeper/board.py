"""
Board module for Minesweeper game.

Implements the board engine: bomb placement on the first reveal, cascade
reveal of empty regions, the flag/question annotation cycle and win/loss
determination. Coordinates are zero-based (col, row) pairs.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import AbstractSet, Iterator, List, Optional, Tuple

import numpy as np

from . import display
from .cell import BOMB, Annotation, Cell, Empty
from .display import CellDisplay
from .exceptions import ConstructionError, OutOfBoundsError, PlacementError
from .placement import Placer, Position, rejection_sampling

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Possible states of the game."""

    PENDING = auto()
    ACTIVE = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        bomb_count: Total bombs to place.
    """

    width: int = 9
    height: int = 9
    bomb_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConstructionError(
                "Board dimensions must be positive",
                self.width, self.height, self.bomb_count,
            )
        if self.bomb_count < 0:
            raise ConstructionError(
                "Number of bombs cannot be negative",
                self.width, self.height, self.bomb_count,
            )
        if self.bomb_count >= self.cell_count:
            raise ConstructionError(
                f"Too many bombs (max {self.cell_count - 1})",
                self.width, self.height, self.bomb_count,
            )

    @property
    def cell_count(self) -> int:
        return self.width * self.height


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

DIFFICULTIES = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the game phase. The only mutating entry
    points are reveal() and annotate_cycle(); illegal player actions are
    silent no-ops that return False.

    Attributes:
        config: Board dimensions and bomb count.
        rng: Random source used for bomb placement.
        placer: Bomb placement strategy, see sweeper.placement.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    placer: Placer = field(default=rejection_sampling, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _phase: Phase = Phase.PENDING
    _flagged_count: int = 0
    _revealed_count: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of Empty(0) placeholder cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _open(self, col: int, row: int) -> None:
        """
        Handle first reveal: place bombs, compute counts, start the game.

        Bombs are placed and validated before any annotation or counter
        changes, so a rejected placement leaves the board PENDING.
        """
        self._place_bombs((col, row))
        self._calculate_neighbor_bombs()
        cell = self._grid[row][col]
        self._mark_revealed(cell)
        self._phase = Phase.ACTIVE
        logger.debug(
            f"Board {self.config.width}x{self.config.height} opened at "
            f"({col}, {row}) with {self.config.bomb_count} bombs"
        )

        if cell.is_zero:
            self._flood_fill(col, row)
        self._update_phase()

    def _place_bombs(self, opening: Position) -> None:
        """
        Place bombs away from the opening cell and its neighbors.

        When the opening neighborhood leaves too few free cells, only the
        opening cell itself is kept bomb-free.

        Args:
            opening: (col, row) of the first revealed cell.
        """
        excluded = frozenset(self._get_neighborhood(*opening))
        if self.config.cell_count - len(excluded) < self.config.bomb_count:
            logger.debug(
                f"Opening neighborhood of {opening} too large for "
                f"{self.config.bomb_count} bombs, excluding the cell only"
            )
            excluded = frozenset([opening])

        positions = self.placer(
            self.config.width,
            self.config.height,
            self.config.bomb_count,
            excluded,
            self.rng,
        )
        self._validate_placement(positions, excluded)
        for col, row in positions:
            self._grid[row][col].content = BOMB

    def _validate_placement(
        self, positions: List[Position], excluded: AbstractSet[Position]
    ) -> None:
        """Reject placements that break the bomb count or exclusion rule."""
        if len(positions) != self.config.bomb_count:
            raise PlacementError(
                f"Expected {self.config.bomb_count} bomb positions, "
                f"got {len(positions)}",
                details={"positions": list(positions)},
            )
        if len(set(positions)) != len(positions):
            raise PlacementError(
                "Duplicate bomb positions",
                details={"positions": list(positions)},
            )
        for col, row in positions:
            if not self._is_valid_position(col, row):
                raise PlacementError(
                    f"Bomb position ({col}, {row}) is outside the board",
                    details={"position": (col, row)},
                )
            if (col, row) in excluded:
                raise PlacementError(
                    f"Bomb position ({col}, {row}) is in the opening area",
                    details={"position": (col, row)},
                )

    def _calculate_neighbor_bombs(self) -> None:
        """Calculate neighbor bomb counts for all non-bomb cells."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self._grid[row][col]
                if not cell.is_bomb:
                    cell.content = Empty(self._count_neighbor_bombs(col, row))

    def _count_neighbor_bombs(self, col: int, row: int) -> int:
        """Count bombs adjacent to a specific cell."""
        count = 0
        for neighbor_col, neighbor_row in self._get_neighbors(col, row):
            if self._grid[neighbor_row][neighbor_col].is_bomb:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighborhood(self, col: int, row: int) -> List[Position]:
        """Get the cell itself and its valid neighbors."""
        return [(col, row)] + self._get_neighbors(col, row)

    def _get_neighbors(self, col: int, row: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            col: Column index of center cell.
            row: Row index of center cell.

        Returns:
            List of (col, row) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_col = col + delta_col
                new_row = row + delta_row
                if self._is_valid_position(new_col, new_row):
                    neighbors.append((new_col, new_row))
        return neighbors

    def _is_valid_position(self, col: int, row: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= col < self.config.width and 0 <= row < self.config.height

    def _require_position(self, col: int, row: int) -> Cell:
        """Return the cell at a position, raising for out-of-range input."""
        if not self._is_valid_position(col, row):
            raise OutOfBoundsError(
                col, row, self.config.width, self.config.height
            )
        return self._grid[row][col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, col: int, row: int) -> bool:
        """
        Reveal a cell at the given position.

        On the first reveal, places bombs away from this cell and its
        neighbors. Flags do not protect a cell from being revealed. A
        revealed bomb loses the game; a revealed Empty(0) cascades.

        Args:
            col: Column index to reveal.
            row: Row index to reveal.

        Returns:
            True if the board changed, False if the reveal was a no-op.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        cell = self._require_position(col, row)

        if self._phase == Phase.PENDING:
            self._open(col, row)
            return True
        if self._phase != Phase.ACTIVE or cell.is_revealed:
            return False

        self._mark_revealed(cell)

        if cell.is_bomb:
            self._phase = Phase.LOST
            logger.info(f"Bomb revealed at ({col}, {row}), game lost")
            return True

        if cell.is_zero:
            self._flood_fill(col, row)

        self._update_phase()
        return True

    def _mark_revealed(self, cell: Cell) -> None:
        """Reveal a single cell, keeping the running counters in sync."""
        if cell.is_flagged:
            self._flagged_count -= 1
        cell.annotation = Annotation.REVEALED
        self._revealed_count += 1

    def _flood_fill(self, col: int, row: int) -> None:
        """
        Reveal the whole zero region around an Empty(0) cell.

        Uses an explicit stack; revealed cells are never pushed again.
        """
        pending = [(col, row)]
        while pending:
            current_col, current_row = pending.pop()
            for neighbor_col, neighbor_row in self._get_neighbors(
                current_col, current_row
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_revealed:
                    continue
                self._mark_revealed(neighbor)
                if neighbor.is_zero:
                    pending.append((neighbor_col, neighbor_row))

    def annotate_cycle(self, col: int, row: int) -> bool:
        """
        Cycle the annotation of a cell: undetermined, flagged, questioned.

        Flagging is refused once the number of flags equals the number of
        bombs. Placing the last correct flag can win the game.

        Args:
            col: Column index.
            row: Row index.

        Returns:
            True if the annotation changed, False otherwise.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        cell = self._require_position(col, row)
        if self._phase != Phase.ACTIVE or cell.is_revealed:
            return False

        annotation = cell.next_annotation()
        if annotation == Annotation.FLAGGED:
            if self._flagged_count >= self.config.bomb_count:
                return False
            self._flagged_count += 1
        elif cell.is_flagged:
            self._flagged_count -= 1

        cell.annotation = annotation
        self._update_phase()
        return True

    def _update_phase(self) -> None:
        """
        Move to WON when every cell is revealed or flagged.

        The flag count must match the bomb count exactly; REVEALED cells are
        never bombs while the game is active.
        """
        if self._phase != Phase.ACTIVE:
            return
        if self._flagged_count != self.config.bomb_count:
            return
        if self._revealed_count + self._flagged_count == self.config.cell_count:
            self._phase = Phase.WON
            logger.info("All bombs flagged and all safe cells revealed, game won")

    # ========================================================================
    # Display (Mid-level)
    # ========================================================================

    def describe(self, col: int, row: int) -> CellDisplay:
        """
        Describe what a renderer should paint for a cell.

        After a loss, bomb positions and wrong flags are shown; otherwise
        only what the player has done is visible.

        Args:
            col: Column index.
            row: Row index.

        Returns:
            CellDisplay(symbol, symbol_color, background).

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        cell = self._require_position(col, row)

        if self._phase == Phase.LOST:
            if cell.is_bomb:
                if cell.is_revealed:
                    return display.EXPLODED
                if cell.is_flagged:
                    return display.FLAG
                return display.BOMB
            if cell.is_flagged:
                return display.WRONG_FLAG

        if cell.annotation == Annotation.FLAGGED:
            return display.FLAG
        if cell.annotation == Annotation.QUESTIONED:
            return display.QUESTION
        if cell.annotation == Annotation.REVEALED:
            return display.count_display(cell.neighbor_bombs)
        return display.BLANK

    def status_text(self) -> str:
        """Header text: loss, win, or bombs left to flag."""
        if self._phase == Phase.LOST:
            return "BOOM!"
        if self._phase == Phase.WON:
            return "You won!"
        return f"Left: {self.bombs_left}"

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def phase(self) -> Phase:
        """Get current game phase."""
        return self._phase

    @property
    def bomb_count(self) -> int:
        return self.config.bomb_count

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def bombs_left(self) -> int:
        """Bombs not yet covered by a flag."""
        return self.config.bomb_count - self._flagged_count

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Board size as (width, height)."""
        return self.config.width, self.config.height

    @property
    def is_pending(self) -> bool:
        return self._phase == Phase.PENDING

    @property
    def is_active(self) -> bool:
        return self._phase == Phase.ACTIVE

    @property
    def is_won(self) -> bool:
        return self._phase == Phase.WON

    @property
    def is_lost(self) -> bool:
        return self._phase == Phase.LOST

    @property
    def is_over(self) -> bool:
        """Check if the game reached a terminal phase."""
        return self._phase in (Phase.WON, Phase.LOST)

    def get_cell(self, col: int, row: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        return self._require_position(col, row)

    def neighbors(self, col: int, row: int) -> List[Position]:
        """In-bounds neighbor positions of a cell, excluding the cell."""
        self._require_position(col, row)
        return self._get_neighbors(col, row)

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (col, row, cell) in row-major order."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                yield col, row, self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agents.

        Returns:
            2D int8 array shaped (height, width), see Cell.to_observation.
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for col, row, cell in self.iter_cells():
            obs[row, col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells a reveal would still change.

        Returns:
            List of (col, row) positions, empty once the game is over.
        """
        if self.is_over:
            return []
        return [
            (col, row)
            for col, row, cell in self.iter_cells()
            if not cell.is_revealed
        ]


# ============================================================================
# Construction
# ============================================================================

def create(
    width: int,
    height: int,
    bomb_count: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    placer: Optional[Placer] = None,
) -> Board:
    """
    Create a new board in the PENDING phase.

    Args:
        width: Number of columns.
        height: Number of rows.
        bomb_count: Bombs to place on the first reveal.
        seed: Seed for a fresh random source (ignored when rng is given).
        rng: Random source to use for placement.
        placer: Placement strategy (default: rejection sampling).

    Returns:
        New Board.

    Raises:
        ConstructionError: If dimensions are not positive or
            bomb_count >= width * height.
    """
    config = BoardConfig(width, height, bomb_count)
    return Board(
        config=config,
        rng=rng if rng is not None else random.Random(seed),
        placer=placer if placer is not None else rejection_sampling,
    )
