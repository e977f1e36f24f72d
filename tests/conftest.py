"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src and the scripts at the repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Cell, Empty, BOMB, create, fixed


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 bombs."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def corner_bomb_board() -> Board:
    """3x3 board with its single bomb forced at (2, 2)."""
    return create(3, 3, 1, placer=fixed([(2, 2)]))


@pytest.fixture
def opened_corner_bomb_board(corner_bomb_board: Board) -> Board:
    """3x3 corner bomb board after the opening reveal at (0, 0)."""
    corner_bomb_board.reveal(0, 0)
    return corner_bomb_board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no bombs for cascade testing."""
    return create(5, 5, 0)


@pytest.fixture
def split_board() -> Board:
    """
    5x5 board with a wall of bombs in column 2.

    Opening at (0, 0) reveals columns 0-1 only; column 4 stays hidden.
    """
    return create(
        5, 5, 5, placer=fixed([(2, row) for row in range(5)])
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def undetermined_cell() -> Cell:
    """Create an undetermined cell."""
    return Cell()


@pytest.fixture
def bomb_cell() -> Cell:
    """Create a cell containing a bomb."""
    return Cell(content=BOMB)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a cell with 3 neighbor bombs."""
    return Cell(content=Empty(3))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
