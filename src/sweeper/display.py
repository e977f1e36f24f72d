"""
Display description of cells.

The engine does not draw anything. It answers, for every cell, which
symbol to paint in which color on which background; renderers (the text
renderer below, or any GUI) only translate that into pixels or characters.
"""
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Tuple

if TYPE_CHECKING:
    from .board import Board

# RGBA components in 0.0..1.0
Color = Tuple[float, float, float, float]


class CellDisplay(NamedTuple):
    """
    What a renderer should paint for one cell.

    Attributes:
        symbol: Single character to draw, or None for a blank cell.
        symbol_color: Color of the symbol, or None for a blank cell.
        background: Cell background color.
    """

    symbol: Optional[str]
    symbol_color: Optional[Color]
    background: Color


# ============================================================================
# Palette
# ============================================================================

BOMB_BACKGROUND: Color = (0.9, 0.0, 0.0, 1.0)
EXPLODED_BACKGROUND: Color = (0.5, 0.0, 0.5, 1.0)
WRONG_FLAG_BACKGROUND: Color = (0.5, 0.0, 0.5, 1.0)
UNDETERMINED_BACKGROUND: Color = (1.0, 1.0, 1.0, 1.0)
REVEALED_BACKGROUND: Color = (0.7, 0.7, 0.7, 1.0)
QUESTION_BACKGROUND: Color = (0.7, 0.7, 1.0, 1.0)
FLAGGED_BACKGROUND: Color = (1.0, 0.64, 0.0, 1.0)
MARKER_COLOR: Color = (0.0, 0.0, 0.1, 1.0)

COUNT_COLORS = {
    1: (0.0, 0.0, 1.0, 1.0),
    2: (0.0, 1.0, 0.0, 1.0),
    3: (1.0, 0.0, 0.0, 1.0),
    4: (0.675, 0.4875, 0.8, 1.0),
    5: (0.64, 0.16, 0.16, 1.0),
    6: (0.5, 1.0, 0.5, 1.0),
    7: (0.9, 0.8, 1.0, 1.0),
    8: (1.0, 0.6, 0.6, 1.0),
}

FLAG_SYMBOL = "F"
QUESTION_SYMBOL = "?"
BOMB_SYMBOL = "B"
WRONG_FLAG_SYMBOL = "X"

BLANK = CellDisplay(None, None, UNDETERMINED_BACKGROUND)
REVEALED_BLANK = CellDisplay(None, None, REVEALED_BACKGROUND)
FLAG = CellDisplay(FLAG_SYMBOL, MARKER_COLOR, FLAGGED_BACKGROUND)
QUESTION = CellDisplay(QUESTION_SYMBOL, MARKER_COLOR, QUESTION_BACKGROUND)
BOMB = CellDisplay(BOMB_SYMBOL, MARKER_COLOR, BOMB_BACKGROUND)
EXPLODED = CellDisplay(BOMB_SYMBOL, MARKER_COLOR, EXPLODED_BACKGROUND)
WRONG_FLAG = CellDisplay(WRONG_FLAG_SYMBOL, MARKER_COLOR, WRONG_FLAG_BACKGROUND)


def count_display(count: int) -> CellDisplay:
    """
    Display for a revealed cell with the given neighbor bomb count.

    Args:
        count: Neighbor bomb count (0-8).

    Returns:
        Digit glyph in its color, or a revealed blank for 0.
    """
    if count == 0:
        return REVEALED_BLANK
    return CellDisplay(str(count), COUNT_COLORS[count], REVEALED_BACKGROUND)


# ============================================================================
# Text Rendering
# ============================================================================

def render_text(board: "Board", coordinates: bool = False) -> str:
    """
    Render the board as plain text, one character per cell.

    Undetermined cells show as '.', revealed zeros as ' ', everything else
    as the symbol returned by Board.describe.

    Args:
        board: Board to render.
        coordinates: Add column and row indices around the grid.

    Returns:
        Multi-line string.
    """
    width, height = board.dimensions
    lines: List[str] = []
    if coordinates:
        lines.append("   " + " ".join(str(col % 10) for col in range(width)))
    for row in range(height):
        chars = []
        for col in range(width):
            display = board.describe(col, row)
            if display.symbol is not None:
                chars.append(display.symbol)
            elif display.background == UNDETERMINED_BACKGROUND:
                chars.append(".")
            else:
                chars.append(" ")
        line = " ".join(chars)
        if coordinates:
            line = f"{row:>2} {line}"
        lines.append(line)
    return "\n".join(lines)
