"""Colored terminal preview of a board."""

import sys
from typing import TextIO

import numpy as np

from src.board.base import require_square
from src.board.palette import TILE_RGB, require_paletted

RESET = "\x1b[0m"


def format_cell(symbol: int) -> str:
    """Render one symbol as black text on its tile color."""
    r, g, b = (int(c) for c in TILE_RGB[symbol])
    return f"\x1b[30;48;2;{r};{g};{b}m {symbol} {RESET}"


def format_preview(board: np.ndarray) -> str:
    """
    Render a board as ANSI truecolor text, one line per row.

    Args:
        board: Square board with symbols covered by the tile palette.

    Returns:
        The preview text, ending with a newline.
    """
    require_square(board)
    require_paletted(board)
    lines = ["".join(format_cell(int(v)) for v in row) for row in board]
    return "".join(line + "\n" for line in lines)


def print_preview(board: np.ndarray, stream: TextIO | None = None) -> None:
    """Write the preview of a board to stream (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    stream.write(format_preview(board))
    stream.flush()
