"""Latin-square board generation."""

from .base import build, is_latin_square, require_square
from .palette import MAX_SYMBOLS, TILE_RGB, Tile
from .transforms import (
    ROUNDS,
    make_board,
    randomize,
    rotate90_inplace,
    shift_rows_left,
)

__all__ = [
    # Construction
    "build",
    "is_latin_square",
    "require_square",
    # Transforms
    "ROUNDS",
    "rotate90_inplace",
    "shift_rows_left",
    "randomize",
    "make_board",
    # Palette
    "Tile",
    "TILE_RGB",
    "MAX_SYMBOLS",
]
