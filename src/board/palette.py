"""Tile colors, indexed by board symbol."""

from enum import IntEnum

import numpy as np

from src.errors import DomainError


class Tile(IntEnum):
    RUST = 0
    OCHRE = 1
    SEAFOAM = 2
    PEARL = 3
    SLATE = 4


# Row i is the RGB color of Tile(i).
TILE_RGB: np.ndarray = np.array(
    [
        [160, 70, 70],
        [172, 124, 73],
        [129, 186, 178],
        [221, 209, 213],
        [59, 64, 85],
    ],
    dtype=np.uint8,
)
TILE_RGB.setflags(write=False)

MAX_SYMBOLS: int = len(Tile)


def require_paletted(board: np.ndarray) -> None:
    """Check that every symbol on the board has a tile color."""
    if board.size and (board.min() < 0 or board.max() >= MAX_SYMBOLS):
        raise DomainError(
            f"board symbols must be in [0, {MAX_SYMBOLS - 1}]; "
            f"got range [{board.min()}, {board.max()}]"
        )
