"""In-place transformations that preserve the Latin-square property."""

import logging

import numpy as np

from src.errors import DomainError

from .base import build, is_latin_square, require_square

logger = logging.getLogger(__name__)

# Number of shuffle/rotate/shift rounds applied by randomize().
ROUNDS: int = 5


def rotate90_inplace(board: np.ndarray) -> np.ndarray:
    """
    Rotate a square board 90° clockwise without allocating a second grid.

    Walks the concentric rings from the outside in. For every position on
    the top edge of a ring, the four cells that map onto each other under a
    quarter turn are exchanged in one 4-cycle through a single temporary.

    Args:
        board: Square (n, n) array, mutated in place.

    Returns:
        The same array.
    """
    n = require_square(board)
    last = n - 1
    for layer in range(n // 2):
        for offset in range(layer, last - layer):
            top = board[layer, offset]
            # left -> top
            board[layer, offset] = board[last - offset, layer]
            # bottom -> left
            board[last - offset, layer] = board[last - layer, last - offset]
            # right -> bottom
            board[last - layer, last - offset] = board[offset, last - layer]
            # top -> right
            board[offset, last - layer] = top
    return board


def shift_rows_left(board: np.ndarray, shift: int) -> np.ndarray:
    """Cyclically shift every row left by the same amount (in place)."""
    n = require_square(board)
    if n == 0:
        return board
    shift = int(shift) % n
    if shift:
        board[:] = np.roll(board, -shift, axis=1)
    return board


def randomize(
    board: np.ndarray,
    rng: np.random.Generator,
    rounds: int = ROUNDS,
) -> np.ndarray:
    """
    Scramble a Latin square in place while keeping it a Latin square.

    Each round draws one shift in [0, n), shuffles the rows, rotates the
    board a quarter turn and shifts every row left by the drawn amount.

    Args:
        board: Latin square of shape (n, n) with symbols 0..n-1.
        rng: Source of randomness; a seeded generator gives reproducible boards.
        rounds: Number of rounds to apply.

    Returns:
        The same array, scrambled.
    """
    n = require_square(board)
    if n == 0:
        raise DomainError("cannot randomize an empty board")
    if rounds < 0:
        raise DomainError(f"rounds must be non-negative, got {rounds}")
    if not is_latin_square(board):
        raise DomainError(f"board is not a Latin square over 0..{n - 1}")

    for i in range(rounds):
        shift = int(rng.integers(0, n))
        rng.shuffle(board)
        rotate90_inplace(board)
        shift_rows_left(board, shift)
        logger.debug("round %d: shift=%d", i, shift)
    return board


def make_board(
    n: int = 5,
    rng: np.random.Generator | None = None,
    rounds: int = ROUNDS,
) -> np.ndarray:
    """Build the canonical n×n board and randomize it."""
    if rng is None:
        rng = np.random.default_rng()
    return randomize(build(n), rng, rounds=rounds)
