import numpy as np

from src.errors import DomainError, ShapeError


def require_square(board: np.ndarray) -> int:
    """Validate that board is a 2-D square grid and return its order."""
    if board.ndim != 2:
        raise ShapeError(f"board must be 2-D; got ndim={board.ndim}")
    n = int(board.shape[0])
    if board.shape != (n, n):
        raise ShapeError(f"board must be square; got shape={board.shape}")
    return n


def build(n: int) -> np.ndarray:
    """Create the canonical n×n Latin square.

    Row 0 is 0..n-1 and every following row is the previous one rotated
    right by one position, so row i equals the base rotated right by i:
      value(r,c) = (c - r) mod n
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise DomainError(f"n must be an integer; got {n!r}")
    if n < 0:
        raise DomainError(f"n must be non-negative, got {n}")
    n = int(n)
    board = np.empty((n, n), dtype=np.int64)
    row = np.arange(n, dtype=np.int64)
    for r in range(n):
        board[r] = row
        row = np.roll(row, 1)
    return board


def is_latin_square(board: np.ndarray) -> bool:
    """Check that every row and column is a permutation of 0..n-1."""
    board = np.asarray(board)
    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        return False
    n = int(board.shape[0])
    alphabet = np.arange(n)
    for row in board:
        if not np.array_equal(np.sort(row), alphabet):
            return False
    for col in board.T:
        if not np.array_equal(np.sort(col), alphabet):
            return False
    return True
