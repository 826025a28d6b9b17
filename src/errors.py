"""Exceptions raised by board construction and transformation."""


class BoardError(ValueError):
    """Base class for invalid board input."""


class ShapeError(BoardError):
    """Grid is not square, or not of the dimension an operation requires."""


class DomainError(BoardError):
    """Board size or symbols fall outside the supported alphabet."""
