"""
Latin Board: printable Latin-square boards for a tile-placement game.

Builds a canonical Latin square, scrambles it with transformations that
keep every row and column a permutation of the tiles, and renders the
result onto a page image.
"""

from src.board import (
    ROUNDS,
    TILE_RGB,
    Tile,
    build,
    is_latin_square,
    make_board,
    randomize,
    rotate90_inplace,
)
from src.config import Config, load_config, merge_configs
from src.errors import BoardError, DomainError, ShapeError
from src.logging_utils import get_logger
from src.preview import format_preview, print_preview
from src.render import (
    PageLayout,
    compute_layout,
    mm_to_pixel,
    pixel_to_mm,
    render_board,
    save_image,
)

__version__ = "0.1.0"
__all__ = [
    # Board
    "build",
    "rotate90_inplace",
    "randomize",
    "make_board",
    "is_latin_square",
    "ROUNDS",
    "Tile",
    "TILE_RGB",
    # Errors
    "BoardError",
    "ShapeError",
    "DomainError",
    # Config
    "Config",
    "load_config",
    "merge_configs",
    # Output
    "format_preview",
    "print_preview",
    "PageLayout",
    "compute_layout",
    "mm_to_pixel",
    "pixel_to_mm",
    "render_board",
    "save_image",
    "get_logger",
]
