"""Rasterize a board onto a printable page."""

import logging
from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from src.board.base import require_square
from src.board.palette import TILE_RGB, require_paletted
from src.config import PageConfig

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4


def mm_to_pixel(dpi: int, mm: float) -> float:
    return dpi * mm / MM_PER_INCH


def pixel_to_mm(dpi: int, pixel: float) -> float:
    return pixel * MM_PER_INCH / dpi


@dataclass(frozen=True)
class PageLayout:
    """Pixel geometry of a page holding one board."""

    width: int
    height: int
    board_width: int
    tile_width: int
    origin_x: int
    origin_y: int
    dpi: int


def compute_layout(page: PageConfig, n: int) -> PageLayout:
    """
    Convert the page geometry in millimetres to pixels for an n×n board.

    Args:
        page: Page configuration.
        n: Board order.

    Returns:
        Pixel layout of the printable area and the board.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    width = round(mm_to_pixel(page.dpi, page.width_mm - 2 * page.margin_mm))
    height = round(mm_to_pixel(page.dpi, page.height_mm - 2 * page.margin_mm))
    board_width = round(mm_to_pixel(page.dpi, page.board_width_mm))
    tile_width = board_width // n
    if tile_width < 1:
        raise ValueError(f"board of {board_width}px is too narrow for {n} tiles")

    right = page.origin_x + tile_width * n
    bottom = page.origin_y + tile_width * n
    if page.origin_x < 0 or page.origin_y < 0 or right > width or bottom > height:
        raise ValueError(
            f"board spanning ({page.origin_x}, {page.origin_y})-({right}, {bottom}) "
            f"does not fit on a {width}x{height} page"
        )
    return PageLayout(
        width=width,
        height=height,
        board_width=board_width,
        tile_width=tile_width,
        origin_x=page.origin_x,
        origin_y=page.origin_y,
        dpi=page.dpi,
    )


def render_board(board: np.ndarray, layout: PageLayout, alpha: int = 200) -> np.ndarray:
    """
    Paint a board onto a white page.

    Tiles are laid left to right along a row and rows top to bottom,
    starting at the layout origin.

    Args:
        board: Square board with symbols covered by the tile palette.
        layout: Page layout from compute_layout().
        alpha: Alpha channel of the tile pixels.

    Returns:
        RGBA image of shape (height, width, 4), dtype uint8.
    """
    n = require_square(board)
    require_paletted(board)
    if not 0 <= alpha <= 255:
        raise ValueError(f"alpha must be in [0, 255]; got {alpha}")

    image = np.full((layout.height, layout.width, 4), 255, dtype=np.uint8)
    tw = layout.tile_width
    for r in range(n):
        y1 = layout.origin_y + r * tw
        for c in range(n):
            x1 = layout.origin_x + c * tw
            tile = int(board[r, c])
            image[y1:y1 + tw, x1:x1 + tw, :3] = TILE_RGB[tile]
            image[y1:y1 + tw, x1:x1 + tw, 3] = alpha
            logger.debug("tile: %d, x1: %d, y1: %d", tile, x1, y1)
    return image


def save_image(image: np.ndarray, path: str | Path, dpi: int | None = None) -> Path:
    """Write an RGBA image as PNG, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if dpi is None:
        plt.imsave(path, image, format="png")
    else:
        plt.imsave(path, image, format="png", dpi=dpi)
    return path
