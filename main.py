#!/usr/bin/env python3
"""
Main entry point for the Latin board generator.

Builds a randomized Latin-square board, prints a colored preview to the
terminal and writes the board onto a printable PNG page.
"""

import argparse
from pathlib import Path
from typing import Any

import numpy as np

from src.board import MAX_SYMBOLS, make_board
from src.config import Config, load_config, merge_configs
from src.logging_utils import get_logger
from src.preview import print_preview
from src.render import compute_layout, render_board, save_image


def run(config: Config) -> np.ndarray:
    """
    Generate, preview and render one board.

    Args:
        config: Complete generator configuration.

    Returns:
        The generated board.
    """
    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    logger = get_logger("src", level=config.logging.level.upper(), log_file=log_file)

    n = config.board.size
    layout = compute_layout(config.page, n)
    logger.info(
        f"creating image {layout.width}x{layout.height} over {layout.board_width} "
        f"with {layout.tile_width} tile width at {layout.dpi} dpi"
    )

    rng = np.random.default_rng(config.board.seed)
    board = make_board(n, rng=rng, rounds=config.board.rounds)
    logger.info(f"Board ({n}x{n}, {config.board.rounds} rounds, seed={config.board.seed}):\n{board}")

    if config.output.preview:
        print_preview(board)

    image = render_board(board, layout, alpha=config.page.tile_alpha)
    path = save_image(image, config.output.path, dpi=layout.dpi)
    logger.info(f"Saved board to {path}")
    return board


def main() -> None:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Latin board: generate a printable Latin-square game board"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: built-in defaults)",
    )

    # Board parameters
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        choices=range(1, MAX_SYMBOLS + 1),
        help=f"Board size and number of tile kinds, 1..{MAX_SYMBOLS} (default: 5)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Number of randomization rounds (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible board (default: fresh entropy)",
    )

    # Output
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path of the PNG file to write (default: board.png)",
    )
    parser.add_argument(
        "--dpi",
        type=int,
        default=None,
        help="Print resolution in dots per inch (default: 150)",
    )
    parser.add_argument(
        "--no-preview",
        action="store_true",
        help="Skip the colored terminal preview",
    )

    # Logging
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every transformation round and tile placement",
    )

    args = parser.parse_args()

    overrides: dict[str, Any] = {"board": {}, "page": {}, "output": {}, "logging": {}}
    if args.size is not None:
        overrides["board"]["size"] = args.size
    if args.rounds is not None:
        overrides["board"]["rounds"] = args.rounds
    if args.seed is not None:
        overrides["board"]["seed"] = args.seed
    if args.dpi is not None:
        overrides["page"]["dpi"] = args.dpi
    if args.output is not None:
        overrides["output"]["path"] = args.output
    if args.no_preview:
        overrides["output"]["preview"] = False
    if args.log_file is not None:
        overrides["logging"]["log_file"] = args.log_file
    if args.verbose:
        overrides["logging"]["level"] = "DEBUG"

    config = merge_configs(load_config(args.config), overrides)
    run(config)


if __name__ == "__main__":
    main()
