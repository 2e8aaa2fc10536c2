"""
Entry point: ``python -m qix``.
"""

import argparse
import logging

from qix.app import QixApp
from qix.config import GameConfig
from qix.log import configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(prog="qix", description="Territory capture game")
    parser.add_argument("--width", type=int, default=defaults.GRID_WIDTH, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=defaults.GRID_HEIGHT, help="Grid height in cells")
    parser.add_argument("--target", type=float, default=defaults.TARGET_COVERAGE,
                        help="Coverage percent needed to clear a level")
    parser.add_argument("--lives", type=int, default=defaults.STARTING_LIVES, help="Starting lives")
    parser.add_argument("--tile-size", type=int, default=defaults.TILE_SIZE, help="Pixels per cell")
    parser.add_argument("--scale", type=float, default=defaults.WINDOW_SCALE, help="Window scale factor")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log captures in detail")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> GameConfig:
    config = GameConfig(
        GRID_WIDTH=args.width,
        GRID_HEIGHT=args.height,
        TARGET_COVERAGE=args.target,
        STARTING_LIVES=args.lives,
        TILE_SIZE=args.tile_size,
        WINDOW_SCALE=args.scale,
    )
    config.validate()
    return config


def main(argv=None):
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    QixApp(config_from_args(args)).run()


if __name__ == "__main__":
    main()
