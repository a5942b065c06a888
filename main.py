"""
Space Dodger launcher.

Dodge the falling meteors; difficulty rises every 500 points.
Arrows/WASD or mouse/touch to move, Space/Enter to start, R to reset, Esc to quit.
"""

import argparse
import logging

from space_dodger.config import DISPLAY_SCALE
from space_dodger.game import main as run_game


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Space Dodger arcade game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--debug', action='store_true', help='Verbose per-frame logging')
    parser.add_argument('--seed', type=int, default=None, help='Seed for a reproducible run')
    parser.add_argument('--scale', type=float, default=DISPLAY_SCALE,
                        help=f'Window scale factor (default: {DISPLAY_SCALE})')
    args = parser.parse_args()

    setup_logging(args.debug)
    run_game(seed=args.seed, scale=args.scale)


if __name__ == "__main__":
    main()
