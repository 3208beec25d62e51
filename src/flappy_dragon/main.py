"""
main.py: Command-line entry point.
"""

import argparse
import logging
import sys

from .client import FlappyClient
from .constants import RENDER_FPS, SPRITE_SHEET_PATH, WINDOW_SCALE
from .renderer import StartupError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="flappy-dragon",
        description="Fly the dragon through the gaps. SPACE flaps, P plays, Q quits.",
    )
    ap.add_argument("--sprite-sheet", default=SPRITE_SHEET_PATH,
                    help="Path to the sprite sheet image")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for obstacle placement (random if omitted)")
    ap.add_argument("--fps", type=int, default=RENDER_FPS, help="Render frames per second")
    ap.add_argument("--scale", type=int, default=WINDOW_SCALE,
                    help="Window size as a multiple of 640x400")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        client = FlappyClient(args.sprite_sheet, seed=args.seed,
                              fps=args.fps, scale=args.scale)
    except StartupError as e:
        logger.error("Startup failed: %s", e)
        return 1

    client.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
