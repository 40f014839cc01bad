"""Entry point kept minimal by delegating to Engine.

Builds the OpenGL surface and the Pong scene once the window exists, then
hands control to the engine loop.
"""

import argparse

from core.engine import Engine
from core.logging_config import setup_logging
from game import Pong
from view.gl_surface import GLSurface
from config import HEIGHT, LOG_FILE, LOG_LEVEL, WIDTH


def create_scene(width: int, height: int) -> Pong:
    surface = GLSurface(width, height)
    surface.setup()
    scene = Pong(surface)
    scene.start()
    return scene


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play Pong against the computer")
    ap.add_argument("--width", type=int, default=WIDTH, help="Stage width in pixels")
    ap.add_argument("--height", type=int, default=HEIGHT, help="Stage height in pixels")
    ap.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    ap.add_argument("--log-file", default=LOG_FILE, help="Optional log file path")
    return ap.parse_args(argv)


def main(argv=None):  # small wrapper for clarity / debuggers
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    Engine(create_scene, width=args.width, height=args.height).run()


if __name__ == "__main__":
    main()
