#!/usr/bin/env python3
"""
Runs the widget in its own window: python -m flappy_widget --theme dark
"""

import argparse
import logging

from .constants import INTENDED_HEIGHT, INTENDED_WIDTH, THEMES
from .host import run_host
from .widget import render


def main(argv=None):
    parser = argparse.ArgumentParser(description="Flappy Bird dashboard widget")
    parser.add_argument("--theme", choices=THEMES, default="light")
    parser.add_argument("--width", type=int, default=INTENDED_WIDTH)
    parser.add_argument("--height", type=int, default=INTENDED_HEIGHT)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run_host(render, theme=args.theme, width=args.width, height=args.height)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
