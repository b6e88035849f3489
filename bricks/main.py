#!/usr/bin/env python3
"""Bricks - Standalone Entry Point.

Usage:
    python -m bricks
    python -m bricks --level 3
    python -m bricks --lives 5 --log-level DEBUG
    python -m bricks --config bricks.yaml
"""

import argparse
import sys
from pathlib import Path

import pygame

from bricks.engine import GameEngine
from bricks.game_mode import BricksGame
from bricks.input import InputManager, KeyboardInputSource
from bricks.logging import configure_logging, get_logger
from bricks.settings import GameSettings, load_settings

log = get_logger('main')


def build_settings(args: argparse.Namespace) -> GameSettings:
    """Merge the optional YAML settings file with command-line overrides."""
    settings = load_settings(args.config) if args.config else GameSettings()

    overrides = {}
    if args.level is not None:
        overrides['start_level'] = args.level
    if args.lives is not None:
        overrides['lives'] = args.lives

    if overrides:
        settings = GameSettings(**{**settings.model_dump(), **overrides})
    return settings


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bricks - Standalone")
    parser.add_argument('--level', type=int, default=None, help='Starting level')
    parser.add_argument('--lives', type=int, default=None, help='Starting lives')
    parser.add_argument('--config', type=Path, default=None,
                        help='YAML settings file')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Default log level')
    return parser


def main(argv=None):
    """Run Bricks standalone."""
    args = create_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        settings = build_settings(args)
    except (FileNotFoundError, ValueError) as e:
        log.error("%s", e)
        return 1

    pygame.init()
    pygame.font.init()

    screen = pygame.display.set_mode((int(settings.board_width), int(settings.board_height)))
    pygame.display.set_caption("Bricks")

    keyboard = KeyboardInputSource()
    game = BricksGame(InputManager(keyboard), settings=settings)
    engine = GameEngine(game, keyboard, screen)

    print("\n" + "=" * 50)
    print("BRICKS")
    print("=" * 50)
    print("Controls:")
    print("  - LEFT / RIGHT to move the paddle")
    print("  - SPACE to start or continue")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    try:
        engine.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
