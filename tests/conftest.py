"""Shared pytest fixtures for the Bricks tests."""

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import random
from typing import Set

import pytest

from bricks.game.level_loader import LevelLoader
from bricks.game_mode import BricksGame
from bricks.input import InputManager
from bricks.input.sources.base import InputSource
from bricks.logging import disable_logging

EMPTY_ROW = "_" * 16

# One level, two Regular bricks at (0, 48) and (48, 48)
TWO_BRICK_CATALOG = "\n".join(["1", "R_R_" + "_" * 12] + [EMPTY_ROW] * 7)


class ScriptedKeys(InputSource):
    """Input source whose held keys are set directly by the test."""

    def __init__(self):
        self.held: Set[str] = set()
        self.update_count = 0

    def press(self, code: str) -> None:
        self.held.add(code)

    def release(self, code: str) -> None:
        self.held.discard(code)

    def is_key_down(self, code: str) -> bool:
        return code in self.held

    def update(self, dt: float) -> None:
        self.update_count += 1

    def clear(self) -> None:
        self.held.clear()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep test output free of game log lines."""
    disable_logging()
    yield
    disable_logging()


@pytest.fixture
def key_source():
    """Scripted key source."""
    return ScriptedKeys()


@pytest.fixture
def input_manager(key_source):
    """InputManager wired to the scripted key source."""
    return InputManager(key_source)


@pytest.fixture
def two_brick_loader():
    """Loader over a one-level catalog holding two Regular bricks."""
    return LevelLoader.from_text(TWO_BRICK_CATALOG)


@pytest.fixture
def game(input_manager, two_brick_loader):
    """Session on the two-brick level, waiting in Intro."""
    return BricksGame(input_manager, level_loader=two_brick_loader, rng=random.Random(7))


@pytest.fixture
def playing_game(game, key_source):
    """Session already moved from Intro to Play with Space released."""
    key_source.press('Space')
    game.update(0.0, 0.0)
    key_source.release('Space')
    return game
