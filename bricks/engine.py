"""Fixed-rate pygame host loop.

GameEngine pumps the pygame event queue into the keyboard source, then
calls the session's update(game_time, dt) and draw(surface) once per
frame before flipping the display.
"""

from typing import Iterable, Optional

import pygame

from bricks.config import TARGET_FPS
from bricks.game_mode import BricksGame
from bricks.input.sources.keyboard import KeyboardInputSource
from bricks.logging import get_logger

log = get_logger('engine')


class GameEngine:
    """Runs a BricksGame at a capped frame rate."""

    def __init__(
        self,
        game: BricksGame,
        keyboard: KeyboardInputSource,
        screen: pygame.Surface,
        fps: int = TARGET_FPS,
    ):
        """Initialize the host loop.

        Args:
            game: Session to drive
            keyboard: Source receiving pygame key events
            screen: Display surface
            fps: Frame rate cap
        """
        self._game = game
        self._keyboard = keyboard
        self._screen = screen
        self._fps = fps
        self._game_time = 0.0
        self._running = False

    @property
    def game_time(self) -> float:
        """Seconds of play since the loop started."""
        return self._game_time

    @property
    def is_running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Forward key events to the keyboard; stop on quit or Escape."""
        for event in events:
            if event.type == pygame.QUIT:
                self.stop()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.stop()
            elif event.type == pygame.WINDOWFOCUSLOST:
                self._keyboard.clear()
            else:
                self._keyboard.handle_event(event)

    def step(self, dt: float, surface: Optional[pygame.Surface] = None) -> None:
        """Advance one frame of dt seconds and draw it."""
        self._game_time += dt
        self._game.update(self._game_time, dt)
        self._game.draw(surface if surface is not None else self._screen)

    def run(self) -> None:
        """Loop until the window is closed or Escape is pressed."""
        clock = pygame.time.Clock()
        self._running = True
        log.info("Host loop started at %d fps", self._fps)

        while self._running:
            dt = clock.tick(self._fps) / 1000.0

            self.handle_events(pygame.event.get())
            if not self._running:
                break

            self.step(dt)
            pygame.display.flip()

        log.info("Host loop stopped after %.1f s", self._game_time)
