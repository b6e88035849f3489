"""
Keyboard input source.

Tracks held keys from pygame KEYDOWN/KEYUP events. The host loop feeds
every event it pulls from the pygame queue into handle_event().
"""

from typing import Dict

import pygame

from bricks.input.keys import ARROW_LEFT, ARROW_RIGHT, SPACE
from bricks.input.sources.base import InputSource

PYGAME_KEY_CODES: Dict[int, str] = {
    pygame.K_SPACE: SPACE,
    pygame.K_LEFT: ARROW_LEFT,
    pygame.K_RIGHT: ARROW_RIGHT,
}


class KeyboardInputSource(InputSource):
    """Keyboard state built from pygame key events.

    Examples:
        >>> source = KeyboardInputSource()
        >>> source.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        >>> source.is_key_down('Space')
        True
    """

    def __init__(self):
        self._keys: Dict[str, bool] = {}

    def handle_event(self, event: pygame.event.Event) -> None:
        """Record a key press or release; other events are ignored."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return

        code = PYGAME_KEY_CODES.get(event.key)
        if code is None:
            return

        self._keys[code] = event.type == pygame.KEYDOWN

    def is_key_down(self, code: str) -> bool:
        return self._keys.get(code, False)

    def update(self, dt: float) -> None:
        # Key state is event-driven; nothing to advance.
        pass

    def clear(self) -> None:
        self._keys.clear()
