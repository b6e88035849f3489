"""Heads-up display elements: lives, score and the message overlay."""

from typing import Optional

import pygame

from bricks.config import (
    BOARD_HEIGHT, BOARD_WIDTH, HUD_COLOR, LIFE_COLOR, LIFE_SIZE, OVERLAY_COLOR,
)
from bricks.models import Size, SpriteState

LIFE_Y = 10.0


class Life:
    """One extra-life indicator slot."""

    def __init__(self, x: float):
        self._x = x
        self._size = Size.of(LIFE_SIZE)
        self._state = SpriteState.ALIVE

    @property
    def x(self) -> float:
        return self._x

    @property
    def state(self) -> SpriteState:
        return self._state

    @state.setter
    def state(self, value: SpriteState) -> None:
        self._state = value

    @property
    def is_alive(self) -> bool:
        return self._state == SpriteState.ALIVE

    def draw(self, surface: pygame.Surface) -> None:
        if self._state == SpriteState.DEAD:
            return
        pygame.draw.rect(surface, LIFE_COLOR, (self._x, LIFE_Y, self._size.width, self._size.height))


class Score:
    """Integer point total."""

    FONT_SIZE = 24
    POSITION = (240, 14)

    def __init__(self, points: int = 0):
        self._points = points
        self._font: Optional[pygame.font.Font] = None

    @property
    def points(self) -> int:
        return self._points

    @points.setter
    def points(self, value: int) -> None:
        self._points = value

    def add_points(self, points: int) -> None:
        self._points += points

    def _ensure_font(self) -> pygame.font.Font:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, self.FONT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        text = self._ensure_font().render(f"Score: {self._points}", True, HUD_COLOR)
        surface.blit(text, self.POSITION)


class Message:
    """Centered multi-line text over a translucent board overlay."""

    FONT_SIZE = 30
    LINE_HEIGHT = 30

    def __init__(self, board_width: float = BOARD_WIDTH, board_height: float = BOARD_HEIGHT):
        self._board_width = board_width
        self._board_height = board_height
        self._text = ""
        self._visible = False
        self._font: Optional[pygame.font.Font] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_shown(self) -> bool:
        return self._visible

    def show(self, text: str) -> None:
        self._text = text
        self._visible = True

    def hide(self) -> None:
        self._visible = False

    def _ensure_font(self) -> pygame.font.Font:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, self.FONT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        if not self._visible:
            return

        overlay = pygame.Surface((int(self._board_width), int(self._board_height)), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (0, 0))

        font = self._ensure_font()
        lines = self._text.split('\n')
        start_y = (self._board_height - len(lines) * self.LINE_HEIGHT) / 2

        for i, line in enumerate(lines):
            if not line:
                continue
            rendered = font.render(line, True, HUD_COLOR)
            rect = rendered.get_rect(
                center=(self._board_width / 2, start_y + i * self.LINE_HEIGHT + self.LINE_HEIGHT / 2)
            )
            surface.blit(rendered, rect)
