"""Bonus pickup entity.

A bonus sits inert (Dead) inside its brick until the brick is destroyed,
then falls straight down. Catching it takes two consecutive overlap
frames with the paddle: the first arms it (Stunned), the second consumes
it (Dead).
"""

import pygame

from bricks.config import BONUS_COLORS, BONUS_SIZE, BONUS_SPEED
from bricks.models import BonusType, Rectangle, Size, SpriteState

from .sprite import Sprite


class Bonus(Sprite):
    """Falling pickup with a type-specific effect."""

    def __init__(self, bonus_type: BonusType, x: float, y: float, speed: float = BONUS_SPEED):
        """Initialize an inert bonus.

        Args:
            bonus_type: Effect applied when consumed
            x: Left edge X position
            y: Top edge Y position
            speed: Fall speed in pixels/second
        """
        super().__init__(x, y, speed)
        self._type = bonus_type
        self._size = Size.of(BONUS_SIZE)
        self._state = SpriteState.DEAD
        self._rectangle_color, self._triangle_color = BONUS_COLORS.get(
            bonus_type.value, ((255, 255, 255), (128, 128, 128))
        )

    @property
    def type(self) -> BonusType:
        return self._type

    @property
    def size(self) -> Size:
        return self._size

    @property
    def rect(self) -> Rectangle:
        return Rectangle(
            x=self._location.x,
            y=self._location.y,
            width=self._size.width,
            height=self._size.height,
        )

    @property
    def is_falling(self) -> bool:
        """Alive or armed; still moving and collectable."""
        return self._state in (SpriteState.ALIVE, SpriteState.STUNNED)

    def release(self) -> None:
        """Start falling once the owning brick is destroyed."""
        if self._state == SpriteState.DEAD:
            self._state = SpriteState.ALIVE

    def update(self, game_time: float, dt: float) -> None:
        if not self.is_falling:
            return
        self._location = self._location.with_y(self._location.y + self._speed * dt)

    def draw(self, surface: pygame.Surface) -> None:
        if self._state == SpriteState.DEAD:
            return

        x, y = self._location.x, self._location.y
        width, height = self._size.width, self._size.height
        pygame.draw.rect(surface, self._rectangle_color, (x, y, width, height))
        pygame.draw.polygon(
            surface,
            self._triangle_color,
            [(x, y), (x, y + height), (x + width, y + height)],
        )
