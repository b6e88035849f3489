"""Brick entity.

Bricks are stationary. A Regular brick dies on its first hit; a
DoubleHit brick is first downgraded to Regular and stunned, so the ball
that downgraded it cannot also destroy it before moving away.
"""

import random
from typing import Optional, Tuple

import pygame

from bricks.config import BRICK_POINTS, BRICK_SIZE
from bricks.models import BrickType, Rectangle, Size, SpriteState

from .bonus import Bonus
from .sprite import Sprite

Color = Tuple[int, int, int]

DOUBLE_HIT_BORDER = 4


def _random_color(rng) -> Color:
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


class Brick(Sprite):
    """A brick, optionally carrying a bonus."""

    def __init__(
        self,
        brick_type: BrickType,
        x: float,
        y: float,
        bonus: Optional[Bonus] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize brick.

        Args:
            brick_type: Regular or DoubleHit
            x: Left edge X position
            y: Top edge Y position
            bonus: Optional bonus released when the brick dies
            rng: Random source for the brick colours
        """
        rng = rng if rng is not None else random
        super().__init__(x, y, 0.0)
        self._type = brick_type
        self._size = Size.of(BRICK_SIZE)
        self._bonus = bonus
        self._color = _random_color(rng)
        self._border_color: Optional[Color] = (
            _random_color(rng) if brick_type == BrickType.DOUBLE_HIT else None
        )

    @property
    def type(self) -> BrickType:
        return self._type

    @type.setter
    def type(self, value: BrickType) -> None:
        self._type = value

    @property
    def bonus(self) -> Optional[Bonus]:
        return self._bonus

    @bonus.setter
    def bonus(self, value: Optional[Bonus]) -> None:
        self._bonus = value

    @property
    def color(self) -> Color:
        return self._color

    @property
    def border_color(self) -> Optional[Color]:
        """Outline colour, DoubleHit bricks only."""
        return self._border_color

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

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (
            self._location.x,
            self._location.y,
            self._location.x + self._size.width,
            self._location.y + self._size.height,
        )

    def hit(self) -> int:
        """Apply a ball hit.

        Returns:
            Points awarded: BRICK_POINTS when destroyed, 0 on downgrade
        """
        if self._state == SpriteState.DEAD:
            return 0

        if self._type == BrickType.DOUBLE_HIT:
            self._type = BrickType.REGULAR
            self._state = SpriteState.STUNNED
            return 0

        self._state = SpriteState.DEAD
        return BRICK_POINTS

    def release_bonus(self) -> Optional[Bonus]:
        """Set a not-yet-released bonus falling.

        Returns:
            The released bonus, or None if there is none to release
        """
        if self._bonus is None or self._bonus.state != SpriteState.DEAD:
            return None
        self._bonus.release()
        return self._bonus

    def update(self, game_time: float, dt: float) -> None:
        # Bricks don't move or animate
        pass

    def draw(self, surface: pygame.Surface) -> None:
        if self._state == SpriteState.DEAD:
            return

        rect = self.rect.as_tuple()
        pygame.draw.rect(surface, self._color, rect)

        if self._type == BrickType.DOUBLE_HIT and self._border_color is not None:
            pygame.draw.rect(surface, self._border_color, rect, DOUBLE_HIT_BORDER)
