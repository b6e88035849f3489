"""Ball entity with rotation-driven straight-line motion.

The ball travels along its rotation at constant speed. It remembers the
last location where it did not overlap any brick, which the session uses
to work out which face of a brick was struck. That location starts at
the board centre, wherever the ball itself is placed.
"""

import math
from typing import Optional, Tuple

import pygame

from bricks.config import (
    BALL_COLOR, BALL_RADIUS, BALL_SPEED, BOARD_HEIGHT, BOARD_WIDTH,
)
from bricks.models import Rectangle, SpriteState, Vector2D

from .sprite import Sprite


class Ball(Sprite):
    """Ball moving along its rotation at a fixed speed."""

    ORIG_LOCATION = Vector2D(x=BOARD_WIDTH / 2, y=BOARD_HEIGHT / 2)

    def __init__(
        self,
        location: Optional[Vector2D] = None,
        speed: float = BALL_SPEED,
        radius: float = BALL_RADIUS,
    ):
        """Initialize ball.

        Args:
            location: Centre position, board centre by default
            speed: Travel speed in pixels/second
            radius: Ball radius in pixels
        """
        start = location if location is not None else self.ORIG_LOCATION
        super().__init__(start.x, start.y, speed)
        self._radius = radius
        self._last_safe_location = self.ORIG_LOCATION.clone()

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def velocity(self) -> Vector2D:
        """Velocity derived from rotation and speed."""
        return Vector2D.from_angle(self._rotation, self._speed)

    @velocity.setter
    def velocity(self, value: Vector2D) -> None:
        raise AttributeError("Ball velocity is derived from rotation and speed")

    @property
    def last_safe_location(self) -> Vector2D:
        """Most recent centre position that overlapped no brick."""
        return self._last_safe_location

    @last_safe_location.setter
    def last_safe_location(self, value: Vector2D) -> None:
        self._last_safe_location = value

    @property
    def is_moving_down(self) -> bool:
        return self.velocity.y > 0

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get the square bounding box (left, top, right, bottom)."""
        return (
            self._location.x - self._radius,
            self._location.y - self._radius,
            self._location.x + self._radius,
            self._location.y + self._radius,
        )

    @property
    def rect(self) -> Rectangle:
        left, top, _, _ = self.get_bounds()
        return Rectangle(x=left, y=top, width=self._radius * 2, height=self._radius * 2)

    def reset(self, location: Vector2D, rotation: float, state: SpriteState = SpriteState.ALIVE) -> None:
        """Put the ball back at location heading along rotation.

        The last-safe location is kept; the next frame clear of bricks
        refreshes it.
        """
        self._location = location
        self._rotation = rotation
        self._state = state

    def update(self, game_time: float, dt: float) -> None:
        if self._state == SpriteState.DEAD:
            return

        self._location = Vector2D(
            x=self._location.x + math.cos(self._rotation) * self._speed * dt,
            y=self._location.y + math.sin(self._rotation) * self._speed * dt,
        )

    def draw(self, surface: pygame.Surface) -> None:
        if self._state == SpriteState.DEAD:
            return
        pygame.draw.circle(surface, BALL_COLOR, self._location.as_tuple(), self._radius)
