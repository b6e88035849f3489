"""Base class for every playable entity.

A sprite owns its location, rotation, velocity, speed and lifecycle
state. Subclasses advance themselves in update() and render themselves
in draw(); cross-entity collision is resolved by the game session.
"""

from abc import ABC, abstractmethod

import pygame

from bricks.models import SpriteState, Vector2D


class Sprite(ABC):
    """Abstract movable entity.

    Subclasses must implement:
        - update(game_time, dt): Advance internal state and position
        - draw(surface): Render onto a pygame surface
    """

    def __init__(self, x: float, y: float, speed: float):
        """Initialize sprite.

        Args:
            x: Initial X position
            y: Initial Y position
            speed: Scalar speed in pixels/second
        """
        self._location = Vector2D(x=x, y=y)
        self._rotation = 0.0
        self._velocity = Vector2D()
        self._speed = speed
        self._state = SpriteState.ALIVE

    @property
    def location(self) -> Vector2D:
        return self._location

    @location.setter
    def location(self, value: Vector2D) -> None:
        self._location = value

    @property
    def rotation(self) -> float:
        """Heading in radians."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = value

    @property
    def velocity(self) -> Vector2D:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vector2D) -> None:
        self._velocity = value

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._speed = value

    @property
    def state(self) -> SpriteState:
        return self._state

    @state.setter
    def state(self, value: SpriteState) -> None:
        self._state = value

    @property
    def is_alive(self) -> bool:
        return self._state == SpriteState.ALIVE

    @property
    def is_dead(self) -> bool:
        return self._state == SpriteState.DEAD

    @abstractmethod
    def update(self, game_time: float, dt: float) -> None:
        """Advance the sprite.

        Args:
            game_time: Seconds since the host loop started
            dt: Elapsed seconds since the previous frame
        """
        pass

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the sprite.

        Args:
            surface: Pygame surface to draw on
        """
        pass
