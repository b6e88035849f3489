"""Paddle entity driven by left/right input.

The paddle is a flat body with a triangular wedge on each end. The body
sends the ball off at an angle that depends on where it lands; the
wedges send it off at fixed steep angles. The SuperSize bonus plays a
two-phase resize pulse: shrink back to normal width, then grow to super
width.
"""

import math
from typing import Tuple

import pygame

from bricks.config import (
    BOARD_HEIGHT, BOARD_WIDTH, PADDLE_BOTTOM_OFFSET, PADDLE_COLOR,
    PADDLE_NORMAL_SIZE, PADDLE_SPEED, PADDLE_SUPER_SIZE, PADDLE_WEDGE_COLOR,
)
from bricks.models import PaddleResize, Rectangle, Size, Vector2D

from .ball import Ball
from .sprite import Sprite

# 45 radians, not degrees
WEDGE_RADIUS_FACTOR = math.sin(45)

LEFT_WEDGE_ANGLE = math.pi * 9 / 5
RIGHT_WEDGE_ANGLE = math.pi * 6 / 5

Triangle = Tuple[Vector2D, Vector2D, Vector2D]


class Paddle(Sprite):
    """Player paddle with resize animation and wedge collision regions."""

    def __init__(
        self,
        board_width: float = BOARD_WIDTH,
        board_height: float = BOARD_HEIGHT,
        speed: float = PADDLE_SPEED,
    ):
        """Initialize paddle at its rest position.

        Args:
            board_width: Board width in pixels, used for clamping
            board_height: Board height in pixels
            speed: Horizontal speed in pixels/second (also drives resizing)
        """
        self._board_width = board_width
        self._board_height = board_height
        self._normal_size = Size.of(PADDLE_NORMAL_SIZE)
        self._super_size = Size.of(PADDLE_SUPER_SIZE)
        origin = self.orig_location
        super().__init__(origin.x, origin.y, speed)
        self._size = self._normal_size
        self._resize_state = PaddleResize.NONE
        self._left_wedge: Triangle = (Vector2D(), Vector2D(), Vector2D())
        self._right_wedge: Triangle = (Vector2D(), Vector2D(), Vector2D())
        self._build_wedges()

    @property
    def orig_location(self) -> Vector2D:
        """Rest position: horizontally centred, near the board bottom."""
        return Vector2D(
            x=(self._board_width - self._normal_size.width) / 2,
            y=self._board_height - PADDLE_BOTTOM_OFFSET,
        )

    @property
    def size(self) -> Size:
        return self._size

    @size.setter
    def size(self, value: Size) -> None:
        self._size = value
        self._build_wedges()

    @property
    def width(self) -> float:
        return self._size.width

    @property
    def height(self) -> float:
        return self._size.height

    @property
    def normal_width(self) -> float:
        return self._normal_size.width

    @property
    def super_width(self) -> float:
        return self._super_size.width

    @property
    def resize_state(self) -> PaddleResize:
        return self._resize_state

    @resize_state.setter
    def resize_state(self, value: PaddleResize) -> None:
        self._resize_state = value

    @property
    def left_wedge(self) -> Triangle:
        return self._left_wedge

    @property
    def right_wedge(self) -> Triangle:
        return self._right_wedge

    @property
    def rect(self) -> Rectangle:
        """Main body rectangle (wedges excluded)."""
        return Rectangle(
            x=self._location.x,
            y=self._location.y,
            width=self._size.width,
            height=self._size.height,
        )

    @Sprite.location.setter
    def location(self, value: Vector2D) -> None:
        self._location = value
        self._build_wedges()

    def trigger_super_size(self) -> None:
        """Start the shrink-then-grow pulse ending at super width."""
        self._resize_state = PaddleResize.GROW

    def update(self, game_time: float, dt: float) -> None:
        self._advance_resize(dt)

        self._location = self._location.with_x(self._location.x + self._velocity.x * dt)
        self._fix_location()
        self._build_wedges()

    def _advance_resize(self, dt: float) -> None:
        """Step the resize animation.

        Width moves by (speed / 2) * dt per frame and the paddle shifts by
        half of that so it resizes around its centre. A state change
        happens on the frame after the target width was reached.
        """
        width = self._size.width
        width_change = (self._speed / 2) * dt

        if self._resize_state == PaddleResize.REGROW:
            if width == self._super_size.width:
                self._resize_state = PaddleResize.NONE
                return
            new_width = min(width + width_change, self._super_size.width)
            self._location = self._location.with_x(
                self._location.x - (new_width - width) / 2
            )
            self._size = self._size.with_width(new_width)

        elif self._resize_state in (PaddleResize.SHRINK, PaddleResize.GROW):
            if width == self._normal_size.width:
                self._resize_state = (
                    PaddleResize.NONE
                    if self._resize_state == PaddleResize.SHRINK
                    else PaddleResize.REGROW
                )
                return
            new_width = max(width - width_change, self._normal_size.width)
            self._location = self._location.with_x(
                self._location.x + (width - new_width) / 2
            )
            self._size = self._size.with_width(new_width)

    def _fix_location(self) -> None:
        """Keep body plus both wedges inside the board."""
        x = self._location.x
        width = self._size.width
        height = self._size.height

        if x + width + height >= self._board_width:
            x = self._board_width - width - height
        elif x - height <= 0:
            x = height
        self._location = self._location.with_x(x)

    def _build_wedges(self) -> None:
        x, y = self._location.x, self._location.y
        width, height = self._size.width, self._size.height

        self._left_wedge = (
            Vector2D(x=x, y=y),
            Vector2D(x=x, y=y + height),
            Vector2D(x=x - height, y=y + height),
        )
        self._right_wedge = (
            Vector2D(x=x + width, y=y),
            Vector2D(x=x + width, y=y + height),
            Vector2D(x=x + width + height, y=y + height),
        )

    # -------------------------------------------------------------------------
    # Collision queries
    # -------------------------------------------------------------------------

    def _within_depth(self, ball: Ball) -> bool:
        """Ball moving down and not already fully below the paddle."""
        if not ball.is_moving_down:
            return False
        return ball.location.y - ball.radius <= self._location.y + self._size.height

    def left_wedge_surface_y(self, ball: Ball) -> float:
        """Y at which the ball centre sits on the left wedge slope."""
        return (self._location.y
                + (self._location.x - ball.location.x)
                - WEDGE_RADIUS_FACTOR * ball.radius)

    def right_wedge_surface_y(self, ball: Ball) -> float:
        """Y at which the ball centre sits on the right wedge slope."""
        return (self._location.y
                + (ball.location.x - self._location.x - self._size.width)
                - WEDGE_RADIUS_FACTOR * ball.radius)

    def bounces_left_wedge(self, ball: Ball) -> bool:
        if not self._within_depth(ball):
            return False
        bx, by = ball.location.x, ball.location.y
        return (self._location.x - self._size.height <= bx < self._location.x
                and by >= self.left_wedge_surface_y(ball))

    def bounces_right_wedge(self, ball: Ball) -> bool:
        if not self._within_depth(ball):
            return False
        bx, by = ball.location.x, ball.location.y
        right = self._location.x + self._size.width
        return (right < bx <= right + self._size.height
                and by >= self.right_wedge_surface_y(ball))

    def bounces_main_body(self, ball: Ball) -> bool:
        if not self._within_depth(ball):
            return False
        bx, by = ball.location.x, ball.location.y
        return (self._location.x <= bx <= self._location.x + self._size.width
                and by + ball.radius >= self._location.y)

    def compute_bounce_angle(self, ball: Ball) -> float:
        """Map the hit point across the body to an outgoing angle.

        t = 0 (left end) gives 1.8*pi (up and to the right), t = 0.5 gives
        1.5*pi (straight up), t = 1 (right end) gives 1.2*pi (up and to the
        left).
        """
        t = (ball.location.x - self._location.x) / self._size.width
        t = max(0.0, min(1.0, t))
        return math.pi * (1.8 - 0.6 * t)

    def reset(self) -> None:
        """Back to rest position, normal width, no motion."""
        self._location = self.orig_location
        self._size = self._normal_size
        self._velocity = Vector2D()
        self._resize_state = PaddleResize.NONE
        self._build_wedges()

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.polygon(surface, PADDLE_WEDGE_COLOR, [p.as_tuple() for p in self._left_wedge])
        pygame.draw.rect(surface, PADDLE_COLOR, self.rect.as_tuple())
        pygame.draw.polygon(surface, PADDLE_WEDGE_COLOR, [p.as_tuple() for p in self._right_wedge])
