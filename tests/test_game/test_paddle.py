"""
Tests for the Paddle entity.

Tests cover:
- Rest position and wedge geometry
- Steering and board clamping
- The SuperSize resize pulse
- Wedge and body hit predicates and bounce angles
"""

import math

import pytest

from bricks.game.entities import (
    Ball, Paddle, LEFT_WEDGE_ANGLE, RIGHT_WEDGE_ANGLE, WEDGE_RADIUS_FACTOR,
)
from bricks.game.physics import check_paddle_collision
from bricks.models import PaddleResize, Size, Vector2D


def falling_ball(x: float, y: float) -> Ball:
    ball = Ball(Vector2D(x=x, y=y))
    ball.rotation = math.pi / 2
    return ball


class TestPaddleGeometry:
    """Test position, size and wedges."""

    def test_rest_position(self):
        """Paddle rests centred, 80 px above the bottom."""
        paddle = Paddle()
        assert paddle.location == Vector2D(x=162.0, y=432.0)
        assert paddle.width == 60.0
        assert paddle.height == 20.0

    def test_wedges(self):
        """Wedges are right triangles on both ends of the body."""
        paddle = Paddle()
        assert paddle.left_wedge == (
            Vector2D(x=162.0, y=432.0),
            Vector2D(x=162.0, y=452.0),
            Vector2D(x=142.0, y=452.0),
        )
        assert paddle.right_wedge == (
            Vector2D(x=222.0, y=432.0),
            Vector2D(x=222.0, y=452.0),
            Vector2D(x=242.0, y=452.0),
        )

    def test_wedges_follow_location(self):
        """Moving the paddle rebuilds its wedges."""
        paddle = Paddle()
        paddle.location = Vector2D(x=100.0, y=432.0)
        assert paddle.left_wedge[0] == Vector2D(x=100.0, y=432.0)
        assert paddle.right_wedge[2] == Vector2D(x=180.0, y=452.0)

    def test_reset(self):
        """Reset restores position, width and resize state."""
        paddle = Paddle()
        paddle.location = Vector2D(x=50.0, y=432.0)
        paddle.size = Size(width=90.0, height=20.0)
        paddle.resize_state = PaddleResize.SHRINK
        paddle.velocity = Vector2D(x=350.0, y=0.0)

        paddle.reset()

        assert paddle.location == Vector2D(x=162.0, y=432.0)
        assert paddle.width == 60.0
        assert paddle.resize_state == PaddleResize.NONE
        assert paddle.velocity == Vector2D()


class TestPaddleMovement:
    """Test steering and clamping."""

    def test_moves_with_velocity(self):
        """Horizontal velocity is integrated."""
        paddle = Paddle()
        paddle.velocity = Vector2D(x=100.0, y=0.0)
        paddle.update(0.0, 0.5)
        assert paddle.location.x == pytest.approx(212.0)

    def test_clamped_left(self):
        """The left wedge never leaves the board."""
        paddle = Paddle()
        paddle.velocity = Vector2D(x=-350.0, y=0.0)
        paddle.update(0.0, 1.0)
        assert paddle.location.x == pytest.approx(20.0)

    def test_clamped_right(self):
        """The right wedge never leaves the board."""
        paddle = Paddle()
        paddle.velocity = Vector2D(x=350.0, y=0.0)
        paddle.update(0.0, 1.0)
        assert paddle.location.x == pytest.approx(384.0 - 60.0 - 20.0)


class TestPaddleResize:
    """Test the SuperSize pulse."""

    def test_grow_from_normal(self):
        """Grow at normal width switches to ReGrow, then widens to super."""
        paddle = Paddle()
        paddle.trigger_super_size()
        assert paddle.resize_state == PaddleResize.GROW

        paddle.update(0.0, 0.1)
        assert paddle.resize_state == PaddleResize.REGROW
        assert paddle.width == 60.0

        paddle.update(0.1, 0.1)
        assert paddle.width == pytest.approx(77.5)
        assert paddle.location.x == pytest.approx(153.25)

        paddle.update(0.2, 0.1)
        assert paddle.width == pytest.approx(90.0)
        assert paddle.location.x == pytest.approx(147.0)

        paddle.update(0.3, 0.1)
        assert paddle.resize_state == PaddleResize.NONE
        assert paddle.width == pytest.approx(90.0)

    def test_grow_while_super_shrinks_first(self):
        """Grow on a super paddle shrinks to normal before regrowing."""
        paddle = Paddle()
        paddle.size = Size(width=90.0, height=20.0)
        paddle.trigger_super_size()

        paddle.update(0.0, 0.1)
        assert paddle.width == pytest.approx(72.5)
        paddle.update(0.1, 0.1)
        assert paddle.width == pytest.approx(60.0)
        paddle.update(0.2, 0.1)
        assert paddle.resize_state == PaddleResize.REGROW

    def test_shrink_ends_at_normal(self):
        """Shrink stops at normal width and then goes idle."""
        paddle = Paddle()
        paddle.size = Size(width=90.0, height=20.0)
        paddle.resize_state = PaddleResize.SHRINK

        for _ in range(5):
            paddle.update(0.0, 0.1)

        assert paddle.width == pytest.approx(60.0)
        assert paddle.resize_state == PaddleResize.NONE

    def test_width_stays_in_range(self):
        """Width never leaves [normal, super] during a pulse."""
        paddle = Paddle()
        paddle.trigger_super_size()
        for _ in range(50):
            paddle.update(0.0, 0.05)
            assert 60.0 <= paddle.width <= 90.0


class TestPaddleBounce:
    """Test ball contact with wedges and body."""

    def test_left_wedge(self):
        """Left wedge sends the ball up and to the right."""
        paddle = Paddle()
        ball = falling_ball(152.0, 440.0)

        assert check_paddle_collision(ball, paddle) == "left_wedge"
        assert ball.rotation == pytest.approx(LEFT_WEDGE_ANGLE)
        assert ball.location.y == pytest.approx(432.0 + 10.0 - WEDGE_RADIUS_FACTOR * 4.5)

    def test_right_wedge(self):
        """Right wedge sends the ball up and to the left."""
        paddle = Paddle()
        ball = falling_ball(232.0, 440.0)

        assert check_paddle_collision(ball, paddle) == "right_wedge"
        assert ball.rotation == pytest.approx(RIGHT_WEDGE_ANGLE)
        assert ball.location.y == pytest.approx(432.0 + 10.0 - WEDGE_RADIUS_FACTOR * 4.5)

    def test_wedge_factor_uses_radians(self):
        """The wedge offset factor is sin(45 rad)."""
        assert WEDGE_RADIUS_FACTOR == pytest.approx(0.8509035245)

    def test_main_body(self):
        """Body contact puts the ball on top of the paddle."""
        paddle = Paddle()
        ball = falling_ball(192.0, 428.0)

        assert check_paddle_collision(ball, paddle) == "body"
        assert ball.location.y == pytest.approx(432.0 - 4.5)
        assert ball.rotation == pytest.approx(1.5 * math.pi)

    def test_rising_ball_ignored(self):
        """A ball moving up passes through."""
        paddle = Paddle()
        ball = Ball(Vector2D(x=192.0, y=440.0))
        ball.rotation = -math.pi / 2

        assert check_paddle_collision(ball, paddle) is None

    def test_ball_below_paddle_ignored(self):
        """A ball already under the paddle is not bounced back up."""
        paddle = Paddle()
        ball = falling_ball(192.0, 460.0)

        assert check_paddle_collision(ball, paddle) is None

    @pytest.mark.parametrize("x, expected", [
        (162.0, 1.8 * math.pi),
        (192.0, 1.5 * math.pi),
        (222.0, 1.2 * math.pi),
        (100.0, 1.8 * math.pi),
    ])
    def test_bounce_angle(self, x, expected):
        """Bounce angle spans 1.8*pi (left end) to 1.2*pi (right end)."""
        paddle = Paddle()
        ball = falling_ball(x, 428.0)
        assert paddle.compute_bounce_angle(ball) == pytest.approx(expected)
