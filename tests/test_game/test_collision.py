"""
Tests for collision detection and resolution.

Tests cover:
- Wall bounces and ball loss
- Brick overlap, reflection and the per-ball fold
- Stunned brick handling
- Bonus / paddle overlap
"""

import math

import pytest

from bricks.game.entities import Ball, Bonus, Brick, Paddle
from bricks.game.physics import (
    check_bonus_collision,
    check_brick_collision,
    check_wall_collision,
    get_reflected_rotation,
    resolve_brick_collisions,
)
from bricks.models import BonusType, BrickType, SpriteState, Vector2D


def make_ball(x: float, y: float, rotation: float, safe=None) -> Ball:
    ball = Ball(Vector2D(x=x, y=y))
    ball.rotation = rotation
    if safe is not None:
        ball.last_safe_location = Vector2D(x=safe[0], y=safe[1])
    return ball


class TestWallCollision:
    """Test ball vs board edges."""

    def test_right_wall(self):
        """Right wall pushes the ball back and mirrors horizontally."""
        ball = make_ball(382.0, 100.0, 0.0)
        assert not check_wall_collision(ball, 384, 512)
        assert ball.location.x == pytest.approx(379.5)
        assert ball.rotation == pytest.approx(math.pi)

    def test_left_wall(self):
        """Left wall pushes the ball back and mirrors horizontally."""
        ball = make_ball(2.0, 100.0, math.pi)
        assert not check_wall_collision(ball, 384, 512)
        assert ball.location.x == pytest.approx(4.5)
        assert ball.rotation == pytest.approx(0.0)

    def test_top_wall(self):
        """Top wall mirrors vertically."""
        ball = make_ball(100.0, 2.0, -math.pi / 2)
        assert not check_wall_collision(ball, 384, 512)
        assert ball.location.y == pytest.approx(4.5)
        assert ball.rotation == pytest.approx(math.pi / 2)

    def test_corner(self):
        """A corner hit applies both mirrors."""
        ball = make_ball(2.0, 2.0, -3 * math.pi / 4)
        check_wall_collision(ball, 384, 512)
        assert ball.location == Vector2D(x=4.5, y=4.5)
        assert math.cos(ball.rotation) > 0
        assert math.sin(ball.rotation) > 0

    def test_bottom_kills_ball(self):
        """Touching the bottom edge marks the ball Dead."""
        ball = make_ball(100.0, 510.0, math.pi / 2)
        assert check_wall_collision(ball, 384, 512)
        assert ball.state == SpriteState.DEAD

    def test_inside_board(self):
        """No wall contact leaves the ball alone."""
        ball = make_ball(100.0, 100.0, 0.3)
        assert not check_wall_collision(ball, 384, 512)
        assert ball.rotation == 0.3


class TestBrickOverlap:
    """Test ball/brick overlap and reflection."""

    def test_overlap(self):
        """Touching squares overlap."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        assert check_brick_collision(make_ball(24.0, 76.5, 0.0), brick)
        assert not check_brick_collision(make_ball(24.0, 77.0, 0.0), brick)

    def test_dead_brick_never_overlaps(self):
        """Dead bricks are ignored."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        brick.state = SpriteState.DEAD
        assert not check_brick_collision(make_ball(24.0, 60.0, 0.0), brick)

    def test_reflect_from_below(self):
        """Coming through the bottom face flips the vertical direction."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        ball = make_ball(24.0, 75.0, -math.pi / 3, safe=(24.0, 80.0))
        assert get_reflected_rotation(ball, brick) == pytest.approx(math.pi / 3)

    def test_reflect_from_side(self):
        """Coming through a side face flips the horizontal direction."""
        brick = Brick(BrickType.REGULAR, 48.0, 48.0)
        ball = make_ball(45.0, 60.0, 0.0, safe=(40.0, 60.0))
        assert get_reflected_rotation(ball, brick) == pytest.approx(math.pi)


class TestResolveBrickCollisions:
    """Test the per-ball fold over all bricks."""

    def test_hit_regular_brick(self):
        """A hit destroys the brick, scores and bounces the ball."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        ball = make_ball(24.0, 76.0, -math.pi / 2, safe=(24.0, 80.0))

        result = resolve_brick_collisions(ball, [brick])

        assert result.bounced
        assert result.points == 100
        assert result.destroyed == [brick]
        assert ball.rotation == pytest.approx(math.pi / 2)

    def test_ball_placed_in_brick_row_bounces_vertically(self):
        """A ball placed inside the brick row still flips its vertical motion."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        ball = Ball(Vector2D(x=24.0, y=52.0), speed=200.0, radius=4.5)
        ball.rotation = -math.pi / 2
        ball.update(0.0, 0.02)

        result = resolve_brick_collisions(ball, [brick])

        assert result.points == 100
        assert brick.state == SpriteState.DEAD
        assert math.sin(ball.rotation) > 0
        assert ball.rotation == pytest.approx(math.pi / 2)

    def test_released_bonus_reported(self):
        """Destroying a brick reports its released bonus."""
        bonus = Bonus(BonusType.SLOW_MOTION, 4.0, 52.0)
        brick = Brick(BrickType.REGULAR, 0.0, 48.0, bonus)
        ball = make_ball(24.0, 76.0, -math.pi / 2, safe=(24.0, 80.0))

        result = resolve_brick_collisions(ball, [brick])

        assert result.released_bonuses == [bonus]
        assert bonus.state == SpriteState.ALIVE

    def test_double_hit_downgrade(self):
        """A DoubleHit brick is stunned but the ball still bounces."""
        brick = Brick(BrickType.DOUBLE_HIT, 0.0, 48.0)
        ball = make_ball(24.0, 76.0, -math.pi / 2, safe=(24.0, 80.0))

        result = resolve_brick_collisions(ball, [brick])

        assert result.bounced
        assert result.points == 0
        assert result.destroyed == []
        assert brick.state == SpriteState.STUNNED
        assert brick.type == BrickType.REGULAR

    def test_stunned_brick_skipped_while_overlapping(self):
        """A stunned brick cannot be hit again while the ball is inside."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        brick.state = SpriteState.STUNNED
        ball = make_ball(24.0, 70.0, math.pi / 2)

        result = resolve_brick_collisions(ball, [brick])

        assert not result.bounced
        assert brick.state == SpriteState.STUNNED
        assert ball.last_safe_location == Vector2D(x=24.0, y=70.0)

    def test_stunned_brick_recovers(self):
        """A stunned brick the ball has left becomes Alive again."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        brick.state = SpriteState.STUNNED
        ball = make_ball(24.0, 150.0, math.pi / 2)

        resolve_brick_collisions(ball, [brick])

        assert brick.state == SpriteState.ALIVE

    def test_two_bricks_last_rotation_wins(self):
        """Overlapping two bricks scores both and bounces once."""
        left = Brick(BrickType.REGULAR, 0.0, 48.0)
        right = Brick(BrickType.REGULAR, 48.0, 48.0)
        ball = make_ball(48.0, 76.0, -math.pi / 2, safe=(48.0, 80.0))

        result = resolve_brick_collisions(ball, [left, right])

        assert result.points == 200
        assert result.destroyed == [left, right]
        assert ball.rotation == pytest.approx(math.pi / 2)

    def test_no_hit_updates_last_safe(self):
        """Without a hit the current location becomes the safe location."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        ball = make_ball(200.0, 200.0, 0.5, safe=(0.0, 0.0))

        result = resolve_brick_collisions(ball, [brick])

        assert not result.bounced
        assert ball.rotation == 0.5
        assert ball.last_safe_location == Vector2D(x=200.0, y=200.0)

    def test_hit_keeps_last_safe(self):
        """A bounce keeps the previous safe location."""
        brick = Brick(BrickType.REGULAR, 0.0, 48.0)
        ball = make_ball(24.0, 76.0, -math.pi / 2, safe=(24.0, 80.0))

        resolve_brick_collisions(ball, [brick])

        assert ball.last_safe_location == Vector2D(x=24.0, y=80.0)


class TestBonusCollision:
    """Test bonus vs paddle overlap."""

    def test_overlap(self):
        """A bonus touching the paddle body is caught."""
        paddle = Paddle()
        assert check_bonus_collision(Bonus(BonusType.SUPER_SIZE, 172.0, 430.0), paddle)

    def test_no_overlap(self):
        """A bonus away from the paddle is not caught."""
        paddle = Paddle()
        assert not check_bonus_collision(Bonus(BonusType.SUPER_SIZE, 10.0, 430.0), paddle)
