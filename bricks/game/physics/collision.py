"""Collision detection and resolution for Bricks.

Handles ball-wall, ball-paddle, ball-brick and bonus-paddle contact.
Each resolver mutates the entities it is given and reports what
happened so the session can update score, lives and bonuses.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Literal

from ..entities.ball import Ball
from ..entities.bonus import Bonus
from ..entities.brick import Brick
from ..entities.paddle import LEFT_WEDGE_ANGLE, RIGHT_WEDGE_ANGLE, Paddle
from bricks.models import SpriteState

PaddleSurface = Literal["left_wedge", "right_wedge", "body"]


def check_wall_collision(
    ball: Ball,
    board_width: float,
    board_height: float,
) -> bool:
    """Bounce the ball off the side and top walls.

    Side walls mirror the heading horizontally, the top wall mirrors it
    vertically; the ball is pushed back inside in both cases. A ball
    touching the bottom edge is marked Dead.

    Args:
        ball: Ball to check
        board_width: Board width in pixels
        board_height: Board height in pixels

    Returns:
        True if ball fell below the board
    """
    x, y = ball.location.x, ball.location.y
    radius = ball.radius

    if x + radius >= board_width:
        ball.location = ball.location.with_x(board_width - radius)
        ball.rotation = math.pi - ball.rotation
    elif x - radius <= 0:
        ball.location = ball.location.with_x(radius)
        ball.rotation = math.pi - ball.rotation

    if y - radius <= 0:
        ball.location = ball.location.with_y(radius)
        ball.rotation = -ball.rotation

    if ball.location.y + radius >= board_height:
        ball.state = SpriteState.DEAD
        return True

    return False


def check_paddle_collision(ball: Ball, paddle: Paddle) -> Optional[PaddleSurface]:
    """Bounce the ball off the paddle.

    Left wedge, right wedge and main body are tested in that order and
    the first match wins. Wedges send the ball off at fixed angles, the
    body at an angle depending on the hit point.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        The surface that was hit, or None
    """
    if paddle.bounces_left_wedge(ball):
        ball.location = ball.location.with_y(paddle.left_wedge_surface_y(ball))
        ball.rotation = LEFT_WEDGE_ANGLE
        return "left_wedge"

    if paddle.bounces_right_wedge(ball):
        ball.location = ball.location.with_y(paddle.right_wedge_surface_y(ball))
        ball.rotation = RIGHT_WEDGE_ANGLE
        return "right_wedge"

    if paddle.bounces_main_body(ball):
        ball.location = ball.location.with_y(paddle.location.y - ball.radius)
        ball.rotation = paddle.compute_bounce_angle(ball)
        return "body"

    return None


def check_brick_collision(ball: Ball, brick: Brick) -> bool:
    """Check AABB overlap between the ball's square and a live brick."""
    if brick.state == SpriteState.DEAD:
        return False

    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()
    brick_left, brick_top, brick_right, brick_bottom = brick.get_bounds()

    return not (ball_right < brick_left or ball_left > brick_right or
                ball_bottom < brick_top or ball_top > brick_bottom)


def get_reflected_rotation(ball: Ball, brick: Brick) -> float:
    """Heading after bouncing off brick.

    If the last safe position was above or below the brick the ball came
    through a horizontal face, so the vertical component flips;
    otherwise it came through a side face and the horizontal component
    flips.
    """
    _, brick_top, _, brick_bottom = brick.get_bounds()
    safe_y = ball.last_safe_location.y

    if safe_y < brick_top or safe_y > brick_bottom:
        return -ball.rotation
    return math.pi - ball.rotation


@dataclass
class BrickCollisionResult:
    """Outcome of testing one ball against every brick in a frame."""
    bounced: bool = False
    rotation: Optional[float] = None
    points: int = 0
    destroyed: List[Brick] = field(default_factory=list)
    released_bonuses: List[Bonus] = field(default_factory=list)


def resolve_brick_collisions(ball: Ball, bricks: Iterable[Brick]) -> BrickCollisionResult:
    """Resolve one ball against all bricks.

    Every overlapping, non-stunned brick takes a hit and proposes a new
    heading; the last proposal wins and is applied once after the scan.
    Stunned bricks the ball has left become Alive again. With no hit, the
    ball's position becomes its new last-safe location.

    Args:
        ball: Ball to resolve
        bricks: Bricks of the current level

    Returns:
        BrickCollisionResult describing hits, points and released bonuses
    """
    result = BrickCollisionResult()

    for brick in bricks:
        if brick.state == SpriteState.DEAD:
            continue

        overlapping = check_brick_collision(ball, brick)

        if brick.state == SpriteState.STUNNED:
            if not overlapping:
                brick.state = SpriteState.ALIVE
            continue

        if not overlapping:
            continue

        result.bounced = True
        result.rotation = get_reflected_rotation(ball, brick)
        result.points += brick.hit()

        if brick.state == SpriteState.DEAD:
            result.destroyed.append(brick)
            bonus = brick.release_bonus()
            if bonus is not None:
                result.released_bonuses.append(bonus)

    if result.bounced and result.rotation is not None:
        ball.rotation = result.rotation
    else:
        ball.last_safe_location = ball.location.clone()

    return result


def check_bonus_collision(bonus: Bonus, paddle: Paddle) -> bool:
    """Check overlap between a falling bonus and the paddle body."""
    return bonus.rect.intersects(paddle.rect)
