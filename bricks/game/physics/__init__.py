"""Bricks physics and collision detection."""

from .collision import (
    BrickCollisionResult,
    check_wall_collision,
    check_paddle_collision,
    check_brick_collision,
    check_bonus_collision,
    get_reflected_rotation,
    resolve_brick_collisions,
)

__all__ = [
    'BrickCollisionResult',
    'check_wall_collision',
    'check_paddle_collision',
    'check_brick_collision',
    'check_bonus_collision',
    'get_reflected_rotation',
    'resolve_brick_collisions',
]
