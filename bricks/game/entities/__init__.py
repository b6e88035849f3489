"""Bricks game entities."""

from .sprite import Sprite
from .ball import Ball
from .paddle import Paddle, LEFT_WEDGE_ANGLE, RIGHT_WEDGE_ANGLE, WEDGE_RADIUS_FACTOR
from .bonus import Bonus
from .brick import Brick

__all__ = [
    'Sprite',
    'Ball',
    'Paddle', 'LEFT_WEDGE_ANGLE', 'RIGHT_WEDGE_ANGLE', 'WEDGE_RADIUS_FACTOR',
    'Bonus',
    'Brick',
]
