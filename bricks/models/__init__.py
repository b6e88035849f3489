"""
Data models for the Bricks game.

- Primitives: geometric value types (Vector2D, Size, Rectangle)
- Enums: game state and entity type enumerations

Usage:
    >>> from bricks.models import Vector2D, SpriteState
"""

from .primitives import (
    Vector2D,
    Size,
    Rectangle,
)
from .enums import (
    GameState,
    SpriteState,
    BrickType,
    BonusType,
    PaddleResize,
)

__all__ = [
    'Vector2D',
    'Size',
    'Rectangle',
    'GameState',
    'SpriteState',
    'BrickType',
    'BonusType',
    'PaddleResize',
]
