"""
Bricks enumerations.

These enums define the game states and entity types shared by the
session, the entities and the level loader.
"""

from enum import Enum


class GameState(str, Enum):
    """Top-level session states.

    Attributes:
        INTRO: Waiting for the start key, message overlay shown
        PLAY: Simulation running
        OVER: All lives lost, waiting for the restart key
        HIGH_SCORES, DEMO, FINISH, NEW_SCORE: Reserved, never entered
    """
    INTRO = "Intro"
    HIGH_SCORES = "HighScores"
    DEMO = "Demo"
    PLAY = "Play"
    OVER = "Over"
    FINISH = "Finish"
    NEW_SCORE = "NewScore"


class SpriteState(str, Enum):
    """Entity lifecycle states.

    Meaning is entity-specific: a Stunned brick was just downgraded and
    skips collision until the ball leaves it, a Stunned bonus is touching
    the paddle and waits one more frame before it is consumed.
    """
    ALIVE = "Alive"
    STUNNED = "Stunned"
    DEAD = "Dead"


class BrickType(str, Enum):
    """Brick kinds parsed from level text."""
    NONE = "None"
    REGULAR = "Regular"
    DOUBLE_HIT = "DoubleHit"


class BonusType(str, Enum):
    """Bonus pickups released by destroyed bricks."""
    NONE = "None"
    THREE_BALLS = "ThreeBalls"
    SUPER_SIZE = "SuperSize"
    SLOW_MOTION = "SlowMotion"
    BAD_POINTS = "BadPoints"


class PaddleResize(str, Enum):
    """Paddle resize animation states.

    Grow and Shrink both shrink the paddle back to normal width; from
    there Grow continues as ReGrow up to super width while Shrink stops.
    """
    NONE = "None"
    GROW = "Grow"
    SHRINK = "Shrink"
    REGROW = "ReGrow"
