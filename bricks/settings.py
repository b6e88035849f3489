"""
Game settings - YAML configuration loading with Pydantic validation.

GameSettings collects the tunable values of one play session. Every
field defaults to the matching constant in bricks.config, so an empty
settings file (or none at all) gives the standard game.

Examples:
    >>> settings = load_settings(Path("bricks.yaml"))
    >>> settings.lives
    3
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from bricks.config import (
    BALL_RADIUS, BALL_SPEED, BOARD_HEIGHT, BOARD_WIDTH, BONUS_SPEED,
    PADDLE_SPEED, SLOW_MOTION_DURATION, STARTING_LIVES,
)


class GameSettings(BaseModel):
    """
    Tunable values for a play session.

    Sizes and speeds must be positive; lives and the starting level
    start at 1.
    """
    model_config = {"frozen": True}

    board_width: float = Field(
        default=BOARD_WIDTH,
        description="Board width in pixels",
        gt=0.0
    )
    board_height: float = Field(
        default=BOARD_HEIGHT,
        description="Board height in pixels",
        gt=0.0
    )
    paddle_speed: float = Field(
        default=PADDLE_SPEED,
        description="Paddle speed in pixels/second",
        gt=0.0
    )
    ball_speed: float = Field(
        default=BALL_SPEED,
        description="Ball speed in pixels/second",
        gt=0.0
    )
    bonus_speed: float = Field(
        default=BONUS_SPEED,
        description="Bonus fall speed in pixels/second",
        gt=0.0
    )
    ball_radius: float = Field(
        default=BALL_RADIUS,
        description="Ball radius in pixels",
        gt=0.0
    )
    lives: int = Field(
        default=STARTING_LIVES,
        description="Life slots at the start of a session",
        ge=1
    )
    slow_motion_duration: float = Field(
        default=SLOW_MOTION_DURATION,
        description="Seconds the SlowMotion bonus stays active",
        gt=0.0
    )
    levels_path: Optional[Path] = Field(
        default=None,
        description="Level catalog file, the packaged catalog when unset"
    )
    start_level: int = Field(
        default=1,
        description="Level played first (1-based)",
        ge=1
    )

    @field_validator("levels_path")
    @classmethod
    def validate_levels_path(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand ~ in a user-supplied catalog path."""
        if v is None:
            return v
        return v.expanduser()


def load_settings(path: Path) -> GameSettings:
    """Load and validate game settings from a YAML file.

    Args:
        path: YAML file with any subset of the GameSettings fields

    Returns:
        Validated GameSettings instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the YAML syntax is malformed
        ValueError: If the values fail validation
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(
            f"Failed to parse YAML file '{path}': {e}"
        )

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file '{path}' must contain a mapping")

    try:
        return GameSettings(**data)
    except ValidationError as e:
        raise ValueError(
            f"Invalid game settings in '{path}':\n{e}"
        ) from e
