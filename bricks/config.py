"""Configuration for the Bricks game.

Contains board dimensions, physics constants, scoring and colour
definitions. Numeric gameplay values can be overridden from the
environment or from a .env file next to this module, using the
BRICKS_ prefix (e.g. BRICKS_BALL_SPEED=250).
"""

import os
from pathlib import Path
from typing import Dict, Tuple

from dotenv import load_dotenv

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(f'BRICKS_{key}', str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(f'BRICKS_{key}', str(default)))


# Board dimensions
BOARD_WIDTH: int = _get_int('BOARD_WIDTH', 384)
BOARD_HEIGHT: int = _get_int('BOARD_HEIGHT', 512)

# Physics constants (pixels/second)
PADDLE_SPEED: float = _get_float('PADDLE_SPEED', 350.0)
BALL_SPEED: float = _get_float('BALL_SPEED', 200.0)
BONUS_SPEED: float = _get_float('BONUS_SPEED', 150.0)
BALL_RADIUS: float = _get_float('BALL_RADIUS', 4.5)

# Entity sizes (width, height)
PADDLE_NORMAL_SIZE: Tuple[float, float] = (60.0, 20.0)
PADDLE_SUPER_SIZE: Tuple[float, float] = (90.0, 20.0)
BRICK_SIZE: Tuple[float, float] = (48.0, 24.0)
BONUS_SIZE: Tuple[float, float] = (40.0, 16.0)
LIFE_SIZE: Tuple[float, float] = (48.0, 24.0)

# Paddle rests this far above the board bottom
PADDLE_BOTTOM_OFFSET: float = 80.0

# Level grid
LEVEL_ROWS: int = 8
LEVEL_COLS: int = 8
GRID_OFFSET_Y: float = 48.0
BONUS_INSET: float = 4.0

# Game rules
BALL_POOL_SIZE: int = 3
STARTING_LIVES: int = _get_int('STARTING_LIVES', 3)
SLOW_MOTION_DURATION: float = _get_float('SLOW_MOTION_DURATION', 10.0)  # seconds

# Scoring
BRICK_POINTS: int = _get_int('BRICK_POINTS', 100)
BONUS_POINTS: int = _get_int('BONUS_POINTS', 50)
BAD_POINTS_PENALTY: int = _get_int('BAD_POINTS_PENALTY', 150)

# Frame pacing for the standalone host
TARGET_FPS: int = _get_int('TARGET_FPS', 60)

# Level resource
LEVELS_FILE: Path = Path(__file__).parent / 'game' / 'levels' / 'levels.txt'

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 139)         # darkblue
BALL_COLOR: Tuple[int, int, int] = (192, 192, 192)           # silver
PADDLE_COLOR: Tuple[int, int, int] = (255, 182, 193)         # lightpink
PADDLE_WEDGE_COLOR: Tuple[int, int, int] = (224, 255, 255)   # lightcyan
LIFE_COLOR: Tuple[int, int, int] = (255, 182, 193)
HUD_COLOR: Tuple[int, int, int] = (255, 255, 255)
OVERLAY_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 128)

# Bonus colours: (rectangle, triangle)
BONUS_COLORS: Dict[str, Tuple[Tuple[int, int, int], Tuple[int, int, int]]] = {
    'ThreeBalls': ((255, 182, 193), (152, 251, 152)),      # lightpink / palegreen
    'SuperSize': ((100, 149, 237), (176, 196, 222)),       # cornflowerblue / lightsteelblue
    'SlowMotion': ((112, 128, 144), (186, 85, 211)),       # slategray / mediumorchid
    'BadPoints': ((26, 26, 26), (139, 0, 0)),              # near-black / darkred
}
