"""Level loader for the Bricks game.

Levels live in one plain-text catalog. Each level is a header line with
its number followed by 8 rows of 16 characters: for each of the 8
columns, one brick character and one bonus character.

    1
    R_R_R_R_R_R_R_R_
    D3D_D_D4D_D_D_D5
    ...

Brick characters (case-insensitive): R = Regular, D = DoubleHit,
anything else = empty cell. Bonus characters: 3 = ThreeBalls,
4 = SuperSize, 5 = SlowMotion, 6 = BadPoints, anything else = none.

Requests beyond the catalog wrap around, so play never runs out of
levels. Read failures and missing levels are logged and produce an
empty level; malformed rows degrade to empty cells.
"""

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from bricks.config import (
    BONUS_INSET, BRICK_SIZE, GRID_OFFSET_Y, LEVEL_COLS, LEVEL_ROWS, LEVELS_FILE,
)
from bricks.logging import get_logger
from bricks.models import BonusType, BrickType

from .entities.bonus import Bonus
from .entities.brick import Brick

log = get_logger('level_loader')

BRICK_CHARS: Dict[str, BrickType] = {
    'R': BrickType.REGULAR,
    'D': BrickType.DOUBLE_HIT,
}

BONUS_CHARS: Dict[str, BonusType] = {
    '3': BonusType.THREE_BALLS,
    '4': BonusType.SUPER_SIZE,
    '5': BonusType.SLOW_MOTION,
    '6': BonusType.BAD_POINTS,
}

ROW_LENGTH = LEVEL_COLS * 2


class LevelNotFoundError(LookupError):
    """Raised in strict mode when the requested level is not in the catalog."""
    pass


@dataclass
class LevelBlock:
    """One level of the catalog: its header number and raw rows."""
    number: int
    rows: List[str] = field(default_factory=list)


def parse_brick_type(char: str) -> BrickType:
    """Map a brick character to its type (case-insensitive)."""
    return BRICK_CHARS.get(char.upper(), BrickType.NONE)


def parse_bonus_type(char: str) -> BonusType:
    """Map a bonus character to its type (case-sensitive digits)."""
    return BONUS_CHARS.get(char, BonusType.NONE)


def _is_header(line: str) -> bool:
    stripped = line.strip()
    return stripped.isdigit() and len(stripped) < ROW_LENGTH


def parse_catalog(text: str) -> List[LevelBlock]:
    """Split catalog text into level blocks.

    A block starts at a header line and takes the LEVEL_ROWS lines that
    follow as rows, whatever they hold, so a short all-digit row inside
    a block is read as a (malformed) row rather than a new header. Lines
    between a full block and the next header are ignored.

    Args:
        text: Whole catalog text

    Returns:
        Level blocks in file order
    """
    blocks: List[LevelBlock] = []
    current: Optional[LevelBlock] = None

    for line in text.splitlines():
        if current is not None and len(current.rows) < LEVEL_ROWS:
            current.rows.append(line)
            continue

        if _is_header(line):
            current = LevelBlock(number=int(line.strip()))
            blocks.append(current)

    return blocks


def parse_level(rows: List[str], rng: Optional[random.Random] = None) -> List[Brick]:
    """Build bricks (with attached bonuses) from level rows.

    Missing rows, short rows and unknown characters leave cells empty.

    Args:
        rows: Up to LEVEL_ROWS strings of ROW_LENGTH characters
        rng: Random source for brick colours

    Returns:
        Bricks in row-major order
    """
    brick_width, brick_height = BRICK_SIZE
    bricks: List[Brick] = []

    for row, line in enumerate(rows[:LEVEL_ROWS]):
        for col in range(LEVEL_COLS):
            brick_char = line[col * 2] if col * 2 < len(line) else ''
            bonus_char = line[col * 2 + 1] if col * 2 + 1 < len(line) else ''

            brick_type = parse_brick_type(brick_char)
            if brick_type == BrickType.NONE:
                continue

            x = col * brick_width
            y = GRID_OFFSET_Y + row * brick_height

            bonus = None
            bonus_type = parse_bonus_type(bonus_char)
            if bonus_type != BonusType.NONE:
                bonus = Bonus(bonus_type, x + BONUS_INSET, y + BONUS_INSET)

            bricks.append(Brick(brick_type, x, y, bonus, rng))

    return bricks


class LevelLoader:
    """Loads levels from a text catalog, wrapping past the last level.

    The catalog is read on first use and kept for the loader's lifetime.
    """

    def __init__(self, path: Optional[Path] = None, rng: Optional[random.Random] = None):
        """Initialize loader.

        Args:
            path: Catalog file, the packaged levels.txt by default
            rng: Random source for brick colours
        """
        self._path = Path(path) if path is not None else LEVELS_FILE
        self._rng = rng if rng is not None else random.Random()
        self._blocks: Optional[List[LevelBlock]] = None

    @classmethod
    def from_text(cls, text: str, rng: Optional[random.Random] = None) -> 'LevelLoader':
        """Create a loader over an in-memory catalog."""
        loader = cls(rng=rng)
        loader._blocks = parse_catalog(text)
        return loader

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_catalog(self) -> Optional[List[LevelBlock]]:
        """Read and cache the catalog; None if it cannot be read."""
        if self._blocks is not None:
            return self._blocks

        try:
            text = self._path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            log.error("Cannot read level catalog %s: %s", self._path, e)
            return None

        self._blocks = parse_catalog(text)
        log.debug("Read %d levels from %s", len(self._blocks), self._path)
        return self._blocks

    @property
    def level_count(self) -> int:
        """Number of level headers in the catalog (0 if unreadable)."""
        blocks = self._ensure_catalog()
        return len(blocks) if blocks else 0

    def resolve_level(self, level_number: int) -> int:
        """Wrap a requested level number into the catalog range.

        Level L maps to ((L - 1) mod N) + 1 for a catalog of N levels.
        Returns level_number unchanged when the catalog is empty.
        """
        count = self.level_count
        if count == 0:
            return level_number
        return ((level_number - 1) % count) + 1

    def get_level_rows(self, level_number: int, strict: bool = False) -> List[str]:
        """Raw rows of a (wrapped) level.

        Args:
            level_number: Requested level, 1-based
            strict: Raise instead of returning [] when the level is missing

        Returns:
            Row strings of the level, [] if unavailable

        Raises:
            LevelNotFoundError: In strict mode, if the level is missing
        """
        blocks = self._ensure_catalog()
        resolved = self.resolve_level(level_number)

        if blocks:
            for block in blocks:
                if block.number == resolved:
                    return list(block.rows)

        if strict:
            raise LevelNotFoundError(f"Level {resolved} not found in {self._path}")
        log.warning("Level %d (requested %d) not found in catalog", resolved, level_number)
        return []

    def load_level(self, level_number: int) -> List[Brick]:
        """Build the bricks of a level.

        Never raises: an unreadable catalog or a missing level gives an
        empty list, which the game treats as an instantly completed level.

        Args:
            level_number: Requested level, 1-based

        Returns:
            Fresh Brick instances for the level
        """
        rows = self.get_level_rows(level_number)
        bricks = parse_level(rows, self._rng)
        log.info("Loaded level %d: %d bricks", self.resolve_level(level_number), len(bricks))
        return bricks
