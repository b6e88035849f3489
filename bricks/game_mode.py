"""Bricks - single-screen brick-breaking game session.

BricksGame owns every entity of a play session and advances them once
per frame:

- Intro: message shown, waiting for a Space press
- Play: paddle, balls and falling bonuses move and collide
- Over: all lives lost, waiting for a Space press to restart

Clearing every brick shows a completion message, loads the next level
(wrapping past the end of the catalog) and returns to Intro.
"""

import math
import random
from typing import List, Optional

import pygame

from bricks.config import (
    BACKGROUND_COLOR, BAD_POINTS_PENALTY, BALL_POOL_SIZE, BONUS_POINTS,
)
from bricks.game.entities import Ball, Bonus, Brick, Paddle
from bricks.game.hud import Life, Message, Score
from bricks.game.level_loader import LevelLoader
from bricks.game.physics import (
    check_bonus_collision,
    check_paddle_collision,
    check_wall_collision,
    resolve_brick_collisions,
)
from bricks.input import InputManager, keys
from bricks.logging import get_logger
from bricks.models import BonusType, GameState, SpriteState, Vector2D
from bricks.settings import GameSettings

log = get_logger('game_mode')

LIFE_START_X = 24.0
LIFE_SPACING = 60.0

GET_READY_MESSAGE = "Level {level}\n\n~ Get Ready ~\nPress SPACE to start"
LEVEL_COMPLETE_MESSAGE = "Level {level} Complete!\n\n~ Get Ready ~\nPress SPACE to continue"
GAME_OVER_MESSAGE = "~ Game Over ~\nPress SPACE to restart"


class BricksGame:
    """Top-level game session.

    The host calls update(game_time, dt) then draw(surface) once per
    frame. Input is read from the injected InputManager.
    """

    def __init__(
        self,
        input_manager: InputManager,
        settings: Optional[GameSettings] = None,
        level_loader: Optional[LevelLoader] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the session and load the starting level.

        Args:
            input_manager: Source of key state
            settings: Session settings, defaults from bricks.config
            level_loader: Level catalog, the settings' levels_path by default
            rng: Random source for ball launch angles (and brick colours
                when the default level loader is used)
        """
        self._input = input_manager
        self._settings = settings if settings is not None else GameSettings()
        self._rng = rng if rng is not None else random.Random()
        self._level_loader = (
            level_loader if level_loader is not None
            else LevelLoader(self._settings.levels_path, self._rng)
        )

        self._board_width = self._settings.board_width
        self._board_height = self._settings.board_height
        self._ball_origin = Vector2D(x=self._board_width / 2, y=self._board_height / 2)

        self._state = GameState.INTRO
        self._level = self._settings.start_level
        self._balls: List[Ball] = []
        self._bricks: List[Brick] = []
        self._bonuses: List[Bonus] = []
        self._lives: List[Life] = []
        self._paddle = Paddle(self._board_width, self._board_height, self._settings.paddle_speed)
        self._score = Score()
        self._message = Message(self._board_width, self._board_height)

        self._slow_motion = False
        self._slow_motion_started = 0.0
        self._level_complete = False
        self._space_was_down = False

        self.setup()

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def level(self) -> int:
        return self._level

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def balls(self) -> List[Ball]:
        return self._balls

    @property
    def bricks(self) -> List[Brick]:
        return self._bricks

    @bricks.setter
    def bricks(self, value: List[Brick]) -> None:
        self._bricks = list(value)
        self._level_complete = False

    @property
    def bonuses(self) -> List[Bonus]:
        """Bonuses currently falling (Alive or Stunned)."""
        return self._bonuses

    @property
    def lives(self) -> List[Life]:
        return self._lives

    @property
    def lives_remaining(self) -> int:
        return sum(1 for life in self._lives if life.is_alive)

    @property
    def paddle(self) -> Paddle:
        return self._paddle

    @property
    def score(self) -> int:
        return self._score.points

    @property
    def message(self) -> Message:
        return self._message

    @property
    def is_slow_motion(self) -> bool:
        return self._slow_motion

    def get_score(self) -> int:
        """Get current score."""
        return self._score.points

    # -------------------------------------------------------------------------
    # Session lifecycle
    # -------------------------------------------------------------------------

    def setup(self) -> None:
        """Start a fresh session: full lives, zero score, first level."""
        self._balls = [
            Ball(self._ball_origin, self._settings.ball_speed, self._settings.ball_radius)
            for _ in range(BALL_POOL_SIZE)
        ]
        self._lives = [
            Life(LIFE_START_X + i * LIFE_SPACING) for i in range(self._settings.lives)
        ]
        self._score.points = 0
        self._bonuses = []
        self._slow_motion = False
        self._slow_motion_started = 0.0
        self._paddle.reset()
        self.load_level(self._settings.start_level)

    def load_level(self, level_number: int) -> None:
        """Load a level's bricks and wait in Intro for the player.

        Args:
            level_number: Requested level; the loader wraps it into the catalog
        """
        self._level = level_number
        self._bricks = self._level_loader.load_level(level_number)
        self._level_complete = False
        self._state = GameState.INTRO
        self._message.show(GET_READY_MESSAGE.format(level=level_number))
        self.reset_balls()

    def reset_balls(self) -> None:
        """Recentre the ball pool with only the first ball in play, and
        return the paddle to its rest position."""
        for ball in self._balls:
            ball.reset(self._ball_origin, self._launch_angle(), SpriteState.DEAD)
        if self._balls:
            self._balls[0].state = SpriteState.ALIVE

        self._paddle.reset()

    def _launch_angle(self) -> float:
        # Upward, between 45 and 105 degrees off the +x axis
        return -(math.pi / 4 + self._rng.random() * math.pi / 3)

    # -------------------------------------------------------------------------
    # Frame update
    # -------------------------------------------------------------------------

    def update(self, game_time: float, dt: float) -> None:
        """Advance the session by one frame.

        Args:
            game_time: Seconds since the host loop started
            dt: Elapsed seconds since the previous frame
        """
        self._input.update(dt)

        space_down = self._input.is_key_down(keys.SPACE)
        space_pressed = space_down and not self._space_was_down
        self._space_was_down = space_down

        if self._state == GameState.INTRO and space_pressed:
            self._state = GameState.PLAY
            self._message.hide()
            log.info("Level %d started", self._level)
        elif self._state == GameState.OVER and space_pressed:
            self.setup()
            self._state = GameState.PLAY
            self._message.hide()
            log.info("Session restarted")
            return

        if self._state != GameState.PLAY:
            return

        if self._slow_motion:
            if game_time - self._slow_motion_started > self._settings.slow_motion_duration:
                self._slow_motion = False
                log.debug("Slow motion ended")
            dt /= 2

        self._update_paddle(game_time, dt)

        for ball in self._balls:
            if not ball.is_alive:
                continue
            ball.update(game_time, dt)
            self._check_collisions(ball)

        self._update_bonuses(game_time, dt)

        if not self._level_complete and all(brick.is_dead for brick in self._bricks):
            self._complete_level()

        if all(not life.is_alive for life in self._lives):
            self._state = GameState.OVER
            self._message.show(GAME_OVER_MESSAGE)
            log.info("Game over at level %d with %d points", self._level, self._score.points)

    def _update_paddle(self, game_time: float, dt: float) -> None:
        left = self._input.is_key_down(keys.ARROW_LEFT)
        right = self._input.is_key_down(keys.ARROW_RIGHT)

        if left and not right:
            self._paddle.velocity = Vector2D(x=-self._paddle.speed, y=0.0)
        elif right and not left:
            self._paddle.velocity = Vector2D(x=self._paddle.speed, y=0.0)
        else:
            self._paddle.velocity = Vector2D()

        self._paddle.update(game_time, dt)

    def _check_collisions(self, ball: Ball) -> None:
        """Resolve walls, then paddle, then bricks for one ball."""
        if check_wall_collision(ball, self._board_width, self._board_height):
            self._on_ball_lost()
            return

        check_paddle_collision(ball, self._paddle)

        result = resolve_brick_collisions(ball, self._bricks)
        if result.points:
            self._score.add_points(result.points)
        for bonus in result.released_bonuses:
            bonus.speed = self._settings.bonus_speed
            self._bonuses.append(bonus)

    def _on_ball_lost(self) -> None:
        if any(ball.is_alive for ball in self._balls):
            return

        for life in reversed(self._lives):
            if life.is_alive:
                life.state = SpriteState.DEAD
                log.debug("Life lost, %d remaining", self.lives_remaining)
                self.reset_balls()
                break

    def _update_bonuses(self, game_time: float, dt: float) -> None:
        """Move falling bonuses and resolve the two-frame catch."""
        for bonus in self._bonuses:
            if not bonus.is_falling:
                continue

            bonus.update(game_time, dt)

            if bonus.location.y > self._board_height:
                bonus.state = SpriteState.DEAD
                continue

            if check_bonus_collision(bonus, self._paddle):
                if bonus.state == SpriteState.ALIVE:
                    bonus.state = SpriteState.STUNNED
                else:
                    bonus.state = SpriteState.DEAD
                    self._score.add_points(BONUS_POINTS)
                    self._apply_bonus(bonus.type, game_time)
            elif bonus.state == SpriteState.STUNNED:
                bonus.state = SpriteState.ALIVE

        self._bonuses = [bonus for bonus in self._bonuses if not bonus.is_dead]

    def _apply_bonus(self, bonus_type: BonusType, game_time: float) -> None:
        log.debug("Bonus caught: %s", bonus_type.value)

        if bonus_type == BonusType.THREE_BALLS:
            origin = next(
                (ball.location for ball in self._balls if ball.is_alive),
                self._ball_origin,
            )
            for ball in self._balls:
                if ball.is_dead:
                    ball.reset(origin.clone(), self._launch_angle())
        elif bonus_type == BonusType.SUPER_SIZE:
            self._paddle.trigger_super_size()
        elif bonus_type == BonusType.SLOW_MOTION:
            self._slow_motion = True
            self._slow_motion_started = game_time
        elif bonus_type == BonusType.BAD_POINTS:
            self._score.add_points(-BAD_POINTS_PENALTY)

    def _complete_level(self) -> None:
        completed = self._level
        self._level_complete = True
        log.info("Level %d complete with %d points", completed, self._score.points)

        self._bonuses = []
        self.load_level(completed + 1)

        # Extra life for clearing the level
        for life in reversed(self._lives):
            if not life.is_alive:
                life.state = SpriteState.ALIVE
                break

        self._message.show(LEVEL_COMPLETE_MESSAGE.format(level=completed))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def draw(self, surface: pygame.Surface) -> None:
        """Render the session.

        Args:
            surface: Pygame surface to draw on
        """
        surface.fill(BACKGROUND_COLOR)

        for brick in self._bricks:
            if not brick.is_dead:
                brick.draw(surface)

        for bonus in self._bonuses:
            bonus.draw(surface)

        self._paddle.draw(surface)

        for ball in self._balls:
            if ball.is_alive:
                ball.draw(surface)

        for life in self._lives:
            life.draw(surface)

        self._score.draw(surface)
        self._message.draw(surface)
