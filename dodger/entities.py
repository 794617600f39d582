import logging
from dataclasses import dataclass

import pygame

from .settings import (
    COLORS,
    ENEMY_START,
    HEIGHT,
    MAX_X,
    MAX_Y,
    MOVE_LIMIT_RANGE,
    PLAYER_LIVES,
    PLAYER_START,
    PLAYER_STEP,
    RETARGET_VELOCITY_RANGE,
    SPRITE_SIZE,
    STAR_COUNT,
    STAR_SIZE,
    WALL_VELOCITY_RANGE,
    WIDTH,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Star:
    """Decorative background point; no collision."""

    x: float
    y: float

    def draw(self, surface):
        pygame.draw.rect(surface, COLORS["star"], pygame.Rect(self.x, self.y, STAR_SIZE, STAR_SIZE))


def init_stars(rng, count=STAR_COUNT):
    return [Star(float(rng.randrange(WIDTH)), float(rng.randrange(HEIGHT))) for _ in range(count)]


@dataclass
class Player:
    x: float = float(PLAYER_START[0])
    y: float = float(PLAYER_START[1])
    lives: int = PLAYER_LIVES

    def update(self, keys):
        """Move one step per held arrow key, refusing moves that leave the field.

        ``keys`` is indexed by pygame key constants, e.g. the result of
        ``pygame.key.get_pressed()``.
        """
        if keys[pygame.K_UP] and self.y - PLAYER_STEP >= 0:
            self.y -= PLAYER_STEP
        if keys[pygame.K_DOWN] and self.y + PLAYER_STEP <= MAX_Y:
            self.y += PLAYER_STEP
        if keys[pygame.K_LEFT] and self.x - PLAYER_STEP >= 0:
            self.x -= PLAYER_STEP
        if keys[pygame.K_RIGHT] and self.x + PLAYER_STEP <= MAX_X:
            self.x += PLAYER_STEP

    def check_collision(self, enemy) -> bool:
        return (
            self.x < enemy.x + SPRITE_SIZE
            and self.x + SPRITE_SIZE > enemy.x
            and self.y < enemy.y + SPRITE_SIZE
            and self.y + SPRITE_SIZE > enemy.y
        )

    def draw(self, surface):
        pygame.draw.rect(surface, COLORS["player"], pygame.Rect(self.x, self.y, SPRITE_SIZE, SPRITE_SIZE))


@dataclass
class Enemy:
    """Wanders in straight segments of random length and direction."""

    x: float = float(ENEMY_START[0])
    y: float = float(ENEMY_START[1])
    vx: float = 0.0
    vy: float = 0.0
    move_counter: int = 0
    move_limit: int = 0

    def update(self, rng, game_over=False):
        if game_over:
            return

        if self.move_counter <= self.move_limit:
            self.x += self.vx
            self.y += self.vy
            self.move_counter += 1
        else:
            self.vx = rng.uniform(*RETARGET_VELOCITY_RANGE)
            self.vy = rng.uniform(*RETARGET_VELOCITY_RANGE)
            self.move_counter = 0
            self.move_limit = rng.randint(*MOVE_LIMIT_RANGE)
            logger.debug(
                "Enemy retarget: v=(%.2f, %.2f) for %d frames", self.vx, self.vy, self.move_limit
            )

        # Wall contact picks a fresh velocity instead of reflecting
        if self.x < 0:
            self.x = 0.0
            self.vx = rng.uniform(*WALL_VELOCITY_RANGE)
        elif self.x > MAX_X:
            self.x = float(MAX_X)
            self.vx = rng.uniform(*WALL_VELOCITY_RANGE)
        if self.y < 0:
            self.y = 0.0
            self.vy = rng.uniform(*WALL_VELOCITY_RANGE)
        elif self.y > MAX_Y:
            self.y = float(MAX_Y)
            self.vy = rng.uniform(*WALL_VELOCITY_RANGE)

    def relocate(self, rng):
        # Full screen rectangle, not adjusted for sprite size
        self.x = rng.random() * WIDTH
        self.y = rng.random() * HEIGHT

    def draw(self, surface):
        pygame.draw.rect(surface, COLORS["enemy"], pygame.Rect(self.x, self.y, SPRITE_SIZE, SPRITE_SIZE))
