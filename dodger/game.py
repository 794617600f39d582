"""Game controller.

Owns every entity plus the random source, and fixes the per-frame order:
player, enemy, collision, lives bookkeeping. Drawing goes through the
``Drawable`` protocol so the controller never touches pygame.draw itself.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

import pygame

from .drawable import Drawable
from .entities import Enemy, Player, Star, init_stars
from .settings import COLORS, HEIGHT, HUD_FONT, HUD_FONT_SIZE, HUD_POS, WIDTH

logger = logging.getLogger(__name__)

RUNNING = "running"
GAME_OVER = "game_over"


class Game:
    def __init__(
        self,
        rng: random.Random,
        player: Optional[Player] = None,
        enemy: Optional[Enemy] = None,
        stars: Optional[Sequence[Star]] = None,
        font: Optional[pygame.font.Font] = None,
    ):
        self.rng = rng
        self.player = player if player is not None else Player()
        self.enemy = enemy if enemy is not None else Enemy()
        self.stars: List[Star] = list(stars) if stars is not None else init_stars(rng)
        self.game_over = False
        self._font = font

    @property
    def state(self) -> str:
        return GAME_OVER if self.game_over else RUNNING

    @property
    def font(self) -> pygame.font.Font:
        # Created on first draw; pygame.font must be initialised by then
        if self._font is None:
            self._font = pygame.font.SysFont(HUD_FONT, HUD_FONT_SIZE)
        return self._font

    def update(self, keys) -> None:
        if self.game_over:
            return

        self.player.update(keys)
        self.enemy.update(self.rng, self.game_over)

        if self.player.check_collision(self.enemy):
            self.player.lives -= 1
            logger.info("Collision! Lives left: %d", self.player.lives)
            if self.player.lives <= 0:
                self.game_over = True
                logger.info("Game over")
            else:
                self.enemy.relocate(self.rng)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(COLORS["bg"])
        if self.game_over:
            self._draw_text(surface, "GAME OVER!")
            return

        drawables: List[Drawable] = [*self.stars, self.player, self.enemy]
        for item in drawables:
            item.draw(surface)
        self._draw_text(surface, f"Lives: {self.player.lives}")

    def _draw_text(self, surface, line):
        text = self.font.render(line, True, COLORS["ui"])
        surface.blit(text, HUD_POS)

    def layout(self, outside_width: int, outside_height: int):
        return WIDTH, HEIGHT
