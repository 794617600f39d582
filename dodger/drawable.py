from typing import Protocol

import pygame


class Drawable(Protocol):
    def draw(self, surface: pygame.Surface) -> None: ...
