"""Window bootstrap and frame loop."""

import argparse
import logging
import random
import sys
import time

import pygame

from .game import Game
from .settings import FPS, HEIGHT, WIDTH, WINDOW_TITLE

logger = logging.getLogger(__name__)


def setup_logging(level="INFO"):
    """Configure stdout logging unless something already did."""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )


def seed_from_time():
    return int(time.time()) & 0xFFFFFFFF


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=WINDOW_TITLE)
    parser.add_argument("--seed", type=int, default=None, help="random seed (default: current time)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser.parse_args(argv)


def run(game):
    pygame.init()
    try:
        screen = pygame.display.set_mode(game.layout(WIDTH, HEIGHT), pygame.SCALED)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        running = True
        while running:
            clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break

            keys = pygame.key.get_pressed()
            game.update(keys)
            game.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    seed = args.seed if args.seed is not None else seed_from_time()
    logger.info("Starting with seed %d", seed)
    game = Game(random.Random(seed))

    try:
        run(game)
    except pygame.error:
        logger.exception("Fatal error in frame loop")
        return 1
    logger.info("Exited in state %s", game.state)
    return 0
