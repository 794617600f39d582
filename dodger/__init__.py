"""Starfield Dodge - avoid the wandering enemy square."""

from .game import Game

__all__ = ["Game"]
