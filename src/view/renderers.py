"""Stateless draw routines for the map, the paddles and the ball."""

from __future__ import annotations

from core.drawable import Surface
from config import (
    BACKGROUND_COLOR,
    BALL_SIZE,
    FOREGROUND_COLOR,
    PADDLE_HEIGHT,
    PADDLE_WIDTH,
)


class MapView:
    def __init__(self, surface: Surface, width: int, height: int) -> None:
        self.surface = surface
        self.width = width
        self.height = height

    def draw(self) -> None:
        self.surface.fill_rect(0, 0, self.width, self.height, BACKGROUND_COLOR)


class PlayerView:
    def __init__(self, surface: Surface) -> None:
        self.surface = surface

    def draw(self, x: float, y: float) -> None:
        self.surface.fill_rect(x, y, PADDLE_WIDTH, PADDLE_HEIGHT, FOREGROUND_COLOR)


class BallView:
    def __init__(self, surface: Surface) -> None:
        self.surface = surface

    def draw(self, x: float, y: float) -> None:
        self.surface.fill_rect(x, y, BALL_SIZE, BALL_SIZE, FOREGROUND_COLOR)


__all__ = ["BallView", "MapView", "PlayerView"]
