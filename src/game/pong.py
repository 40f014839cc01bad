"""Pong scene: wires models, view and start-up controller together.

Creates the ModelLocator sized to the drawing surface, builds the View on
that surface and runs the StartUpController on start(). pygame keyboard
events are translated into the key codes the view understands.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from core.drawable import Surface
from core.scene import Scene
from controller import StartUpController
from model import ModelLocator
from view import View
from config import (
    KEY_DOWN,
    KEY_UP,
    PADDLE_HEIGHT,
    PADDLE_WIDTH,
)

logger = logging.getLogger(__name__)

KEY_CODES = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
}


def to_key_code(key: int) -> Optional[int]:
    """Map a pygame key constant to the view's key code, None if unbound."""
    return KEY_CODES.get(key)


class Pong(Scene):
    def __init__(self, surface: Surface, **kwargs) -> None:
        super().__init__(**kwargs)
        if surface.width < PADDLE_WIDTH or surface.height < PADDLE_HEIGHT:
            raise ValueError(
                f"Stage {surface.width}x{surface.height} is smaller than a "
                f"{PADDLE_WIDTH}x{PADDLE_HEIGHT} paddle"
            )
        self.surface = surface

        # Model
        self.model_locator = ModelLocator()
        self.model_locator.stage_model.width = surface.width
        self.model_locator.stage_model.height = surface.height

        # View
        self.view = View(surface, self.model_locator, self.scheduler)

        # Controller
        self.startup_controller = StartUpController(self.model_locator)

    def start(self) -> None:
        logger.info("Starting Pong")
        self.startup_controller.execute()

    def stop(self) -> None:
        logger.info("Stopping Pong")
        play_state = self.model_locator.play_state_model
        if play_state.state:
            play_state.set_state(False)
        self.view.on_key_up(KEY_UP)

    # ------------------------------------------------------------------
    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN:
            self.view.on_key_down(to_key_code(event.key))
        elif event.type == pygame.KEYUP:
            self.view.on_key_up(to_key_code(event.key))

    def render(self):  # pragma: no cover - visual
        self.surface.present()


__all__ = ["Pong", "to_key_code"]
