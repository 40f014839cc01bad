"""Keyboard controllers for paddle 1.

Each execute() is one step of a held key; the view repeats it on the
scheduler for as long as the key stays down.
"""

from __future__ import annotations

from model import ModelLocator
from config import PADDLE_HEIGHT


class KeyUpController:
    def __init__(self, model_locator: ModelLocator) -> None:
        self.model_locator = model_locator

    def execute(self) -> None:
        player1 = self.model_locator.player1_model
        if player1.y > 0:
            player1.set_y(player1.y - 1)


class KeyDownController:
    def __init__(self, model_locator: ModelLocator) -> None:
        self.model_locator = model_locator

    def execute(self) -> None:
        player1 = self.model_locator.player1_model
        stage = self.model_locator.stage_model
        if player1.y < stage.height - PADDLE_HEIGHT:
            player1.set_y(player1.y + 1)


__all__ = ["KeyDownController", "KeyUpController"]
