"""StartUpController: places the ball and paddles, then starts play.

Setting the play state to True is what starts the game loop; the view
reacts to it by scheduling the ball controller.
"""

from __future__ import annotations

import logging

from model import ModelLocator
from config import BALL_SIZE, PADDLE_HEIGHT, PADDLE_WIDTH

logger = logging.getLogger(__name__)


class StartUpController:
    def __init__(self, model_locator: ModelLocator) -> None:
        self.model_locator = model_locator

    def execute(self) -> None:
        stage = self.model_locator.stage_model

        ball = self.model_locator.ball_model
        ball.set_x((stage.width - BALL_SIZE) // 2)
        ball.set_y((stage.height - BALL_SIZE) // 2)

        player1 = self.model_locator.player1_model
        player1.set_x(0)
        player1.set_y((stage.height - PADDLE_HEIGHT) // 2)

        player2 = self.model_locator.player2_model
        player2.set_x(stage.width - PADDLE_WIDTH)
        player2.set_y((stage.height - PADDLE_HEIGHT) // 2)

        logger.info("Game set up on a %dx%d stage", stage.width, stage.height)
        self.model_locator.play_state_model.set_state(True)


__all__ = ["StartUpController"]
