"""BallController: one simulation step for the ball and the right paddle.

Moves the ball by its speed, reflects it off the top and bottom edges and
off a paddle that covers it, recenters it on a miss, and lets paddle 2 follow
the ball.
"""

from __future__ import annotations

import logging

from model import ModelLocator, PlayerModel
from config import BALL_SIZE, PADDLE_HEIGHT, PADDLE_HIT_SPAN, PADDLE_WIDTH

logger = logging.getLogger(__name__)


class BallController:
    def __init__(self, model_locator: ModelLocator) -> None:
        self.model_locator = model_locator

    def _covers(self, player: PlayerModel) -> bool:
        y = self.model_locator.ball_model.y
        return player.y <= y <= player.y + PADDLE_HIT_SPAN

    def _recenter(self) -> None:
        stage = self.model_locator.stage_model
        ball = self.model_locator.ball_model
        ball.set_x((stage.width - BALL_SIZE) // 2)
        ball.set_y((stage.height - BALL_SIZE) // 2)

    def execute(self) -> None:
        stage = self.model_locator.stage_model
        ball = self.model_locator.ball_model
        player1 = self.model_locator.player1_model
        player2 = self.model_locator.player2_model

        ball.set_x(ball.x + ball.h_speed)
        ball.set_y(ball.y + ball.v_speed)

        # Top/bottom walls. Overshoot is not corrected.
        if ball.y <= 0 or ball.y >= stage.height - BALL_SIZE:
            ball.v_speed *= -1

        if ball.x > stage.width - BALL_SIZE:
            if self._covers(player2):
                ball.h_speed *= -1
            else:
                logger.debug("Player 2 missed the ball at y=%s", ball.y)
                self._recenter()
        elif ball.x <= PADDLE_WIDTH:
            if self._covers(player1):
                ball.h_speed *= -1
            else:
                logger.debug("Player 1 missed the ball at y=%s", ball.y)
                self._recenter()

        # Paddle 2 mirrors the ball's relative height over its own travel.
        player2.set_y(
            (ball.y / (stage.height - BALL_SIZE))
            * (PADDLE_HEIGHT + stage.height - 2 * PADDLE_HEIGHT)
        )


__all__ = ["BallController"]
