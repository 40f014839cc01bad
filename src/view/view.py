"""View mediator: observes the models and keeps the surface in sync.

Owns the map/paddle/ball renderers and the per-tick controllers. A play
state change starts or stops the recurring ball task on the scheduler; key
events start and stop a recurring paddle task; every other model change
triggers a full redraw.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.drawable import Surface
from core.observable import Listener, ModelEvent, Observable, StateChanged
from core.scheduler import Scheduler
from controller import BallController, KeyDownController, KeyUpController
from model import ModelLocator
from view.renderers import BallView, MapView, PlayerView
from config import KEY_DOWN, KEY_UP

logger = logging.getLogger(__name__)


class View(Listener):
    def __init__(
        self, surface: Surface, model_locator: ModelLocator, scheduler: Scheduler
    ) -> None:
        self.surface = surface
        self.model_locator = model_locator
        self.scheduler = scheduler

        # Renderers
        self.map_view = MapView(surface, surface.width, surface.height)
        self.player1_view = PlayerView(surface)
        self.player2_view = PlayerView(surface)
        self.ball_view = BallView(surface)

        # Controllers
        self.ball_controller = BallController(model_locator)
        self.key_up_controller = KeyUpController(model_locator)
        self.key_down_controller = KeyDownController(model_locator)

        # Task ids for clear_interval()
        self.ball_task_id: Optional[int] = None
        self.key_task_id: Optional[int] = None
        self.keys_enabled = False

        for model in (
            model_locator.play_state_model,
            model_locator.ball_model,
            model_locator.player1_model,
            model_locator.player2_model,
        ):
            model.subscribe(self)

    # ------------------------------------------------------------------
    def draw(self) -> None:
        locator = self.model_locator
        self.surface.clear()
        self.map_view.draw()
        self.player1_view.draw(locator.player1_model.x, locator.player1_model.y)
        self.player2_view.draw(locator.player2_model.x, locator.player2_model.y)
        self.ball_view.draw(locator.ball_model.x, locator.ball_model.y)

    # ------------------------------------------------------------------
    def on_key_down(self, key_code: Optional[int]) -> None:
        if not self.keys_enabled:
            return
        # A new key press replaces whatever key was being repeated
        self.scheduler.clear_interval(self.key_task_id)
        self.key_task_id = None

        if key_code == KEY_UP:
            self.key_task_id = self.scheduler.set_interval(
                self.key_up_controller.execute
            )
        elif key_code == KEY_DOWN:
            self.key_task_id = self.scheduler.set_interval(
                self.key_down_controller.execute
            )
        # Unbound keys (None) only stop the repeat

    def on_key_up(self, key_code: Optional[int]) -> None:
        if not self.keys_enabled:
            return
        self.scheduler.clear_interval(self.key_task_id)
        self.key_task_id = None

    # ------------------------------------------------------------------
    def _start_ball_loop(self) -> None:
        self.keys_enabled = True
        if self.scheduler.is_active(self.ball_task_id):
            logger.debug("Ball loop already running")
            return
        self.ball_task_id = self.scheduler.set_interval(self.ball_controller.execute)
        logger.info("Ball loop started")

    def _stop_ball_loop(self) -> None:
        if self.scheduler.is_active(self.ball_task_id):
            logger.info("Ball loop stopped")
        self.scheduler.clear_interval(self.ball_task_id)
        self.ball_task_id = None

    def on_update(self, source: Observable, event: ModelEvent) -> None:
        if source is self.model_locator.play_state_model:
            if isinstance(event, StateChanged):
                if event.state:
                    self._start_ball_loop()
                else:
                    self._stop_ball_loop()
            return
        self.draw()


__all__ = ["View"]
