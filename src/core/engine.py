"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window and GL context, runs the main loop.
- Scene: owns game state, input handling and drawing (the Pong scene).

The engine only pumps events, advances the scene once per frame and flips
the display; all game timing lives in the scene's scheduler.
"""

from __future__ import annotations

import logging
from typing import Callable

import pygame

from core.scene import Scene
from config import CAPTION, FPS, FULLSCREEN, HEIGHT, VSYNC, WIDTH

logger = logging.getLogger(__name__)

SceneFactory = Callable[[int, int], Scene]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        scene_factory: SceneFactory,
        width: int = WIDTH,
        height: int = HEIGHT,
    ):
        pygame.init()
        pygame.display.set_caption(CAPTION)
        self.width = width
        self.height = height
        # Build flags once and pass an explicit vsync value. Some older
        # pygame builds don't accept the vsync kwarg, so fall back to the
        # older call signature.
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((width, height), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            logger.warning("vsync unavailable, opening window without it")
            pygame.display.set_mode((width, height), flags)
        self.clock = pygame.time.Clock()

        # Active scene (owns models, view and input)
        self.scene: Scene = scene_factory(width, height)
        logger.info("Window opened at %dx%d", width, height)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            # Forward events to the active scene
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float):
        # Scene owns all gameplay updates
        self.scene.update(dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.scene.render()
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            running = self.handle_events()
            if not running:
                break
            self.update(dt)
            self.render()
        self.scene.stop()
        logger.info("Shutting down")
        pygame.quit()

    # ------------------------------------------------------------------
