"""OpenGL-backed drawing surface for the pygame window.

Rectangles are queued by fill_rect() and uploaded as one interleaved vertex
buffer ([x, y, r, g, b] per vertex, two triangles per rectangle) when the
frame is presented. The projection maps stage units 1:1 onto pixels with the
origin in the top-left corner, matching the models' coordinates.
"""

from __future__ import annotations

import ctypes
from typing import List, Sequence, Tuple

import numpy as np
import pygame
from OpenGL.GL import (
    glGenBuffers,
    glBindBuffer,
    glBufferData,
    glClear,
    glClearColor,
    glDisable,
    glEnableClientState,
    glDisableClientState,
    glVertexPointer,
    glColorPointer,
    glDrawArrays,
    glMatrixMode,
    glLoadIdentity,
    glOrtho,
    GL_ARRAY_BUFFER,
    GL_STREAM_DRAW,
    GL_FLOAT,
    GL_TRIANGLES,
    GL_VERTEX_ARRAY,
    GL_COLOR_ARRAY,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_PROJECTION,
    GL_MODELVIEW,
)

from config import BACKGROUND_COLOR

# x, y, r, g, b
FLOATS_PER_VERTEX = 5
VERTICES_PER_RECT = 6

Rect = Tuple[float, float, float, float, Tuple[float, float, float]]


def hex_to_rgb(color: str) -> Tuple[float, float, float]:
    """Convert a '#RRGGBB' string into normalized (r, g, b) floats."""
    c = pygame.Color(color)
    return (c.r / 255.0, c.g / 255.0, c.b / 255.0)


def build_quad_vertices(rects: Sequence[Rect]) -> np.ndarray:
    """Return a (len(rects) * 6, 5) float32 array of triangle vertices."""
    data = np.zeros((len(rects) * VERTICES_PER_RECT, FLOATS_PER_VERTEX), dtype=np.float32)
    for i, (x, y, w, h, rgb) in enumerate(rects):
        x2 = x + w
        y2 = y + h
        base = i * VERTICES_PER_RECT
        # Two triangles: top-left, top-right, bottom-right / top-left, bottom-right, bottom-left
        data[base : base + VERTICES_PER_RECT, 0:2] = (
            (x, y),
            (x2, y),
            (x2, y2),
            (x, y),
            (x2, y2),
            (x, y2),
        )
        data[base : base + VERTICES_PER_RECT, 2:5] = rgb
    return data


class GLSurface:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._rects: List[Rect] = []
        self._vbo = None

    def setup(self) -> None:  # pragma: no cover - visual
        """Configure 2D GL state. Needs a current OpenGL context."""
        glDisable(GL_DEPTH_TEST)
        glClearColor(*hex_to_rgb(BACKGROUND_COLOR), 1.0)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        self._vbo = glGenBuffers(1)

    # ------------------------------------------------------------------
    def clear(self) -> None:
        self._rects.clear()

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self._rects.append((x, y, w, h, hex_to_rgb(color)))

    @property
    def queued(self) -> int:
        return len(self._rects)

    # ------------------------------------------------------------------
    def present(self) -> None:  # pragma: no cover - visual
        # The queue is kept so the same scene is drawn every frame until the
        # next clear().
        glClear(GL_COLOR_BUFFER_BIT)
        if not self._rects:
            return
        if self._vbo is None:
            self.setup()

        data = build_quad_vertices(self._rects)
        stride = FLOATS_PER_VERTEX * 4  # bytes per vertex

        glBindBuffer(GL_ARRAY_BUFFER, self._vbo)
        glBufferData(GL_ARRAY_BUFFER, data.nbytes, data, GL_STREAM_DRAW)

        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(2, GL_FLOAT, stride, None)
        glEnableClientState(GL_COLOR_ARRAY)
        glColorPointer(3, GL_FLOAT, stride, ctypes.c_void_p(2 * 4))

        glDrawArrays(GL_TRIANGLES, 0, len(data))

        glDisableClientState(GL_COLOR_ARRAY)
        glDisableClientState(GL_VERTEX_ARRAY)
        glBindBuffer(GL_ARRAY_BUFFER, 0)


__all__ = ["GLSurface", "build_quad_vertices", "hex_to_rgb"]
