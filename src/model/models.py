"""Game state models.

Positions are top-left corners in stage units. Mutators assign then publish
one event each; writing the attributes directly skips notification, which is
only done for the ball speeds (the next position update redraws anyway).
"""

from __future__ import annotations

from core.observable import Observable, PositionChanged, StateChanged
from config import BALL_SPEED


class PositionModel(Observable):
    def __init__(self, x: float = 0, y: float = 0) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def set_x(self, value: float) -> None:
        self.x = value
        self.publish(PositionChanged("x", self.x))

    def set_y(self, value: float) -> None:
        self.y = value
        self.publish(PositionChanged("y", self.y))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r})"


class PlayerModel(PositionModel):
    """A paddle's position."""


class BallModel(PositionModel):
    """The ball's position plus its per-tick step on each axis."""

    def __init__(
        self,
        x: float = 0,
        y: float = 0,
        h_speed: int = BALL_SPEED,
        v_speed: int = BALL_SPEED,
    ) -> None:
        super().__init__(x, y)
        self.h_speed = h_speed
        self.v_speed = v_speed


class StageModel:
    """Playing field dimensions, set once at startup."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height


class PlayStateModel(Observable):
    def __init__(self) -> None:
        super().__init__()
        self.state = False

    def set_state(self, value: bool) -> None:
        self.state = value
        self.publish(StateChanged(self.state))


__all__ = [
    "BallModel",
    "PlayStateModel",
    "PlayerModel",
    "PositionModel",
    "StageModel",
]
