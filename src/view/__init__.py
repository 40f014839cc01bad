from .renderers import BallView, MapView, PlayerView
from .view import View

__all__ = [
    "BallView",
    "MapView",
    "PlayerView",
    "View",
]
