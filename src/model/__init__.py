from .models import BallModel, PlayerModel, PlayStateModel, PositionModel, StageModel
from .model_locator import ModelLocator

__all__ = [
    "BallModel",
    "ModelLocator",
    "PlayStateModel",
    "PlayerModel",
    "PositionModel",
    "StageModel",
]
