from .startup_controller import StartUpController
from .ball_controller import BallController
from .key_controller import KeyDownController, KeyUpController

__all__ = [
    "BallController",
    "KeyDownController",
    "KeyUpController",
    "StartUpController",
]
