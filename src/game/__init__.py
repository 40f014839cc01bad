from .pong import Pong

__all__ = ["Pong"]
