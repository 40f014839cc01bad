from .observable import Listener, Observable, PositionChanged, StateChanged
from .scheduler import Scheduler

__all__ = [
    "Listener",
    "Observable",
    "PositionChanged",
    "Scheduler",
    "StateChanged",
]
