"""Publish/subscribe base for game models.

Models inherit from `Observable` and call `publish()` from their mutators.
Anything that wants to react to a model implements `Listener.on_update` and
subscribes to that model. Each observable owns its own registry, so two
models never see each other's listeners.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionChanged:
    axis: str  # "x" or "y"
    value: float


@dataclass(frozen=True)
class StateChanged:
    state: bool


ModelEvent = Union[PositionChanged, StateChanged]


class Listener(ABC):
    @abstractmethod
    def on_update(self, source: "Observable", event: ModelEvent) -> None: ...


class Observable:
    def __init__(self) -> None:
        # subscriber identity -> subscriber, kept in registration order
        self._listeners: Dict[int, Listener] = {}

    def subscribe(self, listener: object) -> bool:
        """Register `listener`; returns False if it is not a Listener."""
        if not isinstance(listener, Listener):
            logger.debug(
                "Rejected subscription of %r to %s", listener, type(self).__name__
            )
            return False
        self._listeners[id(listener)] = listener
        return True

    def unsubscribe(self, listener: object) -> bool:
        return self._listeners.pop(id(listener), None) is not None

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def publish(self, event: ModelEvent) -> None:
        # Newest subscriber first
        for listener in reversed(list(self._listeners.values())):
            listener.on_update(self, event)


__all__ = [
    "Listener",
    "ModelEvent",
    "Observable",
    "PositionChanged",
    "StateChanged",
]
