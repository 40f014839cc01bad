from typing import List, Callable
from dataclasses import dataclass, field

from core.scheduler import Scheduler
from config import TICKS_PER_FRAME

UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    # Recurring game tasks; update() advances them ticks_per_frame times
    scheduler: Scheduler = field(default_factory=Scheduler)
    ticks_per_frame: int = TICKS_PER_FRAME
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float):
        for fn in self.updaters:
            fn(dt)
        self.scheduler.run(self.ticks_per_frame)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    # Called once when the engine shuts down
    def stop(self) -> None:
        pass

    # Scenes own their full render pipeline
    def render(self):  # pragma: no cover - visual
        # By default, do nothing; scenes should override
        pass
