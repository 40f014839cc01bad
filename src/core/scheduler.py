"""Recurring task scheduler driven by explicit ticks.

Stands in for a zero-delay interval timer: callers register a callback with
`set_interval()` and get back a task id to cancel it with
`clear_interval()`. Nothing runs on its own; the engine (or a test) calls
`tick()` and every active task runs exactly once per tick.
"""

from __future__ import annotations

import itertools
from typing import Callable, Dict, Optional

TaskFn = Callable[[], None]


class Scheduler:
    def __init__(self) -> None:
        self._tasks: Dict[int, TaskFn] = {}
        self._ids = itertools.count(1)
        self.ticks = 0

    def set_interval(self, callback: TaskFn) -> int:
        task_id = next(self._ids)
        self._tasks[task_id] = callback
        return task_id

    def clear_interval(self, task_id: Optional[int]) -> None:
        """Cancel a task. Unknown, cleared or None ids are ignored."""
        if task_id is None:
            return
        self._tasks.pop(task_id, None)

    def is_active(self, task_id: Optional[int]) -> bool:
        return task_id is not None and task_id in self._tasks

    @property
    def active_count(self) -> int:
        return len(self._tasks)

    def tick(self) -> None:
        """Run each task that is active at the start of this tick once.

        A task cleared by an earlier task in the same tick is skipped; tasks
        added during the tick first run on the next one.
        """
        self.ticks += 1
        for task_id in list(self._tasks):
            callback = self._tasks.get(task_id)
            if callback is not None:
                callback()

    def run(self, ticks: int) -> None:
        for _ in range(ticks):
            self.tick()


__all__ = ["Scheduler", "TaskFn"]
